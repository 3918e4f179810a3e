"""
Docker CLI wrapper unit tests.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import pytest
from unittest.mock import patch

from dvwa_launcher.core.docker import ContainerPort, DockerCli

PS_OUTPUT = """\
a1b2c3d4e5f6 0.0.0.0:80->80/tcp, :::80->80/tcp
0f9e8d7c6b5a 0.0.0.0:8080->80/tcp
1122334455aa
99887766ffee 127.0.0.1:80->8000/tcp
"""


@pytest.mark.unit
class TestContainerPort:
    """Test published-port matching."""

    @pytest.mark.parametrize("ports,expected", [
        ("0.0.0.0:80->80/tcp, :::80->80/tcp", True),
        ("127.0.0.1:80->8000/tcp", True),
        ("0.0.0.0:8080->80/tcp", False),
        ("0.0.0.0:180->80/tcp", False),
        ("80/tcp", False),
        ("", False),
    ])
    def test_publishes_port_80(self, ports, expected):
        assert ContainerPort(id="abc", ports=ports).publishes(80) is expected


@pytest.mark.unit
class TestDockerCli:
    """Test docker command construction and parsing."""

    def test_command_without_sudo(self, fake_console):
        assert DockerCli(fake_console).command("ps") == "docker ps"

    def test_command_with_sudo(self, fake_console):
        assert DockerCli(fake_console, use_sudo=True).command("ps") == "sudo docker ps"

    @patch("dvwa_launcher.core.docker.shutil.which", return_value=None)
    def test_is_installed_false(self, mock_which, fake_console):
        assert DockerCli(fake_console).is_installed() is False
        mock_which.assert_called_once_with("docker")

    def test_version_never_uses_sudo(self, fake_console):
        fake_console.add("--version", "Docker version 24.0.7")

        version = DockerCli(fake_console, use_sudo=True).version()

        assert version == "Docker version 24.0.7"
        assert fake_console.commands == ["docker --version"]

    def test_running_containers_parses_ps_output(self, fake_console):
        fake_console.add("ps --format", PS_OUTPUT)

        containers = DockerCli(fake_console).running_containers()

        assert [c.id for c in containers] == [
            "a1b2c3d4e5f6", "0f9e8d7c6b5a", "1122334455aa", "99887766ffee",
        ]
        assert containers[2].ports == ""
        assert fake_console.commands == ["docker ps --format '{{.ID}} {{.Ports}}'"]

    def test_containers_on_port(self, fake_console):
        fake_console.add("ps --format", PS_OUTPUT)

        on_port = DockerCli(fake_console).containers_on_port(80)

        assert [c.id for c in on_port] == ["a1b2c3d4e5f6", "99887766ffee"]

    def test_no_running_containers(self, fake_console):
        assert DockerCli(fake_console).containers_on_port(80) == []

    def test_stop_and_pull_use_sudo_flag(self, fake_console):
        docker = DockerCli(fake_console, use_sudo=True)

        docker.stop("a1b2c3d4e5f6")
        docker.pull("vulnerables/web-dvwa")

        assert fake_console.commands == [
            "sudo docker stop a1b2c3d4e5f6",
            "sudo docker pull vulnerables/web-dvwa",
        ]

    def test_run_foreground_is_interactive(self, fake_console):
        DockerCli(fake_console).run_foreground("vulnerables/web-dvwa", 80)

        call = fake_console.calls[0]
        assert call["command"] == "docker run --rm -it -p 80:80 vulnerables/web-dvwa"
        assert call["interactive"] is True
