#!/usr/bin/env python3
"""Module to run docker commands.

This module provides a class to drive the docker CLI on the host, with
optional sudo escalation for users outside the docker group.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""
# built-in modules
import re
import shutil
import typing
from dataclasses import dataclass

# user-defined modules
from dvwa_launcher.core.console import Console


@dataclass
class ContainerPort:
    """A running container and its published ports, as listed by `docker ps`."""

    id: str
    ports: str

    def publishes(self, port: int) -> bool:
        """Check whether this container publishes the given host port."""
        return re.search(r":" + str(port) + r"->", self.ports) is not None


class DockerCli:
    """Class to run docker CLI commands on the host.

    Attributes:
        console (Console): The console object.
        use_sudo (bool): Prefix every docker call with sudo.
        binary (str): Name of the docker executable.
    """

    def __init__(
        self,
        console: Console,
        use_sudo: bool = False,
        binary: str = "docker",
    ) -> None:
        """Constructor of the DockerCli class.

        Args:
            console (Console): The console object.
            use_sudo (bool): Prefix every docker call with sudo.
            binary (str): Name of the docker executable.
        """
        self.console = console
        self.use_sudo = use_sudo
        self.binary = binary

    def command(self, args: str) -> str:
        """Build a docker command line.

        Args:
            args (str): Arguments after the docker binary.

        Returns:
            str: The full command line.
        """
        prefix = "sudo " if self.use_sudo else ""
        return prefix + self.binary + " " + args

    def is_installed(self) -> bool:
        """Check whether the docker binary is on PATH."""
        return shutil.which(self.binary) is not None

    def version(self) -> str:
        """Return the output of `docker --version`."""
        # --version never touches the daemon socket, so no sudo is needed.
        return self.console.sh(self.binary + " --version")

    def running_containers(self) -> typing.List[ContainerPort]:
        """List running containers with their published ports.

        Returns:
            list: One ContainerPort per running container.
        """
        output = self.console.sh(
            self.command("ps --format '{{.ID}} {{.Ports}}'"), log_output=False
        )
        containers = []
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue
            # containers without published ports have no second field
            parts = line.split(None, 1)
            containers.append(
                ContainerPort(id=parts[0], ports=parts[1] if len(parts) > 1 else "")
            )
        return containers

    def containers_on_port(self, port: int) -> typing.List[ContainerPort]:
        """List running containers publishing the given host port."""
        return [c for c in self.running_containers() if c.publishes(port)]

    def stop(self, container_id: str) -> str:
        """Stop a container gracefully."""
        return self.console.sh(self.command("stop " + container_id))

    def pull(self, image: str) -> str:
        """Pull an image from its registry."""
        return self.console.sh(self.command("pull " + image))

    def run_foreground(self, image: str, port: int) -> str:
        """Run an image in the foreground until it exits.

        The container is removed on exit and publishes the given port on
        the same host port.

        Args:
            image (str): The image reference.
            port (int): Container and host port.

        Returns:
            str: The container output.
        """
        return self.console.sh(
            self.command(
                "run --rm -it -p " + str(port) + ":" + str(port) + " " + image
            ),
            interactive=True,
        )
