"""Test the CLI module.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

# built-in modules
import re
from unittest.mock import MagicMock, patch

# third-party modules
import pytest
from typer.testing import CliRunner

# project modules
from dvwa_launcher import __version__
from dvwa_launcher.cli import (
    DVWA_IMAGE,
    DVWA_PORT,
    ExitCode,
    LOG_FILE_NAME,
    app,
)
from dvwa_launcher.core.errors import PullError

TIMESTAMP = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] ")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_log(tmp_path, run_log):
    """Point the CLI's log file at a temporary path."""
    log_file = tmp_path / LOG_FILE_NAME
    with patch("dvwa_launcher.cli.app.default_log_file", return_value=str(log_file)):
        yield log_file


@pytest.mark.unit
class TestConstants:
    """Test fixed deployment parameters."""

    def test_fixed_parameters(self):
        assert DVWA_IMAGE == "vulnerables/web-dvwa"
        assert DVWA_PORT == 80
        assert LOG_FILE_NAME == "dvwa-docker.log"
        assert ExitCode.SUCCESS == 0
        assert ExitCode.FAILURE == 1


@pytest.mark.unit
class TestDeployCommand:
    """Test the deploy entry point."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == ExitCode.SUCCESS
        assert __version__ in result.output

    @patch("dvwa_launcher.cli.app.DeployOrchestrator")
    def test_zero_arguments_runs_deployment(self, mock_orchestrator, runner, cli_log):
        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.SUCCESS
        config = mock_orchestrator.call_args[0][0]
        assert config.image == "vulnerables/web-dvwa"
        assert config.port == 80
        assert config.log_file == str(cli_log)
        assert config.os_release_path == "/etc/os-release"
        mock_orchestrator.return_value.execute.assert_called_once()

    @patch("dvwa_launcher.cli.app.DeployOrchestrator")
    def test_launcher_error_exits_non_zero(self, mock_orchestrator, runner, cli_log):
        mock_orchestrator.return_value.execute.side_effect = PullError("Could not pull")

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.FAILURE
        assert "Could not pull" in cli_log.read_text()

    @patch("dvwa_launcher.cli.app.DeployOrchestrator")
    def test_interrupt_outside_run_exits_non_zero(self, mock_orchestrator, runner, cli_log):
        mock_orchestrator.return_value.execute.side_effect = KeyboardInterrupt()

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.FAILURE
        assert "Operation cancelled by user" in cli_log.read_text()

    def test_missing_os_release_only_logs_failure(self, runner, cli_log, tmp_path):
        with patch("dvwa_launcher.cli.app.OS_RELEASE_PATH", str(tmp_path / "missing")), \
                patch("dvwa_launcher.cli.app.Console") as mock_console:
            result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.FAILURE
        mock_console.return_value.sh.assert_not_called()
        lines = cli_log.read_text().splitlines()
        assert len(lines) == 1
        assert TIMESTAMP.match(lines[0])
        assert "] Cannot detect Linux distribution (" in lines[0]

    def test_unopenable_log_file_exits_cleanly(self, runner, tmp_path):
        log_file = tmp_path / "readonly" / LOG_FILE_NAME
        with patch("dvwa_launcher.cli.app.default_log_file", return_value=str(log_file)), \
                patch("dvwa_launcher.cli.app.setup_logging",
                      side_effect=PermissionError(13, "Permission denied")), \
                patch("dvwa_launcher.cli.app.DeployOrchestrator") as mock_orchestrator:
            result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.FAILURE
        assert not isinstance(result.exception, PermissionError)
        assert "Cannot open log file" in result.output
        mock_orchestrator.assert_not_called()
