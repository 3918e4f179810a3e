"""
Pytest configuration and shared fixtures for dvwa-launcher tests.

Provides a scripted console that records shell commands instead of
running them, os-release fixture files, and an isolated run log.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging

import pytest

from dvwa_launcher.cli.utils import setup_logging
from dvwa_launcher.core.console import OUTPUT_LOGGER_NAME
from dvwa_launcher.core.errors import set_error_handler
from tests.fixtures.utils import FakeConsole, UBUNTU_OS_RELEASE


@pytest.fixture
def fake_console():
    """Empty scripted console."""
    return FakeConsole()


@pytest.fixture
def os_release_file(tmp_path):
    """Factory writing an os-release file and returning its path."""

    def _write(content: str = UBUNTU_OS_RELEASE) -> str:
        path = tmp_path / "os-release"
        path.write_text(content)
        return str(path)

    return _write


@pytest.fixture
def run_log(tmp_path):
    """Configure logging into a temporary run log and return its path."""
    log_file = tmp_path / "dvwa-docker.log"
    setup_logging(verbose=False, log_file=str(log_file))
    yield log_file
    for name in (None, OUTPUT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    set_error_handler(None)
