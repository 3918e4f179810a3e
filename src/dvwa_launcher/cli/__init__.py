#!/usr/bin/env python3
"""
CLI Package for dvwa-launcher

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from .app import app, cli_main
from .constants import (
    DOCKER_GROUP,
    DOCKER_SERVICE,
    DVWA_IMAGE,
    DVWA_PORT,
    ExitCode,
    LOG_FILE_NAME,
    OS_RELEASE_PATH,
)
from .utils import default_log_file, setup_logging

__all__ = [
    "app",
    "cli_main",
    "ExitCode",
    "DOCKER_GROUP",
    "DOCKER_SERVICE",
    "DVWA_IMAGE",
    "DVWA_PORT",
    "LOG_FILE_NAME",
    "OS_RELEASE_PATH",
    "default_log_file",
    "setup_logging",
]
