#!/usr/bin/env python3
"""
Constants and configuration for dvwa-launcher CLI

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""


# Exit codes
class ExitCode:
    """Exit codes for CLI commands."""

    SUCCESS = 0
    FAILURE = 1


# Fixed deployment parameters
DVWA_IMAGE = "vulnerables/web-dvwa"
DVWA_PORT = 80
OS_RELEASE_PATH = "/etc/os-release"
DOCKER_GROUP = "docker"
DOCKER_SERVICE = "docker"

# Default file paths
LOG_FILE_NAME = "dvwa-docker.log"
