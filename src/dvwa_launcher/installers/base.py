#!/usr/bin/env python3
"""
Base class for Docker installers.

Defines the abstract installer every distribution family implements.
Implements Template Method pattern: install() wraps the family specific
steps with logging and error translation.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from dvwa_launcher.core.console import Console
from dvwa_launcher.core.errors import (
    CommandError,
    InstallationError,
    create_error_context,
)
from dvwa_launcher.core.host import DistroFamily, DistroInfo

logger = logging.getLogger(__name__)

DOCKER_DOWNLOAD_URL = "https://download.docker.com/linux"

# Engine, CLI, runtime and plugins from Docker's own repositories.
DOCKER_CE_PACKAGES: List[str] = [
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
]


class BaseInstaller(ABC):
    """
    Abstract base class for Docker installers.

    Subclasses add the vendor repository, refresh package indices and
    install the Docker package set with their family's package manager.
    """

    FAMILY: DistroFamily = None
    DISPLAY_NAME: str = "base"

    def __init__(self, distro: DistroInfo, console: Console):
        """
        Initialize installer.

        Args:
            distro: Detected distribution
            console: Console used to run package manager commands
        """
        self.distro = distro
        self.console = console

    @property
    def repo_url(self) -> str:
        """Docker repository base URL for this distribution."""
        return f"{DOCKER_DOWNLOAD_URL}/{self.distro.id}"

    def install(self) -> None:
        """
        Install Docker (Template Method).

        Raises:
            InstallationError: If any package manager command fails
        """
        logger.info(f"Installing Docker on {self.DISPLAY_NAME}...")
        try:
            self._install()
        except CommandError as e:
            raise InstallationError(
                f"Docker installation failed on {self.distro.id}: {e}",
                context=create_error_context(
                    operation="install_docker",
                    phase=self.DISPLAY_NAME,
                    component=type(self).__name__,
                    command=e.command,
                ),
                suggestions=[
                    "Check network access to download.docker.com",
                    "See https://docs.docker.com/engine/install/ for manual steps",
                ],
                cause=e,
            ) from e
        logger.info("Docker installed successfully")

    @abstractmethod
    def _install(self) -> None:
        """Run the family specific installation commands."""
        pass
