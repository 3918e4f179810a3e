#!/usr/bin/env python3
"""
Docker installer for RHEL, CentOS and Fedora.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import logging
import shutil

from dvwa_launcher.core.errors import CommandError
from dvwa_launcher.core.host import DistroFamily

from .base import BaseInstaller, DOCKER_CE_PACKAGES

logger = logging.getLogger(__name__)


class RhelInstaller(BaseInstaller):
    """Install Docker from download.docker.com with dnf or yum."""

    FAMILY = DistroFamily.RHEL
    DISPLAY_NAME = "RHEL/CentOS/Fedora"

    @staticmethod
    def package_manager() -> str:
        """Prefer dnf, fall back to yum."""
        return "dnf" if shutil.which("dnf") else "yum"

    def _install(self) -> None:
        pkg_mgr = self.package_manager()
        repo_file = f"{self.repo_url}/docker-ce.repo"

        self.console.sh(f"sudo {pkg_mgr} install -y yum-utils")
        try:
            self.console.sh(f"sudo {pkg_mgr} config-manager --add-repo {repo_file}")
        except CommandError:
            # dnf5 and older yum lack the config-manager subcommand
            logger.debug(f"{pkg_mgr} config-manager failed, using yum-config-manager")
            self.console.sh(f"sudo yum-config-manager --add-repo {repo_file}")
        self.console.sh(f"sudo {pkg_mgr} install -y " + " ".join(DOCKER_CE_PACKAGES))
