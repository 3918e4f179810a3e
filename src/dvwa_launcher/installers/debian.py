#!/usr/bin/env python3
"""
Docker installer for Debian and Ubuntu.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from dvwa_launcher.core.host import DistroFamily

from .base import BaseInstaller, DOCKER_CE_PACKAGES

KEYRING_DIR = "/etc/apt/keyrings"
KEYRING_PATH = KEYRING_DIR + "/docker.gpg"
SOURCES_LIST_PATH = "/etc/apt/sources.list.d/docker.list"

PREREQUISITE_PACKAGES = ["ca-certificates", "curl", "gnupg", "lsb-release"]


class DebianInstaller(BaseInstaller):
    """Install Docker from download.docker.com with apt."""

    FAMILY = DistroFamily.DEBIAN
    DISPLAY_NAME = "Debian/Ubuntu"

    def _install(self) -> None:
        self.console.sh("sudo apt-get update")
        self.console.sh("sudo apt-get install -y " + " ".join(PREREQUISITE_PACKAGES))

        # Docker's signing key
        self.console.sh("sudo mkdir -p " + KEYRING_DIR)
        self.console.sh(
            f'curl -fsSL "{self.repo_url}/gpg" | sudo gpg --dearmor -o {KEYRING_PATH}'
        )

        self.console.sh(
            f'echo "{self.sources_line()}" | sudo tee {SOURCES_LIST_PATH} > /dev/null'
        )

        self.console.sh("sudo apt-get update")
        self.console.sh("sudo apt-get install -y " + " ".join(DOCKER_CE_PACKAGES))

    def sources_line(self) -> str:
        """Build the apt sources entry for Docker's repository."""
        arch = self.console.sh("dpkg --print-architecture", log_output=False)
        codename = self.distro.version_codename or self.console.sh(
            "lsb_release -cs", log_output=False
        )
        return (
            f"deb [arch={arch} signed-by={KEYRING_PATH}] "
            f"{self.repo_url} {codename} stable"
        )
