#!/usr/bin/env python3
"""
Installer Factory - Creates the installer for a distribution family.

Implements Factory pattern to pick the Debian, RHEL or Arch installer
from the detected distribution. Unknown distributions are an explicit
failure, never a silent no-op.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from typing import Dict, Type

from dvwa_launcher.core.console import Console
from dvwa_launcher.core.errors import UnsupportedPlatformError, create_error_context
from dvwa_launcher.core.host import DistroFamily, DistroInfo

from .base import BaseInstaller

DOCKER_INSTALL_DOCS = "https://docs.docker.com/engine/install/"


class InstallerFactory:
    """
    Factory for creating installer instances.

    Supports dynamic registration and creation of installers keyed by
    distribution family.
    """

    _installers: Dict[DistroFamily, Type[BaseInstaller]] = {}

    @classmethod
    def register(cls, family: DistroFamily, installer_class: Type[BaseInstaller]):
        """
        Register an installer for a family.

        Args:
            family: Distribution family handled by the installer
            installer_class: Class implementing BaseInstaller
        """
        cls._installers[family] = installer_class

    @classmethod
    def create(cls, distro: DistroInfo, console: Console) -> BaseInstaller:
        """
        Create the installer for a distribution.

        Args:
            distro: Detected distribution
            console: Console used to run package manager commands

        Returns:
            Installer instance for the distribution's family

        Raises:
            UnsupportedPlatformError: If no installer handles the distribution
        """
        installer_class = cls._installers.get(distro.family)

        if not installer_class:
            raise UnsupportedPlatformError(
                f"Unsupported distribution: {distro.id}",
                context=create_error_context(
                    operation="install_docker",
                    component="InstallerFactory",
                    additional_info={"distro": distro.id},
                ),
                suggestions=[
                    f"Please install Docker manually from: {DOCKER_INSTALL_DOCS}"
                ],
            )

        return installer_class(distro, console)

    @classmethod
    def available_families(cls) -> list:
        """
        Get list of families with a registered installer.

        Returns:
            List of registered DistroFamily members
        """
        return list(cls._installers.keys())


def register_default_installers():
    """
    Register the built-in installers.

    Called on module import.
    """
    from .arch import ArchInstaller
    from .debian import DebianInstaller
    from .rhel import RhelInstaller

    InstallerFactory.register(DistroFamily.DEBIAN, DebianInstaller)
    InstallerFactory.register(DistroFamily.RHEL, RhelInstaller)
    InstallerFactory.register(DistroFamily.ARCH, ArchInstaller)


# Auto-register on module import
register_default_installers()
