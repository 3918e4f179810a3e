"""
Docker installers per distribution family.

Architecture:
- BaseInstaller: Abstract base class wrapping install steps
- DebianInstaller: apt based install for Debian and Ubuntu
- RhelInstaller: dnf/yum based install for RHEL, CentOS and Fedora
- ArchInstaller: pacman based install for Arch and Manjaro
- InstallerFactory: Factory selecting the installer for a distribution

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from .arch import ArchInstaller
from .base import BaseInstaller, DOCKER_CE_PACKAGES
from .debian import DebianInstaller
from .factory import InstallerFactory
from .rhel import RhelInstaller

__all__ = [
    "ArchInstaller",
    "BaseInstaller",
    "DOCKER_CE_PACKAGES",
    "DebianInstaller",
    "InstallerFactory",
    "RhelInstaller",
]
