#!/usr/bin/env python3
"""
Docker installer for Arch Linux and Manjaro.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

from dvwa_launcher.core.host import DistroFamily

from .base import BaseInstaller


class ArchInstaller(BaseInstaller):
    """Install Docker from the Arch community repository with pacman."""

    FAMILY = DistroFamily.ARCH
    DISPLAY_NAME = "Arch Linux"

    def _install(self) -> None:
        self.console.sh("sudo pacman -Sy --noconfirm docker")
