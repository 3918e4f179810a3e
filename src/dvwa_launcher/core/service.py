#!/usr/bin/env python3
"""Module to manage systemd services.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""
# user-defined modules
from dvwa_launcher.core.console import Console


class ServiceManager:
    """Class to query and start systemd services through sudo.

    Attributes:
        console (Console): The console object.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def is_active(self, service: str) -> bool:
        """Check whether a service is active."""
        return self.console.succeeds("sudo systemctl is-active --quiet " + service)

    def start(self, service: str) -> str:
        """Start a service now."""
        return self.console.sh("sudo systemctl start " + service)

    def enable(self, service: str) -> str:
        """Enable a service for future boots."""
        return self.console.sh("sudo systemctl enable " + service)
