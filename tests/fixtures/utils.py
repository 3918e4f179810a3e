"""Utility classes and sample data for tests.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

# built-in modules
from typing import List, Tuple, Union

# project modules
from dvwa_launcher.core.errors import CommandError


class FakeConsole:
    """Console double that records commands and replays scripted results.

    Rules are (substring, result) pairs checked in order. A str result is
    returned as command output; an int result is a non-zero exit status;
    an exception instance is raised as-is. Unmatched commands succeed
    with empty output.
    """

    def __init__(self, rules: List[Tuple[str, Union[str, int, BaseException]]] = None):
        self.rules = list(rules or [])
        self.commands: List[str] = []
        self.calls: List[dict] = []

    def add(self, substring: str, result: Union[str, int, BaseException]) -> None:
        # later rules take priority
        self.rules.insert(0, (substring, result))

    def _result(self, command: str):
        for substring, result in self.rules:
            if substring in command:
                return result
        return ""

    def sh(self, command: str, canFail: bool = False, **kwargs) -> str:
        self.commands.append(command)
        self.calls.append({"command": command, **kwargs})
        result = self._result(command)
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, int):
            if canFail:
                return ""
            raise CommandError(
                f"Subprocess '{command}' failed with exit code {result}",
                command=command,
                exit_code=result,
            )
        return result

    def succeeds(self, command: str) -> bool:
        self.commands.append(command)
        result = self._result(command)
        return not isinstance(result, (int, BaseException))

    def ran(self, substring: str) -> List[str]:
        """Commands containing the substring."""
        return [c for c in self.commands if substring in c]


UBUNTU_OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.4 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.4 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
"""

FEDORA_OS_RELEASE = """\
NAME="Fedora Linux"
VERSION="39 (Workstation Edition)"
ID=fedora
VERSION_ID=39
PRETTY_NAME="Fedora Linux 39 (Workstation Edition)"
"""

ARCH_OS_RELEASE = """\
NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
"""

ALPINE_OS_RELEASE = """\
NAME="Alpine Linux"
ID=alpine
VERSION_ID=3.19.1
PRETTY_NAME="Alpine Linux v3.19"
"""

DOCKER_VERSION = "Docker version 24.0.7, build afdd53b"
