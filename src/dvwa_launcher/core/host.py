#!/usr/bin/env python3
"""Module of host inspection helpers.

This module reads the os-release identification file, classifies the
distribution into a package-management family, and answers questions
about the invoking user.

Classes:
    DistroFamily: Package-management family of a distribution.
    DistroInfo: Parsed distribution identification.

Functions:
    parse_os_release: Parse os-release text.
    read_os_release: Read and parse an os-release file.
    detect_distribution: Build DistroInfo from an os-release file.
    classify_distribution: Map a distribution id to its family.
    is_root: Check for an effective UID of zero.
    current_user: Name of the invoking user.
    user_groups: Groups of the invoking user.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""
# built-in modules
import getpass
import os
import typing
from dataclasses import dataclass
from enum import Enum

# user-defined modules
from dvwa_launcher.core.console import Console
from dvwa_launcher.core.errors import DetectionError, create_error_context


class DistroFamily(Enum):
    """Package-management family of a distribution."""

    DEBIAN = "debian"
    RHEL = "rhel"
    ARCH = "arch"


# Distribution ids accepted for each family.
FAMILY_IDS: typing.Dict[DistroFamily, typing.Tuple[str, ...]] = {
    DistroFamily.DEBIAN: ("ubuntu", "debian"),
    DistroFamily.RHEL: ("rhel", "centos", "fedora"),
    DistroFamily.ARCH: ("arch", "manjaro"),
}


@dataclass(frozen=True)
class DistroInfo:
    """Parsed distribution identification.

    Attributes:
        id: Lower-cased ID field, e.g. "ubuntu".
        id_like: Lower-cased ID_LIKE field, may be empty.
        version_codename: VERSION_CODENAME field, may be empty.
        pretty_name: PRETTY_NAME field, may be empty.
    """

    id: str
    id_like: str = ""
    version_codename: str = ""
    pretty_name: str = ""

    @property
    def family(self) -> typing.Optional[DistroFamily]:
        """Family of this distribution, None when unsupported."""
        return classify_distribution(self.id)


def parse_os_release(text: str) -> typing.Dict[str, str]:
    """Parse os-release text.

    Args:
        text: Contents of an os-release file.

    Returns:
        dict: Mapping of keys to unquoted values.
    """
    fields = {}
    for line in text.splitlines():
        line = line.strip()
        # skip blank lines, comments and anything that is not key=value.
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        fields[key.strip()] = value
    return fields


def read_os_release(path: str) -> typing.Dict[str, str]:
    """Read and parse an os-release file.

    Args:
        path: Path to the os-release file.

    Returns:
        dict: Mapping of keys to unquoted values.

    Raises:
        DetectionError: If the file does not exist.
    """
    if not os.path.isfile(path):
        raise DetectionError(
            "Cannot detect Linux distribution",
            context=create_error_context(
                operation="detect_distribution",
                component="host",
                file_path=path,
            ),
            suggestions=[f"{path} is missing; only Linux hosts are supported"],
        )
    with open(path, encoding="utf-8") as f:
        return parse_os_release(f.read())


def detect_distribution(path: str) -> DistroInfo:
    """Build DistroInfo from an os-release file.

    Args:
        path: Path to the os-release file.

    Returns:
        DistroInfo: The detected distribution.

    Raises:
        DetectionError: If the file is missing or has no ID field.
    """
    fields = read_os_release(path)
    distro_id = fields.get("ID", "").lower()
    if not distro_id:
        raise DetectionError(
            "Cannot detect Linux distribution",
            context=create_error_context(
                operation="detect_distribution",
                component="host",
                file_path=path,
            ),
            suggestions=[f"{path} has no ID entry"],
        )
    return DistroInfo(
        id=distro_id,
        id_like=fields.get("ID_LIKE", "").lower(),
        version_codename=fields.get("VERSION_CODENAME", ""),
        pretty_name=fields.get("PRETTY_NAME", ""),
    )


def classify_distribution(distro_id: str) -> typing.Optional[DistroFamily]:
    """Map a distribution id to its family.

    Args:
        distro_id: The os-release ID value.

    Returns:
        DistroFamily or None if the id is not supported.
    """
    distro_id = distro_id.lower()
    for family, ids in FAMILY_IDS.items():
        if distro_id in ids:
            return family
    return None


def is_root() -> bool:
    """Check for an effective UID of zero."""
    return os.geteuid() == 0


def current_user() -> str:
    """Name of the invoking user."""
    return os.environ.get("USER") or getpass.getuser()


def user_groups(console: Console) -> typing.List[str]:
    """Groups of the invoking user, as reported by `groups`."""
    return console.sh("groups", log_output=False).split()
