"""Filesystem path helpers used by option validation.

Design Principles:
    - Explicit: Callers state whether symlinks are followed
    - Honest: "does not exist" and "could not check" are different outcomes
"""

import os
from enum import Enum
from pathlib import Path


class LinkTreatment(Enum):
    """How a symlink at the checked path is treated.

    Attributes:
        FOLLOW_SYMLINK: Resolve the link; a dangling link does not exist
        SYMLINK_ONLY: Check the link itself, not its target
    """
    FOLLOW_SYMLINK = "follow-symlink"
    SYMLINK_ONLY = "symlink-only"


def exists(link_treatment: LinkTreatment, filename: str | Path) -> bool:
    """Check whether a filesystem entry exists.

    Args:
        link_treatment: Whether to follow symlinks when checking
        filename: Path to check

    Returns:
        True if the entry exists, False if it does not

    Raises:
        ValueError: If link_treatment is not a LinkTreatment, or filename
            contains a NUL byte
        OSError: If the check itself failed (e.g. permission denied)
    """
    if link_treatment is LinkTreatment.FOLLOW_SYMLINK:
        stat = os.stat
    elif link_treatment is LinkTreatment.SYMLINK_ONLY:
        stat = os.lstat
    else:
        raise ValueError(f"Unknown link treatment: {link_treatment!r}")

    try:
        stat(filename)
    except FileNotFoundError:
        return False
    return True
