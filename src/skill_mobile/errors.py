"""Error types raised by the installer."""

from __future__ import annotations

from pathlib import Path


class SkillMobileError(Exception):
    """Base class for installer errors."""

    pass


class UsageError(SkillMobileError):
    """Malformed command-line invocation.

    Raised before any filesystem write is attempted.
    """

    pass


class InstallError(SkillMobileError):
    """Filesystem failure while installing to a target.

    Attributes:
        target: Display name of the target being installed.
        path: Path that could not be created or written.
    """

    def __init__(self, message: str, target: str, path: Path) -> None:
        super().__init__(message)
        self.target = target
        self.path = path
