"""Installer for the skill-mobile-mt skill across AI coding agents."""

__version__ = "1.0.0"

from skill_mobile.protocols import (
    ConfirmationProvider,
    FileSystem,
    ResolutionReporter,
)

__all__ = [
    "__version__",
    "ConfirmationProvider",
    "FileSystem",
    "ResolutionReporter",
]
