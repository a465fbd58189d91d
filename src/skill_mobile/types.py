"""Shared data types for the skill installer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = ["InstallResult", "InstallTarget"]


@dataclass(frozen=True)
class InstallTarget:
    """A destination selected for one installation run.

    Attributes:
        key: Agent key, or "custom" for an explicit --path target.
        display_name: Human-readable name shown in output.
        base_dir: Directory the skill folder is created under.
    """

    key: str
    display_name: str
    base_dir: Path


@dataclass
class InstallResult:
    """Result of installing the skill to one target.

    Attributes:
        success: True if every copy step succeeded.
        target: The target that was installed to.
        destination: Skill directory under the target.
        files_copied: Number of files written.
        installed_files: Copied paths relative to the destination, in copy order.
        error: Error message (None on success).
    """

    success: bool
    target: InstallTarget
    destination: Path
    files_copied: int = 0
    error: str | None = None
    installed_files: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and self.error is not None:
            raise ValueError("success=True but error is set")
        if not self.success and self.error is None:
            raise ValueError("success=False requires error message")
        if self.files_copied < 0:
            raise ValueError("files_copied cannot be negative")
