"""Protocol definitions for the installer's collaborators.

The resolver and copy routine depend on these interfaces rather than on
the real console or filesystem, so tests can pass simple doubles.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from skill_mobile.agents import AgentProfile

# Answers whether a path exists. Must not raise.
Detector = Callable[[Path], bool]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem operations used by the installer."""

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file contents from src to dst, replacing dst."""
        ...

    def read_text(self, path: Path) -> str:
        """Read text content from a file."""
        ...


@runtime_checkable
class ConfirmationProvider(Protocol):
    """Protocol for asking the user a yes/no question."""

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask for confirmation.

        Args:
            message: Question to show.
            default: Answer used when the user just presses enter.

        Returns:
            True if the user agreed.
        """
        ...


@runtime_checkable
class ResolutionReporter(Protocol):
    """Protocol for showing target resolution progress to the user."""

    def show_detection(self, detected: list[AgentProfile], undetected: list[AgentProfile]) -> None:
        """Show which agents were and were not detected."""
        ...

    def show_info(self, message: str) -> None:
        """Show an informational message."""
        ...
