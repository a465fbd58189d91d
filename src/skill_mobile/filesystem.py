"""Filesystem abstraction for testability.

RealFileSystem wraps standard library Path and shutil operations and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation."""

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file contents, overwriting dst if it exists."""
        shutil.copyfile(src, dst)

    def read_text(self, path: Path) -> str:
        """Read text content from a file."""
        return path.read_text(encoding="utf-8")
