"""Application context for dependency injection.

Configuration (agent registry, content manifest) is built once here and
passed explicitly to the resolver and installer. Tests construct
AppContext directly with test doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from skill_mobile.agents import AgentRegistry, path_exists
from skill_mobile.console import InstallerConsole
from skill_mobile.install import Installer
from skill_mobile.protocols import ConfirmationProvider, Detector, FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from skill_mobile.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for the dependencies used by the CLI."""

    registry: AgentRegistry
    installer: Installer
    output: InstallerConsole
    confirmer: ConfirmationProvider
    detector: Detector = path_exists
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    home: Path | None = None,
    source_root: Path | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Args:
        home: Override home directory used for agent paths (for testing).
        source_root: Override the content directory.

    Returns:
        Configured AppContext with all dependencies.
    """
    from skill_mobile.agents import default_registry
    from skill_mobile.filesystem import RealFileSystem

    filesystem = RealFileSystem()
    output = InstallerConsole()
    return AppContext(
        registry=default_registry(home),
        installer=Installer.create(source_root=source_root, filesystem=filesystem),
        output=output,
        confirmer=output,
        detector=path_exists,
        filesystem=filesystem,
    )

