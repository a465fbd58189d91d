"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from skill_mobile.agents import AgentRegistry, default_registry
from skill_mobile.context import AppContext
from skill_mobile.filesystem import RealFileSystem
from skill_mobile.install import Installer
from skill_mobile.manifest import DEFAULT_MANIFEST, ContentManifest
from skill_mobile.types import InstallTarget


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def registry(temp_home: Path) -> AgentRegistry:
    """Agent registry rooted at the temporary home."""
    return default_registry(temp_home)


# ============================================================================
# Content Fixtures
# ============================================================================


SKILL_MD = """---
name: skill-mobile-mt
description: Mobile patterns
---

# Skill
"""


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """Create a source tree holding every file of the default manifest."""
    root = tmp_path / "source"
    root.mkdir()
    for name in DEFAULT_MANIFEST.root_files:
        (root / name).write_text(SKILL_MD if name == "SKILL.md" else f"# {name}\n")
    for folder, files in DEFAULT_MANIFEST.subfolders.items():
        (root / folder).mkdir()
        for name in files:
            (root / folder / name).write_text(f"# {folder}/{name}\n")
    return root


@pytest.fixture
def small_manifest() -> ContentManifest:
    """A manifest with one root file and one subfolder."""
    return ContentManifest(
        root_files=("SKILL.md",),
        subfolders={"shared": ("code-review.md",)},
    )


@pytest.fixture
def installer(source_root: Path) -> Installer:
    """Installer reading from the fake source tree."""
    return Installer.create(source_root=source_root)


@pytest.fixture
def target(tmp_path: Path) -> InstallTarget:
    """A target under the temporary directory."""
    return InstallTarget(key="claude", display_name="Claude Code", base_dir=tmp_path / "skills")


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def mock_output() -> MagicMock:
    """Create a mock InstallerConsole."""
    return MagicMock()


@pytest.fixture
def app_context(
    registry: AgentRegistry, installer: Installer, mock_output: MagicMock
) -> AppContext:
    """AppContext with a real installer and registry, and mocked console."""
    return AppContext(
        registry=registry,
        installer=installer,
        output=mock_output,
        confirmer=mock_output,
        filesystem=RealFileSystem(),
    )
