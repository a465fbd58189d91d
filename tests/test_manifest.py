"""Tests for the content manifest and skill metadata."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from skill_mobile.filesystem import RealFileSystem
from skill_mobile.manifest import (
    CONTENT_DIR,
    DEFAULT_MANIFEST,
    SKILL_NAME,
    ContentManifest,
    load_skill_info,
    parse_frontmatter,
)


class TestContentManifest:
    """Tests for ContentManifest."""

    def test_default_manifest_layout(self) -> None:
        """The default manifest lists the root files and platform folders."""
        assert DEFAULT_MANIFEST.root_files == ("SKILL.md", "AGENTS.md")
        assert list(DEFAULT_MANIFEST.subfolders) == [
            "react-native",
            "flutter",
            "ios",
            "android",
            "shared",
        ]
        assert DEFAULT_MANIFEST.subfolders["ios"] == ("ios-native.md",)

    def test_file_count(self) -> None:
        """file_count includes root files and subfolder files."""
        assert DEFAULT_MANIFEST.file_count == 11

    def test_is_frozen(self) -> None:
        """Manifest fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            DEFAULT_MANIFEST.root_files = ("other.md",)

    @pytest.mark.parametrize("bad", ["../escape.md", "a/b.md", "..", ""])
    def test_rejects_path_like_names(self, bad: str) -> None:
        """Entries must be plain file names."""
        with pytest.raises(ValidationError):
            ContentManifest(root_files=(bad,))

    def test_rejects_path_like_folder(self) -> None:
        """Folder names must be plain names too."""
        with pytest.raises(ValidationError):
            ContentManifest(subfolders={"a/b": ("x.md",)})

    def test_bundled_content_has_skill_file(self) -> None:
        """The package ships a SKILL.md entry point."""
        assert (CONTENT_DIR / "SKILL.md").is_file()


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_valid(self) -> None:
        """YAML between the delimiters is parsed."""
        data = parse_frontmatter("---\nname: test\ndescription: hi\n---\nBody")
        assert data == {"name": "test", "description": "hi"}

    def test_no_frontmatter(self) -> None:
        """Content without a leading delimiter yields an empty dict."""
        assert parse_frontmatter("# Title\n") == {}

    def test_unclosed(self) -> None:
        """A missing closing delimiter yields an empty dict."""
        assert parse_frontmatter("---\nname: test\n") == {}

    def test_invalid_yaml(self) -> None:
        """Malformed YAML yields an empty dict."""
        assert parse_frontmatter("---\nname: [unclosed\n---\n") == {}

    def test_non_mapping(self) -> None:
        """A scalar frontmatter yields an empty dict."""
        assert parse_frontmatter("---\njust text\n---\n") == {}


class TestLoadSkillInfo:
    """Tests for load_skill_info."""

    def test_reads_frontmatter(self, source_root: Path) -> None:
        """Name and description come from SKILL.md."""
        info = load_skill_info(source_root, RealFileSystem())
        assert info.name == "skill-mobile-mt"
        assert info.description == "Mobile patterns"

    def test_missing_skill_file(self, tmp_path: Path) -> None:
        """Without SKILL.md the fixed skill name is used."""
        info = load_skill_info(tmp_path, RealFileSystem())
        assert info.name == SKILL_NAME
        assert info.description == ""

    def test_undecodable_skill_file(self, tmp_path: Path) -> None:
        """A SKILL.md that is not UTF-8 falls back to the defaults."""
        (tmp_path / "SKILL.md").write_bytes(b"\xff\xfe binary \x80")

        info = load_skill_info(tmp_path, RealFileSystem())

        assert info.name == SKILL_NAME
        assert info.description == ""

    def test_unreadable_skill_file(self, tmp_path: Path) -> None:
        """An OSError while reading SKILL.md falls back to the defaults."""
        fs = MagicMock()
        fs.is_file.return_value = True
        fs.read_text.side_effect = PermissionError("denied")

        info = load_skill_info(tmp_path, fs)

        assert info.name == SKILL_NAME
        assert info.description == ""
