"""Content manifest: which files make up the installed skill."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from skill_mobile.protocols import FileSystem

logger = logging.getLogger(__name__)

SKILL_NAME = "skill-mobile-mt"
SKILL_FILE = "SKILL.md"

# Content bundled with the package
CONTENT_DIR = Path(__file__).parent / "content"


def _check_name(name: str) -> str:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"Manifest entries must be plain names, got {name!r}")
    return name


class ContentManifest(BaseModel):
    """Root files and subfolders that constitute the skill payload."""

    model_config = ConfigDict(frozen=True)

    root_files: tuple[str, ...] = ()
    subfolders: dict[str, tuple[str, ...]] = Field(default_factory=dict)

    @field_validator("root_files")
    @classmethod
    def _validate_root_files(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(_check_name(name) for name in value)

    @field_validator("subfolders")
    @classmethod
    def _validate_subfolders(
        cls, value: dict[str, tuple[str, ...]]
    ) -> dict[str, tuple[str, ...]]:
        return {
            _check_name(folder): tuple(_check_name(name) for name in files)
            for folder, files in value.items()
        }

    @property
    def file_count(self) -> int:
        """Total number of files listed."""
        return len(self.root_files) + sum(len(f) for f in self.subfolders.values())


DEFAULT_MANIFEST = ContentManifest(
    root_files=(SKILL_FILE, "AGENTS.md"),
    subfolders={
        "react-native": ("react-native.md",),
        "flutter": ("flutter.md",),
        "ios": ("ios-native.md",),
        "android": ("android-native.md",),
        "shared": (
            "code-review.md",
            "bug-detection.md",
            "prompt-engineering.md",
            "release-checklist.md",
            "common-pitfalls.md",
        ),
    },
)


class SkillInfo(BaseModel):
    """Skill metadata shown in the banner."""

    name: str = SKILL_NAME
    description: str = ""


def parse_frontmatter(content: str) -> dict:
    """Parse YAML frontmatter from markdown content.

    Args:
        content: Markdown text, optionally starting with a '---' block.

    Returns:
        Parsed mapping, or an empty dict if there is no valid frontmatter.
    """
    if not content.startswith("---"):
        return {}
    try:
        end_idx = content.index("---", 3)
        data = yaml.safe_load(content[3:end_idx].strip())
    except (ValueError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def load_skill_info(source_root: Path, fs: FileSystem) -> SkillInfo:
    """Read skill name and description from SKILL.md.

    Args:
        source_root: Directory holding the skill content.
        fs: Filesystem abstraction.

    Returns:
        SkillInfo, with defaults for anything missing.
    """
    skill_file = source_root / SKILL_FILE
    if not fs.is_file(skill_file):
        return SkillInfo()
    try:
        content = fs.read_text(skill_file)
    except (OSError, UnicodeDecodeError):
        logger.debug("Cannot read %s, using default skill info", skill_file, exc_info=True)
        return SkillInfo()
    frontmatter = parse_frontmatter(content)
    return SkillInfo(
        name=str(frontmatter.get("name") or SKILL_NAME),
        description=str(frontmatter.get("description") or ""),
    )
