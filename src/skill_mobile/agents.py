"""Registry of AI coding agents the skill can be installed for."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from skill_mobile.protocols import Detector

logger = logging.getLogger(__name__)

__all__ = [
    "AgentProfile",
    "AgentRegistry",
    "DEFAULT_AGENT",
    "default_registry",
    "path_exists",
]

DEFAULT_AGENT = "claude"

# key -> (display name, dot-directory under home)
KNOWN_AGENTS: dict[str, tuple[str, str]] = {
    "claude": ("Claude Code", ".claude"),
    "gemini": ("Gemini CLI", ".gemini"),
    "kimi": ("Kimi", ".kimi"),
    "antigravity": ("Antigravity", ".agents"),
    "cursor": ("Cursor", ".cursor"),
    "windsurf": ("Windsurf", ".windsurf"),
    "copilot": ("Copilot", ".copilot"),
}


def path_exists(path: Path) -> bool:
    """Check whether a path exists without raising.

    Args:
        path: Path to check.

    Returns:
        True if the path exists, False if it is missing or unreadable.
    """
    try:
        return path.exists()
    except OSError:
        logger.debug("Cannot stat %s, treating as absent", path, exc_info=True)
        return False


@dataclass(frozen=True)
class AgentProfile:
    """An agent installation profile.

    Attributes:
        key: Unique identifier, also the CLI flag name.
        display_name: Human-readable agent name.
        base_dir: Skills directory the skill folder goes into.
        config_dir: Agent configuration directory checked for detection.
    """

    key: str
    display_name: str
    base_dir: Path
    config_dir: Path

    def is_present(self, detector: Detector = path_exists) -> bool:
        """Check if this agent appears to be installed.

        Args:
            detector: Existence check applied to the config directory.

        Returns:
            True if the agent's configuration directory exists.
        """
        return detector(self.config_dir)


class AgentRegistry:
    """Immutable, ordered collection of agent profiles."""

    def __init__(self, profiles: list[AgentProfile], default_key: str = DEFAULT_AGENT) -> None:
        """Initialize the registry.

        Args:
            profiles: Profiles in declaration order.
            default_key: Key of the profile used when nothing is detected.

        Raises:
            ValueError: If keys are duplicated or default_key is unknown.
        """
        keys = [p.key for p in profiles]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate agent keys: {keys}")
        if default_key not in keys:
            raise ValueError(f"Unknown default agent: {default_key}. Known: {keys}")
        self._profiles = tuple(profiles)
        self._default_key = default_key

    def __iter__(self) -> Iterator[AgentProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, key: object) -> bool:
        return any(p.key == key for p in self._profiles)

    def keys(self) -> list[str]:
        """Return agent keys in declaration order."""
        return [p.key for p in self._profiles]

    def get(self, key: str) -> AgentProfile:
        """Get a profile by key.

        Args:
            key: Agent key.

        Returns:
            The matching profile.

        Raises:
            KeyError: If the agent is not registered.
        """
        for profile in self._profiles:
            if profile.key == key:
                return profile
        raise KeyError(key)

    @property
    def default(self) -> AgentProfile:
        """Profile used when no agent is detected."""
        return self.get(self._default_key)

    def detect(self, detector: Detector = path_exists) -> list[AgentProfile]:
        """Return the profiles whose agent appears to be installed."""
        return [p for p in self._profiles if p.is_present(detector)]


def default_registry(home: Path | None = None) -> AgentRegistry:
    """Build the registry of known agents.

    Args:
        home: Home directory to resolve agent directories against.
            Defaults to the current user's home.

    Returns:
        AgentRegistry with every known agent.
    """
    home = home or Path.home()
    profiles = []
    for key, (display_name, dot_dir) in KNOWN_AGENTS.items():
        config_dir = home / dot_dir
        profiles.append(
            AgentProfile(
                key=key,
                display_name=display_name,
                base_dir=config_dir / "skills",
                config_dir=config_dir,
            )
        )
    return AgentRegistry(profiles)
