"""Turn command-line flags or interactive answers into install targets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from skill_mobile.agents import AgentProfile, AgentRegistry, path_exists
from skill_mobile.errors import UsageError
from skill_mobile.protocols import ConfirmationProvider, Detector, ResolutionReporter
from skill_mobile.types import InstallTarget

logger = logging.getLogger(__name__)

CUSTOM_KEY = "custom"
CUSTOM_NAME = "Custom"


@dataclass(frozen=True)
class Selection:
    """Parsed selection flags.

    Attributes:
        all: --all was given.
        auto: --auto was given.
        path: Directory given with --path, if any.
        agents: Agent keys given as --<key>, in the order seen.
    """

    all: bool = False
    auto: bool = False
    path: str | None = None
    agents: tuple[str, ...] = field(default_factory=tuple)


def parse_selection(args: Sequence[str], registry: AgentRegistry) -> Selection:
    """Parse selection flags.

    Args:
        args: Raw arguments, e.g. ["--claude", "--gemini"].
        registry: Known agents; each key is accepted as a flag.

    Returns:
        Parsed Selection.

    Raises:
        UsageError: On a missing --path value, an unknown flag or a
            stray positional argument.
    """
    select_all = False
    auto = False
    path: str | None = None
    agents: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--all":
            select_all = True
        elif arg == "--auto":
            auto = True
        elif arg == "--path":
            if i + 1 >= len(args) or args[i + 1].startswith("--"):
                raise UsageError("--path needs a directory")
            path = args[i + 1]
            i += 1
        elif arg.startswith("--path="):
            path = arg.split("=", 1)[1]
            if not path:
                raise UsageError("--path needs a directory")
        elif arg.startswith("--") and arg[2:] in registry:
            if arg[2:] not in agents:
                agents.append(arg[2:])
        elif arg.startswith("-"):
            raise UsageError(
                f"Unknown option: {arg}. Agents: {', '.join('--' + k for k in registry.keys())}"
            )
        else:
            raise UsageError(f"Unexpected argument: {arg}")
        i += 1

    return Selection(all=select_all, auto=auto, path=path, agents=tuple(agents))


def _to_target(profile: AgentProfile) -> InstallTarget:
    return InstallTarget(
        key=profile.key,
        display_name=profile.display_name,
        base_dir=profile.base_dir,
    )


def _unique_by_directory(targets: list[InstallTarget]) -> list[InstallTarget]:
    seen: set[Path] = set()
    unique = []
    for target in targets:
        if target.base_dir in seen:
            logger.debug("Skipping %s, directory already selected", target.key)
            continue
        seen.add(target.base_dir)
        unique.append(target)
    return unique


def resolve_targets(
    selection: Selection,
    registry: AgentRegistry,
    confirmer: ConfirmationProvider,
    detector: Detector = path_exists,
    reporter: ResolutionReporter | None = None,
) -> list[InstallTarget]:
    """Resolve a selection into install targets.

    Precedence is --all, then --auto, then --path, then agent flags. With
    no flags the user is shown which agents were detected and asked to
    confirm.

    Args:
        selection: Parsed flags.
        registry: Known agents.
        confirmer: Asks the interactive question.
        detector: Existence check used for agent detection.
        reporter: Shows detection results and fallbacks to the user.

    Returns:
        Targets unique by directory, in declaration order. Empty if the
        user declined.
    """
    if selection.all:
        profiles = list(registry)
    elif selection.auto:
        profiles = registry.detect(detector)
        if not profiles:
            logger.info("No agents found, using %s", registry.default.display_name)
            if reporter is not None:
                reporter.show_info(f"No agents found. Using {registry.default.display_name}.")
            profiles = [registry.default]
    elif selection.path is not None:
        custom_dir = Path(selection.path).expanduser().resolve()
        return [InstallTarget(key=CUSTOM_KEY, display_name=CUSTOM_NAME, base_dir=custom_dir)]
    elif selection.agents:
        profiles = [p for p in registry if p.key in selection.agents]
    else:
        detected = registry.detect(detector)
        undetected = [p for p in registry if p not in detected]
        if reporter is not None:
            reporter.show_detection(detected, undetected)
        if not confirmer.confirm("Install to detected agents?", default=True):
            return []
        profiles = detected or [registry.default]

    return _unique_by_directory([_to_target(p) for p in profiles])
