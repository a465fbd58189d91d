"""CLI command using Typer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from skill_mobile import __version__
from skill_mobile.agents import KNOWN_AGENTS
from skill_mobile.context import create_context
from skill_mobile.errors import UsageError
from skill_mobile.manifest import load_skill_info
from skill_mobile.resolver import parse_selection, resolve_targets

if TYPE_CHECKING:
    from skill_mobile.context import AppContext
    from skill_mobile.types import InstallResult

app = typer.Typer(
    name="skill-mobile",
    help="Install the skill-mobile-mt skill into AI coding agents.",
    add_completion=False,
)

SELECTION_HELP = (
    "Selection flags: --all (every agent), --auto (detected agents), "
    "--path DIR (custom directory), "
    + ", ".join(f"--{key}" for key in KNOWN_AGENTS)
    + ". Without flags, detected agents are installed after confirmation."
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"skill-mobile v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=SELECTION_HELP,
)
def main(
    ctx: typer.Context,
    source: Annotated[
        Path | None,
        typer.Option(
            "--source",
            help="Directory with the skill content (defaults to the bundled content)",
            exists=True,
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Install the skill-mobile-mt skill into AI coding agents."""
    _configure_logging(verbose)
    install(ctx.args, source_root=source)


def install(
    args: Sequence[str],
    source_root: Path | None = None,
    _context: AppContext | None = None,
) -> list[InstallResult]:
    """Resolve targets from selection flags and install to each.

    Args:
        args: Selection flags (--all, --auto, --path DIR, --<agent>).
        source_root: Override the content directory.
        _context: Injected dependencies (for testing).

    Returns:
        One InstallResult per target, empty if the user cancelled.

    Raises:
        typer.Exit: Code 2 on a usage error, code 1 if any target failed.
    """
    ctx = _context or create_context(source_root=source_root)
    out = ctx.output

    try:
        selection = parse_selection(args, ctx.registry)
    except UsageError as e:
        out.show_error(str(e))
        raise typer.Exit(2) from e

    info = load_skill_info(ctx.installer.source_root, ctx.filesystem)
    out.show_banner(info, __version__)

    targets = resolve_targets(
        selection,
        ctx.registry,
        ctx.confirmer,
        detector=ctx.detector,
        reporter=out,
    )
    if not targets:
        out.show_info("Cancelled.")
        return []

    out.show_installing()
    results = []
    for target in targets:
        result = ctx.installer.install(target)
        out.show_result(result)
        results.append(result)

    out.show_summary(results)
    if not all(r.success for r in results):
        raise typer.Exit(1)

    installed = dict.fromkeys(path for r in results for path in r.installed_files)
    out.show_structure(ctx.installer.skill_name, list(installed))
    out.show_usage(ctx.installer.skill_name)
    return results


if __name__ == "__main__":
    app()
