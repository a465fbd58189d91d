"""Rich console output for the installer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.tree import Tree

if TYPE_CHECKING:
    from skill_mobile.agents import AgentProfile
    from skill_mobile.manifest import SkillInfo
    from skill_mobile.types import InstallResult


class InstallerConsole:
    """Text output and the yes/no prompt for skill-mobile.

    Satisfies the ConfirmationProvider protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to write to. A new one is created if omitted.
        """
        self.console = console or Console()

    def show_banner(self, info: SkillInfo, version: str) -> None:
        """Display welcome banner.

        Args:
            info: Skill metadata from SKILL.md.
            version: Installer version.
        """
        body = f"[bold cyan]{info.name}[/bold cyan] v{version}"
        if info.description:
            body += f"\n{info.description}"
        self.console.print(Panel(body, title="skill-mobile", border_style="cyan"))

    def show_detection(
        self, detected: list[AgentProfile], undetected: list[AgentProfile]
    ) -> None:
        """Display which agents were found on this machine."""
        self.console.print("[bold]Detected agents:[/bold]")
        for profile in detected:
            self.console.print(f"  [green]●[/green] {profile.display_name}")
        for profile in undetected:
            self.console.print(f"  [dim]○ {profile.display_name}[/dim]")
        self.console.print()

    def confirm(self, message: str, default: bool = True) -> bool:
        """Show confirmation prompt.

        Args:
            message: Confirmation message.
            default: Default response.

        Returns:
            User's response.
        """
        return Confirm.ask(message, default=default, console=self.console)

    def show_installing(self) -> None:
        """Announce that copying has started."""
        self.console.print()
        self.console.print("[bold]Installing...[/bold]")

    def show_result(self, result: InstallResult) -> None:
        """Show the outcome for one target."""
        if result.success:
            self.show_success(
                f"[bold]{result.destination.name}/[/bold] → {result.target.display_name} "
                f"[dim]({result.destination}, {result.files_copied} files)[/dim]"
            )
        else:
            self.show_error(f"{result.target.display_name}: {result.error}")

    def show_summary(self, results: list[InstallResult]) -> None:
        """Show totals after all targets ran."""
        succeeded = [r for r in results if r.success]
        failed = len(results) - len(succeeded)
        self.console.print()
        if failed:
            self.show_warning(
                f"Installed to {len(succeeded)} agent(s), {failed} failed"
            )
        else:
            self.console.print(
                f"[bold green]Done![/bold green] → {len(succeeded)} agent(s)"
            )

    def show_structure(self, skill_name: str, files: Sequence[str]) -> None:
        """Show the installed directory layout.

        Args:
            skill_name: Name of the installed skill folder.
            files: Copied paths relative to the skill folder, e.g. "shared/code-review.md".
        """
        tree = Tree(f"[bold]{skill_name}/[/bold]")
        branches: dict[str, Tree] = {}
        for path in files:
            folder, _, name = path.rpartition("/")
            if not folder:
                tree.add(name)
                continue
            if folder not in branches:
                branches[folder] = tree.add(f"[bold]{folder}/[/bold]")
            branches[folder].add(name)
        self.console.print()
        self.console.print("[bold]Installed structure:[/bold]")
        self.console.print(tree)

    def show_usage(self, skill_name: str) -> None:
        """Show how to invoke the installed skill."""
        self.console.print()
        self.console.print("[bold]Usage:[/bold]")
        self.console.print(f"  [cyan]@{skill_name}[/cyan]        Pre-built patterns")
        self.console.print(
            f"  [cyan]@{skill_name} local[/cyan]  Read current project, adapt to it"
        )

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")
