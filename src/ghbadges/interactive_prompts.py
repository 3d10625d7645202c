"""Interactive prompts for building a badge selection."""

import logging

from rich import print as rprint
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from ghbadges.badge_generator import compose_enabled, render_snippet, should_preview
from ghbadges.catalog import STYLES, style_label
from ghbadges.selection import SelectionState

logger = logging.getLogger(__name__)
console = Console()


def build_services_table(selection: SelectionState) -> Table:
    """Build a table of catalog services with their current enabled state."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("", justify="center")
    table.add_column("Service", style="cyan")
    table.add_column("Badge title")

    for index, (service, enabled) in enumerate(
        zip(selection.services, selection.enabled_flags, strict=True), start=1
    ):
        mark = "[green]✓[/green]" if enabled else "[dim]✗[/dim]"
        table.add_row(str(index), mark, service.name, service.title)
    return table


def build_preview_table(selection: SelectionState) -> Table:
    """Build a table of the badges the selection currently resolves to."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Badge", style="cyan")
    table.add_column("Link")
    table.add_column("Image")

    for badge in compose_enabled(selection):
        table.add_row(badge.title, badge.link_url, badge.image_url)
    return table


class BadgePrompter:
    """Interactive session that edits a SelectionState."""

    def __init__(self, selection: SelectionState) -> None:
        self.selection = selection

    def prompt_for_repository(self) -> None:
        """Ask for the repository identifier."""
        rprint("\n[bold cyan]📦 Repository[/bold cyan]\n")
        repository = Prompt.ask(
            '  Repository (e.g. "lodash" for npm, "facebook/react" for GitHub)',
            default=self.selection.repository,
            show_default=bool(self.selection.repository),
        )
        self.selection.set_repository(repository)

    def prompt_for_services(self) -> None:
        """Let the user toggle services until they submit an empty answer."""
        rprint("\n[bold cyan]🛠️ Services[/bold cyan]\n")
        choices = [str(i) for i in range(1, len(self.selection.services) + 1)]

        while True:
            console.print(build_services_table(self.selection))
            answer = Prompt.ask(
                "  Toggle service number (press Enter when done)",
                choices=choices,
                show_choices=False,
                default="",
                show_default=False,
            )
            if not answer:
                break
            self.selection.toggle_service(int(answer) - 1)

    def prompt_for_style(self) -> None:
        """Ask for the badge style."""
        rprint("\n[bold cyan]🎨 Style[/bold cyan]\n")
        for style in STYLES:
            rprint(f"  • [cyan]{style.value}[/cyan] ({style_label(style)})")
        style = Prompt.ask(
            "  Style",
            choices=[style.value for style in STYLES],
            default=self.selection.active_style.value,
        )
        self.selection.set_style(style)

    def prompt_for_format(self) -> None:
        """Ask for the snippet format."""
        rprint("\n[bold cyan]📝 Format[/bold cyan]\n")
        for fmt in self.selection.formats:
            rprint(f"  • [cyan]{fmt.identifier}[/cyan] ({fmt.label})")
        identifiers = [fmt.identifier for fmt in self.selection.formats]
        identifier = Prompt.ask(
            "  Format",
            choices=identifiers,
            default=self.selection.active_format.identifier,
        )
        self.selection.set_format(identifiers.index(identifier))

    def display_result(self) -> None:
        """Show the preview and snippet, or explain why there is nothing to show."""
        if not should_preview(self.selection):
            rprint(
                "\n[yellow]Nothing to preview: enter a repository and enable at least "
                "one service.[/yellow]"
            )
            return

        rprint("\n[bold cyan]👀 Preview[/bold cyan]\n")
        console.print(build_preview_table(self.selection))

        rprint("\n[bold cyan]📋 Source code[/bold cyan]\n")
        snippet = render_snippet(compose_enabled(self.selection), self.selection.active_format)
        console.print(snippet, markup=False, highlight=False, soft_wrap=True, end="")

    def run(self) -> SelectionState:
        """Run every prompt in order and display the result."""
        self.prompt_for_repository()
        self.prompt_for_services()
        self.prompt_for_style()
        self.prompt_for_format()
        self.display_result()
        logger.debug(f"Interactive session finished: {self.selection!r}")
        return self.selection


def run_interactive_session(selection: SelectionState) -> SelectionState:
    """Run an interactive session that edits ``selection`` in place."""
    return BadgePrompter(selection).run()
