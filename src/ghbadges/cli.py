"""CLI interface for ghbadges."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghbadges.badge_generator import compose_enabled, render_snippet, should_preview
from ghbadges.catalog import (
    FORMATS,
    STYLES,
    find_format_index,
    find_service_index,
    load_service_catalog,
    style_label,
)
from ghbadges.errors import BadgeError
from ghbadges.interactive_prompts import build_preview_table, run_interactive_session
from ghbadges.models import BadgeStyle
from ghbadges.selection import SelectionState
from ghbadges.user_config import (
    apply_user_defaults,
    get_catalog_override,
    get_config_path,
    get_default_config_template,
    load_user_config,
    save_user_config,
)

app = typer.Typer(
    name="ghbadges",
    help="Compose status badge snippets (image + link) for a repository.",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="Manage user-level default preferences.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)

CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Custom service catalog YAML file"),
]


def _create_selection(catalog: Path | None) -> SelectionState:
    """Build a session selection from the catalog and the user's defaults."""
    user_cfg = load_user_config()
    catalog_path = catalog or get_catalog_override(user_cfg)
    if catalog_path is not None:
        logger.info(f"Using service catalog {catalog_path}")
        services = load_service_catalog(catalog_path)
    else:
        services = None
    return apply_user_defaults(SelectionState(services), user_cfg)


@app.command("generate")
def generate_cmd(
    repository: Annotated[
        str, typer.Argument(help='Repository identifier, e.g. "lodash" or "facebook/react"')
    ],
    services: Annotated[
        list[str] | None,
        typer.Option("--service", "-s", help="Service to include (repeatable)"),
    ] = None,
    all_services: Annotated[
        bool, typer.Option("--all", help="Include every service in the catalog")
    ] = False,
    style: Annotated[
        BadgeStyle | None, typer.Option("--style", help="Badge style")
    ] = None,
    format_id: Annotated[
        str | None, typer.Option("--format", "-f", help="Snippet format (e.g. markdown, rst)")
    ] = None,
    catalog: CatalogOption = None,
    preview: Annotated[
        bool, typer.Option("--preview/--no-preview", help="Show resolved badge URLs")
    ] = False,
) -> None:
    """Print the badge snippet for a repository."""
    try:
        selection = _create_selection(catalog)
        selection.set_repository(repository)

        if all_services or services:
            wanted = {find_service_index(name, selection.services) for name in services or []}
            for index in range(len(selection.services)):
                selection.set_service_enabled(index, all_services or index in wanted)
        if style is not None:
            selection.set_style(style)
        if format_id is not None:
            selection.set_format(find_format_index(format_id, selection.formats))
    except BadgeError as e:
        rprint(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if not should_preview(selection):
        rprint("[yellow]Nothing to render: no repository or no services selected.[/yellow]")
        return

    if preview:
        console.print(build_preview_table(selection))

    snippet = render_snippet(compose_enabled(selection), selection.active_format)
    typer.echo(snippet, nl=False)


@app.command("interactive")
def interactive_cmd(catalog: CatalogOption = None) -> None:
    """Build a badge snippet step by step."""
    try:
        selection = _create_selection(catalog)
    except BadgeError as e:
        rprint(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    run_interactive_session(selection)


@app.command("services")
def services_cmd(catalog: CatalogOption = None) -> None:
    """List the available badge services."""
    try:
        selection = _create_selection(catalog)
    except BadgeError as e:
        rprint(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    table = Table(title="Badge Services")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Default", justify="center")

    for service, enabled in zip(selection.services, selection.enabled_flags, strict=True):
        table.add_row(service.name, service.title, "✓" if enabled else "")

    console.print(table)


@app.command("styles")
def styles_cmd() -> None:
    """List the available badge styles."""
    table = Table(title="Badge Styles")
    table.add_column("Style", style="cyan")
    table.add_column("Label")

    for style in STYLES:
        table.add_row(style.value, style_label(style))

    console.print(table)


@app.command("formats")
def formats_cmd() -> None:
    """List the available snippet formats."""
    table = Table(title="Snippet Formats")
    table.add_column("Format", style="cyan")
    table.add_column("Label")
    table.add_column("Default", justify="center")

    for fmt in FORMATS:
        table.add_row(fmt.identifier, fmt.label, "✓" if fmt.is_default else "")

    console.print(table)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show current user configuration."""
    config_path = get_config_path()
    user_cfg = load_user_config()

    if not user_cfg:
        rprint(f"[yellow]No user config found at {config_path}[/yellow]")
        rprint("[dim]Run 'ghbadges config init' to create one.[/dim]")
        return

    rprint(f"[cyan]Config file:[/cyan] {config_path}\n")
    table = Table(title="User Defaults")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in user_cfg.items():
        display = ", ".join(value) if isinstance(value, list) else str(value)
        table.add_row(key, display)

    console.print(table)


@config_app.command("init")
def config_init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing config")] = False,
) -> None:
    """Create a default user configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        rprint(f"[yellow]Config already exists at {config_path}[/yellow]")
        rprint("[dim]Use --force to overwrite.[/dim]")
        raise typer.Exit(1)

    saved_path = save_user_config(get_default_config_template())
    rprint(f"[green]Created default config at {saved_path}[/green]")
    rprint("[dim]Edit this file to customize your defaults.[/dim]")


@config_app.command("path")
def config_path_cmd() -> None:
    """Print the path to the user config file."""
    typer.echo(str(get_config_path()))


if __name__ == "__main__":
    app()
