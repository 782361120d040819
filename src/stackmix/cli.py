"""Command-line interface for stackmix."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from stackmix import __version__
from stackmix.config.loader import (
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    local_config_exists,
    save_config,
)
from stackmix.config.schema import DEFAULT_CONFIG, ProjectConfig
from stackmix.console import console
from stackmix.preview.display import (
    render_combined_preview,
    render_detailed_preview,
    render_manifest,
    render_template_groups,
)
from stackmix.preview.manager import CombinationCancelledError, PreviewManager
from stackmix.preview.validation import SelectionError, validate_selections
from stackmix.templates import (
    FilesystemManifestProvider,
    ManifestFetchError,
    Selection,
    Template,
    copy_default_templates,
    get_all_templates,
    get_template_search_paths,
    organize_by_category,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_selections(
    names: tuple[str, ...], templates: dict[str, Template]
) -> list[Selection]:
    """Turn template names into selections, exiting on unknown names."""
    unknown = [name for name in names if name not in templates]
    if unknown:
        console.print(f"[red]Unknown template(s): {', '.join(unknown)}[/red]")
        console.print("[dim]Run 'stackmix list' to see available templates.[/dim]")
        raise SystemExit(1)
    return [Selection.of(templates[name]) for name in names]


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"stackmix [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Stackmix - combine project templates and preview the result."""
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        console.print("[bold]stackmix[/bold] - combine project templates")
        console.print("\nRun [cyan]stackmix --help[/cyan] for available commands.")


@main.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show template details.")
def list_templates(verbose: bool) -> None:
    """List available templates by category."""
    templates = get_all_templates()

    if not templates:
        console.print("[yellow]No templates found.[/yellow]")
        console.print(
            "[dim]Run 'stackmix init' to copy default templates to "
            "~/.stackmix/templates/[/dim]"
        )
        return

    groups = organize_by_category(templates.values())
    if verbose:
        render_template_groups(groups)
        return

    for group in groups:
        console.print(
            f"[bold]{group.display_name}[/bold] [dim]{group.description}[/dim]"
        )
        for template in group.templates:
            console.print(f"  [cyan]{template.name}[/cyan]")


@main.command()
@click.argument("name")
def info(name: str) -> None:
    """Show details for a single template."""
    template = get_all_templates().get(name)
    if template is None:
        console.print(f"[red]Template not found: {name}[/red]")
        raise SystemExit(1)

    console.print(f"[bold]{template.label}[/bold] [dim]({template.name})[/dim]")
    if template.description:
        console.print(f"  {template.description}")
    console.print(f"  Category: {template.category.value}")
    if template.technology:
        console.print(f"  Technology: {template.technology}")
    if template.version:
        console.print(f"  Version: {template.version}")
    if template.dependencies:
        console.print(f"  Dependencies: {', '.join(template.dependencies)}")
    if template.tags:
        console.print(f"  Tags: {', '.join(template.tags)}")
    if template.source is not None:
        console.print(f"  [dim]Source: {template.source}[/dim]")


@main.command()
@click.argument("names", nargs=-1)
def validate(names: tuple[str, ...]) -> None:
    """Check that the named templates can be combined."""
    selections = _resolve_selections(names, get_all_templates())
    try:
        validate_selections(selections)
    except SelectionError as e:
        console.print(f"[red]Invalid selection: {e}[/red]")
        raise SystemExit(1) from None

    console.print(f"[green]✓[/green] {len(selections)} template(s) can be combined")


@main.command()
@click.argument("names", nargs=-1)
@click.option("--name", "project_name", help="Project name (root of the tree).")
@click.option("--organization", default="", help="Organization for template paths.")
@click.option(
    "--details",
    is_flag=True,
    help="Show conflict, dependency and size analysis.",
)
@click.option(
    "--individual",
    is_flag=True,
    help="Preview each template on its own before the combined result.",
)
@click.option(
    "--skip-validation",
    is_flag=True,
    help="Combine even if category or dependency checks fail.",
)
def preview(
    names: tuple[str, ...],
    project_name: str | None,
    organization: str,
    details: bool,
    individual: bool,
    skip_validation: bool,
) -> None:
    """Preview the project produced by combining the named templates."""
    config = load_config()
    templates = get_all_templates()
    selections = _resolve_selections(names, templates)

    if not skip_validation:
        try:
            validate_selections(selections)
        except SelectionError as e:
            console.print(f"[red]Invalid selection: {e}[/red]")
            console.print("[dim]Use --skip-validation to preview anyway.[/dim]")
            raise SystemExit(1) from None

    project_config = ProjectConfig(
        name=project_name or config.project_name or "project",
        organization=organization,
    )
    provider = FilesystemManifestProvider(templates)

    if individual and len(selections) > 1:
        for selection in selections:
            try:
                manifest = provider.preview_template(selection.name, project_config)
            except ManifestFetchError as e:
                logger.warning("Failed to preview template %s: %s", selection.name, e)
                continue
            render_manifest(selection.template, manifest)

    manager = PreviewManager(provider, config)
    try:
        combined = manager.combine_selections(selections, project_config)
    except (SelectionError, CombinationCancelledError) as e:
        console.print(f"[red]Cannot combine templates: {e}[/red]")
        raise SystemExit(1) from None

    render_combined_preview(combined)
    if details:
        render_detailed_preview(combined)


@main.command()
@click.option(
    "--local",
    "-l",
    is_flag=True,
    help="Install into ./.stackmix/ instead of ~/.stackmix/.",
)
@click.option("--force", is_flag=True, help="Overwrite existing default templates.")
@click.option(
    "--show",
    is_flag=True,
    help="Show current effective configuration and exit.",
)
def init(local: bool, force: bool, show: bool) -> None:
    """Install default templates and configuration.

    Config locations:
      - Global: ~/.stackmix/config.yaml (user defaults)
      - Local: ./.stackmix/config.yaml (project overrides)
    """
    if show:
        console.print("\n[bold]Current Effective Configuration:[/bold]")
        for label, path, exists in (
            ("Global", get_home_config_path(), home_config_exists()),
            ("Local", get_local_config_path(), local_config_exists()),
        ):
            state = "" if exists else " (not found)"
            console.print(f"  [dim]{label}: {path}{state}[/dim]")
        console.print()
        for key, value in load_config().to_dict().items():
            console.print(f"  {key}: {value}")
        paths = get_template_search_paths()
        if paths:
            console.print("\n[bold]Template Search Paths:[/bold]")
            for path in paths:
                console.print(f"  {path}")
        return

    config_path = get_local_config_path() if local else get_home_config_path()
    exists = local_config_exists() if local else home_config_exists()
    if exists:
        console.print(f"[dim]Configuration already exists at {config_path}[/dim]")
    else:
        save_config(DEFAULT_CONFIG, config_path)
        console.print(f"[green]Configuration saved to {config_path}[/green]")

    copied = copy_default_templates(local=local, overwrite=force)
    if copied:
        console.print(f"[green]Copied {len(copied)} default templates[/green]")
    else:
        console.print("[dim]Default templates already installed.[/dim]")
