"""Rich rendering of templates, manifests and combined previews."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from stackmix.console import console as default_console
from stackmix.preview.models import CombinedPreview, DirectoryNode, FileNode, Severity
from stackmix.preview.warnings import format_bytes
from stackmix.templates.base import Template
from stackmix.templates.loader import TemplateGroup
from stackmix.templates.manifest import TemplateManifest

SEVERITY_STYLE: dict[Severity, str] = {
    Severity.ERROR: "[red]✗[/red]",
    Severity.WARNING: "[yellow]⚠[/yellow]",
    Severity.INFO: "[blue]ℹ[/blue]",
}

RULE = "=" * 60


def _file_label(node: FileNode) -> str:
    if node.executable:
        icon = "⚙"
    elif node.templated:
        icon = "✎"
    else:
        icon = "·"
    return f"{icon} {node.name} [dim]({node.source}, {format_bytes(node.size)})[/dim]"


def _add_children(branch: Tree, node: DirectoryNode) -> None:
    for child in node.children:
        sub = branch.add(
            f"[bold blue]{child.name}/[/bold blue] [dim]{child.source}[/dim]"
        )
        _add_children(sub, child)
    for file in node.files:
        branch.add(_file_label(file))


def build_rich_tree(root: DirectoryNode | None) -> Tree:
    """Convert a built directory tree into a rich Tree."""
    if root is None:
        return Tree("[dim]Empty Project[/dim]")
    tree = Tree(f"[bold]{root.name}/[/bold]")
    _add_children(tree, root)
    return tree


def render_combined_preview(
    preview: CombinedPreview, console: Console | None = None
) -> None:
    """Print tree, summary, selected templates, conflicts and warnings."""
    out = console or default_console

    out.print("\n[bold]Combined Project Structure[/bold]")
    out.print(build_rich_tree(preview.structure.root))

    summary = Table(title="Project Summary", show_header=False)
    summary.add_column("Metric")
    summary.add_column("Value", justify="right")
    summary.add_row("Templates", str(len(preview.templates)))
    summary.add_row("Total Files", str(preview.total_files))
    summary.add_row("Estimated Size", format_bytes(preview.estimated_size))
    out.print(summary)

    out.print("\n[bold]Selected Templates:[/bold]")
    for selection in preview.templates:
        template = selection.template
        out.print(f"  • {template.label} ({template.category.value})")

    if preview.skipped:
        out.print(
            "\n[yellow]Not previewed (manifest unavailable): "
            f"{', '.join(preview.skipped)}[/yellow]"
        )

    if preview.conflicts:
        out.print("\n[bold]File Conflicts:[/bold]")
        for conflict in preview.conflicts:
            icon = SEVERITY_STYLE[conflict.severity]
            out.print(f"  {icon} {conflict.path}: {conflict.message}")

    if preview.warnings:
        out.print("\n[bold]Warnings:[/bold]")
        for warning in preview.warnings:
            out.print(f"  [yellow]⚠[/yellow] {warning}")


def render_detailed_preview(
    preview: CombinedPreview, console: Console | None = None
) -> None:
    """Print conflict, dependency and size analysis."""
    out = console or default_console

    if preview.conflicts:
        out.print(f"\n{RULE}\nFILE CONFLICTS ANALYSIS\n{RULE}")
        for conflict in preview.conflicts:
            out.print(f"\n{SEVERITY_STYLE[conflict.severity]} {conflict.path}")
            out.print(f"   Templates: {', '.join(conflict.templates)}")
            out.print(f"   Issue: {conflict.message}")
            if conflict.resolvable:
                out.print("   Resolution: Automatic")
            else:
                out.print("   Resolution: [red]Manual intervention required[/red]")

    if preview.dependencies:
        out.print(f"\n{RULE}\nDEPENDENCY ANALYSIS\n{RULE}")
        missing = set(preview.missing_dependencies)
        for dep in preview.dependencies:
            if dep in missing:
                out.print(f"  {dep}: [red]✗ Missing[/red]")
            else:
                out.print(f"  {dep}: [green]✓ Satisfied[/green]")

    out.print(f"\n{RULE}\nPROJECT SIZE BREAKDOWN\n{RULE}")
    out.print(f"Total Files: {preview.total_files}")
    out.print(f"Estimated Size: {format_bytes(preview.estimated_size)}")
    out.print(f"Templates: {len(preview.templates)}")


def render_manifest(
    template: Template, manifest: TemplateManifest, console: Console | None = None
) -> None:
    """Print a single template's file listing and summary."""
    out = console or default_console

    tree = Tree(f"[bold]Template Preview: {template.label}[/bold]")
    for entry in manifest.entries:
        if entry.is_directory:
            tree.add(f"[bold blue]{entry.path}/[/bold blue]")
        else:
            tree.add(f"{entry.path} [dim]({format_bytes(entry.size)})[/dim]")
    out.print(tree)

    summary = manifest.summary
    out.print("\nTemplate Summary:")
    out.print(f"  Files: {summary.total_files}")
    out.print(f"  Directories: {summary.total_directories}")
    out.print(f"  Size: {format_bytes(summary.total_size)}")
    out.print(f"  Templated Files: {summary.templated_files}")
    out.print(f"  Executable Files: {summary.executable_files}")


def render_template_groups(
    groups: Sequence[TemplateGroup], console: Console | None = None
) -> None:
    """Print available templates as a table organized by category."""
    out = console or default_console

    table = Table(title="Available Templates")
    table.add_column("Category")
    table.add_column("Template", style="cyan")
    table.add_column("Technology")
    table.add_column("Description")
    for group in groups:
        for template in group.templates:
            table.add_row(
                group.display_name,
                template.name,
                template.technology,
                template.description,
            )
    out.print(table)
