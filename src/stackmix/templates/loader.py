"""Template loading and discovery."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import yaml

from stackmix.templates.base import Category, Template

# Constants
TEMPLATE_DIRNAME = "templates"
TEMPLATE_YAML = "template.yaml"
FILES_DIRNAME = "files"

# Display order and labels for category groups
CATEGORY_INFO: tuple[tuple[Category, str, str], ...] = (
    (Category.FRONTEND, "Frontend", "Web applications and user interfaces"),
    (Category.BACKEND, "Backend", "Server-side applications and APIs"),
    (Category.MOBILE, "Mobile", "Mobile applications for iOS and Android"),
    (
        Category.INFRASTRUCTURE,
        "Infrastructure",
        "Deployment and infrastructure as code",
    ),
    (Category.BASE, "Base", "Core project files and documentation"),
    (Category.OTHER, "Other", "Miscellaneous templates"),
)


@dataclass(frozen=True)
class TemplateGroup:
    """Templates sharing a category, ready for display."""

    category: Category
    display_name: str
    description: str
    templates: tuple[Template, ...]


def get_package_templates_path() -> Path:
    """Get path to package-bundled default templates."""
    return Path(__file__).parent / "default"


def get_global_templates_path() -> Path:
    """Get path to global user templates: ~/.stackmix/templates/."""
    return Path.home() / ".stackmix" / TEMPLATE_DIRNAME


def get_local_templates_path() -> Path:
    """Get path to project-specific templates: ./.stackmix/templates/."""
    return Path.cwd() / ".stackmix" / TEMPLATE_DIRNAME


def get_template_search_paths() -> list[Path]:
    """Return template search paths in priority order (highest first).

    Resolution order:
    1. Local project templates (./.stackmix/templates/) - highest priority
    2. Global user templates (~/.stackmix/templates/)
    """
    paths = []

    local = get_local_templates_path()
    if local.exists():
        paths.append(local)

    global_templates = get_global_templates_path()
    if global_templates.exists():
        paths.append(global_templates)

    return paths


def discover_template_dirs(base_path: Path) -> dict[str, Path]:
    """Discover template directories within a base path.

    Returns dict mapping directory name -> template directory path.
    Only includes directories containing template.yaml.
    """
    templates: dict[str, Path] = {}
    if not base_path.exists():
        return templates

    for item in sorted(base_path.iterdir()):
        if item.is_dir():
            template_yaml = item / TEMPLATE_YAML
            if template_yaml.exists():
                templates[item.name] = item

    return templates


def load_template_from_dir(template_dir: Path) -> Template | None:
    """Load a Template from a template directory.

    Returns None if template.yaml is missing or invalid. A missing name
    falls back to the directory name.
    """
    template_yaml = template_dir / TEMPLATE_YAML
    if not template_yaml.exists():
        return None

    try:
        with template_yaml.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if not isinstance(data, dict):
                return None
    except yaml.YAMLError:
        return None

    if not data.get("name"):
        data["name"] = template_dir.name

    return Template.from_dict(data, source=template_dir)


def _load_from(base_path: Path, templates: dict[str, Template]) -> None:
    for template_dir in discover_template_dirs(base_path).values():
        tmpl = load_template_from_dir(template_dir)
        if tmpl:
            templates[tmpl.name] = tmpl


def get_all_templates() -> dict[str, Template]:
    """Discover and load all templates from filesystem locations.

    Resolution order (later wins for same name):
    1. Global (~/.stackmix/templates/)
    2. Project (./.stackmix/templates/)

    Returns dict mapping template name -> Template.
    """
    templates: dict[str, Template] = {}
    _load_from(get_global_templates_path(), templates)
    _load_from(get_local_templates_path(), templates)
    return templates


def get_template_by_name(name: str) -> Template | None:
    """Get a specific template by name, using resolution order.

    Checks local first, then global.
    """
    for base_path in (get_local_templates_path(), get_global_templates_path()):
        template_path = base_path / name
        if template_path.exists():
            tmpl = load_template_from_dir(template_path)
            if tmpl:
                return tmpl

    # Directory name may differ from the declared name
    return get_all_templates().get(name)


def get_available_template_names() -> list[str]:
    """Get list of all available template names (from all locations)."""
    return sorted(get_all_templates().keys())


def organize_by_category(templates: Iterable[Template]) -> list[TemplateGroup]:
    """Group templates by category in display order.

    Empty categories are omitted; templates are sorted by name.
    """
    by_category: dict[Category, list[Template]] = {}
    for tmpl in templates:
        by_category.setdefault(tmpl.category, []).append(tmpl)

    groups: list[TemplateGroup] = []
    for category, display_name, description in CATEGORY_INFO:
        members = by_category.get(category)
        if not members:
            continue
        groups.append(
            TemplateGroup(
                category=category,
                display_name=display_name,
                description=description,
                templates=tuple(sorted(members, key=lambda t: t.name)),
            )
        )
    return groups


def copy_default_templates(local: bool = False, overwrite: bool = False) -> list[str]:
    """Copy bundled default templates to the user or project templates directory.

    Args:
        local: If True, copy to ./.stackmix/templates/ (project-local).
               If False, copy to ~/.stackmix/templates/ (global, default).
        overwrite: If True, overwrite existing templates. If False, skip existing.

    Returns:
        List of template names that were copied.
    """
    package_path = get_package_templates_path()
    target = get_local_templates_path() if local else get_global_templates_path()
    target.mkdir(parents=True, exist_ok=True)

    copied: list[str] = []

    for template_name, template_dir in discover_template_dirs(package_path).items():
        dest_dir = target / template_name

        if dest_dir.exists() and not overwrite:
            continue

        if dest_dir.exists():
            shutil.rmtree(dest_dir)

        shutil.copytree(template_dir, dest_dir)
        copied.append(template_name)

    return copied
