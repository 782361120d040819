"""Project template definitions, discovery and manifests."""

from stackmix.templates.base import (
    EXCLUSIVE_CATEGORIES,
    Category,
    Selection,
    Template,
)
from stackmix.templates.loader import (
    TemplateGroup,
    copy_default_templates,
    get_all_templates,
    get_available_template_names,
    get_global_templates_path,
    get_local_templates_path,
    get_package_templates_path,
    get_template_by_name,
    get_template_search_paths,
    organize_by_category,
)
from stackmix.templates.manifest import (
    EntryType,
    FilesystemManifestProvider,
    ManifestEntry,
    ManifestFetchError,
    ManifestProvider,
    ManifestSummary,
    TemplateManifest,
)

__all__ = [
    "Category",
    "EXCLUSIVE_CATEGORIES",
    "EntryType",
    "FilesystemManifestProvider",
    "ManifestEntry",
    "ManifestFetchError",
    "ManifestProvider",
    "ManifestSummary",
    "Selection",
    "Template",
    "TemplateGroup",
    "TemplateManifest",
    "copy_default_templates",
    "get_all_templates",
    "get_available_template_names",
    "get_global_templates_path",
    "get_local_templates_path",
    "get_package_templates_path",
    "get_template_by_name",
    "get_template_search_paths",
    "organize_by_category",
]

# Default template names for reference
DEFAULT_TEMPLATES: tuple[str, ...] = (
    "base-docs",
    "docker-compose",
    "go-backend",
    "nextjs-frontend",
)
