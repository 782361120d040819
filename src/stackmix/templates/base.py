"""Base template definitions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class Category(str, Enum):
    """Template category. Unknown categories map to OTHER."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    INFRASTRUCTURE = "infrastructure"
    BASE = "base"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> Category:
        """Convert a raw category value, falling back to OTHER."""
        if isinstance(value, Category):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.OTHER


# At most one selected template per category in this set
EXCLUSIVE_CATEGORIES: tuple[Category, ...] = (Category.FRONTEND, Category.BACKEND)


@dataclass(frozen=True)
class Template:
    """Definition of a project template.

    A template produces a set of files and directories and declares which
    category it belongs to and which other templates it depends on.
    """

    name: str  # unique, e.g. "go-backend"
    category: Category = Category.OTHER
    technology: str = ""
    version: str = ""
    dependencies: tuple[str, ...] = ()  # names of other templates
    tags: tuple[str, ...] = ()
    display_name: str = ""
    description: str = ""
    source: Path | None = None  # Path where template was loaded from

    @property
    def label(self) -> str:
        """Human-readable name, falling back to the template name."""
        return self.display_name or self.name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "name": self.name,
            "category": self.category.value,
        }
        if self.display_name:
            result["display_name"] = self.display_name
        if self.description:
            result["description"] = self.description
        if self.technology:
            result["technology"] = self.technology
        if self.version:
            result["version"] = self.version
        if self.dependencies:
            result["dependencies"] = list(self.dependencies)
        if self.tags:
            result["tags"] = list(self.tags)
        # source is runtime-only, not serialized
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> Template:
        """Create Template from dictionary (parsed template.yaml)."""
        deps_raw = data.get("dependencies", [])
        if isinstance(deps_raw, list):
            dependencies = tuple(str(d) for d in deps_raw)
        else:
            dependencies = ()

        tags_raw = data.get("tags", [])
        if isinstance(tags_raw, list):
            tags = tuple(str(t) for t in tags_raw)
        else:
            tags = ()

        version = data.get("version")

        return cls(
            name=str(data.get("name", "")),
            category=Category.parse(data.get("category")),
            technology=str(data.get("technology", "")),
            version=str(version) if version is not None else "",
            dependencies=dependencies,
            tags=tags,
            display_name=str(data.get("display_name", "")),
            description=str(data.get("description", "")),
            source=source,
        )


@dataclass(frozen=True)
class Selection:
    """A template chosen by the user, with free-form per-template options."""

    template: Template
    selected: bool = True
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.template.name

    @classmethod
    def of(cls, template: Template, **options: Any) -> Selection:
        """Shorthand for a selected template."""
        return cls(template=template, options=options)
