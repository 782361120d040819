"""Configuration schema and validation for stackmix."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

MIB = 1024 * 1024


@dataclass
class StackmixConfig:
    """Stackmix configuration schema.

    None values indicate "not set" and will use defaults or be inherited.
    """

    # Name of the root node in the combined tree
    project_name: str | None = None

    # Whether directories created by several templates count as conflicts
    directory_conflicts: bool | None = None

    # Warning thresholds
    size_warning_bytes: int | None = None
    file_warning_count: int | None = None

    def merge(self, other: StackmixConfig) -> StackmixConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new StackmixConfig instance.
        """
        return StackmixConfig(
            project_name=(
                other.project_name
                if other.project_name is not None
                else self.project_name
            ),
            directory_conflicts=(
                other.directory_conflicts
                if other.directory_conflicts is not None
                else self.directory_conflicts
            ),
            size_warning_bytes=(
                other.size_warning_bytes
                if other.size_warning_bytes is not None
                else self.size_warning_bytes
            ),
            file_warning_count=(
                other.file_warning_count
                if other.file_warning_count is not None
                else self.file_warning_count
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StackmixConfig:
        """Create a StackmixConfig from a dictionary.

        Unknown keys are ignored. Type validation is performed.
        """
        project_name_raw = data.get("project_name")
        project_name = str(project_name_raw) if project_name_raw else None
        directory_conflicts_raw = data.get("directory_conflicts")
        directory_conflicts = (
            bool(directory_conflicts_raw)
            if directory_conflicts_raw is not None
            else None
        )
        size_raw = data.get("size_warning_bytes")
        size_warning_bytes = int(size_raw) if size_raw is not None else None
        count_raw = data.get("file_warning_count")
        file_warning_count = int(count_raw) if count_raw is not None else None

        return cls(
            project_name=project_name,
            directory_conflicts=directory_conflicts,
            size_warning_bytes=size_warning_bytes,
            file_warning_count=file_warning_count,
        )


@dataclass(frozen=True)
class ProjectConfig:
    """Per-project values handed to the manifest provider.

    Template paths may reference these as `{{name}}`, `{{organization}}`,
    `{{description}}` and `{{license}}`.
    """

    name: str = "project"
    organization: str = ""
    description: str = ""
    license: str = "MIT"
    output_path: str = "."

    def variables(self) -> dict[str, str]:
        """Return the substitution variables for template paths."""
        return {
            "name": self.name,
            "organization": self.organization,
            "description": self.description,
            "license": self.license,
        }


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = StackmixConfig(
    project_name="project",
    directory_conflicts=True,
    size_warning_bytes=100 * MIB,
    file_warning_count=1000,
)
