"""Data types produced by the template combination engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from stackmix.templates.base import Selection


class Severity(str, Enum):
    """How serious a file conflict is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Sort rank: errors first, info last."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}


@dataclass
class FileNode:
    """A file in the combined project."""

    name: str
    path: str
    size: int = 0
    source: str = ""  # first template that created this file
    templated: bool = False
    executable: bool = False
    description: str = ""


@dataclass
class DirectoryNode:
    """A directory in the combined project.

    `children` and `files` are filled in by the tree builder.
    """

    name: str
    path: str
    source: str = ""  # first template that created this directory
    description: str = ""
    children: list[DirectoryNode] = field(default_factory=list)
    files: list[FileNode] = field(default_factory=list)


@dataclass
class ProjectStructure:
    """Merged view of all manifests.

    Keys are normalized paths. `root` is a tree over the same node objects
    held in `directories` and `files`.
    """

    directories: dict[str, DirectoryNode] = field(default_factory=dict)
    files: dict[str, FileNode] = field(default_factory=dict)
    root: DirectoryNode | None = None


@dataclass(frozen=True)
class FileConflict:
    """A path claimed by more than one selected template."""

    path: str
    templates: tuple[str, ...]  # contributors, in selection order
    severity: Severity
    message: str
    resolvable: bool

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


@dataclass(frozen=True)
class CombinedPreview:
    """Result of combining a list of template selections.

    `estimated_size` and `total_files` sum each template's own summary, so a
    path shared by several templates is counted once per template.
    """

    templates: tuple[Selection, ...]
    structure: ProjectStructure
    conflicts: tuple[FileConflict, ...] = ()
    dependencies: tuple[str, ...] = ()
    estimated_size: int = 0
    total_files: int = 0
    warnings: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()  # templates whose manifest could not be fetched

    @property
    def selected_names(self) -> frozenset[str]:
        return frozenset(s.template.name for s in self.templates)

    @property
    def missing_dependencies(self) -> tuple[str, ...]:
        """Declared dependencies that are not among the selections."""
        selected = self.selected_names
        return tuple(dep for dep in self.dependencies if dep not in selected)

    @property
    def error_conflicts(self) -> tuple[FileConflict, ...]:
        return tuple(c for c in self.conflicts if c.is_error)
