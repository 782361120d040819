"""Template manifests: what a template would write for a given project."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from stackmix.config.schema import ProjectConfig
from stackmix.templates.base import Template
from stackmix.templates.loader import FILES_DIRNAME, get_template_by_name

logger = logging.getLogger(__name__)

TEMPLATED_SUFFIX = ".tmpl"


class ManifestFetchError(Exception):
    """Raised when a template's manifest cannot be produced."""

    def __init__(self, template_name: str, reason: str) -> None:
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Cannot preview template '{template_name}': {reason}")


class EntryType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class ManifestEntry:
    """A single file or directory a template produces.

    `path` is template-relative and not yet normalized.
    """

    path: str
    type: EntryType = EntryType.FILE
    size: int = 0
    templated: bool = False
    executable: bool = False

    @property
    def is_directory(self) -> bool:
        return self.type is EntryType.DIRECTORY


@dataclass(frozen=True)
class ManifestSummary:
    """Aggregate totals reported alongside a manifest."""

    total_files: int = 0
    total_directories: int = 0
    total_size: int = 0
    templated_files: int = 0
    executable_files: int = 0

    @classmethod
    def from_entries(cls, entries: Iterable[ManifestEntry]) -> ManifestSummary:
        """Count totals over a list of entries."""
        files = dirs = size = templated = executable = 0
        for entry in entries:
            if entry.is_directory:
                dirs += 1
                continue
            files += 1
            size += entry.size
            templated += int(entry.templated)
            executable += int(entry.executable)
        return cls(
            total_files=files,
            total_directories=dirs,
            total_size=size,
            templated_files=templated,
            executable_files=executable,
        )


@dataclass(frozen=True)
class TemplateManifest:
    """Concrete output listing of one template for one project config."""

    template_name: str
    entries: tuple[ManifestEntry, ...] = ()
    summary: ManifestSummary = ManifestSummary()
    variables: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_entries(
        cls,
        template_name: str,
        entries: Iterable[ManifestEntry],
        variables: Mapping[str, str] | None = None,
    ) -> TemplateManifest:
        """Build a manifest whose summary is computed from its entries."""
        items = tuple(entries)
        return cls(
            template_name=template_name,
            entries=items,
            summary=ManifestSummary.from_entries(items),
            variables=dict(variables or {}),
        )


class ManifestProvider(Protocol):
    """Source of template manifests consumed by the preview engine."""

    def preview_template(
        self, template_name: str, project_config: ProjectConfig
    ) -> TemplateManifest:
        """Return the manifest for a template or raise ManifestFetchError."""
        ...


def substitute_variables(path: str, variables: Mapping[str, str]) -> str:
    """Replace `{{key}}` tokens in a path with project values."""
    for key, value in variables.items():
        path = path.replace("{{" + key + "}}", value)
        path = path.replace("{{ " + key + " }}", value)
    return path


def scan_files_dir(
    files_dir: Path, variables: Mapping[str, str] | None = None
) -> list[ManifestEntry]:
    """Walk a template's files/ tree and describe every entry.

    Entries are emitted in sorted walk order. Files ending in `.tmpl` are
    marked templated and reported under their rendered name.
    """
    variables = variables or {}
    entries: list[ManifestEntry] = []
    if not files_dir.is_dir():
        return entries

    for dirpath, dirnames, filenames in os.walk(files_dir):
        dirnames.sort()
        current = Path(dirpath)
        for dirname in dirnames:
            rel = (current / dirname).relative_to(files_dir).as_posix()
            entries.append(
                ManifestEntry(
                    path=substitute_variables(rel, variables),
                    type=EntryType.DIRECTORY,
                )
            )
        for filename in sorted(filenames):
            full = current / filename
            info = full.stat()
            rel = full.relative_to(files_dir).as_posix()
            templated = rel.endswith(TEMPLATED_SUFFIX)
            if templated:
                rel = rel[: -len(TEMPLATED_SUFFIX)]
            entries.append(
                ManifestEntry(
                    path=substitute_variables(rel, variables),
                    type=EntryType.FILE,
                    size=info.st_size,
                    templated=templated,
                    executable=bool(
                        info.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
                    ),
                )
            )

    return entries


class FilesystemManifestProvider:
    """Manifest provider backed by template directories on disk.

    Templates are looked up in `templates` when given, otherwise through
    the regular local/global discovery.
    """

    def __init__(self, templates: Mapping[str, Template] | None = None) -> None:
        self._templates = templates

    def _resolve(self, template_name: str) -> Template | None:
        if self._templates is not None:
            return self._templates.get(template_name)
        return get_template_by_name(template_name)

    def preview_template(
        self, template_name: str, project_config: ProjectConfig
    ) -> TemplateManifest:
        template = self._resolve(template_name)
        if template is None:
            raise ManifestFetchError(template_name, "template not found")
        if template.source is None:
            raise ManifestFetchError(template_name, "template has no source directory")

        variables = project_config.variables()
        try:
            entries = scan_files_dir(template.source / FILES_DIRNAME, variables)
        except OSError as e:
            raise ManifestFetchError(template_name, str(e)) from e

        logger.debug(
            "Scanned %d entries for template %s", len(entries), template_name
        )
        return TemplateManifest.from_entries(template_name, entries, variables)
