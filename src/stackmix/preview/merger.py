"""Fold template manifests into a single project structure."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import reduce

from stackmix.preview.models import DirectoryNode, FileNode, ProjectStructure
from stackmix.preview.paths import base_name, normalize_path
from stackmix.templates.base import Selection, Template
from stackmix.templates.manifest import TemplateManifest


@dataclass(frozen=True)
class MergeResult:
    """Accumulated state of a manifest merge.

    `ledger` maps each normalized path to the templates that produce it,
    in selection order. Each call to `extend` returns a new result; the
    node objects themselves are shared between results.
    """

    structure: ProjectStructure = field(default_factory=ProjectStructure)
    ledger: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    estimated_size: int = 0
    total_files: int = 0
    merged: tuple[str, ...] = ()  # template names, in merge order

    def extend(self, template: Template, manifest: TemplateManifest) -> MergeResult:
        """Return a new result with one more template's manifest merged in."""
        name = template.name
        directories = dict(self.structure.directories)
        files = dict(self.structure.files)
        ledger = dict(self.ledger)

        for entry in manifest.entries:
            path = normalize_path(entry.path)
            if not path:
                # The project root itself is never a contribution
                continue

            contributors = ledger.get(path, ())
            if name not in contributors:
                ledger[path] = contributors + (name,)

            if entry.is_directory:
                if path not in directories:
                    directories[path] = DirectoryNode(
                        name=base_name(path), path=path, source=name
                    )
            elif path not in files:
                files[path] = FileNode(
                    name=base_name(path),
                    path=path,
                    size=entry.size,
                    source=name,
                    templated=entry.templated,
                    executable=entry.executable,
                )

        return MergeResult(
            structure=ProjectStructure(directories=directories, files=files),
            ledger=ledger,
            estimated_size=self.estimated_size + manifest.summary.total_size,
            total_files=self.total_files + manifest.summary.total_files,
            merged=self.merged + (name,),
        )

    def directory_only_paths(self) -> frozenset[str]:
        """Paths that only ever appeared as directories."""
        return frozenset(self.structure.directories) - frozenset(
            self.structure.files
        )


def merge_manifests(
    manifests: Iterable[tuple[Template, TemplateManifest]],
) -> MergeResult:
    """Merge (template, manifest) pairs in the order given.

    The first template to produce a path becomes that node's source.
    Totals are the sum of every manifest's own summary.
    """
    return reduce(
        lambda result, pair: result.extend(*pair), manifests, MergeResult()
    )


def collect_dependencies(selections: Iterable[Selection]) -> tuple[str, ...]:
    """Union of declared dependencies, de-duplicated in first-seen order."""
    seen: dict[str, None] = {}
    for selection in selections:
        for dep in selection.template.dependencies:
            seen.setdefault(dep, None)
    return tuple(seen)
