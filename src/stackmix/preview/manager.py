"""Combine selected templates into a single previewable project."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from stackmix.config.schema import DEFAULT_CONFIG, ProjectConfig, StackmixConfig
from stackmix.preview.conflicts import detect_conflicts
from stackmix.preview.merger import collect_dependencies, merge_manifests
from stackmix.preview.models import CombinedPreview
from stackmix.preview.tree import DEFAULT_ROOT_NAME, with_tree
from stackmix.preview.validation import NoTemplatesSelectedError, validate_selections
from stackmix.preview.warnings import (
    FILE_WARNING_COUNT,
    SIZE_WARNING_BYTES,
    synthesize_warnings,
)
from stackmix.templates.base import Selection, Template
from stackmix.templates.manifest import ManifestProvider, TemplateManifest

logger = logging.getLogger(__name__)


class CombinationCancelledError(Exception):
    """Raised when a combination is cancelled between manifest fetches."""


class PreviewManager:
    """Builds combined previews from template selections.

    Manifests are fetched one template at a time from the provider; a
    failed fetch is logged and that template is left out of the merge.
    """

    def __init__(
        self,
        provider: ManifestProvider,
        config: StackmixConfig | None = None,
    ) -> None:
        self._provider = provider
        self._config = (
            DEFAULT_CONFIG.merge(config) if config is not None else DEFAULT_CONFIG
        )

    @property
    def config(self) -> StackmixConfig:
        return self._config

    def validate_selections(self, selections: Sequence[Selection]) -> None:
        """Check category exclusivity and dependency closure."""
        validate_selections(selections)

    def fetch_manifests(
        self,
        selections: Sequence[Selection],
        project_config: ProjectConfig,
        cancel: threading.Event | None = None,
    ) -> tuple[list[tuple[Template, TemplateManifest]], list[str]]:
        """Fetch each selection's manifest.

        Returns the (template, manifest) pairs that succeeded, in selection
        order, and the names of templates that were skipped.
        """
        fetched: list[tuple[Template, TemplateManifest]] = []
        skipped: list[str] = []

        for selection in selections:
            if cancel is not None and cancel.is_set():
                logger.info(
                    "Combination cancelled after %d of %d templates",
                    len(fetched) + len(skipped),
                    len(selections),
                )
                raise CombinationCancelledError("template combination cancelled")

            template = selection.template
            try:
                manifest = self._provider.preview_template(
                    template.name, project_config
                )
            except Exception as e:
                logger.warning(
                    "Failed to preview template %s: %s", template.name, e
                )
                skipped.append(template.name)
                continue

            fetched.append((template, manifest))

        return fetched, skipped

    def combine_selections(
        self,
        selections: Sequence[Selection],
        project_config: ProjectConfig | None = None,
        cancel: threading.Event | None = None,
    ) -> CombinedPreview:
        """Merge the selected templates' manifests into one preview.

        Raises NoTemplatesSelectedError for an empty list and
        CombinationCancelledError if `cancel` is set between fetches.
        Per-template fetch failures never fail the combination.
        """
        if not selections:
            raise NoTemplatesSelectedError()

        root_name = self._config.project_name or DEFAULT_ROOT_NAME
        if project_config is None:
            project_config = ProjectConfig(name=root_name)

        fetched, skipped = self.fetch_manifests(selections, project_config, cancel)
        merged = merge_manifests(fetched)

        exclude = (
            frozenset()
            if self._config.directory_conflicts is not False
            else merged.directory_only_paths()
        )
        conflicts = tuple(detect_conflicts(merged.ledger, exclude=exclude))
        dependencies = collect_dependencies(selections)

        warnings = synthesize_warnings(
            dependencies=dependencies,
            selected=(s.template.name for s in selections),
            estimated_size=merged.estimated_size,
            total_files=merged.total_files,
            conflicts=conflicts,
            size_threshold=self._config.size_warning_bytes or SIZE_WARNING_BYTES,
            file_threshold=self._config.file_warning_count or FILE_WARNING_COUNT,
        )

        logger.debug(
            "Combined %d templates: %d files, %d directories, %d conflicts",
            len(merged.merged),
            len(merged.structure.files),
            len(merged.structure.directories),
            len(conflicts),
        )

        return CombinedPreview(
            templates=tuple(selections),
            structure=with_tree(merged.structure, project_config.name or root_name),
            conflicts=conflicts,
            dependencies=dependencies,
            estimated_size=merged.estimated_size,
            total_files=merged.total_files,
            warnings=tuple(warnings),
            skipped=tuple(skipped),
        )
