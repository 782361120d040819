"""Detect and classify paths claimed by more than one template."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence

from stackmix.preview.models import FileConflict, Severity

logger = logging.getLogger(__name__)

CODE_SUFFIXES: tuple[str, ...] = (".go", ".js", ".ts")
DOC_SUFFIXES: tuple[str, ...] = (".md", ".txt")

CODE_CONFLICT_MESSAGE = "Code file conflict - manual resolution required"
DOC_CONFLICT_MESSAGE = "Documentation file will be merged"


def classify_conflict(path: str, templates: Sequence[str]) -> FileConflict:
    """Build the conflict record for a path with several contributors.

    Severity depends only on the path suffix:
    code files are errors, documentation is info, anything else a warning.
    """
    contributors = tuple(templates)
    if path.endswith(CODE_SUFFIXES):
        return FileConflict(
            path=path,
            templates=contributors,
            severity=Severity.ERROR,
            message=CODE_CONFLICT_MESSAGE,
            resolvable=False,
        )
    if path.endswith(DOC_SUFFIXES):
        return FileConflict(
            path=path,
            templates=contributors,
            severity=Severity.INFO,
            message=DOC_CONFLICT_MESSAGE,
            resolvable=True,
        )
    return FileConflict(
        path=path,
        templates=contributors,
        severity=Severity.WARNING,
        message="File created by multiple templates: " + ", ".join(contributors),
        resolvable=True,
    )


def detect_conflicts(
    ledger: Mapping[str, Sequence[str]],
    exclude: Collection[str] = (),
) -> list[FileConflict]:
    """Return one conflict per ledger path with two or more contributors.

    Paths in `exclude` (typically directory-only paths) are skipped.
    The result is ordered by severity rank, then by path.
    """
    conflicts: list[FileConflict] = []
    for path, templates in ledger.items():
        if len(templates) < 2:
            continue
        if path in exclude:
            logger.debug("Ignoring shared directory %s", path)
            continue
        conflicts.append(classify_conflict(path, templates))

    conflicts.sort(key=lambda c: (c.severity.rank, c.path))
    return conflicts
