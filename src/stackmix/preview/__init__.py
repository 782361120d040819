"""Template combination engine: merge, conflicts, validation and tree."""

from stackmix.preview.conflicts import classify_conflict, detect_conflicts
from stackmix.preview.manager import CombinationCancelledError, PreviewManager
from stackmix.preview.merger import MergeResult, collect_dependencies, merge_manifests
from stackmix.preview.models import (
    CombinedPreview,
    DirectoryNode,
    FileConflict,
    FileNode,
    ProjectStructure,
    Severity,
)
from stackmix.preview.tree import build_directory_tree
from stackmix.preview.validation import (
    CategoryConflictError,
    MissingDependencyError,
    NoTemplatesSelectedError,
    SelectionError,
    validate_selections,
)
from stackmix.preview.warnings import format_bytes, synthesize_warnings

__all__ = [
    "CategoryConflictError",
    "CombinationCancelledError",
    "CombinedPreview",
    "DirectoryNode",
    "FileConflict",
    "FileNode",
    "MergeResult",
    "MissingDependencyError",
    "NoTemplatesSelectedError",
    "PreviewManager",
    "ProjectStructure",
    "SelectionError",
    "Severity",
    "build_directory_tree",
    "classify_conflict",
    "collect_dependencies",
    "detect_conflicts",
    "format_bytes",
    "merge_manifests",
    "synthesize_warnings",
    "validate_selections",
]
