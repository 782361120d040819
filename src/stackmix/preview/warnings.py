"""Human-readable advisories for a combined preview."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from stackmix.preview.models import FileConflict

SIZE_WARNING_BYTES = 100 * 1024 * 1024
FILE_WARNING_COUNT = 1000


def format_bytes(size: int) -> str:
    """Format a byte count with binary (1024-based) units."""
    unit = 1024
    if size < unit:
        return f"{size} B"
    div, exp = unit, 0
    n = size // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{size / div:.1f} {'KMGTPE'[exp]}B"


def synthesize_warnings(
    dependencies: Sequence[str],
    selected: Iterable[str],
    estimated_size: int,
    total_files: int,
    conflicts: Sequence[FileConflict],
    size_threshold: int = SIZE_WARNING_BYTES,
    file_threshold: int = FILE_WARNING_COUNT,
) -> list[str]:
    """Derive warnings from totals, dependencies and conflicts.

    Each rule fires independently; the result may be empty.
    """
    warnings: list[str] = []
    selected_names = set(selected)

    for dep in dependencies:
        if dep not in selected_names:
            warnings.append(f"Dependency '{dep}' is required but not selected")

    if estimated_size > size_threshold:
        warnings.append(
            f"Large project size: {format_bytes(estimated_size)} "
            f"(above {format_bytes(size_threshold)})"
        )

    if total_files > file_threshold:
        warnings.append(
            f"Large number of files: {total_files} (above {file_threshold})"
        )

    error_count = sum(1 for c in conflicts if c.is_error)
    if error_count:
        noun = "conflict" if error_count == 1 else "conflicts"
        warnings.append(f"{error_count} file {noun} requiring manual resolution")

    return warnings
