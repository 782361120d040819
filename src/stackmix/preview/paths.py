"""Path helpers shared by the merger and the tree builder."""

import posixpath


def normalize_path(path: str) -> str:
    """Normalize a template-relative path.

    Redundant separators, `.` and `..` segments are collapsed so that
    equivalent paths from different templates collide. The project root
    is the empty string.
    """
    cleaned = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
    if cleaned in (".", ".."):
        return ""
    return cleaned


def parent_path(path: str) -> str:
    """Return the normalized parent of `path`, "" for root-level entries."""
    parent = posixpath.dirname(normalize_path(path))
    return "" if parent == "." else parent


def base_name(path: str) -> str:
    """Last segment of a normalized path."""
    return posixpath.basename(normalize_path(path))
