"""Build the presentation tree from the flat path maps."""

from __future__ import annotations

from stackmix.preview.models import DirectoryNode, ProjectStructure
from stackmix.preview.paths import parent_path

DEFAULT_ROOT_NAME = "project"


def build_directory_tree(
    structure: ProjectStructure, root_name: str = DEFAULT_ROOT_NAME
) -> DirectoryNode:
    """Attach every directory and file to its parent and return the root.

    Nodes whose parent directory was never registered are attached to the
    root. Children and files are sorted by name at every level, so the
    result does not depend on merge order. Rebuilding replaces any
    previously attached children.
    """
    root = DirectoryNode(name=root_name, path="")

    for directory in structure.directories.values():
        directory.children = []
        directory.files = []

    for path in sorted(structure.directories):
        if not path:
            continue
        parent = structure.directories.get(parent_path(path), root)
        parent.children.append(structure.directories[path])

    for path in sorted(structure.files):
        parent = structure.directories.get(parent_path(path), root)
        parent.files.append(structure.files[path])

    sort_tree(root)
    return root


def sort_tree(node: DirectoryNode) -> None:
    """Recursively sort directory contents by name."""
    node.children.sort(key=lambda child: (child.name, child.path))
    node.files.sort(key=lambda f: (f.name, f.path))
    for child in node.children:
        sort_tree(child)


def with_tree(
    structure: ProjectStructure, root_name: str = DEFAULT_ROOT_NAME
) -> ProjectStructure:
    """Return a structure over the same maps with its root tree built."""
    root = build_directory_tree(structure, root_name)
    return ProjectStructure(
        directories=structure.directories, files=structure.files, root=root
    )
