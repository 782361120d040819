"""Tests for building the directory tree."""

from stackmix.preview.merger import merge_manifests
from stackmix.preview.models import DirectoryNode, FileNode, ProjectStructure
from stackmix.preview.tree import build_directory_tree, with_tree
from tests._fixtures.manifests import make_manifest, make_template


def _shape(node: DirectoryNode) -> tuple:
    return (
        node.name,
        tuple(_shape(child) for child in node.children),
        tuple(f.name for f in node.files),
    )


def _structure() -> ProjectStructure:
    a, b = make_template("a"), make_template("b")
    return merge_manifests(
        [
            (
                a,
                make_manifest(
                    "a",
                    ["src/zeta.py", "src/alpha.py", "README.md", "src/lib/util.py"],
                    directories=["src", "src/lib"],
                ),
            ),
            (b, make_manifest("b", ["Makefile", "docs/guide.md"], directories=["docs"])),
        ]
    ).structure


class TestBuildDirectoryTree:
    """Tests for build_directory_tree."""

    def test_root_named_for_project(self) -> None:
        root = build_directory_tree(ProjectStructure(), "shop")
        assert root.name == "shop"
        assert root.path == ""
        assert root.children == []

    def test_nesting_and_sorting(self) -> None:
        root = build_directory_tree(_structure())

        assert [c.name for c in root.children] == ["docs", "src"]
        assert [f.name for f in root.files] == ["Makefile", "README.md"]
        src = root.children[1]
        assert [f.name for f in src.files] == ["alpha.py", "zeta.py"]
        assert [c.name for c in src.children] == ["lib"]
        assert [f.name for f in src.children[0].files] == ["util.py"]

    def test_tree_shares_nodes_with_maps(self) -> None:
        structure = _structure()
        root = build_directory_tree(structure)
        assert root.children[1] is structure.directories["src"]
        assert root.files[0] is structure.files["Makefile"]

    def test_orphans_attach_to_root(self) -> None:
        """Test that entries without a registered parent hang off the root."""
        structure = ProjectStructure(
            directories={"a/b": DirectoryNode(name="b", path="a/b", source="t")},
            files={"x/y.txt": FileNode(name="y.txt", path="x/y.txt", source="t")},
        )
        root = build_directory_tree(structure)

        assert [c.path for c in root.children] == ["a/b"]
        assert [f.path for f in root.files] == ["x/y.txt"]

    def test_rebuild_is_identical(self) -> None:
        structure = _structure()
        first = _shape(build_directory_tree(structure))
        second = _shape(build_directory_tree(structure))
        assert first == second

    def test_independent_of_merge_order(self) -> None:
        a, b = make_template("a"), make_template("b")
        ma = make_manifest("a", ["z.txt", "m/1.txt"], directories=["m"])
        mb = make_manifest("b", ["a.txt", "m/0.txt"], directories=["m"])

        forward = merge_manifests([(a, ma), (b, mb)]).structure
        backward = merge_manifests([(b, mb), (a, ma)]).structure
        assert _shape(build_directory_tree(forward)) == _shape(
            build_directory_tree(backward)
        )

    def test_with_tree_keeps_maps(self) -> None:
        structure = _structure()
        built = with_tree(structure, "demo")
        assert built.root is not None
        assert built.root.name == "demo"
        assert built.files is structure.files
        assert built.directories is structure.directories
