"""Tests for merging manifests into a project structure."""

from stackmix.preview.merger import MergeResult, collect_dependencies, merge_manifests
from stackmix.preview.paths import normalize_path, parent_path
from stackmix.templates.manifest import ManifestSummary
from tests._fixtures.manifests import make_manifest, make_template, select


class TestPaths:
    """Tests for path normalization."""

    def test_normalize_path(self) -> None:
        assert normalize_path("./src//app/./main.go") == "src/app/main.go"
        assert normalize_path("src/../README.md") == "README.md"
        assert normalize_path("/README.md") == "README.md"
        assert normalize_path("docs\\guide.md") == "docs/guide.md"
        assert normalize_path(".") == ""
        assert normalize_path("") == ""

    def test_parent_path(self) -> None:
        assert parent_path("README.md") == ""
        assert parent_path("a/b/c.txt") == "a/b"
        assert parent_path("./a//b") == "a"


class TestMergeManifests:
    """Tests for merge_manifests."""

    def test_first_template_is_source(self) -> None:
        """Test that a shared path keeps the first contributor as source."""
        backend = make_template("go-backend")
        frontend = make_template("nextjs-frontend")
        result = merge_manifests(
            [
                (backend, make_manifest("go-backend", ["main.go", "README.md"])),
                (frontend, make_manifest("nextjs-frontend", ["README.md", "index.html"])),
            ]
        )

        files = result.structure.files
        assert set(files) == {"main.go", "README.md", "index.html"}
        assert files["main.go"].source == "go-backend"
        assert files["index.html"].source == "nextjs-frontend"
        assert files["README.md"].source == "go-backend"
        assert result.ledger["README.md"] == ("go-backend", "nextjs-frontend")
        assert result.ledger["main.go"] == ("go-backend",)
        assert result.merged == ("go-backend", "nextjs-frontend")

    def test_equivalent_paths_collide(self) -> None:
        a, b = make_template("a"), make_template("b")
        result = merge_manifests(
            [
                (a, make_manifest("a", ["./cmd/main.go"])),
                (b, make_manifest("b", ["cmd//main.go"])),
            ]
        )
        assert list(result.structure.files) == ["cmd/main.go"]
        assert result.ledger["cmd/main.go"] == ("a", "b")

    def test_directories_tracked_separately(self) -> None:
        a = make_template("a")
        result = merge_manifests(
            [(a, make_manifest("a", ["docs/guide.md"], directories=["docs", "."]))]
        )
        assert set(result.structure.directories) == {"docs"}
        assert result.structure.directories["docs"].name == "docs"
        assert "" not in result.ledger
        assert result.directory_only_paths() == frozenset({"docs"})

    def test_template_listing_path_twice_counts_once(self) -> None:
        a = make_template("a")
        result = merge_manifests([(a, make_manifest("a", ["x.txt", "./x.txt"]))])
        assert result.ledger["x.txt"] == ("a",)

    def test_totals_sum_template_summaries(self) -> None:
        """Test that shared files are counted once per template."""
        a, b = make_template("a"), make_template("b")
        result = merge_manifests(
            [
                (a, make_manifest("a", ["shared.cfg", "a.cfg"], file_size=100)),
                (b, make_manifest("b", ["shared.cfg"], file_size=50)),
            ]
        )
        assert result.total_files == 3
        assert result.estimated_size == 250
        assert len(result.structure.files) == 2

    def test_totals_use_reported_summary(self) -> None:
        a = make_template("a")
        summary = ManifestSummary(total_files=7, total_size=4096)
        result = merge_manifests([(a, make_manifest("a", ["x"], summary=summary))])
        assert result.total_files == 7
        assert result.estimated_size == 4096

    def test_extend_returns_new_result(self) -> None:
        a = make_template("a")
        empty = MergeResult()
        extended = empty.extend(a, make_manifest("a", ["x.py"]))

        assert extended is not empty
        assert empty.structure.files == {}
        assert dict(empty.ledger) == {}
        assert "x.py" in extended.structure.files

    def test_empty_merge(self) -> None:
        result = merge_manifests([])
        assert result.structure.files == {}
        assert result.total_files == 0


class TestCollectDependencies:
    """Tests for dependency aggregation."""

    def test_union_first_seen_order(self) -> None:
        selections = select(
            make_template("api", dependencies=["proto", "db"]),
            make_template("worker", dependencies=["db", "queue"]),
            make_template("proto"),
        )
        assert collect_dependencies(selections) == ("proto", "db", "queue")
