"""Tests for warning synthesis."""

from stackmix.preview.conflicts import classify_conflict
from stackmix.preview.warnings import format_bytes, synthesize_warnings

MIB = 1024 * 1024


def test_format_bytes() -> None:
    assert format_bytes(0) == "0 B"
    assert format_bytes(1023) == "1023 B"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(120 * MIB) == "120.0 MB"
    assert format_bytes(3 * 1024 * MIB) == "3.0 GB"


class TestSynthesizeWarnings:
    """Tests for synthesize_warnings."""

    def test_no_warnings(self) -> None:
        assert synthesize_warnings([], ["a"], 10, 1, []) == []

    def test_missing_dependency(self) -> None:
        warnings = synthesize_warnings(["proto", "a"], ["a"], 0, 0, [])
        assert warnings == ["Dependency 'proto' is required but not selected"]

    def test_large_size(self) -> None:
        warnings = synthesize_warnings([], [], 120 * MIB, 0, [])
        assert len(warnings) == 1
        assert "120.0 MB" in warnings[0]
        assert "100.0 MB" in warnings[0]

    def test_size_at_threshold_is_fine(self) -> None:
        assert synthesize_warnings([], [], 100 * MIB, 0, []) == []

    def test_many_files(self) -> None:
        warnings = synthesize_warnings([], [], 0, 1001, [])
        assert warnings == ["Large number of files: 1001 (above 1000)"]
        assert synthesize_warnings([], [], 0, 1000, []) == []

    def test_error_conflicts_counted_once(self) -> None:
        conflicts = [
            classify_conflict("a.go", ["x", "y"]),
            classify_conflict("b.ts", ["x", "y"]),
            classify_conflict("README.md", ["x", "y"]),
        ]
        warnings = synthesize_warnings([], [], 0, 0, conflicts)
        assert warnings == ["2 file conflicts requiring manual resolution"]

    def test_custom_thresholds(self) -> None:
        warnings = synthesize_warnings(
            [], [], 2048, 3, [], size_threshold=1024, file_threshold=2
        )
        assert len(warnings) == 2

    def test_all_rules_fire_together(self) -> None:
        warnings = synthesize_warnings(
            ["missing"],
            ["a"],
            200 * MIB,
            5000,
            [classify_conflict("main.go", ["a", "b"])],
        )
        assert len(warnings) == 4
        assert warnings[-1] == "1 file conflict requiring manual resolution"
