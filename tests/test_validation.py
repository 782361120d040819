"""Tests for category and dependency validation."""

import pytest

from stackmix.preview.validation import (
    CategoryConflictError,
    MissingDependencyError,
    NoTemplatesSelectedError,
    SelectionError,
    validate_selections,
)
from stackmix.templates.base import Category
from tests._fixtures.manifests import make_template, select


class TestValidateSelections:
    """Tests for validate_selections."""

    def test_empty_selection(self) -> None:
        with pytest.raises(NoTemplatesSelectedError, match="no templates selected"):
            validate_selections([])

    def test_two_backends(self) -> None:
        selections = select(
            make_template("backend-gin", Category.BACKEND),
            make_template("backend-echo", Category.BACKEND),
        )
        with pytest.raises(CategoryConflictError) as exc_info:
            validate_selections(selections)

        assert exc_info.value.category is Category.BACKEND
        assert "backend" in str(exc_info.value)
        assert exc_info.value.templates == ("backend-gin", "backend-echo")

    def test_two_frontends(self) -> None:
        selections = select(
            make_template("react", Category.FRONTEND),
            make_template("vue", Category.FRONTEND),
        )
        with pytest.raises(CategoryConflictError, match="frontend"):
            validate_selections(selections)

    def test_one_per_category_is_fine(self) -> None:
        selections = select(
            make_template("web", Category.FRONTEND),
            make_template("api", Category.BACKEND),
            make_template("app", Category.MOBILE),
        )
        validate_selections(selections)

    def test_non_exclusive_categories_may_repeat(self) -> None:
        selections = select(
            make_template("ios", Category.MOBILE),
            make_template("android", Category.MOBILE),
            make_template("k8s", Category.INFRASTRUCTURE),
            make_template("terraform", Category.INFRASTRUCTURE),
        )
        validate_selections(selections)

    def test_missing_dependency(self) -> None:
        selections = select(make_template("api", dependencies=["shared-proto"]))
        with pytest.raises(MissingDependencyError) as exc_info:
            validate_selections(selections)

        error = exc_info.value
        assert error.template == "api"
        assert error.dependency == "shared-proto"
        assert "api" in str(error)
        assert "shared-proto" in str(error)

    def test_satisfied_dependency(self) -> None:
        selections = select(
            make_template("api", dependencies=["shared-proto"]),
            make_template("shared-proto"),
        )
        validate_selections(selections)

    def test_self_dependency_is_not_satisfied(self) -> None:
        selections = select(make_template("api", dependencies=["api"]))
        with pytest.raises(MissingDependencyError):
            validate_selections(selections)

    def test_category_checked_before_dependencies(self) -> None:
        selections = select(
            make_template("a", Category.BACKEND, dependencies=["missing"]),
            make_template("b", Category.BACKEND),
        )
        with pytest.raises(CategoryConflictError):
            validate_selections(selections)

    def test_first_unmet_dependency_reported(self) -> None:
        selections = select(
            make_template("a", dependencies=["x"]),
            make_template("b", dependencies=["y"]),
        )
        with pytest.raises(MissingDependencyError) as exc_info:
            validate_selections(selections)
        assert exc_info.value.dependency == "x"

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(SelectionError):
            validate_selections([])
