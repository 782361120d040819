"""Category and dependency checks over a list of template selections."""

from __future__ import annotations

from collections.abc import Sequence

from stackmix.templates.base import EXCLUSIVE_CATEGORIES, Category, Selection


class SelectionError(Exception):
    """Base exception for invalid template selections."""


class NoTemplatesSelectedError(SelectionError):
    """Raised when the selection list is empty."""

    def __init__(self) -> None:
        super().__init__("no templates selected")


class CategoryConflictError(SelectionError):
    """Raised when an exclusive category has more than one selection."""

    def __init__(self, category: Category, templates: Sequence[str]) -> None:
        self.category = category
        self.templates = tuple(templates)
        name = category.value
        super().__init__(
            f"multiple {name} templates selected - only one {name} template "
            f"is allowed: {', '.join(self.templates)}"
        )


class MissingDependencyError(SelectionError):
    """Raised when a selected template depends on one that is not selected."""

    def __init__(self, template: str, dependency: str) -> None:
        self.template = template
        self.dependency = dependency
        super().__init__(
            f"template '{template}' requires dependency '{dependency}' "
            "which is not selected"
        )


def validate_selections(selections: Sequence[Selection]) -> None:
    """Check that a selection list can be combined.

    Raises the first violation found:
    1. NoTemplatesSelectedError for an empty list.
    2. CategoryConflictError when frontend or backend is selected twice.
    3. MissingDependencyError when a declared dependency does not name
       another selected template.
    """
    if not selections:
        raise NoTemplatesSelectedError()

    by_category: dict[Category, list[str]] = {}
    for selection in selections:
        by_category.setdefault(selection.template.category, []).append(
            selection.template.name
        )

    for category in EXCLUSIVE_CATEGORIES:
        names = by_category.get(category, [])
        if len(names) > 1:
            raise CategoryConflictError(category, names)

    for index, selection in enumerate(selections):
        others = {
            other.template.name
            for other_index, other in enumerate(selections)
            if other_index != index
        }
        for dependency in selection.template.dependencies:
            if dependency not in others:
                raise MissingDependencyError(selection.template.name, dependency)
