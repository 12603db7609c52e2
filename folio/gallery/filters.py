"""Filter evaluation. Filtering de-emphasises tiles, it never removes them."""

from collections.abc import Iterable

from folio.gallery.models import FilterState, Project


def matches(project: Project, filters: FilterState) -> bool:
    """Return True if the project passes every active filter.

    Category and technology are exact set-membership checks; the name filter
    is a case-insensitive substring check. Empty filters match everything.
    """
    if filters.category and filters.category not in project.categories:
        return False
    if filters.technology and filters.technology not in project.technologies:
        return False
    if filters.name and filters.name.lower() not in project.name.lower():
        return False
    return True


def match_map(projects: Iterable[Project], filters: FilterState) -> dict[int, bool]:
    """Match result per project id."""
    return {p.id: matches(p, filters) for p in projects}


def tile_opacity(matched: bool, dimmed: float = 0.5) -> float:
    return 1.0 if matched else dimmed
