"""Gallery data model."""

from dataclasses import dataclass, replace
from enum import Enum


class Phase(str, Enum):
    """View phase. The machine only moves forward: intro, loading, gallery."""

    INTRO = "intro"
    LOADING = "loading"
    GALLERY = "gallery"


@dataclass(frozen=True)
class Project:
    """One portfolio entry. Immutable after load."""

    id: int
    name: str
    categories: frozenset[str]
    technologies: frozenset[str]
    src: str
    link: str


@dataclass(frozen=True)
class Position:
    """Screen position of a tile.

    ``depth`` lies in [0, 1) and only ever shrinks the tile.
    """

    x: float
    y: float
    depth: float = 0.0

    def scale(self, factor: float = 0.3) -> float:
        return 1 - self.depth * factor


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


FILTER_FIELDS = ("category", "technology", "name")


@dataclass(frozen=True)
class FilterState:
    """Active filters. An empty string matches everything."""

    category: str = ""
    technology: str = ""
    name: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.category or self.technology or self.name)

    def with_field(self, field: str, value: str) -> "FilterState":
        if field not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter field '{field}'")
        return replace(self, **{field: value})

    def cleared(self) -> "FilterState":
        return FilterState()
