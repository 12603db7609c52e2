"""Random tile layout."""

import random
from collections.abc import Iterable
from typing import Optional

from folio.gallery.models import Position, Project, Viewport


def arrange(
    projects: Iterable[Project],
    viewport: Viewport,
    tile_width: float = 300,
    tile_height: float = 125,
    rng: Optional[random.Random] = None,
) -> dict[int, Position]:
    """Assign every project a fresh random position.

    x is drawn from [0, width - tile_width), y from [0, height - tile_height)
    and depth from [0, 1). Tiles may overlap. A viewport smaller than the
    tile budget pins that axis to 0.

    Args:
        projects: Projects to place.
        viewport: Current window size.
        tile_width: Horizontal space reserved for a tile.
        tile_height: Vertical space reserved for a tile.
        rng: Random source, the module generator by default.

    Returns:
        Mapping of project id to Position covering every project.
    """
    rng = rng or random.Random()
    span_x = max(viewport.width - tile_width, 0)
    span_y = max(viewport.height - tile_height, 0)

    return {
        p.id: Position(
            x=rng.random() * span_x,
            y=rng.random() * span_y,
            depth=rng.random(),
        )
        for p in projects
    }


def offscreen_position(
    viewport: Viewport,
    margin: float = 150,
    rng: Optional[random.Random] = None,
) -> Position:
    """Pick a starting point just outside a random edge of the viewport."""
    rng = rng or random.Random()
    edge = rng.randrange(4)

    if edge == 0:  # top
        return Position(x=rng.random() * viewport.width, y=-margin)
    if edge == 1:  # right
        return Position(x=viewport.width + margin, y=rng.random() * viewport.height)
    if edge == 2:  # bottom
        return Position(x=rng.random() * viewport.width, y=viewport.height + margin)
    return Position(x=-margin, y=rng.random() * viewport.height)
