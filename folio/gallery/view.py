"""Gallery view model.

The view moves through three phases, ``intro -> loading -> gallery``, driven
by image preload progress and the user's "View" action. Once in the gallery
it owns the tile layout, the filters and the per-tile drag state. Every
handler runs to completion on the caller's thread; timers come from an
injected scheduler.
"""

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from folio.config import GallerySettings
from folio.errors import InvalidTransition
from folio.gallery.catalog import GalleryCatalog
from folio.gallery.drag import DragTracker
from folio.gallery.filters import matches, tile_opacity
from folio.gallery.layout import arrange, offscreen_position
from folio.gallery.models import FilterState, Phase, Position, Project, Viewport
from folio.gallery.timers import Debouncer, OneShotFlag, Scheduler, TimerHandle


@dataclass(frozen=True)
class Tile:
    """Render state of one project tile."""

    project: Project
    position: Position
    origin: Position
    scale: float
    opacity: float
    matched: bool
    duration: float


class GalleryView:
    """Headless model of the animated portfolio gallery."""

    def __init__(
        self,
        catalog: GalleryCatalog,
        scheduler: Scheduler,
        viewport: Viewport,
        settings: Optional[GallerySettings] = None,
        rng: Optional[random.Random] = None,
        navigate: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the view.

        Args:
            catalog: Projects and filter options.
            scheduler: Timer source for debounces and the settle delay.
            viewport: Initial window size.
            settings: Gallery tunables.
            rng: Random source for layout and entry positions.
            navigate: Called with a project's link when a click navigates.
        """
        self.catalog = catalog
        self.settings = settings or GallerySettings()
        self.viewport = viewport
        self.navigate = navigate or (lambda link: None)

        self._scheduler = scheduler
        self._rng = rng or random.Random()

        self.phase: Optional[Phase] = None
        self.progress = 0.0
        self.filters = FilterState()
        self.positions: dict[int, Position] = {}
        self.origins: dict[int, Position] = {}
        self.layout_passes = 0
        self.first_animation = OneShotFlag()

        self._settled: set[int] = set()
        self._settle_handle: Optional[TimerHandle] = None
        self._drags: dict[int, DragTracker] = {}
        self._name_debounce = Debouncer(
            scheduler, self.settings.name_debounce, self._apply_name_filter
        )
        self._resize_debounce = Debouncer(
            scheduler, self.settings.resize_debounce, self._apply_resize
        )

    # -- lifecycle -------------------------------------------------------

    def mount(self) -> list[tuple[int, str]]:
        """Enter the intro phase and start preloading.

        Returns:
            ``(project_id, src)`` pairs to preload. Report each one back
            through ``image_loaded`` or ``image_failed``.
        """
        if self.phase is not None:
            raise InvalidTransition("View is already mounted")

        self.phase = Phase.INTRO
        if not self.catalog.projects:
            self.progress = 100.0
        return [(p.id, p.src) for p in self.catalog]

    def close(self) -> None:
        """Cancel every pending timer."""
        self._name_debounce.cancel()
        self._resize_debounce.cancel()
        if self._settle_handle is not None:
            self._settle_handle.cancel()
            self._settle_handle = None

    # -- preload progress ------------------------------------------------

    @property
    def complete(self) -> bool:
        return self.progress >= 100

    def image_loaded(self, project_id: int) -> None:
        """Count one project's finished image towards progress."""
        self._settle(project_id)

    def image_failed(self, project_id: int) -> None:
        """Count a failed image as finished so loading cannot stall."""
        self._settle(project_id)

    def _settle(self, project_id: int) -> None:
        # each project contributes one equal share, whatever the arrival order
        if project_id in self._settled or project_id not in self.catalog.by_id:
            return
        self._settled.add(project_id)

        total = len(self.catalog)
        if len(self._settled) == total:
            self.progress = 100.0
        else:
            self.progress = min(len(self._settled) * 100 / total, 100.0)

        if self.complete:
            self._on_complete()

    def _on_complete(self) -> None:
        if self.phase is Phase.LOADING and self._settle_handle is None:
            self._settle_handle = self._scheduler.call_later(
                self.settings.settle_delay, self._finish_loading
            )

    def _finish_loading(self) -> None:
        self._settle_handle = None
        if self.phase is Phase.LOADING:
            self._enter_gallery()

    # -- phase transitions -----------------------------------------------

    def view(self) -> Phase:
        """Handle the intro's "View" action.

        Returns:
            The phase after the action.

        Raises:
            InvalidTransition: If the view is not in the intro phase.
        """
        if self.phase is not Phase.INTRO:
            raise InvalidTransition(f"Cannot leave {self.phase} through view()")

        if self.complete:
            self._enter_gallery()
        else:
            self.phase = Phase.LOADING
        return self.phase

    def _enter_gallery(self) -> None:
        self.phase = Phase.GALLERY
        self.origins = {
            p.id: offscreen_position(self.viewport, self.settings.offscreen_margin, self._rng)
            for p in self.catalog
        }
        self.relayout()

    # -- layout ----------------------------------------------------------

    def relayout(self) -> dict[int, Position]:
        """Recompute every tile position in one pass."""
        self.positions = arrange(
            self.catalog,
            self.viewport,
            self.settings.tile_width,
            self.settings.tile_height,
            self._rng,
        )
        self.layout_passes += 1
        return self.positions

    def resize(self, viewport: Viewport) -> None:
        """Window resized; relayout after the resize debounce."""
        self._resize_debounce.trigger(viewport)

    def _apply_resize(self, viewport: Viewport) -> None:
        self.viewport = viewport
        if self.phase is Phase.GALLERY:
            self.relayout()

    # -- animation -------------------------------------------------------

    @property
    def animation_duration(self) -> float:
        if self.first_animation.pending:
            return self.settings.first_duration
        return self.settings.fast_duration

    def animation_complete(self) -> None:
        self.first_animation.fire()

    # -- filters ---------------------------------------------------------

    def set_category(self, value: str) -> None:
        self.filters = self.filters.with_field("category", value)

    def set_technology(self, value: str) -> None:
        self.filters = self.filters.with_field("technology", value)

    def type_name(self, text: str) -> None:
        """Name input changed; applied after the typing debounce."""
        self._name_debounce.trigger(text)

    def _apply_name_filter(self, text: str) -> None:
        self.filters = self.filters.with_field("name", text)

    def reset(self) -> None:
        """Clear all filters and lay the tiles out again."""
        self._name_debounce.cancel()
        self.filters = self.filters.cleared()
        self.relayout()

    def is_match(self, project: Project) -> bool:
        return matches(project, self.filters)

    # -- pointer ---------------------------------------------------------

    def _tracker(self, project_id: int) -> DragTracker:
        if project_id not in self._drags:
            self._drags[project_id] = DragTracker(self.settings.drag_threshold)
        return self._drags[project_id]

    def drag_start(self, project_id: int, x: float, y: float) -> None:
        self._tracker(project_id).start(x, y)

    def drag_move(self, project_id: int, x: float, y: float) -> None:
        self._tracker(project_id).move(x, y)

    def click(self, project_id: int) -> bool:
        """Click on a tile. Returns True if it navigated to the project link."""
        project = self.catalog.by_id.get(project_id)
        if project is None or not self._tracker(project_id).click():
            return False
        self.navigate(project.link)
        return True

    # -- snapshot --------------------------------------------------------

    def tiles(self) -> list[Tile]:
        """Render state for every tile, in catalogue order."""
        duration = self.animation_duration
        tiles = []

        for project in self.catalog:
            position = self.positions.get(project.id, Position(0, 0, 0))
            matched = self.is_match(project)
            tiles.append(
                Tile(
                    project=project,
                    position=position,
                    origin=self.origins.get(project.id, position),
                    scale=position.scale(self.settings.depth_scale),
                    opacity=tile_opacity(matched, self.settings.dimmed_opacity),
                    matched=matched,
                    duration=duration,
                )
            )
        return tiles
