"""Gallery module - the portfolio view model and its HTML renderer."""

from folio.gallery.catalog import GalleryCatalog, demo_catalog, load_projects
from folio.gallery.models import FilterState, Phase, Position, Project, Viewport
from folio.gallery.view import GalleryView, Tile

__all__ = [
    "FilterState",
    "GalleryCatalog",
    "GalleryView",
    "Phase",
    "Position",
    "Project",
    "Tile",
    "Viewport",
    "demo_catalog",
    "load_projects",
]
