"""Project catalogue - the static project list and its filter options."""

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

from folio.gallery.models import Project
from folio.records import load_records
from folio.slug import image_filename


DEMO_CATEGORIES = ["Ecommerce", "Corporate", "Marketplace"]
DEMO_TECHNOLOGIES = ["React", "Laravel", "WordPress"]


@dataclass(frozen=True)
class GalleryCatalog:
    """Projects plus the option lists derived from them.

    Built once and handed to the view, so nothing about the project list
    lives at module level.
    """

    projects: tuple[Project, ...]
    category_options: tuple[str, ...] = field(init=False)
    technology_options: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "projects", tuple(self.projects))
        object.__setattr__(
            self,
            "category_options",
            tuple(sorted({c for p in self.projects for c in p.categories})),
        )
        object.__setattr__(
            self,
            "technology_options",
            tuple(sorted({t for p in self.projects for t in p.technologies})),
        )

    def __len__(self) -> int:
        return len(self.projects)

    def __iter__(self):
        return iter(self.projects)

    @cached_property
    def by_id(self) -> dict[int, Project]:
        return {p.id: p for p in self.projects}


def load_projects(path: Path | str, image_prefix: str = "/images") -> GalleryCatalog:
    """Load the gallery's project JSON.

    The file uses the capture record shape; each image is expected at
    ``<image_prefix>/<slug(name)>.png``. Ids are assigned in file order
    starting at 1.

    Args:
        path: JSON file with ``[{name, url, categories?, technologies?}]``.
        image_prefix: URL prefix of the image folder.

    Returns:
        GalleryCatalog.

    Raises:
        TargetLoadError: If the file is unreadable or malformed.
    """
    prefix = image_prefix.rstrip("/")
    projects = [
        Project(
            id=index,
            name=record.name,
            categories=frozenset(record.categories),
            technologies=frozenset(record.technologies),
            src=f"{prefix}/{image_filename(record.name)}",
            link=record.url,
        )
        for index, record in enumerate(load_records(path), start=1)
    ]
    return GalleryCatalog(projects)


def demo_catalog(count: int = 50) -> GalleryCatalog:
    """Placeholder catalogue cycling three categories, technologies and images."""
    projects = []
    for i in range(1, count + 1):
        projects.append(
            Project(
                id=i,
                name=f"Project {i}",
                categories=frozenset({DEMO_CATEGORIES[i % 3]}),
                technologies=frozenset({DEMO_TECHNOLOGIES[i % 3]}),
                src=f"/images/project{i % 3 + 1}.jpg",
                link=f"https://example.com/{i}",
            )
        )
    return GalleryCatalog(tuple(projects))


def catalog_records(catalog: GalleryCatalog) -> list[dict]:
    """Serialize a catalogue back to the JSON record shape."""
    return [
        {
            "name": p.name,
            "url": p.link,
            "categories": sorted(p.categories),
            "technologies": sorted(p.technologies),
        }
        for p in catalog
    ]
