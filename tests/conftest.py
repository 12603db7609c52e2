"""Shared fixtures: a fake browser session and small project catalogues."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from folio.config import CaptureSettings
from folio.gallery.catalog import GalleryCatalog
from folio.gallery.models import Project


class FakeResponse:
    def __init__(self, status: int):
        self.status = status

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 399


class FakePage:
    """Stands in for a Playwright page.

    ``outcomes`` maps a URL to an HTTP status, ``None`` (no response) or an
    exception instance raised from ``goto``. Unknown URLs answer 200.
    """

    def __init__(self, outcomes: dict | None = None):
        self.outcomes = outcomes or {}
        self.visited: list[str] = []
        self.viewports: list[dict] = []
        self.shots: list[dict] = []
        self.goto_viewports: list[dict | None] = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append(url)
        self.goto_viewports.append(self.viewports[-1] if self.viewports else None)
        outcome = self.outcomes.get(url, 200)
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is None:
            return None
        return FakeResponse(outcome)

    async def set_viewport_size(self, size):
        self.viewports.append(dict(size))

    async def screenshot(self, path, full_page=False):
        self.shots.append({"path": path, "full_page": full_page})
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")


class FakeSession:
    def __init__(self, page: FakePage):
        self.page = page
        self.close_calls = 0

    async def close(self):
        self.close_calls += 1


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def fake_session(fake_page):
    return FakeSession(fake_page)


@pytest.fixture
def session_factory(fake_session):
    """Session factory handing out the fake session."""

    async def factory(settings):
        return fake_session

    return factory


@pytest.fixture
def capture_settings(tmp_path):
    return CaptureSettings(output_dir=tmp_path / "images")


@pytest.fixture
def out_console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def err_console():
    return Console(file=io.StringIO(), width=200)


def make_project(id, name, categories=(), technologies=()):
    return Project(
        id=id,
        name=name,
        categories=frozenset(categories),
        technologies=frozenset(technologies),
        src=f"/images/p{id}.png",
        link=f"https://example.com/{id}",
    )


@pytest.fixture
def sample_catalog():
    """Four projects with overlapping categories and technologies."""
    return GalleryCatalog(
        (
            make_project(1, "Shop Front", ["Ecommerce"], ["React"]),
            make_project(2, "Corporate Site", ["Corporate"], ["WordPress"]),
            make_project(3, "Market Hub", ["Marketplace", "Ecommerce"], ["Laravel", "React"]),
            make_project(4, "Portfolio One", ["Corporate"], ["React"]),
        )
    )
