"""Tests for the random tile layout."""

import random

import pytest

from folio.gallery.catalog import demo_catalog
from folio.gallery.layout import arrange, offscreen_position
from folio.gallery.models import Position, Viewport


@pytest.fixture
def catalog():
    return demo_catalog(50)


class TestArrange:
    """Tests for arrange."""

    def test_every_project_gets_one_position(self, catalog):
        positions = arrange(catalog, Viewport(1280, 800), rng=random.Random(1))
        assert sorted(positions) == [p.id for p in catalog]

    def test_positions_within_budget(self, catalog):
        """Test that positions stay inside the viewport minus the tile budget."""
        positions = arrange(catalog, Viewport(1280, 800), 300, 125, rng=random.Random(2))
        for pos in positions.values():
            assert 0 <= pos.x < 980
            assert 0 <= pos.y < 675
            assert 0 <= pos.depth < 1

    def test_relayout_moves_tiles_but_keeps_identity(self, catalog):
        rng = random.Random(3)
        first = arrange(catalog, Viewport(1280, 800), rng=rng)
        second = arrange(catalog, Viewport(1280, 800), rng=rng)

        assert first.keys() == second.keys()
        assert first != second

    def test_small_viewport_pins_axis(self, catalog):
        positions = arrange(catalog, Viewport(200, 100), 300, 125, rng=random.Random(4))
        assert all(p.x == 0 and p.y == 0 for p in positions.values())

    def test_empty_catalog(self):
        assert arrange([], Viewport(1280, 800)) == {}


class TestPosition:
    """Tests for depth scaling."""

    def test_depth_only_shrinks(self):
        assert Position(0, 0, 0).scale() == 1
        assert Position(0, 0, 0.5).scale() == pytest.approx(0.85)
        assert Position(0, 0, 0.999).scale() > 0.7


class TestOffscreenPosition:
    """Tests for tile entry origins."""

    def test_always_outside_viewport(self):
        rng = random.Random(5)
        viewport = Viewport(1280, 800)
        for _ in range(200):
            pos = offscreen_position(viewport, margin=150, rng=rng)
            outside = pos.x < 0 or pos.x > viewport.width or pos.y < 0 or pos.y > viewport.height
            assert outside
