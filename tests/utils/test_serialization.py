# File: tests/utils/test_serialization.py
"""Tests for JSON serialization of plans."""

import json

import pytest
from src.panel_planner.panels.allocation import allocate_walls
from src.panel_planner.utils.serialization import (
    PlanEncoder,
    deserialize_walls,
    serialize_walls,
    wall_to_dict,
)
from src.panel_planner.wall_data.wall_model import ColorTag, Panel, Wall


class TestWallToDict:
    """Tests for wall_to_dict."""

    def test_chains_expanded(self, wishlist_catalog):
        wall = Wall(color=ColorTag(0, 0, 255), length=22.0, raw_sides=[220.0, 10.0])
        allocate_walls([wall], wishlist_catalog)

        data = wall_to_dict(wall)

        assert data["length"] == 22.0
        assert data["color"] == [0, 0, 255]
        assert data["chains"] == [[
            {"width": 4.0, "height": 0.0, "unit_count": 4},
            {"width": 6.0, "height": 0.0, "unit_count": 1},
        ]]


class TestPlanEncoder:
    """Tests for PlanEncoder."""

    def test_panel_and_color(self):
        text = json.dumps([Panel(4.0, unit_count=2), ColorTag(1, 2, 3)], cls=PlanEncoder)
        assert json.loads(text) == [{"width": 4.0, "height": 0.0, "unit_count": 2}, [1, 2, 3]]

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=PlanEncoder)


class TestSerializeWalls:
    """Tests for serialize_walls / deserialize_walls."""

    def test_restores_chains(self, wishlist_catalog):
        walls = allocate_walls([Wall(length=24.0), Wall(length=22.0)], wishlist_catalog)

        restored = deserialize_walls(serialize_walls(walls))

        assert [w.length for w in restored] == [24.0, 22.0]
        assert [[(p.width, p.unit_count) for p in chain] for chain in restored[0].iter_chains()] == [
            [(4.0, 6)], [(6.0, 4)]
        ]
        assert [(p.width, p.unit_count) for p in restored[1].chain_panels(0)] == [(4.0, 4), (6.0, 1)]
        assert len(restored[1].head_chain_map) == 1

    def test_empty(self):
        assert json.loads(serialize_walls([])) == {"walls": []}
        assert deserialize_walls("{}") == []
