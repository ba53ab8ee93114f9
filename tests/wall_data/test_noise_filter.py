# File: tests/wall_data/test_noise_filter.py
"""Tests for noise filtering of detected rectangles."""

import pytest
from src.panel_planner.wall_data.detection_reader import parse_detection_line
from src.panel_planner.wall_data.noise_filter import (
    MAX_WALL_SIDE,
    MIN_WALL_SIDE,
    filter_noise,
    is_wall_rectangle,
)
from src.panel_planner.wall_data.wall_model import Wall


class TestIsWallRectangle:
    """Tests for the rectangle plausibility check."""

    def test_elongated_rectangle_accepted(self):
        assert is_wall_rectangle(200.0, 10.0, noise_threshold=5.0)

    def test_side_order_does_not_matter(self):
        assert is_wall_rectangle(10.0, 200.0, noise_threshold=5.0)

    def test_ratio_at_threshold_accepted(self):
        assert is_wall_rectangle(50.0, 10.0, noise_threshold=5.0)

    def test_ratio_below_threshold_rejected(self):
        assert not is_wall_rectangle(40.0, 10.0, noise_threshold=5.0)

    def test_thin_short_side_rejected(self):
        assert not is_wall_rectangle(100.0, MIN_WALL_SIDE - 1, noise_threshold=5.0)

    def test_thick_short_side_rejected(self):
        assert not is_wall_rectangle(100000.0, MAX_WALL_SIDE + 1, noise_threshold=5.0)

    def test_zero_side_rejected(self):
        assert not is_wall_rectangle(100.0, 0.0, noise_threshold=5.0)


class TestFilterNoise:
    """Tests for filter_noise."""

    def test_keeps_walls_and_scales_length(self, detection_lines):
        walls = [parse_detection_line(line) for line in detection_lines]

        kept = filter_noise(walls, scale=0.1)

        assert len(kept) == 1
        assert kept[0] is walls[0]
        assert kept[0].length == pytest.approx(20.0)

    def test_rectangle_needs_two_sides(self):
        walls = [Wall(raw_sides=[100.0]), Wall(raw_sides=[100.0, 10.0, 4.0])]
        assert filter_noise(walls, scale=1.0) == []

    def test_custom_bounds(self):
        wall = Wall(raw_sides=[60.0, 2.0])
        assert filter_noise([wall], scale=1.0) == []
        assert filter_noise([wall], scale=1.0, min_side=1.0) == [wall]
        assert wall.length == 60.0

    def test_corner_selection_keeps_every_measured_wall(self):
        walls = [Wall(raw_sides=[30.0]), Wall(raw_sides=[]), Wall(raw_sides=[1.0])]

        kept = filter_noise(walls, scale=2.0, corner_selection=True)

        assert [wall.length for wall in kept] == [60.0, 2.0]

    def test_preserves_order(self):
        walls = [Wall(raw_sides=[100.0, 10.0]), Wall(raw_sides=[300.0, 20.0])]
        kept = filter_noise(walls, scale=1.0)
        assert [wall.length for wall in kept] == [100.0, 300.0]
