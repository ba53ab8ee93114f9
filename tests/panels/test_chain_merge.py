# File: tests/panels/test_chain_merge.py
"""Tests for merging repeated widths within a chain."""

from src.panel_planner.panels.allocation import allocate_wall
from src.panel_planner.panels.catalog import CatalogEntry
from src.panel_planner.panels.chain_merge import merge_chain_duplicates, merge_walls
from src.panel_planner.wall_data.wall_model import Wall


def widths_and_counts(wall, chain_index=0):
    return [(p.width, p.unit_count) for p in wall.chain_panels(chain_index)]


class TestMergeChainDuplicates:
    """Tests for merge_chain_duplicates."""

    def test_merges_leftover_into_head_width(self):
        wall = Wall(length=22.0)
        allocate_wall(wall, (CatalogEntry(4.0),))
        assert widths_and_counts(wall) == [(4.0, 4), (4.0, 1)]

        removed = merge_chain_duplicates(wall)

        assert removed == 1
        assert widths_and_counts(wall) == [(4.0, 5)]
        assert wall.head_chain_map == {wall.chains[0][0]: 0}

    def test_shared_panel_left_untouched(self):
        wall = Wall(length=24.0)
        heads = [wall.start_chain(4.0, 4), wall.start_chain(6.0, 2)]
        shared = wall.extend_chains(heads, 4.0, 1)

        merge_chain_duplicates(wall)

        assert widths_and_counts(wall, 0) == [(4.0, 5)]
        assert widths_and_counts(wall, 1) == [(6.0, 2), (4.0, 1)]
        assert wall.panels[shared].unit_count == 1
        assert wall.total_units() == 8

    def test_different_heights_not_merged(self):
        wall = Wall(length=24.0)
        head = wall.start_chain(4.0, 2, height=8.0)
        wall.extend_chains([head], 4.0, 1, height=10.0)
        assert merge_chain_duplicates(wall) == 0
        assert len(wall.chains[0]) == 2

    def test_no_duplicates(self):
        wall = Wall(length=22.0)
        allocate_wall(wall, (CatalogEntry(4.0), CatalogEntry(6.0)))
        before = [list(chain) for chain in wall.chains]
        assert merge_chain_duplicates(wall) == 0
        assert wall.chains == before


class TestMergeWalls:
    """Tests for merge_walls."""

    def test_counts_over_all_walls(self):
        walls = [Wall(length=22.0), Wall(length=22.0), Wall(length=24.0)]
        for wall in walls:
            allocate_wall(wall, (CatalogEntry(4.0),))
        assert merge_walls(walls) == 2
