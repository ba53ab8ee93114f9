# File: src/panel_planner/panels/chain_merge.py
"""
Collapse repeated panel widths within a chain.

A leftover fill can place the same width the chain already starts with, e.g.
``[4 x 4, 4 x 1]``. Merging rewrites such a chain as ``[4 x 5]``. Merging is
never part of allocation; callers opt in explicitly.

Panels shared with other chains are left untouched: the merged entry is a new
arena panel referenced only by the chain being merged.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from ..wall_data.wall_model import Wall

logger = logging.getLogger(__name__)


def merge_chain_duplicates(wall: Wall) -> int:
    """Merge same-size panels inside each chain of a wall.

    Args:
        wall: Wall with allocated chains

    Returns:
        Number of chain entries removed
    """
    removed = 0

    for chain_index, chain in enumerate(wall.chains):
        groups: Dict[Tuple[float, float], List[int]] = {}
        order: List[Tuple[float, float]] = []
        for panel_index in chain:
            panel = wall.panels[panel_index]
            key = (panel.width, panel.height)
            if key not in groups:
                groups[key] = []
                order.append(key)
            groups[key].append(panel_index)

        if len(order) == len(chain):
            continue

        old_head = chain[0]
        merged_chain = []
        for key in order:
            members = groups[key]
            if len(members) == 1:
                merged_chain.append(members[0])
                continue
            total = sum(wall.panels[i].unit_count for i in members)
            merged_chain.append(wall.add_panel(key[0], total, key[1]))

        removed += len(chain) - len(merged_chain)
        wall.chains[chain_index] = merged_chain

        if merged_chain[0] != old_head:
            if wall.head_chain_map.get(old_head) == chain_index:
                del wall.head_chain_map[old_head]
            wall.head_chain_map[merged_chain[0]] = chain_index

    if removed:
        logger.debug(f"Merged {removed} duplicate panel(s) on wall {wall.length:g} ft")
    return removed


def merge_walls(walls: Sequence[Wall]) -> int:
    """Merge duplicate panels on every wall; returns total entries removed."""
    return sum(merge_chain_duplicates(wall) for wall in walls)
