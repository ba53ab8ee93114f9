# File: src/panel_planner/wall_data/noise_filter.py
"""
Noise filtering of detected rectangles.

Detection returns every closed shape of a wall color, including specks and
near-square blobs. A rectangle is kept as a wall only when it is elongated
enough (side ratio at or above the noise threshold) and its short side is a
plausible wall thickness. Kept walls get their scaled length; nothing else
is changed.
"""

import logging
from typing import List, Sequence

from .wall_model import Wall

logger = logging.getLogger(__name__)

MIN_WALL_SIDE = 5.0
MAX_WALL_SIDE = 1000.0


def is_wall_rectangle(
    side1: float,
    side2: float,
    noise_threshold: float,
    min_side: float = MIN_WALL_SIDE,
    max_side: float = MAX_WALL_SIDE,
) -> bool:
    """Check whether two measured sides describe a plausible wall."""
    if not side1 or not side2:
        return False
    long_side, short_side = max(side1, side2), min(side1, side2)
    if long_side / short_side < noise_threshold:
        return False
    return min_side <= short_side <= max_side


def filter_noise(
    walls: Sequence[Wall],
    scale: float,
    noise_threshold: float = 5.0,
    corner_selection: bool = False,
    min_side: float = MIN_WALL_SIDE,
    max_side: float = MAX_WALL_SIDE,
) -> List[Wall]:
    """Keep plausible walls and set their scaled length.

    Args:
        walls: Walls from ingestion, raw sides populated
        scale: Feet per measured unit
        noise_threshold: Minimum long/short side ratio (rectangle mode)
        corner_selection: Walls were picked by corners; keep them all
        min_side: Smallest accepted short side, in measured units
        max_side: Largest accepted short side, in measured units

    Returns:
        Accepted walls in input order
    """
    accepted = []

    for wall in walls:
        if corner_selection:
            if not wall.raw_sides:
                logger.debug("Dropping corner-selected wall with no side")
                continue
            wall.length = wall.raw_sides[0] * scale
            accepted.append(wall)
            continue

        if len(wall.raw_sides) != 2:
            logger.debug(f"Dropping rectangle with {len(wall.raw_sides)} side(s)")
            continue

        side1, side2 = wall.raw_sides
        if not is_wall_rectangle(side1, side2, noise_threshold, min_side, max_side):
            logger.debug(f"Dropping noise rectangle {side1:g} x {side2:g}")
            continue

        wall.length = max(side1, side2) * scale
        accepted.append(wall)

    logger.info(f"Noise filter kept {len(accepted)} of {len(walls)} walls")
    return accepted
