# File: src/panel_planner/panels/allocation.py
"""
Best-fit panel allocation.

Walls are symmetric about their midpoint, so the search runs on the
half-length and unit counts are mirrored to cover both halves.

Allocation for one wall:
1. Build candidates: catalog widths, then one half-width per catalog width
2. Pass 1 - fill the half-length. Every exact fit registers its own chain;
   without an exact fit the genuine width with the smallest remainder
   becomes the single chain head
3. Pass 2 - fill the leftover of the pass 1 head with one more panel,
   appended to that chain. Leftover of the leftover is not attempted

A half-width candidate is placed as its parent panel: the halves from both
wall-halves pair up, so ``n`` halves per side need ``n`` full panels (an odd
``n`` means one panel straddles the mirror line).

In inventory mode each wall works on its own InventorySnapshot; counts are
decremented as panels are placed and the snapshot is dropped afterwards.

Example:
    >>> wall = Wall(length=24.0)
    >>> allocate_wall(wall, (CatalogEntry(6.0),))
    >>> [(p.width, p.unit_count) for p in wall.chain_panels(0)]
    [(6.0, 4)]
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .catalog import CatalogEntry
from ..wall_data.wall_model import Wall

logger = logging.getLogger(__name__)

# Remainders closer than this to zero (or to the candidate width) are exact fits
FIT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Candidate:
    """A width the engine may try to place.

    Attributes:
        width: Width tried against the free space
        parent_width: Catalog width actually placed
        is_half: True for the synthetic half of a catalog width
    """
    width: float
    parent_width: float
    is_half: bool = False


@dataclass(frozen=True)
class CandidateFit:
    """Result of fitting one candidate into a space."""
    candidate: Candidate
    whole_count: int
    remainder: float

    @property
    def is_exact(self) -> bool:
        return self.remainder == 0.0

    def placement(self) -> Tuple[float, int]:
        """Panel width and unit count covering both wall-halves.

        Returns:
            (panel width, unit count)
        """
        if self.candidate.is_half:
            return self.candidate.parent_width, self.whole_count
        return self.candidate.width, 2 * self.whole_count


class InventorySnapshot:
    """Wall-local, mutable copy of catalog quantities.

    Entries without a count are treated as having none available.
    """

    def __init__(self, catalog: Sequence[CatalogEntry]):
        self._stock: List[List[float]] = [
            [entry.width, entry.count or 0] for entry in catalog
        ]

    def available(self, width: float) -> int:
        return int(sum(count for w, count in self._stock if w == width))

    def can_take(self, width: float, count: int) -> bool:
        return any(w == width and stock >= count for w, stock in self._stock)

    def take(self, width: float, count: int) -> bool:
        """Decrement the first entry of this width that holds enough units."""
        for item in self._stock:
            if item[0] == width and item[1] >= count:
                item[1] -= count
                return True
        return False


# =============================================================================
# Candidate Search
# =============================================================================

def build_candidates(catalog: Sequence[CatalogEntry]) -> List[Candidate]:
    """Catalog widths in order, followed by their half widths.

    Half widths equal to a catalog width, and repeated widths, are dropped.
    """
    candidates = []
    seen = set()
    for entry in catalog:
        if entry.width not in seen:
            seen.add(entry.width)
            candidates.append(Candidate(entry.width, entry.width))

    genuine_widths = set(seen)
    for entry in catalog:
        half = entry.width / 2
        if half in seen or half in genuine_widths:
            continue
        seen.add(half)
        candidates.append(Candidate(half, entry.width, is_half=True))

    return candidates


def fit(space: float, width: float, tolerance: float = FIT_TOLERANCE) -> Tuple[int, float]:
    """Fit as many widths as possible into a space.

    Args:
        space: Free length in feet
        width: Candidate width in feet
        tolerance: Floating-point slack for exact fits

    Returns:
        (whole count, remainder), remainder snapped to 0.0 on exact fits
    """
    whole = int(math.floor(space / width))
    remainder = space - whole * width
    if remainder >= width - tolerance:
        whole += 1
        remainder = space - whole * width
    if abs(remainder) <= tolerance:
        remainder = 0.0
    return whole, max(remainder, 0.0)


def scan_candidates(
    space: float,
    candidates: Sequence[Candidate],
    tolerance: float = FIT_TOLERANCE,
) -> List[CandidateFit]:
    """Fit every candidate that is not wider than the space, in order."""
    fits = []
    for candidate in candidates:
        if space < candidate.width - tolerance:
            continue
        whole, remainder = fit(space, candidate.width, tolerance)
        if whole == 0:
            continue
        fits.append(CandidateFit(candidate, whole, remainder))
    return fits


def rank_approximate(fits: Sequence[CandidateFit], include_halves: bool) -> List[CandidateFit]:
    """Approximate fits ordered by remainder; ties keep candidate order."""
    approximate = [
        f for f in fits
        if not f.is_exact and (include_halves or not f.candidate.is_half)
    ]
    return sorted(approximate, key=lambda f: f.remainder)


def _reserve(inventory: Optional[InventorySnapshot], width: float, count: int) -> bool:
    """Check and take inventory; unconstrained runs always succeed."""
    if inventory is None:
        return True
    if not inventory.can_take(width, count):
        logger.debug(
            f"Inventory rejects {count} x {width:g} "
            f"({inventory.available(width)} available)"
        )
        return False
    return inventory.take(width, count)


# =============================================================================
# Passes
# =============================================================================

def _fill_half_length(
    wall: Wall,
    fits: Sequence[CandidateFit],
    inventory: Optional[InventorySnapshot],
    heads: List[int],
) -> Optional[float]:
    """Pass 1: register chain heads for the half-length.

    Returns:
        Leftover space for pass 2, or None when exact fits cover the wall
    """
    for candidate_fit in fits:
        if not candidate_fit.is_exact:
            continue
        width, count = candidate_fit.placement()
        if width in wall.head_widths():
            continue
        if not _reserve(inventory, width, count):
            continue
        heads.append(wall.start_chain(width, count))
        logger.debug(f"Exact fit: {count} x {width:g}")

    if heads:
        return None

    for candidate_fit in rank_approximate(fits, include_halves=False):
        width, count = candidate_fit.placement()
        if _reserve(inventory, width, count):
            heads.append(wall.start_chain(width, count))
            logger.debug(
                f"Best fit: {count} x {width:g}, "
                f"leftover {candidate_fit.remainder:g} per half"
            )
            return candidate_fit.remainder

    return wall.half_length


def _fill_leftover(
    wall: Wall,
    leftover: float,
    candidates: Sequence[Candidate],
    inventory: Optional[InventorySnapshot],
    heads: List[int],
    tolerance: float,
) -> None:
    """Pass 2: append one panel covering the leftover to the head chains."""
    fits = scan_candidates(leftover, candidates, tolerance)
    if not fits:
        return

    exact = [f for f in fits if f.is_exact]
    for candidate_fit in exact + rank_approximate(fits, include_halves=True):
        width, count = candidate_fit.placement()
        if _reserve(inventory, width, count):
            wall.extend_chains(heads, width, count)
            logger.debug(f"Leftover fill: {count} x {width:g}")
            return


def allocate_wall(
    wall: Wall,
    catalog: Sequence[CatalogEntry],
    use_inventory: bool = False,
    tolerance: float = FIT_TOLERANCE,
) -> None:
    """Populate a wall's panel chains from a catalog.

    Any chains the wall already holds are cleared first, so repeated runs
    with the same catalog give the same chains.

    Args:
        wall: Wall with its scaled length set
        catalog: Catalog entries (not modified)
        use_inventory: Bound placements by the entries' counts
        tolerance: Floating-point slack for exact fits
    """
    wall.clear_allocation()

    half_length = wall.half_length
    candidates = build_candidates(catalog)
    fits = scan_candidates(half_length, candidates, tolerance)
    if not fits:
        logger.debug(f"No panel fits wall of length {wall.length:g}")
        return

    inventory = InventorySnapshot(catalog) if use_inventory else None
    heads: List[int] = []

    leftover = _fill_half_length(wall, fits, inventory, heads)
    if leftover is None or leftover <= 0.0:
        return

    _fill_leftover(wall, leftover, candidates, inventory, heads, tolerance)


def allocate_walls(
    walls: Sequence[Wall],
    catalog: Sequence[CatalogEntry],
    use_inventory: bool = False,
    tolerance: float = FIT_TOLERANCE,
) -> Sequence[Wall]:
    """Allocate every wall in order, each against its own catalog snapshot.

    Returns:
        The same walls, with chains populated
    """
    mode = "inventory" if use_inventory else "wishlist"
    logger.info(f"Allocating {len(walls)} walls against {len(catalog)} panel widths ({mode})")

    for wall in walls:
        if not wall.is_sane():
            logger.debug(
                f"Wall {wall.length:g} ft fails sanity check "
                f"(sides: {wall.raw_sides})"
            )
        allocate_wall(wall, catalog, use_inventory=use_inventory, tolerance=tolerance)
        logger.debug(
            f"Wall {wall.length:g} ft: {len(wall.chains)} chain(s), "
            f"{wall.total_units()} panel(s)"
        )

    return walls
