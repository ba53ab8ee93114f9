# File: src/panel_planner/panels/catalog.py
"""
Panel catalog loading.

A catalog is an ordered, immutable tuple of CatalogEntry records read from a
CSV file. The header row is found by fuzzy matching a "panel width" column;
for inventory catalogs a quantity column is matched the same way. Data rows
below the header are read positionally: the column offset is the number of
commas preceding the matched header text.

Usage:
    from src.panel_planner.panels.catalog import load_catalog

    wishlist = load_catalog("available_panels.csv")
    inventory = load_catalog("inventory.csv", with_quantity=True)
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be used at all."""


# =============================================================================
# Header Matching
# =============================================================================

WIDTH_HEADER_PATTERNS = (
    re.compile(r"panel[\s_]*width", re.IGNORECASE),
    re.compile(r"width", re.IGNORECASE),
)

QUANTITY_HEADER_PATTERNS = (
    re.compile(r"qty", re.IGNORECASE),
    re.compile(r"panel[\s_]*num", re.IGNORECASE),
    re.compile(r"num[\s_]*panels", re.IGNORECASE),
    re.compile(r"#\s*(?:of\s+)?panels", re.IGNORECASE),
    re.compile(r"number\s+of\s+panels", re.IGNORECASE),
)

HEIGHT_HEADER_PATTERNS = (
    re.compile(r"panel[\s_]*height", re.IGNORECASE),
    re.compile(r"height", re.IGNORECASE),
)

_DECIMAL = re.compile(r"^(?:\d+\.?\d*|\.\d+)$")
_INTEGER = re.compile(r"^\d+$")


@dataclass(frozen=True)
class CatalogEntry:
    """A purchasable or available panel width.

    Attributes:
        width: Panel width in feet
        height: Panel height in feet, when the catalog lists one
        count: Inventory quantity (None when not tracked)
    """
    width: float
    height: Optional[float] = None
    count: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"CatalogEntry width must be positive, got {self.width}")
        if self.count is not None and self.count < 0:
            raise ValueError(f"CatalogEntry count cannot be negative, got {self.count}")


def locate_column(line: str, patterns: Iterable[re.Pattern]) -> Optional[int]:
    """Find the positional column of a header by fuzzy match.

    Args:
        line: Raw header line
        patterns: Patterns tried in order; the first one that matches wins

    Returns:
        Number of commas before the match, or None when nothing matches
    """
    for pattern in patterns:
        match = pattern.search(line)
        if match:
            return line.count(",", 0, match.start())
    return None


def _field(line: str, column: int) -> Optional[str]:
    """Return the raw text of a positional column, or None when too short."""
    fields = line.split(",")
    if column >= len(fields):
        return None
    return fields[column].strip().strip('"').strip()


def _parse_decimal(text: Optional[str]) -> Optional[float]:
    if not text or not _DECIMAL.match(text):
        return None
    return float(text)


# =============================================================================
# Parsing
# =============================================================================

def parse_catalog_lines(
    lines: Iterable[str],
    with_quantity: bool = False,
    source: str = "<catalog>",
) -> Tuple[CatalogEntry, ...]:
    """Parse catalog CSV lines into entries.

    Args:
        lines: CSV text lines, header included
        with_quantity: Read inventory quantities
        source: Name used in log and error messages

    Returns:
        Tuple of CatalogEntry in file order

    Raises:
        CatalogError: If no width column is found
    """
    width_col = None
    qty_col = None
    height_col = None
    entries: List[CatalogEntry] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if width_col is None:
            width_col = locate_column(line, WIDTH_HEADER_PATTERNS)
            if width_col is not None:
                height_col = locate_column(line, HEIGHT_HEADER_PATTERNS)
                if with_quantity:
                    qty_col = locate_column(line, QUANTITY_HEADER_PATTERNS)
                    if qty_col is None:
                        logger.warning(f"{source}: no quantity column in header")
                logger.debug(
                    f"{source}: header at line {line_number} "
                    f"(width col {width_col}, qty col {qty_col})"
                )
            continue

        if not line.strip():
            continue

        width = _parse_decimal(_field(line, width_col))
        if not width:
            logger.debug(f"{source}: skipping line {line_number}: {line!r}")
            continue

        height = None
        if height_col is not None:
            height = _parse_decimal(_field(line, height_col))

        count = None
        if with_quantity and qty_col is not None:
            qty_text = _field(line, qty_col)
            if qty_text == "":
                logger.debug(f"{source}: empty quantity at line {line_number}")
                continue
            if qty_text is not None and _INTEGER.match(qty_text):
                count = int(qty_text)

        entries.append(CatalogEntry(width=width, height=height, count=count))

    if width_col is None:
        raise CatalogError(
            f"{source}: no panel width column found; expected a header "
            f"such as 'Panel Width'"
        )

    if not entries:
        logger.warning(f"{source}: catalog has no usable panel rows")

    return tuple(entries)


def load_catalog(path: str, with_quantity: bool = False) -> Tuple[CatalogEntry, ...]:
    """Load a catalog CSV file.

    Args:
        path: Path to a .csv file
        with_quantity: Read inventory quantities

    Returns:
        Tuple of CatalogEntry in file order

    Raises:
        CatalogError: If the path is empty, not a .csv, unreadable, or has
            no width column
    """
    if not path:
        raise CatalogError("Panel list file name is empty")

    if os.path.splitext(path)[1].lower() != ".csv":
        raise CatalogError(f"Panel list file must be a .csv file: {path}")

    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        raise CatalogError(f"Cannot read panel list file {path}: {e}") from e

    entries = parse_catalog_lines(lines, with_quantity=with_quantity, source=path)
    logger.info(f"Loaded {len(entries)} panel widths from {path}")
    return entries
