# File: src/panel_planner/export/plan_writer.py
"""
CSV export of panel plans.

Each wall takes one row with its quoted dimensions followed by its first
chain; further chains of the same wall go on their own rows, indented by
three empty fields. A chain is written as two quoted fields: panel widths and
the matching unit counts.

    Wall Length (ft),Wall Width (ft),Wall Height (ft),Panel Width (ft),Number of Panels
    "22","0","0","4, 6","4, 1"
    "24","0","0","4","6"
    ,,,"6","4"
"""

import logging
import os
from typing import List, Sequence

from ..wall_data.wall_model import Panel, Wall

logger = logging.getLogger(__name__)

PLAN_HEADER = (
    "Wall Length (ft),Wall Width (ft),Wall Height (ft),"
    "Panel Width (ft),Number of Panels"
)

WISHLIST_SUFFIX = ".wishList"
INVENTORY_SUFFIX = ".inventoryList"


def format_number(value: float) -> str:
    """Format like a default C++ stream: 6 significant digits, no padding."""
    return f"{value:g}"


def _quoted(values: Sequence[str]) -> str:
    return '"' + ", ".join(values) + '"'


def render_chain(panels: Sequence[Panel]) -> str:
    widths = _quoted([format_number(panel.width) for panel in panels])
    counts = _quoted([str(panel.unit_count) for panel in panels])
    return f"{widths},{counts}"


def render_wall_rows(wall: Wall) -> List[str]:
    """CSV lines for one wall (a trailing blank line follows chained walls)."""
    dimensions = ",".join(
        _quoted([format_number(value)])
        for value in (wall.length, wall.width, wall.height)
    )

    chains = list(wall.iter_chains())
    if not chains:
        return [f"{dimensions},"]

    rows = [f"{dimensions},{render_chain(chains[0])}"]
    rows.extend(f",,,{render_chain(chain)}" for chain in chains[1:])
    rows.append("")
    return rows


def render_plan(walls: Sequence[Wall]) -> str:
    lines = [PLAN_HEADER]
    for wall in walls:
        lines.extend(render_wall_rows(wall))
    return "\n".join(lines) + "\n"


def write_plan(path: str, walls: Sequence[Wall]) -> str:
    """Write a plan CSV.

    Args:
        path: Output file path
        walls: Walls with allocated chains

    Returns:
        The path written
    """
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(render_plan(walls))
    logger.info(f"Wrote plan for {len(walls)} walls to {path}")
    return path


def default_output_path(image_path: str, suffix: str) -> str:
    """Derive an output name from the image name, e.g. plan.png -> plan.wishList.csv"""
    base, _ = os.path.splitext(image_path)
    return f"{base}{suffix}.csv"
