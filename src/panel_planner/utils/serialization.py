# File: src/panel_planner/utils/serialization.py

"""
JSON serialization of panel plans.

Walls are written with their chains expanded to panel records, so the JSON
reads the same way as the CSV export. Deserialization rebuilds the per-wall
arena; panels shared between chains come back as separate records.

Usage:
    from src.panel_planner.utils.serialization import serialize_walls, deserialize_walls

    json_str = serialize_walls(walls)
    walls = deserialize_walls(json_str)
"""

import json
from typing import Any, Dict, List, Sequence

from ..wall_data.wall_model import ColorTag, Panel, Wall


def panel_to_dict(panel: Panel) -> Dict[str, Any]:
    return {
        "width": panel.width,
        "height": panel.height,
        "unit_count": panel.unit_count,
    }


def wall_to_dict(wall: Wall) -> Dict[str, Any]:
    """Convert a wall and its chains to a JSON-ready dictionary."""
    return {
        "length": wall.length,
        "width": wall.width,
        "height": wall.height,
        "color": list(wall.color.as_tuple()),
        "raw_sides": list(wall.raw_sides),
        "chains": [
            [panel_to_dict(panel) for panel in chain]
            for chain in wall.iter_chains()
        ],
    }


def wall_from_dict(data: Dict[str, Any]) -> Wall:
    """Rebuild a wall, creating one arena panel per chain entry."""
    wall = Wall(
        color=ColorTag(*data.get("color", (0, 0, 0))),
        length=data.get("length", 0.0),
        width=data.get("width", 0.0),
        height=data.get("height", 0.0),
        raw_sides=list(data.get("raw_sides", [])),
    )
    for chain in data.get("chains", []):
        heads: List[int] = []
        for panel in chain:
            wall.extend_chains(
                heads,
                panel["width"],
                panel.get("unit_count", 0),
                panel.get("height", 0.0),
            )
    return wall


class PlanEncoder(json.JSONEncoder):
    """JSON encoder that understands the plan data model."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Wall):
            return wall_to_dict(obj)
        if isinstance(obj, Panel):
            return panel_to_dict(obj)
        if isinstance(obj, ColorTag):
            return list(obj.as_tuple())
        return super().default(obj)


def serialize_walls(walls: Sequence[Wall], indent: int = 2) -> str:
    return json.dumps({"walls": list(walls)}, cls=PlanEncoder, indent=indent)


def deserialize_walls(json_str: str) -> List[Wall]:
    data = json.loads(json_str)
    return [wall_from_dict(item) for item in data.get("walls", [])]
