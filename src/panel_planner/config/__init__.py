# File: src/panel_planner/config/__init__.py

"""
Configuration package for the panel planner.
Provides:
- Unit management and conversion
- Planner run configuration
"""

from .units import (
    LengthUnits,
    convert_from_feet,
    convert_to_feet,
)

from .planner import PlannerConfig

__all__ = [
    "LengthUnits",
    "convert_from_feet",
    "convert_to_feet",
    "PlannerConfig",
]
