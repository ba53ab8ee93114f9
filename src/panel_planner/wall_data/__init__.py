# File: src/panel_planner/wall_data/__init__.py
"""
Wall data: the wall/panel model, detection ingestion, and noise filtering.
"""

from .wall_model import (
    ColorTag,
    Panel,
    Wall,
)

from .detection_reader import (
    parse_detection_line,
    read_detection_file,
    rectangle_sides,
    run_detector,
)

from .noise_filter import (
    filter_noise,
    is_wall_rectangle,
)

__all__ = [
    # Data model
    "ColorTag",
    "Panel",
    "Wall",
    # Ingestion
    "parse_detection_line",
    "read_detection_file",
    "rectangle_sides",
    "run_detector",
    # Noise filtering
    "filter_noise",
    "is_wall_rectangle",
]
