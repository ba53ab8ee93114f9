# File: src/panel_planner/config/planner.py
"""
Planner configuration.

Collects the knobs of one planning run: detection scale, noise filtering
bounds, fit tolerance, and how the external detector is launched.

Example:
    >>> config = PlannerConfig(scale=0.5, scale_units="inches")
    >>> config.effective_scale()  # feet per image unit
    0.041666666666666664
"""

from dataclasses import dataclass, field
from typing import List

from .units import LengthUnits, convert_to_feet, parse_units
from ..panels.allocation import FIT_TOLERANCE
from ..wall_data.detection_reader import DETECTOR_SCRIPT
from ..wall_data.noise_filter import MAX_WALL_SIDE, MIN_WALL_SIDE


@dataclass
class PlannerConfig:
    """Configuration for a panel planning run.

    Attributes:
        scale: Length per measured image unit, in scale_units
        scale_units: Units of scale (plans are written in feet)
        noise_threshold: Minimum long/short side ratio of a wall rectangle
        corner_selection: Walls come from user-picked corners, not rectangles
        min_wall_side: Smallest accepted short side (image units)
        max_wall_side: Largest accepted short side (image units)
        fit_tolerance: Slack for exact-fit comparisons (feet)
        merge_duplicates: Merge repeated widths within a chain after allocation
        detector_script: Detection script run before ingestion
        python_executable: Interpreter used to run the detection script
    """
    scale: float = 1.0
    scale_units: LengthUnits = field(default_factory=lambda: LengthUnits.FEET)
    noise_threshold: float = 5.0
    corner_selection: bool = False
    min_wall_side: float = MIN_WALL_SIDE
    max_wall_side: float = MAX_WALL_SIDE
    fit_tolerance: float = FIT_TOLERANCE
    merge_duplicates: bool = False
    detector_script: str = DETECTOR_SCRIPT
    python_executable: str = "python"

    def __post_init__(self):
        """Convert scale_units string to enum if needed."""
        if isinstance(self.scale_units, str):
            self.scale_units = parse_units(self.scale_units)

    def effective_scale(self) -> float:
        """Feet per measured image unit."""
        return convert_to_feet(self.scale, self.scale_units)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)

        Raises:
            ValueError: If any validation fails
        """
        errors = []

        if self.scale <= 0:
            errors.append("scale must be positive")
        if self.noise_threshold <= 0:
            errors.append("noise_threshold must be positive")
        if self.min_wall_side < 0:
            errors.append("min_wall_side cannot be negative")
        if self.min_wall_side > self.max_wall_side:
            errors.append(
                f"min_wall_side ({self.min_wall_side}) cannot exceed "
                f"max_wall_side ({self.max_wall_side})"
            )
        if self.fit_tolerance < 0:
            errors.append("fit_tolerance cannot be negative")
        if not self.detector_script:
            errors.append("detector_script must be set")

        if errors:
            raise ValueError("PlannerConfig validation failed:\n" + "\n".join(errors))

        return errors

    def to_dict(self) -> dict:
        """Convert config to dictionary for JSON serialization."""
        return {
            "scale": self.scale,
            "scale_units": self.scale_units.value,
            "noise_threshold": self.noise_threshold,
            "corner_selection": self.corner_selection,
            "min_wall_side": self.min_wall_side,
            "max_wall_side": self.max_wall_side,
            "fit_tolerance": self.fit_tolerance,
            "merge_duplicates": self.merge_duplicates,
            "detector_script": self.detector_script,
            "python_executable": self.python_executable,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlannerConfig":
        """Create config from dictionary, using defaults for missing keys."""
        return cls(
            scale=data.get("scale", 1.0),
            scale_units=data.get("scale_units", "feet"),
            noise_threshold=data.get("noise_threshold", 5.0),
            corner_selection=data.get("corner_selection", False),
            min_wall_side=data.get("min_wall_side", MIN_WALL_SIDE),
            max_wall_side=data.get("max_wall_side", MAX_WALL_SIDE),
            fit_tolerance=data.get("fit_tolerance", FIT_TOLERANCE),
            merge_duplicates=data.get("merge_duplicates", False),
            detector_script=data.get("detector_script", DETECTOR_SCRIPT),
            python_executable=data.get("python_executable", "python"),
        )
