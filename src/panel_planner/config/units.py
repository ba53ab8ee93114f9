# File: src/panel_planner/config/units.py

"""
Unit handling for the panel planner.

Plans are always written in feet. The detection scale (length per measured
image unit) may be given in other units and is converted here.
"""

from enum import Enum
from typing import Dict, Union


class LengthUnits(Enum):
    """
    Enumeration of supported length units.
    """
    FEET = "feet"
    INCHES = "inches"
    METERS = "meters"
    MILLIMETERS = "millimeters"


# Conversion factors to feet
_CONVERSION_TO_FEET: Dict[LengthUnits, float] = {
    LengthUnits.FEET: 1.0,
    LengthUnits.INCHES: 1 / 12.0,
    LengthUnits.METERS: 3.28084,
    LengthUnits.MILLIMETERS: 0.00328084,
}


def parse_units(units: Union[LengthUnits, str]) -> LengthUnits:
    """
    Normalize a unit given as enum or string.

    Raises:
        ValueError: If the provided units are not supported
    """
    if isinstance(units, LengthUnits):
        return units
    try:
        return LengthUnits(str(units).lower())
    except ValueError:
        raise ValueError(f"Unsupported unit: {units}")


def convert_to_feet(value: float, current_units: Union[LengthUnits, str]) -> float:
    """
    Converts a value from the specified units to feet.

    Args:
        value: The numeric value to convert
        current_units: The units to convert from (LengthUnits enum or string)

    Returns:
        The value converted to feet
    """
    return value * _CONVERSION_TO_FEET[parse_units(current_units)]


def convert_from_feet(value: float, target_units: Union[LengthUnits, str]) -> float:
    """
    Converts a value from feet to the specified target units.

    Args:
        value: The numeric value in feet to convert
        target_units: The units to convert to (LengthUnits enum or string)

    Returns:
        The converted value in the target units
    """
    return value / _CONVERSION_TO_FEET[parse_units(target_units)]
