# File: tests/config/test_planner_config.py
"""Tests for planner configuration and unit conversion."""

import pytest
from src.panel_planner.config.planner import PlannerConfig
from src.panel_planner.config.units import (
    LengthUnits,
    convert_from_feet,
    convert_to_feet,
    parse_units,
)
from src.panel_planner.wall_data.detection_reader import DETECTOR_SCRIPT


class TestUnits:
    """Tests for unit conversion."""

    def test_parse_units(self):
        assert parse_units("Inches") == LengthUnits.INCHES
        assert parse_units(LengthUnits.METERS) == LengthUnits.METERS

    def test_unsupported_unit_raises(self):
        with pytest.raises(ValueError):
            parse_units("cubits")

    def test_conversion(self):
        assert convert_to_feet(24.0, "inches") == pytest.approx(2.0)
        assert convert_from_feet(2.0, LengthUnits.INCHES) == pytest.approx(24.0)
        assert convert_to_feet(1.0, "meters") == pytest.approx(3.28084)


class TestPlannerConfig:
    """Tests for PlannerConfig."""

    def test_defaults(self):
        config = PlannerConfig()
        assert config.scale == 1.0
        assert config.scale_units == LengthUnits.FEET
        assert config.noise_threshold == 5.0
        assert config.corner_selection is False
        assert config.merge_duplicates is False
        assert config.detector_script == DETECTOR_SCRIPT

    def test_string_units_converted(self):
        config = PlannerConfig(scale=6.0, scale_units="inches")
        assert config.scale_units == LengthUnits.INCHES
        assert config.effective_scale() == pytest.approx(0.5)

    def test_validate_passes(self):
        assert PlannerConfig().validate() == []

    @pytest.mark.parametrize("kwargs", [
        {"scale": 0.0},
        {"noise_threshold": -1.0},
        {"min_wall_side": -1.0},
        {"min_wall_side": 50.0, "max_wall_side": 10.0},
        {"fit_tolerance": -1e-6},
        {"detector_script": ""},
    ])
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ValueError):
            PlannerConfig(**kwargs).validate()

    def test_dict_round_trip(self):
        config = PlannerConfig(scale=0.25, scale_units="meters", corner_selection=True,
                               merge_duplicates=True)
        data = config.to_dict()
        assert data["scale_units"] == "meters"
        assert PlannerConfig.from_dict(data) == config

    def test_from_dict_uses_defaults(self):
        assert PlannerConfig.from_dict({}) == PlannerConfig()
