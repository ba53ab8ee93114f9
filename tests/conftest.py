# tests/conftest.py
import sys
import os

# Add project root and src directory to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)
sys.path.insert(0, os.path.join(project_root, 'src'))

import pytest
from typing import List

from src.panel_planner.panels.catalog import CatalogEntry
from src.panel_planner.wall_data.wall_model import ColorTag, Wall


@pytest.fixture
def wishlist_catalog():
    """Two purchasable widths, no quantities."""
    return (CatalogEntry(4.0), CatalogEntry(6.0))


@pytest.fixture
def make_wall():
    """Factory for walls with a given scaled length."""
    def _make(length: float, color=(0, 0, 255)) -> Wall:
        return Wall(color=ColorTag(*color), length=length, raw_sides=[length, 1.0])
    return _make


@pytest.fixture
def detection_lines() -> List[str]:
    """Detector output: one wall, one square speck, one thin sliver."""
    return [
        '"(0, 0, 255)","(10, 20)","(210, 20)","(10, 30)","(210, 30)"\n',
        '"(0, 0, 255)","(0, 0)","(8, 0)","(0, 8)","(8, 8)"\n',
        '"(120, 40, 200)","(0, 0)","(100, 0)","(0, 2)","(100, 2)"\n',
    ]


@pytest.fixture
def catalog_csv(tmp_path):
    """Write catalog text to a .csv file and return its path."""
    def _write(text: str, name: str = "panels.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
