# File: src/panel_planner/panels/__init__.py
"""
Panel planning module.

This module turns wall lengths into panel chains:
- Panel catalogs loaded from CSV (wishlist and inventory)
- Best-fit allocation over the mirrored half-length
- Opt-in merging of repeated widths within a chain

Example:
    >>> from src.panel_planner.panels import load_catalog, allocate_walls
    >>> catalog = load_catalog("panels.csv")
    >>> allocate_walls(walls, catalog)
"""

from .catalog import (
    CatalogEntry,
    CatalogError,
    load_catalog,
    parse_catalog_lines,
)

from .allocation import (
    FIT_TOLERANCE,
    Candidate,
    InventorySnapshot,
    allocate_wall,
    allocate_walls,
    build_candidates,
    fit,
)

from .chain_merge import (
    merge_chain_duplicates,
    merge_walls,
)

__all__ = [
    # Catalog
    "CatalogEntry",
    "CatalogError",
    "load_catalog",
    "parse_catalog_lines",
    # Allocation
    "FIT_TOLERANCE",
    "Candidate",
    "InventorySnapshot",
    "allocate_wall",
    "allocate_walls",
    "build_candidates",
    "fit",
    # Merging
    "merge_chain_duplicates",
    "merge_walls",
]
