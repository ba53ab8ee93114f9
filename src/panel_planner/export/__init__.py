# File: src/panel_planner/export/__init__.py
"""CSV export of panel plans."""

from .plan_writer import (
    INVENTORY_SUFFIX,
    PLAN_HEADER,
    WISHLIST_SUFFIX,
    default_output_path,
    render_plan,
    write_plan,
)

__all__ = [
    "INVENTORY_SUFFIX",
    "PLAN_HEADER",
    "WISHLIST_SUFFIX",
    "default_output_path",
    "render_plan",
    "write_plan",
]
