# File: src/panel_planner/__init__.py
"""
Panel planner: turns detected wall rectangles into panel purchase plans.

Subpackages:
- wall_data: wall/panel data model, detection ingestion, noise filtering
- panels: panel catalogs, best-fit allocation, chain merging
- export: CSV plan output
- config: run configuration and units
- utils: logging and JSON serialization
"""

__version__ = "0.1.0"
