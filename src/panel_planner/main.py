# File: src/panel_planner/main.py

"""
Panel planning pipeline and command-line entry point.

Flow:
1. Run the color detector on the floor plan image (optional)
2. Read detected walls and filter out noise
3. Load the wishlist catalog and, if given, the inventory catalog
4. Allocate panels twice: unconstrained wishlist, then inventory-bounded
5. Write one CSV plan per run

Usage:
    python -m src.panel_planner.main plan.png panels.csv --inventory stock.csv --scale 0.1
"""

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config.planner import PlannerConfig
from .export.plan_writer import (
    INVENTORY_SUFFIX,
    WISHLIST_SUFFIX,
    default_output_path,
    write_plan,
)
from .panels.allocation import allocate_walls
from .panels.catalog import CatalogEntry, CatalogError, load_catalog
from .panels.chain_merge import merge_walls
from .utils.logging_config import PanelPlannerLogger, get_logger
from .utils.serialization import serialize_walls
from .wall_data.detection_reader import read_detection_file, run_detector
from .wall_data.noise_filter import filter_noise
from .wall_data.wall_model import Wall

logger = get_logger(__name__)


@dataclass
class PlanResult:
    """Outcome of a planning run.

    Attributes:
        wishlist_walls: Walls planned against the unconstrained catalog
        inventory_walls: Walls planned against inventory (empty without one)
        wishlist_path: CSV written for the wishlist plan, if any
        inventory_path: CSV written for the inventory plan, if any
    """
    wishlist_walls: List[Wall] = field(default_factory=list)
    inventory_walls: List[Wall] = field(default_factory=list)
    wishlist_path: Optional[str] = None
    inventory_path: Optional[str] = None


def plan_walls(
    walls: Sequence[Wall],
    wishlist: Sequence[CatalogEntry],
    inventory: Optional[Sequence[CatalogEntry]] = None,
    config: Optional[PlannerConfig] = None,
) -> PlanResult:
    """Filter detected walls and allocate panels for both plans.

    Args:
        walls: Walls from ingestion (raw sides set)
        wishlist: Catalog of purchasable widths
        inventory: Catalog with on-hand counts (optional)
        config: Planner configuration (uses defaults if not provided)

    Returns:
        PlanResult with both wall lists populated
    """
    if config is None:
        config = PlannerConfig()
    config.validate()

    accepted = filter_noise(
        walls,
        scale=config.effective_scale(),
        noise_threshold=config.noise_threshold,
        corner_selection=config.corner_selection,
        min_side=config.min_wall_side,
        max_side=config.max_wall_side,
    )

    # The inventory plan starts from the same filtered geometry
    inventory_walls = [wall.copy_geometry() for wall in accepted] if inventory is not None else []

    allocate_walls(accepted, wishlist, use_inventory=False, tolerance=config.fit_tolerance)
    if inventory is not None:
        allocate_walls(inventory_walls, inventory, use_inventory=True, tolerance=config.fit_tolerance)

    if config.merge_duplicates:
        merged = merge_walls(accepted) + merge_walls(inventory_walls)
        logger.info(f"Merged {merged} duplicate panel entries")

    return PlanResult(wishlist_walls=list(accepted), inventory_walls=inventory_walls)


def run_pipeline(
    image_path: str,
    wishlist_csv: str,
    inventory_csv: Optional[str] = None,
    config: Optional[PlannerConfig] = None,
    wishlist_out: Optional[str] = None,
    inventory_out: Optional[str] = None,
    detection_csv: Optional[str] = None,
    run_detection: bool = True,
) -> PlanResult:
    """Run detection, planning and export for one floor plan image.

    Args:
        image_path: Floor plan image
        wishlist_csv: Catalog CSV of purchasable panels
        inventory_csv: Catalog CSV with quantities (optional)
        config: Planner configuration
        wishlist_out: Wishlist plan path (default: <image>.wishList.csv)
        inventory_out: Inventory plan path (default: <image>.inventoryList.csv)
        detection_csv: Detector output path (default: <image>.csv)
        run_detection: Run the detector before reading its output

    Returns:
        PlanResult including the written paths

    Raises:
        CatalogError: If a catalog file is unusable
        ValueError: If the configuration is invalid
    """
    if config is None:
        config = PlannerConfig()
    config.validate()

    if detection_csv is None:
        detection_csv = image_path + ".csv"

    if run_detection:
        run_detector(
            image_path,
            detection_csv,
            corner_selection=config.corner_selection,
            script=config.detector_script,
            python=config.python_executable,
        )

    walls = read_detection_file(detection_csv, corner_selection=config.corner_selection)

    wishlist = load_catalog(wishlist_csv)
    inventory = load_catalog(inventory_csv, with_quantity=True) if inventory_csv else None

    result = plan_walls(walls, wishlist, inventory, config)

    result.wishlist_path = write_plan(
        wishlist_out or default_output_path(image_path, WISHLIST_SUFFIX),
        result.wishlist_walls,
    )
    if inventory is not None:
        result.inventory_path = write_plan(
            inventory_out or default_output_path(image_path, INVENTORY_SUFFIX),
            result.inventory_walls,
        )

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panel-planner",
        description="Plan wall panels from a color-coded floor plan image.",
    )
    parser.add_argument("image", help="Floor plan image")
    parser.add_argument("wishlist", help="CSV catalog of available panel widths")
    parser.add_argument("--inventory", help="CSV catalog of panels in stock, with quantities")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="Length per image unit (default: 1.0)")
    parser.add_argument("--scale-units", default="feet",
                        choices=["feet", "inches", "meters", "millimeters"],
                        help="Units of --scale; plans are written in feet")
    parser.add_argument("--noise-threshold", type=float, default=5.0,
                        help="Minimum long/short side ratio of a wall (default: 5)")
    parser.add_argument("--corner", action="store_true",
                        help="Walls were selected by their corner points")
    parser.add_argument("--wishlist-out", help="Output path of the wishlist plan")
    parser.add_argument("--inventory-out", help="Output path of the inventory plan")
    parser.add_argument("--detections", help="Detector output CSV (default: <image>.csv)")
    parser.add_argument("--skip-detection", action="store_true",
                        help="Read an existing detector output instead of running it")
    parser.add_argument("--detector-script", default=None,
                        help="Detection script to run")
    parser.add_argument("--merge-duplicates", action="store_true",
                        help="Merge repeated panel widths within each chain")
    parser.add_argument("--json", dest="json_out",
                        help="Also write the wishlist plan as JSON to this path")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-dir", default=None,
                        help="Directory for log files (default: no log file)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    PanelPlannerLogger.configure(debug_mode=args.debug, log_dir=args.log_dir)

    try:
        config = PlannerConfig(
            scale=args.scale,
            scale_units=args.scale_units,
            noise_threshold=args.noise_threshold,
            corner_selection=args.corner,
            merge_duplicates=args.merge_duplicates,
        )
        if args.detector_script:
            config.detector_script = args.detector_script

        result = run_pipeline(
            args.image,
            args.wishlist,
            inventory_csv=args.inventory,
            config=config,
            wishlist_out=args.wishlist_out,
            inventory_out=args.inventory_out,
            detection_csv=args.detections,
            run_detection=not args.skip_detection,
        )

        if args.json_out:
            with open(args.json_out, "w", encoding="utf-8") as f:
                f.write(serialize_walls(result.wishlist_walls))
            logger.info(f"Wrote JSON plan to {os.path.abspath(args.json_out)}")
    except CatalogError as e:
        logger.error(f"Catalog error: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot write plan: {e}")
        return 1

    logger.info(
        f"Planned {len(result.wishlist_walls)} walls; "
        f"wishlist: {result.wishlist_path}, inventory: {result.inventory_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
