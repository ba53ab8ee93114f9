from fastapi import APIRouter
from typing import List
import traceback

from api.models.plan_models import (
    CatalogEntryModel,
    CatalogParseRequest,
    CatalogParseResponse,
    ColorModel,
    PanelModel,
    PlannedWall,
    PlanRequest,
    PlanResponse,
)
from api.utils.errors import ValidationError, handle_exception
from src.panel_planner.panels.allocation import allocate_walls
from src.panel_planner.panels.catalog import CatalogEntry, CatalogError, parse_catalog_lines
from src.panel_planner.panels.chain_merge import merge_walls
from src.panel_planner.wall_data.wall_model import ColorTag, Wall

# Set up logging
import logging
logger = logging.getLogger("panel_planner.api")

router = APIRouter()


def _to_planned_wall(wall: Wall) -> PlannedWall:
    hue, saturation, brightness = wall.color.as_tuple()
    return PlannedWall(
        length=wall.length,
        width=wall.width,
        height=wall.height,
        color=ColorModel(hue=hue, saturation=saturation, brightness=brightness),
        chains=[
            [
                PanelModel(width=panel.width, height=panel.height, unit_count=panel.unit_count)
                for panel in chain
            ]
            for chain in wall.iter_chains()
        ],
    )


@router.post("", response_model=PlanResponse)
async def create_plan(request: PlanRequest):
    """
    Allocate panels for a list of walls.

    Walls are planned in request order, each against its own copy of the
    catalog. With `use_inventory` the entries' counts bound each wall.
    """
    logger.info(
        f"Plan requested for {len(request.walls)} walls, "
        f"{len(request.catalog)} catalog entries (inventory={request.use_inventory})"
    )
    try:
        catalog = tuple(
            CatalogEntry(width=entry.width, height=entry.height, count=entry.count)
            for entry in request.catalog
        )
        walls: List[Wall] = [
            Wall(
                color=ColorTag(*wall.color.as_tuple()),
                length=wall.length,
                width=wall.width,
                height=wall.height,
            )
            for wall in request.walls
        ]

        allocate_walls(walls, catalog, use_inventory=request.use_inventory)
        if request.merge_duplicates:
            merge_walls(walls)

        return PlanResponse(
            walls=[_to_planned_wall(wall) for wall in walls],
            total_panels=sum(wall.total_units() for wall in walls),
        )
    except Exception as e:
        logger.error(f"Error in create_plan: {str(e)}\n{traceback.format_exc()}")
        raise handle_exception(e, resource_type="plan")


@router.post("/catalog", response_model=CatalogParseResponse)
async def parse_catalog(request: CatalogParseRequest):
    """
    Parse catalog CSV text into entries.

    The header row must contain a panel width column; quantities are read
    when `with_quantity` is set.
    """
    try:
        entries = parse_catalog_lines(
            request.csv_text.splitlines(),
            with_quantity=request.with_quantity,
            source="request",
        )
    except CatalogError as e:
        logger.warning(f"Rejected catalog: {e}")
        raise ValidationError(str(e), field="csv_text").to_http_exception()

    return CatalogParseResponse(
        entries=[
            CatalogEntryModel(width=entry.width, height=entry.height, count=entry.count)
            for entry in entries
        ]
    )
