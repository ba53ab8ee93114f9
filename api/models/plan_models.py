from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional, Tuple


class ColorModel(BaseModel):
    """HSV color tag of a detected wall."""
    hue: int = Field(default=0, ge=0, le=255)
    saturation: int = Field(default=0, ge=0, le=255)
    brightness: int = Field(default=0, ge=0, le=255)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.hue, self.saturation, self.brightness)


class WallInput(BaseModel):
    """A wall whose scaled length is already known."""
    length: float = Field(description="Wall length in feet", gt=0)
    width: float = Field(default=0.0, description="Wall width in feet", ge=0)
    height: float = Field(default=0.0, description="Wall height in feet", ge=0)
    color: ColorModel = Field(default_factory=ColorModel)


class CatalogEntryModel(BaseModel):
    """A panel width offered by a catalog."""
    width: float = Field(description="Panel width in feet", gt=0)
    height: Optional[float] = Field(default=None, description="Panel height in feet", ge=0)
    count: Optional[int] = Field(default=None, description="Units in stock", ge=0)


class PlanRequest(BaseModel):
    """Input for a panel plan."""
    walls: List[WallInput] = Field(min_length=1)
    catalog: List[CatalogEntryModel] = Field(default=[])
    use_inventory: bool = Field(
        default=False,
        description="Bound placements by the catalog entries' counts"
    )
    merge_duplicates: bool = Field(
        default=False,
        description="Merge repeated widths within each chain"
    )

    @model_validator(mode='after')
    def validate_inventory(self) -> 'PlanRequest':
        """Inventory plans need at least one counted entry."""
        if self.use_inventory and self.catalog:
            if all(entry.count is None for entry in self.catalog):
                raise ValueError("use_inventory requires catalog entries with a count")
        return self


class PanelModel(BaseModel):
    width: float
    height: float = 0.0
    unit_count: int


class PlannedWall(BaseModel):
    """A wall with its allocated chains."""
    length: float
    width: float
    height: float
    color: ColorModel
    chains: List[List[PanelModel]] = Field(default=[])

    @field_validator('chains')
    @classmethod
    def validate_chains(cls, v: List[List[PanelModel]]) -> List[List[PanelModel]]:
        """Chains are never empty."""
        if any(not chain for chain in v):
            raise ValueError("Chains must hold at least one panel")
        return v


class PlanResponse(BaseModel):
    walls: List[PlannedWall]
    total_panels: int = Field(description="Units over all walls and chains")


class CatalogParseRequest(BaseModel):
    """Raw catalog CSV text."""
    csv_text: str = Field(min_length=1)
    with_quantity: bool = False


class CatalogParseResponse(BaseModel):
    entries: List[CatalogEntryModel]
