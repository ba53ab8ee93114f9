# File: src/panel_planner/wall_data/wall_model.py
"""
Wall and panel data model for panel planning.

A Wall is one detected rectangle that needs panel coverage along its length.
Panels allocated for a wall live in a per-wall arena; chains reference arena
indices so a single Panel (and its unit count) can be shared by several
chains of the same wall.

Wall -> Chain -> Panel

Example:
    >>> wall = Wall(color=ColorTag(0, 0, 255), length=20.0)
    >>> head = wall.start_chain(4.0, 4)
    >>> _ = wall.extend_chains([head], 4.0, 1)
    >>> [(p.width, p.unit_count) for p in wall.chain_panels(0)]
    [(4.0, 4), (4.0, 1)]
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class ColorTag:
    """HSV identifier of the detected region a wall came from.

    Attributes:
        hue: Hue component (0-255)
        saturation: Saturation component (0-255)
        brightness: Brightness (value) component (0-255)
    """
    hue: int = 0
    saturation: int = 0
    brightness: int = 0

    def __post_init__(self):
        """Validate that each component fits in an unsigned byte."""
        for name in ("hue", "saturation", "brightness"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"ColorTag {name} ({value}) must be in [0, 255]")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.hue, self.saturation, self.brightness)


@dataclass
class Panel:
    """Allocation unit: one or more physical panels of the same width.

    Attributes:
        width: Panel width in feet
        height: Panel height in feet (carried, not used by allocation)
        unit_count: Running number of physical panels of this width
    """
    width: float
    height: float = 0.0
    unit_count: int = 0

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Panel width must be positive, got {self.width}")

    def increment(self, count: int = 1) -> None:
        self.unit_count += count

    @property
    def covered_length(self) -> float:
        """Length covered by all units of this panel."""
        return self.width * self.unit_count


@dataclass
class Wall:
    """A detected wall and the panel chains allocated to cover it.

    Attributes:
        color: Color tag of the source region
        length: Scaled wall length in feet (set by the noise filter)
        width: Wall width in feet (informational)
        height: Wall height in feet (informational)
        raw_sides: Measured sides before scaling (1 or 2 values)
        panels: Arena of Panel records owned by this wall
        chains: Chains of arena indices, in allocation order
        head_chain_map: Head panel index -> chain index
    """
    color: ColorTag = field(default_factory=ColorTag)
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    raw_sides: List[float] = field(default_factory=list)
    panels: List[Panel] = field(default_factory=list)
    chains: List[List[int]] = field(default_factory=list)
    head_chain_map: Dict[int, int] = field(default_factory=dict)

    @property
    def half_length(self) -> float:
        return self.length / 2

    def add_panel(self, width: float, count: int = 0, height: float = 0.0) -> int:
        """Create a Panel in the arena and return its index."""
        panel = Panel(width=width, height=height)
        panel.increment(count)
        self.panels.append(panel)
        return len(self.panels) - 1

    def start_chain(self, width: float, count: int, height: float = 0.0) -> int:
        """Allocate a panel as the head of a new chain.

        Returns:
            Arena index of the head panel
        """
        head = self.add_panel(width, count, height)
        self.chains.append([head])
        self.head_chain_map[head] = len(self.chains) - 1
        return head

    def extend_chains(
        self,
        heads: List[int],
        width: float,
        count: int,
        height: float = 0.0,
    ) -> int:
        """Append one panel to every chain identified by its head.

        The panel is created once and shared by all those chains, so its
        unit count is incremented a single time. With no heads the panel
        starts a new chain and its index is added to ``heads``.

        Args:
            heads: Head panel indices of the chains to extend
            width: Panel width in feet
            count: Units to add
            height: Panel height in feet

        Returns:
            Arena index of the appended panel
        """
        if not heads:
            head = self.start_chain(width, count, height)
            heads.append(head)
            return head

        index = self.add_panel(width, count, height)
        for head in heads:
            self.chains[self.head_chain_map[head]].append(index)
        return index

    def chain_panels(self, chain_index: int) -> List[Panel]:
        return [self.panels[i] for i in self.chains[chain_index]]

    def iter_chains(self) -> Iterable[List[Panel]]:
        for chain_index in range(len(self.chains)):
            yield self.chain_panels(chain_index)

    def chain_coverage(self, chain_index: int) -> float:
        """Total length covered by a chain over the whole (mirrored) wall."""
        return sum(panel.covered_length for panel in self.chain_panels(chain_index))

    def head_widths(self) -> List[float]:
        return [self.panels[head].width for head in self.head_chain_map]

    def clear_allocation(self) -> None:
        self.panels.clear()
        self.chains.clear()
        self.head_chain_map.clear()

    def copy_geometry(self) -> "Wall":
        """Return a new wall with the same geometry and no chains."""
        return Wall(
            color=self.color,
            length=self.length,
            width=self.width,
            height=self.height,
            raw_sides=list(self.raw_sides),
        )

    def is_sane(self) -> bool:
        """Check the wall has 1-2 measured sides and a non-zero length."""
        if not 0 < len(self.raw_sides) <= 2:
            return False
        return bool(self.length)

    def total_units(self, chain_index: Optional[int] = None) -> int:
        """Sum of unit counts in one chain, or over every referenced panel."""
        if chain_index is None:
            referenced = {i for chain in self.chains for i in chain}
            return sum(self.panels[i].unit_count for i in referenced)
        return sum(panel.unit_count for panel in self.chain_panels(chain_index))
