"""Species temperature/depth tolerances."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpeciesRange:
    """Viable SST (deg C) and depth (m below sea level) ranges, inclusive.

    ``name`` is used only for labels and titles.
    """

    name: str
    temp_min: float
    temp_max: float
    depth_min: float
    depth_max: float

    @property
    def slug(self) -> str:
        return self.name.lower().replace(" ", "_")

    def describe(self) -> str:
        return (f"SST {self.temp_min:g}-{self.temp_max:g} C, "
                f"depth {self.depth_min:g}-{self.depth_max:g} m")
