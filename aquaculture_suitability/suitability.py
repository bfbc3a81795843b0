"""
Suitability-raster pipeline
===========================
Reclassifies SST and depth grids to binary masks for a species' viable
ranges, multiplies them, restricts the result to the region set and sums
suitable area per region.

Masks hold 1.0 (suitable) or NaN (no data), so multiplying two masks is a
logical AND in which no-data propagates.
"""

from __future__ import annotations

from dataclasses import dataclass

import geopandas as gpd
import numpy as np
import pandas as pd
from rasterio.features import rasterize
from shapely.geometry import mapping

from .config import M2_PER_KM2, REFERENCE_AREA_COL, REGION_NAME_COL
from .errors import InvalidRange, MaskValueError, PercentOutOfRange
from .grids import Grid, cell_areas, check_alignment
from .regions import check_reference_area, check_region_crs
from .species import SpeciesRange


@dataclass(frozen=True)
class SpeciesSuitability:
    species: SpeciesRange
    zonal: pd.DataFrame
    mask: Grid

    @property
    def total_area_km2(self) -> float:
        return float(self.zonal["suitable_area_km2"].sum())


# ============================================================================
# PIPELINE STEPS
# ============================================================================
def reclassify_range(values: np.ndarray, lower: float, upper: float) -> np.ndarray:
    """1 where lower <= value <= upper, NaN everywhere else (including NaN input)."""
    out = np.full(values.shape, np.nan, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        out[(values >= lower) & (values <= upper)] = 1.0
    return out


def combine_masks(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    return first * second


def rasterize_regions(regions: gpd.GeoDataFrame, like: Grid) -> np.ndarray:
    """Zone ids 1..n burned onto the grid (cell centres); 0 outside every region."""
    shapes = [(mapping(geom), zone_id)
              for zone_id, geom in enumerate(regions.geometry, start=1)
              if geom is not None and not geom.is_empty]
    if not shapes:
        return np.zeros(like.shape, dtype=np.int32)
    return rasterize(
        shapes,
        out_shape=like.shape,
        transform=like.transform,
        fill=0, dtype=np.int32,
    )


def check_binary_mask(mask: np.ndarray) -> None:
    present = mask[~np.isnan(mask)]
    bad = np.unique(present[present != 1.0])
    if bad.size:
        raise MaskValueError(bad[:10].tolist())


def zonal_area(mask: np.ndarray, zones: np.ndarray, areas: np.ndarray,
               n_zones: int) -> np.ndarray:
    """Suitable area (m2) per zone id 1..n_zones."""
    suitable = ~np.isnan(mask) & (zones > 0)
    weights = np.where(suitable, areas, 0.0)
    totals = np.bincount(zones.ravel(), weights=weights.ravel(),
                         minlength=n_zones + 1)
    return totals[1:n_zones + 1]


def percent_suitable(area: np.ndarray, reference: np.ndarray,
                     names) -> np.ndarray:
    pct = 100.0 * area / reference
    bad = (pct < 0) | (pct > 100) | ~np.isfinite(pct)
    if bad.any():
        raise PercentOutOfRange(dict(zip(np.asarray(names)[bad], pct[bad])))
    return pct


# ============================================================================
# FULL PIPELINE
# ============================================================================
def compute_suitability(temperature: Grid, depth: Grid,
                        regions: gpd.GeoDataFrame,
                        temp_min: float, temp_max: float,
                        depth_min: float, depth_max: float,
                        name_col: str = REGION_NAME_COL,
                        area_col: str = REFERENCE_AREA_COL):
    """Suitable area per region for one set of temperature/depth ranges.

    Args:
        temperature: Mean SST grid, deg C.
        depth: Depth grid, positive metres below sea level, aligned with
            ``temperature``.
        regions: Region polygons in the grid CRS with a name column and a
            reference area column in m2.
        temp_min, temp_max: Inclusive SST range.
        depth_min, depth_max: Inclusive depth range.

    Returns:
        Tuple of (zonal, mask). ``zonal`` is indexed by region name with
        columns suitable_area_m2, suitable_area_km2 and pct_suitable;
        ``mask`` is a Grid of 1.0/NaN restricted to the regions.

    Raises:
        PreconditionError: misaligned grids, regions in another CRS,
            reversed ranges or missing reference areas.
        InvariantViolation: mask values other than 1/NaN or percentages
            outside [0, 100].
    """
    # --- Preconditions ---
    check_alignment(temperature, depth, ("temperature", "depth"))
    check_region_crs(regions, temperature.crs)
    if not temp_min < temp_max:
        raise InvalidRange("temperature", temp_min, temp_max)
    if not depth_min < depth_max:
        raise InvalidRange("depth", depth_min, depth_max)
    check_reference_area(regions, area_col, name_col)

    # --- Binary reclassification and combination ---
    temp_mask = reclassify_range(temperature.values, temp_min, temp_max)
    depth_mask = reclassify_range(depth.values, depth_min, depth_max)
    combined = combine_masks(temp_mask, depth_mask)

    # --- Restrict to regions ---
    zones = rasterize_regions(regions, temperature)
    combined = np.where(zones > 0, combined, np.nan)
    check_binary_mask(combined)

    # --- Zonal area and percent ---
    names = regions[name_col].to_numpy()
    reference = pd.to_numeric(regions[area_col]).to_numpy(dtype=float)
    area_m2 = zonal_area(combined, zones, cell_areas(temperature), len(regions))
    pct = percent_suitable(area_m2, reference, names)

    zonal = pd.DataFrame(
        {
            "suitable_area_m2": area_m2,
            "suitable_area_km2": area_m2 / M2_PER_KM2,
            "pct_suitable": pct,
        },
        index=pd.Index(names, name=name_col),
    )
    return zonal, temperature.with_values(combined)


def run_species(species: SpeciesRange, temperature: Grid, depth: Grid,
                regions: gpd.GeoDataFrame, **kwargs) -> SpeciesSuitability:
    zonal, mask = compute_suitability(
        temperature, depth, regions,
        species.temp_min, species.temp_max,
        species.depth_min, species.depth_max,
        **kwargs,
    )
    return SpeciesSuitability(species, zonal, mask)
