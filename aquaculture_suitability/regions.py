"""
Region boundaries (EEZ zones) with their reference areas.
"""

from __future__ import annotations

from pathlib import Path

import geopandas as gpd
import numpy as np
import pandas as pd
from rasterio.crs import CRS

from .config import REFERENCE_AREA_COL, REGION_NAME_COL
from .errors import CRSMismatch, MissingReferenceArea


def as_raster_crs(crs) -> CRS | None:
    """Normalise a GeoDataFrame (pyproj) CRS to a rasterio CRS."""
    if crs is None:
        return None
    return CRS.from_user_input(crs)


def same_crs(a: CRS | None, b: CRS | None) -> bool:
    if a is None or b is None:
        return a is b
    return a == b or (a.to_epsg() is not None and a.to_epsg() == b.to_epsg())


def check_region_crs(regions: gpd.GeoDataFrame, crs: CRS | None) -> None:
    got = as_raster_crs(regions.crs)
    if not same_crs(got, crs):
        raise CRSMismatch(crs, got)


def check_reference_area(regions: gpd.GeoDataFrame,
                         area_col: str = REFERENCE_AREA_COL,
                         name_col: str = REGION_NAME_COL) -> None:
    """Every region needs a finite, positive reference area."""
    if area_col not in regions.columns:
        raise MissingReferenceArea(area_col)
    area = pd.to_numeric(regions[area_col], errors="coerce").to_numpy(dtype=float)
    bad = ~np.isfinite(area) | (area <= 0)
    if bad.any():
        names = regions[name_col] if name_col in regions.columns else regions.index
        raise MissingReferenceArea(area_col, list(np.asarray(names)[bad]))


def load_regions(path, crs: CRS | None = None,
                 name_col: str = REGION_NAME_COL,
                 area_col: str = REFERENCE_AREA_COL) -> gpd.GeoDataFrame:
    """Read the region dataset and bring it into the grid CRS."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Region file {path} does not exist.")
    regions = gpd.read_file(path)
    if name_col not in regions.columns:
        raise KeyError(f"Region file {path} has no '{name_col}' column")
    check_reference_area(regions, area_col, name_col)

    if crs is not None and not same_crs(as_raster_crs(regions.crs), crs):
        regions = regions.to_crs(crs.to_wkt())
    return regions.reset_index(drop=True)
