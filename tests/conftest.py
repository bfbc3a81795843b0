"""Shared fixtures: a small synthetic coast on 1 km UTM cells.

Layout (6 rows x 8 columns, 1 km2 cells):
    rows 0-2, cols 0-3 -> region "North"
    rows 3-5, cols 0-3 -> region "South"
    cols 4-7           -> outside every region

Hand-counted suitable cells inside the regions:
    oyster      North 5, South 7
    common carp North 8, South 11
"""

import matplotlib

matplotlib.use("Agg")

import geopandas as gpd
import numpy as np
import pytest
import rasterio
from rasterio.crs import CRS
from rasterio.transform import from_origin
from shapely.geometry import box

from aquaculture_suitability.grids import Grid

ORIGIN_X = 500_000.0
ORIGIN_Y = 4_000_000.0
CELL = 1000.0
UTM = CRS.from_epsg(32610)

NAN = np.nan

TEMPERATURE = np.array([
    [12, 15, 20, 30, 25, 25, 25, 25],
    [11, 10, 31, 5, 25, 25, 25, 25],
    [NAN, 18, 34, 2, 25, 25, 25, 25],
    [20, 20, 20, 20, 25, 25, 25, 25],
    [4, 4, 33, 33, 25, 25, 25, 25],
    [36, 11, 29, 29, 25, 25, 25, 25],
], dtype=np.float64)

DEPTH = np.array([
    [80, 10, 10, 10, 10, 10, 10, 10],
    [10, 10, 10, 50, 10, 10, 10, 10],
    [10, 10, 10, 10, 10, 10, 10, 10],
    [10, 10, 10, 10, 10, 10, 10, 10],
    [10, 10, 10, 10, 10, 10, 10, 10],
    [NAN, 10, 10, 10, 10, 10, 10, 10],
], dtype=np.float64)

REGION_AREA_M2 = 12 * CELL * CELL


def utm_transform(cell=CELL, origin_x=ORIGIN_X, origin_y=ORIGIN_Y):
    return from_origin(origin_x, origin_y, cell, cell)


def make_grid(values, transform=None, crs=UTM):
    return Grid(np.asarray(values, dtype=np.float64),
                transform if transform is not None else utm_transform(), crs)


def make_regions(crs="EPSG:32610", areas=(REGION_AREA_M2, REGION_AREA_M2)):
    north = box(ORIGIN_X, ORIGIN_Y - 3 * CELL, ORIGIN_X + 4 * CELL, ORIGIN_Y)
    south = box(ORIGIN_X, ORIGIN_Y - 6 * CELL, ORIGIN_X + 4 * CELL, ORIGIN_Y - 3 * CELL)
    return gpd.GeoDataFrame(
        {"rgn": ["North", "South"], "area_m2": list(areas)},
        geometry=[north, south],
        crs=crs,
    )


def write_raster(path, values, transform=None, crs=UTM, nodata=None, dtype="float32"):
    values = np.asarray(values)
    with rasterio.open(
        path, "w", driver="GTiff",
        height=values.shape[0], width=values.shape[1], count=1,
        dtype=dtype, crs=crs,
        transform=transform if transform is not None else utm_transform(),
        nodata=nodata,
    ) as dst:
        dst.write(values.astype(dtype), 1)
    return path


@pytest.fixture
def temperature():
    return make_grid(TEMPERATURE)


@pytest.fixture
def depth():
    return make_grid(DEPTH)


@pytest.fixture
def regions():
    return make_regions()
