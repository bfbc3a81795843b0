"""
Raster grids: loading, SST averaging, depth resampling, alignment checks
and per-cell area.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import rasterio
from affine import Affine
from rasterio.crs import CRS
from rasterio.transform import array_bounds
from rasterio.warp import Resampling, reproject

from .config import DEPTH_POSITIVE_DOWN, EARTH_RADIUS_M, KELVIN_OFFSET
from .errors import GridMisalignment


@dataclass(frozen=True)
class Grid:
    """A single-band raster held in memory. No-data cells are NaN."""

    values: np.ndarray
    transform: Affine
    crs: CRS | None

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    @property
    def res(self) -> tuple[float, float]:
        return (abs(self.transform.a), abs(self.transform.e))

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(west, south, east, north)"""
        return array_bounds(self.shape[0], self.shape[1], self.transform)

    def with_values(self, values: np.ndarray) -> "Grid":
        """New grid on the same georeferencing."""
        if values.shape != self.shape:
            raise ValueError(f"values shape {values.shape} does not match grid {self.shape}")
        return Grid(values, self.transform, self.crs)


def load_grid(path) -> Grid:
    """Read band 1 of a raster as float64, with the nodata value mapped to NaN."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Raster file {path} does not exist.")
    with rasterio.open(path) as src:
        values = src.read(1).astype(np.float64)
        if src.nodata is not None and not np.isnan(src.nodata):
            values[values == src.nodata] = np.nan
        return Grid(values, src.transform, src.crs)


def check_alignment(a: Grid, b: Grid, names: tuple[str, str] = ("reference", "other")) -> None:
    """Raise GridMisalignment unless both grids share shape, resolution, extent and CRS."""
    if a.shape != b.shape:
        raise GridMisalignment("shape", a.shape, b.shape, names)
    if not np.allclose(a.res, b.res, rtol=1e-9, atol=0):
        raise GridMisalignment("resolution", a.res, b.res, names)
    if not np.allclose(a.bounds, b.bounds, rtol=1e-9, atol=1e-9):
        raise GridMisalignment("extent", a.bounds, b.bounds, names)
    if a.crs != b.crs:
        raise GridMisalignment("crs", a.crs, b.crs, names)


def mean_sst(paths) -> Grid:
    """Average annual SST rasters cell by cell and convert Kelvin to Celsius.

    A cell missing in any year is missing in the mean.
    """
    paths = [Path(p) for p in paths]
    if not paths:
        raise FileNotFoundError("No SST rasters given.")
    grids = [load_grid(p) for p in paths]
    first = grids[0]
    for path, grid in zip(paths[1:], grids[1:]):
        check_alignment(first, grid, (paths[0].name, path.name))

    stack = np.stack([g.values for g in grids])
    return first.with_values(stack.mean(axis=0) - KELVIN_OFFSET)


def load_depth(path, like: Grid, positive_down: bool = DEPTH_POSITIVE_DOWN) -> Grid:
    """Resample a bathymetry raster onto ``like`` with nearest-neighbour.

    Nearest-neighbour keeps the original depth values instead of
    averaging across neighbouring cells. Returned depths are positive
    metres below sea level; elevation-convention rasters (negative below
    sea level) are negated unless ``positive_down`` is set.
    """
    bathy = load_grid(path)
    destination = np.full(like.shape, np.nan, dtype=np.float64)
    reproject(
        source=bathy.values,
        destination=destination,
        src_transform=bathy.transform,
        src_crs=bathy.crs,
        src_nodata=np.nan,
        dst_transform=like.transform,
        dst_crs=like.crs,
        dst_nodata=np.nan,
        resampling=Resampling.nearest,
    )
    if not positive_down:
        destination = -destination
    return like.with_values(destination)


def cell_areas(grid: Grid) -> np.ndarray:
    """Area of every cell in square metres.

    Projected grids have a constant cell area from the resolution and the
    CRS linear unit. Geographic grids use the area of the spherical band
    between each row's bounding latitudes.
    """
    t = grid.transform
    if t.b != 0 or t.d != 0:
        raise ValueError("Rotated grids are not supported.")
    rows, _ = grid.shape

    if grid.crs is not None and grid.crs.is_geographic:
        tops = t.f + t.e * np.arange(rows)
        bottoms = tops + t.e
        band = np.abs(np.sin(np.radians(tops)) - np.sin(np.radians(bottoms)))
        row_area = EARTH_RADIUS_M ** 2 * np.radians(abs(t.a)) * band
        return np.broadcast_to(row_area[:, np.newaxis], grid.shape)

    factor = 1.0
    if grid.crs is not None:
        _, factor = grid.crs.linear_units_factor
    return np.full(grid.shape, abs(t.a * t.e) * factor ** 2)
