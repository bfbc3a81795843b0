"""
Choropleth maps of suitable area and percent suitable per region.
"""

from __future__ import annotations

from pathlib import Path

import geopandas as gpd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.colors import ListedColormap

from .config import REGION_NAME_COL
from .suitability import SpeciesSuitability

OCEAN = "#AED9E0"
BOUNDARY = "#1E5AA8"
SUITABLE = "#238B45"


def _style_axes(ax, bounds, title):
    pad_x = (bounds[2] - bounds[0]) * 0.05
    pad_y = (bounds[3] - bounds[1]) * 0.05
    ax.set_facecolor(OCEAN)
    ax.set_xlim(bounds[0] - pad_x, bounds[2] + pad_x)
    ax.set_ylim(bounds[1] - pad_y, bounds[3] + pad_y)
    ax.set_title(title, fontsize=14, fontweight="bold", pad=12, color="#1A1A2E")
    ax.set_xlabel("Longitude", fontsize=10, labelpad=6)
    ax.set_ylabel("Latitude", fontsize=10, labelpad=6)
    ax.tick_params(labelsize=8)
    ax.grid(True, linestyle=":", alpha=0.3, color="#666666")


def _label_regions(ax, gdf, column, fmt, name_col):
    for _, row in gdf.iterrows():
        pt = row.geometry.representative_point()
        ax.annotate(f"{row[name_col]}\n{fmt.format(row[column])}",
                    xy=(pt.x, pt.y), ha="center", va="center", fontsize=7.5,
                    color="#1A1A2E", zorder=6,
                    bbox=dict(boxstyle="round,pad=0.25", facecolor="white",
                              alpha=0.75, edgecolor="none"))


def plot_suitability_maps(regions: gpd.GeoDataFrame, result: SpeciesSuitability,
                          output_path, name_col: str = REGION_NAME_COL) -> Path:
    """Render the area and percent choropleths side by side and save as PNG."""
    gdf = regions.merge(result.zonal.reset_index(), on=name_col, how="left")
    bounds = gdf.total_bounds
    species = result.species

    fig, (ax_area, ax_pct) = plt.subplots(1, 2, figsize=(18, 10), facecolor="white")

    # --- Suitable area (km2) ---
    _style_axes(ax_area, bounds, f"{species.name}: Suitable Area by Region")
    gdf.plot(ax=ax_area, column="suitable_area_km2", cmap="YlGn",
             edgecolor=BOUNDARY, linewidth=1.0, zorder=2, legend=True,
             legend_kwds={"label": "Suitable area (km2)", "shrink": 0.6})

    mask = result.mask
    west, south, east, north = mask.bounds
    ax_area.imshow(mask.values, extent=[west, east, south, north], origin="upper",
                   cmap=ListedColormap([SUITABLE]), alpha=0.45, zorder=3,
                   aspect="auto", interpolation="nearest")
    _label_regions(ax_area, gdf, "suitable_area_km2", "{:,.0f} km2", name_col)
    ax_area.legend(handles=[mpatches.Patch(facecolor=SUITABLE, alpha=0.45,
                                           label="Suitable cells")],
                   loc="lower left", fontsize=8, framealpha=0.92,
                   edgecolor="#CCCCCC", fancybox=True)

    # --- Percent suitable ---
    _style_axes(ax_pct, bounds, f"{species.name}: Percent of Region Suitable")
    gdf.plot(ax=ax_pct, column="pct_suitable", cmap="PuBuGn", vmin=0,
             edgecolor=BOUNDARY, linewidth=1.0, zorder=2, legend=True,
             legend_kwds={"label": "Suitable (%)", "shrink": 0.6})
    _label_regions(ax_pct, gdf, "pct_suitable", "{:.2f}%", name_col)

    fig.suptitle(f"{species.name} Aquaculture Suitability -- West Coast EEZ\n"
                 f"({species.describe()})",
                 fontsize=16, fontweight="bold", color="#1A1A2E")
    fig.text(0.5, 0.02,
             "Data: NOAA 5 km mean annual SST | GEBCO bathymetry | "
             "West Coast EEZ regions",
             ha="center", fontsize=8, color="#666666", style="italic")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=300, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    return output_path
