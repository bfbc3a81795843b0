"""
West Coast Aquaculture Suitability
==================================
Mean SST (2008-2012) and bathymetry screened against each species'
temperature/depth tolerances, summed per West Coast EEZ region and
mapped as suitable area and percent suitable.
"""

import sys

import numpy as np

from . import config
from .errors import SuitabilityError
from .grids import check_alignment, load_depth, mean_sst
from .maps import plot_suitability_maps
from .regions import load_regions
from .report import summary_report
from .suitability import run_species


def run():
    print("=" * 70)
    print("AQUACULTURE SUITABILITY - U.S. West Coast EEZ")
    print("=" * 70)

    # ============================================================================
    # 1. LOAD DATA
    # ============================================================================
    print("\n[1/5] Averaging annual SST rasters...")
    sst_paths = sorted(config.DATA_DIR.glob(config.SST_GLOB))
    sst = mean_sst(sst_paths)
    print(f"  {len(sst_paths)} year(s), grid {sst.shape[1]}x{sst.shape[0]}, "
          f"res {sst.res[0]:g} x {sst.res[1]:g}")
    print(f"  Mean SST range: {np.nanmin(sst.values):.1f} to {np.nanmax(sst.values):.1f} C")

    print("\n[2/5] Resampling bathymetry onto the SST grid (nearest)...")
    depth = load_depth(config.DEPTH_PATH, sst)
    check_alignment(sst, depth, ("sst", "depth"))
    print("  Grids aligned (resolution, extent, CRS)")

    print("\n[3/5] Loading EEZ regions...")
    regions = load_regions(config.REGION_PATH, sst.crs)
    total_km2 = regions[config.REFERENCE_AREA_COL].sum() / config.M2_PER_KM2
    print(f"  {len(regions)} region(s), {total_km2:,.0f} km2")

    # ============================================================================
    # 2. SUITABILITY
    # ============================================================================
    print("\n[4/5] Computing suitability...")
    results = []
    for species in config.SPECIES:
        result = run_species(species, sst, depth, regions)
        results.append(result)
        print(f"  {species.name:<12} {species.describe()}: "
              f"{result.total_area_km2:,.0f} km2")

    # ============================================================================
    # 3. MAPS
    # ============================================================================
    print("\n[5/5] Creating maps...")
    for result in results:
        out = config.OUTPUT_DIR / f"{result.species.slug}_suitability.png"
        plot_suitability_maps(regions, result, out)
        print(f"  Map saved: {out}")

    print("\n" + "=" * 70)
    print("FULL SUMMARY REPORT")
    print("=" * 70)
    print(summary_report(results))
    print("\nAnalysis complete.")
    return results


def main():
    try:
        run()
    except (SuitabilityError, FileNotFoundError) as e:
        print(f"\nERROR: {e}", file=sys.stderr)
        print("Analysis halted; no results reported.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
