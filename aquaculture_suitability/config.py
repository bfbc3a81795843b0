"""
Configuration for the West Coast aquaculture suitability analysis.
"""

import os
from pathlib import Path

from .species import SpeciesRange

# ============================================================================
# CONFIGURATION
# ============================================================================
DATA_DIR = Path(os.environ.get("AQUACULTURE_DATA_DIR", "data"))

SST_GLOB    = "average_annual_sst_*.tif"   # one raster per year, Kelvin
DEPTH_PATH  = DATA_DIR / "depth.tif"       # GEBCO bathymetry
REGION_PATH = DATA_DIR / "wc_regions_clean.shp"

OUTPUT_DIR = DATA_DIR / "output"

# Region attributes
REGION_NAME_COL = "rgn"
REFERENCE_AREA_COL = "area_m2"

# Units
KELVIN_OFFSET = 273.15
M2_PER_KM2 = 1_000_000
EARTH_RADIUS_M = 6_371_008.8   # mean radius, for geographic cell areas

# GEBCO stores elevation (negative below sea level)
DEPTH_POSITIVE_DOWN = False

# --- Species criteria ---
OYSTER = SpeciesRange("Oyster", temp_min=11, temp_max=30,
                      depth_min=0, depth_max=70)
COMMON_CARP = SpeciesRange("Common Carp", temp_min=3, temp_max=35,
                           depth_min=0, depth_max=29)

SPECIES = (OYSTER, COMMON_CARP)
