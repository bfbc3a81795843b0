"""Aquaculture suitability of West Coast EEZ regions from SST and depth."""

from .errors import (
    CRSMismatch,
    GridMisalignment,
    InvalidRange,
    InvariantViolation,
    MaskValueError,
    MissingReferenceArea,
    PercentOutOfRange,
    PreconditionError,
    SuitabilityError,
)
from .grids import Grid, cell_areas, check_alignment, load_depth, load_grid, mean_sst
from .regions import load_regions
from .species import SpeciesRange
from .suitability import SpeciesSuitability, compute_suitability, run_species

__version__ = "0.1.0"
