"""Error types for the suitability pipeline.

Two families: precondition failures, raised before any computation when
the inputs break an assumption, and invariant violations, raised after
computation when a result is impossible for valid inputs. Every error
names the invariant it guards.

Example:
    try:
        zonal, mask = compute_suitability(sst, depth, regions, 11, 30, 0, 70)
    except GridMisalignment as e:
        print(f"Grids differ in {e.field}: expected {e.expected}, got {e.got}")
    except InvariantViolation as e:
        print(f"Pipeline defect ({e.invariant}): {e}")
"""

from __future__ import annotations


class SuitabilityError(Exception):
    """Base class for all suitability pipeline errors."""

    pass


class PreconditionError(SuitabilityError):
    """Raised when an input violates a precondition of the pipeline.

    Attributes:
        invariant: Short name of the violated precondition.
    """

    def __init__(self, invariant: str, message: str):
        self.invariant = invariant
        super().__init__(f"Precondition '{invariant}' failed: {message}")


class GridMisalignment(PreconditionError):
    """Raised when two grids differ in shape, resolution, extent or CRS.

    Attributes:
        field: Which property differs ("shape", "resolution", "extent", "crs").
        expected: Value on the reference grid.
        got: Value on the other grid.
    """

    def __init__(self, field: str, expected, got, names: tuple[str, str] = ("reference", "other")):
        self.field = field
        self.expected = expected
        self.got = got
        message = (
            f"grid {field} mismatch between '{names[0]}' and '{names[1]}':\n"
            f"  Expected: {expected}\n"
            f"  Got: {got}\n"
            "All grids must share resolution, extent and CRS."
        )
        super().__init__("grid alignment", message)


class CRSMismatch(PreconditionError):
    """Raised when the region set is not in the grid CRS."""

    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(
            "region crs",
            f"regions are in {got}, grids are in {expected}",
        )


class InvalidRange(PreconditionError):
    """Raised when a threshold range is empty or reversed.

    Attributes:
        name: Which range ("temperature" or "depth").
        lower: Lower bound as given.
        upper: Upper bound as given.
    """

    def __init__(self, name: str, lower: float, upper: float):
        self.name = name
        self.lower = lower
        self.upper = upper
        super().__init__(
            "range order",
            f"{name} range [{lower}, {upper}] requires lower < upper",
        )


class MissingReferenceArea(PreconditionError):
    """Raised when regions lack the reference area needed for percentages.

    Attributes:
        column: The reference area column.
        regions: Regions without a usable area (empty if the column is missing).
    """

    def __init__(self, column: str, regions: list | None = None):
        self.column = column
        self.regions = list(regions or [])
        if self.regions:
            detail = f"no positive '{column}' for region(s) {self.regions}"
        else:
            detail = f"region set has no '{column}' column"
        super().__init__("region reference area", detail)


class InvariantViolation(SuitabilityError):
    """Raised when a computed result breaks a postcondition.

    This signals a defect in reclassification, combination or
    aggregation, never a data quality issue.

    Attributes:
        invariant: Short name of the violated postcondition.
    """

    def __init__(self, invariant: str, message: str):
        self.invariant = invariant
        super().__init__(f"Invariant '{invariant}' violated: {message}")


class MaskValueError(InvariantViolation):
    """Raised when a suitability mask holds a value other than 1 or no-data."""

    def __init__(self, values):
        self.values = list(values)
        super().__init__(
            "binary mask",
            f"mask contains values other than 1 and no-data: {self.values}",
        )


class PercentOutOfRange(InvariantViolation):
    """Raised when a region's percent suitable falls outside [0, 100].

    Attributes:
        regions: Mapping of region name to the offending percentage.
    """

    def __init__(self, regions: dict):
        self.regions = dict(regions)
        detail = ", ".join(f"{k}={v:.3f}" for k, v in self.regions.items())
        super().__init__(
            "percent range",
            f"percent suitable outside [0, 100] ({detail}); "
            "check area units and region/raster alignment",
        )
