"""Grid geometry and layout checks for form sections."""

from sectiongrid.grid.checker import GridBounds, LayoutChecker
from sectiongrid.grid.placement import (
    CellPlacement,
    GridPosition,
    OccupiedColumns,
    PlacementResolver,
)
from sectiongrid.grid.validator import SectionGridValidator, validate_form, validate_section

__all__ = [
    "CellPlacement",
    "GridBounds",
    "GridPosition",
    "LayoutChecker",
    "OccupiedColumns",
    "PlacementResolver",
    "SectionGridValidator",
    "validate_form",
    "validate_section",
]
