"""Layout checks over resolved placements: bounds, overlaps, coverage."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sectiongrid.grid.placement import CellPlacement, GridPosition, OccupiedColumns
from sectiongrid.models.errors import ValidationReport
from sectiongrid.settings import get_settings

logger = logging.getLogger("sectiongrid.checker")


@dataclass(frozen=True)
class GridBounds:
    """Size of the bounding rectangle."""

    rows: int
    columns: int

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def contains(self, placement: CellPlacement) -> bool:
        return (
            placement.position.row >= 0
            and placement.position.column >= 0
            and placement.row_end <= self.rows
            and placement.column_end <= self.columns
        )


class LayoutChecker:
    """Applies severity policy to a list of placements.

    Runs four passes in order: bounds, occupancy (boundary and overlap
    errors), coverage (one warning listing every uncovered address) and the
    lenient per-row coverage check.
    """

    def __init__(
        self,
        max_grid_cells: int | None = None,
        report_redundant_row_warnings: bool | None = None,
    ) -> None:
        settings = get_settings()
        self.max_grid_cells = (
            max_grid_cells if max_grid_cells is not None else settings.max_grid_cells
        )
        self.report_redundant_row_warnings = (
            report_redundant_row_warnings
            if report_redundant_row_warnings is not None
            else settings.report_redundant_row_warnings
        )

    @staticmethod
    def compute_bounds(
        placements: Sequence[CellPlacement], declared_row_count: int
    ) -> GridBounds:
        if not placements:
            return GridBounds(rows=declared_row_count, columns=0)
        rows = max(declared_row_count, max(p.row_end for p in placements))
        columns = max(p.column_end for p in placements)
        return GridBounds(rows=rows, columns=columns)

    def check(
        self,
        placements: Sequence[CellPlacement],
        declared_row_count: int,
        report: ValidationReport,
        section_name: str = "",
    ) -> ValidationReport:
        bounds = self.compute_bounds(placements, declared_row_count)
        logger.debug(
            "Section '%s' grid bounds: %d rows x %d columns",
            section_name,
            bounds.rows,
            bounds.columns,
        )

        if bounds.cell_count > self.max_grid_cells:
            logger.warning(
                "Section '%s' grid of %d cells exceeds limit of %d",
                section_name,
                bounds.cell_count,
                self.max_grid_cells,
            )
            report.add_error(
                "GRID_TOO_LARGE",
                (
                    f"Section '{section_name}' spans a grid of {bounds.rows}x{bounds.columns} "
                    f"({bounds.cell_count:,} cells), exceeding the maximum of "
                    f"{self.max_grid_cells:,} cells."
                ),
                section=section_name,
            )
            return report

        grid = self.mark_occupancy(placements, bounds, report, section_name)
        missing = self.check_coverage(grid, report, section_name)
        self.check_row_consistency(placements, bounds, report, section_name, missing)
        return report

    def mark_occupancy(
        self,
        placements: Sequence[CellPlacement],
        bounds: GridBounds,
        report: ValidationReport,
        section_name: str = "",
    ) -> list[list[bool]]:
        """Build the occupancy matrix, reporting out-of-bounds cells and overlaps.

        A placement that leaves the rectangle marks nothing. Overlaps are
        reported once per colliding address.
        """
        grid = [[False] * bounds.columns for _ in range(bounds.rows)]

        for placement in placements:
            row, column = placement.position.row, placement.position.column
            if not bounds.contains(placement):
                report.add_error(
                    "CELL_OUT_OF_BOUNDS",
                    (
                        f"Cell at row {row + 1}, column {column + 1} in section "
                        f"'{section_name}' extends beyond grid boundaries "
                        f"(spans {placement.row_span}x{placement.col_span})."
                    ),
                    row=row + 1,
                    column=column + 1,
                    section=section_name,
                )
                continue

            for address in placement.addresses():
                if grid[address.row][address.column]:
                    report.add_error(
                        "CELL_OVERLAP",
                        (
                            f"Cell overlap detected at row {address.row + 1}, "
                            f"column {address.column + 1} in section '{section_name}'."
                        ),
                        row=address.row + 1,
                        column=address.column + 1,
                        section=section_name,
                    )
                else:
                    grid[address.row][address.column] = True

        return grid

    @staticmethod
    def check_coverage(
        grid: list[list[bool]],
        report: ValidationReport,
        section_name: str = "",
    ) -> list[GridPosition]:
        """Report every unmarked address, row-major, in a single warning."""
        missing = [
            GridPosition(row, column)
            for row, cells in enumerate(grid)
            for column, occupied in enumerate(cells)
            if not occupied
        ]
        if missing:
            positions = ", ".join(p.label for p in missing)
            report.add_warning(
                "INCOMPLETE_COVERAGE",
                (
                    f"Section '{section_name}' has incomplete grid coverage. "
                    f"Missing cells at positions: {positions}."
                ),
                section=section_name,
            )
        return missing

    def check_row_consistency(
        self,
        placements: Sequence[CellPlacement],
        bounds: GridBounds,
        report: ValidationReport,
        section_name: str = "",
        missing: Sequence[GridPosition] = (),
    ) -> None:
        """Warn about rows where no cell starts and spanning cells leave gaps.

        Works from the placements alone, independently of the occupancy
        matrix, so its findings may repeat gaps already listed by the
        coverage warning.
        """
        starting_rows = {p.position.row for p in placements}
        rows_with_gaps = {p.row for p in missing}

        for row in range(bounds.rows):
            if row in starting_rows:
                continue
            if not self.report_redundant_row_warnings and row in rows_with_gaps:
                continue

            covered = OccupiedColumns()
            for placement in placements:
                if placement.spans_row(row):
                    covered.add(placement.position.column, placement.column_end)

            if covered.next_free(0) < bounds.columns:
                report.add_warning(
                    "ROW_NOT_COVERED",
                    f"Row {row + 1} in section '{section_name}' is not fully covered by cells.",
                    row=row + 1,
                    section=section_name,
                )
