"""Placement resolution: turns relative cell spans into absolute grid origins.

Rows declare cells left to right without coordinates. A cell whose row span
is greater than one keeps occupying its columns in the following rows, so
later rows flow around it, the same way HTML tables handle ``rowspan``.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from sectiongrid.models.errors import ValidationReport
from sectiongrid.models.layout import Row
from sectiongrid.settings import get_settings

logger = logging.getLogger("sectiongrid.placement")


@dataclass(frozen=True)
class GridPosition:
    """Zero-based address of one cell in the bounding rectangle."""

    row: int
    column: int

    @property
    def label(self) -> str:
        """1-based ``(row,column)`` form used in diagnostics."""
        return f"({self.row + 1},{self.column + 1})"


@dataclass(frozen=True)
class CellPlacement:
    """A cell's resolved origin plus its spans.

    ``original_index`` is ``(row index, index within row)`` and only keeps
    diagnostics in document order.
    """

    position: GridPosition
    row_span: int
    col_span: int
    original_index: tuple[int, int]

    @property
    def row_end(self) -> int:
        return self.position.row + self.row_span

    @property
    def column_end(self) -> int:
        return self.position.column + self.col_span

    def spans_row(self, row: int) -> bool:
        return self.position.row <= row < self.row_end

    def addresses(self) -> Iterator[GridPosition]:
        for row in range(self.position.row, self.row_end):
            for column in range(self.position.column, self.column_end):
                yield GridPosition(row, column)


class OccupiedColumns:
    """Sorted, merged set of half-open column intervals for one row.

    Overlapping and touching intervals are merged on insert, so any column
    just past an interval's end is free.
    """

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []

    def add(self, start: int, end: int) -> None:
        lo = bisect_left(self._ends, start)
        hi = bisect_right(self._starts, end)
        if lo < hi:
            start = min(start, self._starts[lo])
            end = max(end, self._ends[hi - 1])
        self._starts[lo:hi] = [start]
        self._ends[lo:hi] = [end]

    def next_free(self, column: int) -> int:
        """Smallest free column at or after ``column``."""
        idx = bisect_right(self._starts, column) - 1
        if idx >= 0 and self._ends[idx] > column:
            return self._ends[idx]
        return column


class PlacementResolver:
    """Resolves declared rows into absolute cell placements, in document order.

    Placing stops as soon as the bounding rectangle grows past
    ``max_grid_cells``; the overflowing placement is still returned so the
    checker rejects the grid. Cells flowing into a row start at distinct
    columns, so below the ceiling flow-through bookkeeping stays within
    ``max_grid_cells`` interval inserts.
    """

    def __init__(self, max_grid_cells: int | None = None) -> None:
        self.max_grid_cells = (
            max_grid_cells if max_grid_cells is not None else get_settings().max_grid_cells
        )

    def resolve(
        self,
        rows: Sequence[Row],
        report: ValidationReport | None = None,
        section_name: str = "",
    ) -> list[CellPlacement]:
        """Place every cell of ``rows``.

        Never rejects input. Rows without cells are skipped; when a report is
        given, each one adds a warning to it, including rows after an
        oversized grid stopped placement.
        """
        placements: list[CellPlacement] = []
        # Flow-through occupancy, only tracked for rows the document declares.
        flow = [OccupiedColumns() for _ in rows]
        max_row_end = len(rows)
        max_column_end = 0
        overflow = False

        for row_index, row in enumerate(rows):
            if not row.cells:
                if report is not None:
                    report.add_warning(
                        "EMPTY_ROW",
                        f"Row {row_index + 1} in section '{section_name}' has no cells defined.",
                        row=row_index + 1,
                        section=section_name,
                    )
                continue
            if overflow:
                continue

            occupied = flow[row_index]
            cursor = 0
            for cell_index, cell in enumerate(row.cells):
                cursor = occupied.next_free(cursor)
                placement = CellPlacement(
                    position=GridPosition(row_index, cursor),
                    row_span=cell.row_span,
                    col_span=cell.col_span,
                    original_index=(row_index, cell_index),
                )
                placements.append(placement)

                max_row_end = max(max_row_end, placement.row_end)
                max_column_end = max(max_column_end, placement.column_end)
                if max_row_end * max_column_end > self.max_grid_cells:
                    logger.warning(
                        "Section '%s' stopped placing cells at row %d: grid exceeds %d cells",
                        section_name,
                        row_index + 1,
                        self.max_grid_cells,
                    )
                    overflow = True
                    break

                for later in range(row_index + 1, min(placement.row_end, len(rows))):
                    flow[later].add(cursor, placement.column_end)
                cursor = placement.column_end

        logger.debug(
            "Resolved %d placements from %d rows in section '%s'",
            len(placements),
            len(rows),
            section_name,
        )
        return placements
