"""Shared test fixtures for section grid validation."""

from __future__ import annotations

import pytest

from sectiongrid.grid.checker import LayoutChecker
from sectiongrid.grid.placement import PlacementResolver
from sectiongrid.grid.validator import SectionGridValidator
from sectiongrid.models.errors import ValidationReport
from sectiongrid.models.layout import Cell, Row, Section

# A row is written as a list of (row_span, col_span) pairs.
SpanRows = list[list[tuple[int, int]]]


def make_section(rows: SpanRows, name: str = "TestSection") -> Section:
    return Section(
        name=name,
        rows=[
            Row(cells=[Cell(row_span=rs, col_span=cs) for rs, cs in row])
            for row in rows
        ],
    )


@pytest.fixture
def resolver() -> PlacementResolver:
    return PlacementResolver(max_grid_cells=10_000)


@pytest.fixture
def checker() -> LayoutChecker:
    """Checker with explicit defaults so local environment settings don't leak in."""
    return LayoutChecker(max_grid_cells=10_000, report_redundant_row_warnings=True)


@pytest.fixture
def validator(checker: LayoutChecker) -> SectionGridValidator:
    return SectionGridValidator(checker=checker)


@pytest.fixture
def report() -> ValidationReport:
    return ValidationReport()
