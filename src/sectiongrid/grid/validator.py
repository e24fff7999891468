"""Orchestrates section validation: Section → Placements → Checks → Report."""

from __future__ import annotations

import logging

from sectiongrid.grid.checker import LayoutChecker
from sectiongrid.grid.placement import PlacementResolver
from sectiongrid.models.errors import GridValidationFault, ValidationLevel, ValidationReport
from sectiongrid.models.layout import FormLayout, Section

logger = logging.getLogger("sectiongrid.validator")


class SectionGridValidator:
    """Checks that every address of a section's grid is filled exactly once."""

    def __init__(self, checker: LayoutChecker | None = None) -> None:
        self._checker = checker or LayoutChecker()
        self._resolver = PlacementResolver(max_grid_cells=self._checker.max_grid_cells)

    def validate_section(
        self,
        section: Section,
        report: ValidationReport | None = None,
    ) -> ValidationReport:
        """Validate one section, appending findings to ``report``.

        Returns the report that was appended to (a new one when none was
        passed). Raises ``GridValidationFault`` only when ``section`` is not
        a ``Section`` at all.
        """
        if section is None:
            raise GridValidationFault("Cannot validate grid layout: section is None")
        if not isinstance(section, Section):
            raise GridValidationFault(
                f"Cannot validate grid layout: expected Section, got {type(section).__name__}"
            )
        if report is None:
            report = ValidationReport()

        start = len(report)
        if not section.rows:
            report.add_warning(
                "NO_ROWS",
                f"Section '{section.name}' has no rows defined.",
                section=section.name,
            )
        else:
            # Phase 1: geometry
            placements = self._resolver.resolve(section.rows, report, section.name)
            # Phase 2: policy
            self._checker.check(placements, len(section.rows), report, section.name)

        added = report.messages[start:]
        logger.info(
            "Validated section '%s': %d error(s), %d warning(s)",
            section.name,
            sum(1 for m in added if m.level is ValidationLevel.ERROR),
            sum(1 for m in added if m.level is ValidationLevel.WARNING),
        )
        return report

    def validate_form(
        self,
        form: FormLayout,
        report: ValidationReport | None = None,
    ) -> ValidationReport:
        """Validate every section of a form, in document order, into one report."""
        if not isinstance(form, FormLayout):
            raise GridValidationFault(
                f"Cannot validate grid layout: expected FormLayout, got {type(form).__name__}"
            )
        if report is None:
            report = ValidationReport()
        for section in form.iter_sections():
            self.validate_section(section, report)
        return report


def validate_section(
    section: Section, report: ValidationReport | None = None
) -> ValidationReport:
    """Validate ``section`` with a validator built from the current settings."""
    return SectionGridValidator().validate_section(section, report)


def validate_form(form: FormLayout, report: ValidationReport | None = None) -> ValidationReport:
    """Validate every section of ``form`` with the current settings."""
    return SectionGridValidator().validate_form(form, report)
