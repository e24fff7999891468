"""Pydantic domain models for section grid validation."""

from sectiongrid.models.errors import (
    GridValidationFault,
    ValidationLevel,
    ValidationMessage,
    ValidationReport,
)
from sectiongrid.models.layout import (
    Cell,
    FormColumn,
    FormLayout,
    FormTab,
    Row,
    Section,
    normalize_span,
)

__all__ = [
    "Cell",
    "FormColumn",
    "FormLayout",
    "FormTab",
    "GridValidationFault",
    "Row",
    "Section",
    "ValidationLevel",
    "ValidationMessage",
    "ValidationReport",
    "normalize_span",
]
