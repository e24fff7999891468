"""Section grid validation: gap and overlap detection for span-based form layouts."""

from sectiongrid.grid import SectionGridValidator, validate_form, validate_section
from sectiongrid.models import (
    Cell,
    FormLayout,
    GridValidationFault,
    Row,
    Section,
    ValidationLevel,
    ValidationMessage,
    ValidationReport,
)

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "FormLayout",
    "GridValidationFault",
    "Row",
    "Section",
    "SectionGridValidator",
    "ValidationLevel",
    "ValidationMessage",
    "ValidationReport",
    "validate_form",
    "validate_section",
]
