"""Structured validation findings and the caller-owned report they accumulate in."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class ValidationLevel(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class GridValidationFault(Exception):
    """Raised for tooling faults, never for layout findings.

    Distinct from Error-level messages: a fault means the validator could not
    run at all (e.g. it was handed ``None`` instead of a section).
    """


class ValidationMessage(BaseModel):
    """A single finding with optional 1-based grid coordinates."""

    level: ValidationLevel
    code: str
    message: str
    row: int | None = None
    column: int | None = None
    section: str | None = None

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.level.value.title()}: {self.message}"


@dataclass
class ValidationReport:
    """Ordered, append-only sequence of findings.

    The report is owned by the caller and may collect findings for many
    sections; ``is_valid`` only looks at Error-level messages.
    """

    messages: list[ValidationMessage] = field(default_factory=list)

    def add(self, message: ValidationMessage) -> ValidationReport:
        self.messages.append(message)
        return self

    def add_error(
        self,
        code: str,
        message: str,
        *,
        row: int | None = None,
        column: int | None = None,
        section: str | None = None,
    ) -> ValidationReport:
        return self.add(
            ValidationMessage(
                level=ValidationLevel.ERROR,
                code=code,
                message=message,
                row=row,
                column=column,
                section=section,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        *,
        row: int | None = None,
        column: int | None = None,
        section: str | None = None,
    ) -> ValidationReport:
        return self.add(
            ValidationMessage(
                level=ValidationLevel.WARNING,
                code=code,
                message=message,
                row=row,
                column=column,
                section=section,
            )
        )

    def extend(self, messages: Iterable[ValidationMessage]) -> ValidationReport:
        self.messages.extend(messages)
        return self

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.level is ValidationLevel.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.level is ValidationLevel.WARNING]

    @property
    def is_valid(self) -> bool:
        return not any(m.level is ValidationLevel.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.level is ValidationLevel.WARNING for m in self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[ValidationMessage]:
        return iter(self.messages)

    def __getitem__(self, index: int) -> ValidationMessage:
        return self.messages[index]

    def summary(self) -> str:
        """Render the report as plain text for console output."""
        if self.is_valid:
            head = "Layout is valid."
            if not self.has_warnings:
                return head
        else:
            head = "Layout has validation issues:"
        lines = [head]
        lines.extend(f"- {m}" for m in self.messages)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [m.model_dump(mode="json", exclude_none=True) for m in self.errors],
            "warnings": [m.model_dump(mode="json", exclude_none=True) for m in self.warnings],
        }
