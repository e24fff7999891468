"""Layout document types: forms, tabs, columns, sections, rows and cells."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


def normalize_span(value: Any) -> int:
    """Coerce a declared span to a positive integer.

    Missing, non-numeric, zero and negative values all become ``1``.
    """
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, float):
        if not value.is_integer():
            return 1
        value = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 1
        try:
            value = int(text)
        except ValueError:
            return 1
    elif not isinstance(value, int):
        return 1
    return value if value > 0 else 1


class Cell(BaseModel):
    """A declared cell; only its spans matter for grid geometry.

    Other document attributes (ids, labels, control bindings) are ignored.
    """

    row_span: int = Field(1, validation_alias=AliasChoices("rowSpan", "rowspan", "row_span"))
    col_span: int = Field(1, validation_alias=AliasChoices("colSpan", "colspan", "col_span"))

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("row_span", "col_span", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> int:
        return normalize_span(value)


class Row(BaseModel):
    """An ordered list of cells. An empty row is a legitimate spacer."""

    cells: list[Cell] = []

    model_config = {"frozen": True}

    @field_validator("cells", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Section(BaseModel):
    """The unit of grid validation: a named, ordered list of rows."""

    name: str = ""
    rows: list[Row] = []

    model_config = {"frozen": True}

    @field_validator("rows", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class FormColumn(BaseModel):
    sections: list[Section] = []

    model_config = {"frozen": True}


class FormTab(BaseModel):
    name: str = ""
    columns: list[FormColumn] = []

    model_config = {"frozen": True}


class FormLayout(BaseModel):
    """A whole form: tabs, each split into columns that stack sections."""

    name: str = ""
    tabs: list[FormTab] = []

    model_config = {"frozen": True}

    def iter_sections(self) -> list[Section]:
        """All sections in document order (tab, then column, then section)."""
        return [
            section
            for tab in self.tabs
            for column in tab.columns
            for section in column.sections
        ]
