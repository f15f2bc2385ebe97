"""Data models for spreadsheet tables."""

from typing import Any

from pydantic import BaseModel, Field


class SheetTable(BaseModel):
    """A sheet read as a header row followed by data rows."""

    name: str
    header_row: list[Any] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)

    @classmethod
    def from_values(cls, name: str, values: list[list[Any]]) -> "SheetTable":
        """Split raw sheet values into header row and data rows."""
        if not values:
            return cls(name=name)
        return cls(name=name, header_row=list(values[0]), rows=[list(row) for row in values[1:]])

    @staticmethod
    def cell(row: list[Any], index: Any) -> str:
        """Return a cell as a stripped string; missing or empty cells become ''."""
        if index is None or index >= len(row):
            return ""
        value = row[index]
        if value is None or value == "":
            return ""
        return str(value).strip()
