"""Domain models for dealership import."""

from __future__ import annotations

import csv

from pydantic import BaseModel, ConfigDict, Field

_FIELDS = ("name", "address", "city", "state", "postal_code", "phone")


class Dealership(BaseModel):
    """A single dealership record, one per CSV line.

    Columns, in order: name, address, city, state, postal_code, phone.
    Only name is required; trailing columns may be omitted.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Dealership display name")
    address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    phone: str | None = None

    @classmethod
    def from_csv_line(cls, line: str) -> Dealership:
        """Parse one CSV record (no header row).

        Quoted fields are supported. Surrounding whitespace is stripped and
        empty fields become None.

        Raises:
            ValueError: If the name is blank or there are too many columns

        Example:
            >>> Dealership.from_csv_line('Acme Motors,"1 Main St, Suite 2",Springfield,IL')
            Dealership(name='Acme Motors', address='1 Main St, Suite 2', ...)
        """
        row = next(csv.reader([line], skipinitialspace=True), [])
        if len(row) > len(_FIELDS):
            raise ValueError(f"Expected at most {len(_FIELDS)} columns, got {len(row)}")

        values = [value.strip() or None for value in row]
        if not values or values[0] is None:
            raise ValueError("Dealership name is required")

        return cls.model_validate(dict(zip(_FIELDS, values)))


class DealershipParseError(ValueError):
    """Raised when a line of an import file is not a valid dealership."""

    def __init__(self, path: str, line_number: int, line: str, reason: str) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: {reason}")
