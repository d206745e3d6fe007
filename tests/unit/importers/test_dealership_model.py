"""Tests for Dealership.from_csv_line."""

import pytest
from pydantic import ValidationError

from fsseam.core.importers import Dealership


class TestFromCsvLine:
    """Tests for the CSV domain constructor."""

    def test_full_record(self):
        """Test all six columns map in order."""
        d = Dealership.from_csv_line("Acme Motors,100 Main St,Springfield,IL,62701,217-555-0100")

        assert d == Dealership(
            name="Acme Motors",
            address="100 Main St",
            city="Springfield",
            state="IL",
            postal_code="62701",
            phone="217-555-0100",
        )

    def test_quoted_field_with_comma(self):
        """Test quoted fields keep embedded commas."""
        d = Dealership.from_csv_line('Capital Cars,"1 Capitol Way, Suite 4",Olympia')

        assert d.address == "1 Capitol Way, Suite 4"
        assert d.city == "Olympia"
        assert d.state is None

    def test_name_only(self):
        """Test trailing columns are optional."""
        d = Dealership.from_csv_line("Solo Dealer")
        assert d.name == "Solo Dealer"
        assert d.phone is None

    def test_whitespace_stripped_and_empty_fields_none(self):
        """Test padding is stripped and empty columns become None."""
        d = Dealership.from_csv_line("  Acme ,, Springfield ,")

        assert d.name == "Acme"
        assert d.address is None
        assert d.city == "Springfield"
        assert d.state is None

    @pytest.mark.parametrize("line", ["", "   ", ",100 Main St,Springfield"])
    def test_blank_name_raises(self, line: str):
        """Test a missing name is rejected."""
        with pytest.raises(ValueError, match="name is required"):
            Dealership.from_csv_line(line)

    def test_too_many_columns_raises(self):
        """Test extra columns are rejected."""
        with pytest.raises(ValueError, match="at most 6 columns"):
            Dealership.from_csv_line("a,b,c,d,e,f,g")

    def test_records_are_frozen(self):
        """Test records are immutable."""
        d = Dealership.from_csv_line("Acme")
        with pytest.raises(ValidationError):
            d.name = "Other"  # type: ignore[misc]
