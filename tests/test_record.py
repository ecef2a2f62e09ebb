"""Unit tests for the card record and its field helpers."""

import pytest

from cardmaker.errors import CardSourceError
from cardmaker.record import CardRecord, format_phone


class TestFormatPhone:
    """Phone number formatting."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("5551234567", "(555) 123-4567"),
            ("555-123-4567", "(555) 123-4567"),
            ("(555) 123 4567", "(555) 123-4567"),
            ("555.123.4567", "(555) 123-4567"),
        ],
    )
    def test_ten_digits_are_formatted(self, raw, expected):
        assert format_phone(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "12345", "+1 555 123 4567", "555-1234", "ext. 42"],
    )
    def test_other_lengths_pass_through(self, raw):
        assert format_phone(raw) == raw


class TestFromCsvRow:
    """Positional CSV mapping."""

    def test_maps_seven_columns(self):
        row = ["Ada", "she/her", "Analyst", "Engines", "London", "5551234567", "ada@example.com"]
        record = CardRecord.from_csv_row(row)
        assert record.name == "Ada"
        assert record.pronouns == "she/her"
        assert record.title == "Analyst"
        assert record.company == "Engines"
        assert record.address == "London"
        assert record.phone_number == "5551234567"
        assert record.email == "ada@example.com"
        assert record.department == ""
        assert record.attribution_lines == []

    def test_extra_columns_are_ignored(self):
        row = ["Ada", "", "Analyst", "Engines", "London", "1", "a@b.c", "extra"]
        assert CardRecord.from_csv_row(row).email == "a@b.c"

    def test_short_row_raises(self):
        with pytest.raises(CardSourceError, match="expected 7 fields, got 3"):
            CardRecord.from_csv_row(["Ada", "", "Analyst"])


class TestFromForm:
    """Form field mapping."""

    def test_reads_all_fields(self):
        form = {
            "name": "Ada",
            "pronouns": "she/her",
            "title": "Analyst",
            "company": "Engines",
            "department": "Research",
            "address": "London",
            "land_grant_1": "first",
            "land_grant_3": "third",
            "phone_number": "5551234567",
            "email": "ada@example.com",
        }
        record = CardRecord.from_form(form)
        assert record.department == "Research"
        assert record.phone_number == "5551234567"
        assert record.attribution_lines == ["first", "", "third", ""]

    def test_missing_fields_become_empty(self):
        record = CardRecord.from_form({})
        assert record == CardRecord(attribution_lines=["", "", "", ""])


class TestOutputFilename:
    """Batch output file naming."""

    def test_spaces_become_underscores(self):
        assert CardRecord(name="Ada King Lovelace").output_filename() == (
            "Ada_King_Lovelace_email_signature.png"
        )

    def test_path_separators_are_replaced(self):
        filename = CardRecord(name="../etc/passwd").output_filename()
        assert "/" not in filename
        assert filename == ".._etc_passwd_email_signature.png"
