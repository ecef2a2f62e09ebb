import os
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

from .errors import CardSourceError


CSV_COLUMNS = ("name", "pronouns", "title", "company", "address", "phone_number", "email")
ATTRIBUTION_KEYS = ("land_grant_1", "land_grant_2", "land_grant_3", "land_grant_4")


@dataclass
class CardRecord:
    name: str = ""
    pronouns: str = ""
    title: str = ""
    company: str = ""
    department: str = ""
    address: str = ""
    phone_number: str = ""
    email: str = ""
    # Up to four free-text lines drawn at the bottom of the card.
    attribution_lines: List[str] = field(default_factory=list)

    @classmethod
    def from_csv_row(cls, row: Sequence[str]) -> "CardRecord":
        """
        Map a CSV row positionally onto a record.

        Columns: name, pronouns, title, company, address, phone, email.
        Extra trailing columns are ignored.
        """
        if len(row) < len(CSV_COLUMNS):
            raise CardSourceError(
                f"expected {len(CSV_COLUMNS)} fields, got {len(row)}"
            )
        values = dict(zip(CSV_COLUMNS, row))
        return cls(**values)

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "CardRecord":
        def value(key: str) -> str:
            raw = form.get(key)
            return str(raw) if raw is not None else ""

        return cls(
            name=value("name"),
            pronouns=value("pronouns"),
            title=value("title"),
            company=value("company"),
            department=value("department"),
            address=value("address"),
            phone_number=value("phone_number"),
            email=value("email"),
            attribution_lines=[value(key) for key in ATTRIBUTION_KEYS],
        )

    def output_filename(self) -> str:
        sanitized = self.name.replace(" ", "_")
        for sep in {os.sep, "/", "\\"}:
            sanitized = sanitized.replace(sep, "_")
        return f"{sanitized}_email_signature.png"


def format_phone(raw: str) -> str:
    """
    Format a 10-digit number as '(XXX) XXX-XXXX'.

    Non-digit characters are ignored when counting; anything that does not
    reduce to exactly ten digits is returned unchanged.
    """
    digits = "".join(ch for ch in raw if "0" <= ch <= "9")
    if len(digits) != 10:
        return raw
    return f"({digits[0:3]}) {digits[3:6]}-{digits[6:10]}"
