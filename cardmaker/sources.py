import csv
import logging
from pathlib import Path
from typing import List, Mapping

from .errors import CardSourceError
from .record import CSV_COLUMNS, CardRecord


logger = logging.getLogger(__name__)


def read_cards_from_csv(path: Path) -> List[CardRecord]:
    """
    Read card records from a CSV file.

    The first row is a header and is discarded. Blank lines are ignored and
    rows with too few fields are skipped with a warning.
    """
    try:
        f = path.open("r", encoding="utf-8", newline="")
    except OSError as e:
        raise CardSourceError(f"failed to open CSV file {path}: {e}") from e

    cards: List[CardRecord] = []
    with f:
        reader = csv.reader(f)
        try:
            header = next(reader, None)
            if header is None:
                raise CardSourceError("CSV file is empty")

            for row in reader:
                if not row:
                    continue
                if len(row) < len(CSV_COLUMNS):
                    logger.warning(
                        "Skipping invalid record on line %d: %s (expected %d fields, got %d)",
                        reader.line_num,
                        row,
                        len(CSV_COLUMNS),
                        len(row),
                    )
                    continue
                cards.append(CardRecord.from_csv_row(row))
        except csv.Error as e:
            raise CardSourceError(
                f"failed to read CSV record on line {reader.line_num}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise CardSourceError(f"failed to decode CSV file {path}: {e}") from e

    return cards


def read_card_from_form(form: Mapping[str, str]) -> CardRecord:
    return CardRecord.from_form(form)
