"""Parsing of bulk certificate uploads."""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import List

logger = logging.getLogger(__name__)

SAMPLE_HEADERS = ["name", "register_number", "description"]
SAMPLE_ROWS = [
    ["John Doe", "SIST2022CS001", "Outstanding Achievement"],
    ["Jane Smith", "SIST2022CS002", "Excellence in Leadership"],
    ["Bob Johnson", "SIST2022CS003", "Exceptional Performance"],
]


class CSVParseError(ValueError):
    """Raised when a bulk upload cannot be parsed."""
    pass


@dataclass(frozen=True)
class BulkCertificate:
    """One recipient row from a bulk certificate upload."""
    id: int
    name: str
    register_number: str
    description: str
    date: str


def parse_csv(csv_data: str) -> List[BulkCertificate]:
    """
    Parse a bulk certificate CSV.
    
    The header row is matched case-insensitively: the column named exactly
    'register_number', the first other column containing 'name', and the first
    column containing 'description'. Blank rows are skipped.
    
    Args:
        csv_data: Raw CSV text
    
    Returns:
        List[BulkCertificate]: One entry per data row, numbered from 1
    
    Raises:
        CSVParseError: If there are no data rows or a required column is missing
    """
    rows = list(csv.reader(io.StringIO(csv_data.lstrip("\ufeff"))))
    if len(rows) <= 1:
        raise CSVParseError("CSV file is empty or has only headers")

    headers = [header.strip().lower() for header in rows[0]]
    register_index = next((i for i, h in enumerate(headers) if h == "register_number"), -1)
    name_index = next((i for i, h in enumerate(headers) if "name" in h and i != register_index), -1)
    description_index = next((i for i, h in enumerate(headers) if "description" in h), -1)

    if name_index == -1:
        raise CSVParseError("CSV must contain a 'name' column")
    if register_index == -1:
        raise CSVParseError("CSV must contain a 'register_number' column")

    today = date.today().isoformat()
    data_rows = [row for row in rows[1:] if any(col.strip() for col in row)]

    def column(columns: List[str], index: int) -> str:
        return columns[index] if 0 <= index < len(columns) else ""

    recipients = []
    for idx, row in enumerate(data_rows):
        columns = [col.strip() for col in row]
        recipients.append(BulkCertificate(
            id=idx + 1,
            name=column(columns, name_index) or f"Recipient {idx + 1}",
            register_number=column(columns, register_index),
            description=column(columns, description_index),
            date=today,
        ))

    logger.info(f"Parsed {len(recipients)} recipients from CSV")
    return recipients


def generate_sample_csv() -> str:
    """Return a sample upload with the expected columns."""
    return "\n".join(",".join(row) for row in [SAMPLE_HEADERS] + SAMPLE_ROWS)
