import logging
import os

import pandas as pd

from .errors import RecordFileError
from .pipeline import ExpressionRecord

logger = logging.getLogger(__name__)

_SNO_PATTERN = r"[+-]?\d+"


def parse_record_lines(lines: list[str]) -> list[ExpressionRecord]:
    """
    Turn ``sno,infix`` lines into records.

    Blank lines, a header line and any line whose first field is not an
    integer are skipped. Everything after the first comma is the expression,
    so an expression containing commas survives. Surrounding whitespace and a
    pair of enclosing double quotes are stripped.
    """
    if not lines:
        return []

    rows = pd.Series(lines, dtype="object").astype(str).str.strip()
    rows = rows[rows != ""]
    if rows.empty:
        return []

    parts = rows.str.split(",", n=1, expand=True)
    if parts.shape[1] < 2:
        return []
    sno = parts[0].str.strip()
    infix = parts[1].str.strip()

    valid = sno.str.fullmatch(_SNO_PATTERN, na=False) & infix.notna()
    quoted = (
        infix.str.startswith('"', na=False)
        & infix.str.endswith('"', na=False)
        & (infix.str.len() >= 2)
    )
    infix = infix.where(~quoted, infix.str[1:-1])

    return [
        ExpressionRecord(int(n), str(expr))
        for n, expr in zip(sno[valid], infix[valid])
    ]


def read_records(file_path: str) -> list[ExpressionRecord]:
    """
    Read ``(sno, infix)`` records from a CSV file.

    Raises:
        RecordFileError: If the file is missing or cannot be decoded.
    """
    if not os.path.exists(file_path):
        raise RecordFileError(f"CSV file not found at path: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RecordFileError(f"Error reading CSV file {file_path}: {e}") from e

    records = parse_record_lines(lines)
    logger.info("Successfully read %d expressions from %s", len(records), file_path)
    return records
