"""
Roster export parsing.

Spreadsheet layout (tab separated):
    row 0   information header, ignored
    row 1   column I (index 8) holds the last-updated date; the rest is ignored
    row 2+  name, tag, valid-from date, valid-until date, extra columns ignored

All dates are DD/MM/YYYY.
"""
import logging
from typing import List

from ..errors import MalformedRoster
from ..models import EntrantRecord, ReportHeader, Roster
from ..utils.date_helpers import parse_date_str

logger = logging.getLogger(__name__)

HEADER_ROW = 1
LAST_UPDATED_COLUMN = 8
SKIP_ROWS = 2


def parse_header(row: str) -> ReportHeader:
    """Read the last-updated date from the second roster row"""
    cells = row.split("\t")
    if len(cells) <= LAST_UPDATED_COLUMN:
        raise MalformedRoster(
            f"Header row has {len(cells)} columns, last-updated date expected in column {LAST_UPDATED_COLUMN + 1}"
        )
    return ReportHeader(as_of=parse_date_str(cells[LAST_UPDATED_COLUMN]))


def parse_entrant(row: str) -> EntrantRecord:
    """Build an EntrantRecord from one roster row"""
    cells = row.split("\t")
    if len(cells) < 4:
        raise MalformedRoster(f"Entrant row has {len(cells)} columns, expected at least 4: {row.strip()!r}")

    name, tag, valid_from, valid_until = cells[:4]
    return EntrantRecord(
        name=name.strip(),
        tag=tag.strip(),
        valid_from=parse_date_str(valid_from),
        valid_until=parse_date_str(valid_until),
    )


def parse_roster(tsv: str) -> Roster:
    """
    Parse a roster export.

    Args:
        tsv: Raw tab-separated text

    Returns:
        Roster with the report header and entrants in input order

    Raises:
        MalformedRoster: if the header row is missing or a row has too few columns
        MalformedDate: if any date cell is not DD/MM/YYYY
    """
    rows = tsv.split("\n")
    if len(rows) <= HEADER_ROW:
        raise MalformedRoster("Roster has no header row")

    header = parse_header(rows[HEADER_ROW])

    entrants: List[EntrantRecord] = []
    for line_no, row in enumerate(rows[SKIP_ROWS:], start=SKIP_ROWS + 1):
        if not row.strip():
            continue
        try:
            entrants.append(parse_entrant(row))
        except MalformedRoster as e:
            raise type(e)(f"Line {line_no}: {e}") from e

    logger.debug(f"Parsed roster: {len(entrants)} entrants, as of {header.as_of}")
    return Roster(header=header, entrants=entrants)
