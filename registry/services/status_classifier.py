"""
Registration status classification and display lines.
"""
from typing import List

from ..models import EntrantRecord, EntrantStatus, Roster
from ..utils.date_helpers import DAY_SECONDS, date_token
from ..utils.text_helpers import escape_markdown

# expired registrations older than this are not displayed
BACKLOG_DAYS = 31


def classify_entrant(entrant: EntrantRecord, as_of: int) -> EntrantStatus:
    """
    Place an entrant relative to the report date.

    Args:
        entrant: Parsed roster row
        as_of: Report last-updated timestamp, used as "now"

    Returns:
        STALE when the registration ended before the backlog window,
        otherwise exactly one of UPCOMING, ACTIVE or EXPIRED
    """
    if entrant.valid_until < as_of - BACKLOG_DAYS * DAY_SECONDS:
        return EntrantStatus.STALE
    if entrant.valid_from > as_of:
        return EntrantStatus.UPCOMING
    if entrant.valid_until > as_of:
        return EntrantStatus.ACTIVE
    return EntrantStatus.EXPIRED


def format_entrant_line(entrant: EntrantRecord, status: EntrantStatus) -> str:
    """Render one entrant in Discord markdown"""
    name = escape_markdown(entrant.name)
    begins = date_token(entrant.valid_from)
    ends = date_token(entrant.valid_until)

    if status is EntrantStatus.UPCOMING:
        return f"*~~{name}~~ (begins {begins}) (valid through {ends})*"
    if status is EntrantStatus.ACTIVE:
        return f"**{name}** (valid through {ends})"
    if status is EntrantStatus.EXPIRED:
        return f"~~{name}~~ (ended {ends})"
    raise ValueError(f"No display line for {status.value} entrants")


def build_display_lines(roster: Roster) -> List[str]:
    """One line per displayable entrant, in roster order"""
    as_of = roster.header.as_of
    lines = []
    for entrant in roster.entrants:
        status = classify_entrant(entrant, as_of)
        if status is EntrantStatus.STALE:
            continue
        lines.append(format_entrant_line(entrant, status))
    return lines
