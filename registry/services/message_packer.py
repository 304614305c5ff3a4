"""
Packing display lines into Discord-sized messages.
"""
from typing import Iterable, List

from ..utils.date_helpers import date_token

# Discord message content limit
MAX_MESSAGE_LENGTH = 2000

REPORT_TITLE = "Up-To-Date Voter Registration"
REPORT_INSTRUCTIONS = (
    "These individuals are registered to vote in all elections, through the date listed. "
    "If your name is not currently listed, or ~~crossed out~~, you are not registered to vote."
)


def format_report_header(as_of: int) -> str:
    """
    Opening text of the first message.

    Args:
        as_of: Report last-updated timestamp

    Returns:
        Title line, blank line and instructions, ending with a newline
    """
    return f"{REPORT_TITLE} (as of {date_token(as_of)})\n\n{REPORT_INSTRUCTIONS}\n"


def pack_messages(header: str, lines: Iterable[str], limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """
    Greedily fill messages with lines, starting with `header`.

    A line that does not fit starts a new message on its own; the header is
    not repeated. At least one message (the header) is always returned.
    """
    messages: List[str] = []
    current = header

    for line in lines:
        if len(current) + 1 + len(line) < limit:
            current += "\n" + line
        else:
            messages.append(current)
            current = line.strip()

    messages.append(current)
    return messages
