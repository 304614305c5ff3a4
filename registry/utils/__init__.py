from .date_helpers import (
    DAY_SECONDS,
    parse_date_str,
    format_date_str,
    date_token,
    iso_timestamp
)
from .text_helpers import escape_markdown, truncate_text
from .logging_helpers import setup_logging

__all__ = [
    "DAY_SECONDS",
    "parse_date_str",
    "format_date_str",
    "date_token",
    "iso_timestamp",
    "escape_markdown",
    "truncate_text",
    "setup_logging"
]
