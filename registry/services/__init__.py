from .roster_parser import parse_roster
from .status_classifier import classify_entrant, format_entrant_line, build_display_lines
from .message_packer import format_report_header, pack_messages
from .report_publisher import publish_blocks
from .registration_report import build_report, publish_registration_report, format_diagnostics

__all__ = [
    # Roster parser
    "parse_roster",
    # Status classifier
    "classify_entrant",
    "format_entrant_line",
    "build_display_lines",
    # Message packer
    "format_report_header",
    "pack_messages",
    # Publisher
    "publish_blocks",
    "build_report",
    "publish_registration_report",
    "format_diagnostics"
]
