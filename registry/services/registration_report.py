"""
One full report run: fetch, parse, classify, pack, publish.
"""
import logging
from typing import Optional

from ..api.client import RegistryAPI
from ..config.settings import Settings
from ..models import ReportResult
from ..utils.date_helpers import iso_timestamp
from .message_packer import format_report_header, pack_messages
from .report_publisher import publish_blocks
from .roster_parser import parse_roster
from .status_classifier import build_display_lines

logger = logging.getLogger(__name__)


def build_report(tsv: str) -> ReportResult:
    """Turn raw roster text into packed messages without publishing anything"""
    roster = parse_roster(tsv)
    lines = build_display_lines(roster)
    blocks = pack_messages(format_report_header(roster.header.as_of), lines)

    logger.info(
        f"📋 Roster as of {iso_timestamp(roster.header.as_of)}: "
        f"{roster.total} entrants, {len(lines)} displayed, {len(blocks)} messages"
    )
    return ReportResult(as_of=roster.header.as_of, total=roster.total, blocks=blocks)


async def publish_registration_report(
    settings: Settings,
    api: Optional[RegistryAPI] = None
) -> ReportResult:
    """
    Run one report invocation.

    Settings must already be validated. Malformed roster data raises before
    any message is touched; transport errors propagate.

    Args:
        settings: Configuration for this invocation
        api: Client to use; a fresh one is opened and closed when omitted

    Returns:
        ReportResult with publish diagnostics filled in
    """
    if api is None:
        async with RegistryAPI(settings.webhook_url) as own_api:
            return await publish_registration_report(settings, own_api)

    logger.info("🔄 Fetching roster...")
    tsv = await api.fetch_roster(settings.roster_url)

    result = build_report(tsv)
    result.published, result.responses = await publish_blocks(
        api, settings.message_ids, result.blocks
    )

    logger.debug(f"Webhook responses:\n{result.responses}")
    logger.info(f"✅ Report published to {len(result.published)} messages")
    return result


def format_diagnostics(result: ReportResult) -> str:
    """Response body for a successful invocation"""
    return "\n".join([
        f"Last updated: {iso_timestamp(result.as_of)}",
        f"Players: {result.total}",
    ])
