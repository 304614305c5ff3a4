"""
Scheduled report publishing.
"""
import logging

from ..config.settings import load_settings
from ..errors import RegistryError
from ..handlers.authorization import check_settings
from ..services.registration_report import publish_registration_report

logger = logging.getLogger(__name__)


async def run_scheduled_report():
    """Publish the report without a request; failures are logged, not raised."""
    logger.info("⏰ Scheduled report run starting...")

    try:
        settings = load_settings()
        check_settings(settings)
        result = await publish_registration_report(settings)
    except RegistryError as e:
        logger.error(f"❌ Scheduled report skipped: {e}")
        return
    except Exception as e:
        logger.error(f"Error in run_scheduled_report: {e}", exc_info=True)
        return

    logger.info(f"✅ Scheduled report completed ({result.total} entrants).")
