"""
Scheduler configuration and setup.
"""
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from .scheduled_report import run_scheduled_report

logger = logging.getLogger(__name__)

JOB_ID = "registration_report"


def setup_schedulers(scheduler: AsyncIOScheduler, interval_minutes: int) -> bool:
    """
    Add the periodic report job.

    Args:
        scheduler: APScheduler instance
        interval_minutes: Minutes between runs; 0 leaves the scheduler empty

    Returns:
        True if a job was added
    """
    if interval_minutes <= 0:
        logger.info("⏸  Scheduled publishing disabled (PUBLISH_INTERVAL_MINUTES = 0)")
        return False

    scheduler.add_job(
        run_scheduled_report,
        'interval',
        minutes=interval_minutes,
        id=JOB_ID,
        replace_existing=True
    )

    logger.info("✅ Scheduler initialized from .env configuration:")
    logger.info(f"🔄 PUBLISH_INTERVAL_MINUTES = {interval_minutes}")
    return True
