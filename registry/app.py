"""
aiohttp application factory.
"""
import logging

from aiohttp import web
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from .handlers import routes
from .schedulers import setup_schedulers

logger = logging.getLogger(__name__)

scheduler_key = web.AppKey("scheduler", AsyncIOScheduler)


async def start_scheduler(app: web.Application):
    scheduler = app[scheduler_key]
    if scheduler.get_jobs():
        scheduler.start()
        logger.info("✅ Scheduler started")


async def stop_scheduler(app: web.Application):
    scheduler = app[scheduler_key]
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("  ✅ Scheduler stopped")


def create_app(publish_interval_minutes: int = 0) -> web.Application:
    """
    Build the web application serving the report trigger.

    Args:
        publish_interval_minutes: Also publish on this interval; 0 disables it

    Returns:
        Configured aiohttp Application
    """
    app = web.Application()
    app.add_routes(routes)

    scheduler = AsyncIOScheduler()
    setup_schedulers(scheduler, publish_interval_minutes)
    app[scheduler_key] = scheduler

    app.on_startup.append(start_scheduler)
    app.on_cleanup.append(stop_scheduler)
    return app
