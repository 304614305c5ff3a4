"""
HTTP trigger for publishing the registration report on demand.
"""
import logging

import aiohttp
from aiohttp import web

from ..config.settings import TRIGGER_PATH, load_settings
from ..errors import AuthorizationFailure, ConfigurationMissing, MalformedRoster
from ..services.registration_report import format_diagnostics, publish_registration_report
from .authorization import check_secret, check_settings

logger = logging.getLogger(__name__)
routes = web.RouteTableDef()


@routes.route("*", TRIGGER_PATH)
async def publish_report(request: web.Request) -> web.Response:
    """Validate the request, then fetch, render and publish the report."""
    settings = load_settings()

    try:
        check_secret(request.query.get("secret"), settings)
    except AuthorizationFailure:
        logger.warning(f"⛔ Rejected report request from {request.remote}: invalid secret")
        return web.Response(status=400, text="Invalid secret")

    try:
        check_settings(settings)
    except ConfigurationMissing as e:
        logger.error(f"❌ {e}")
        return web.Response(status=500, text=str(e))

    try:
        result = await publish_registration_report(settings)
    except MalformedRoster as e:
        logger.error(f"❌ Malformed roster: {e}")
        return web.Response(status=500, text=f"Malformed roster: {e}")
    except aiohttp.ClientError as e:
        logger.error(f"❌ Report request failed: {e}", exc_info=True)
        raise

    return web.Response(text=format_diagnostics(result))


@routes.get("/health")
async def health_check(request: web.Request) -> web.Response:
    """Simple health check"""
    return web.Response(text="OK")
