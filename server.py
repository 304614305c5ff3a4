import logging
import sys

from aiohttp import web

from registry.utils.logging_helpers import setup_logging

# ============ Configuration ============

setup_logging(logging.INFO, log_file="registry.log")

logger = logging.getLogger(__name__)

# ============ Main Function ============
def main():
    """Start the report trigger server"""

    logger.info("=" * 60)
    logger.info("🚀 Starting Voter Registration Publisher")
    logger.info("=" * 60)

    from registry.app import create_app
    from registry.config.settings import (
        SERVER_PORT,
        PUBLISH_INTERVAL_MINUTES,
        TRIGGER_PATH,
        REQUIRED_VARS,
        load_settings
    )
    from registry.handlers.authorization import check_settings
    from registry.errors import ConfigurationMissing

    try:
        settings = load_settings()
        check_settings(settings)
        logger.info(f"✅ {', '.join(REQUIRED_VARS)} loaded")
        logger.info(f"  📨 {len(settings.message_ids)} message slots configured")
    except ConfigurationMissing as e:
        # re-read on every request, so the server can start before the environment is complete
        logger.warning(f"⚠️  {e}")

    if not settings.secret:
        logger.warning("⚠️  SHARED_SECRET is empty; every trigger request will be rejected")

    app = create_app(PUBLISH_INTERVAL_MINUTES)

    logger.info(f"🤖 Listening on port {SERVER_PORT}, trigger at {TRIGGER_PATH}")
    web.run_app(app, port=SERVER_PORT, print=None)

    logger.info("👋 Server stopped")

# ============ Entry Point ============
if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("\n👋 Server stopped by user (Ctrl+C)")
    except Exception as e:
        logger.critical(f"❌ Fatal error: {e}", exc_info=True)
        sys.exit(1)
