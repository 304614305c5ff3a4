"""
Create the placeholder messages that the report is published into.

Usage:
    python create_messages.py COUNT [USERNAME]

Prints the new message ids space separated, ready for PUBLISH_MESSAGE_IDS.
"""
import asyncio
import logging
import sys

from registry.api.client import RegistryAPI
from registry.config.settings import WEBHOOK_URL_VAR, load_settings
from registry.utils.logging_helpers import setup_logging

setup_logging(logging.INFO)


async def create_messages(count: int, username: str = ""):
    """Post `count` placeholder messages through the configured webhook"""
    settings = load_settings()
    if not settings.webhook_url:
        print(f"❌ {WEBHOOK_URL_VAR} is not set")
        sys.exit(1)

    print(f"🔄 Creating {count} placeholder messages...")

    async with RegistryAPI(settings.webhook_url) as api:
        ids = await api.create_messages(count, username=username)

    print("✅ Messages created. Set this in .env:\n")
    print(f"PUBLISH_MESSAGE_IDS={' '.join(ids)}")

if __name__ == "__main__":
    try:
        count = int(sys.argv[1])
    except (IndexError, ValueError):
        print(__doc__)
        sys.exit(1)

    username = sys.argv[2] if len(sys.argv) > 2 else "Voter Registry"
    asyncio.run(create_messages(count, username))
