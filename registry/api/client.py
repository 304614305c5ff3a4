"""
Roster and webhook HTTP client - async, using aiohttp.
"""
import aiohttp
import logging
from typing import List, Optional

from ..utils.text_helpers import truncate_text

logger = logging.getLogger(__name__)


class RegistryAPI:
    """Async client for the roster export and the Discord message webhook.

    Transport errors (aiohttp.ClientError) are not caught here: a failed
    fetch or update aborts the whole invocation. Non-2xx statuses are only
    logged.
    """

    def __init__(self, webhook_url: str = ""):
        self.webhook_url = webhook_url.rstrip("/")
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Context manager entry"""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.close()

    async def _ensure_session(self):
        """Ensure session exists"""
        if self.session is None or self.session.closed:
            # no total timeout, requests run as long as the host allows
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=None)
            )

    def message_url(self, message_id: str) -> str:
        return f"{self.webhook_url}/messages/{message_id}"

    async def fetch_roster(self, roster_url: str) -> str:
        """Download the roster export and return its body as text"""
        await self._ensure_session()

        async with self.session.get(roster_url) as response:
            logger.debug(f"Roster request: {roster_url} -> {response.status}")
            text = await response.text(encoding="utf-8", errors="replace")

            if response.status != 200:
                logger.warning(
                    f"Roster request returned status {response.status}: {truncate_text(text)}"
                )
            return text

    async def edit_message(self, message_id: str, content: str) -> str:
        """
        Replace the content of a message previously posted through the webhook.

        Args:
            message_id: Discord message id
            content: New message text

        Returns:
            Raw response body
        """
        await self._ensure_session()

        url = self.message_url(message_id)
        async with self.session.patch(
            url,
            json={"content": content},
            headers={"content-type": "application/json"}
        ) as response:
            text = await response.text()
            logger.debug(f"Edit message {message_id} -> {response.status}")

            if not 200 <= response.status < 300:
                logger.warning(
                    f"Edit message {message_id} returned status {response.status}: {truncate_text(text)}"
                )
            return text

    async def create_message(self, content: str, username: str = "") -> str:
        """Post a new message through the webhook and return its id"""
        await self._ensure_session()

        payload = {"content": content}
        if username:
            payload["username"] = username

        async with self.session.post(
            self.webhook_url,
            params={"wait": "true"},
            json=payload
        ) as response:
            response.raise_for_status()
            data = await response.json()
            return str(data["id"])

    async def create_messages(self, count: int, content: str = "(placeholder)", username: str = "") -> List[str]:
        """Post `count` placeholder messages in order"""
        ids = []
        for _ in range(count):
            ids.append(await self.create_message(content, username))
        return ids

    async def close(self):
        """Close the session"""
        if self.session and not self.session.closed:
            await self.session.close()
