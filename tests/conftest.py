import json
import os
import sys
from typing import Dict, List, Sequence, Tuple

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


def _ensure_project_root_on_path() -> None:
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

SECRET = "s3cret"


def make_roster(as_of: str = "01/06/2024", rows: Sequence[Sequence[str]] = ()) -> str:
    """Build a roster export with the last-updated date in column I of row 2."""
    lines = [
        "Voter Registry\tMaintained by the clerk",
        "\t".join(["Name", "Tag", "Valid", "Expires", "", "", "", "Last updated:", as_of]),
    ]
    lines += ["\t".join(row) for row in rows]
    return "\n".join(lines) + "\n"


class FakeUpstream:
    """Serves the roster export and records webhook message edits."""

    def __init__(self):
        self.roster = make_roster()
        self.roster_bytes = None
        self.edits: List[Tuple[str, str]] = []
        self.content_types: List[str] = []
        self.edit_status: Dict[str, int] = {}
        self.created: List[dict] = []
        self.base_url = ""

    @property
    def roster_url(self) -> str:
        return f"{self.base_url}/roster.tsv"

    @property
    def webhook_url(self) -> str:
        return f"{self.base_url}/webhooks/1/token"

    @property
    def edited_contents(self) -> List[str]:
        return [content for _, content in self.edits]

    async def get_roster(self, request):
        if self.roster_bytes is not None:
            return web.Response(body=self.roster_bytes, content_type="text/tab-separated-values")
        return web.Response(text=self.roster)

    async def edit_message(self, request):
        message_id = request.match_info["message_id"]
        payload = await request.json()
        self.edits.append((message_id, payload["content"]))
        self.content_types.append(request.headers.get("Content-Type", ""))
        return web.Response(
            status=self.edit_status.get(message_id, 200),
            text=json.dumps({"id": message_id}),
        )

    async def create_message(self, request):
        payload = await request.json()
        payload["wait"] = request.query.get("wait")
        self.created.append(payload)
        return web.json_response({"id": str(9000 + len(self.created))})

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/roster.tsv", self.get_roster)
        app.router.add_patch("/webhooks/1/token/messages/{message_id}", self.edit_message)
        app.router.add_post("/webhooks/1/token", self.create_message)
        return app


@pytest_asyncio.fixture
async def upstream():
    fake = FakeUpstream()
    server = TestServer(fake.make_app())
    await server.start_server()
    fake.base_url = f"http://{server.host}:{server.port}"
    yield fake
    await server.close()


@pytest.fixture
def report_env(monkeypatch, upstream):
    """Point the environment at the fake upstream with three message slots."""
    monkeypatch.setenv("ROSTER_URL", upstream.roster_url)
    monkeypatch.setenv("PUBLISH_WEBHOOK_URL", upstream.webhook_url)
    monkeypatch.setenv("PUBLISH_MESSAGE_IDS", "101 102 103")
    monkeypatch.setenv("SHARED_SECRET", SECRET)
    return upstream
