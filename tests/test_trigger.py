import pytest
from aiohttp import test_utils

from registry.app import create_app
from registry.config.settings import Settings, load_settings
from registry.errors import AuthorizationFailure, ConfigurationMissing
from registry.handlers.authorization import check_secret, check_settings

from conftest import SECRET, make_roster

TRIGGER = "/voter-registration"


def test_load_settings_splits_message_ids():
    settings = load_settings({
        "ROSTER_URL": " https://example.com/roster.tsv ",
        "PUBLISH_WEBHOOK_URL": "https://example.com/webhooks/1/abc/",
        "PUBLISH_MESSAGE_IDS": "111  222 333",
        "SHARED_SECRET": "x",
    })
    assert settings.roster_url == "https://example.com/roster.tsv"
    assert settings.webhook_url == "https://example.com/webhooks/1/abc"
    assert settings.message_ids == ("111", "222", "333")


def test_secret_must_match_exactly():
    settings = Settings(secret="Secret")
    check_secret("Secret", settings)
    for provided in (None, "", "secret", "Secret ", " Secret"):
        with pytest.raises(AuthorizationFailure):
            check_secret(provided, settings)


def test_unset_secret_rejects_everything():
    with pytest.raises(AuthorizationFailure):
        check_secret("", Settings())
    with pytest.raises(AuthorizationFailure):
        check_secret(None, Settings())


@pytest.mark.parametrize("missing", ["ROSTER_URL", "PUBLISH_WEBHOOK_URL", "PUBLISH_MESSAGE_IDS"])
def test_check_settings_names_missing_field(missing):
    env = {
        "ROSTER_URL": "https://example.com/roster.tsv",
        "PUBLISH_WEBHOOK_URL": "https://example.com/webhooks/1/abc",
        "PUBLISH_MESSAGE_IDS": "1 2",
    }
    env[missing] = "  "
    with pytest.raises(ConfigurationMissing) as excinfo:
        check_settings(load_settings(env))
    assert excinfo.value.field == missing
    assert str(excinfo.value) == f"Missing environment variable {missing}"


@pytest.mark.asyncio
async def test_missing_secret_is_rejected(report_env):
    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER)
        assert resp.status == 400
        assert await resp.text() == "Invalid secret"

    assert report_env.edits == []


@pytest.mark.asyncio
async def test_wrong_secret_is_rejected(report_env):
    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER, params={"secret": SECRET.upper()})
        assert resp.status == 400
        assert await resp.text() == "Invalid secret"


@pytest.mark.asyncio
async def test_secret_checked_before_configuration(report_env, monkeypatch):
    monkeypatch.delenv("ROSTER_URL")
    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER, params={"secret": "nope"})
        assert resp.status == 400


@pytest.mark.asyncio
async def test_missing_configuration(report_env, monkeypatch):
    monkeypatch.setenv("PUBLISH_MESSAGE_IDS", "")
    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER, params={"secret": SECRET})
        assert resp.status == 500
        assert await resp.text() == "Missing environment variable PUBLISH_MESSAGE_IDS"


@pytest.mark.asyncio
async def test_successful_publish(report_env):
    report_env.roster = make_roster("01/06/2024", rows=[
        ("Alice", "A", "01/05/2024", "01/07/2024"),
        ("Carl", "C", "01/01/2024", "01/02/2024"),
    ])

    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.post(TRIGGER, params={"secret": SECRET})
        assert resp.status == 200
        assert await resp.text() == "Last updated: 2024-06-01T00:00:00.000Z\nPlayers: 2"

    assert [message_id for message_id, _ in report_env.edits] == ["101", "102", "103"]
    assert "**Alice**" in report_env.edits[0][1]
    assert report_env.edits[1][1] == "-"


@pytest.mark.asyncio
async def test_malformed_roster(report_env):
    report_env.roster = make_roster("not a date")

    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER, params={"secret": SECRET})
        assert resp.status == 500
        assert (await resp.text()).startswith("Malformed roster:")

    assert report_env.edits == []


@pytest.mark.asyncio
async def test_unreachable_roster_is_a_server_error(report_env, monkeypatch):
    monkeypatch.setenv("ROSTER_URL", f"http://127.0.0.1:{test_utils.unused_port()}/roster.tsv")

    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get(TRIGGER, params={"secret": SECRET})
        assert resp.status == 500

    assert report_env.edits == []


@pytest.mark.asyncio
async def test_health_check():
    async with test_utils.TestClient(test_utils.TestServer(create_app())) as client:
        resp = await client.get("/health")
        assert resp.status == 200
        assert await resp.text() == "OK"
