import asyncio
import json

import pytest

from games.api_caller import IGDBClient, bearer
from games.config import CrawlConfig
from games.errors import ConfigurationError, IGDBRequestError
from games.query import games_query
from tests.fakes import FakeResponse, FakeSession


def run_query(session, endpoint="games", body="fields name;", **config_fields):
    config_fields.setdefault("client_id", "client")
    config_fields.setdefault("access_token", "token")

    async def scenario():
        async with IGDBClient(CrawlConfig(**config_fields), session=session) as client:
            return await client.query(endpoint, body)

    return asyncio.run(scenario())


def test_bearer_prefixes_raw_tokens_only():
    assert bearer("abc") == "Bearer abc"
    assert bearer("Bearer abc") == "Bearer abc"


def test_query_posts_body_with_auth_headers():
    session = FakeSession(FakeResponse(200, payload=[{"id": 1, "name": "Celeste"}]))

    rows = run_query(session, body="fields name; limit 1;")

    assert rows == [{"id": 1, "name": "Celeste"}]
    method, url, kwargs = session.requests[0]
    assert method == "POST"
    assert url == "https://api.igdb.com/v4/games"
    assert kwargs["data"] == "fields name; limit 1;"
    assert kwargs["headers"]["Client-ID"] == "client"
    assert kwargs["headers"]["Authorization"] == "Bearer token"
    # Borrowed sessions stay open
    assert session.closed is False


def test_error_status_raises():
    session = FakeSession(FakeResponse(429, text="Too Many Requests"))

    with pytest.raises(IGDBRequestError) as excinfo:
        run_query(session, endpoint="companies")
    assert excinfo.value.status == 429
    assert excinfo.value.endpoint == "companies"


def test_non_array_payload_raises():
    with pytest.raises(IGDBRequestError):
        run_query(FakeSession(FakeResponse(200, payload={"message": "oops"})))


def test_invalid_json_raises():
    bad = FakeResponse(200, payload=json.JSONDecodeError("Expecting value", "<html>", 0))

    with pytest.raises(IGDBRequestError):
        run_query(FakeSession(bad))


def test_token_exchanged_when_only_secret_configured():
    session = FakeSession(
        FakeResponse(200, payload={"access_token": "fresh", "expires_in": 5000}),
        FakeResponse(200, payload=[]),
    )

    run_query(session, access_token="", client_secret="s3cret")

    token_request, games_request = session.requests
    assert token_request[1] == "https://id.twitch.tv/oauth2/token"
    assert token_request[2]["params"]["grant_type"] == "client_credentials"
    assert games_request[2]["headers"]["Authorization"] == "Bearer fresh"


def test_missing_credentials_cannot_exchange_token():
    with pytest.raises(ConfigurationError):
        run_query(FakeSession(), access_token="", client_secret=None)


def test_games_query_text():
    body = games_query(limit=500, offset=1000, release_date_floor=1577836800, rating_floor=85.0)

    assert body.startswith("fields id, name, platforms, total_rating, first_release_date,")
    assert "where first_release_date > 1577836800 & total_rating > 85 " in body
    assert "& name != null & platforms != null;" in body
    assert body.endswith("limit 500; offset 1000;")


def test_failed_token_exchange_closes_owned_session(monkeypatch):
    session = FakeSession(FakeResponse(401, text="invalid client secret"))
    monkeypatch.setattr("games.api_caller.aiohttp.ClientSession", lambda **kwargs: session)
    client = IGDBClient(CrawlConfig(client_id="client", client_secret="s3cret"))

    async def scenario():
        async with client:
            pass

    with pytest.raises(IGDBRequestError) as excinfo:
        asyncio.run(scenario())

    assert excinfo.value.status == 401
    assert session.closed is True


def test_failed_token_exchange_leaves_borrowed_session_open():
    session = FakeSession(FakeResponse(401, text="invalid client secret"))

    with pytest.raises(IGDBRequestError):
        run_query(session, access_token="", client_secret="s3cret")
    assert session.closed is False
