"""In-memory stand-ins for IGDB, aiohttp and the export sink."""

import inspect
import re

from games.errors import PersistenceError
from games.sources import PublisherSource

ID_PATTERN = re.compile(r"where id = (\d+);")
OFFSET_PATTERN = re.compile(r"offset (\d+);")


def query_id(body):
    return int(ID_PATTERN.search(body).group(1))


def query_offset(body):
    return int(OFFSET_PATTERN.search(body).group(1))


class FakeIGDBClient:
    """Answers queries from per-endpoint handlers (sync or async) and records calls."""

    def __init__(self, handlers=None):
        self.handlers = handlers or {}
        self.calls = []

    async def query(self, endpoint, body):
        self.calls.append((endpoint, body))
        handler = self.handlers.get(endpoint)
        if handler is None:
            return []
        result = handler(body)
        if inspect.isawaitable(result):
            result = await result
        return result

    def bodies(self, endpoint):
        return [body for name, body in self.calls if name == endpoint]

    @property
    def endpoints(self):
        return [name for name, _ in self.calls]


class StubPublisherSource(PublisherSource):
    def __init__(self, publisher="Stub Publisher", error=None):
        self.publisher = publisher
        self.error = error
        self.names = []

    async def lookup(self, name):
        self.names.append(name)
        if self.error is not None:
            raise self.error
        return self.publisher


class RecordingExporter:
    """Remembers the accumulator size of every write."""

    def __init__(self, fail=False, on_write=None):
        self.fail = fail
        self.on_write = on_write
        self.writes = []

    def write(self, games):
        self.writes.append(len(games))
        if self.on_write:
            self.on_write(games)
        if self.fail:
            raise PersistenceError("gameData.json", OSError("disk full"))
        return len(games)


class FakeResponse:
    def __init__(self, status=200, payload=None, text=""):
        self.status = status
        self.payload = payload
        self._text = text

    async def json(self, content_type="application/json"):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Hands out queued FakeResponses and records each request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def _next(self, method, url, kwargs):
        self.requests.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, **kwargs):
        return self._next("POST", url, kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, kwargs)

    async def close(self):
        self.closed = True


def game_payload(game_id, **overrides):
    payload = {
        "id": game_id,
        "name": f"Game {game_id}",
        "platforms": [8, 6],
        "genres": [12, 31],
        "total_rating": 90.5,
        "first_release_date": 1600000000,
        "involved_companies": [game_id * 10],
        "summary": f"Summary of game {game_id}",
        "age_ratings": [game_id * 100],
        "url": f"https://www.igdb.com/games/game-{game_id}",
    }
    payload.update(overrides)
    return payload


def catalog_client(pages, page_size):
    """
    IGDB fake serving `pages` (lists of game payloads) by offset, with
    deterministic age rating, involved company and company answers.
    """
    def games(body):
        index = query_offset(body) // page_size
        return pages[index] if index < len(pages) else []

    return FakeIGDBClient({
        "games": games,
        "age_ratings": lambda body: [{"id": query_id(body), "rating": 4}],
        "involved_companies": lambda body: [{"id": query_id(body), "company": query_id(body) + 1}],
        "companies": lambda body: [{"id": query_id(body), "name": f"Company {query_id(body)}"}],
    })
