# tests/conftest.py
import os
import sys

import pytest
import requests

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

# Keep tests off the real cache file and the network-backed denylist
os.environ.setdefault("WORDGEN_CACHE_DB", ":memory:")
os.environ.setdefault("WORDGEN_DENYLIST", "0")

from wordgen.cache import CorpusCache  # noqa: E402
from wordgen.generator import WordGenerator  # noqa: E402
from wordgen.store import WordStore  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int = 200, body: str | bytes = "", reason: str = "") -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.reason = reason or ("OK" if status_code == 200 else "Error")
        self.closed = False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession:
    """Stands in for requests.Session: url -> (status, body) or an exception to raise."""

    def __init__(self, routes: dict | None = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[str] = []

    def get(self, url, timeout=None, headers=None, stream=False):
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return FakeResponse(404, "Not Found", "Not Found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        return FakeResponse(status, body)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def store():
    s = WordStore(CorpusCache(":memory:"))
    yield s
    s.persisted.close()


@pytest.fixture
def make_generator(store):
    def _make(routes: dict, **kwargs) -> tuple[WordGenerator, FakeSession]:
        session = FakeSession(routes)
        gen = WordGenerator(store=store, session=session, **kwargs)
        return gen, session
    return _make


@pytest.fixture
def timeout_error():
    return requests.Timeout("read timed out")
