# tests/test_app.py

import threading
import time

import pytest
from fastapi.testclient import TestClient

from wordgen import app as app_module
from wordgen.app import app, get_generator
from wordgen.sources import GOOGLE_COMMON_URL

CORPUS = "apple\ngrape\nmango\ncandy\nzebra\nqwxyz\n"


@pytest.fixture
def client(make_generator):
    gen, session = make_generator({GOOGLE_COMMON_URL: (200, CORPUS)})
    app.dependency_overrides[get_generator] = lambda: gen
    yield TestClient(app), session
    app.dependency_overrides.clear()


def test_sources(client):
    c, _ = client
    body = c.get("/api/sources").json()
    assert body["ok"] is True
    assert body["sources"][0]["id"] == "google_common"
    assert {"id", "name", "description"} == set(body["sources"][0])


def test_generate(client):
    c, _ = client
    body = c.post("/api/generate", json={"length": 5, "sources": ["common", "wordnik"]}).json()
    assert body["ok"] is True
    assert sorted(body["words"]) == ["apple", "candy", "grape", "mango", "zebra"]
    assert body["failed_sources"] == ["wordnik"]
    assert body["stats"]["total_words"] == 5


def test_generate_without_sources(client):
    c, session = client
    body = c.post("/api/generate", json={"length": 5, "sources": []}).json()
    assert body == {"ok": False, "error": "At least one word source must be selected", "kind": "no_sources"}
    assert session.calls == []


def test_generate_all_failed(client):
    c, _ = client
    body = c.post("/api/generate", json={"length": 5, "sources": ["wordnik"]}).json()
    assert body["ok"] is False
    assert body["kind"] == "all_sources_failed"
    assert body["failed_sources"] == ["wordnik"]


def test_words_and_debug_endpoints(client):
    c, _ = client
    body = c.get("/api/words", params={"length": 5, "source": "google_common", "count": 2}).json()
    assert body["ok"] is True
    assert len(body["words"]) == 2

    c.get("/api/words", params={"source": "wordnik"})
    errors = c.get("/api/debug/errors").json()["errors"]
    assert "404" in errors["wordnik"]

    debug = c.get("/api/debug/cache", params={"sample": 2}).json()
    cache = debug["cache"]
    assert any(k.startswith("wordlist_") for k in debug["persisted"])
    assert cache["google_common"]["count"] == 6
    assert len(cache["google_common"]["sample"]) == 2

    report = c.get("/api/debug/sources/wordnik").json()
    assert report["ok"] is False
    assert report["alternatives"]


def test_generator_built_once_under_concurrent_first_requests(monkeypatch):
    built = []

    def slow_factory():
        time.sleep(0.05)
        built.append(object())
        return built[-1]

    monkeypatch.setattr(app_module, "_GENERATOR", None)
    monkeypatch.setattr(app_module, "WordGenerator", slow_factory)
    results = []
    threads = [threading.Thread(target=lambda: results.append(get_generator())) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(built) == 1
    assert all(r is built[0] for r in results)
