import importlib
import warnings

import pytest
from fastapi.testclient import TestClient

from app.apis.deps import get_client_factory
from app.modules.flashcards.errors import EmptyTopic
from main import create_app


@pytest.fixture
def client(fake_client):
    def factory(secret):
        if secret == "malformed":
            raise ValueError("bad key format")
        return fake_client

    app = create_app()
    app.dependency_overrides[get_client_factory] = lambda: factory
    with TestClient(app) as c:
        yield c


@pytest.fixture
def keyed_client(client):
    assert client.put("/v1/session/key", json={"api_key": "test-key"}).status_code == 200
    return client


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_index_page_served(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "flashcardsContainer" in res.text


def test_fresh_session_shows_examples(client):
    body = client.get("/v1/session").json()
    assert body["has_credential"] is False
    assert body["rejected"] is False
    assert [c["term"] for c in body["examples"]][:2] == ["Mercury", "Venus"]


def test_set_key_persists_for_session(keyed_client):
    body = keyed_client.get("/v1/session").json()
    assert body == {"has_credential": True, "rejected": False, "examples": []}


def test_blank_key_rejected(client):
    res = client.put("/v1/session/key", json={"api_key": "   "})
    assert res.status_code == 422
    assert res.json()["detail"]["code"] == "empty_secret"


def test_key_that_fails_construction(client):
    res = client.put("/v1/session/key", json={"api_key": "malformed"})
    assert res.status_code == 400
    assert res.json()["detail"]["code"] == "init_error"
    assert client.get("/v1/session").json()["has_credential"] is False


def test_clear_key_restores_examples(keyed_client):
    body = keyed_client.delete("/v1/session/key").json()
    assert body["has_credential"] is False
    assert len(body["examples"]) == 6


def test_generate(keyed_client, fake_client):
    fake_client.reply = "Red: A warm color\nBlue: A cool color"
    res = keyed_client.post("/v1/flashcards/generate", json={"topic": " Colors "})
    assert res.status_code == 200
    assert res.json() == {
        "topic": "Colors",
        "flashcards": [
            {"term": "Red", "definition": "A warm color"},
            {"term": "Blue", "definition": "A cool color"},
        ],
    }


def test_generate_without_key(client, fake_client):
    res = client.post("/v1/flashcards/generate", json={"topic": "Colors"})
    assert res.status_code == 401
    assert res.json()["detail"]["code"] == "not_initialized"
    assert fake_client.calls == []


def test_generate_empty_topic(keyed_client, fake_client):
    res = keyed_client.post("/v1/flashcards/generate", json={"topic": "  "})
    assert res.status_code == 422
    assert res.json()["detail"]["code"] == "empty_topic"
    assert fake_client.calls == []


def test_invalid_key_clears_session(keyed_client, fake_client):
    fake_client.error = RuntimeError("API key not valid. Please pass a valid API key.")
    res = keyed_client.post("/v1/flashcards/generate", json={"topic": "Colors"})
    assert res.status_code == 401
    assert res.json()["detail"]["code"] == "credential_invalid"
    state = keyed_client.get("/v1/session").json()
    assert state["has_credential"] is False
    assert state["rejected"] is True


def test_upstream_failure(keyed_client, fake_client):
    fake_client.error = TimeoutError("deadline exceeded")
    res = keyed_client.post("/v1/flashcards/generate", json={"topic": "Colors"})
    assert res.status_code == 502
    assert res.json()["detail"] == {
        "code": "upstream_error",
        "message": "An error occurred: deadline exceeded",
    }


def test_unparseable_reply(keyed_client, fake_client):
    fake_client.reply = "Sorry, I cannot help with that"
    res = keyed_client.post("/v1/flashcards/generate", json={"topic": "Colors"})
    assert res.status_code == 422
    assert res.json()["detail"]["code"] == "no_valid_flashcards"


def test_examples_endpoint(client):
    assert len(client.get("/v1/flashcards/examples").json()) == 6


def test_status_mapping_imports_without_deprecation_warnings():
    import app.apis.deps as deps
    import app.apis.flashcards.main as routes

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        importlib.reload(deps)
        importlib.reload(routes)
    assert not [w for w in caught if "HTTP_422" in str(w.message)]
    assert deps.http_error(EmptyTopic()).status_code == 422
