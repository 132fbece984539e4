import pytest

from app.modules.flashcards.credentials import CredentialGate, MemorySessionStore


class FakeClient:
    """Stands in for the Gemini completion client."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def _respond(self, model_id, prompt):
        self.calls.append((model_id, prompt))
        if self.error is not None:
            raise self.error
        return self.reply

    async def complete(self, model_id, prompt):
        return self._respond(model_id, prompt)

    def complete_sync(self, model_id, prompt):
        return self._respond(model_id, prompt)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def gate(store, fake_client):
    return CredentialGate(
        store, client_factory=lambda secret: fake_client, session_key="GEMINI_API_KEY"
    )


@pytest.fixture
def active_gate(gate):
    gate.activate("test-key")
    return gate
