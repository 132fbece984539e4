"""Credential gate: owns the API key for one browser session.

States are ``absent`` and ``active``. A key the upstream rejects is
discarded at once, so the gate reads as absent afterwards; the ``rejected``
flag survives as a notice for the page until the next activate or clear.

The secret itself lives in a session-scoped key/value store. In the web app
that is the signed session cookie; the CLI and tests use a dict.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableMapping, Optional, Protocol

from app.core.config import settings
from app.core.logging import get_logger
from app.modules.flashcards.client import CompletionClient, build_completion_client
from app.modules.flashcards.errors import EmptySecret, InitError, NotInitialized

logger = get_logger(__name__)

ClientFactory = Callable[[str], CompletionClient]


class CredentialState(str, Enum):
    ABSENT = "absent"
    ACTIVE = "active"


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemorySessionStore:
    """Dict-backed store for the CLI and tests."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class CookieSessionStore:
    """Adapter over ``request.session`` from Starlette's SessionMiddleware."""

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    def get(self, key: str) -> Optional[str]:
        value = self._session.get(key)
        return str(value) if value else None

    def set(self, key: str, value: str) -> None:
        self._session[key] = value

    def remove(self, key: str) -> None:
        self._session.pop(key, None)


class CredentialGate:
    def __init__(
        self,
        store: SessionStore,
        *,
        client_factory: ClientFactory = build_completion_client,
        session_key: Optional[str] = None,
    ) -> None:
        self._store = store
        self._client_factory = client_factory
        self._session_key = session_key or settings.flashcards.session_key
        self._client: Optional[CompletionClient] = None
        self._state = CredentialState.ABSENT

    @property
    def rejected(self) -> bool:
        return self._store.get(self._notice_key) is not None

    @property
    def _notice_key(self) -> str:
        return f"{self._session_key}:rejected"

    @property
    def state(self) -> CredentialState:
        return self._state

    @property
    def client(self) -> CompletionClient:
        if self._client is None or self._state != CredentialState.ACTIVE:
            raise NotInitialized()
        return self._client

    def has_credential(self) -> bool:
        return self._state == CredentialState.ACTIVE

    def activate(self, secret: str) -> None:
        """Build a client for ``secret`` and remember it for the session.

        Raises EmptySecret for a blank value and InitError when the client
        cannot be constructed; in both cases the gate stays absent.
        """
        secret = (secret or "").strip()
        if not secret:
            raise EmptySecret()
        try:
            client = self._client_factory(secret)
        except Exception as e:  # noqa: BLE001
            logger.warning("Client construction failed: %s", type(e).__name__)
            self._discard()
            raise InitError() from e
        self._store.set(self._session_key, secret)
        self._client = client
        self._state = CredentialState.ACTIVE
        self._store.remove(self._notice_key)
        logger.info("Credential activated")

    def restore(self) -> bool:
        """Activate from the stored secret, if any. Returns has_credential()."""
        if self.has_credential():
            return True
        stored = self._store.get(self._session_key)
        if not stored:
            return False
        try:
            self.activate(stored)
        except (EmptySecret, InitError):
            # A bad stored key is dropped; the page asks for a new one.
            return False
        return True

    def reject(self) -> None:
        """Upstream said the key is invalid: forget it and leave a notice."""
        self._discard()
        self._store.set(self._notice_key, "1")
        logger.info("Credential rejected by upstream; cleared")

    def clear(self) -> None:
        """User asked to change the key."""
        self._discard()
        self._store.remove(self._notice_key)
        logger.info("Credential cleared")

    def _discard(self) -> None:
        self._store.remove(self._session_key)
        self._client = None
        self._state = CredentialState.ABSENT
