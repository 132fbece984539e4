"""In-process registry of sessions with a generation in flight.

One pending generation per session; a second request is refused, never
queued. Everything runs on one event loop, so a plain set is enough.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator
from uuid import uuid4

from app.modules.flashcards.errors import GenerationInProgress


def new_session_id() -> str:
    return uuid4().hex


class InFlightRegistry:
    def __init__(self) -> None:
        self._busy: set[str] = set()

    def is_busy(self, session_id: str) -> bool:
        return session_id in self._busy

    @contextmanager
    def claim(self, session_id: str) -> Iterator[None]:
        if session_id in self._busy:
            raise GenerationInProgress()
        self._busy.add(session_id)
        try:
            yield
        finally:
            self._busy.discard(session_id)


# Singleton registry used by the API layer
in_flight = InFlightRegistry()
