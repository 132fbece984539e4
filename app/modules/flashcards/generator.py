"""Flashcard generator: topic in, parsed ``Term: Definition`` cards out.

The upstream reply is free text. It is parsed line by line instead of
asking the model for structured output, so the only validation applied is
the syntactic one in ``parser.py``.
"""

from __future__ import annotations

from typing import Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.modules.flashcards.credentials import CredentialGate
from app.modules.flashcards.errors import (
    CredentialInvalid,
    EmptyResponse,
    EmptyTopic,
    FlashcardsError,
    NoValidFlashcards,
    NotInitialized,
    UpstreamError,
)
from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.flashcards.parser import parse_flashcards
from app.modules.flashcards.state import InFlightRegistry

logger = get_logger(__name__)

# The topic is substituted verbatim; colons or quotes in it are not escaped.
PROMPT_TEMPLATE = (
    'Generate a list of flashcards for the topic of "{topic}". '
    "Each flashcard should have a term and a concise definition. "
    'Format the output as a list of "Term: Definition" pairs, with each pair '
    "on a new line. Ensure terms and definitions are distinct and clearly "
    "separated by a single colon. Do not add any introduction or closing text. "
    "Here's an example output:\n"
    "Hello: Hola\n"
    "Goodbye: Adiós"
)


def build_prompt(topic: str) -> str:
    return PROMPT_TEMPLATE.format(topic=topic)


class FlashcardGenerator:
    """Runs one generation at a time per session against the gate's client."""

    def __init__(
        self,
        gate: CredentialGate,
        *,
        session_id: str = "local",
        registry: Optional[InFlightRegistry] = None,
        model_name: Optional[str] = None,
        invalid_key_marker: Optional[str] = None,
    ) -> None:
        self.gate = gate
        self.session_id = session_id
        self.registry = registry or InFlightRegistry()
        self.model_name = model_name or settings.flashcards.model_name
        self.invalid_key_marker = (
            invalid_key_marker or settings.flashcards.invalid_key_marker
        )

    async def generate(self, topic: str) -> list[Flashcard]:
        """Generate flashcards for ``topic``.

        Raises NotInitialized or EmptyTopic before any upstream call, then
        GenerationInProgress, CredentialInvalid, UpstreamError,
        EmptyResponse or NoValidFlashcards.
        """
        topic = self._check(topic)
        prompt = build_prompt(topic)
        with self.registry.claim(self.session_id):
            logger.info("Generating flashcards (topic length %d)", len(topic))
            try:
                text = await self.gate.client.complete(self.model_name, prompt)
            except Exception as e:  # noqa: BLE001
                raise self._upstream_failure(e) from e
        return self._parse(text)

    def generate_sync(self, topic: str) -> list[Flashcard]:
        """Blocking variant for the CLI."""
        topic = self._check(topic)
        prompt = build_prompt(topic)
        with self.registry.claim(self.session_id):
            logger.info("Generating flashcards (topic length %d)", len(topic))
            try:
                text = self.gate.client.complete_sync(self.model_name, prompt)
            except Exception as e:  # noqa: BLE001
                raise self._upstream_failure(e) from e
        return self._parse(text)

    def _check(self, topic: str) -> str:
        if not self.gate.has_credential():
            raise NotInitialized()
        topic = (topic or "").strip()
        if not topic:
            raise EmptyTopic()
        return topic

    def _upstream_failure(self, exc: Exception) -> FlashcardsError:
        message = str(exc) or type(exc).__name__
        if self.invalid_key_marker in message:
            self.gate.reject()
            return CredentialInvalid()
        logger.warning("Upstream completion failed: %s", message)
        return UpstreamError(message)

    def _parse(self, text: Optional[str]) -> list[Flashcard]:
        if not text:
            raise EmptyResponse()
        cards = parse_flashcards(text)
        if not cards:
            logger.info("Reply contained no parseable pairs")
            raise NoValidFlashcards()
        logger.info("Parsed %d flashcards", len(cards))
        return cards
