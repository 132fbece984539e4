"""Plain-text completion client using pydantic-ai and the Gemini provider.

The generator only needs ``complete(model_id, prompt) -> text``: one
request, one reply, no tools, no structured output and no output retries.
A reply without text comes back as ``""`` so the caller can classify it.
Imports for the LLM provider are kept lazy so the module loads without
Google credentials.
"""

from __future__ import annotations

from typing import Callable

from pydantic_ai.direct import model_request, model_request_sync
from pydantic_ai.messages import ModelRequest, ModelResponse, TextPart
from pydantic_ai.models import Model

ModelFactory = Callable[[str], Model]


def _reply_text(response: ModelResponse) -> str:
    return "".join(p.content for p in response.parts if isinstance(p, TextPart))


class CompletionClient:
    """Sends a single user prompt to a model built per call."""

    def __init__(self, model_factory: ModelFactory) -> None:
        self._model_factory = model_factory

    async def complete(self, model_id: str, prompt: str) -> str:
        model = self._model_factory(model_id)
        response = await model_request(model, [ModelRequest.user_text_prompt(prompt)])
        return _reply_text(response)

    def complete_sync(self, model_id: str, prompt: str) -> str:
        """Synchronous wrapper if an event loop is unavailable."""
        model = self._model_factory(model_id)
        response = model_request_sync(model, [ModelRequest.user_text_prompt(prompt)])
        return _reply_text(response)


def build_completion_client(api_key: str) -> CompletionClient:
    """Build a Gemini-backed client; provider errors propagate to the caller."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)

    def _model(model_id: str) -> Model:
        return GoogleModel(model_id, provider=provider)

    return CompletionClient(_model)
