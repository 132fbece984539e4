"""Error taxonomy for flashcard generation and key management.

Every error carries a stable ``code`` (used by the HTTP layer and the
browser page) and a user-facing ``message``. None of them are retried;
each ends the current attempt.
"""

from __future__ import annotations


class FlashcardsError(Exception):
    code = "flashcards_error"
    default_message = "An unknown error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyTopic(FlashcardsError):
    code = "empty_topic"
    default_message = "Please enter a topic or some terms and definitions."


class NotInitialized(FlashcardsError):
    code = "not_initialized"
    default_message = "API client is not initialized. Please set your API key."


class EmptySecret(FlashcardsError):
    code = "empty_secret"
    default_message = "Please enter a valid API key."


class InitError(FlashcardsError):
    code = "init_error"
    default_message = (
        "Failed to initialize with the provided API key. "
        "Please check the key and try again."
    )


class UpstreamError(FlashcardsError):
    """Network or service failure; the upstream message is passed through."""

    code = "upstream_error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_message
        super().__init__(f"An error occurred: {self.detail}")


class CredentialInvalid(FlashcardsError):
    code = "credential_invalid"
    default_message = (
        'An error occurred: Your API key is not valid. '
        'Please click "Change Key" to enter a new one.'
    )


class EmptyResponse(FlashcardsError):
    code = "empty_response"
    default_message = (
        "Failed to generate flashcards or received an empty response. "
        "Please try again."
    )


class NoValidFlashcards(FlashcardsError):
    code = "no_valid_flashcards"
    default_message = (
        "No valid flashcards could be generated from the response. "
        "Please check the format."
    )


class GenerationInProgress(FlashcardsError):
    code = "generation_in_progress"
    default_message = "A generation is already in progress."
