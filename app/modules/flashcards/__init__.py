"""Flashcards module exports."""

from .models.flashcards import EXAMPLE_FLASHCARDS, Flashcard, FlashcardDeck
from .credentials import CredentialGate, CookieSessionStore, MemorySessionStore
from .generator import FlashcardGenerator, build_prompt
from .parser import parse_flashcards

__all__ = [
    "EXAMPLE_FLASHCARDS",
    "Flashcard",
    "FlashcardDeck",
    "CredentialGate",
    "CookieSessionStore",
    "MemorySessionStore",
    "FlashcardGenerator",
    "build_prompt",
    "parse_flashcards",
]
