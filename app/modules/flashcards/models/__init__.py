from .flashcards import EXAMPLE_FLASHCARDS, Flashcard, FlashcardDeck

__all__ = [
    "EXAMPLE_FLASHCARDS",
    "Flashcard",
    "FlashcardDeck",
]
