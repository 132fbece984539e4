"""Pydantic models for parsed flashcards.

Cards are immutable once built; both sides are stripped and must be
non-empty. The parser filters blank sides before construction, so a
validation error here means a caller bypassed the parser.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Flashcard(BaseModel):
    """Simple term/definition flashcard."""

    model_config = ConfigDict(frozen=True)

    term: str
    definition: str

    @field_validator("term", "definition")
    @classmethod
    def _strip_non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class FlashcardDeck(BaseModel):
    """The cards produced by one generation, in reply order."""

    topic: str
    flashcards: list[Flashcard] = Field(default_factory=list)


EXAMPLE_FLASHCARDS: tuple[Flashcard, ...] = (
    Flashcard(
        term="Mercury",
        definition="The smallest planet in our solar system and nearest to the Sun.",
    ),
    Flashcard(
        term="Venus",
        definition="The second planet from the Sun, known for its thick, toxic atmosphere.",
    ),
    Flashcard(
        term="Earth",
        definition="Our home planet, the only place known to harbor life.",
    ),
    Flashcard(
        term="Mars",
        definition='The "Red Planet," known for its iron oxide-rich soil.',
    ),
    Flashcard(
        term="Jupiter",
        definition="The largest planet, a gas giant with a Great Red Spot.",
    ),
    Flashcard(
        term="Saturn",
        definition="Known for its spectacular ring system, composed mostly of ice particles.",
    ),
)
