"""Line parser for ``Term: Definition`` completion replies."""

from __future__ import annotations

from app.modules.flashcards.models.flashcards import Flashcard

DELIMITER = ":"


def parse_line(line: str) -> Flashcard | None:
    """Return a card for one reply line, or None if the line is not a pair.

    Only the first colon separates the term; later colons stay in the
    definition (``Ratio: 3:2``).
    """
    parts = line.split(DELIMITER)
    if len(parts) < 2 or not parts[0].strip():
        return None
    term = parts[0].strip()
    definition = DELIMITER.join(parts[1:]).strip()
    if not definition:
        return None
    return Flashcard(term=term, definition=definition)


def parse_flashcards(text: str) -> list[Flashcard]:
    """Parse every line of ``text``, dropping lines that are not pairs.

    Order follows the reply and duplicates are kept.
    """
    cards: list[Flashcard] = []
    for line in text.split("\n"):
        card = parse_line(line)
        if card is not None:
            cards.append(card)
    return cards
