from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.flashcards.parser import parse_flashcards, parse_line


def _pairs(cards):
    return [(c.term, c.definition) for c in cards]


def test_well_formed_lines_in_order():
    assert _pairs(parse_flashcards("A: B\nC: D")) == [("A", "B"), ("C", "D")]


def test_line_without_colon_is_dropped():
    assert parse_flashcards("no colon here") == []


def test_definition_keeps_later_colons():
    cards = parse_flashcards("Ratio: 3:2")
    assert cards == [Flashcard(term="Ratio", definition="3:2")]


def test_empty_term_is_dropped():
    assert parse_flashcards(": something") == []


def test_empty_definition_is_dropped():
    assert parse_flashcards("Term:   ") == []


def test_blank_lines_yield_nothing():
    assert parse_flashcards("\n\n") == []


def test_mixed_reply_keeps_only_pairs_and_duplicates():
    reply = (
        "Here are your flashcards\n"
        "\n"
        "Red: A warm color\n"
        "  Blue :  A cool color  \r\n"
        "Red: A warm color\n"
        "Meeting: Starts at 10:30\n"
    )
    assert _pairs(parse_flashcards(reply)) == [
        ("Red", "A warm color"),
        ("Blue", "A cool color"),
        ("Red", "A warm color"),
        ("Meeting", "Starts at 10:30"),
    ]


def test_parse_line_returns_none_for_non_pairs():
    assert parse_line("just text") is None
    assert parse_line("   :   ") is None
    assert parse_line("Term: Definition").term == "Term"
