from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from app.core.config import settings
from app.modules.flashcards.credentials import CredentialGate, MemorySessionStore
from app.modules.flashcards.errors import FlashcardsError
from app.modules.flashcards.generator import FlashcardGenerator
from app.modules.flashcards.models.flashcards import Flashcard, FlashcardDeck
from app.modules.flashcards.parser import parse_flashcards


def _load_prompt(args: argparse.Namespace) -> str:
    if args.prompt and args.prompt_file:
        raise SystemExit("Provide either --prompt or --prompt-file, not both")
    if args.prompt_file:
        return Path(args.prompt_file).read_text(encoding="utf-8")
    if args.prompt:
        return args.prompt
    raise SystemExit("--prompt or --prompt-file is required")


def _read_reply(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _dump_cards(cards: list[Flashcard]) -> list[dict]:
    return [c.model_dump() for c in cards]


def main(argv: list[str] | None = None, *, gate: CredentialGate | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashcards-gen", description="Flashcards generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards for a topic")
    g.add_argument("--prompt", "-p", help="Topic (text)")
    g.add_argument("--prompt-file", help="Path to a file containing the topic")
    g.add_argument(
        "--api-key", help="Gemini API key (defaults to GEMINI_API_KEY from the environment)"
    )

    p = sub.add_parser(
        "parse", help="Parse a saved 'Term: Definition' reply without calling the API"
    )
    p.add_argument("file", help="Path to the reply text, or - for stdin")

    args = parser.parse_args(argv)
    try:
        if args.cmd == "generate":
            topic = _load_prompt(args)
            gate = gate or CredentialGate(MemorySessionStore())
            if not gate.has_credential():
                gate.activate(args.api_key or settings.gemini_api_key or "")
            cards = FlashcardGenerator(gate).generate_sync(topic)
            deck = FlashcardDeck(topic=topic.strip(), flashcards=cards)
            print(json.dumps(deck.model_dump(), indent=2, ensure_ascii=False))
            return 0
        if args.cmd == "parse":
            cards = parse_flashcards(_read_reply(args.file))
            print(json.dumps(_dump_cards(cards), indent=2, ensure_ascii=False))
            return 0
    except FlashcardsError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
