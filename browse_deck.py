"""
WordDeck: Terminal Browser
--------------------------

Search and step through the word deck without the GUI.

    python browse_deck.py                  # interactive, A -> Z
    python browse_deck.py -q learn --list  # print every match
    python browse_deck.py --shuffle --seed 7
    python browse_deck.py --pronounce "thank you"
"""

import argparse
import asyncio
import logging
import random
import sys
from typing import List, Optional

from worddeck.config import Config, SettingsManager
from worddeck.services import (
    SortMode,
    SpeechService,
    VocabularyLoadError,
    VocabularyService,
    format_pronunciation,
)
from worddeck.utils import format_count, play_with_system_player, setup_logger

logger = logging.getLogger("worddeck.cli")

HELP_TEXT = """Commands:
  n / Enter      next card
  p              previous card
  r              random card
  s              back to the first card
  /<text>        search (empty "/" clears the search)
  mode alpha     A -> Z order
  mode shuffle   shuffled order
  say            pronounce the current word
  say2           pronounce the translation
  ?              this help
  q              quit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browse_deck",
        description="Browse the bilingual vocabulary deck in the terminal.",
    )
    parser.add_argument("--file", "-f", help="Vocabulary file (.json or pipe-separated .csv)")
    parser.add_argument("--query", "-q", default="", help="Initial search query")
    parser.add_argument("--shuffle", action="store_true", help="Start in shuffled order")
    parser.add_argument("--seed", type=int, help="Random seed for shuffle and random jumps")
    parser.add_argument("--list", action="store_true", help="Print all matches and exit")
    parser.add_argument("--pronounce", metavar="TEXT", help="Speak TEXT in the source language and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def render_card(service: VocabularyService) -> str:
    """Text rendering of the current card."""
    entry = service.current_entry()
    if entry is None:
        return "No matches found. Try another keyword or reset the search."

    position = f"{service.cursor + 1}/{service.match_count()}"
    lines = [
        f"{entry.label}  [{position}]  {service.sort_mode.value}",
        f"  {Config.SOURCE_LABEL}: {entry.source_text}",
        f"  Pronunciation: {service.phonetic_hint(entry.source_text)}",
        f"  {Config.TARGET_LABEL}: {entry.target_text}",
    ]
    return "\n".join(lines)


def list_matches(service: VocabularyService) -> None:
    for entry in service.sequence:
        print(f"{entry.label}  {entry.source_text:<24} {entry.target_text:<24} {format_pronunciation(entry.source_text)}")
    print(f"-- {format_count(service.match_count())} match "
          f"({format_count(service.total_count(), 'word')} total)")


async def speak(text: str, language: str, settings: SettingsManager) -> bool:
    """Render and play ``text`` once, waiting for it to finish."""
    async with SpeechService(
        media_dir=settings.get("MEDIA_DIR"),
        player=play_with_system_player,
        volume=settings.get("VOLUME", Config.TTS_VOLUME),
    ) as speech:
        task = speech.pronounce(text, language)
        if task is None:
            return False
        return await task


def handle_command(
    command: str,
    service: VocabularyService,
    settings: SettingsManager,
) -> bool:
    """
    Apply one interactive command.

    Returns:
        False when the user asked to quit
    """
    command = command.strip()
    if command in ("q", "quit", "exit"):
        return False

    if command in ("", "n", "next"):
        service.next()
    elif command in ("p", "prev"):
        service.prev()
    elif command in ("r", "random"):
        service.jump_random()
    elif command in ("s", "start", "deck"):
        service.jump_to_start()
    elif command.startswith("/"):
        service.set_query(command[1:])
        print(f"[i] {format_count(service.match_count())} match")
    elif command.startswith("mode"):
        try:
            service.set_sort_mode(command[4:].strip() or Config.DEFAULT_SORT_MODE)
        except ValueError as e:
            print(f"[!] {e}")
            return True
    elif command in ("say", "say2"):
        entry = service.current_entry()
        if entry is None:
            print("[!] Nothing to pronounce")
            return True
        if command == "say":
            text, language = entry.source_text, Config.SOURCE_SPEECH_TAG
        else:
            text, language = entry.target_text, Config.TARGET_SPEECH_TAG
        if not asyncio.run(speak(text, language, settings)):
            print("[!] Speech unavailable")
        return True
    elif command in ("?", "h", "help"):
        print(HELP_TEXT)
        return True
    else:
        print(f"[!] Unknown command: {command!r} (? for help)")
        return True

    print(render_card(service))
    return True


def interactive(service: VocabularyService, settings: SettingsManager) -> None:
    print(f"{Config.DECK_TITLE} • {format_count(service.total_count(), 'word')}")
    print(Config.DECK_SUBTITLE)
    print(HELP_TEXT)
    print()
    print(render_card(service))

    while True:
        try:
            command = input("> ")
        except EOFError:
            break
        if not handle_command(command, service, settings):
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = SettingsManager()

    if args.pronounce:
        ok = asyncio.run(speak(args.pronounce, Config.SOURCE_SPEECH_TAG, settings))
        if not ok:
            print("[ERROR] Speech unavailable")
        return 0 if ok else 1

    rng = random.Random(args.seed) if args.seed is not None else None
    sort_mode = SortMode.RANDOMIZED if args.shuffle else settings.get("SORT_MODE", Config.DEFAULT_SORT_MODE)

    try:
        service = VocabularyService.load_from_file(
            args.file or settings.get("VOCAB_FILE"),
            sort_mode=sort_mode,
            rng=rng,
        )
    except VocabularyLoadError as e:
        print(f"[ERROR] {e}")
        return 1
    except ValueError as e:
        print(f"[ERROR] Invalid settings: {e}")
        return 1

    if args.query:
        service.set_query(args.query)

    if args.list:
        list_matches(service)
        return 0

    try:
        interactive(service, settings)
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
