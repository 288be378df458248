"""CLI / terminal mode for the spell checker."""

from __future__ import annotations

import argparse
import logging
import time

from spellcheck.constants import MAX_SUGGESTIONS
from spellcheck.engine import SuggestionEngine
from spellcheck.text import check_text, render_marked

log = logging.getLogger("spellcheck")


def check_words(engine: SuggestionEngine, words: list[str]) -> None:
    """Print one verdict line per word."""
    for word in words:
        if engine.is_correct(word):
            print(f"{word}: OK")
            continue
        suggestions = engine.suggest(word)
        if suggestions:
            print(f"{word}: MISSPELLED -> {', '.join(suggestions)}")
        else:
            print(f"{word}: MISSPELLED (no suggestions)")


def run_interactive(engine: SuggestionEngine) -> None:
    """Check lines typed at the terminal until EOF or ``quit``."""
    print("\n" + "=" * 60)
    print("  SPELL CHECKER -- type text, misspelled words show as [word]")
    print("=" * 60)
    print("  quit / exit           -- leave")
    print()

    while True:
        try:
            line = input("  text> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip().lower() in ("quit", "exit"):
            break

        t0 = time.time()
        checked = check_text(engine, line)
        elapsed = time.time() - t0
        if not checked:
            continue

        print(f"  {render_marked(checked)}")
        last = checked[-1]
        if not last.correct:
            if last.suggestions:
                print("  Suggestions:")
                for s in last.suggestions:
                    print(f"    {s}")
            else:
                print("  No suggestions.")
        log.debug("Checked %d words in %.4fs", len(checked), elapsed)


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Spell checker -- flags unknown words and suggests corrections",
    )
    parser.add_argument("words", nargs="*",
                        help="Words to check (omit for interactive mode)")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--limit", type=int, default=MAX_SUGGESTIONS,
                        help="Maximum suggestions per word (default: %(default)s)")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with an error if the dictionary cannot be loaded")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.limit <= 0:
        parser.error("--limit must be a positive integer")

    engine = SuggestionEngine.from_file(args.dict, max_suggestions=args.limit)
    if not engine.loaded and args.strict:
        log.error("Dictionary not loaded, giving up (--strict).")
        return 1

    if args.words:
        check_words(engine, args.words)
    else:
        run_interactive(engine)
    return 0
