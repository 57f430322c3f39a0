# apps/cli/play.py
"""
Interactive WordScramble in the terminal.

This script:
  1) Loads the root-word pool and the dictionary (aborting with a diagnostic
     if either is missing or empty).
  2) Starts a game and prints the root word.
  3) Reads one word per line from stdin; accepted words are added to the
     used-word list, rejected ones print the alert title and message.

Commands typed at the prompt:
  :new   start a new game with a fresh root word
  :quit  leave (end-of-input works too)
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from wordscramble.datasets import (
    default_dictionary_path,
    default_pool_path,
    load_pool,
)
from wordscramble.engine import WordValidationEngine, alert_for, DEFAULT_LANGUAGE
from wordscramble.oracles import get_oracle_ids, load_oracle

NEW_GAME = ":new"
QUIT = ":quit"


def _show_used(engine: WordValidationEngine, out: TextIO) -> None:
    for w in engine.used_words:
        out.write(f"  ({len(w)}) {w}\n")
    out.write(f"score: {engine.score}\n")


def play(engine: WordValidationEngine, pool: list[str], inp: TextIO, out: TextIO) -> int:
    """
    Run the prompt loop until :quit or end of input.
    Returns the number of games played.
    """
    games = 1
    out.write(f"Word to spell from: {engine.start_game(pool)}\n")
    for line in inp:
        cmd = line.strip()
        if cmd == QUIT:
            break
        if cmd == NEW_GAME:
            games += 1
            out.write(f"Word to spell from: {engine.start_game(pool)}\n")
            continue

        res = engine.submit(line)
        alert = alert_for(res, engine.root_word)
        if alert is None:
            _show_used(engine, out)
        else:
            title, message = alert
            out.write(f"{title}: {message}\n")
    return games


def main():
    """
    Parse CLI args, load word lists, and run the interactive loop.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="WordScramble — spell new words from a root word")
    ap.add_argument("--pool", default=str(default_pool_path()),
                    help="path to root-word pool (one word per line)")
    ap.add_argument("--dictionary", default=str(default_dictionary_path()),
                    help="path to dictionary used to decide if a word is real")
    ap.add_argument("--oracle", default="wordlist",
                    help=f"spell-check oracle id (one of: {oracle_choices})")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word choice")
    args = ap.parse_args()

    try:
        pool = load_pool(args.pool)
        oracle = load_oracle(args.oracle, args.dictionary, language=DEFAULT_LANGUAGE)
    except ValueError as e:  # ConfigurationError or unknown oracle id
        sys.exit(f"wordscramble: {e}")

    engine = WordValidationEngine(oracle, seed=args.seed)
    play(engine, pool, sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
