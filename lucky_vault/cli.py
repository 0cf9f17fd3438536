"""
cli.py

Command line entry point for Lucky Vault.

Options:
-words-file PATH: country list to draw the secret from.
-score-file PATH: best-score record.
-logs-dir PATH: directory for per-session log files.
-seed N: seed the secret draw, for reproducible rounds.
-reveal: print the secret word before the first guess (for testing).
-verbose: show diagnostic logging.
"""

import argparse
import logging

import numpy as np

from lucky_vault.config import HIGHSCORE_PATH, LOGS_DIR, MODE_NAME, QUIT_TOKEN
from lucky_vault.game import GuessSession, play
from lucky_vault.scores import HighScoreStore
from lucky_vault.session_log import SessionLog
from lucky_vault.words import load_countries


def print_banner(session, best):
    print(f"LUCKY VAULT - {MODE_NAME} MODE. Type {QUIT_TOKEN} to exit.")
    print(f"Secret word length: {len(session.secret)}")
    if best is None:
        print("Current best: -")
    else:
        print(f"Current best: {best} attempts")


def run(words_file, score_file, logs_dir, seed=None, reveal=False):
    countries = load_countries(words_file)
    if not countries:
        print("No countries found")
        return 0

    try:
        scores = HighScoreStore(score_file)
        log = SessionLog(logs_dir, mode=MODE_NAME)
    except OSError as exc:
        raise SystemExit(f"Cannot start the game: {exc}") from exc

    with log:
        session = GuessSession(countries, scores, log, rng=np.random.default_rng(seed))
        print_banner(session, scores.current_best())
        if reveal:
            print(f"(For testing) Secret word is: {session.secret}")
        play(session)

    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Lucky Vault: guess the secret country, one letter position at a time."
    )
    parser.add_argument(
        "-words-file",
        type=str,
        default=None,
        help="Newline-separated country list (default: data/countries.txt).",
    )
    parser.add_argument(
        "-score-file",
        type=str,
        default=str(HIGHSCORE_PATH),
        help="Best-score file, created if missing (default: data/highscore.txt).",
    )
    parser.add_argument(
        "-logs-dir",
        type=str,
        default=str(LOGS_DIR),
        help="Directory for session logs, created if missing (default: data/logs).",
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for the secret draw (default: random).",
    )
    parser.add_argument(
        "-reveal",
        action="store_true",
        help="Print the secret word at the start of the round.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(
        args.words_file,
        args.score_file,
        args.logs_dir,
        seed=args.seed,
        reveal=args.reveal,
    )


if __name__ == "__main__":
    raise SystemExit(main())
