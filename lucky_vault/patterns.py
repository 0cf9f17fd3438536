"""
patterns.py

Computes the feedback for a guess against the secret word.

Feedback is the number of positions where the guess and the secret hold the
same letter, ignoring case. Both words are turned into character arrays so
the comparison is a single vectorised equality.
"""

import numpy as np


def _letters(word: str) -> np.ndarray:
    # Lower-case each character on its own so positions never shift.
    return np.array([ch.lower() for ch in word])


def position_matches(guess: str, secret: str) -> int:
    """
    Count indices i where guess[i] and secret[i] agree case-insensitively.

    Only defined for words of equal length; the caller reports a wrong
    length before asking for matches.
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"Cannot compare {guess!r} with a secret of length {len(secret)}."
        )
    if not secret:
        return 0
    return int(np.count_nonzero(_letters(guess) == _letters(secret)))


def pick_secret(words: list[str], rng: np.random.Generator) -> str:
    """Draw one word uniformly at random from the list."""
    if not words:
        raise ValueError("Cannot pick a secret from an empty word list.")
    return words[int(rng.integers(len(words)))]
