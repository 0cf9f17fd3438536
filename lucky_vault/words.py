"""
words.py

Handles loading the country word list.
No numpy here, just clean text handling.
"""

import logging

from lucky_vault.config import COUNTRIES_PATH


logger = logging.getLogger(__name__)


def load_word_list(path):
    """
    Load a newline-separated word list into a Python list.

    Blank lines are skipped and file order is kept. A missing or unreadable
    file yields an empty list, so callers must check before playing.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read word list %s: %s", path, exc)
        return []

    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def load_countries(path=None):
    """Load the country list, from the configured data directory by default."""
    return load_word_list(COUNTRIES_PATH if path is None else path)
