"""
scores.py

Persists the best (lowest) number of attempts needed to win.

The record is a single line in a flat text file:

    COUNTRY=<attempts>

Anything else in the file (blank, another prefix, a non-integer value) is
read as "no record yet".
"""

import logging
import re
from pathlib import Path
from typing import Optional

from lucky_vault.config import MODE_NAME


logger = logging.getLogger(__name__)

PREFIX = f"{MODE_NAME}="
_INTEGER = re.compile(r"[+-]?\d+")


def parse_record(text: str) -> Optional[int]:
    """Return the stored attempts, or None when the text holds no valid record."""
    line = text.strip()
    if not line.startswith(PREFIX):
        return None

    value = line[len(PREFIX):].strip()
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def format_record(attempts: int) -> str:
    return f"{PREFIX}{attempts}"


class HighScoreStore:
    """
    Owns the best-score file and the cached value read from it.

    The file (and its parent directories) are created empty when missing.
    current_best() and update() are the only ways to read or change the record.
    """

    def __init__(self, path):
        self.path = Path(path)

        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
            logger.debug("Created empty score file %s", self.path)

        self._best = self._load()

    def _load(self) -> Optional[int]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.debug("Ignoring undecodable score file %s", self.path)
            return None
        best = parse_record(text)
        if best is None and text.strip():
            logger.debug("Ignoring malformed score record in %s", self.path)
        return best

    def current_best(self) -> Optional[int]:
        return self._best

    def update(self, attempts: int) -> bool:
        """
        Record `attempts` if it beats the current best (or there is none).

        The file is rewritten in full with one write. Returns True when the
        record changed.
        """
        if self._best is not None and attempts >= self._best:
            return False

        self.path.write_text(format_record(attempts), encoding="utf-8")
        self._best = attempts
        logger.debug("New best score %d saved to %s", attempts, self.path)
        return True
