"""
session_log.py

One plain-text log file per game session.

Files are named after the moment the session started, e.g.
`2025-11-03_14-05-09_COUNTRY.txt`, and every event becomes one line:

    14:05:21 guess=Canada outcome=matches=2
"""

import logging
from datetime import datetime
from pathlib import Path

from lucky_vault.config import MODE_NAME


logger = logging.getLogger(__name__)

FILE_STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
TIME_FORMAT = "%H:%M:%S"

USER_EXIT = "user_exit"
WRONG_LENGTH = "wrong_length"


def correct_in(attempts):
    return f"correct in {attempts}"


def matches(count):
    return f"matches={count}"


class SessionLog:
    """
    Append-only writer for a single session.

    Use it as a context manager so the file is closed on every exit path.
    """

    def __init__(self, logs_dir, mode=MODE_NAME, clock=datetime.now):
        self.clock = clock
        logs_dir = Path(logs_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        stem = f"{clock().strftime(FILE_STAMP_FORMAT)}_{mode}"
        self.path, self._file = self._create(logs_dir, stem)
        logger.debug("Logging session to %s", self.path)

    @staticmethod
    def _create(logs_dir, stem):
        # Mode "x" refuses to reuse a file left by a session started the same second.
        suffix = 1
        while True:
            name = f"{stem}.txt" if suffix == 1 else f"{stem}-{suffix}.txt"
            path = logs_dir / name
            try:
                return path, open(path, "x", encoding="utf-8")
            except FileExistsError:
                suffix += 1

    @property
    def closed(self):
        return self._file.closed

    def append(self, guess, outcome):
        if self._file.closed:
            raise ValueError(f"Session log {self.path} is already closed.")

        stamp = self.clock().strftime(TIME_FORMAT)
        self._file.write(f"{stamp} guess={guess} outcome={outcome}\n")
        self._file.flush()

    def close(self):
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
