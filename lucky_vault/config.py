"""
config.py

Default locations of the game's data files.

Everything lives under one data directory next to the package. Set
LUCKY_VAULT_DATA_DIR to move it; single paths can still be overridden
from the command line.
"""

import os
from pathlib import Path


DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DATA_DIR = Path(os.getenv("LUCKY_VAULT_DATA_DIR", DEFAULT_DATA_DIR))

COUNTRIES_PATH = DATA_DIR / "countries.txt"
HIGHSCORE_PATH = DATA_DIR / "highscore.txt"
LOGS_DIR = DATA_DIR / "logs"

MODE_NAME = "COUNTRY"
QUIT_TOKEN = "QUIT"
