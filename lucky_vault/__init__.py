"""Lucky Vault: a console country-guessing game."""

__version__ = "1.0.0"
