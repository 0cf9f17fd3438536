"""
main.py

Plays one round of Lucky Vault in COUNTRY mode with the default data files.
"""

from lucky_vault.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
