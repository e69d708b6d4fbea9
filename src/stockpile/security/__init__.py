"""Encryption of item files exchanged between installations."""

from stockpile.security.item_file import ItemFileCipher, load_or_create_key

__all__ = ["ItemFileCipher", "load_or_create_key"]
