import string
from functools import lru_cache
from typing import Dict

from .models import Operation

ALPHABET_SIZE = 26


@lru_cache(maxsize=ALPHABET_SIZE)
def _shift_table(normalized_shift: int) -> Dict[int, int]:
    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    k = normalized_shift
    return str.maketrans(lower + upper, lower[k:] + lower[:k] + upper[k:] + upper[:k])


def caesar_shift(text: str, shift: int) -> str:
    """
    Rotate ASCII letters by `shift` positions, wrapping within each case.

    Only A-Z and a-z are in the table, so digits, punctuation and letters
    outside ASCII come through untouched.
    """
    return text.translate(_shift_table(shift % ALPHABET_SIZE))


def caesar_encrypt(text: str, shift: int) -> str:
    """Encrypt with a right shift of `shift` positions."""
    return caesar_shift(text, shift)


def caesar_decrypt(text: str, shift: int) -> str:
    """Undo `caesar_encrypt` with the same key."""
    return caesar_shift(text, -shift)


def transform(text: str, shift: int, operation: Operation) -> str:
    if operation is Operation.DECRYPT:
        return caesar_decrypt(text, shift)
    return caesar_encrypt(text, shift)
