from __future__ import annotations

import string
from typing import Dict

from .errors import InvalidSymbol

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def is_symbol(c: str) -> bool:
    return c in _INDEX


def index_of(c: str) -> int:
    """Letter -> 0..25, raising InvalidSymbol for anything else."""
    try:
        return _INDEX[c]
    except (KeyError, TypeError):
        raise InvalidSymbol(c) from None


def symbol_at(i: int) -> str:
    """0..25 (taken modulo 26) -> letter."""
    return ALPHABET[i % SIZE]


def is_permutation(wiring: str) -> bool:
    return len(wiring) == SIZE and sorted(wiring) == list(ALPHABET)
