from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from .alphabet import ALPHABET, is_symbol
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MAX_PAIRS = len(ALPHABET) // 2

PairLike = Union[str, Sequence[str]]


def _normalize_pair(raw: PairLike) -> Tuple[str, str]:
    if isinstance(raw, str):
        if len(raw) != 2:
            raise ConfigurationError(f"Plug pair {raw!r} must be exactly 2 letters")
        a, b = raw[0], raw[1]
    else:
        try:
            a, b = raw
        except (TypeError, ValueError):
            raise ConfigurationError(f"Plug pair {raw!r} must hold exactly 2 letters") from None
    for ch in (a, b):
        if not (isinstance(ch, str) and len(ch) == 1 and is_symbol(ch)):
            raise ConfigurationError(f"Plug letter {ch!r} is outside A-Z")
    return a, b


@dataclass(frozen=True, init=False, repr=False)
class Plugboard:
    """Swaps letters in disjoint pairs; unplugged letters pass unchanged."""

    pairs: Tuple[Tuple[str, str], ...] = ()
    _mapping: Dict[str, str] = field(default_factory=dict, compare=False)

    def __init__(self, pairs: Iterable[PairLike] = ()):
        normalized = tuple(_normalize_pair(p) for p in pairs)
        if len(normalized) > MAX_PAIRS:
            raise ConfigurationError(f"At most {MAX_PAIRS} plug pairs fit, got {len(normalized)}")

        mapping: Dict[str, str] = {}
        for a, b in normalized:
            if a == b:
                raise ConfigurationError(f"Plugboard cannot pair {a!r} with itself")
            if a in mapping or b in mapping:
                dup = a if a in mapping else b
                raise ConfigurationError(f"Letter {dup!r} is used by more than one plug pair")
            mapping[a] = b
            mapping[b] = a

        object.__setattr__(self, "pairs", normalized)
        object.__setattr__(self, "_mapping", mapping)

    def pass_through(self, c: str) -> str:
        return self._mapping.get(c, c)

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs)}>"


def random_plugboard(rng: random.Random, num_pairs: Optional[int] = None) -> Plugboard:
    """Build a plugboard of random disjoint pairs drawn with ``rng``.

    ``num_pairs`` defaults to a value picked by ``rng`` in 1..13, so a seeded
    generator always produces the same board.
    """
    if num_pairs is None:
        num_pairs = rng.randint(1, MAX_PAIRS)
    if not 0 <= num_pairs <= MAX_PAIRS:
        raise ConfigurationError(f"num_pairs must be within 0..{MAX_PAIRS}, got {num_pairs}")

    letters = list(ALPHABET)
    rng.shuffle(letters)
    pairs = [(letters[2 * i], letters[2 * i + 1]) for i in range(num_pairs)]
    logger.debug("random plugboard with %d pair(s)", num_pairs)
    return Plugboard(pairs)
