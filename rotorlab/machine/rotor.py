"""Rotor wheels and the ordered assembly that steps them.

A rotor is a fixed wiring permutation viewed through two offsets: the
visible ``position`` (which moves as keys are pressed) and the fixed
``ring_setting``. Both are added to the entry contact before the wiring is
consulted, so the same wheel yields a different substitution at every
position.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from .alphabet import ALPHABET, SIZE, index_of, is_permutation, is_symbol, symbol_at
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def _check_letter(name: str, value: str) -> None:
    if not (isinstance(value, str) and len(value) == 1 and is_symbol(value)):
        raise ConfigurationError(f"Rotor {name} must be a single letter A-Z, got {value!r}")


@dataclass
class Rotor:
    wiring: str
    position: str = "A"
    ring_setting: str = "A"
    notch: str = "A"
    model_id: str = "custom"

    # reverse lookup: wiring letter -> contact index
    _inverse: List[int] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not is_permutation(self.wiring):
            raise ConfigurationError(
                f"Rotor {self.model_id} wiring must be a permutation of {ALPHABET}"
            )
        _check_letter("position", self.position)
        _check_letter("ring_setting", self.ring_setting)
        _check_letter("notch", self.notch)
        self._inverse = [0] * SIZE
        for i, c in enumerate(self.wiring):
            self._inverse[index_of(c)] = i

    def _shift(self) -> int:
        return index_of(self.position) + index_of(self.ring_setting)

    def forward(self, c: str) -> str:
        offset = (index_of(c) + self._shift()) % SIZE
        return self.wiring[offset]

    def reverse(self, c: str) -> str:
        i = self._inverse[index_of(c)]
        return symbol_at(i - self._shift() + SIZE)

    def step(self) -> bool:
        """Advance one letter; True when the new position is the notch."""
        self.position = symbol_at(index_of(self.position) + 1)
        return self.position == self.notch


class RotorAssembly:
    """Left-to-right sequence of rotors; the last one is the fast wheel."""

    def __init__(self, rotors: Sequence[Rotor]):
        if not rotors:
            raise ConfigurationError("A machine needs at least one rotor")
        # each assembly owns its wheels; positions are never shared
        self._rotors: List[Rotor] = [replace(r) for r in rotors]

    def __len__(self) -> int:
        return len(self._rotors)

    def __iter__(self):
        return iter(self._rotors)

    @property
    def positions(self) -> str:
        return "".join(r.position for r in self._rotors)

    def step(self) -> int:
        """Step the rightmost rotor and ripple leftwards while notches hit.

        Returns how many rotors moved.
        """
        moved = 0
        for rotor in reversed(self._rotors):
            moved += 1
            if not rotor.step():
                break
        logger.debug("stepped %d rotor(s), positions now %s", moved, self.positions)
        return moved

    def forward(self, c: str) -> str:
        for rotor in self._rotors:
            c = rotor.forward(c)
        return c

    def reverse(self, c: str) -> str:
        for rotor in reversed(self._rotors):
            c = rotor.reverse(c)
        return c

    def __repr__(self) -> str:
        models = ",".join(r.model_id for r in self._rotors)
        return f"<RotorAssembly {models} @ {self.positions}>"
