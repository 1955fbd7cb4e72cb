from __future__ import annotations

from dataclasses import dataclass

from .alphabet import ALPHABET, index_of, is_permutation
from .errors import ConfigurationError


@dataclass(frozen=True)
class Reflector:
    """Fixed wiring that pairs every letter with a different one."""

    wiring: str
    model_id: str = "custom"

    def __post_init__(self) -> None:
        if not is_permutation(self.wiring):
            raise ConfigurationError(
                f"Reflector {self.model_id} wiring must be a permutation of {ALPHABET}"
            )
        for i, c in enumerate(self.wiring):
            j = index_of(c)
            if i == j or self.wiring[j] != ALPHABET[i]:
                raise ConfigurationError(
                    f"Reflector {self.model_id} must be an involution with no fixed points "
                    f"({ALPHABET[i]}->{c})"
                )

    def encrypt(self, c: str) -> str:
        return self.wiring[index_of(c)]
