"""Letter statistics for plaintext and ciphertext.

The index of coincidence is the probability that two letters drawn from the
text are equal: about 0.0667 for English, 1/26 (~0.0385) for uniformly
random letters.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

import numpy as np

from rotorlab.machine.alphabet import ALPHABET
from rotorlab.machine.builder import build_machine
from rotorlab.machine.spec import MachineSpec

UNIFORM_IC = 1.0 / len(ALPHABET)


def letter_counts(text: str) -> np.ndarray:
    """Counts per letter A..Z; characters outside A-Z are ignored."""
    codes = np.frombuffer(text.encode("ascii", errors="ignore"), dtype=np.uint8).astype(np.int64) - ord("A")
    codes = codes[(codes >= 0) & (codes < len(ALPHABET))]
    return np.bincount(codes, minlength=len(ALPHABET))


def letter_frequencies(text: str) -> np.ndarray:
    counts = letter_counts(text)
    total = counts.sum()
    if total == 0:
        return np.zeros(len(ALPHABET), dtype=np.float64)
    return counts / total


def index_of_coincidence(text: str) -> float:
    counts = letter_counts(text).astype(np.float64)
    n = counts.sum()
    if n < 2:
        return 0.0
    return float((counts * (counts - 1)).sum() / (n * (n - 1)))


@dataclass
class FrequencyResult:
    machine_name: str
    length: int
    plaintext_ic: float
    ciphertext_ic: float
    chi_squared_uniform: float
    ciphertext_frequencies: List[float] = field(default_factory=list)

    @property
    def flattening(self) -> float:
        """How much of the plaintext's excess IC the machine removed (1.0 = all)."""
        excess = self.plaintext_ic - UNIFORM_IC
        if excess <= 0:
            return 0.0
        return (self.plaintext_ic - self.ciphertext_ic) / excess

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["flattening"] = self.flattening
        return d

    def summary(self) -> str:
        return (
            f"{self.machine_name}: n={self.length}, IC plain={self.plaintext_ic:.4f} "
            f"cipher={self.ciphertext_ic:.4f} (uniform {UNIFORM_IC:.4f}), "
            f"chi2={self.chi_squared_uniform:.1f}"
        )


def analyze_ciphertext(spec: MachineSpec, plaintext: str) -> FrequencyResult:
    """Encipher ``plaintext`` (A-Z only) with a fresh machine and compare statistics."""
    ciphertext = build_machine(spec).encrypt_message(plaintext)
    counts = letter_counts(ciphertext).astype(np.float64)
    expected = counts.sum() / len(ALPHABET)
    chi2 = float(((counts - expected) ** 2 / expected).sum()) if expected else 0.0

    return FrequencyResult(
        machine_name=spec.name,
        length=len(ciphertext),
        plaintext_ic=round(index_of_coincidence(plaintext), 6),
        ciphertext_ic=round(index_of_coincidence(ciphertext), 6),
        chi_squared_uniform=round(chi2, 4),
        ciphertext_frequencies=[round(float(f), 6) for f in letter_frequencies(ciphertext)],
    )
