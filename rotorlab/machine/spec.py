from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .alphabet import ALPHABET


def _letter(v: str) -> str:
    v = str(v).strip().upper()
    if len(v) != 1 or v not in ALPHABET:
        raise ValueError(f"expected a single letter A-Z, got {v!r}")
    return v


class RotorSpec(BaseModel):
    """One wheel slot: which model, where it starts, and its ring offset."""

    model: str = Field(..., description="I, II, III, IV or V (aliases like 'type_i' accepted)")
    initial_position: str = Field(default="A")
    ring_setting: str = Field(default="A")

    @field_validator("model")
    @classmethod
    def _strip_model(cls, v: str) -> str:
        return v.strip()

    @field_validator("initial_position", "ring_setting")
    @classmethod
    def _one_letter(cls, v: str) -> str:
        return _letter(v)


class ReflectorSpec(BaseModel):
    model: Optional[str] = Field(default=None, description="UKW-B or UKW-C; UKW-B when no wiring is given")
    wiring: Optional[str] = Field(default=None, description="Explicit 26-letter wiring, overrides model")

    @field_validator("wiring")
    @classmethod
    def _upper_wiring(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v is not None else None

    @model_validator(mode="after")
    def _default_model(self) -> "ReflectorSpec":
        if self.model is None and not self.wiring:
            self.model = "UKW-B"
        return self


class PlugboardSpec(BaseModel):
    # Range and disjointness are checked when the Plugboard is built.
    pairs: List[Tuple[str, str]] = Field(default_factory=list, max_length=13)

    @classmethod
    def parse(cls, text: str) -> "PlugboardSpec":
        """'AK ZC' -> [('A', 'K'), ('Z', 'C')]."""
        pairs = []
        for token in text.split():
            if len(token) != 2:
                raise ValueError(f"plug pair {token!r} must be exactly 2 letters")
            pairs.append((token[0], token[1]))
        return cls(pairs=pairs)


class MachineSpec(BaseModel):
    name: str = Field(default="enigma", min_length=1, max_length=80)
    rotors: List[RotorSpec] = Field(..., min_length=1, description="Ordered left to right")
    reflector: ReflectorSpec = Field(default_factory=ReflectorSpec)
    plugboard: PlugboardSpec = Field(default_factory=PlugboardSpec)
    notes: str = Field(default="")

    @property
    def positions(self) -> str:
        return "".join(r.initial_position for r in self.rotors)
