"""Historical wheel presets and the registry that resolves model names."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .errors import ConfigurationError
from .reflector import Reflector
from .rotor import Rotor


@dataclass(frozen=True)
class RotorPreset:
    model_id: str
    wiring: str
    notch: str

    def build(self, position: str = "A", ring_setting: str = "A") -> Rotor:
        return Rotor(
            wiring=self.wiring,
            position=position,
            ring_setting=ring_setting,
            notch=self.notch,
            model_id=self.model_id,
        )


@dataclass(frozen=True)
class ReflectorPreset:
    model_id: str
    wiring: str

    def build(self) -> Reflector:
        return Reflector(wiring=self.wiring, model_id=self.model_id)


ROTOR_PRESETS: Dict[str, RotorPreset] = {
    "I": RotorPreset("I", "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "R"),
    "II": RotorPreset("II", "AJDKSIRUXBLHWTMCQGZNPYFVOE", "F"),
    "III": RotorPreset("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "W"),
    "IV": RotorPreset("IV", "ESOVPZJAYQUIRHXLNFTGKDCMWB", "K"),
    "V": RotorPreset("V", "VZBRGITYUPSDNHLXAWMJQOFECK", "A"),
}

REFLECTOR_PRESETS: Dict[str, ReflectorPreset] = {
    "UKW-B": ReflectorPreset("UKW-B", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "UKW-C": ReflectorPreset("UKW-C", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
}


def normalize_rotor_model(name: str) -> str:
    """'type_iii', 'iii', 'Type III' -> 'III'."""
    key = str(name).strip().upper().replace(" ", "_")
    if key.startswith("TYPE_"):
        key = key[len("TYPE_"):]
    return key


def normalize_reflector_model(name: str) -> str:
    """'ukw_b', 'UKW B', 'b' -> 'UKW-B'."""
    key = str(name).strip().upper().replace("_", "-").replace(" ", "-")
    if not key.startswith("UKW-"):
        key = f"UKW-{key}"
    return key


class WheelCatalog:
    def __init__(self):
        self._rotors: Dict[str, RotorPreset] = dict(ROTOR_PRESETS)
        self._reflectors: Dict[str, ReflectorPreset] = dict(REFLECTOR_PRESETS)

    def rotor(self, model: str) -> RotorPreset:
        key = normalize_rotor_model(model)
        if key not in self._rotors:
            raise ConfigurationError(f"Unknown rotor model: {model}")
        return self._rotors[key]

    def reflector(self, model: str) -> ReflectorPreset:
        key = normalize_reflector_model(model)
        if key not in self._reflectors:
            raise ConfigurationError(f"Unknown reflector model: {model}")
        return self._reflectors[key]

    def has_rotor(self, model: str) -> bool:
        return normalize_rotor_model(model) in self._rotors

    def has_reflector(self, model: str) -> bool:
        return normalize_reflector_model(model) in self._reflectors
