"""Read and write machine settings as JSON.

Accepted document shape::

    {
        "name": "daily",
        "rotors": [
            {"type_": "type_i", "position": "A", "ring": "A"},
            {"type_": "type_ii", "position": "B", "ring": "A"}
        ],
        "reflector": "ukw_b",
        "plugboard": {"A": "B"}
    }

``plugboard`` may also be a list of two-letter strings (``["AB", "CD"]``) or
of pairs. ``reflector`` may be an object ``{"model": ..., "wiring": ...}``.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from .errors import ConfigurationError
from .spec import MachineSpec


def _rotor_entry(raw: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Rotor entry must be an object, got {raw!r}")
    model = raw.get("type_", raw.get("model", raw.get("type")))
    if model is None:
        raise ConfigurationError(f"Rotor entry is missing its model: {raw!r}")
    return {
        "model": model,
        "initial_position": raw.get("position", raw.get("initial_position", "A")),
        "ring_setting": raw.get("ring", raw.get("ring_setting", "A")),
    }


def _plug_pairs(raw: Any) -> List[Tuple[str, str]]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [(str(a), str(b)) for a, b in raw.items()]
    if isinstance(raw, str):
        raw = raw.split()
    pairs: List[Tuple[str, str]] = []
    for item in raw:
        if isinstance(item, str):
            if len(item) != 2:
                raise ConfigurationError(f"Plug pair {item!r} must be exactly 2 letters")
            pairs.append((item[0], item[1]))
        else:
            a, b = item
            pairs.append((str(a), str(b)))
    return pairs


def machine_spec_from_config(data: Dict[str, Any]) -> MachineSpec:
    if not isinstance(data, dict):
        raise ConfigurationError("Machine config must be a JSON object")
    missing = {"rotors", "reflector"} - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

    reflector = data["reflector"]
    if isinstance(reflector, str):
        reflector = {"model": reflector}

    try:
        return MachineSpec(
            name=data.get("name", "enigma"),
            rotors=[_rotor_entry(r) for r in data["rotors"]],
            reflector=reflector,
            plugboard={"pairs": _plug_pairs(data.get("plugboard"))},
            notes=data.get("notes", ""),
        )
    except (ValidationError, TypeError, ValueError) as exc:
        if isinstance(exc, ConfigurationError):
            raise
        raise ConfigurationError(f"Invalid machine config: {exc}") from exc


def load_machine_spec(path: str | Path) -> MachineSpec:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read machine config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Machine config {path} is not valid JSON: {exc}") from exc
    return machine_spec_from_config(data)


def machine_spec_to_config(spec: MachineSpec) -> Dict[str, Any]:
    return {
        "name": spec.name,
        "rotors": [
            {"type_": r.model, "position": r.initial_position, "ring": r.ring_setting}
            for r in spec.rotors
        ],
        "reflector": spec.reflector.model_dump(exclude_none=True),
        "plugboard": [a + b for a, b in spec.plugboard.pairs],
        "notes": spec.notes,
    }


def dump_machine_spec(spec: MachineSpec, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(machine_spec_to_config(spec), indent=2), encoding="utf-8")
