from __future__ import annotations

from typing import List, Optional, Tuple

from .alphabet import is_permutation, is_symbol
from .catalog import WheelCatalog
from .spec import MachineSpec


def validate_spec(spec: MachineSpec, catalog: Optional[WheelCatalog] = None) -> Tuple[bool, List[str]]:
    cat = catalog or WheelCatalog()
    errs: List[str] = []

    if not spec.rotors:
        errs.append("At least one rotor is required")
    for slot, r in enumerate(spec.rotors):
        if not cat.has_rotor(r.model):
            errs.append(f"Unknown rotor model in slot {slot}: {r.model}")

    refl = spec.reflector
    if refl.wiring:
        if not is_permutation(refl.wiring):
            errs.append("Reflector wiring must be a permutation of A-Z")
    elif not cat.has_reflector(refl.model or ""):
        errs.append(f"Unknown reflector model: {refl.model}")

    seen = set()
    for a, b in spec.plugboard.pairs:
        if a == b:
            errs.append(f"Plug pair {a}{b} connects a letter to itself")
            continue
        for ch in (a, b):
            if len(ch) != 1 or not is_symbol(ch):
                errs.append(f"Plug letter {ch!r} is outside A-Z")
            elif ch in seen:
                errs.append(f"Plug letter {ch!r} is used more than once")
            seen.add(ch)

    return (len(errs) == 0), errs
