from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import WheelCatalog
from .enigma import CipherMachine
from .errors import ConfigurationError
from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor
from .spec import MachineSpec, ReflectorSpec, RotorSpec
from .validator import validate_spec

logger = logging.getLogger(__name__)


def build_rotor(spec: RotorSpec, catalog: Optional[WheelCatalog] = None) -> Rotor:
    cat = catalog or WheelCatalog()
    return cat.rotor(spec.model).build(position=spec.initial_position, ring_setting=spec.ring_setting)


def build_reflector(spec: ReflectorSpec, catalog: Optional[WheelCatalog] = None) -> Reflector:
    if spec.wiring:
        return Reflector(wiring=spec.wiring, model_id=spec.model or "custom")
    cat = catalog or WheelCatalog()
    return cat.reflector(spec.model or "").build()


def build_machine(spec: MachineSpec, catalog: Optional[WheelCatalog] = None) -> CipherMachine:
    """Turn a MachineSpec into a ready machine, or raise ConfigurationError."""
    cat = catalog or WheelCatalog()

    ok, errs = validate_spec(spec, cat)
    if not ok:
        logger.debug("machine spec %r rejected: %s", spec.name, "; ".join(errs))
        raise ConfigurationError("; ".join(errs))

    rotors: List[Rotor] = [build_rotor(r, cat) for r in spec.rotors]
    reflector = build_reflector(spec.reflector, cat)
    plugboard = Plugboard(spec.plugboard.pairs)
    return CipherMachine(rotors, reflector, plugboard)
