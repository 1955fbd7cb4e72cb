"""Rotor cipher machine: wheels, reflector, plugboard and the machine itself."""

from .alphabet import ALPHABET
from .builder import build_machine, build_reflector, build_rotor
from .catalog import REFLECTOR_PRESETS, ROTOR_PRESETS, WheelCatalog
from .enigma import CipherMachine
from .errors import ConfigurationError, EncodingError, InvalidSymbol, RotorlabError
from .loader import dump_machine_spec, load_machine_spec, machine_spec_from_config
from .plugboard import Plugboard, random_plugboard
from .reflector import Reflector
from .rotor import Rotor, RotorAssembly
from .spec import MachineSpec, PlugboardSpec, ReflectorSpec, RotorSpec
from .validator import validate_spec

__all__ = [
    "ALPHABET",
    "build_machine",
    "build_reflector",
    "build_rotor",
    "REFLECTOR_PRESETS",
    "ROTOR_PRESETS",
    "WheelCatalog",
    "CipherMachine",
    "ConfigurationError",
    "EncodingError",
    "InvalidSymbol",
    "RotorlabError",
    "dump_machine_spec",
    "load_machine_spec",
    "machine_spec_from_config",
    "Plugboard",
    "random_plugboard",
    "Reflector",
    "Rotor",
    "RotorAssembly",
    "MachineSpec",
    "PlugboardSpec",
    "ReflectorSpec",
    "RotorSpec",
    "validate_spec",
]
