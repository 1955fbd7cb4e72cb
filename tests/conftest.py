import sys
from pathlib import Path

import pytest

# Ensure project root is on path for the rotorlab package
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.machine import MachineSpec, ReflectorSpec, RotorSpec


@pytest.fixture
def four_rotor_spec() -> MachineSpec:
    """I@A, II@B, III@C, IV@D, all rings A, UKW-B, no plugs."""
    return MachineSpec(
        name="four-rotor",
        rotors=[
            RotorSpec(model="I", initial_position="A"),
            RotorSpec(model="II", initial_position="B"),
            RotorSpec(model="III", initial_position="C"),
            RotorSpec(model="IV", initial_position="D"),
        ],
        reflector=ReflectorSpec(model="UKW-B"),
    )
