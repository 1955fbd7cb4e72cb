from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from rotorlab.machine.spec import MachineSpec, PlugboardSpec, ReflectorSpec, RotorSpec


class Settings(BaseModel):
    # Default machine
    default_rotors: str = Field(default="I,II,III,IV", description="Comma separated, left to right")
    default_positions: str = Field(default="ABCD")
    default_rings: str = Field(default="AAAA")
    default_reflector: str = Field(default="UKW-B")
    default_plugboard: str = Field(default="", description="Space separated pairs, e.g. 'AK ZC'")

    # Streaming
    chunk_size: int = Field(default=4096, ge=1)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Paths
    runs_dir: str = Field(default="runs")

    def default_machine_spec(self) -> MachineSpec:
        models = [m for m in self.default_rotors.split(",") if m.strip()]
        if len(self.default_positions) != len(models) or len(self.default_rings) != len(models):
            raise ValueError(
                f"{len(models)} rotors need {len(models)} positions and rings, got "
                f"{self.default_positions!r} / {self.default_rings!r}"
            )
        rotors = [
            RotorSpec(model=m, initial_position=p, ring_setting=r)
            for m, p, r in zip(models, self.default_positions, self.default_rings)
        ]
        return MachineSpec(
            name="default",
            rotors=rotors,
            reflector=ReflectorSpec(model=self.default_reflector),
            plugboard=PlugboardSpec.parse(self.default_plugboard),
        )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_rotors=os.getenv("ROTORLAB_ROTORS", "I,II,III,IV"),
        default_positions=os.getenv("ROTORLAB_POSITIONS", "ABCD"),
        default_rings=os.getenv("ROTORLAB_RINGS", "AAAA"),
        default_reflector=os.getenv("ROTORLAB_REFLECTOR", "UKW-B"),
        default_plugboard=os.getenv("ROTORLAB_PLUGBOARD", ""),
        chunk_size=int(os.getenv("ROTORLAB_CHUNK_SIZE", "4096")),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        runs_dir=os.getenv("ROTORLAB_RUNS_DIR", "runs"),
    )
