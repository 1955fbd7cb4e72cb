"""Roundtrip verification: a fresh, identically set machine inverts E(P).

Generates random A-Z messages for a machine spec, enciphers each with one
fresh machine and deciphers with another, and checks that the plaintext
comes back. It also counts letters that enciphered to themselves, which a
reflector machine must never produce.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

from rotorlab.machine.alphabet import ALPHABET
from rotorlab.machine.builder import build_machine
from rotorlab.machine.catalog import REFLECTOR_PRESETS, ROTOR_PRESETS
from rotorlab.machine.errors import RotorlabError
from rotorlab.machine.plugboard import random_plugboard
from rotorlab.machine.spec import MachineSpec, PlugboardSpec, ReflectorSpec, RotorSpec

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed vector."""
    vector_index: int
    plaintext: str
    ciphertext: str
    decrypted: str
    error: Optional[str]


@dataclass
class RoundtripResult:
    machine_name: str
    rotors: str
    positions: str
    reflector: str
    plug_pairs: int
    total_vectors: int
    passed: int
    failed: int
    self_encryptions: int = 0
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0 and self.self_encryptions == 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["is_perfect"] = self.is_perfect
        return d

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.machine_name} ({self.rotors} @ {self.positions}, "
            f"{self.reflector}, {self.plug_pairs} plugs): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_message(rng: random.Random, n: int) -> str:
    return "".join(rng.choice(ALPHABET) for _ in range(n))


def random_machine_spec(
    rng: random.Random,
    *,
    num_rotors: int = 3,
    name: str = "random",
) -> MachineSpec:
    """Draw rotor models (without repeats), positions, rings, reflector and plugs."""
    models = list(ROTOR_PRESETS)
    if not 1 <= num_rotors <= len(models):
        raise ValueError(f"num_rotors must be within 1..{len(models)}")
    rotors = [
        RotorSpec(model=m, initial_position=rng.choice(ALPHABET), ring_setting=rng.choice(ALPHABET))
        for m in rng.sample(models, num_rotors)
    ]
    reflector = rng.choice(sorted(REFLECTOR_PRESETS))
    plugboard = random_plugboard(rng, rng.randint(0, 13))
    return MachineSpec(
        name=name,
        rotors=rotors,
        reflector=ReflectorSpec(model=reflector),
        plugboard=PlugboardSpec(pairs=list(plugboard.pairs)),
    )


def run_roundtrip_tests(
    spec: MachineSpec,
    *,
    num_vectors: int = 200,
    message_length: int = 64,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification D(E(P)) == P over random messages.

    Args:
        spec: Machine settings; every vector gets two fresh machines built
            from it.
        num_vectors: Number of random messages.
        message_length: Letters per message.
        seed: Random seed for the messages.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    rng = random.Random(seed)
    passed = 0
    failed = 0
    self_enc = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = _rand_message(rng, message_length)
        ct = ""
        try:
            ct = build_machine(spec).encrypt_message(pt)
            rt = build_machine(spec).decrypt_message(ct)
        except RotorlabError as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, ct or "<error>", "<error>", str(exc)))
            continue

        self_enc += sum(1 for a, b in zip(pt, ct) if a == b)
        if rt == pt:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, ct, rt, None))

    elapsed = time.perf_counter() - start
    if failed or self_enc:
        logger.warning("%s: %d failed vector(s), %d self-encryption(s)", spec.name, failed, self_enc)

    return RoundtripResult(
        machine_name=spec.name,
        rotors=",".join(r.model for r in spec.rotors),
        positions=spec.positions,
        reflector=spec.reflector.model or "custom",
        plug_pairs=len(spec.plugboard.pairs),
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        self_encryptions=self_enc,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_random_machines(
    *,
    num_machines: int = 10,
    num_rotors: int = 3,
    num_vectors: int = 50,
    message_length: int = 64,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Roundtrip-test ``num_machines`` randomly configured machines."""
    rng = random.Random(seed)
    results: List[RoundtripResult] = []

    for idx in range(num_machines):
        spec = random_machine_spec(rng, num_rotors=num_rotors, name=f"random-{idx:03d}")
        if progress_callback:
            progress_callback(spec.name, idx, num_machines)
        results.append(run_roundtrip_tests(
            spec,
            num_vectors=num_vectors,
            message_length=message_length,
            seed=seed + idx,
        ))

    return results
