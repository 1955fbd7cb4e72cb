"""Deterministic evaluation of machine configurations.

Roundtrip verification over random messages and machines, plus letter
statistics of the resulting ciphertext.
"""

from .roundtrip import (
    RoundtripResult,
    RoundtripFailure,
    random_machine_spec,
    run_roundtrip_tests,
    run_random_machines,
)
from .frequency import (
    FrequencyResult,
    analyze_ciphertext,
    index_of_coincidence,
    letter_counts,
    letter_frequencies,
)
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "random_machine_spec",
    "run_roundtrip_tests",
    "run_random_machines",
    "FrequencyResult",
    "analyze_ciphertext",
    "index_of_coincidence",
    "letter_counts",
    "letter_frequencies",
    "EvaluationReport",
]
