"""Structured evaluation report builder.

Aggregates roundtrip and frequency results into a single serializable
report for JSON export and console display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from .frequency import FrequencyResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    timestamp: str = ""
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    frequency_results: List[FrequencyResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "frequency": [f.to_dict() for f in self.frequency_results],
            "summary": {
                "machines_tested": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "failing_machines": self.failing_machines(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip: {rt_pass}/{len(self.roundtrip_results)} machines pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.frequency_results:
            lines.append(f"\nLetter statistics: {len(self.frequency_results)} machine(s)")
            for f in self.frequency_results:
                lines.append(f"  {f.summary()}")

        return "\n".join(lines)

    def failing_machines(self) -> List[str]:
        return [r.machine_name for r in self.roundtrip_results if not r.is_perfect]
