"""Timestamped output directories for evaluation runs."""
from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def utc_timestamp() -> str:
    # filename safe, sorts chronologically
    return time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())


def run_slug(name: str) -> str:
    """'four rotor/test' -> 'four_rotor_test' (at most 60 chars)."""
    return _UNSAFE.sub("_", name.strip())[:60] or "run"


@dataclass(frozen=True)
class RunPaths:
    run_dir: Path

    @property
    def machine_json(self) -> Path:
        return self.run_dir / "machine.json"

    @property
    def report_json(self) -> Path:
        return self.run_dir / "report.json"

    def save(self, machine: Dict[str, Any], report: Dict[str, Any]) -> None:
        write_json(self.machine_json, machine)
        write_json(self.report_json, report)


def make_run_dir(runs_root: str | Path, run_name: str) -> RunPaths:
    run_dir = Path(runs_root) / f"{utc_timestamp()}_{run_slug(run_name)}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return RunPaths(run_dir)


def write_json(path: str | Path, obj: Any) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as fh:
        json.dump(obj, fh, indent=2, sort_keys=True)
        fh.write("\n")


def read_json(path: str | Path) -> Any:
    with Path(path).open(encoding="utf-8") as fh:
        return json.load(fh)
