"""Evaluate machine configurations and write a JSON report.

Usage:
    python scripts/run_roundtrip.py                          # default machine + 10 random ones
    python scripts/run_roundtrip.py --config machine.json --machines 0
    python scripts/run_roundtrip.py --machines 50 --rotors 4 --vectors 20
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.config import load_settings
from rotorlab.evaluation import (
    EvaluationReport,
    analyze_ciphertext,
    run_random_machines,
    run_roundtrip_tests,
)
from rotorlab.machine import ConfigurationError, load_machine_spec
from rotorlab.machine.loader import machine_spec_to_config
from rotorlab.utils.rundir import make_run_dir

_SAMPLE_TEXT = (
    "THEQUICKBROWNFOXJUMPSOVERTHELAZYDOGWHILETHEWEATHERREPORTSAYSNOTHING"
    "UNUSUALHASHAPPENEDALONGTHECOASTANDTHESUPPLYCONVOYWILLARRIVEATDAWN"
)


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> int:
    parser = argparse.ArgumentParser(description="Roundtrip and letter-statistics evaluation")
    parser.add_argument("--config", type=str, default=None, help="JSON machine configuration file")
    parser.add_argument("--machines", type=int, default=10, help="Random machines to test (default: 10)")
    parser.add_argument("--rotors", type=int, default=3, help="Rotors per random machine (default: 3)")
    parser.add_argument("--vectors", type=int, default=200, help="Messages per machine (default: 200)")
    parser.add_argument("--length", type=int, default=64, help="Letters per message (default: 64)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: GLOBAL_SEED)")
    parser.add_argument("--output-dir", type=str, default=None, help="Runs directory (default: ROTORLAB_RUNS_DIR)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = load_settings()
    seed = args.seed if args.seed is not None else settings.global_seed

    try:
        spec = load_machine_spec(args.config) if args.config else settings.default_machine_spec()
        results = [run_roundtrip_tests(spec, num_vectors=args.vectors, message_length=args.length, seed=seed)]
        frequency = [analyze_ciphertext(spec, _SAMPLE_TEXT)]
    except ConfigurationError as exc:
        print(f"Invalid machine configuration: {exc}", file=sys.stderr)
        return 1

    if args.machines > 0:
        results.extend(run_random_machines(
            num_machines=args.machines,
            num_rotors=args.rotors,
            num_vectors=args.vectors,
            message_length=args.length,
            seed=seed,
            progress_callback=_cli_progress,
        ))

    report = EvaluationReport(roundtrip_results=results, frequency_results=frequency)
    print(report.to_summary())

    paths = make_run_dir(args.output_dir or settings.runs_dir, spec.name)
    paths.save(machine_spec_to_config(spec), report.to_dict())
    print(f"\nReport written to {paths.report_json}")

    return 0 if not report.failing_machines() else 1


if __name__ == "__main__":
    sys.exit(main())
