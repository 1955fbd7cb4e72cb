"""Encipher text with a rotor machine.

Usage:
    python scripts/run_machine.py --input "BLETCHLEY"                    # default machine
    echo "attack at dawn" | python scripts/run_machine.py --drop-invalid
    python scripts/run_machine.py --config machine.json --input HELLO
    python scripts/run_machine.py --random-plugboard 10 --seed 7 --input HELLO

Deciphering is the same command with the same settings.
"""
from __future__ import annotations

import argparse
import io
import logging
import random
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.config import load_settings
from rotorlab.machine import (
    ConfigurationError,
    EncodingError,
    PlugboardSpec,
    build_machine,
    load_machine_spec,
    random_plugboard,
)
from rotorlab.stream import encrypt_stream


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Rotor cipher machine - encipher/decipher A-Z text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Without --config the machine comes from ROTORLAB_* environment\n"
            "variables (or .env), defaulting to rotors I,II,III,IV at ABCD, UKW-B.\n"
        ),
    )
    parser.add_argument(
        "--input", "-i", type=str, default=None,
        help="Message to encipher (default: read stdin)",
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON machine configuration file",
    )
    parser.add_argument(
        "--drop-invalid", action="store_true",
        help="Silently drop characters outside A-Z instead of failing",
    )
    parser.add_argument(
        "--random-plugboard", type=int, default=None, metavar="PAIRS",
        help="Replace the plugboard with PAIRS random pairs (0-13)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for --random-plugboard (default: GLOBAL_SEED)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = load_settings()

    try:
        spec = load_machine_spec(args.config) if args.config else settings.default_machine_spec()
        if args.random_plugboard is not None:
            seed = args.seed if args.seed is not None else settings.global_seed
            board = random_plugboard(random.Random(seed), args.random_plugboard)
            spec = spec.model_copy(update={"plugboard": PlugboardSpec(pairs=list(board.pairs))})
            print(f"Plugboard: {' '.join(a + b for a, b in board.pairs)}", file=sys.stderr)
        machine = build_machine(spec)
    except (ConfigurationError, ValueError) as exc:
        print(f"Failed to set up the machine: {exc}", file=sys.stderr)
        return 1

    if args.input is not None:
        reader = io.StringIO(args.input)
    elif not sys.stdin.isatty():
        reader = sys.stdin
    else:
        print("Error: provide input through stdin or use the '--input' option.", file=sys.stderr)
        return 1

    try:
        for chunk in encrypt_stream(
            machine, reader,
            chunk_size=settings.chunk_size,
            drop_invalid=args.drop_invalid,
        ):
            print(chunk)
    except EncodingError as exc:
        print(f"Encryption failed with error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
