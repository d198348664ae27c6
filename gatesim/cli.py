"""Command line entry point for running a circuit simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .simulator import Simulator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gatesim",
        description="Simulate a gate-level circuit driven by timed stimuli.",
    )
    parser.add_argument("library", help="cell library file")
    parser.add_argument("circuit", help="circuit file")
    parser.add_argument("stimuli", help="stimuli file")
    parser.add_argument("output", help="file to write the simulation results to")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="also print the parsed library, circuit, stimuli and gates",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a simulation from the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    simulator = Simulator()
    try:
        simulator.read_library(args.library)
        simulator.read_circuit(args.circuit)
        simulator.read_stimuli(args.stimuli)
    except OSError as exc:
        print(f"error: cannot read {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        for section in (
            simulator.library.describe(),
            simulator.circuit.describe(),
            simulator.stimuli.describe(),
            simulator.describe_gates(),
        ):
            print(section)
            print()

    simulator.run()
    for line in simulator.report_lines():
        print(line)

    try:
        simulator.write_output(args.output)
    except OSError as exc:
        print(f"error: cannot write {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())