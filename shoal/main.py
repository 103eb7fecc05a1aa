from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from shoal.core.config import SimulationConfig, load_config
from shoal.core import ShoalSimulationBackend

log = logging.getLogger("shoal")


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless neuro-evolution of foraging animals")
    parser.add_argument(
        "--steps",
        type=int,
        default=10_000,
        help="Number of simulation steps to run; must be a multiple of --substeps (default: 10000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator; omit for a non-reproducible run",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON file with config sections (world, eyes, physics, evolution)",
    )
    parser.add_argument(
        "--substeps",
        type=int,
        default=1,
        help="Simulation steps per backend tick (default: 1)",
    )
    parser.add_argument(
        "--report-every",
        type=int,
        default=500,
        help="Log a progress line every N ticks; 0 disables (default: 500)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: INFO)",
    )
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must be non-negative")
    if args.substeps < 1:
        parser.error("--substeps must be at least 1")
    if args.steps % args.substeps:
        parser.error(f"--steps ({args.steps}) must be a multiple of --substeps ({args.substeps})")
    return args


def build_backend(args: argparse.Namespace) -> ShoalSimulationBackend:
    config = load_config(args.config) if args.config else SimulationConfig()
    backend = ShoalSimulationBackend(seed=args.seed, substeps=args.substeps)
    backend.configure(config)
    return backend


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(list(argv if argv is not None else sys.argv[1:]))
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    backend = build_backend(args)
    backend.start()
    ticks = args.steps // backend.substeps
    for tick in range(1, ticks + 1):
        state = backend.step()
        if args.report_every and tick % args.report_every == 0:
            log.info(
                "tick %d generation %d age %d mean satiation %.2f",
                state.tick,
                state.generation,
                state.age,
                state.mean_satiation,
            )
    backend.stop()

    final = backend.snapshot()["state"]
    log.info("finished after %d steps, %d generation(s)", final["tick"], final["generation"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
