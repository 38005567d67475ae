import argparse
from typing import List, Optional, Tuple

from ring_road.backends import BACKENDS
from ring_road.config import SimulationConfig
from ring_road.experiments.runner import run_single
from ring_road.io.console import StepReporter
from ring_road.io.logging_utils import setup_logging, logger
from ring_road.io.results_writer import save_result_as_json


def parse_vehicle(text: str) -> Tuple[int, int]:
    """Parse a POS:SPEED pair, e.g. "5:2"."""
    try:
        pos, speed = text.split(":")
        return int(pos), int(speed)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected POS:SPEED, got '{text}'")


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    ap = argparse.ArgumentParser(description="Ring road car-following simulation")
    ap.add_argument("--length", type=int, default=defaults.road_length)
    ap.add_argument("--steps", type=int, default=defaults.total_steps)
    ap.add_argument("--delay-ms", type=int, default=defaults.step_delay_ms)
    ap.add_argument("--vehicle", type=parse_vehicle, action="append",
                    metavar="POS:SPEED", help="repeat for every vehicle")
    ap.add_argument("--backend", choices=list(BACKENDS.keys()), default=defaults.backend)
    ap.add_argument("--output-dir", default=defaults.output_dir)
    ap.add_argument("--label", default=None)
    ap.add_argument("--save", action="store_true", help="write results as JSON")
    ap.add_argument("--quiet", action="store_true", help="no per-step output")
    return ap


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    vehicles: Optional[List[Tuple[int, int]]] = args.vehicle
    cfg = SimulationConfig(
        road_length=args.length,
        total_steps=args.steps,
        step_delay_ms=args.delay_ms,
        backend=args.backend,
        output_dir=args.output_dir,
        label=args.label,
        verbose=not args.quiet,
    )
    if vehicles:
        cfg.vehicles = list(vehicles)
    return cfg


def main(argv: Optional[List[str]] = None):
    setup_logging()

    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)

    logger.info(f"Running simulation with backend='{cfg.backend}'")
    reporter = StepReporter(cfg.total_steps) if cfg.verbose else None
    result = run_single(cfg, reporter)

    logger.info("Simulation finished.")
    logger.info(f"Wall time: {result.wall_time_seconds:.4f} s")
    logger.info(f"Avg speed: {result.avg_speed:.2f} cells/step")
    logger.info(f"Flow: {result.flow:.3f} veh/step")

    if args.save:
        path = save_result_as_json(result, cfg.output_dir)
        logger.info(f"Results saved to {path}")
    return result


if __name__ == "__main__":
    main()
