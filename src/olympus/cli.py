"""
Command line front end.

    olympus [-d DISTANCE] [-w WIDTH] [-m MASS] [-i T] [-t] ...

Calculates the time an anvil takes to drop from Olympus.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from olympus.core.config import (
    DEFAULT_DISTANCE,
    DEFAULT_MASS,
    DEFAULT_TIME_STEP,
    DEFAULT_WIDTH,
    SimulationConfig,
)
from olympus.core.simulation import FallSimulation
from olympus.exceptions import ConfigurationError, NumericDegeneracyError
from olympus.logger import CSVLogger
from olympus.reporting import TextReporter
from olympus.utils.io import load_simulation_config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="olympus",
        description="Calculate the time an anvil takes to drop from Olympus",
    )
    p.add_argument("--config", type=str, default=None,
                   help="JSON config file; command line flags override its values")

    # Flags default to None so that values from --config are only overridden
    # when given explicitly.
    p.add_argument("-d", "--distance", type=float, default=None,
                   help=f"distance to Olympus above the earth's surface [m] (default {DEFAULT_DISTANCE:.0f})")
    p.add_argument("-w", "--width", type=float, default=None,
                   help=f"width of the object, presumes a cube [m] (default {DEFAULT_WIDTH})")
    p.add_argument("-m", "--mass", type=float, default=None,
                   help=f"mass of the object [kg] (default {DEFAULT_MASS:g})")
    p.add_argument("-i", "--integration-time", "--integration_time", dest="integration_time",
                   type=float, default=None,
                   help=f"integration time step [s] (default {DEFAULT_TIME_STEP})")
    p.add_argument("-t", "--tartarus", action="store_true", default=None,
                   help="calculate the distance to Tartarus (fall for nine days)")
    p.add_argument("--shallow-gravity", action="store_true",
                   help="use the full earth mass below the surface instead of the enclosed mass")

    p.add_argument("--max-steps", type=int, default=None,
                   help="abort with an error after this many integration steps")
    p.add_argument("--csv", type=str, default=None,
                   help="also log report records to this CSV file")
    p.add_argument("--history", type=str, default=None,
                   help="write every integration step to this CSV file (large)")
    return p


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Merge defaults, the optional JSON config and explicit flags."""
    values = {}
    if args.config:
        values.update(load_simulation_config(args.config))

    overrides = {
        "distance": args.distance,
        "width": args.width,
        "mass": args.mass,
        "integration_time": args.integration_time,
        "tartarus": args.tartarus,
        "max_steps": args.max_steps,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    if args.shallow_gravity:
        values["depth_aware_gravity"] = False
    return SimulationConfig.from_dict(values)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        print(f"olympus: error: {e}", file=sys.stderr)
        return 2

    logger = CSVLogger(args.csv) if args.csv else None
    sim = FallSimulation(
        config,
        reporter=TextReporter(),
        logger=logger,
        record_history=args.history is not None,
    )
    try:
        sim.run()
    except ConfigurationError as e:
        print(f"olympus: error: {e}", file=sys.stderr)
        return 2
    except NumericDegeneracyError as e:
        print(f"olympus: numeric failure: {e}", file=sys.stderr)
        return 1

    if args.history:
        sim.save_history(args.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
