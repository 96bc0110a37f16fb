#!/usr/bin/env python3
"""
Trajectory Reconstruction Script
================================

Fill the gap between the node and pred segments of a recorded trajectory
and write the merged, time-ordered result.

Usage:
    trajectory-recon data/positions.json
    trajectory-recon data/positions.json --output merged.json --step 0.25
    trajectory-recon data/positions.json --method bspline --plot trajectory.png
    trajectory-recon data/positions.json --config config/default.yaml
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import FIT_METHODS, ReconstructionConfig, create_default_config
from .data_processing import DataUtils, load_points, points_to_records, trajectory_arrays
from .exceptions import ReconstructionError
from .trajectory_generation import TrajectoryInterpolator

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure root logging for command-line runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_config(args: argparse.Namespace) -> ReconstructionConfig:
    """Load configuration and apply command-line overrides."""
    config = ReconstructionConfig.from_yaml(args.config) if args.config else create_default_config()

    overrides = {}
    if args.step is not None:
        overrides['sampling_step'] = args.step
    if args.method is not None:
        overrides['fit_method'] = args.method
    if args.log_level is not None:
        overrides['log_level'] = args.log_level

    if overrides:
        config_dict = config.to_dict()
        config_dict.update(overrides)
        config = ReconstructionConfig.from_dict(config_dict)

    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Reconstruct the gap in a 3D trajectory')
    parser.add_argument('input', type=str,
                        help='JSON file with node and pred points')
    parser.add_argument('--config', type=str, default=None,
                        help='Configuration file path')
    parser.add_argument('--output', type=str, default=None,
                        help='Write the merged trajectory as JSON (default: stdout)')
    parser.add_argument('--step', type=float, default=None,
                        help='Gap sampling step (overrides config)')
    parser.add_argument('--method', type=str, default=None, choices=FIT_METHODS,
                        help='Curve-fitting strategy (overrides config)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a 3D plot of the merged trajectory to this path')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides config)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main reconstruction function"""
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.log_level)

    try:
        points = load_points(args.input)
        interpolator = TrajectoryInterpolator(points, config)
        trajectory = interpolator.get_full_miss_trajectory()

    except ReconstructionError as e:
        logger.error(f"Reconstruction failed: {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    stats = DataUtils.compute_trajectory_stats(trajectory, config.z_floor)
    logger.info(
        f"Trajectory: {stats.num_points} points {stats.counts_by_type}, "
        f"duration {stats.duration:.3f}, path length {stats.total_length:.3f}, "
        f"z range [{stats.z_range[0]:.3f}, {stats.z_range[1]:.3f}]"
    )

    records = points_to_records(trajectory)
    if args.output:
        with open(args.output, 'w') as f:
            json.dump(records, f, indent=2)
        logger.info(f"Merged trajectory written to {args.output}")
    else:
        json.dump(records, sys.stdout, indent=2)
        sys.stdout.write('\n')

    if args.plot:
        from .visualization import TrajectoryPlotter

        plotter = TrajectoryPlotter(config.plot)
        plotter.render(*trajectory_arrays(trajectory))
        plotter.save_plot(args.plot)
        plotter.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
