#!/usr/bin/env python3
"""
Run the foraging simulation from the command line.

Usage:
    python scripts/run_simulation.py
    python scripts/run_simulation.py --config examples/configs/config_forage.ini --seed 7
    python scripts/run_simulation.py --mode experiment --num-trials 8 --num-jobs 4
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the source directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evoforage import Config, Experiment, Trial


def main():
    parser = argparse.ArgumentParser(description='Evolve foraging animals')
    parser.add_argument('--config', default=None,
                        help='INI configuration file (built-in defaults if omitted)')
    parser.add_argument('--mode', choices=['trial', 'experiment'], default='trial',
                        help='Run a single trial or a multi-trial experiment')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed of the random source')
    parser.add_argument('--generations', type=int, default=None,
                        help='Override the maximum number of generations')
    parser.add_argument('--num-trials', type=int, default=10,
                        help='Number of trials for experiment mode')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs for experiment mode')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (DEBUG, INFO, WARNING, ...)')

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    config = Config(args.config)
    if args.generations is not None:
        config.max_number_generations = args.generations

    if args.mode == 'trial':
        Trial(config, seed=args.seed).run()
    else:
        Experiment(args.num_trials, config, seed=args.seed).run(num_jobs=args.num_jobs)


if __name__ == '__main__':
    main()
