#!/usr/bin/env python3
"""
Utility script to visualize the brain of an evolved animal.

A simulation is evolved for a number of generations; the brain of the animal
that ate the most during the last generation is then drawn with Graphviz.

Usage:
    python scripts/visualize_network.py --generations 20 --seed 7
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add the source directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from evoforage import Config, Simulation


def best_animal(simulation, rng):
    """
    Let the current generation live out its life and return its best forager.
    The last tick, which would evolve the population, is not taken.
    """
    for _ in range(simulation.config.generation_length):
        simulation.step(rng)
    return max(simulation.world.animals, key=lambda animal: animal.satiation)


def main():
    parser = argparse.ArgumentParser(description='Visualize the brain of an evolved animal')
    parser.add_argument('--config', default=None,
                        help='INI configuration file (built-in defaults if omitted)')
    parser.add_argument('--generations', type=int, default=10,
                        help='Number of generations to evolve before drawing')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed of the random source')
    parser.add_argument('--output', type=str, default='brain',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    simulation = Simulation.random(rng, Config(args.config))
    for _ in range(args.generations):
        print(f"generation {simulation.generation + 1:4d}: {simulation.train(rng)}")

    animal = best_animal(simulation, rng)
    print(f"best animal ate {animal.satiation} food items")

    dot = animal.brain.network.visualize(view=False)
    dot.format = args.format
    dot.render(args.output, view=not args.no_view, cleanup=True)
    print(f"Network visualization saved to {args.output}.{args.format}")


if __name__ == '__main__':
    main()
