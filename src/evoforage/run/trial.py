"""
Trial Module

A trial is one independent run of the simulation: a freshly seeded world is
evolved, one generation at a time, until the maximum number of generations is
reached or (optionally) the population's fitness reaches a threshold.
"""

import numpy as np
from typing import TYPE_CHECKING

from evoforage.run.config import Config
from evoforage.simulation import Simulation

if TYPE_CHECKING:
    from evoforage.genetics import Statistics

class Trial:
    """
    One run of the simulation, over many generations.

    Subclasses can override:
    - _report_progress(): Display progress after each generation
    - _final_report():    Display final results
    - _terminate():       Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        simulation: The Simulation of the current (or last) run
        history:    Statistics of every generation of the current run
        failed:     True unless the fitness threshold was reached

    Public Methods:
        run(): Execute a complete trial
    """

    def __init__(self, config: Config, seed: 'int | np.random.SeedSequence | None' = None,
                 suppress_output: bool = False):
        """
        Parameters:
            config:          Configuration parameters
            seed:            Seed of the trial's random source (None for a random seed)
            suppress_output: If True, suppress progress and final reports
                             (useful when running multiple trials in experiments)
        """
        self._config            : Config     = config
        self._seed                           = seed
        self._suppress_output   : bool       = suppress_output
        self._generation_counter: int        = 0
        self.simulation         : Simulation = None
        self.history            : list['Statistics'] = []
        self.failed             : bool       = True

    @property
    def generation_counter(self) -> int:
        return self._generation_counter

    def run(self) -> list['Statistics']:
        """
        Run the trial.

        Returns:
            The statistics of every generation, oldest first
        """
        self._reset()

        rng = np.random.default_rng(self._seed)
        self.simulation = Simulation.random(rng, self._config)

        while not self._terminate():
            statistics = self.simulation.train(rng)
            self._generation_counter += 1
            self.history.append(statistics)

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

        return self.history

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        """
        self._generation_counter = 0
        self.simulation = None
        self.history = []
        self.failed = True

    def _report_progress(self):
        """
        Report trial progress after each generation.
        """
        print(f"generation {self._generation_counter:4d}: {self.history[-1]}")

    def _final_report(self):
        """
        Produce final report at the end of the trial.
        """
        if not self.history:
            print("no generation completed")
            return

        best = max(self.history, key=lambda stats: stats.max_fitness)
        outcome = "reached the fitness threshold" if not self.failed else "finished"
        print(f"trial {outcome} after {self._generation_counter} generations; "
              f"best generation: {best}")

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        population fitness has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check and self.history:
            statistics = self.history[-1]

            if self._config.fitness_criterion == "max":
                overall_fitness = statistics.max_fitness
            elif self._config.fitness_criterion == "avg":
                overall_fitness = statistics.avg_fitness
            else:
                raise RuntimeError("bad 'fitness_criterion' in configuration file")

            success = overall_fitness >= self._config.fitness_threshold
            terminate = terminate or success
            self.failed = not success

        return terminate
