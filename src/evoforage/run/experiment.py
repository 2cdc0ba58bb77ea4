"""
Experiment Module

An experiment is a collection of independent trials, each with its own seed,
used to gather statistics about how reliably the animals learn to forage.
Trials can run serially or in parallel processes through joblib.
"""

import numpy as np
from joblib     import Parallel, delayed
from statistics import mean
from sys        import stdout

from evoforage.run.config import Config
from evoforage.run.trial  import Trial

class Experiment:
    """
    Run a number of independent trials and aggregate their results.

    Subclasses can override:
    - _prepare_trial(trial, trial_number):          Configure each trial before execution
    - _extract_trial_results(trial, trial_number):  Extract results after trial completes
    - _final_report():                              Aggregated report for the whole experiment

    Public Attributes:
        results: One dictionary per trial (filled by run())

    Public Methods:
        run(num_jobs=1): Execute the complete experiment

    Parallelization:
        num_jobs=1:  Serial trial execution (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, num_trials: int, config: Config, seed: int | None = None,
                 trial_class: type[Trial] = Trial):
        """
        Parameters:
            num_trials:  number of trials in this experiment
            config:      configuration parameters
            seed:        master seed; every trial gets an independent seed derived from it
            trial_class: the class describing the trials in this experiment
        """
        if num_trials < 1:
            raise ValueError("an experiment needs at least one trial")

        self._num_trials : int         = num_trials
        self._config     : Config      = config
        self._seed                     = seed
        self._trial_class: type[Trial] = trial_class
        self._suppress_output: bool    = False
        self.results     : list[dict]  = []

    def run(self, num_jobs: int = 1, suppress_output: bool = False) -> list[dict]:
        """
        Run the experiment.

        Parameters:
            num_jobs:        Number of parallel processes for running trials
                              1 = serial trial execution (default)
                             -1 = use all available CPU cores
                             >1 = use specified number of processes
            suppress_output: If True, do not print the final report

        Returns:
            The results of every trial, in trial order
        """
        self._suppress_output = suppress_output
        trial_seeds = np.random.SeedSequence(self._seed).spawn(self._num_trials)

        if num_jobs == 1:
            self.results = [self._run_trial(n, trial_seeds[n - 1])
                            for n in range(1, self._num_trials + 1)]
        else:
            self.results = Parallel(num_jobs)(
                delayed(self._run_trial)(n, trial_seeds[n - 1])
                for n in range(1, self._num_trials + 1)
            )

        if not self._suppress_output:
            self._final_report()

        return self.results

    def _run_trial(self, trial_number: int, seed: np.random.SeedSequence) -> dict:
        """
        Prepare, run, analyze one trial.
        Returns the relevant data generated by the trial.
        """
        trial = self._trial_class(self._config, seed=seed, suppress_output=True)
        self._prepare_trial(trial, trial_number)
        trial.run()
        return self._extract_trial_results(trial, trial_number)

    def _prepare_trial(self, trial: Trial, trial_number: int):
        """
        The default implementation prints a progress report.
        """
        if not self._suppress_output:
            stdout.write(f"Starting trial {trial_number:03d} of {self._num_trials}...\r")
            stdout.flush()

    def _extract_trial_results(self, trial: Trial, trial_number: int) -> dict:
        """
        Extract basic information, common to all experiments.
        Derived implementations MUST call this method.
        """
        results = {"trial_number": trial_number}
        results["number_generations"] = trial.generation_counter
        results["max_fitness"] = max((stats.max_fitness for stats in trial.history), default=0.0)
        results["final_avg_fitness"] = trial.history[-1].avg_fitness if trial.history else 0.0
        results["success"] = not trial.failed
        return results

    def _final_report(self):
        """
        Produce the final report, aggregating the data obtained from each trial.
        """
        successes = sum(1 for r in self.results if r["success"])
        print(f"\n{self._num_trials} trials, {successes} reached the fitness threshold")
        print(f"mean of best fitness:          {mean(r['max_fitness'] for r in self.results):.2f}")
        print(f"mean of final average fitness: {mean(r['final_avg_fitness'] for r in self.results):.2f}")
