from evoforage.run.config     import Config
from evoforage.run.experiment import Experiment
from evoforage.run.trial      import Trial

__all__ = ['Config', 'Experiment', 'Trial']
