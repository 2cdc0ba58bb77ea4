import configparser
import math
import os
from evoforage.activations import activations

FITNESS_CRITERIA = ('max', 'avg')

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding the defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, every parameter takes its default value.
        """

        # Default config, also used for the options an INI file leaves out
        if config_file is None:
            self.num_animals = 10
            self.num_foods   = 60

            self.generation_length = 2500
            self.collision_radius  = 0.01

            self.speed_min      = 0.0001
            self.speed_max      = 0.002
            self.speed_initial  = 0.002
            self.speed_accel    = 0.02
            self.rotation_accel = math.pi / 4

            self.fov_range = 0.25
            self.fov_angle = math.pi / 4
            self.cells     = 9

            self.hidden_neurons = None
            self.activation     = 'relu'

            self.mutation_chance = 0.01
            self.mutation_coeff  = 0.2

            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None

            self.validate()
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        defaults = Config()

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [WORLD]

        # The number of animals in each generation.
        self.num_animals = get_value('WORLD', 'num_animals', int)

        # The number of food items scattered around the world.
        # Eaten food is moved elsewhere, so this number never changes.
        self.num_foods = get_value('WORLD', 'num_foods', int)

        # [SIMULATION]

        # The number of ticks the animals live before the population is evolved.
        self.generation_length = get_value('SIMULATION', 'generation_length', int)

        # An animal eats a food item when their distance is at most this value.
        self.collision_radius = get_value('SIMULATION', 'collision_radius', float, default=defaults.collision_radius)

        # [ANIMAL]

        # The range within which the brain can move an animal's speed,
        # and the speed newly born animals start with.
        self.speed_min     = get_value('ANIMAL', 'speed_min'    , float, default=defaults.speed_min)
        self.speed_max     = get_value('ANIMAL', 'speed_max'    , float, default=defaults.speed_max)
        self.speed_initial = get_value('ANIMAL', 'speed_initial', float, default=defaults.speed_initial)

        # The largest change of speed and of rotation (in radians)
        # the brain can request in a single tick.
        self.speed_accel    = get_value('ANIMAL', 'speed_accel'   , float, default=defaults.speed_accel)
        self.rotation_accel = get_value('ANIMAL', 'rotation_accel', float, default=defaults.rotation_accel)

        # [EYE]

        # How far an animal sees, how wide its field of view is (in radians),
        # and in how many cells the field of view is split.
        # The number of cells is also the number of inputs of the brain.
        self.fov_range = get_value('EYE', 'fov_range', float, default=defaults.fov_range)
        self.fov_angle = get_value('EYE', 'fov_angle', float, default=defaults.fov_angle)
        self.cells     = get_value('EYE', 'cells'    , int,   default=defaults.cells)

        # [BRAIN]

        # The number of neurons in the hidden layer.
        # Use "None" for twice the number of eye cells.
        self.hidden_neurons = get_value('BRAIN', 'hidden_neurons', int, default=defaults.hidden_neurons)

        # The activation function applied by every layer (see 'basic_activations.py').
        self.activation = get_value('BRAIN', 'activation', str, default=defaults.activation)

        # [GENETICS]

        # The probability that a gene is perturbed, and by how much at most.
        self.mutation_chance = get_value('GENETICS', 'mutation_chance', float, default=defaults.mutation_chance)
        self.mutation_coeff  = get_value('GENETICS', 'mutation_coeff' , float, default=defaults.mutation_coeff)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to stop as soon as the fitness of a generation reaches a threshold.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # Which generation statistic is compared against the threshold.
        # Allowed values:
        #   "max" the fitness of the animal that ate the most
        #   "avg" the average fitness across the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')

        # The fitness value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        self.validate()

    @property
    def brain_hidden_neurons(self) -> int:
        """The size of the hidden layer, resolving the "None" default."""
        return self.hidden_neurons if self.hidden_neurons is not None else 2 * self.cells

    def validate(self):
        """
        Check that the parameters describe a runnable simulation.
        Raises ValueError on the first invalid parameter.
        """
        if self.num_animals < 1:
            raise ValueError("'num_animals' must be at least 1")
        if self.num_foods < 0:
            raise ValueError("'num_foods' cannot be negative")
        if self.generation_length < 1:
            raise ValueError("'generation_length' must be at least 1")
        if not 0.0 < self.speed_min <= self.speed_max:
            raise ValueError("speeds must satisfy 0 < speed_min <= speed_max")
        if not self.speed_min <= self.speed_initial <= self.speed_max:
            raise ValueError("'speed_initial' must lie in [speed_min, speed_max]")
        if self.speed_accel < 0.0 or self.rotation_accel < 0.0:
            raise ValueError("'speed_accel' and 'rotation_accel' cannot be negative")
        if self.collision_radius < 0.0:
            raise ValueError("'collision_radius' cannot be negative")
        if self.fov_range <= 0.0 or self.fov_angle <= 0.0 or self.cells <= 0:
            raise ValueError("'fov_range', 'fov_angle' and 'cells' must be positive")
        if self.hidden_neurons is not None and self.hidden_neurons < 1:
            raise ValueError("'hidden_neurons' must be positive")
        if self.activation not in activations:
            raise ValueError(f"Invalid activation function '{self.activation}'")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ValueError("'mutation_chance' must lie in [0, 1]")
        if self.mutation_coeff < 0.0:
            raise ValueError("'mutation_coeff' cannot be negative")
        if self.fitness_criterion not in FITNESS_CRITERIA:
            raise ValueError(f"bad 'fitness_criterion' '{self.fitness_criterion}'")
        if self.fitness_termination_check and self.fitness_threshold is None:
            raise ValueError("'fitness_threshold' is required when 'fitness_termination_check' is True")
