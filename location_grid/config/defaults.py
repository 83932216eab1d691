"""Default configuration used when no config file is given."""

from location_grid.config.experiment import ExperimentConfig

# size=100, seed=42
DEFAULT_CONFIG = ExperimentConfig()
