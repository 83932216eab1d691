"""Grid configuration system with frozen, hashable, serializable dataclasses."""

from location_grid.config.experiment import ExperimentConfig, GridConfig
from location_grid.config.defaults import DEFAULT_CONFIG
from location_grid.config.hashing import (
    ANNOTATION_FIELDS,
    config_hash,
    full_config_hash,
    grid_config_hash,
)
from location_grid.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
    load_config,
    save_config,
)

__all__ = [
    "ExperimentConfig",
    "GridConfig",
    "DEFAULT_CONFIG",
    "ANNOTATION_FIELDS",
    "config_hash",
    "grid_config_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
    "load_config",
    "save_config",
]
