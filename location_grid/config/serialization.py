"""JSON serialization for grid configs.

Decoding is strict: unknown keys and wrong value types raise dacite errors,
and ``ExperimentConfig.__post_init__`` rejects out-of-range values, so a
config that loads is a config that can be run.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from location_grid.config.experiment import ExperimentConfig

# strict rejects unknown keys, cast turns JSON arrays back into tuples
_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_dict(config: ExperimentConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> ExperimentConfig:
    """Build a config from plain data; missing sections take their defaults.

    Raises:
        ValueError: If ``d`` is not a mapping or a value is out of range.
        dacite.DaciteError: On unknown keys or mistyped values.
    """
    if not isinstance(d, dict):
        raise ValueError(
            f"config must be a JSON object, got {type(d).__name__}"
        )
    return from_dict(data_class=ExperimentConfig, data=d, config=_DACITE_CONFIG)


def config_to_json(config: ExperimentConfig) -> str:
    """Serialize with sorted keys and 2-space indent for readable diffs."""
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> ExperimentConfig:
    # JSONDecodeError is a ValueError
    return config_from_dict(json.loads(json_str))


def save_config(config: ExperimentConfig, path: Path) -> Path:
    """Write ``config`` as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config_to_json(config) + "\n")
    return path


def load_config(path: Path) -> ExperimentConfig:
    """Read a config written by save_config (or by hand)."""
    return config_from_json(Path(path).read_text())
