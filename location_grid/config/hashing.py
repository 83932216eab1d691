"""Deterministic config hashing using SHA-256 over sorted JSON.

Two hashes are derived from an ExperimentConfig:

- the grid hash names the cache entry, so it covers only what changes the
  generated coordinates apart from the seed (the ``grid`` section);
- the run hash identifies a whole run (grid section plus seed).

``description`` and ``tags`` annotate a run without changing its output,
so neither hash sees them.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from location_grid.config.experiment import ExperimentConfig

ANNOTATION_FIELDS = ("description", "tags")


def _remove_nested(d: dict[str, Any], field_path: str) -> None:
    """Remove a dotted-path key such as "grid.size"; missing paths are ignored."""
    *parents, leaf = field_path.split(".")
    for part in parents:
        d = d.get(part)
        if not isinstance(d, dict):
            return
    d.pop(leaf, None)


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config dataclass.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional dotted field paths left out of the hash.

    Returns:
        First 16 hex characters of the digest.
    """
    d = asdict(config)
    for field_path in exclude_fields or ():
        _remove_nested(d, field_path)
    serialized = json.dumps(
        d, sort_keys=True, ensure_ascii=True, separators=(",", ":")
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def grid_config_hash(config: ExperimentConfig) -> str:
    """Hash of everything that shapes the grid except the seed."""
    return config_hash(config, exclude_fields=["seed", *ANNOTATION_FIELDS])


def full_config_hash(config: ExperimentConfig) -> str:
    """Hash identifying a run: grid section and seed."""
    return config_hash(config, exclude_fields=list(ANNOTATION_FIELDS))
