"""Grid caching by config hash.

A grid is fully determined by its coordinates in discovery order, so only
those are stored; the wiring pass is re-run on load. Cache entries that are
unreadable, malformed, or fail to rebuild or validate are treated as misses.
"""

import json
import logging
import zipfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

from location_grid.config.experiment import ExperimentConfig
from location_grid.config.hashing import grid_config_hash
from location_grid.graph.grid import LocationGrid, generate_location_grid
from location_grid.graph.validation import validate_grid

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/grids")

_REQUIRED_FILES = ("coordinates.npz", "metadata.json")


def grid_cache_key(config: ExperimentConfig) -> str:
    """Cache key such as "a1b2c3d4e5f6a7b8_s42".

    Only the grid section and the seed matter; description and tags do not
    change the key.
    """
    return f"{grid_config_hash(config)}_s{config.seed}"


def _cache_path(config: ExperimentConfig, cache_dir: Path) -> Path:
    return Path(cache_dir) / grid_cache_key(config)


def save_grid(
    grid: LocationGrid,
    config: ExperimentConfig,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Write a grid to the cache.

    Stores:
    - coordinates.npz: int64 (size, 2) array in index order
    - metadata.json: size, seed, config hash, edge count, timestamp

    Returns:
        Path to the cache directory for this grid.
    """
    cache_path = _cache_path(config, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    np.savez_compressed(cache_path / "coordinates.npz", coordinates=grid.coordinates())

    metadata = {
        "size": grid.node_count(),
        "seed": config.seed,
        "config_hash": grid_config_hash(config),
        "n_edges": sum(loc.degree for loc in grid) // 2,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Grid cached at %s", cache_path)
    return cache_path


def _read_entry(cache_path: Path) -> tuple[dict[str, Any], np.ndarray]:
    """Read metadata and coordinates; raises on unreadable or malformed files."""
    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)
    if not isinstance(metadata, dict):
        raise ValueError("metadata is not a JSON object")
    with np.load(cache_path / "coordinates.npz") as data:
        coordinates = data["coordinates"]
    if coordinates.ndim != 2 or coordinates.shape[1] != 2:
        raise ValueError(
            f"coordinates have shape {coordinates.shape}, expected (n, 2)"
        )
    if not np.issubdtype(coordinates.dtype, np.integer):
        raise ValueError(
            f"coordinates have dtype {coordinates.dtype}, expected integers"
        )
    return metadata, coordinates


def load_grid(
    config: ExperimentConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> LocationGrid | None:
    """Load a cached grid, or None on a miss or an unusable entry.

    Unreadable files, malformed contents, a size mismatch and a grid that
    fails validation are all logged and treated as a miss.
    """
    cache_path = _cache_path(config, cache_dir)
    for fname in _REQUIRED_FILES:
        if not (cache_path / fname).exists():
            return None

    try:
        metadata, coordinates = _read_entry(cache_path)
    except (
        OSError, ValueError, TypeError, KeyError, EOFError, zipfile.BadZipFile
    ) as exc:
        log.warning("Cached grid at %s is unreadable: %s", cache_path, exc)
        return None

    if metadata.get("size") != config.grid.size or len(coordinates) != config.grid.size:
        log.warning(
            "Cached grid at %s has size %s, expected %d; ignoring",
            cache_path,
            metadata.get("size"),
            config.grid.size,
        )
        return None

    try:
        grid = LocationGrid.from_coordinates(coordinates)
    except (ValueError, TypeError) as exc:
        log.warning("Cached grid at %s could not be rebuilt: %s", cache_path, exc)
        return None

    errors = validate_grid(grid)
    if errors:
        log.warning(
            "Cached grid at %s failed validation: %s",
            cache_path,
            "; ".join(errors),
        )
        return None

    log.info("Grid loaded from cache: %s", cache_path)
    return grid


def generate_or_load_grid(
    config: ExperimentConfig, cache_dir: Path = DEFAULT_CACHE_DIR
) -> LocationGrid:
    """Return the cached grid for ``config``, generating and caching it on a miss."""
    key = grid_cache_key(config)

    cached = load_grid(config, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, generating...", key)
    grid = generate_location_grid(config)
    save_grid(grid, config, cache_dir)
    return grid
