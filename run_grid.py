#!/usr/bin/env python3
"""Entry point for generating a random location grid.

Chains the generation stages into a single command:
seeding -> grid generation (or cache load) -> validation -> summary.

Usage:
    python run_grid.py
    python run_grid.py --config config.json --dry-run
    python run_grid.py --size 500 --seed 7 --no-cache --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from location_grid.config import (
    DEFAULT_CONFIG,
    ExperimentConfig,
    full_config_hash,
    grid_config_hash,
    load_config,
)
from location_grid.graph import (
    LocationGrid,
    generate_location_grid,
    generate_or_load_grid,
    grid_stats,
    validate_grid,
)
from location_grid.graph.cache import DEFAULT_CACHE_DIR
from location_grid.reproducibility import set_seed

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def build_config(
    config_path: Path | None, size: int | None, seed: int | None
) -> ExperimentConfig:
    """Load the config file (or defaults) and apply command-line overrides."""
    if config_path is not None:
        config = load_config(config_path)
    else:
        config = DEFAULT_CONFIG
    if size is not None:
        config = replace(config, grid=replace(config.grid, size=size))
    if seed is not None:
        config = replace(config, seed=seed)
    return config


def run_pipeline(
    config: ExperimentConfig,
    cache_dir: Path | None = DEFAULT_CACHE_DIR,
) -> LocationGrid:
    """Generate (or load) and validate the grid for ``config``.

    Args:
        config: Grid configuration.
        cache_dir: Cache directory, or None to always generate.

    Returns:
        The validated grid.

    Raises:
        RuntimeError: If the grid fails validation.
    """
    pipeline_start = time.monotonic()

    with stage_timer("Seeding"):
        set_seed(config.seed)
        log.info("Seed set: %d", config.seed)

    with stage_timer("Grid Generation"):
        if cache_dir is None:
            grid = generate_location_grid(config)
        else:
            grid = generate_or_load_grid(config, cache_dir)

    with stage_timer("Validation"):
        errors = validate_grid(grid)
        if errors:
            raise RuntimeError(
                f"Generated grid failed validation: {'; '.join(errors)}"
            )
        log.info("Grid passed validation")

    stats = grid_stats(grid)
    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Grid complete in {total_elapsed:.3f}s")
    print(f"  Locations:   {stats.n_nodes}")
    print(f"  Edges:       {stats.n_edges}")
    print(f"  Degree:      mean={stats.mean_degree:.2f}, max={stats.max_degree}")
    print(f"  Bounds:      x=[{stats.min_x}, {stats.max_x}], "
          f"y=[{stats.min_y}, {stats.max_y}] ({stats.width}x{stats.height})")
    print(f"  Connected:   {stats.is_connected}")
    print(f"{'=' * 60}")

    return grid


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a random connected location grid"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to grid config JSON file (defaults used when omitted)",
    )
    parser.add_argument("--size", type=int, default=None, help="Override grid size")
    parser.add_argument("--seed", type=int, default=None, help="Override seed")
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=str(DEFAULT_CACHE_DIR),
        help="Directory for cached grids",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always generate, never read or write the cache",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the resolved config without generating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = build_config(config_path, args.size, args.seed)
    except (ValueError, DaciteError) as exc:
        print(f"Error: invalid config: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Config hash:   {full_config_hash(config)}")
    print(f"Grid hash:     {grid_config_hash(config)}")
    print(f"Grid:          size={config.grid.size}")
    print(f"Seed:          {config.seed}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    cache_dir = None if args.no_cache else Path(args.cache_dir)
    try:
        run_pipeline(config, cache_dir)
    except Exception:
        log.exception("Grid generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
