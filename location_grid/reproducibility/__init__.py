"""Seed management for reproducible grid generation."""

from location_grid.reproducibility.seed import set_seed, verify_seed_determinism

__all__ = [
    "set_seed",
    "verify_seed_determinism",
]
