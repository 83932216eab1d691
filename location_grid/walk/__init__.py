"""Randomized growing walk that selects the lattice points of a grid."""

from location_grid.walk.frontier import Frontier
from location_grid.walk.generator import (
    GridGenerationError,
    RandomSource,
    expand_frontier,
    grow_walk,
)

__all__ = [
    "Frontier",
    "GridGenerationError",
    "RandomSource",
    "expand_frontier",
    "grow_walk",
]
