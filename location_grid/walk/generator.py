"""Randomized growing walk over the integer lattice.

Starting from the origin, the walk repeatedly seeds the frontier with the
free neighbors of the most recently placed point and then moves to a
uniformly chosen frontier candidate. Only the tail point feeds the frontier
on each step; the frontier is never recomputed from the whole occupied set,
which gives the generated shapes their snake-like growth. Candidates left
over from earlier steps stay eligible until they are drawn.
"""

import logging
from typing import Protocol

from location_grid.lattice import Coordinates, coordinates_key, neighbor_keys
from location_grid.walk.frontier import Frontier

log = logging.getLogger(__name__)

ORIGIN: Coordinates = coordinates_key(0, 0)


class GridGenerationError(RuntimeError):
    """Raised when the walk runs out of candidates before reaching its size."""


class RandomSource(Protocol):
    """Anything that draws uniform integers in [low, high).

    numpy.random.Generator satisfies this.
    """

    def integers(self, low: int, high: int) -> int: ...


def expand_frontier(
    frontier: Frontier, occupied: set[Coordinates], tail: Coordinates
) -> int:
    """Add the unoccupied neighbors of ``tail`` to the frontier.

    Args:
        frontier: Candidate frontier, updated in place.
        occupied: Coordinates already taken by the walk.
        tail: Most recently placed point.

    Returns:
        Number of candidates newly added.
    """
    added = 0
    for key in neighbor_keys(*tail):
        if key in occupied:
            continue
        if frontier.add(key):
            added += 1
    return added


def grow_walk(size: int, rng: RandomSource) -> list[Coordinates]:
    """Select ``size`` distinct, 4-connected lattice points.

    Args:
        size: Number of points to produce (>= 1, checked by the caller).
        rng: Source of uniform integers; one draw per placed point.

    Returns:
        Coordinates in discovery order, starting with the origin.

    Raises:
        GridGenerationError: If the frontier empties early. On the
            unbounded lattice every tail has four neighbors, so this is
            never expected.
    """
    coordinates = [ORIGIN]
    occupied = {ORIGIN}
    frontier = Frontier()
    tail = ORIGIN

    while len(coordinates) < size:
        expand_frontier(frontier, occupied, tail)
        if not frontier:
            raise GridGenerationError(
                f"frontier exhausted after {len(coordinates)} of {size} points"
            )

        pick = int(rng.integers(0, len(frontier)))
        tail = frontier.pop_at(pick)
        occupied.add(tail)
        coordinates.append(tail)

    log.debug(
        "Walk placed %d points, %d candidates left unused",
        len(coordinates),
        len(frontier),
    )
    return coordinates
