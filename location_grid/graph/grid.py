"""LocationGrid: a random connected grid-graph and its read-only access API.

Construction runs the growing walk to pick the lattice points, creates one
Location per point in discovery order, then runs the wiring pass. After
construction the grid is never mutated, so it can be shared between readers.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple

import numpy as np
import scipy.sparse

from location_grid.config.experiment import ExperimentConfig
from location_grid.graph.location import Location
from location_grid.graph.wiring import wire_locations
from location_grid.lattice import Coordinates, coordinates_key
from location_grid.walk.generator import ORIGIN, RandomSource, grow_walk

log = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Raised when a grid is requested with fewer than one location."""


class NotFoundError(LookupError):
    """Raised when a location that does not belong to the grid is looked up."""


class Connection(NamedTuple):
    """A directed edge as seen by an indexed-graph consumer."""

    from_node: Location
    to_node: Location


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidSizeError(f"grid size must be an integer, got {size!r}")
    if size < 1:
        raise InvalidSizeError(
            f"location grid must have at least one location, got size={size}"
        )


class LocationGrid:
    """Connected set of lattice locations rooted at (0, 0).

    Locations are adjacent when they are one step apart up, down, left or
    right. The grid owns all locations in a single arena ordered by index;
    edges are stored on each location as target indices into that arena.

    Args:
        size: Number of locations to generate (>= 1).
        rng: Source of uniform integers. Defaults to a freshly seeded
            numpy Generator. A generator shared between threads must be
            guarded by the caller.

    Raises:
        InvalidSizeError: If ``size`` is not an integer >= 1.
    """

    def __init__(self, size: int, rng: RandomSource | None = None) -> None:
        _check_size(size)
        if rng is None:
            rng = np.random.default_rng()
        self._build(grow_walk(int(size), rng))

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Iterable[int]]) -> "LocationGrid":
        """Rebuild a grid from coordinates in discovery order.

        The walk is skipped; the wiring pass still runs. Used to restore
        cached grids.

        Raises:
            InvalidSizeError: If ``coordinates`` is empty.
            ValueError: If the first point is not the origin or a point
                repeats.
        """
        keys = [coordinates_key(*point) for point in coordinates]
        if not keys:
            raise InvalidSizeError("location grid must have at least one location")
        if keys[0] != ORIGIN:
            raise ValueError(f"first location must be the origin, got {keys[0]}")
        grid = cls.__new__(cls)
        grid._build(keys)
        return grid

    def _build(self, keys: list[Coordinates]) -> None:
        locations: list[Location] = []
        by_key: dict[Coordinates, Location] = {}
        for key in keys:
            if key in by_key:
                raise ValueError(f"duplicate location at {key}")
            location = Location(
                x=key[0], y=key[1], index=len(locations), owner=self
            )
            locations.append(location)
            by_key[key] = location

        wire_locations(locations, by_key)

        self._locations: tuple[Location, ...] = tuple(locations)
        self._by_key: dict[Coordinates, Location] = by_key

    # -- graph access --------------------------------------------------

    def node_count(self) -> int:
        return len(self._locations)

    def index_of(self, location: Location) -> int:
        """Index assigned to ``location`` at insertion, in [0, node_count)."""
        self._require_owned(location)
        return location.index

    def connections_of(self, location: Location) -> list[Connection]:
        """Outgoing edges of ``location`` in insertion order."""
        self._require_owned(location)
        return [
            Connection(location, self._locations[target])
            for target in location.edges
        ]

    def location_at(self, x: int, y: int) -> Location | None:
        return self._by_key.get(coordinates_key(x, y))

    @property
    def locations(self) -> tuple[Location, ...]:
        return self._locations

    @property
    def origin(self) -> Location:
        return self._locations[0]

    def coordinates(self) -> np.ndarray:
        """Int64 array of shape (node_count, 2) holding (x, y) in index order."""
        return np.array(
            [(loc.x, loc.y) for loc in self._locations], dtype=np.int64
        ).reshape(-1, 2)

    def to_adjacency(self) -> scipy.sparse.csr_matrix:
        """Directed adjacency matrix with a 1 at [i, j] for every edge i -> j."""
        n = len(self._locations)
        rows = [loc.index for loc in self._locations for _ in loc.edges]
        cols = [target for loc in self._locations for target in loc.edges]
        data = np.ones(len(rows), dtype=np.float64)
        return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))

    def _owns(self, location: object) -> bool:
        if not isinstance(location, Location):
            return False
        idx = location.index
        return (
            location.owner is self
            and 0 <= idx < len(self._locations)
            and self._locations[idx] is location
        )

    def _require_owned(self, location: Location) -> None:
        if not self._owns(location):
            raise NotFoundError(f"{location!r} does not belong to this grid")

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __contains__(self, location: object) -> bool:
        return self._owns(location)

    def __repr__(self) -> str:
        return f"LocationGrid(size={len(self._locations)})"


def generate_location_grid(
    config: ExperimentConfig, rng: RandomSource | None = None
) -> LocationGrid:
    """Generate the grid described by ``config``.

    Args:
        config: Grid configuration; ``config.grid.size`` locations are
            generated.
        rng: Optional random source. Defaults to a numpy Generator seeded
            with ``config.seed`` so the same config gives the same grid.

    Returns:
        The finished LocationGrid.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)
    grid = LocationGrid(config.grid.size, rng)
    log.info(
        "Grid generated (size=%d, seed=%d, edges=%d)",
        grid.node_count(),
        config.seed,
        sum(loc.degree for loc in grid) // 2,
    )
    return grid
