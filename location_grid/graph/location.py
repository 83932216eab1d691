"""Lattice location record.

A Location is one addressable point of a LocationGrid. Locations live in the
grid's arena (a single list ordered by index) and store their outgoing edges
as a list of target indices into that arena, so no location holds a
reference to another. Each location remembers its owner, the grid whose
arena its indices refer to; an edge index only means something between
locations with the same owner.
"""

from dataclasses import dataclass, field

from location_grid.lattice import Coordinates, coordinates_key


class ForeignLocationError(ValueError):
    """Raised when locations from different arenas are connected."""


@dataclass(frozen=True, slots=True, eq=False)
class Location:
    """A single lattice point and its outgoing edges.

    Identity is object identity: two locations with the same coordinates
    are different entities. Coordinates, index and owner cannot be
    reassigned. ``edges`` is a read-only view; the underlying list only
    grows, and only while the owning grid is wiring.

    Locations created without an owner share the unowned arena, which is
    enough to wire a handful of nodes by hand.
    """

    x: int
    y: int
    index: int  # position in the owner's arena
    owner: object = field(default=None, repr=False)
    _edges: list[int] = field(default_factory=list, init=False, repr=False)

    @property
    def key(self) -> Coordinates:
        return coordinates_key(self.x, self.y)

    @property
    def edges(self) -> tuple[int, ...]:
        """Target indices of the outgoing edges, in insertion order."""
        return tuple(self._edges)

    @property
    def degree(self) -> int:
        return len(self._edges)

    def shares_arena_with(self, other: "Location") -> bool:
        return other.owner is self.owner

    def is_adjacent_to(self, other: "Location") -> bool:
        """True iff an outgoing edge to ``other`` exists and ``other`` is not self.

        A location of another arena is never adjacent, whatever its index.
        Degree is bounded by 4, so the scan is effectively constant time.
        """
        if other is self or not self.shares_arena_with(other):
            return False
        return other.index in self._edges

    def add_connection_if_not_present(self, other: "Location") -> None:
        """Append a directed edge to ``other`` unless one already exists.

        The inverse edge is not added; the wiring pass connects both
        endpoints explicitly. Self-edges are never created.

        Raises:
            ForeignLocationError: If ``other`` belongs to another arena.
        """
        if not self.shares_arena_with(other):
            raise ForeignLocationError(
                f"cannot connect {self!r} to {other!r}: different arenas"
            )
        if other is self or self.is_adjacent_to(other):
            return
        self._edges.append(other.index)
