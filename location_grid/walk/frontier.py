"""Candidate frontier for the growing walk."""

from location_grid.lattice import Coordinates


class Frontier:
    """Ordered candidate coordinates with constant-time membership.

    Candidates are kept in a list so that "pick the k-th candidate" is well
    defined, with a companion set for membership tests. Removal swaps the
    picked slot with the last one, so the order of the remaining candidates
    is not preserved.
    """

    def __init__(self) -> None:
        self._items: list[Coordinates] = []
        self._members: set[Coordinates] = set()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, key: Coordinates) -> bool:
        return key in self._members

    def __iter__(self):
        return iter(self._items)

    def add(self, key: Coordinates) -> bool:
        """Add a candidate; returns False if it was already present."""
        if key in self._members:
            return False
        self._items.append(key)
        self._members.add(key)
        return True

    def pop_at(self, position: int) -> Coordinates:
        """Remove and return the candidate at ``position`` (swap-remove)."""
        if not 0 <= position < len(self._items):
            raise IndexError(
                f"frontier position {position} out of range "
                f"for {len(self._items)} candidates"
            )
        picked = self._items[position]
        last = self._items.pop()
        if position < len(self._items):
            self._items[position] = last
        self._members.discard(picked)
        return picked
