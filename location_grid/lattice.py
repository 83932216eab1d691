"""Integer lattice coordinates shared by the walk and the grid."""

# Unit steps in the order both the walk and the wiring pass visit them.
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

Coordinates = tuple[int, int]


def coordinates_key(x: int, y: int) -> Coordinates:
    """Canonical hashable key for a lattice point.

    Equal pairs give identical keys and distinct pairs never collide,
    including negative coordinates.
    """
    return (int(x), int(y))


def neighbor_keys(x: int, y: int) -> list[Coordinates]:
    """Keys of the four unit-adjacent points, in DIRECTIONS order."""
    return [coordinates_key(x + dx, y + dy) for dx, dy in DIRECTIONS]


def is_unit_adjacent(a: Coordinates, b: Coordinates) -> bool:
    """True iff ``a`` and ``b`` differ by exactly one in exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
