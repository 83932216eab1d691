"""Invariant checks for a finished LocationGrid.

Checks run cheapest first and report every problem found rather than
stopping at the first one. An empty list means the grid is valid.
"""

import logging

from scipy.sparse.csgraph import connected_components

from location_grid.graph.grid import LocationGrid
from location_grid.lattice import is_unit_adjacent, neighbor_keys

log = logging.getLogger(__name__)


def validate_grid(grid: LocationGrid) -> list[str]:
    """Validate a grid against the location grid invariants.

    Checks:
    1. Indices form a bijection onto [0, node_count)
    2. One location per coordinate, matching the coordinate lookup
    3. No self-edges, duplicate edges or out-of-range targets
    4. Edges only join unit-adjacent locations
    5. Every edge has its reverse
    6. Every unit-adjacent pair is wired
    7. The grid is a single connected component

    Args:
        grid: Grid to check.

    Returns:
        List of error strings (empty = valid grid).
    """
    errors: list[str] = []
    locations = grid.locations
    n = len(locations)

    # 1. Index bijection
    for position, loc in enumerate(locations):
        if loc.index != position:
            errors.append(
                f"Location ({loc.x},{loc.y}) at position {position} "
                f"has index {loc.index}"
            )

    # 2. Distinct coordinates
    keys = [loc.key for loc in locations]
    if len(set(keys)) != n:
        errors.append(f"Duplicate coordinates: {n - len(set(keys))} repeats")
    for loc in locations:
        if grid.location_at(loc.x, loc.y) is not loc:
            errors.append(f"Coordinate lookup mismatch at ({loc.x},{loc.y})")

    # 3-4. Edge list hygiene and geometry
    edge_set: set[tuple[int, int]] = set()
    for loc in locations:
        if len(set(loc.edges)) != len(loc.edges):
            errors.append(f"Duplicate edges from ({loc.x},{loc.y})")
        for target in loc.edges:
            if target == loc.index:
                errors.append(f"Self-edge at ({loc.x},{loc.y})")
                continue
            if not 0 <= target < n:
                errors.append(
                    f"Edge from ({loc.x},{loc.y}) to unknown index {target}"
                )
                continue
            other = locations[target]
            if not is_unit_adjacent(loc.key, other.key):
                errors.append(
                    f"Edge ({loc.x},{loc.y}) -> ({other.x},{other.y}) "
                    f"joins non-adjacent locations"
                )
            edge_set.add((loc.index, target))

    # 5. Symmetry
    asymmetric = [(i, j) for i, j in edge_set if (j, i) not in edge_set]
    if asymmetric:
        errors.append(f"{len(asymmetric)} edges have no reverse edge")

    # 6. Completeness
    for loc in locations:
        for key in neighbor_keys(loc.x, loc.y):
            other = grid.location_at(*key)
            if other is not None and (loc.index, other.index) not in edge_set:
                errors.append(
                    f"Adjacent locations ({loc.x},{loc.y}) and "
                    f"({other.x},{other.y}) are not wired"
                )

    # 7. Connectivity
    if n > 0:
        n_components, _ = connected_components(
            grid.to_adjacency(), directed=True, connection="strong"
        )
        if n_components != 1:
            errors.append(f"Not connected: {n_components} components found")

    if errors:
        log.debug("Grid validation found %d problems", len(errors))
    return errors
