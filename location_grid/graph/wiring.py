"""Wiring pass: connect every pair of unit-adjacent locations."""

import logging
from collections.abc import Mapping, Sequence

from location_grid.graph.location import Location
from location_grid.lattice import Coordinates, neighbor_keys

log = logging.getLogger(__name__)


def wire_locations(
    locations: Sequence[Location], by_key: Mapping[Coordinates, Location]
) -> int:
    """Insert a directed edge each way between all unit-adjacent locations.

    Both insertions go through add_connection_if_not_present, so a pair
    seen from either endpoint is wired once and re-running the pass is a
    no-op.

    Args:
        locations: All locations of the grid, in index order.
        by_key: Coordinate key -> location lookup for the same grid.

    Returns:
        Number of directed edges added by this call.
    """
    before = sum(loc.degree for loc in locations)
    for location in locations:
        for key in neighbor_keys(location.x, location.y):
            found = by_key.get(key)
            if found is None:
                continue
            location.add_connection_if_not_present(found)
            found.add_connection_if_not_present(location)
    added = sum(loc.degree for loc in locations) - before
    log.debug("Wired %d directed edges across %d locations", added, len(locations))
    return added
