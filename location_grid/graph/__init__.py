"""Location grid construction, wiring, validation and caching."""

from location_grid.graph.location import ForeignLocationError, Location
from location_grid.graph.grid import (
    Connection,
    InvalidSizeError,
    LocationGrid,
    NotFoundError,
    generate_location_grid,
)
from location_grid.graph.wiring import wire_locations
from location_grid.graph.validation import validate_grid
from location_grid.graph.stats import GridStats, grid_stats
from location_grid.graph.cache import (
    generate_or_load_grid,
    grid_cache_key,
    load_grid,
    save_grid,
)
from location_grid.walk.generator import GridGenerationError

__all__ = [
    "Connection",
    "ForeignLocationError",
    "GridGenerationError",
    "GridStats",
    "InvalidSizeError",
    "Location",
    "LocationGrid",
    "NotFoundError",
    "generate_location_grid",
    "generate_or_load_grid",
    "grid_cache_key",
    "grid_stats",
    "load_grid",
    "save_grid",
    "validate_grid",
    "wire_locations",
]
