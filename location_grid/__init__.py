"""Random connected grid-graphs over integer lattice coordinates."""

from location_grid.graph import (
    Connection,
    ForeignLocationError,
    GridGenerationError,
    InvalidSizeError,
    Location,
    LocationGrid,
    NotFoundError,
    generate_location_grid,
)

__all__ = [
    "Connection",
    "ForeignLocationError",
    "GridGenerationError",
    "InvalidSizeError",
    "Location",
    "LocationGrid",
    "NotFoundError",
    "generate_location_grid",
]
