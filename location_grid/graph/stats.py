"""Summary statistics for a generated grid."""

from dataclasses import dataclass

from scipy.sparse.csgraph import connected_components

from location_grid.graph.grid import LocationGrid


@dataclass(frozen=True, slots=True)
class GridStats:
    """Shape and degree summary of a LocationGrid."""

    n_nodes: int
    n_edges: int  # undirected pairs; each is stored as two directed edges
    mean_degree: float
    max_degree: int
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    is_connected: bool

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


def grid_stats(grid: LocationGrid) -> GridStats:
    coords = grid.coordinates()
    degrees = [loc.degree for loc in grid]
    n_components, _ = connected_components(grid.to_adjacency(), directed=False)
    return GridStats(
        n_nodes=grid.node_count(),
        n_edges=sum(degrees) // 2,
        mean_degree=sum(degrees) / len(degrees),
        max_degree=max(degrees),
        min_x=int(coords[:, 0].min()),
        max_x=int(coords[:, 0].max()),
        min_y=int(coords[:, 1].min()),
        max_y=int(coords[:, 1].max()),
        is_connected=n_components == 1,
    )
