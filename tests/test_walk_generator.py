"""Tests for the candidate frontier and the randomized growing walk.

Covers swap-remove picking, tail-only frontier seeding, draw bounds,
distinctness and connectivity of the walk, and the exhausted-frontier
fallback.
"""

from unittest.mock import patch

import numpy as np
import pytest

from location_grid.lattice import is_unit_adjacent
from location_grid.walk import (
    Frontier,
    GridGenerationError,
    expand_frontier,
    grow_walk,
)


class ScriptedRng:
    """Random source that replays fixed picks and records each upper bound."""

    def __init__(self, picks: list[int]) -> None:
        self._picks = iter(picks)
        self.bounds: list[int] = []

    def integers(self, low: int, high: int) -> int:
        self.bounds.append(high)
        value = next(self._picks)
        assert low <= value < high
        return value


class TestFrontier:
    """Ordered frontier with set membership and swap-remove."""

    def test_add_rejects_duplicates(self) -> None:
        frontier = Frontier()
        assert frontier.add((1, 0))
        assert not frontier.add((1, 0))
        assert len(frontier) == 1
        assert (1, 0) in frontier

    def test_pop_at_swaps_last_into_slot(self) -> None:
        frontier = Frontier()
        for key in [(1, 0), (2, 0), (3, 0)]:
            frontier.add(key)
        assert frontier.pop_at(0) == (1, 0)
        assert list(frontier) == [(3, 0), (2, 0)]
        assert (1, 0) not in frontier

    def test_pop_last_position(self) -> None:
        frontier = Frontier()
        frontier.add((1, 0))
        frontier.add((2, 0))
        assert frontier.pop_at(1) == (2, 0)
        assert list(frontier) == [(1, 0)]

    def test_pop_out_of_range(self) -> None:
        frontier = Frontier()
        frontier.add((1, 0))
        with pytest.raises(IndexError):
            frontier.pop_at(1)
        with pytest.raises(IndexError):
            frontier.pop_at(-1)

    def test_empty_frontier_is_falsy(self) -> None:
        assert not Frontier()


class TestExpandFrontier:
    """Frontier seeding from the tail point only."""

    def test_origin_adds_all_four_neighbors(self) -> None:
        frontier = Frontier()
        added = expand_frontier(frontier, {(0, 0)}, (0, 0))
        assert added == 4
        assert list(frontier) == [(1, 0), (-1, 0), (0, 1), (0, -1)]

    def test_skips_occupied_and_present(self) -> None:
        frontier = Frontier()
        frontier.add((1, 1))
        added = expand_frontier(frontier, {(0, 0), (1, 0)}, (1, 0))
        # (0, 0) is occupied and (1, 1) is already a candidate
        assert added == 2
        assert set(frontier) == {(1, 1), (2, 0), (1, -1)}

    def test_older_points_do_not_seed(self) -> None:
        """Only the tail's neighbors enter; (-1, 0) next to the origin does not."""
        frontier = Frontier()
        expand_frontier(frontier, {(0, 0), (1, 0)}, (1, 0))
        assert (-1, 0) not in frontier
        assert (0, 1) not in frontier


class TestGrowWalk:
    """Walk size, distinctness, and frontier behavior."""

    def test_single_point_is_origin(self) -> None:
        rng = ScriptedRng([])
        assert grow_walk(1, rng) == [(0, 0)]
        assert rng.bounds == []

    def test_scripted_square(self) -> None:
        """Picks 0, 4, 2 close a 2x2 square around the origin."""
        rng = ScriptedRng([0, 4, 2])
        coords = grow_walk(4, rng)
        assert coords == [(0, 0), (1, 0), (1, 1), (0, 1)]
        # 4 from the origin; 3 left + 3 new; 5 left + 2 new
        assert rng.bounds == [4, 6, 7]

    def test_leftover_candidates_stay_eligible(self) -> None:
        """A candidate seeded by the origin can be drawn after the tail moved on."""
        rng = ScriptedRng([0, 0])
        coords = grow_walk(3, rng)
        # After the first pick, (0, -1) is swapped to the front of the frontier
        assert coords == [(0, 0), (1, 0), (0, -1)]

    @pytest.mark.parametrize("size", [2, 10, 100, 1000])
    def test_points_are_distinct(self, size: int) -> None:
        coords = grow_walk(size, np.random.default_rng(size))
        assert len(coords) == size
        assert len(set(coords)) == size

    def test_each_point_touches_an_earlier_point(self) -> None:
        coords = grow_walk(300, np.random.default_rng(7))
        for i in range(1, len(coords)):
            assert any(
                is_unit_adjacent(coords[i], earlier) for earlier in coords[:i]
            ), f"point {i} at {coords[i]} is detached"

    def test_same_seed_same_walk(self) -> None:
        a = grow_walk(200, np.random.default_rng(123))
        b = grow_walk(200, np.random.default_rng(123))
        assert a == b

    def test_exhausted_frontier_raises(self) -> None:
        """The unreachable empty-frontier branch fails loudly."""
        with patch(
            "location_grid.walk.generator.expand_frontier", return_value=0
        ):
            with pytest.raises(GridGenerationError, match="frontier exhausted"):
                grow_walk(3, np.random.default_rng(0))
