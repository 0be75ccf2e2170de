import random

import pytest

from Generator.grid import Cell, in_bounds, is_connected
from Generator.puzzle import ShapeGenerationFailed
from Generator.shape import TilingState, generate_shape_and_tiling


@pytest.mark.parametrize("seed", range(20))
def test_shape_is_exactly_tiled_and_connected(seed, grow):
    rng = random.Random(seed)
    shape, tiling = grow(5, 5, 5, rng)

    assert len(shape) == 10
    assert len(set(shape)) == 10
    assert len(tiling) == 5
    assert all(in_bounds(c, 5, 5) for c in shape)

    covered = [c for pair in tiling for c in pair]
    assert len(covered) == len(set(covered))
    assert set(covered) == set(shape)
    assert all(a.is_adjacent(b) for a, b in tiling)
    assert is_connected(shape)


def test_grid_too_small_fails_immediately():
    with pytest.raises(ShapeGenerationFailed):
        generate_shape_and_tiling(2, 2, 3, random.Random(0))


def test_full_cover_of_small_grid(grow):
    shape, tiling = grow(2, 2, 2, random.Random(5))
    assert set(shape) == {Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)}


def test_single_row_grid_grows_horizontally():
    shape, tiling = generate_shape_and_tiling(1, 2, 1, random.Random(0))
    assert set(shape) == {Cell(0, 0), Cell(0, 1)}


def test_candidates_are_deduplicated_by_cell_pair():
    state = TilingState(rows=2, cols=3)
    state.add_domino(Cell(0, 0), Cell(1, 0))
    candidates = state.candidate_placements()
    pairs = {frozenset(p) for p in candidates.values()}
    assert len(candidates) == 3
    assert pairs == {
        frozenset({Cell(0, 1), Cell(0, 2)}),
        frozenset({Cell(0, 1), Cell(1, 1)}),
        frozenset({Cell(1, 1), Cell(1, 2)}),
    }


def test_boxed_in_state_has_no_candidates():
    state = TilingState(rows=1, cols=4)
    state.add_domino(Cell(0, 1), Cell(0, 2))
    assert state.candidate_placements() == {}
