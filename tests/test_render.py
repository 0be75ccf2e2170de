import numpy as np
import pytest

from Generator.boundary import extract_boundary
from Generator.grid import Cell
from Generator.render import rasterize_outline, render_puzzle, save_render, CELL_SIZE, PADDING


def _cells(*coords):
    return {Cell(r, c) for r, c in coords}


SHAPES = [
    _cells((0, 0)),
    _cells((0, 0), (0, 1), (1, 0), (1, 1)),
    _cells((0, 0), (1, 0), (2, 0), (2, 1)),                      # L
    _cells((0, 0), (0, 1), (0, 2), (1, 1)),                      # T
    _cells((0, 1), (0, 2), (1, 0), (1, 1)),                      # S
    _cells((0, 1), (1, 0), (1, 1), (1, 2), (2, 1)),              # plus
    _cells((0, 0), (1, 0), (1, 1), (1, 2), (0, 2)),              # U
    _cells((0, 0), (1, 0), (1, 1), (2, 1), (2, 2), (3, 2)),      # staircase
]


@pytest.mark.parametrize("shape", SHAPES)
def test_outline_rasterizes_back_to_the_shape(shape):
    outline = extract_boundary(shape)
    assert rasterize_outline(outline, rows=4, cols=4) == shape


def test_shifted_shape_round_trip():
    shape = {Cell(r + 2, c + 3) for r, c in [(0, 0), (1, 0), (2, 0), (2, 1)]}
    assert rasterize_outline(extract_boundary(shape), rows=6, cols=6) == shape


def test_no_outline_rasterizes_to_nothing():
    assert rasterize_outline([], rows=3, cols=3) == set()


def test_render_puzzle(generated, tmp_path):
    puzzle, generator = generated
    img = render_puzzle(puzzle)
    assert img.shape == (puzzle.rows * CELL_SIZE + 2 * PADDING,
                         puzzle.cols * CELL_SIZE + 2 * PADDING, 3)
    assert img.dtype == np.uint8

    # something besides white background was drawn
    assert (img != 255).any()

    path = tmp_path / "puzzle.png"
    solved = save_render(puzzle, str(path), solution=generator.solution, verbose=False)
    assert path.exists()
    assert solved.shape == img.shape
