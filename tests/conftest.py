import random

import pytest

from Generator.generator import GeneratorConfig, PuzzleGenerator
from Generator.puzzle import ShapeGenerationFailed
from Generator.shape import generate_shape_and_tiling


def _grow(rows, cols, target, rng, tries=200):
    """Retry shape growth until one attempt succeeds"""
    for _ in range(tries):
        try:
            return generate_shape_and_tiling(rows, cols, target, rng)
        except ShapeGenerationFailed:
            continue
    raise AssertionError(f"no {rows}x{cols} shape with {target} dominoes in {tries} tries")


@pytest.fixture
def grow():
    return _grow


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(params=range(8))
def generated(request):
    """(puzzle, generator) for a handful of seeds at the default 5x5 config"""
    generator = PuzzleGenerator(GeneratorConfig(num_dominoes=5 + request.param % 3),
                                rng=random.Random(request.param))
    puzzle = generator.generate()
    return puzzle, generator
