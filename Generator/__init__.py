"""
Pips Puzzle Generator Package

Randomized shape growth, domino tiling and clue carving for Pips puzzles.
"""

from .grid import Cell
from .puzzle import (Puzzle, Domino, Region, SolutionBoard,
                     PuzzleGenerationError, ShapeGenerationFailed,
                     PuzzleGenerationExhausted, DegenerateConfiguration)
from .generator import GeneratorConfig, PuzzleGenerator, generate_puzzle
from .boundary import extract_boundary, svg_path_data
from .verifier import BoardState, check_region, check_solution
from .output import PuzzleFormatter

__version__ = "1.0.0"
__all__ = [
    'Cell',
    'Puzzle',
    'Domino',
    'Region',
    'SolutionBoard',
    'PuzzleGenerationError',
    'ShapeGenerationFailed',
    'PuzzleGenerationExhausted',
    'DegenerateConfiguration',
    'GeneratorConfig',
    'PuzzleGenerator',
    'generate_puzzle',
    'extract_boundary',
    'svg_path_data',
    'BoardState',
    'check_region',
    'check_solution',
    'PuzzleFormatter'
]
