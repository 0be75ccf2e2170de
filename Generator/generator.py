"""
Puzzle assembler: drives shape growth, value assignment and region carving
with bounded full-restart retries.

Each attempt owns all of its state; a failed attempt is dropped and the next
one starts from an empty grid.
"""

import random
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .dominoes import generate_domino_values, create_solution, max_distinct_pairs
from .puzzle import (Puzzle, SolutionBoard, ShapeGenerationFailed,
                     PuzzleGenerationExhausted, DegenerateConfiguration)
from .regions import generate_regions
from .shape import generate_shape_and_tiling

MAX_ATTEMPTS = 100


@dataclass
class GeneratorConfig:
    rows: int = 5
    cols: int = 5
    num_dominoes: int = 5
    pip_range: Tuple[int, int] = (1, 6)  # inclusive
    max_attempts: int = MAX_ATTEMPTS

    def validate(self) -> None:
        """
        Reject parameters that can never work. A grid too small for the
        domino count is left to shape generation, which fails every attempt.
        """
        if self.rows < 1 or self.cols < 1:
            raise DegenerateConfiguration(f"Grid must be at least 1x1, got {self.rows}x{self.cols}")
        if self.num_dominoes < 1:
            raise DegenerateConfiguration(f"Need at least one domino, got {self.num_dominoes}")
        lo, hi = self.pip_range
        if lo < 0 or hi < lo:
            raise DegenerateConfiguration(f"Invalid pip range [{lo},{hi}]")
        if self.num_dominoes > max_distinct_pairs(self.pip_range):
            raise DegenerateConfiguration(
                f"Pip range [{lo},{hi}] supplies only {max_distinct_pairs(self.pip_range)} "
                f"distinct dominoes, {self.num_dominoes} requested")
        if self.max_attempts < 1:
            raise DegenerateConfiguration(f"max_attempts must be positive, got {self.max_attempts}")


class PuzzleGenerator:
    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None,
                 verbose: bool = False):
        self.config = config
        self.rng = rng or random.Random()
        self.verbose = verbose
        self.solution: Optional[SolutionBoard] = None
        self.tiling = None
        self.stats: Dict[str, float] = {
            'attempts': 0,
            'shape_failures': 0,
            'regions': 0,
            'covered_cells': 0,
            'elapsed': 0.0,
        }

    def _attempt(self) -> Optional[Puzzle]:
        """One generation attempt from empty state; None if the shape failed"""
        cfg = self.config
        try:
            shape, tiling = generate_shape_and_tiling(cfg.rows, cfg.cols, cfg.num_dominoes, self.rng)
        except ShapeGenerationFailed as e:
            self.stats['shape_failures'] += 1
            if self.verbose:
                print(f"  ✗ Attempt {self.stats['attempts']}: {e}")
            return None

        dominoes = generate_domino_values(cfg.num_dominoes, cfg.pip_range, self.rng)
        solution = create_solution(tiling, dominoes, self.rng)
        regions = generate_regions(solution, shape, self.rng)

        self.solution = solution
        self.tiling = tiling
        return Puzzle(rows=cfg.rows, cols=cfg.cols, shape=shape,
                      dominoes=dominoes, regions=regions)

    def generate(self) -> Puzzle:
        """
        Returns:
            A finished Puzzle

        Raises:
            DegenerateConfiguration: parameters can never produce a puzzle
            PuzzleGenerationExhausted: every attempt failed
        """
        self.config.validate()
        start = time.time()
        self.stats.update(attempts=0, shape_failures=0, regions=0, covered_cells=0, elapsed=0.0)

        if self.verbose:
            cfg = self.config
            print(f"Generating {cfg.rows}x{cfg.cols} puzzle with {cfg.num_dominoes} dominoes, "
                  f"pips {cfg.pip_range[0]}-{cfg.pip_range[1]}")

        while self.stats['attempts'] < self.config.max_attempts:
            self.stats['attempts'] += 1
            puzzle = self._attempt()
            if puzzle is None:
                continue

            self.stats['regions'] = len(puzzle.regions)
            self.stats['covered_cells'] = sum(len(r.cells) for r in puzzle.regions)
            self.stats['elapsed'] = time.time() - start
            if self.verbose:
                print(f"✓ Puzzle generated successfully in {self.stats['attempts']} attempt(s).")
            return puzzle

        self.stats['elapsed'] = time.time() - start
        if self.verbose:
            print(f"✗ Gave up after {self.stats['attempts']} attempts")
        raise PuzzleGenerationExhausted(self.stats['attempts'])


def generate_puzzle(config: GeneratorConfig, seed: Optional[int] = None,
                    verbose: bool = False) -> Puzzle:
    """Convenience wrapper: one generator, one puzzle"""
    return PuzzleGenerator(config, rng=random.Random(seed), verbose=verbose).generate()
