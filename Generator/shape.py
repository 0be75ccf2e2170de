# Generator/shape.py
# Randomized connected growth of a polyomino that is fully covered by its domino tiling

from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from .grid import Cell, in_bounds, pair_key
from .puzzle import ShapeGenerationFailed, Tiling


@dataclass
class TilingState:
    """Growth state owned by a single generation attempt"""
    rows: int
    cols: int
    shape: List[Cell] = field(default_factory=list)
    tiling: Tiling = field(default_factory=list)
    occupied: Set[Cell] = field(default_factory=set)

    def is_free(self, cell: Cell) -> bool:
        return in_bounds(cell, self.rows, self.cols) and cell not in self.occupied

    def add_domino(self, a: Cell, b: Cell) -> None:
        self.shape.extend((a, b))
        self.tiling.append((a, b))
        self.occupied.add(a)
        self.occupied.add(b)

    def candidate_placements(self) -> Dict[str, Tuple[Cell, Cell]]:
        """
        Every new domino (X, Y) with X touching the shape and Y touching X,
        both uncovered. Keyed by the unordered cell pair so a placement that
        several growth paths rediscover is counted once.
        """
        candidates: Dict[str, Tuple[Cell, Cell]] = {}
        for cell in self.shape:
            for x in cell.neighbors():
                if not self.is_free(x):
                    continue
                for y in x.neighbors():
                    if not self.is_free(y):
                        continue
                    candidates.setdefault(pair_key(x, y), (x, y))
        return candidates


def generate_shape_and_tiling(rows: int, cols: int, target_dominoes: int,
                              rng: random.Random = None) -> Tuple[List[Cell], Tiling]:
    """
    Grow a connected shape of exactly 2*target_dominoes cells together with a
    perfect domino tiling of it.

    Args:
        rows, cols: grid dimensions
        target_dominoes: number of tiling slots to grow
        rng: random source (module-level random if None)

    Returns:
        (shape, tiling) where shape lists cells in growth order and tiling
        lists the (first, second) cell of each slot

    Raises:
        ShapeGenerationFailed: grid too small, or growth boxed itself in
    """
    rng = rng or random.Random()

    if rows * cols < target_dominoes * 2:
        raise ShapeGenerationFailed(
            f"Grid {rows}x{cols} cannot hold {target_dominoes} dominoes")

    state = TilingState(rows=rows, cols=cols)

    # Anchor away from the last row/column so the partner always fits
    first = Cell(rng.randrange(max(1, rows - 1)), rng.randrange(max(1, cols - 1)))
    down = Cell(first.row + 1, first.col)
    right = Cell(first.row, first.col + 1)
    if not in_bounds(down, rows, cols):
        second = right
    elif not in_bounds(right, rows, cols):
        second = down
    else:
        second = down if rng.random() > 0.5 else right
    state.add_domino(first, second)

    while len(state.tiling) < target_dominoes:
        candidates = state.candidate_placements()
        if not candidates:
            raise ShapeGenerationFailed(
                f"No room to grow after {len(state.tiling)}/{target_dominoes} dominoes")
        a, b = rng.choice(list(candidates.values()))
        state.add_domino(a, b)

    return state.shape, state.tiling
