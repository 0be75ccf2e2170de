# Generator/grid.py
# Cell identity, 4-connectivity and bounds math shared by every generation stage

from __future__ import annotations
from dataclasses import dataclass
from collections import deque
from typing import Dict, Iterable, Iterator, List, Set, Tuple

FOUR_NEIGHBORS = [(0, 1), (0, -1), (1, 0), (-1, 0)]


@dataclass(frozen=True, order=True)
class Cell:
    """A grid cell, compared by position"""
    row: int
    col: int

    @property
    def key(self) -> str:
        """Board-state / JSON key, e.g. "2,3" """
        return f"{self.row},{self.col}"

    @classmethod
    def from_key(cls, key: str) -> "Cell":
        r, c = key.split(',')
        return cls(int(r), int(c))

    def neighbors(self) -> Iterator["Cell"]:
        for dr, dc in FOUR_NEIGHBORS:
            yield Cell(self.row + dr, self.col + dc)

    def is_adjacent(self, other: "Cell") -> bool:
        """Exactly one unit apart horizontally or vertically"""
        row_diff = abs(self.row - other.row)
        col_diff = abs(self.col - other.col)
        return (row_diff == 1 and col_diff == 0) or (row_diff == 0 and col_diff == 1)

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.row, 'c': self.col}

    def __repr__(self):
        return f"Cell({self.row},{self.col})"


def in_bounds(cell: Cell, rows: int, cols: int) -> bool:
    return 0 <= cell.row < rows and 0 <= cell.col < cols


def pair_key(a: Cell, b: Cell) -> str:
    """Order-independent key for a two-cell placement"""
    return '|'.join(sorted([a.key, b.key]))


def bounding_box(cells: Iterable[Cell]) -> Tuple[int, int, int, int]:
    """Return (min_row, min_col, max_row, max_col)"""
    cells = list(cells)
    if not cells:
        raise ValueError("bounding_box of an empty cell set")
    return (min(c.row for c in cells), min(c.col for c in cells),
            max(c.row for c in cells), max(c.col for c in cells))


def build_adjacency(cells: Iterable[Cell]) -> Dict[Cell, List[Cell]]:
    """
    Build adjacency map: which cells in the set share an edge?

    Returns:
        Dict mapping each cell -> list of its neighbours inside the set
    """
    cell_set = set(cells)
    return {cell: [n for n in cell.neighbors() if n in cell_set] for cell in cell_set}


def is_connected(cells: Iterable[Cell]) -> bool:
    """True if every cell is reachable from any other via 4-connectivity"""
    cell_set: Set[Cell] = set(cells)
    if not cell_set:
        return True

    start = next(iter(cell_set))
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for n in current.neighbors():
            if n in cell_set and n not in visited:
                visited.add(n)
                queue.append(n)

    return len(visited) == len(cell_set)
