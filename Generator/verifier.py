"""
Solution verification and board-state bookkeeping for generated Pips puzzles

Board states map a cell key ("r,c") to {'dominoId': ..., 'value': ...}. Cells
missing from the mapping are empty; a region touching an empty cell is simply
not solved yet.
"""

from typing import Dict, List, Mapping, Optional, Set, Tuple, Union

from .grid import Cell
from .puzzle import Puzzle, Region, SolutionBoard

CellState = Dict[str, object]


# -----------------------------------------------------------------------------
# Board state
# -----------------------------------------------------------------------------
class BoardState:
    """Placed dominoes on a puzzle's shape"""

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self._shape_keys = puzzle.shape_keys
        self.cells: Dict[str, CellState] = {}
        # domino id -> the (first, second) cells it covers
        self.placements: Dict[object, Tuple[Cell, Cell]] = {}

    @classmethod
    def from_solution(cls, puzzle: Puzzle, solution: SolutionBoard) -> "BoardState":
        """Board with every domino sitting where the hidden solution put it"""
        board = cls(puzzle)
        for cell, value in solution.values.items():
            slot = solution.domino_map[cell]
            domino_id = solution.slot_dominoes.get(slot, slot)
            board.cells[cell.key] = {'dominoId': domino_id, 'value': value}
        for slot in set(solution.domino_map.values()):
            domino_id = solution.slot_dominoes.get(slot, slot)
            first, second = sorted(solution.slot_cells(slot))
            board.placements[domino_id] = (first, second)
        return board

    def is_placement_valid(self, cell1: Cell, cell2: Cell, domino_id) -> bool:
        """Both cells on the shape and each free or already held by this domino"""
        if not cell1.is_adjacent(cell2):
            return False
        for cell in (cell1, cell2):
            if cell.key not in self._shape_keys:
                return False
            owner = self.cells.get(cell.key)
            if owner is not None and owner['dominoId'] != domino_id:
                return False
        return True

    def place_domino(self, domino_id, values: Tuple[int, int],
                     cell1: Cell, cell2: Cell) -> bool:
        """
        Put a domino on two adjacent cells; values[0] lands on cell1.
        Returns False (board unchanged) when the placement is not allowed.
        """
        if not self.is_placement_valid(cell1, cell2, domino_id):
            return False
        self.remove_domino(domino_id)
        self.cells[cell1.key] = {'dominoId': domino_id, 'value': values[0]}
        self.cells[cell2.key] = {'dominoId': domino_id, 'value': values[1]}
        self.placements[domino_id] = (cell1, cell2)
        return True

    def remove_domino(self, domino_id) -> None:
        """Take a domino off the board; no-op when it is not placed"""
        if domino_id not in self.placements:
            return
        del self.placements[domino_id]
        for key in [k for k, v in self.cells.items() if v['dominoId'] == domino_id]:
            del self.cells[key]

    def is_full(self) -> bool:
        return len(self.cells) == len(self._shape_keys)

    def value_at(self, cell: Cell) -> Optional[int]:
        state = self.cells.get(cell.key)
        return None if state is None else state['value']

    def as_mapping(self) -> Dict[str, CellState]:
        return {k: dict(v) for k, v in self.cells.items()}

    def __repr__(self):
        return f"BoardState(placed={len(self.placements)}, filled={len(self.cells)}/{len(self._shape_keys)})"


BoardLike = Union[BoardState, Mapping[str, CellState]]


def _cells_of(board: BoardLike) -> Mapping[str, CellState]:
    return board.cells if isinstance(board, BoardState) else board


# -----------------------------------------------------------------------------
# Verification
# -----------------------------------------------------------------------------
def check_region(region: Region, board: BoardLike) -> bool:
    """True if every cell of the region is filled and its rule holds"""
    cells = _cells_of(board)
    pips: List[int] = []
    for cell in region.cells:
        state = cells.get(cell.key)
        if state is None or state.get('value') is None:
            return False
        pips.append(state['value'])

    if region.rule == 'sum':
        total = sum(pips)
        if region.value is None:
            return False
        if region.comparison == '<':
            return total < region.value
        if region.comparison == '>':
            return total > region.value
        return total == region.value
    elif region.rule == 'equal':
        return all(p == pips[0] for p in pips)

    return False


def check_solution(board: BoardLike, regions: List[Region]) -> Tuple[bool, Set[int]]:
    """
    Evaluate every region against the board.

    Returns:
        (all_valid, ids of regions that are unfilled or violated)
    """
    failing = {region.id for region in regions if not check_region(region, board)}
    return not failing, failing
