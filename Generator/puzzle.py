"""
Core data structures for generated Pips puzzles
"""
from typing import List, Dict, Tuple, Optional, Any
from dataclasses import dataclass, field

from .grid import Cell


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
class PuzzleGenerationError(RuntimeError):
    """Base class for everything the generator raises"""


class ShapeGenerationFailed(PuzzleGenerationError):
    """Growth boxed itself in (or the grid is too small); the attempt is discarded"""


class PuzzleGenerationExhausted(PuzzleGenerationError):
    """Every attempt failed; there is no further automatic recovery"""

    def __init__(self, attempts: int, message: Optional[str] = None):
        self.attempts = attempts
        super().__init__(message or
                         f"Failed to generate a solvable puzzle after {attempts} attempts. "
                         f"Please check parameters.")


class DegenerateConfiguration(PuzzleGenerationError, ValueError):
    """Parameters that can never produce a puzzle"""


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
Tiling = List[Tuple[Cell, Cell]]


@dataclass
class Domino:
    """Represents a domino piece (an unordered pip pair)"""
    id: int
    pips_left: int
    pips_right: int

    def as_tuple(self) -> Tuple[int, int]:
        """Return domino as (left, right) tuple"""
        return (self.pips_left, self.pips_right)

    @property
    def key(self) -> str:
        """Orientation-free identity, e.g. "2-5" for both (2,5) and (5,2)"""
        lo, hi = sorted(self.as_tuple())
        return f"{lo}-{hi}"

    def sum(self) -> int:
        """Total pips on this domino"""
        return self.pips_left + self.pips_right

    def is_double(self) -> bool:
        return self.pips_left == self.pips_right

    def __repr__(self):
        return f"Domino({self.pips_left},{self.pips_right})"


@dataclass
class Region:
    """A clue region: connected cells bound to one rule"""
    id: int
    cells: List[Cell] = field(default_factory=list)
    rule: str = "sum"  # 'sum' or 'equal'
    value: Optional[int] = None
    display: str = ""

    @property
    def comparison(self) -> Optional[str]:
        """'<', '>' or '==' for sum rules, taken from the display text"""
        if self.rule != 'sum':
            return None
        if self.display.startswith('<'):
            return '<'
        if self.display.startswith('>'):
            return '>'
        return '=='

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'cells': [c.to_dict() for c in self.cells],
            'rule': self.rule,
            'display': self.display,
        }
        if self.value is not None:
            data['value'] = self.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Region":
        return cls(
            id=data['id'],
            cells=[Cell(c['r'], c['c']) for c in data['cells']],
            rule=data['rule'],
            value=data.get('value'),
            display=data.get('display', ''),
        )

    def __repr__(self):
        return f"Region(id={self.id}, size={len(self.cells)}, rule={self.rule}, display={self.display!r})"


@dataclass
class SolutionBoard:
    """
    Hidden assignment built during generation.

    values:     cell -> pip value
    domino_map: cell -> index of the tiling slot that covers it
    """
    values: Dict[Cell, int] = field(default_factory=dict)
    domino_map: Dict[Cell, int] = field(default_factory=dict)
    # tiling slot index -> id of the Domino bound to it
    slot_dominoes: Dict[int, int] = field(default_factory=dict)

    def pips(self, cells: List[Cell]) -> List[int]:
        return [self.values[c] for c in cells]

    def slot_cells(self, slot: int) -> List[Cell]:
        return [c for c, s in self.domino_map.items() if s == slot]


@dataclass
class Puzzle:
    """
    Player-facing puzzle: grid, shape, piece set and clues.
    Carries no solution information.
    """
    rows: int
    cols: int
    shape: List[Cell]
    dominoes: List[Domino]
    regions: List[Region]

    @property
    def grid_size(self) -> Dict[str, int]:
        return {'rows': self.rows, 'cols': self.cols}

    @property
    def shape_keys(self) -> set:
        return {c.key for c in self.shape}

    def get_domino(self, domino_id: int) -> Domino:
        for d in self.dominoes:
            if d.id == domino_id:
                return d
        raise KeyError(f"[puzzle] Unknown domino id {domino_id}")

    def region_of(self, cell: Cell) -> Optional[Region]:
        """Region containing the cell, or None for unconstrained cells"""
        for region in self.regions:
            if cell in region.cells:
                return region
        return None

    def coverage(self) -> float:
        covered = sum(len(r.cells) for r in self.regions)
        return covered / len(self.shape) if self.shape else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gridSize': self.grid_size,
            'shape': [c.to_dict() for c in self.shape],
            'dominoes': [[d.pips_left, d.pips_right] for d in self.dominoes],
            'regions': [r.to_dict() for r in self.regions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        """Rebuild a puzzle from `to_dict()` output, with integrity checks"""
        try:
            grid = data['gridSize']
            puzzle = cls(
                rows=int(grid['rows']),
                cols=int(grid['cols']),
                shape=[Cell(c['r'], c['c']) for c in data['shape']],
                dominoes=[Domino(id=i, pips_left=v[0], pips_right=v[1])
                          for i, v in enumerate(data['dominoes'])],
                regions=[Region.from_dict(r) for r in data['regions']],
            )
        except (KeyError, TypeError, IndexError) as e:
            raise ValueError(f"[puzzle] Malformed puzzle data: {e!r}") from e

        if len(puzzle.shape) != 2 * len(puzzle.dominoes):
            raise ValueError(f"[puzzle] Shape has {len(puzzle.shape)} cells "
                             f"but there are {len(puzzle.dominoes)} dominoes")
        shape_set = set(puzzle.shape)
        stray = [c for r in puzzle.regions for c in r.cells if c not in shape_set]
        if stray:
            raise ValueError(f"[puzzle] Region cells outside the shape: {stray}")
        return puzzle

    def __repr__(self):
        return (f"Puzzle(grid={self.rows}x{self.cols}, cells={len(self.shape)}, "
                f"dominoes={len(self.dominoes)}, regions={len(self.regions)})")
