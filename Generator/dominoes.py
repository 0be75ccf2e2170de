"""
Domino value assignment: distinct pip pairs bound to the tiling as the hidden solution
"""
import random
from typing import List, Tuple, Set

from .puzzle import Domino, SolutionBoard, Tiling, DegenerateConfiguration


def max_distinct_pairs(pip_range: Tuple[int, int]) -> int:
    """How many unordered pip pairs the inclusive range can supply"""
    lo, hi = pip_range
    n = hi - lo + 1
    return n * (n + 1) // 2 if n > 0 else 0


def generate_domino_values(count: int, pip_range: Tuple[int, int],
                           rng: random.Random = None) -> List[Domino]:
    """
    Rejection-sample `count` pip pairs that are pairwise distinct as unordered pairs.

    Raises:
        DegenerateConfiguration: the range cannot supply `count` distinct pairs
    """
    rng = rng or random.Random()
    lo, hi = pip_range
    available = max_distinct_pairs(pip_range)
    if count > available:
        raise DegenerateConfiguration(
            f"Pip range [{lo},{hi}] has only {available} distinct dominoes, "
            f"{count} requested")

    seen: Set[Tuple[int, int]] = set()
    dominoes: List[Domino] = []
    while len(dominoes) < count:
        v1 = rng.randint(lo, hi)
        v2 = rng.randint(lo, hi)
        key = tuple(sorted((v1, v2)))
        if key in seen:
            continue
        seen.add(key)
        dominoes.append(Domino(id=len(dominoes), pips_left=v1, pips_right=v2))
    return dominoes


def create_solution(tiling: Tiling, dominoes: List[Domino],
                    rng: random.Random = None) -> SolutionBoard:
    """
    Bind shuffled dominoes to tiling slots, flipping each one with a fair coin.
    """
    rng = rng or random.Random()
    if len(tiling) != len(dominoes):
        raise ValueError(f"{len(tiling)} tiling slots but {len(dominoes)} dominoes")

    shuffled = list(dominoes)
    rng.shuffle(shuffled)

    solution = SolutionBoard()
    for slot, ((cell1, cell2), domino) in enumerate(zip(tiling, shuffled)):
        if rng.random() > 0.5:
            val1, val2 = domino.pips_left, domino.pips_right
        else:
            val1, val2 = domino.pips_right, domino.pips_left
        solution.values[cell1] = val1
        solution.values[cell2] = val2
        solution.domino_map[cell1] = slot
        solution.domino_map[cell2] = slot
        solution.slot_dominoes[slot] = domino.id
    return solution
