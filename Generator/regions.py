# Generator/regions.py
# Partition the shape into connected clue regions and pick a rule per region
# from the hidden solution, so the solution satisfies every clue by construction

from __future__ import annotations
import random
from collections import deque
from typing import List, Optional, Set, Tuple

from .grid import Cell, FOUR_NEIGHBORS
from .puzzle import Region, SolutionBoard

MIN_COVERAGE = 0.80
MAX_COVERAGE = 0.95


def choose_clue(pips: List[int], rng: random.Random = None) -> Tuple[str, Optional[int], str]:
    """
    Pick a rule the given pip values satisfy.

    Returns:
        (rule, value, display). '>'/'<' clues are stored as rule 'sum' and
        told apart by the display prefix.
    """
    rng = rng or random.Random()
    if not pips:
        raise ValueError("choose_clue needs at least one pip value")

    if len(pips) == 1:
        return 'sum', pips[0], f"{pips[0]}"

    total = sum(pips)
    options = ['sum']
    if all(p == pips[0] for p in pips):
        options.append('equal')
    if total > 1:
        options.append('sum_greater_than')
    options.append('sum_less_than')

    chosen = rng.choice(options)
    if chosen == 'equal':
        return 'equal', None, '='
    if chosen == 'sum_greater_than':
        return 'sum', total - 1, f"> {total - 1}"
    if chosen == 'sum_less_than':
        return 'sum', total + 1, f"< {total + 1}"
    return 'sum', total, f"{total}"


def _grow_region(seed: Cell, target_size: int, unassigned: Set[Cell],
                 solution: SolutionBoard, rng: random.Random) -> List[Cell]:
    """
    BFS from seed over unassigned cells, neighbours in shuffled order.
    Once the region holds a cell, the partner of the seed's domino is never absorbed.
    """
    seed_slot = solution.domino_map[seed]
    region_cells: List[Cell] = []
    queue = deque([seed])
    visited = {seed}

    while queue and len(region_cells) < target_size:
        current = queue.popleft()
        if region_cells and solution.domino_map.get(current) == seed_slot:
            continue
        region_cells.append(current)

        directions = list(FOUR_NEIGHBORS)
        rng.shuffle(directions)
        for dr, dc in directions:
            neighbor = Cell(current.row + dr, current.col + dc)
            if neighbor in unassigned and neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return region_cells


def generate_regions(solution: SolutionBoard, shape: List[Cell],
                     rng: random.Random = None) -> List[Region]:
    """
    Carve 80-95% of the shape into disjoint connected regions.

    Args:
        solution: hidden assignment (pips and domino membership)
        shape: cells of the puzzle
        rng: random source

    Returns:
        Regions with sequential ids in creation order. Cells left out carry no clue.
    """
    rng = rng or random.Random()
    regions: List[Region] = []
    unassigned: Set[Cell] = set(shape)
    # shape order keeps seed selection reproducible for a seeded rng
    pool: List[Cell] = list(shape)
    covered = 0

    max_region_size = max(2, len(shape) // 4)
    target_coverage = len(shape) * rng.uniform(MIN_COVERAGE, MAX_COVERAGE)

    while covered < target_coverage and unassigned:
        seed = rng.choice(pool)
        target_size = rng.randint(1, max_region_size)

        cells = _grow_region(seed, target_size, unassigned, solution, rng)
        if not cells:
            continue

        rule, value, display = choose_clue(solution.pips(cells), rng)
        regions.append(Region(id=len(regions), cells=cells, rule=rule,
                              value=value, display=display))

        absorbed = set(cells)
        unassigned -= absorbed
        pool = [c for c in pool if c not in absorbed]
        covered += len(cells)

    return regions
