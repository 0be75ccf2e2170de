# Generator/boundary.py
# Exterior outline of a cell set, rebuilt from the parity of its unit-square edges

from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .grid import Cell

Point = Tuple[int, int]  # (x, y) = (column, row) axis order
Segment = Tuple[Point, Point]


def _cell_corners(cell: Cell, cell_size: int, padding: int,
                  origin: Tuple[int, int]) -> List[Point]:
    """Corners clockwise from top-left"""
    min_r, min_c = origin
    x0 = (cell.col - min_c) * cell_size + padding
    y0 = (cell.row - min_r) * cell_size + padding
    x1 = x0 + cell_size
    y1 = y0 + cell_size
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


def exterior_segments(cells: Iterable[Cell], cell_size: int = 1, padding: int = 0,
                      origin: Optional[Tuple[int, int]] = None) -> List[Segment]:
    """
    Unit edges that belong to exactly one cell.

    Shared edges between two covered cells are seen twice and drop out.
    """
    origin = origin or (0, 0)
    counts: Counter = Counter()
    for cell in cells:
        p = _cell_corners(cell, cell_size, padding, origin)
        for a, b in ((p[0], p[1]), (p[1], p[2]), (p[2], p[3]), (p[3], p[0])):
            counts[tuple(sorted((a, b)))] += 1
    return [seg for seg, n in counts.items() if n == 1]


def extract_boundary(cells: Iterable[Cell], cell_size: int = 1, padding: int = 0,
                     origin: Optional[Tuple[int, int]] = None) -> List[Point]:
    """
    Stitch the exterior segments into one closed polygon.

    Args:
        cells: the shape
        cell_size: pixel size of one cell (1 = grid units)
        padding: offset added to every coordinate
        origin: (min_row, min_col) to translate the shape to, or None for (0, 0)

    Returns:
        Points of the outline, first point repeated at the end. Empty list when
        there are no cells or the walk does not close on its start point.
    """
    segments = exterior_segments(cells, cell_size, padding, origin)
    if not segments:
        return []

    # endpoint -> indices of remaining segments touching it
    touching: Dict[Point, Set[int]] = {}
    for i, (a, b) in enumerate(segments):
        touching.setdefault(a, set()).add(i)
        touching.setdefault(b, set()).add(i)

    def take(i: int) -> Segment:
        a, b = segments[i]
        touching[a].discard(i)
        touching[b].discard(i)
        return segments[i]

    start = take(len(segments) - 1)
    path: List[Point] = [start[0], start[1]]

    while True:
        last = path[-1]
        remaining = touching.get(last)
        if not remaining:
            break
        a, b = take(min(remaining))
        path.append(b if a == last else a)

    if path[-1] != path[0]:
        return []
    return path


def svg_path_data(points: List[Point]) -> str:
    """SVG `d` attribute for an outline; empty string for no outline"""
    if not points:
        return ''
    d = f"M {points[0][0]} {points[0][1]}"
    for x, y in points[1:]:
        d += f" L {x} {y}"
    return d + ' Z'
