# Generator/render.py
# Debug overlay of a generated puzzle (silhouette, regions, clue badges) and
# rasterization of an outline polygon back to grid cells

from __future__ import annotations
import cv2
import numpy as np
from typing import List, Optional, Set

from .boundary import Point, extract_boundary
from .grid import Cell
from .puzzle import Puzzle, SolutionBoard

CELL_SIZE = 62
PADDING = 15
SHAPE_FILL_BGR = (235, 231, 229)   # #e5e7eb
CELL_FILL_BGR = (250, 250, 250)
TEXT_BGR = (40, 40, 40)


def rasterize_outline(points: List[Point], rows: int, cols: int, scale: int = 16) -> Set[Cell]:
    """
    Cells whose centers fall inside an outline given in grid units
    (as returned by extract_boundary with cell_size=1, padding=0).
    """
    if not points:
        return set()

    mask = np.zeros((rows * scale + 1, cols * scale + 1), dtype=np.uint8)
    poly = np.array([(x * scale, y * scale) for x, y in points], dtype=np.int32).reshape(-1, 1, 2)
    cv2.fillPoly(mask, [poly], 1)

    half = scale // 2
    return {Cell(r, c)
            for r in range(rows) for c in range(cols)
            if mask[r * scale + half, c * scale + half]}


def _region_colors(n: int):
    """Distinct pastel fill + darker border per region, spread over the hue circle"""
    colors = []
    for i in range(n):
        hue = int((i * 180 / max(n, 1)) % 180)
        fill = cv2.cvtColor(np.uint8([[[hue, 60, 245]]]), cv2.COLOR_HSV2BGR)[0, 0]
        border = cv2.cvtColor(np.uint8([[[hue, 150, 190]]]), cv2.COLOR_HSV2BGR)[0, 0]
        colors.append((tuple(int(v) for v in fill), tuple(int(v) for v in border)))
    return colors


def _cell_rect(cell: Cell, cell_size: int, padding: int):
    x = cell.col * cell_size + padding
    y = cell.row * cell_size + padding
    return x, y, x + cell_size, y + cell_size


def render_puzzle(puzzle: Puzzle,
                  solution: Optional[SolutionBoard] = None,
                  cell_size: int = CELL_SIZE,
                  padding: int = PADDING,
                  alpha: float = 0.6) -> np.ndarray:
    """
    Draw the puzzle as a BGR image.

    Args:
        puzzle: generated puzzle
        solution: if given, hidden pip values are written into the cells
        cell_size: pixels per cell
        padding: margin around the grid (also the silhouette halo width)
        alpha: region overlay opacity

    Returns:
        BGR image (H, W, 3)
    """
    h = puzzle.rows * cell_size + 2 * padding
    w = puzzle.cols * cell_size + 2 * padding
    canvas = np.full((h, w, 3), 255, dtype=np.uint8)

    # Silhouette with a thick stroke so the outline reads as a rounded halo
    outline = extract_boundary(puzzle.shape, cell_size=cell_size, padding=padding)
    if outline:
        poly = np.array(outline, dtype=np.int32).reshape(-1, 1, 2)
        cv2.fillPoly(canvas, [poly], SHAPE_FILL_BGR)
        cv2.polylines(canvas, [poly], True, SHAPE_FILL_BGR, thickness=padding, lineType=cv2.LINE_AA)

    for cell in puzzle.shape:
        x0, y0, x1, y1 = _cell_rect(cell, cell_size, padding)
        cv2.rectangle(canvas, (x0 + 2, y0 + 2), (x1 - 2, y1 - 2), CELL_FILL_BGR, -1)

    # Region fills
    colors = _region_colors(len(puzzle.regions))
    overlay = canvas.copy()
    for region, (fill, _) in zip(puzzle.regions, colors):
        for cell in region.cells:
            x0, y0, x1, y1 = _cell_rect(cell, cell_size, padding)
            cv2.rectangle(overlay, (x0 + 2, y0 + 2), (x1 - 2, y1 - 2), fill, -1)
    canvas = cv2.addWeighted(overlay, alpha, canvas, 1 - alpha, 0)

    # Region borders on edges facing out of the region
    for region, (_, border) in zip(puzzle.regions, colors):
        members = set(region.cells)
        for cell in region.cells:
            x0, y0, x1, y1 = _cell_rect(cell, cell_size, padding)
            x0, y0, x1, y1 = x0 + 3, y0 + 3, x1 - 3, y1 - 3
            if Cell(cell.row - 1, cell.col) not in members:
                cv2.line(canvas, (x0, y0), (x1, y0), border, 2)
            if Cell(cell.row + 1, cell.col) not in members:
                cv2.line(canvas, (x0, y1), (x1, y1), border, 2)
            if Cell(cell.row, cell.col - 1) not in members:
                cv2.line(canvas, (x0, y0), (x0, y1), border, 2)
            if Cell(cell.row, cell.col + 1) not in members:
                cv2.line(canvas, (x1, y0), (x1, y1), border, 2)

    if solution is not None:
        for cell, value in solution.values.items():
            x0, y0, x1, y1 = _cell_rect(cell, cell_size, padding)
            cx, cy = (x0 + x1) // 2, (y0 + y1) // 2
            cv2.putText(canvas, str(value), (cx - 8, cy + 8),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.8, TEXT_BGR, 2, cv2.LINE_AA)

    # Clue badge on the top-left cell of each region
    for region, (_, border) in zip(puzzle.regions, colors):
        anchor = min(region.cells)
        x0, y0, _, _ = _cell_rect(anchor, cell_size, padding)
        radius = max(8, cell_size // 5)
        cv2.circle(canvas, (x0, y0), radius, border, -1, cv2.LINE_AA)
        (tw, th), _ = cv2.getTextSize(region.display, cv2.FONT_HERSHEY_SIMPLEX, 0.4, 1)
        cv2.putText(canvas, region.display, (x0 - tw // 2, y0 + th // 2),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.4, (255, 255, 255), 1, cv2.LINE_AA)

    return canvas


def save_render(puzzle: Puzzle, output_path: str,
                solution: Optional[SolutionBoard] = None, verbose: bool = True) -> np.ndarray:
    img = render_puzzle(puzzle, solution=solution)
    cv2.imwrite(output_path, img)
    if verbose:
        print(f"[output] Puzzle overlay: {output_path}")
    return img
