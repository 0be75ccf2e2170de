import json
import string
from datetime import datetime
from typing import Dict, Optional

from .puzzle import Puzzle, SolutionBoard


class PuzzleFormatter:
    """Formats generated puzzles for output"""

    @staticmethod
    def format_puzzle_json(puzzle: Puzzle, stats: Optional[Dict] = None) -> Dict:
        """
        Puzzle contract plus generation metadata
        """
        data = puzzle.to_dict()
        data['generation_info'] = {
            'total_cells': len(puzzle.shape),
            'total_regions': len(puzzle.regions),
            'total_dominoes': len(puzzle.dominoes),
            'coverage': round(puzzle.coverage(), 3),
            'timestamp': datetime.now().isoformat()
        }
        if stats is not None:
            data['generation_stats'] = dict(stats)
        return data

    @staticmethod
    def _region_label(region_id: int) -> str:
        letters = string.ascii_uppercase
        return letters[region_id % len(letters)]

    @staticmethod
    def format_puzzle_human_readable(puzzle: Puzzle) -> str:
        """
        Format puzzle as human-readable text
        """
        lines = []
        lines.append("=" * 60)
        lines.append("PIPS PUZZLE")
        lines.append("=" * 60)
        lines.append(f"\nGrid {puzzle.rows}x{puzzle.cols}, {len(puzzle.shape)} cells, "
                     f"{len(puzzle.regions)} regions ({puzzle.coverage():.0%} covered)")

        lines.append("\nDOMINOES:")
        lines.append("-" * 60)
        lines.append("  " + "  ".join(f"[{d.pips_left}|{d.pips_right}]" for d in puzzle.dominoes))

        lines.append("\nREGIONS:")
        lines.append("-" * 60)
        for region in puzzle.regions:
            label = PuzzleFormatter._region_label(region.id)
            cells = " ".join(f"({c.row},{c.col})" for c in region.cells)
            lines.append(f"{label} (id {region.id:2d}): {region.display:6s} {region.rule:5s} → {cells}")

        lines.append("=" * 60)
        return "\n".join(lines)

    @staticmethod
    def format_grid_visualization(puzzle: Puzzle, solution: Optional[SolutionBoard] = None) -> str:
        """
        Text grid of the shape. Region letters by default ('·' for cells with
        no clue), or the hidden pip values when a solution is given.
        """
        if not puzzle.shape:
            return "Empty puzzle"

        labels = {}
        for region in puzzle.regions:
            for cell in region.cells:
                labels[cell] = PuzzleFormatter._region_label(region.id)

        grid = [[' ' for _ in range(puzzle.cols)] for _ in range(puzzle.rows)]
        for cell in puzzle.shape:
            if solution is not None:
                grid[cell.row][cell.col] = str(solution.values.get(cell, '?'))
            else:
                grid[cell.row][cell.col] = labels.get(cell, '·')

        lines = ["\nGRID VISUALIZATION:" if solution is None else "\nSOLUTION:"]
        lines.append("-" * (puzzle.cols * 2 + 3))
        for row in grid:
            lines.append("  " + " ".join(row))
        lines.append("-" * (puzzle.cols * 2 + 3))
        return "\n".join(lines)

    @staticmethod
    def save_puzzle(puzzle: Puzzle, output_path: str, stats: Optional[Dict] = None,
                    verbose: bool = True):
        """
        Save puzzle to JSON file
        """
        data = PuzzleFormatter.format_puzzle_json(puzzle, stats)
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)
        if verbose:
            print(f"✓ Puzzle saved to: {output_path}")

    @staticmethod
    def load_puzzle(json_path: str) -> Puzzle:
        """
        Load a puzzle saved with save_puzzle (extra metadata keys are ignored)
        """
        with open(json_path, 'r') as f:
            data = json.load(f)
        return Puzzle.from_dict(data)

    @staticmethod
    def save_human_readable(puzzle: Puzzle, output_path: str,
                            solution: Optional[SolutionBoard] = None, verbose: bool = True):
        """
        Save human-readable puzzle (and optionally its solution) to text file
        """
        text = PuzzleFormatter.format_puzzle_human_readable(puzzle)
        text += "\n\n" + PuzzleFormatter.format_grid_visualization(puzzle)
        if solution is not None:
            text += "\n" + PuzzleFormatter.format_grid_visualization(puzzle, solution)

        with open(output_path, 'w') as f:
            f.write(text)
        if verbose:
            print(f"✓ Human-readable puzzle saved to: {output_path}")
