#!/usr/bin/env python3
"""
Diagnostic helpers: what do generated puzzles look like, and how often does
generation have to restart?

Usage:
    python -m Generator.diagnostics            # 50 runs at the default config
    python -m Generator.diagnostics 200        # 200 runs
"""

import random
import sys
from collections import Counter
from typing import Dict, Optional

from .boundary import extract_boundary
from .generator import GeneratorConfig, PuzzleGenerator
from .puzzle import Puzzle, PuzzleGenerationExhausted
from .verifier import BoardState, check_solution


def analyze_puzzle_structure(puzzle: Puzzle, verbose: bool = True) -> Dict:
    """Summarize one puzzle's regions and outline"""
    rule_counts = Counter(r.display[0] if r.display[:1] in ('<', '>', '=') else 'sum'
                          for r in puzzle.regions)
    sizes = [len(r.cells) for r in puzzle.regions]
    outline = extract_boundary(puzzle.shape)

    summary = {
        'cells': len(puzzle.shape),
        'regions': len(puzzle.regions),
        'coverage': puzzle.coverage(),
        'region_sizes': sizes,
        'rules': dict(rule_counts),
        'outline_points': len(outline),
    }

    if verbose:
        print("\n" + "=" * 70)
        print("PUZZLE STRUCTURE ANALYSIS")
        print("=" * 70)
        print(f"\nTotal cells: {summary['cells']}")
        print(f"Total regions: {summary['regions']} ({summary['coverage']:.0%} of cells)")
        print(f"Total dominoes: {len(puzzle.dominoes)}")

        print("\n--- REGION ANALYSIS ---")
        for region in puzzle.regions:
            print(f"Region {region.id}: {len(region.cells)} cells, "
                  f"rule={region.rule} display={region.display!r}")

        print("\n--- OUTLINE ---")
        if outline:
            print(f"Closed outline with {len(outline) - 1} unit segments")
        else:
            print("⚠ No single closed outline (shape has holes or pinch points)")

    return summary


def analyze_generation(config: Optional[GeneratorConfig] = None, runs: int = 50,
                       seed: Optional[int] = None, verbose: bool = True) -> Dict:
    """
    Generate `runs` puzzles and collect restart / coverage / verification stats.
    """
    config = config or GeneratorConfig()
    rng = random.Random(seed)

    attempts = []
    shape_failures = 0
    exhausted = 0
    coverages = []
    unverified = 0
    no_outline = 0

    for _ in range(runs):
        generator = PuzzleGenerator(config, rng=rng)
        try:
            puzzle = generator.generate()
        except PuzzleGenerationExhausted:
            exhausted += 1
            shape_failures += generator.stats['shape_failures']
            continue

        attempts.append(generator.stats['attempts'])
        shape_failures += generator.stats['shape_failures']
        coverages.append(puzzle.coverage())

        board = BoardState.from_solution(puzzle, generator.solution)
        valid, _ = check_solution(board, puzzle.regions)
        if not valid:
            unverified += 1
        if not extract_boundary(puzzle.shape):
            no_outline += 1

    summary = {
        'runs': runs,
        'generated': len(attempts),
        'exhausted': exhausted,
        'avg_attempts': sum(attempts) / len(attempts) if attempts else 0.0,
        'max_attempts': max(attempts) if attempts else 0,
        'shape_failures': shape_failures,
        'avg_coverage': sum(coverages) / len(coverages) if coverages else 0.0,
        'unverified': unverified,
        'no_outline': no_outline,
    }

    if verbose:
        print(f"\n{'='*70}")
        print("GENERATION ANALYSIS SUMMARY")
        print(f"{'='*70}")
        print(f"Config: {config.rows}x{config.cols}, {config.num_dominoes} dominoes, "
              f"pips {config.pip_range[0]}-{config.pip_range[1]}")
        print(f"\nGenerated: {summary['generated']}/{runs}   Exhausted: {exhausted}")
        print(f"Attempts per puzzle: avg={summary['avg_attempts']:.2f}, max={summary['max_attempts']}")
        print(f"Shape failures (restarts): {shape_failures}")
        print(f"Average coverage: {summary['avg_coverage']:.1%}")
        print(f"Shapes without a single outline: {no_outline}")
        if unverified:
            print(f"\n⚠️  {unverified} puzzle(s) NOT satisfied by their own solution")
        else:
            print("\n✓ Every hidden solution satisfies its clues")

    return summary


def main():
    runs = int(sys.argv[1]) if len(sys.argv) > 1 else 50
    analyze_generation(runs=runs)


if __name__ == "__main__":
    main()
