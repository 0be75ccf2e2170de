#!/usr/bin/env python3
"""
Pips Generator - Main Entry Point

Usage:
    python -m Generator.main                       # one puzzle with the defaults below
    python -m Generator.main --count 10 --render   # batch, with PNG overlays
    python -m Generator.main --rows 6 --cols 6 --dominoes 8 --pips 0 6 --seed 42
"""

import argparse
import random
import sys
from pathlib import Path

from .generator import GeneratorConfig, PuzzleGenerator
from .output import PuzzleFormatter
from .puzzle import PuzzleGenerationExhausted, DegenerateConfiguration

# ============================================================================
# CONFIGURATION
# ============================================================================
ROWS = 5
COLS = 5
MIN_DOMINOES = 5          # domino count is drawn from MIN..MAX when not given
MAX_DOMINOES = 7
PIP_RANGE = (1, 6)
OUTPUT_DIR = "data/generated"
# ============================================================================


def generate_to_files(config: GeneratorConfig, output_dir: Path, name: str,
                      rng: random.Random, render: bool = False, verbose: bool = True):
    """
    Generate one puzzle and write puzzle.json / puzzle.txt (/ puzzle.png).

    Returns:
        (puzzle, generator)
    """
    puzzle_dir = Path(output_dir) / name
    puzzle_dir.mkdir(parents=True, exist_ok=True)

    generator = PuzzleGenerator(config, rng=rng, verbose=verbose)
    puzzle = generator.generate()

    PuzzleFormatter.save_puzzle(puzzle, str(puzzle_dir / "puzzle.json"), generator.stats, verbose=verbose)
    PuzzleFormatter.save_human_readable(puzzle, str(puzzle_dir / "puzzle.txt"),
                                        solution=generator.solution, verbose=verbose)
    if render:
        from .render import save_render
        save_render(puzzle, str(puzzle_dir / "puzzle.png"), verbose=verbose)

    return puzzle, generator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Pips domino puzzles")
    parser.add_argument("--rows", type=int, default=ROWS)
    parser.add_argument("--cols", type=int, default=COLS)
    parser.add_argument("--dominoes", type=int, default=None,
                        help=f"domino count (default: random {MIN_DOMINOES}-{MAX_DOMINOES})")
    parser.add_argument("--pips", type=int, nargs=2, metavar=("MIN", "MAX"), default=PIP_RANGE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-n", "--count", type=int, default=1)
    parser.add_argument("-o", "--output", default=OUTPUT_DIR)
    parser.add_argument("--render", action="store_true", help="also write a PNG overlay")
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    verbose = not args.quiet
    results = {'success': [], 'failed': []}

    for i in range(1, args.count + 1):
        num_dominoes = args.dominoes or rng.randint(MIN_DOMINOES, MAX_DOMINOES)
        config = GeneratorConfig(rows=args.rows, cols=args.cols,
                                 num_dominoes=num_dominoes, pip_range=tuple(args.pips))
        name = f"puzzle_{i:03d}"

        if verbose:
            print(f"\n{'='*60}")
            print(f"[{i}/{args.count}] {name}")
            print(f"{'='*60}")

        try:
            puzzle, generator = generate_to_files(config, Path(args.output), name, rng,
                                                  render=args.render, verbose=verbose)
            results['success'].append(name)
            if verbose:
                print(PuzzleFormatter.format_puzzle_human_readable(puzzle))
                print(PuzzleFormatter.format_grid_visualization(puzzle))
        except DegenerateConfiguration as e:
            print(f"Error: {e}")
            return 2
        except PuzzleGenerationExhausted as e:
            print(f"\n✗ {e}")
            results['failed'].append((name, str(e)))

    if args.count > 1 and verbose:
        print(f"\n{'='*60}")
        print("BATCH COMPLETE")
        print(f"{'='*60}")
        print(f"✓ Generated: {len(results['success'])}/{args.count}")
        for name, error in results['failed']:
            print(f"✗ {name}: {error}")
        print(f"\nResults saved to: {args.output}/")

    return 1 if results['failed'] else 0


if __name__ == "__main__":
    sys.exit(main())
