# main.py
# Driver: generate puzzles → write JSON + text summary + overlays (puzzle and solution)

# ==================================================================
# CONFIGURATION: Easy Toggle
# ==================================================================
BATCH_MODE = True   # Set to True to generate BATCH_SIZE puzzles
BATCH_SIZE = 10
SEED = None         # Set an int for reproducible batches
OUTPUT_DIR = "data/debug"
# ==================================================================

import os
import random
import cv2

from Generator.generator import GeneratorConfig, PuzzleGenerator
from Generator.output import PuzzleFormatter
from Generator.puzzle import PuzzleGenerationExhausted
from Generator.render import render_puzzle
from Generator.verifier import BoardState, check_solution

CONFIG = dict(rows=5, cols=5, pip_range=(1, 6))
DOMINO_RANGE = (5, 7)


def ensure_dir(p):
    os.makedirs(p, exist_ok=True)


def process_puzzle(name: str, rng: random.Random, output_dir: str = OUTPUT_DIR):
    """
    Generate one puzzle and write every artifact into output_dir/<name>/.
    """
    puzzle_dir = os.path.join(output_dir, name)
    ensure_dir(puzzle_dir)

    config = GeneratorConfig(num_dominoes=rng.randint(*DOMINO_RANGE), **CONFIG)

    print(f"\n{'='*70}")
    print(f"Generating {name}")
    print(f"{'='*70}")

    generator = PuzzleGenerator(config, rng=rng, verbose=True)
    puzzle = generator.generate()

    # Sanity: the hidden solution must satisfy every clue
    board = BoardState.from_solution(puzzle, generator.solution)
    valid, failing = check_solution(board, puzzle.regions)
    print(f"Solution check: {'✓ valid' if valid else f'✗ failing regions {sorted(failing)}'}")

    PuzzleFormatter.save_puzzle(puzzle, os.path.join(puzzle_dir, f"{name}.json"), generator.stats)
    PuzzleFormatter.save_human_readable(puzzle, os.path.join(puzzle_dir, f"{name}.txt"),
                                        solution=generator.solution)

    out_puzzle = os.path.join(puzzle_dir, "puzzle.png")
    cv2.imwrite(out_puzzle, render_puzzle(puzzle))
    out_solution = os.path.join(puzzle_dir, "solution.png")
    cv2.imwrite(out_solution, render_puzzle(puzzle, solution=generator.solution))

    print(f"[output] Puzzle overlay:   {out_puzzle}")
    print(f"[output] Solution overlay: {out_solution}")
    return puzzle


if __name__ == "__main__":
    rng = random.Random(SEED)
    count = BATCH_SIZE if BATCH_MODE else 1
    results = {'success': [], 'failed': []}

    for i in range(1, count + 1):
        name = f"puzzle_{i:03d}"
        try:
            process_puzzle(name, rng)
            results['success'].append(name)
        except PuzzleGenerationExhausted as e:
            print(f"\n❌ ERROR: {e}")
            results['failed'].append((name, str(e)))

    print("\n" + "="*70)
    print("BATCH GENERATION COMPLETE")
    print("="*70)
    print(f"\n✅ Successful: {len(results['success'])}/{count}")
    if results['failed']:
        print(f"\n❌ Failed: {len(results['failed'])}/{count}")
        for name, error in results['failed']:
            print(f"   - {name}: {error}")
    print(f"\nResults saved to: {OUTPUT_DIR}/")
