import json

from Generator.diagnostics import analyze_generation, analyze_puzzle_structure
from Generator.generator import GeneratorConfig
from Generator.main import main


def test_single_puzzle(tmp_path):
    assert main(["--seed", "3", "-q", "-o", str(tmp_path)]) == 0
    data = json.loads((tmp_path / "puzzle_001" / "puzzle.json").read_text())
    assert data['gridSize'] == {'rows': 5, 'cols': 5}
    assert 5 <= len(data['dominoes']) <= 7
    assert (tmp_path / "puzzle_001" / "puzzle.txt").exists()


def test_batch_with_render(tmp_path):
    assert main(["--seed", "1", "-n", "3", "--dominoes", "6", "--render", "-q",
                 "-o", str(tmp_path)]) == 0
    for i in range(1, 4):
        assert (tmp_path / f"puzzle_{i:03d}" / "puzzle.png").exists()


def test_exhaustion_exit_code(tmp_path, capsys):
    code = main(["--rows", "2", "--cols", "2", "--dominoes", "3", "-q", "-o", str(tmp_path)])
    assert code == 1
    assert "100 attempts" in capsys.readouterr().out


def test_degenerate_configuration_exit_code(tmp_path):
    assert main(["--pips", "1", "1", "--dominoes", "2", "-q", "-o", str(tmp_path)]) == 2


def test_generation_diagnostics():
    summary = analyze_generation(GeneratorConfig(), runs=5, seed=1, verbose=False)
    assert summary['generated'] == 5
    assert summary['unverified'] == 0
    assert 1 <= summary['avg_attempts'] <= 100
    assert summary['avg_coverage'] >= 0.8


def test_structure_summary(generated):
    puzzle, _ = generated
    summary = analyze_puzzle_structure(puzzle, verbose=False)
    assert summary['cells'] == len(puzzle.shape)
    assert sum(summary['region_sizes']) == sum(len(r.cells) for r in puzzle.regions)
    assert sum(summary['rules'].values()) == len(puzzle.regions)
