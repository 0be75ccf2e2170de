import random

import pytest

from Generator.dominoes import max_distinct_pairs, generate_domino_values, create_solution
from Generator.grid import Cell
from Generator.puzzle import DegenerateConfiguration


def test_max_distinct_pairs():
    assert max_distinct_pairs((1, 6)) == 21
    assert max_distinct_pairs((0, 6)) == 28
    assert max_distinct_pairs((3, 3)) == 1
    assert max_distinct_pairs((4, 3)) == 0


@pytest.mark.parametrize("count", [1, 5, 21])
def test_values_are_distinct_unordered_pairs_in_range(count):
    dominoes = generate_domino_values(count, (1, 6), random.Random(count))
    assert len(dominoes) == count
    keys = [tuple(sorted(d.as_tuple())) for d in dominoes]
    assert len(set(keys)) == count
    assert all(1 <= v <= 6 for d in dominoes for v in d.as_tuple())
    assert [d.id for d in dominoes] == list(range(count))


def test_too_many_dominoes_for_range_fails_fast():
    with pytest.raises(DegenerateConfiguration):
        generate_domino_values(22, (1, 6), random.Random(0))
    with pytest.raises(DegenerateConfiguration):
        generate_domino_values(2, (2, 2), random.Random(0))


def test_domino_key_ignores_orientation():
    a, = generate_domino_values(1, (2, 2), random.Random(0))
    assert a.key == "2-2"
    assert a.is_double()


def _tiling():
    return [(Cell(0, 0), Cell(0, 1)), (Cell(1, 0), Cell(1, 1)), (Cell(2, 0), Cell(2, 1))]


def test_solution_binds_each_slot_to_one_domino():
    rng = random.Random(3)
    tiling = _tiling()
    dominoes = generate_domino_values(3, (0, 6), rng)
    solution = create_solution(tiling, dominoes, rng)

    by_id = {d.id: d for d in dominoes}
    assert sorted(solution.slot_dominoes.values()) == [0, 1, 2]
    for slot, (a, b) in enumerate(tiling):
        assert solution.domino_map[a] == slot
        assert solution.domino_map[b] == slot
        domino = by_id[solution.slot_dominoes[slot]]
        assert sorted((solution.values[a], solution.values[b])) == sorted(domino.as_tuple())
        assert set(solution.slot_cells(slot)) == {a, b}


def test_orientation_is_randomized():
    tiling = [(Cell(0, 0), Cell(0, 1))]
    seen = set()
    for seed in range(50):
        rng = random.Random(seed)
        dominoes = generate_domino_values(1, (1, 2), rng)
        if dominoes[0].is_double():
            continue
        solution = create_solution(tiling, dominoes, rng)
        seen.add(solution.values[Cell(0, 0)] < solution.values[Cell(0, 1)])
    assert seen == {True, False}


def test_solution_needs_one_domino_per_slot():
    with pytest.raises(ValueError):
        create_solution(_tiling(), generate_domino_values(2, (1, 6), random.Random(0)))
