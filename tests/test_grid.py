from Generator.grid import (Cell, in_bounds, pair_key, bounding_box,
                            build_adjacency, is_connected)


def test_cells_compare_by_position():
    assert Cell(1, 2) == Cell(1, 2)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2
    assert min([Cell(2, 0), Cell(1, 3), Cell(1, 1)]) == Cell(1, 1)


def test_key_round_trip():
    cell = Cell(3, 4)
    assert cell.key == "3,4"
    assert Cell.from_key(cell.key) == cell
    assert cell.to_dict() == {'r': 3, 'c': 4}


def test_adjacency_is_four_connected():
    center = Cell(2, 2)
    assert set(center.neighbors()) == {Cell(1, 2), Cell(3, 2), Cell(2, 1), Cell(2, 3)}
    assert center.is_adjacent(Cell(2, 3))
    assert not center.is_adjacent(Cell(3, 3))
    assert not center.is_adjacent(center)


def test_bounds_and_keys():
    assert in_bounds(Cell(0, 0), 5, 5)
    assert not in_bounds(Cell(5, 0), 5, 5)
    assert not in_bounds(Cell(0, -1), 5, 5)
    assert pair_key(Cell(0, 1), Cell(0, 0)) == pair_key(Cell(0, 0), Cell(0, 1))
    assert bounding_box([Cell(1, 4), Cell(3, 2)]) == (1, 2, 3, 4)


def test_connectivity():
    strip = [Cell(0, 0), Cell(0, 1), Cell(1, 1)]
    assert is_connected(strip)
    assert not is_connected([Cell(0, 0), Cell(1, 1)])
    assert is_connected([])
    adjacency = build_adjacency(strip)
    assert set(adjacency[Cell(0, 1)]) == {Cell(0, 0), Cell(1, 1)}
