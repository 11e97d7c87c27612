import pytest

from judgesolve.cheapest_path import main, min_cost

EXAMPLE = [[5, 5, 4], [3, 9, 1], [3, 2, 7]]


def test_worked_example():
    assert min_cost(EXAMPLE) == 20


def test_single_cell():
    assert min_cost([[6]]) == 6


@pytest.mark.parametrize("n", [2, 3, 5])
def test_uniform_grid_takes_shortest_route(n):
    assert min_cost([[1] * n for _ in range(n)]) == 2 * n - 1


def test_detour_around_expensive_cells():
    grid = [
        [1, 9, 1, 1],
        [1, 9, 1, 9],
        [1, 1, 1, 9],
        [9, 9, 1, 1],
    ]
    assert min_cost(grid) == sum([1, 1, 1, 1, 1, 1, 1])


def test_not_square():
    with pytest.raises(ValueError):
        min_cost([[1, 2, 3], [4, 5, 6]])


def test_empty():
    with pytest.raises(ValueError):
        min_cost([])


def test_main_numbers_problems(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\n5 5 4\n3 9 1\n3 2 7\n1\n4\n0\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["Problem 1: 20", "Problem 2: 4"]