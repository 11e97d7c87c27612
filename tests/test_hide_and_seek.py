import pytest

from judgesolve.hide_and_seek import main, min_time


def test_worked_example():
    assert min_time(5, 17) == 2


@pytest.mark.parametrize("start, target", [(10, 3), (100, 0), (7, 7)])
def test_walking_back_only(start, target):
    assert min_time(start, target) == start - target


@pytest.mark.parametrize("n", [1, 3, 8, 25, 1000])
def test_doubling_is_free(n):
    assert min_time(n, 2 * n) == 0
    assert min_time(n, 4 * n) == 0


@pytest.mark.parametrize("k", [0, 1, 4, 10])
def test_from_zero_to_power_of_two(k):
    assert min_time(0, 1 << k) == 1


def test_one_step_forward():
    assert min_time(5, 6) == 1


def test_negative_rejected():
    with pytest.raises(ValueError):
        min_time(-1, 5)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("5 17\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(min_time(5, 17))