import pytest

from judgesolve.exam_supervisors import count_supervisors, main


def test_worked_examples():
    assert count_supervisors([1], 1, 1) == 1
    assert count_supervisors([3, 4, 5], 2, 2) == 7


def test_chief_alone_is_enough():
    rooms = [1, 2, 3, 4]
    assert count_supervisors(rooms, 10, 3) == len(rooms)


def test_at_least_one_per_room():
    rooms = [100, 7, 55, 1]
    assert count_supervisors(rooms, 3, 4) >= len(rooms)


def test_rooms_add_up():
    assert count_supervisors([9, 12], 2, 3) == count_supervisors([9], 2, 3) + count_supervisors([12], 2, 3)


@pytest.mark.parametrize("chief, assistant", [(0, 1), (1, 0), (-1, 2)])
def test_invalid_capacity(chief, assistant):
    with pytest.raises(ValueError):
        count_supervisors([1, 2], chief, assistant)


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\n3 4 5\n2 2\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(count_supervisors([3, 4, 5], 2, 2))