import pytest

from judgesolve.marble_escape import Board, Outcome, State, main, min_tilts

SAMPLE = [
    "#####",
    "#..B#",
    "#.#.#",
    "#RO.#",
    "#####",
]


def test_parse_records_marbles_and_clears_them():
    board = Board.parse(SAMPLE)
    assert board.start == State((3, 1), (1, 3), 0)
    assert all("R" not in row and "B" not in row for row in board.grid)
    assert len(board.grid) == len(SAMPLE)


def test_parse_rejects_missing_marble():
    with pytest.raises(ValueError):
        Board.parse(["#####", "#R.O#", "#####"])


def test_parse_rejects_unknown_character():
    with pytest.raises(ValueError):
        Board.parse(["#####", "#RBx#", "#####"])


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Board.parse(["#####", "#RBO", "#####"])


def test_tilt_drops_red_into_adjacent_hole():
    board = Board.parse(SAMPLE)
    outcome, state = board.tilt(board.start, "right")
    assert outcome is Outcome.RED_IN
    assert state.depth == board.start.depth + 1


def test_sample_needs_one_tilt():
    assert min_tilts(SAMPLE) == 1


def test_blue_ahead_falls_first():
    board = Board.parse(["######", "#RBO.#", "######"])
    outcome, _ = board.tilt(board.start, "right")
    assert outcome is Outcome.BLUE_IN


def test_both_falling_counts_as_blue():
    board = Board.parse(["######", "#BRO.#", "######"])
    outcome, _ = board.tilt(board.start, "right")
    assert outcome is Outcome.BLUE_IN


def test_unsolvable_board_gives_none():
    assert min_tilts(["######", "#RBO.#", "######"]) is None


def test_marbles_stack_against_each_other():
    board = Board.parse(["######", "#..RB#", "######"])
    outcome, state = board.tilt(board.start, "left")
    assert outcome is Outcome.NONE
    assert state.blue == (state.red[0], state.red[1] + 1)
    assert board.grid[state.red[0]][state.red[1] - 1] == "#"


def test_tilt_leaves_input_state_untouched():
    board = Board.parse(SAMPLE)
    before = board.start
    board.tilt(before, "left")
    assert board.start == before


def test_limit_cuts_off_search():
    best = min_tilts(SAMPLE)
    assert min_tilts(SAMPLE, limit=best - 1) is None
    assert min_tilts(SAMPLE, limit=best + 5) == best


def test_unknown_direction_is_rejected():
    board = Board.parse(SAMPLE)
    with pytest.raises(ValueError):
        board.tilt(board.start, "sideways")


def test_main_prints_minus_one_when_impossible(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("3 6\n######\n#RBO.#\n######\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("5 5\n" + "\n".join(SAMPLE) + "\n")
    main([str(path)])
    assert capsys.readouterr().out.strip() == str(min_tilts(SAMPLE))