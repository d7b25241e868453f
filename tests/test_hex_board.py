import pytest

from contestkit.hex_board import (
    BLUE_WINS,
    IMPOSSIBLE,
    NOBODY_WINS,
    RED_WINS,
    hex_verdict,
)


def test_empty_cells_mean_nobody_wins():
    assert hex_verdict(["..", ".."]) == "Nobody wins"


def test_unbalanced_counts_are_impossible():
    assert hex_verdict(["RR", "R."]) == IMPOSSIBLE


def test_single_red_cell_wins():
    assert hex_verdict(["R"]) == RED_WINS


def test_single_blue_cell_wins():
    assert hex_verdict(["B"]) == BLUE_WINS


def test_red_column_connects_top_and_bottom():
    assert hex_verdict(["RB.", "RB.", "R.."]) == RED_WINS


def test_blue_row_connects_left_and_right():
    assert hex_verdict(["BBB", "RR.", "..."]) == BLUE_WINS


def test_two_red_goal_cells_are_impossible():
    assert hex_verdict(["R.B", "RRB", "RRB"]) in (IMPOSSIBLE,)


def test_no_path_without_connection():
    assert hex_verdict(["R.B", "...", "B.R"]) == NOBODY_WINS


def test_non_square_board_is_rejected():
    with pytest.raises(ValueError):
        hex_verdict(["RB", "R"])