"""Tests for local win detection around the last placed token."""

import pytest

from connectn.core.board import Board
from connectn.core.rules import count_run, is_win, winning_line


def board_from(*rows: str) -> Board:
    """Rows top to bottom; '.' is empty, digits are player indices."""
    grid = [[None if ch == "." else int(ch) for ch in row] for row in rows]
    return Board(len(grid), len(grid[0]), grid)


class TestCountRun:
    def test_counts_neighbours_only(self):
        b = board_from("0000")
        assert count_run(b, 0, 0, 0, 1, 0, 10) == 3
        assert count_run(b, 0, 3, 0, -1, 0, 10) == 3

    def test_stops_at_mismatch_and_empty(self):
        b = board_from("0010.")
        assert count_run(b, 0, 0, 0, 1, 0, 10) == 1
        assert count_run(b, 0, 3, 0, 1, 0, 10) == 0

    def test_stops_at_edge(self):
        b = board_from("00")
        assert count_run(b, 0, 1, 0, 1, 0, 10) == 0
        assert count_run(b, 0, 1, 0, -1, 0, 10) == 1

    def test_bounded_by_limit(self):
        b = board_from("0000000")
        assert count_run(b, 0, 0, 0, 1, 0, 3) == 3


class TestVertical:
    def test_four_stacked_wins(self):
        b = board_from(
            "...",
            ".0.",
            ".0.",
            ".0.",
            ".0.",
        )
        assert winning_line(b, 1, 1, 4) == ((1, 1), (2, 1), (3, 1), (4, 1))

    def test_three_stacked_is_not_enough(self):
        b = board_from(
            "...",
            "...",
            ".0.",
            ".0.",
            ".0.",
        )
        assert not is_win(b, 2, 1, 4)

    def test_run_broken_by_opponent(self):
        b = board_from(
            ".0.",
            ".0.",
            ".0.",
            ".1.",
            ".0.",
        )
        assert not is_win(b, 0, 1, 4)


class TestHorizontal:
    def test_placed_at_end(self):
        b = board_from("0000...")
        assert winning_line(b, 0, 3, 4) == ((0, 0), (0, 1), (0, 2), (0, 3))

    def test_placed_in_middle_counts_center_once(self):
        b = board_from(".0000..")
        assert winning_line(b, 0, 2, 4) == ((0, 1), (0, 2), (0, 3), (0, 4))

    def test_exact_length_minus_one_does_not_win(self):
        b = board_from(".000...")
        for c in (1, 2, 3):
            assert not is_win(b, 0, c, 4)

    def test_alternating_does_not_win(self):
        b = board_from("0101010")
        for c in range(7):
            assert not is_win(b, 0, c, 2)

    def test_run_touching_both_edges(self):
        b = board_from("0000")
        assert is_win(b, 0, 1, 4)
        assert not is_win(b, 0, 1, 5)


class TestDiagonals:
    def test_rising_diagonal(self):
        b = board_from(
            "...0",
            "..01",
            ".011",
            "0111",
        )
        assert winning_line(b, 0, 3, 4) == ((3, 0), (2, 1), (1, 2), (0, 3))

    def test_rising_diagonal_from_the_middle(self):
        b = board_from(
            "...0",
            "..01",
            ".011",
            "0111",
        )
        assert winning_line(b, 2, 1, 4) == ((3, 0), (2, 1), (1, 2), (0, 3))

    def test_falling_diagonal(self):
        b = board_from(
            "0...",
            "10..",
            "110.",
            "1110",
        )
        assert winning_line(b, 0, 0, 4) == ((0, 0), (1, 1), (2, 2), (3, 3))

    def test_diagonal_one_short(self):
        b = board_from(
            "....",
            "..0.",
            ".01.",
            "011.",
        )
        assert not is_win(b, 1, 2, 4)
        assert is_win(b, 1, 2, 3)


class TestEdgeCases:
    def test_win_length_one(self):
        b = board_from("..", ".1")
        assert winning_line(b, 1, 1, 1) == ((1, 1),)

    def test_empty_cell_never_wins(self):
        b = board_from("..", "..")
        assert winning_line(b, 0, 0, 1) is None

    @pytest.mark.parametrize("win_length,expected", [(3, True), (4, True), (5, False)])
    def test_boundary_lengths(self, win_length, expected):
        b = board_from("1111.")
        assert is_win(b, 0, 3, win_length) is expected
