# tests/conftest.py

import random
from typing import Iterable, Tuple

import pytest

from board import Board


def build_board(size: int, mines: Iterable[Tuple[int, int]]) -> Board:
    """Board with mines at the given 1-based (x, y) positions, counts computed."""
    board = Board(size, rng=random.Random(0))
    for x, y in mines:
        board.get_cell(x, y).is_mine = True
    board._compute_adjacent_mine_counts()
    board.mines_placed = True
    return board


@pytest.fixture
def wall_board() -> Board:
    """9x9 board with a full column of mines at x=5."""
    return build_board(9, [(5, y) for y in range(1, 10)])


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers."""
    def _feed(*answers: str) -> None:
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(it))
    return _feed
