# tests/test_main.py

import pytest

import main
from board import Board, MoveResult
from conftest import build_board


@pytest.mark.parametrize("text, expected", [
    ("3 4", (3, 4)),
    ("  10\t2 ", (10, 2)),
    ("0 0", (0, 0)),
    ("q", None),
    ("QUIT", None),
    ("exit", None),
])
def test_parse_coordinates(text, expected):
    assert main.parse_coordinates(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "3", "1 2 3", "a b", "1 b", "q q"])
def test_parse_coordinates_rejects_bad_input(text):
    with pytest.raises(ValueError):
        main.parse_coordinates(text)


def test_ask_board_size_reprompts(feed_input, capsys):
    feed_input("abc", "5", "12")

    assert main.ask_board_size() == 12

    out = capsys.readouterr().out
    assert "Please enter an integer." in out
    assert "Board size must be at least 9." in out


def test_create_board_with_seed_is_reproducible():
    a = main.create_board(9, seed=4)
    b = main.create_board(9, seed=4)
    a.make_move(1, 1)
    b.make_move(1, 1)

    assert [c.is_mine for c in a.iter_cells()] == [c.is_mine for c in b.iter_cells()]


def test_create_board_reprompts_on_bad_size(feed_input, capsys):
    feed_input("10")

    board = main.create_board(3)

    assert board.size == 10
    assert "at least 9" in capsys.readouterr().out


def test_run_game_loss(feed_input, capsys):
    board = build_board(9, [(2, 2)])
    feed_input("0 0", "hello", "2 2")

    assert main.run_game(board) == "loss"

    out = capsys.readouterr().out
    assert "Welcome to Minesweeper!" in out
    assert "Cell (0, 0) is out of bounds." in out
    assert "Invalid move:" in out
    assert "Game Over! You hit a mine!" in out
    assert board.render_all() in out


def test_out_of_bounds_does_not_end_the_game(feed_input, capsys):
    board = build_board(9, [(9, 9)])
    feed_input("10 10", "1 1")

    assert main.run_game(board) == "win"
    assert "You hit a mine!" not in capsys.readouterr().out


def test_run_game_win(feed_input, capsys):
    board = build_board(9, [(9, 9)])
    feed_input("1 1")

    assert main.run_game(board) == "win"

    out = capsys.readouterr().out
    assert "Congratulations! You won!" in out
    assert "*" in out


def test_run_game_keeps_playing_until_won(feed_input):
    board = build_board(9, [(2, 1), (2, 2), (1, 2)])
    feed_input("1 1", "9 9")

    assert main.run_game(board) == "win"
    assert board.get_cell(1, 1).is_revealed


def test_run_game_quit(feed_input, capsys):
    feed_input("q")

    assert main.run_game(Board(9)) == "quit"
    assert "Goodbye!" in capsys.readouterr().out


def test_main_with_flags(feed_input, capsys):
    feed_input("q")

    assert main.main(["--size", "9", "--seed", "3", "--log-level", "debug"]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_main_prompts_for_size(feed_input, capsys):
    feed_input("4", "9", "quit")

    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "Board size must be at least 9." in out
    assert "  1 2 3 4 5 6 7 8 9" in out


def test_main_exits_cleanly_on_end_of_input(monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    assert main.main(["--size", "9"]) == 0
    assert "Goodbye!" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["5", "nine"])
def test_parser_rejects_bad_size(value):
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--size", value])


def test_move_result_truthiness():
    assert bool(MoveResult.REVEALED) is True
    assert bool(MoveResult.HIT_MINE) is False
    assert bool(MoveResult.OUT_OF_BOUNDS) is False
