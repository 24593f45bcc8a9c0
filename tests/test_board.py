import io
import random

import pytest

from minefield.board import (
    Board,
    Cell,
    CellState,
    CellType,
    GameState,
    Position,
)


class ScriptedRng:
    """Returns preset values from randrange, in order."""

    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


def corner_bomb_board():
    # 3x3 board with a single bomb at (0, 0).
    return Board(3, 3, 1, ScriptedRng([0, 0]))


def all_positions(board):
    return [Position(x, y) for x in range(board.size_x) for y in range(board.size_y)]


def test_too_small_raises():
    with pytest.raises(ValueError):
        Board(0, 5, 0)
    with pytest.raises(ValueError):
        Board(5, 0, 0)


def test_too_many_bombs_raises():
    with pytest.raises(ValueError, match="Too many bombs"):
        Board(2, 2, 5)


def test_negative_bomb_count_raises():
    with pytest.raises(ValueError):
        Board(2, 2, -1)


@pytest.mark.parametrize("seed", range(5))
def test_bomb_count_is_exact(seed):
    board = Board(8, 8, 10, random.Random(seed))
    bombs = [p for p in all_positions(board) if board.get_cell(p).cell_type is CellType.BOMB]
    assert len(bombs) == 10


def test_full_board_of_bombs():
    board = Board(3, 2, 6, random.Random(1))
    assert all(board.get_cell(p).cell_type is CellType.BOMB for p in all_positions(board))


def test_scripted_bomb_placement_retries_occupied_cell():
    board = Board(3, 3, 2, ScriptedRng([1, 1, 1, 1, 2, 0]))
    bombs = {p for p in all_positions(board) if board.get_cell(p).cell_type is CellType.BOMB}
    assert bombs == {Position(1, 1), Position(2, 0)}


@pytest.mark.parametrize("seed", range(5))
def test_adjacent_counts_match_neighbourhood(seed):
    board = Board(9, 7, 12, random.Random(seed))
    for pos in all_positions(board):
        cell = board.get_cell(pos)
        bombs = sum(
            board.get_cell(p).cell_type is CellType.BOMB for p in board.adjacent_positions(pos)
        )
        if cell.cell_type is CellType.EMPTY:
            assert bombs == 0
        else:
            assert cell.adjacent_bomb_count == bombs
            assert bombs >= 1


def test_adjacent_positions_corner_and_centre():
    board = Board(8, 8, 0)
    corner = board.adjacent_positions(Position(0, 0))
    assert len(corner) == 4
    assert Position(0, 0) in corner
    centre = board.adjacent_positions(Position(4, 4))
    assert len(centre) == 9
    assert all(abs(p.x - 4) <= 1 and abs(p.y - 4) <= 1 for p in centre)


def test_adjacent_positions_far_edge():
    board = Board(5, 4, 0)
    edge = board.adjacent_positions(Position(4, 3))
    assert len(edge) == 4
    assert all(0 <= p.x < 5 and 0 <= p.y < 4 for p in edge)


def test_corner_bomb_layout():
    board = corner_bomb_board()
    assert board.get_cell((0, 0)).cell_type is CellType.BOMB
    for pos in [(1, 0), (0, 1), (1, 1)]:
        assert board.get_cell(pos).cell_type is CellType.SAFE
        assert board.get_cell(pos).adjacent_bomb_count == 1
    for pos in [(2, 0), (2, 1), (2, 2), (1, 2), (0, 2)]:
        assert board.get_cell(pos).cell_type is CellType.EMPTY


def test_flood_fill_wins():
    board = corner_bomb_board()
    board.uncover(Position(2, 2))
    assert board.state is GameState.WON
    assert board.running is False
    assert board.get_cell((0, 0)).state is CellState.HIDDEN
    others = [p for p in all_positions(board) if p != Position(0, 0)]
    assert all(board.get_cell(p).state is CellState.UNCOVERED for p in others)


def test_uncover_number_reveals_only_itself():
    board = corner_bomb_board()
    board.uncover((1, 1))
    uncovered = [p for p in all_positions(board) if board.get_cell(p).state is CellState.UNCOVERED]
    assert uncovered == [Position(1, 1)]
    assert board.state is GameState.PLAYING


def test_uncover_bomb_loses():
    board = corner_bomb_board()
    board.uncover((0, 0))
    assert board.state is GameState.LOST
    assert board.running is False
    assert board.get_cell((0, 0)).is_exploded is True
    assert all(board.get_cell(p).state is CellState.UNCOVERED for p in all_positions(board))


def test_chord_with_correct_flag_wins():
    board = corner_bomb_board()
    board.uncover((1, 1))
    board.get_cell((0, 0)).toggle_flagged()
    board.uncover((1, 1))
    assert board.state is GameState.WON
    assert board.get_cell((0, 0)).state is CellState.FLAGGED


def test_chord_with_wrong_flag_loses():
    board = corner_bomb_board()
    board.uncover((1, 1))
    board.get_cell((2, 2)).toggle_flagged()
    board.uncover((1, 1))
    assert board.state is GameState.LOST
    assert board.get_cell((0, 0)).is_exploded is True


def test_chord_without_enough_flags_does_nothing():
    board = corner_bomb_board()
    board.uncover((1, 1))
    board.uncover((1, 1))
    hidden = [p for p in all_positions(board) if board.get_cell(p).state is CellState.HIDDEN]
    assert len(hidden) == 8
    assert board.state is GameState.PLAYING


def test_flagged_cell_is_not_uncovered():
    board = corner_bomb_board()
    board.get_cell((0, 0)).toggle_flagged()
    board.uncover((0, 0))
    assert board.get_cell((0, 0)).state is CellState.FLAGGED
    assert board.state is GameState.PLAYING


def test_out_of_bounds_is_ignored():
    board = corner_bomb_board()
    for pos in [(3, 0), (0, 3), (-1, 0), (0, -1)]:
        board.uncover(pos)
    assert all(board.get_cell(p).state is CellState.HIDDEN for p in all_positions(board))
    assert board.state is GameState.PLAYING


def test_no_bombs_single_click_wins():
    board = Board(30, 16, 0)
    board.uncover((15, 8))
    assert board.state is GameState.WON
    assert all(board.get_cell(p).state is CellState.UNCOVERED for p in all_positions(board))


def test_large_flood_fill_does_not_overflow():
    board = Board(100, 100, 1, ScriptedRng([0, 0]))
    board.uncover((99, 99))
    assert board.state is GameState.WON


def test_toggle_flagged_cycle():
    cell = Cell()
    cell.toggle_flagged()
    assert cell.state is CellState.FLAGGED
    cell.toggle_flagged()
    assert cell.state is CellState.HIDDEN


def test_toggle_flagged_ignores_uncovered():
    cell = Cell(state=CellState.UNCOVERED)
    cell.toggle_flagged()
    assert cell.state is CellState.UNCOVERED


def test_uncover_all():
    board = corner_bomb_board()
    board.get_cell((1, 1)).toggle_flagged()
    board.uncover_all()
    assert all(board.get_cell(p).state is CellState.UNCOVERED for p in all_positions(board))
    assert board.state is GameState.PLAYING


def test_stop():
    board = corner_bomb_board()
    board.stop()
    assert board.state is GameState.LOST
    assert board.running is False
    assert all(board.get_cell(p).state is CellState.UNCOVERED for p in all_positions(board))


@pytest.fixture
def no_colour(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("ANSI_COLORS_DISABLED", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_render_hidden_board(no_colour):
    board = corner_bomb_board()
    assert board.render() == "__|0 1 2 \n0 |   \n1 |   \n2 |   \n"


def test_render_uncovered_shows_numbers(no_colour):
    board = corner_bomb_board()
    board.uncover((2, 2))
    lines = board.render().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("__|")
    assert "1" in lines[1][3:]
    assert "\x1b" not in board.render()


def test_draw_writes_render(no_colour):
    board = corner_bomb_board()
    out = io.StringIO()
    board.draw(out)
    assert out.getvalue() == board.render()