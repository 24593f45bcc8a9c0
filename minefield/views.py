"""What the game shows: image names for cells, face and timer, and the difficulty choices."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from .board import Board, Cell, CellState, CellType, GameState, PressedState
from .messages import SubmitNewGame

SCALE = 48
"""Side of one cell on screen, in pixels."""

PIXEL_SIZE = SCALE / 16
"""Size of one pixel of the 16x16 artwork at the current scale."""

RESOURCE_DIR = Path(__file__).resolve().parent / "resources"


class Difficulty(Enum):
    """The preset games offered when starting a new game."""

    BEGINNER = ("beginner", 8, 8, 10)
    INTERMEDIATE = ("intermediate", 16, 16, 40)
    EXPERT = ("expert", 30, 16, 99)

    def __init__(self, label: str, size_x: int, size_y: int, bomb_count: int) -> None:
        self.label = label
        self.size_x = size_x
        self.size_y = size_y
        self.bomb_count = bomb_count

    @property
    def image_name(self) -> str:
        """Resource name of the button picture for this difficulty."""
        return f"difficulty/{self.label}.png"

    @property
    def message(self) -> SubmitNewGame:
        """The message that starts a game of this difficulty."""
        return SubmitNewGame(self.size_x, self.size_y, self.bomb_count)


_HIDDEN_IMAGES = {
    PressedState.NONE: "hidden",
    PressedState.HOVERED: "hidden-hovered",
    PressedState.PRESSED: "hidden-pressed",
}

_FACE_IMAGES = {
    GameState.PLAYING: "playing",
    GameState.LOST: "lost",
    GameState.WON: "won",
}


def cell_image_name(cell: Cell) -> str:
    """Return the resource name of the picture that shows ``cell``."""
    if cell.state is CellState.HIDDEN:
        name = _HIDDEN_IMAGES[cell.pressed_state]
    elif cell.state is CellState.FLAGGED:
        name = "flag"
    elif cell.cell_type is CellType.BOMB:
        name = "bomb-exploded" if cell.is_exploded else "bomb"
    elif cell.cell_type is CellType.EMPTY:
        name = "empty"
    else:
        name = str(cell.adjacent_bomb_count)
    return f"{name}.png"


def face_image_name(state: GameState) -> str:
    """Return the resource name of the face shown for a game ``state``."""
    return f"{_FACE_IMAGES[state]}.png"


def timer_digits(time: int) -> str:
    """Return the three digits the timer display shows for ``time`` seconds."""
    if time < 0:
        raise ValueError("time must not be negative")
    return str(time + 1000)[1:4]


def timer_image_names(time: int) -> list[str]:
    """Return the resource names of the digit pictures for ``time`` seconds."""
    return [f"red_text/{digit}.png" for digit in timer_digits(time)]


def grid_image_names(board: Board) -> list[list[str]]:
    """Return the picture names of every cell, column by column like ``board.cells``."""
    return [[cell_image_name(cell) for cell in column] for column in board.cells]


def resource_path(name: str) -> Path:
    """Return where the resource ``name`` lives inside the package."""
    relative = PurePosixPath(name)
    if not name or relative.is_absolute() or ".." in relative.parts:
        raise ValueError(f"invalid resource name: {name!r}")
    return RESOURCE_DIR.joinpath(*relative.parts)