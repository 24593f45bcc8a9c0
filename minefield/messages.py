"""Messages that drive the game from user input and the clock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CellLeftClick:
    """The primary button was released over a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class CellRightClick:
    """The secondary button was released over a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class CellHover:
    """The pointer entered a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class CellUnhover:
    """The pointer left a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class CellPress:
    """The primary button went down over a cell."""

    x: int
    y: int


@dataclass(frozen=True)
class OpenNewGameModal:
    """The player asked to choose a new game."""


@dataclass(frozen=True)
class SubmitNewGame:
    """The player chose the size and bomb count of a new game."""

    size_x: int
    size_y: int
    bomb_count: int


@dataclass(frozen=True)
class Tick:
    """One second of game time passed."""


Message = Union[
    CellLeftClick,
    CellRightClick,
    CellHover,
    CellUnhover,
    CellPress,
    OpenNewGameModal,
    SubmitNewGame,
    Tick,
]