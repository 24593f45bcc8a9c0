"""Minesweeper board model: cells, bomb placement, uncovering and text rendering."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import IO, NamedTuple

from termcolor import colored


class GameState(Enum):
    """Overall state of a game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Position(NamedTuple):
    """A cell coordinate on the board; ``x`` selects the column, ``y`` the row."""

    x: int
    y: int


class CellType(Enum):
    """What a cell contains."""

    SAFE = auto()
    BOMB = auto()
    EMPTY = auto()


class CellState(Enum):
    """What the player currently sees of a cell."""

    HIDDEN = auto()
    UNCOVERED = auto()
    FLAGGED = auto()


class PressedState(Enum):
    """Pointer interaction state of a cell."""

    PRESSED = auto()
    HOVERED = auto()
    NONE = auto()


@dataclass
class Cell:
    """A single square of the board."""

    cell_type: CellType = CellType.SAFE
    state: CellState = CellState.HIDDEN
    adjacent_bomb_count: int = 0
    pressed_state: PressedState = PressedState.NONE
    is_exploded: bool = False
    # Set once an empty cell has spread to its neighbours, so it is not spread again.
    expanded: bool = False

    def toggle_flagged(self) -> None:
        """Flag a hidden cell, or unflag a flagged one; uncovered cells are unchanged."""
        if self.state is CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state is CellState.FLAGGED:
            self.state = CellState.HIDDEN


_NUMBER_STYLES: dict[int, tuple[str, tuple[str, ...]]] = {
    1: ("blue", ()),
    2: ("green", ()),
    3: ("light_red", ("dark",)),
    4: ("blue", ("dark",)),
    5: ("red", ()),
    6: ("cyan", ()),
    7: ("black", ()),
    8: ("white", ()),
}


@dataclass
class Board:
    """A minesweeper board of ``size_x`` columns by ``size_y`` rows.

    Cells are stored column-major: ``cells[x][y]``.
    """

    size_x: int
    size_y: int
    bomb_count: int
    rng: random.Random | None = None
    cells: list[list[Cell]] = field(init=False, repr=False)
    state: GameState = field(init=False, default=GameState.PLAYING)
    running: bool = field(init=False, default=True)
    _uncovered: int = field(init=False, default=0, repr=False)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("Board too small")
        if self.bomb_count < 0:
            raise ValueError("Bomb count must not be negative")
        if self.bomb_count > self.size_x * self.size_y:
            raise ValueError("Too many bombs")
        self.cells = [[Cell() for _ in range(self.size_y)] for _ in range(self.size_x)]
        self._place_bombs(self.rng if self.rng is not None else random.Random())
        self._calculate_adjacent_bombs()

    def _place_bombs(self, rng: random.Random) -> None:
        for _ in range(self.bomb_count):
            x, y = rng.randrange(self.size_x), rng.randrange(self.size_y)
            while self.cells[x][y].cell_type is CellType.BOMB:
                x, y = rng.randrange(self.size_x), rng.randrange(self.size_y)
            self.cells[x][y].cell_type = CellType.BOMB

    def _calculate_adjacent_bombs(self) -> None:
        for x, column in enumerate(self.cells):
            for y, cell in enumerate(column):
                bombs = sum(
                    1
                    for p in self.adjacent_positions(Position(x, y))
                    if self.get_cell(p).cell_type is CellType.BOMB
                )
                if bombs == 0:
                    cell.cell_type = CellType.EMPTY
                else:
                    cell.adjacent_bomb_count = bombs

    def _in_bounds(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.size_x and 0 <= y < self.size_y

    def get_cell(self, pos: tuple[int, int]) -> Cell:
        """Return the cell at ``pos``."""
        x, y = pos
        return self.cells[x][y]

    def adjacent_positions(self, pos: tuple[int, int]) -> list[Position]:
        """Return the 3x3 neighbourhood of ``pos`` clipped to the board, ``pos`` included."""
        px, py = pos
        return [
            Position(x, y)
            for x in range(max(px - 1, 0), min(px + 2, self.size_x))
            for y in range(max(py - 1, 0), min(py + 2, self.size_y))
        ]

    def _reveal(self, start: Position) -> None:
        """Uncover ``start`` and flood outward from empty cells."""
        pending = [start]
        while pending:
            pos = pending.pop()
            cell = self.get_cell(pos)
            if cell.state is not CellState.HIDDEN:
                continue
            cell.state = CellState.UNCOVERED
            if cell.cell_type is CellType.BOMB:
                cell.is_exploded = True
                self.stop()
            elif cell.cell_type is CellType.EMPTY and not cell.expanded:
                cell.expanded = True
                pending.extend(
                    p
                    for p in reversed(self.adjacent_positions(pos))
                    if self.get_cell(p).state is CellState.HIDDEN
                )
            self._uncovered += 1

    def _reveal_adjacent(self, pos: Position) -> None:
        for neighbour in self.adjacent_positions(pos):
            if self.get_cell(neighbour).state is CellState.HIDDEN:
                self._reveal(neighbour)

    def uncover(self, pos: tuple[int, int]) -> None:
        """Uncover the cell at ``pos``; on an uncovered number, chord when flags match.

        Positions outside the board are ignored.
        """
        if not self._in_bounds(pos):
            return
        pos = Position(*pos)
        cell = self.get_cell(pos)

        if cell.state is CellState.HIDDEN:
            self._reveal(pos)
        elif cell.state is CellState.UNCOVERED:
            flags = sum(
                1
                for p in self.adjacent_positions(pos)
                if self.get_cell(p).state is CellState.FLAGGED
            )
            if flags == cell.adjacent_bomb_count:
                self._reveal_adjacent(pos)

        non_bomb_cells = self.size_x * self.size_y - self.bomb_count
        if self.state is GameState.PLAYING and self._uncovered == non_bomb_cells:
            self.state = GameState.WON
            self.running = False

    def uncover_all(self) -> None:
        """Make every cell visible."""
        for column in self.cells:
            for cell in column:
                cell.state = CellState.UNCOVERED

    @staticmethod
    def _render_cell(cell: Cell) -> str:
        if cell.state is CellState.HIDDEN:
            return colored(" ", "white", attrs=["bold"])
        if cell.state is CellState.FLAGGED:
            return colored(" ", "red")
        if cell.cell_type is CellType.BOMB:
            return colored(" ", "black")
        if cell.cell_type is CellType.EMPTY:
            return "  "
        style = _NUMBER_STYLES.get(cell.adjacent_bomb_count)
        if style is None:
            return ""
        colour, attrs = style
        return colored(str(cell.adjacent_bomb_count), colour, attrs=list(attrs)) + " "

    def render(self) -> str:
        """Return a coloured text picture of the board."""
        lines = ["__|" + "".join(f"{x} " for x in range(self.size_x))]
        for y in range(self.size_y):
            row = "".join(self._render_cell(self.cells[x][y]) for x in range(self.size_x))
            lines.append(f"{y} |{row}")
        return "\n".join(lines) + "\n"

    def draw(self, file: IO[str] | None = None) -> None:
        """Write the rendered board to ``file`` (standard output by default)."""
        print(self.render(), end="", file=file if file is not None else sys.stdout)

    def stop(self) -> None:
        """End the game as lost and reveal the whole board."""
        self.running = False
        self.state = GameState.LOST
        self.uncover_all()