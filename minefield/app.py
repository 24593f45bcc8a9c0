"""Game application state and a terminal front end to play it."""

from __future__ import annotations

import argparse
import random
import sys
import time

from .board import Board, GameState, PressedState
from .messages import (
    CellHover,
    CellLeftClick,
    CellPress,
    CellRightClick,
    CellUnhover,
    Message,
    OpenNewGameModal,
    SubmitNewGame,
    Tick,
)
from .views import SCALE, Difficulty, timer_digits


class App:
    """Holds the current board, the timer and whether the new-game chooser is open."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng
        start = Difficulty.BEGINNER
        self.board = Board(start.size_x, start.size_y, start.bomb_count, rng=rng)
        self.show_modal = False
        self.timer = 0

    def title(self) -> str:
        """Window title."""
        return "Mineweeper"

    def ticking(self) -> bool:
        """Whether the clock should be running."""
        return self.board.state is GameState.PLAYING

    def window_size(self) -> tuple[int, int]:
        """Size the window should have for what is shown now."""
        if self.show_modal:
            return SCALE * 8, SCALE * 8
        return SCALE * self.board.size_x, SCALE * (2 + self.board.size_y)

    def update(self, message: Message) -> tuple[int, int] | None:
        """Apply ``message``; return the new window size when the window must change."""
        match message:
            case CellHover(x, y):
                self.board.get_cell((x, y)).pressed_state = PressedState.HOVERED
            case CellUnhover(x, y):
                self.board.get_cell((x, y)).pressed_state = PressedState.NONE
            case CellPress(x, y):
                self.board.get_cell((x, y)).pressed_state = PressedState.PRESSED
            case CellLeftClick(x, y):
                if self.board.get_cell((x, y)).pressed_state is PressedState.PRESSED:
                    self.board.uncover((x, y))
                self.board.get_cell((x, y)).pressed_state = PressedState.NONE
            case CellRightClick(x, y):
                self.board.get_cell((x, y)).toggle_flagged()
            case Tick():
                self.timer += 1
            case OpenNewGameModal():
                self.show_modal = True
                return self.window_size()
            case SubmitNewGame(size_x, size_y, bomb_count):
                self.board = Board(size_x, size_y, bomb_count, rng=self.rng)
                self.show_modal = False
                self.timer = 0
                return self.window_size()
            case _:
                raise TypeError(f"unknown message: {message!r}")
        return None


_HELP = (
    "commands: u X Y (uncover), f X Y (flag), "
    "n [beginner|intermediate|expert] (new game), q (quit)"
)


def _parse_position(args: list[str], app: App) -> tuple[int, int]:
    if len(args) != 2:
        raise ValueError("expected two coordinates")
    x, y = (int(a) for a in args)
    if not (0 <= x < app.board.size_x and 0 <= y < app.board.size_y):
        raise ValueError("position outside the board")
    return x, y


def _show(app: App, out) -> None:
    app.board.draw(out)
    print(f"{app.board.state.name.lower()} {timer_digits(app.timer)}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Play in the terminal, reading commands from standard input."""
    parser = argparse.ArgumentParser(prog="minefield", description="Play minesweeper.")
    parser.add_argument(
        "--difficulty",
        choices=[d.label for d in Difficulty],
        default=Difficulty.BEGINNER.label,
    )
    parser.add_argument("--size", nargs=2, type=int, metavar=("WIDTH", "HEIGHT"))
    parser.add_argument("--bombs", type=int)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    preset = next(d for d in Difficulty if d.label == args.difficulty)
    size_x, size_y = args.size if args.size else (preset.size_x, preset.size_y)
    bombs = args.bombs if args.bombs is not None else preset.bomb_count

    rng = random.Random(args.seed) if args.seed is not None else None
    app = App(rng)
    try:
        app.update(SubmitNewGame(size_x, size_y, bombs))
    except ValueError as exc:
        parser.error(str(exc))

    out = sys.stdout
    started = time.monotonic()
    print(_HELP, file=out)
    _show(app, out)

    for line in sys.stdin:
        if app.ticking():
            for _ in range(int(time.monotonic() - started) - app.timer):
                app.update(Tick())
        words = line.split()
        if not words:
            continue
        command, rest = words[0].lower(), words[1:]
        try:
            if command in ("q", "quit"):
                break
            if command in ("u", "uncover"):
                pos = _parse_position(rest, app)
                app.update(CellPress(*pos))
                app.update(CellLeftClick(*pos))
            elif command in ("f", "flag"):
                app.update(CellRightClick(*_parse_position(rest, app)))
            elif command in ("n", "new"):
                label = rest[0].lower() if rest else Difficulty.BEGINNER.label
                choice = next((d for d in Difficulty if d.label == label), None)
                if choice is None:
                    raise ValueError(f"unknown difficulty: {label}")
                app.update(OpenNewGameModal())
                app.update(choice.message)
                started = time.monotonic()
            else:
                raise ValueError(f"unknown command: {command}")
        except ValueError as exc:
            print(f"error: {exc}", file=out)
            print(_HELP, file=out)
            continue
        _show(app, out)
    return 0