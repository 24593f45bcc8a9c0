# minefield

A minesweeper game played in the terminal. Uncover every safe cell on the
board without setting off a bomb; flag the cells you believe hide one.

## Installing

```
pip install .
```

## Playing

```
minefield
```

The board is printed with colours, columns numbered along the top and rows
down the left. After each command the board is printed again, followed by the
game state (`playing`, `won` or `lost`) and the elapsed seconds as three
digits. Commands are read from standard input, one per line:

| Command                                  | Effect                          |
|------------------------------------------|---------------------------------|
| `u X Y` or `uncover X Y`                 | uncover the cell at column X, row Y |
| `f X Y` or `flag X Y`                    | place or remove a flag          |
| `n [beginner\|intermediate\|expert]` or `new ...` | start a new game (beginner if no name is given) |
| `q` or `quit`                            | stop playing                    |

An unknown command or a position outside the board prints an error and the
list of commands.

### Options

- `--difficulty {beginner,intermediate,expert}`: the first board (default
  `beginner`).
- `--size WIDTH HEIGHT`: a board of another size.
- `--bombs N`: another number of bombs.
- `--seed N`: seed the random placement of bombs, for repeatable games.

The difficulties are:

| Difficulty   | Width | Height | Bombs |
|--------------|-------|--------|-------|
| Beginner     | 8     | 8      | 10    |
| Intermediate | 16    | 16     | 40    |
| Expert       | 30    | 16     | 99    |

The timer counts seconds only while a game is being played.

### Rules

- Uncovering a bomb loses the game and reveals the whole board.
- Uncovering a cell with no neighbouring bombs also uncovers its neighbours,
  spreading until numbered cells are reached.
- Uncovering an already uncovered number whose count of neighbouring flags
  matches its number uncovers all of its remaining hidden neighbours.
- Flags can be placed on and removed from hidden cells only.
- The game is won once every cell without a bomb is uncovered.

## Using the board in code

The game logic lives in `minefield.board`:

```python
import random

from minefield.board import Board, GameState, Position

board = Board(8, 8, 10, random.Random(1))
board.uncover(Position(0, 0))
print(board.render())

if board.state is GameState.LOST:
    print("Boom.")
```

A board that is too small or has more bombs than cells raises `ValueError`.
`Board.get_cell` returns the `Cell` at a position; `Cell.toggle_flagged`
places or removes a flag. `Board.draw` prints the board with colours to a
file (standard output by default), and `Board.render` returns the same
picture as text.

`minefield.app.App` holds a board together with the timer and whether the
new-game choice is open. `App.update` changes them in response to the
messages in `minefield.messages` (`CellHover`, `CellUnhover`, `CellPress`,
`CellLeftClick`, `CellRightClick`, `OpenNewGameModal`, `SubmitNewGame`,
`Tick`) and returns the window size in pixels when it should change.

`minefield.views` maps game state to picture names: `cell_image_name`,
`face_image_name`, `timer_image_names`, `grid_image_names`, and the presets
in `Difficulty`. `timer_digits` gives the three digits of the timer.

## What it does not do

There is no graphical window: the game is played only in the terminal. The
picture names in `minefield.views` and the paths from `resource_path` point
into a `resources` directory that the package does not ship.

## Running the tests

```
pip install ".[test]"
pytest
```