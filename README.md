# fleetstrike

A naval battle board game for the desktop. You place a fleet of five ships on a
10×10 grid and then trade shots with a computer opponent or with a second
player at the same machine. The first side to sink every enemy ship wins.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and reads the mouse and
keyboard.

## Playing

Start the game with:

```
fleetstrike
```

Options:

- `--stats PATH`: statistics file to use (default `battleship_stats.bin` in the
  current directory).
- `--fps N`: target frame rate (default 60).
- `--frames N`: stop after this many frames.

Closing the window or pressing Escape ends the game.

### Main menu

- **PLAY vs AI**: a game against the computer at the chosen difficulty.
- **PLAYER vs PLAYER**: two players take turns at one screen. The second
  player's fleet is placed at random.
- **SETTINGS**: choose the computer's difficulty.
- Up and Down move the highlighted entry and Enter selects it; you can also
  click the buttons.

### Difficulty

- **Easy**: fires at random cells it has not fired at yet.
- **Medium**: sweeps the board in a checkerboard pattern and, after a hit,
  fires at the cells next to it.
- **Hard**: fires at the open cell where the most ship placements still fit,
  and follows up on its hits in the same way.

On the settings screen Up and Down change the difficulty and Backspace returns
to the menu.

### Placing ships

Your fleet is a Carrier (5), a Battleship (4), a Cruiser (3), a Submarine (3)
and a Destroyer (2). Ships may not touch each other, not even at a corner.

- Left click places the current ship at the cell under the mouse.
- R or Space turns it between horizontal and vertical.
- A places all remaining ships at random.

### Battle

Click a cell on the right-hand board to fire at it. Hits are marked with a red
X, misses with a white dot. When the game ends, R starts a new game and M goes
back to the main menu.

## Statistics

Games played, wins, shots, hits, accuracy, shortest and longest game and the
player level are saved to the statistics file after every game and when the
game is closed. A missing file is created on start. Each game played gives one
experience point and each win two more; every five points raise the level by
one, up to level 50.

## What it does not do

- There is no statistics screen: the figures are only kept in the file, and the
  player level is shown on the menu and during play.
- The **QUIT** button does nothing; close the window or press Escape instead.
- There is no sound.

## Using the parts in code

The game logic needs no window:

```python
from fleetstrike.ai import AI
from fleetstrike.board import Board
from fleetstrike.core import CellState, GameMode
from fleetstrike.ship import Destroyer

board = Board()
board.place_ship(Destroyer(), 0, 0, False)
board.attack(0, 0)
board.attack(1, 0)
assert board.all_ships_sunk()
assert board.cell_state(0, 0) is CellState.HIT

ai = AI(GameMode.PVE_HARD)
x, y = ai.next_target(board.grid)
```

`fleetstrike.game.Game` runs the whole game from `handle_click(x, y)`,
`handle_key(key)` with a `Key` value, and `update(dt)`; its statistics go to the
path given as `stats_path`. `fleetstrike.stats` reads and writes the statistics
file with `load_stats` and `save_stats`, and `fleetstrike.render.Renderer` draws
a game onto a pygame surface.

## Running the tests

```
pip install ".[test]"
pytest
```