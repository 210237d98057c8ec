# fillerbot

A robot player for the Filler board game, and a window that shows a game
as it is played.

Two players take turns. Each turn the game engine writes the board (the
"Anfield") and a piece to standard input. The robot answers on standard
output with the `x y` coordinates where it places the piece. A placement is
legal when exactly one filled cell of the piece lies on the robot's own
territory, none lies on the opponent's, and the piece stays inside the
board. When the robot has no legal move it answers `0 0`.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The robot

```
filler
```

Give this command to the game engine as one of the players. It reads turns
from standard input until the input ends. A turn ends after the rows of the
`Piece` announced in it have been read.

The robot is player 1 when the engine's `$$$` line contains both `p1` and
the program's own name (the last `/`-separated part of the path it was
started from); otherwise it is player 2. Player 1 uses the characters
`a`/`@` and player 2 uses `s`/`$`.

Every legal placement is scored from how much it hems in the opponent's
cells, how far it lies from the board's edges, and how it sits relative to
the opponent's open frontier. The highest score wins.

Pass `-d` or `--debug` as the first argument to print `Mode: DEBUG` and
then the parts of each placement's score as it is computed:

```
filler --debug
```

## The visualizer

```
filler-visualizer
```

This command reads the engine's output from standard input and draws the
board in a full-screen pygame window. Player 1's cells are green and
player 2's cells are yellow. Each player's cell count is shown under the
board. When a line of the output contains `won`, the window names the
winner: player 1 if that line contains `Player1`, player 2 otherwise. Once
the input ends the last board stays on screen. Close the window or press
Escape to quit. Pipe the engine's output into it, for example:

```
<game engine command> | filler-visualizer
```

## Using it as a library

- `fillerbot.state.State.parse(lines)` updates the game state from the
  lines of one turn.
- `fillerbot.cli.read_turn(lines)` reads the lines of one turn from an
  iterator of text lines.
- `fillerbot.cli.choose_move(state)` returns the `(x, y)` of the
  best-scoring placement, or `(0, 0)` when none fits.
- `fillerbot.anfield.Anfield.can_place(coord, robot, piece)` tells whether a
  placement is legal, and `Anfield.potential_positions(piece, robot)` maps
  every legal `Position` to its score.
- `fillerbot.pieces.Piece.from_cells(rows)` builds a piece from rows of
  characters, `.` being empty.
- `fillerbot.visualizer.VisualizerState` holds what the visualizer shows;
  `fillerbot.grid.Grid` lays out the board on screen.
- `fillerbot.logger.set_debug(enabled)` switches the debug output on or
  off.