# termtetris

A falling-block puzzle game that runs in your terminal, drawn with the
standard library's `curses` module. It has no third-party dependencies.
It needs a terminal that `curses` supports, which in practice means a POSIX
system.

## Installing

```
pip install .
```

## Playing

```
termtetris
```

The command takes no options apart from `--help`.

The playfield is 20 cells wide and 30 rows tall. A new piece appears near the
top-left corner of the field and drops one row at a time. The first drop
comes after half a second. The score, level and number of cleared lines are
shown to the right of the field. When a move clears lines, a message such as
`Double! +300 pts` appears under them.

If a new piece has no room where it appears, the game is over. The screen
then shows `Game Over` and your final score.

### Keys

| Key         | Action                                  |
|-------------|-----------------------------------------|
| Left arrow  | Move the piece one cell left            |
| Right arrow | Move the piece one cell right           |
| Down arrow  | Move the piece one row down (+1 point)  |
| Up arrow    | Rotate the piece clockwise, if it fits  |
| Q           | Quit                                    |

When the game is over:

| Key | Action                                     |
|-----|--------------------------------------------|
| S   | Start a new game (after a half-second pause) |
| Q   | Quit                                       |
| Esc | Close the screen and leave                 |

Ctrl-C also leaves the game and restores the terminal.

### Scoring

Lines cleared in a single move score these points, multiplied by the current
level:

| Lines | Name    | Points |
|-------|---------|--------|
| 1     | Single  | 100    |
| 2     | Double  | 300    |
| 3     | Triple  | 500    |
| 4     | TETRIS  | 800    |

You start at level 1 and go up one level for every 10 lines cleared. The
pieces fall every 600 ms at level 1, 50 ms faster for each level after that,
and never faster than every 100 ms.

## Using it from Python

The game logic does not depend on the terminal. `termtetris.screen.Canvas`
is a screen that keeps its cells in memory. You can drive a game with it
without curses:

```python
from termtetris.screen import Canvas
from termtetris.state import init_game_state
from termtetris.game import initialize_game, falling_piece_step
from termtetris.keys import Key, KeyEvent, handle_game_input

canvas = Canvas()
state = init_game_state(canvas)
initialize_game(state, start_loop=False)   # no background drop timer

handle_game_input(KeyEvent(Key.RIGHT), state)
falling_piece_step(state)                  # one tick; False once the game is over
print(state.score, state.level, canvas.row_text(8, 30, 40))
```

- With `start_loop=True`, `initialize_game` starts `falling_piece_loop` in a
  daemon thread and returns that thread.
- Pressing Q raises `termtetris.keys.QuitGame`.
- During a game over, S calls `GameState.request_restart()`. Your loop can
  check this with `GameState.take_restart()`.

## What it does not do

- There is no preview of the next piece.
- There is no hard drop, hold or pause.
- Scores are not saved between sessions.
- Piece kinds are drawn at random with equal chance.
- A rotation that does not fit is refused; the piece is not shifted to make it fit.

## Running the tests

```
pip install ".[test]"
pytest
```