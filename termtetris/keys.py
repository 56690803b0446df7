"""Keyboard events and their effect on the game."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto

from termtetris.controller import can_move_piece, clear_prev_piece, rotate_tetromino, show_piece
from termtetris.screen import Color, draw_text
from termtetris.stats import display_game_stats

RESTART_DELAY = 0.5


class Key(Enum):
    """Keys the game reacts to; RUNE stands for any printable character."""

    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    ESCAPE = auto()
    RUNE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press, with the character typed when the key is RUNE."""

    key: Key
    rune: str = ""


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


def _quit(state) -> None:
    draw_text(state.screen, 2, 1, "Q pressed. Exiting.", state.style.foreground(Color.RED))
    state.screen.show()
    state.screen.fini()
    raise QuitGame


def handle_game_over_input(event: KeyEvent, state) -> None:
    """React to a key on the game-over screen: S restarts, Q quits, Escape closes."""
    if event.key is Key.ESCAPE:
        state.screen.fini()
        return
    if event.key is not Key.RUNE:
        return
    if event.rune in ("s", "S"):
        draw_text(state.screen, 4, 4, "Restarting game...", state.style.foreground(Color.GREEN))
        state.screen.show()
        time.sleep(RESTART_DELAY)
        state.request_restart()
    elif event.rune in ("q", "Q"):
        _quit(state)


def _shift(state, dx: int, dy: int) -> bool:
    new_x = state.start_x + dx
    new_y = state.start_y + dy
    if dx:
        state.new_x = new_x
    if dy:
        state.new_y = new_y
    if not can_move_piece(new_x, new_y, state.current_piece, state):
        return False
    clear_prev_piece(state.start_x, state.start_y, state.current_piece, state.screen, state.style)
    state.start_x = new_x
    state.start_y = new_y
    return True


def handle_game_input(event: KeyEvent, state) -> None:
    """React to a key during play: arrows move and rotate, Q quits."""
    if event.key is Key.RUNE:
        if event.rune in ("q", "Q"):
            _quit(state)
        return

    with state.lock:
        if event.key is Key.RIGHT:
            if _shift(state, 1, 0):
                show_piece(state)
        elif event.key is Key.LEFT:
            if _shift(state, -1, 0):
                show_piece(state)
        elif event.key is Key.DOWN:
            if _shift(state, 0, 1):
                state.score += 1
                show_piece(state)
        elif event.key is Key.UP:
            rotate_tetromino(state)
        else:
            return
        display_game_stats(state)
        state.screen.show()