"""Line clearing, the falling-piece loop and game setup."""

from __future__ import annotations

import threading
import time

from termtetris.controller import (
    can_move_piece,
    clear_prev_piece,
    lock_grid_tetro,
    show_piece,
)
from termtetris.grid import Cell
from termtetris.screen import Color, draw_text
from termtetris.state import SPAWN_X, SPAWN_Y
from termtetris.stats import (
    calculate_score,
    display_game_stats,
    get_falling_speed,
    reset_game_stats,
    update_level,
)
from termtetris.tetrominoes import generate_random_tetromino

INITIAL_DELAY = 0.5
GRID_FRAME = 5
TITLE = "TETRIS - Press Q to quit"
LINE_NAMES = {1: "Single!", 2: "Double!", 3: "Triple!", 4: "TETRIS!"}


def is_line_complete(state, row: int) -> bool:
    """Whether every cell of a grid row is filled."""
    return all(cell.filled for cell in state.grid.data[row])


def clear_line(state, line_index: int) -> None:
    """Remove a row, shifting every row above it down by one."""
    data = state.grid.data
    for row in range(line_index, 0, -1):
        data[row][:] = data[row - 1]
    data[0][:] = [Cell()] * state.grid.width


def clear_completed_lines(state) -> int:
    """Clear every full row, update score, lines and level, and return the count."""
    cleared = 0
    row = state.grid.height - 1
    while row >= 0:
        if is_line_complete(state, row):
            clear_line(state, row)
            cleared += 1
        else:
            row -= 1
    if cleared:
        state.score += calculate_score(cleared, state)
        state.total_lines_cleared += cleared
        update_level(state)
    return cleared


def _draw_grid(state) -> None:
    state.grid.draw(state.screen, GRID_FRAME, GRID_FRAME, state.style.foreground(Color.WHITE))


def falling_piece_step(state) -> bool:
    """Advance the game by one tick; return False once the game is over."""
    with state.lock:
        state.new_y = state.start_y + 1
        if can_move_piece(state.start_x, state.new_y, state.current_piece, state):
            clear_prev_piece(state.start_x, state.start_y, state.current_piece, state.screen, state.style)
            state.start_y = state.new_y
            show_piece(state)
            display_game_stats(state)
            state.screen.show()
            return True

        lock_grid_tetro(state.start_x, state.start_y, state.current_piece, state)
        cleared = clear_completed_lines(state)
        _draw_grid(state)
        display_game_stats(state)

        if cleared:
            name = LINE_NAMES.get(cleared, "")
            text = f"{name} +{calculate_score(cleared, state)} pts"
            draw_text(state.screen, 30, 12, text, state.style.foreground(Color.RED))

        generate_random_tetromino(state)
        state.start_x = SPAWN_X
        state.start_y = SPAWN_Y
        if can_move_piece(state.start_x, state.start_y, state.current_piece, state):
            show_piece(state)
            state.screen.show()
            return True

        state.game_over = True
        state.game_running = False
        draw_text(state.screen, 2, 1, "Game Over", state.style.foreground(Color.RED))
        draw_text(
            state.screen, 2, 2, f"Final Score: {state.score}", state.style.foreground(Color.WHITE)
        )
        state.screen.show()
        return False


def falling_piece_loop(state) -> None:
    """Drop the active piece on a timer until the game stops."""
    delay = INITIAL_DELAY
    while True:
        time.sleep(delay)
        with state.lock:
            if not state.game_running:
                return
            delay = get_falling_speed(state)
        if not falling_piece_step(state):
            return


def reset_game(state) -> None:
    """Empty the playfield."""
    state.grid.reset()


def initialize_game(state, start_loop: bool = True) -> threading.Thread | None:
    """Start a new game: reset everything, draw the board and start the drop timer."""
    with state.lock:
        state.game_over = False
        state.game_running = True
        state.start_x = SPAWN_X
        state.start_y = SPAWN_Y

        reset_game(state)
        reset_game_stats(state)
        generate_random_tetromino(state)

        state.screen.clear()
        _draw_grid(state)
        draw_text(state.screen, 4, 2, TITLE, state.style.foreground(Color.BLUE))
        display_game_stats(state)
        state.screen.show()

    if not start_loop:
        return None
    worker = threading.Thread(target=falling_piece_loop, args=(state,), daemon=True, name="falling-piece")
    worker.start()
    return worker