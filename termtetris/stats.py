"""Score, level and speed bookkeeping."""

from __future__ import annotations

from termtetris.screen import Color, draw_text

LINE_SCORES = {
    1: 100,  # single
    2: 300,  # double
    3: 500,  # triple
    4: 800,  # tetris
}

STATS_X = 30
LINES_PER_LEVEL = 10
BASE_SPEED_MS = 600
SPEED_STEP_MS = 50
MIN_SPEED_MS = 100


def display_game_stats(state) -> None:
    """Draw score, level and total lines beside the playfield."""
    screen, style = state.screen, state.style
    draw_text(screen, STATS_X, 8, f"Score: {state.score}", style.foreground(Color.DARK_CYAN))
    draw_text(screen, STATS_X, 9, f"Level: {state.level}", style.foreground(Color.GREEN))
    draw_text(
        screen,
        STATS_X,
        10,
        f"Lines: {state.total_lines_cleared}",
        style.foreground(Color.YELLOW),
    )


def calculate_score(lines_cleared: int, state) -> int:
    """Points for clearing a number of lines at once at the current level."""
    if lines_cleared == 0:
        return 0
    return LINE_SCORES.get(lines_cleared, 0) * state.level


def update_level(state) -> None:
    """Set the level to one more than every full ten lines cleared."""
    state.level = state.total_lines_cleared // LINES_PER_LEVEL + 1


def reset_game_stats(state) -> None:
    """Return score, level and line count to their starting values."""
    state.score = 0
    state.level = 1
    state.total_lines_cleared = 0


def get_falling_speed(state) -> float:
    """Seconds between automatic drops at the current level."""
    millis = max(BASE_SPEED_MS - (state.level - 1) * SPEED_STEP_MS, MIN_SPEED_MS)
    return millis / 1000