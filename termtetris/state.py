"""The mutable state of one game session."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field

from termtetris.grid import Grid
from termtetris.screen import Color, Style
from termtetris.tetrominoes import Shape, shape

GRID_WIDTH = 20
GRID_HEIGHT = 30
SPAWN_X = 7
SPAWN_Y = 7


@dataclass
class GameState:
    """Everything the game loop, input handlers and renderer share."""

    screen: object
    grid: Grid
    style: Style
    current_piece: Shape
    temp_random_piece: Shape
    active_piece: int = 0
    piece_type: int = 2
    rotation: int = 0
    start_x: int = SPAWN_X
    start_y: int = SPAWN_Y
    new_x: int = 0
    new_y: int = 0
    game_over: bool = False
    game_running: bool = True
    score: int = 0
    level: int = 0
    total_lines_cleared: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _restart: queue.Queue = field(
        default_factory=lambda: queue.Queue(maxsize=1), repr=False
    )

    def request_restart(self) -> None:
        """Signal that a new game should start; repeated requests collapse."""
        try:
            self._restart.put_nowait(True)
        except queue.Full:
            pass

    def take_restart(self) -> bool:
        """Consume a pending restart request, returning whether there was one."""
        try:
            return self._restart.get_nowait()
        except queue.Empty:
            return False


def init_game_state(screen) -> GameState:
    """Build a fresh state bound to a screen, with default values."""
    default_style = Style(fg=Color.RESET, bg=Color.RESET)
    screen.style = default_style
    t_spawn = shape(2, 0)
    return GameState(
        screen=screen,
        grid=Grid(GRID_WIDTH, GRID_HEIGHT),
        style=default_style,
        current_piece=t_spawn,
        temp_random_piece=t_spawn,
    )