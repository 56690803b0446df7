"""Moving, rotating, drawing and locking the active piece."""

from __future__ import annotations

from collections.abc import Iterator

from termtetris.grid import Cell
from termtetris.screen import BLANK, BLOCK, Color, Style
from termtetris.tetrominoes import ROTATION_COUNT, Shape, piece_color, shape

# Screen coordinates of the playfield: grid cell (0, 0) sits at (6, 6).
GRID_ORIGIN = 6
VISIBLE_LEFT = 6
VISIBLE_RIGHT = 25
VISIBLE_TOP = 6
VISIBLE_BOTTOM = 35


def _filled_cells(piece: Shape, x: int, y: int) -> Iterator[tuple[int, int]]:
    """Yield the screen coordinates of a piece's filled cells placed at (x, y)."""
    for i, row in enumerate(piece):
        for j, value in enumerate(row):
            if value == 1:
                yield x + j, y + i


def _visible(x: int, y: int) -> bool:
    return VISIBLE_LEFT <= x <= VISIBLE_RIGHT and VISIBLE_TOP <= y <= VISIBLE_BOTTOM


def show_piece(state) -> None:
    """Draw the active piece at its current position inside the play area."""
    style = state.style.foreground(piece_color(state.piece_type))
    for x, y in _filled_cells(state.current_piece, state.start_x, state.start_y):
        if _visible(x, y):
            state.screen.set_content(x, y, BLOCK, style)


def clear_prev_piece(start_x: int, start_y: int, piece: Shape, screen, style: Style) -> None:
    """Paint the background over the cells a piece occupied at (start_x, start_y)."""
    empty = style.background(Color.DARK_GRAY)
    for x, y in _filled_cells(piece, start_x, start_y):
        if _visible(x, y):
            screen.set_content(x, y, BLANK, empty)


def can_move_piece(new_x: int, new_y: int, piece: Shape, state) -> bool:
    """Whether a piece placed at (new_x, new_y) stays in the grid without overlapping."""
    grid = state.grid
    for x, y in _filled_cells(piece, new_x, new_y):
        gx = x - GRID_ORIGIN
        gy = y - GRID_ORIGIN
        if not (0 <= gx < grid.width and 0 <= gy < grid.height):
            return False
        if grid.data[gy][gx].filled:
            return False
    return True


def rotate_tetromino(state) -> None:
    """Rotate the active piece clockwise if the rotated shape fits."""
    next_rotation = (state.rotation + 1) % ROTATION_COUNT
    candidate = shape(state.piece_type, next_rotation)
    if can_move_piece(state.start_x, state.start_y, candidate, state):
        clear_prev_piece(state.start_x, state.start_y, state.current_piece, state.screen, state.style)
        state.rotation = next_rotation
        state.current_piece = candidate
        show_piece(state)


def lock_grid_tetro(new_x: int, new_y: int, piece: Shape, state) -> None:
    """Fix a piece into the grid at (new_x, new_y), ignoring cells outside it."""
    grid = state.grid
    cell = Cell(filled=True, color=piece_color(state.piece_type))
    for x, y in _filled_cells(piece, new_x, new_y):
        gx = x - GRID_ORIGIN
        gy = y - GRID_ORIGIN
        if 0 <= gy < grid.height and 0 <= gx < grid.width:
            grid.data[gy][gx] = cell