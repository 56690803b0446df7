"""The seven tetromino shapes, their rotations and colours."""

from __future__ import annotations

import random

from termtetris.screen import Color

Shape = tuple[tuple[int, ...], ...]

I_PIECE: tuple[Shape, ...] = (
    ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
    ((0, 0, 1, 0), (0, 0, 1, 0), (0, 0, 1, 0), (0, 0, 1, 0)),
    ((0, 0, 0, 0), (0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0)),
    ((0, 1, 0, 0), (0, 1, 0, 0), (0, 1, 0, 0), (0, 1, 0, 0)),
)

_O_SHAPE: Shape = ((0, 1, 1, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0))
O_PIECE: tuple[Shape, ...] = (_O_SHAPE,) * 4

T_PIECE: tuple[Shape, ...] = (
    ((0, 1, 0), (1, 1, 1), (0, 0, 0)),
    ((0, 1, 0), (0, 1, 1), (0, 1, 0)),
    ((0, 0, 0), (1, 1, 1), (0, 1, 0)),
    ((0, 1, 0), (1, 1, 0), (0, 1, 0)),
)

S_PIECE: tuple[Shape, ...] = (
    ((0, 1, 1), (1, 1, 0), (0, 0, 0)),
    ((0, 1, 0), (0, 1, 1), (0, 0, 1)),
    ((0, 0, 0), (0, 1, 1), (1, 1, 0)),
    ((1, 0, 0), (1, 1, 0), (0, 1, 0)),
)

Z_PIECE: tuple[Shape, ...] = (
    ((1, 1, 0), (0, 1, 1), (0, 0, 0)),
    ((0, 0, 1), (0, 1, 1), (0, 1, 0)),
    ((0, 0, 0), (1, 1, 0), (0, 1, 1)),
    ((0, 1, 0), (1, 1, 0), (1, 0, 0)),
)

J_PIECE: tuple[Shape, ...] = (
    ((1, 0, 0), (1, 1, 1), (0, 0, 0)),
    ((0, 1, 1), (0, 1, 0), (0, 1, 0)),
    ((0, 0, 0), (1, 1, 1), (0, 0, 1)),
    ((0, 1, 0), (0, 1, 0), (1, 1, 0)),
)

L_PIECE: tuple[Shape, ...] = (
    ((0, 0, 1), (1, 1, 1), (0, 0, 0)),
    ((0, 1, 0), (0, 1, 0), (0, 1, 1)),
    ((0, 0, 0), (1, 1, 1), (1, 0, 0)),
    ((1, 1, 0), (0, 1, 0), (0, 1, 0)),
)

ALL_TETROMINOES: tuple[tuple[Shape, ...], ...] = (
    I_PIECE,
    O_PIECE,
    T_PIECE,
    S_PIECE,
    Z_PIECE,
    J_PIECE,
    L_PIECE,
)

PIECE_COLORS: tuple[Color, ...] = (
    Color.TURQUOISE,  # I
    Color.YELLOW,  # O
    Color.PURPLE,  # T
    Color.GREEN,  # S
    Color.RED,  # Z
    Color.BLUE,  # J
    Color.ORANGE,  # L
)

KIND_COUNT = len(ALL_TETROMINOES)
ROTATION_COUNT = 4


def _check_kind(kind: int) -> None:
    if not 0 <= kind < KIND_COUNT:
        raise ValueError(f"unknown tetromino kind {kind}")


def shape(kind: int, rotation: int) -> Shape:
    """Return the cell matrix of a tetromino kind in a given rotation."""
    _check_kind(kind)
    if not 0 <= rotation < ROTATION_COUNT:
        raise ValueError(f"rotation must be 0-3, got {rotation}")
    return ALL_TETROMINOES[kind][rotation]


def piece_color(kind: int) -> Color:
    """Return the colour of a tetromino kind."""
    _check_kind(kind)
    return PIECE_COLORS[kind]


def generate_random_tetromino(state, rng: random.Random | None = None) -> None:
    """Pick a random kind, reset its rotation and make it the active piece."""
    chooser = rng if rng is not None else random
    kind = chooser.randrange(KIND_COUNT)
    state.piece_type = kind
    state.rotation = 0
    state.current_piece = shape(kind, 0)