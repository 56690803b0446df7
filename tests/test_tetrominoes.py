import random
from types import SimpleNamespace

import pytest

from termtetris.screen import Color
from termtetris.tetrominoes import (
    KIND_COUNT,
    generate_random_tetromino,
    piece_color,
    shape,
)


def _rotate_clockwise(matrix):
    size = len(matrix)
    return tuple(
        tuple(matrix[size - 1 - col][row] for col in range(size)) for row in range(size)
    )


@pytest.mark.parametrize("kind", range(7))
@pytest.mark.parametrize("rotation", range(4))
def test_every_shape_is_square_with_four_cells(kind, rotation):
    cells = shape(kind, rotation)
    assert all(len(row) == len(cells) for row in cells)
    assert sum(sum(row) for row in cells) == 4


def test_t_piece_spawn_shape():
    assert shape(2, 0) == ((0, 1, 0), (1, 1, 1), (0, 0, 0))


def test_o_piece_does_not_change_on_rotation():
    assert len({shape(1, r) for r in range(4)}) == 1


@pytest.mark.parametrize("kind", [0, 2, 3, 4, 5, 6])
def test_next_rotation_is_clockwise_turn(kind):
    for rotation in range(4):
        assert shape(kind, (rotation + 1) % 4) == _rotate_clockwise(shape(kind, rotation))


def test_colors_follow_piece_order():
    assert [piece_color(k) for k in range(7)] == [
        Color.TURQUOISE,
        Color.YELLOW,
        Color.PURPLE,
        Color.GREEN,
        Color.RED,
        Color.BLUE,
        Color.ORANGE,
    ]


@pytest.mark.parametrize("kind,rotation", [(-1, 0), (7, 0), (0, 4), (3, -1)])
def test_invalid_shape_arguments(kind, rotation):
    with pytest.raises(ValueError):
        shape(kind, rotation)


def test_invalid_color_kind():
    with pytest.raises(ValueError):
        piece_color(KIND_COUNT)


def test_generate_sets_state_consistently():
    state = SimpleNamespace(piece_type=None, rotation=3, current_piece=None)
    generate_random_tetromino(state, random.Random(5))
    assert 0 <= state.piece_type < KIND_COUNT
    assert state.rotation == 0
    assert state.current_piece == shape(state.piece_type, 0)


def test_generate_is_deterministic_for_seed():
    first = SimpleNamespace()
    second = SimpleNamespace()
    generate_random_tetromino(first, random.Random(42))
    generate_random_tetromino(second, random.Random(42))
    assert first.piece_type == second.piece_type


def test_generate_covers_all_kinds():
    rng = random.Random(0)
    seen = set()
    for _ in range(500):
        state = SimpleNamespace()
        generate_random_tetromino(state, rng)
        seen.add(state.piece_type)
    assert seen == set(range(KIND_COUNT))