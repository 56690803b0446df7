from unittest import mock

import pytest

from termtetris.keys import (
    Key,
    KeyEvent,
    QuitGame,
    handle_game_input,
    handle_game_over_input,
)
from termtetris.screen import Canvas
from termtetris.state import init_game_state
from termtetris.stats import reset_game_stats


@pytest.fixture
def state():
    s = init_game_state(Canvas())
    reset_game_stats(s)
    return s


def test_right_moves_piece(state):
    before = state.start_x
    handle_game_input(KeyEvent(Key.RIGHT), state)
    assert state.start_x == before + 1
    assert state.screen.show_count == 1


def test_left_moves_piece(state):
    before = state.start_x
    handle_game_input(KeyEvent(Key.LEFT), state)
    assert state.start_x == before - 1


def test_left_blocked_by_wall(state):
    state.start_x = 6
    handle_game_input(KeyEvent(Key.LEFT), state)
    assert state.start_x == 6
    assert state.new_x == 5


def test_down_moves_and_scores(state):
    before_y, before_score = state.start_y, state.score
    handle_game_input(KeyEvent(Key.DOWN), state)
    assert state.start_y == before_y + 1
    assert state.score == before_score + 1


def test_down_blocked_at_floor_keeps_score(state):
    state.start_y = 6 + state.grid.height - 2
    handle_game_input(KeyEvent(Key.DOWN), state)
    assert state.start_y == 6 + state.grid.height - 2
    assert state.score == 0


def test_up_rotates(state):
    handle_game_input(KeyEvent(Key.UP), state)
    assert state.rotation == 1


def test_other_rune_does_nothing(state):
    handle_game_input(KeyEvent(Key.RUNE, "x"), state)
    assert state.screen.show_count == 0
    assert state.screen.finished is False


@pytest.mark.parametrize("rune", ["q", "Q"])
def test_q_quits_during_play(state, rune):
    with pytest.raises(QuitGame):
        handle_game_input(KeyEvent(Key.RUNE, rune), state)
    assert state.screen.finished is True
    text = "Q pressed. Exiting."
    assert state.screen.row_text(1, 2, 2 + len(text)) == text


@pytest.mark.parametrize("rune", ["s", "S"])
@mock.patch("termtetris.keys.time.sleep")
def test_s_requests_restart(sleep, state, rune):
    handle_game_over_input(KeyEvent(Key.RUNE, rune), state)
    assert state.take_restart() is True
    text = "Restarting game..."
    assert state.screen.row_text(4, 4, 4 + len(text)) == text
    sleep.assert_called_once()


def test_q_quits_after_game_over(state):
    with pytest.raises(QuitGame):
        handle_game_over_input(KeyEvent(Key.RUNE, "q"), state)
    assert state.screen.finished is True


def test_escape_closes_screen_after_game_over(state):
    handle_game_over_input(KeyEvent(Key.ESCAPE), state)
    assert state.screen.finished is True
    assert state.take_restart() is False


def test_arrow_ignored_after_game_over(state):
    handle_game_over_input(KeyEvent(Key.LEFT), state)
    assert state.take_restart() is False
    assert state.screen.finished is False