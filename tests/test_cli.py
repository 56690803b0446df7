import curses

import pytest

from termtetris.cli import translate_key
from termtetris.keys import Key, KeyEvent


@pytest.mark.parametrize(
    ("code", "key"),
    [
        (curses.KEY_RIGHT, Key.RIGHT),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_UP, Key.UP),
    ],
)
def test_arrow_keys(code, key):
    assert translate_key(code) == KeyEvent(key)


def test_escape_key():
    assert translate_key(27) == KeyEvent(Key.ESCAPE)


@pytest.mark.parametrize("char", ["q", "Q", "s", "S", " "])
def test_printable_characters_become_runes(char):
    assert translate_key(ord(char)) == KeyEvent(Key.RUNE, char)


@pytest.mark.parametrize("code", [-1, curses.KEY_RESIZE, 0, 127])
def test_meaningless_codes_are_dropped(code):
    assert translate_key(code) is None