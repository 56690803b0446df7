"""Terminal front end: a curses screen and the input loop."""

from __future__ import annotations

import argparse
import curses
import locale
import threading
import time

from termtetris.game import initialize_game
from termtetris.keys import Key, KeyEvent, QuitGame, handle_game_input, handle_game_over_input
from termtetris.screen import Color, Style
from termtetris.state import init_game_state

POLL_INTERVAL = 0.02
ESCAPE_CODE = 27

_ARROWS = {
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_UP: Key.UP,
}


def translate_key(code: int) -> KeyEvent | None:
    """Turn a curses key code into a game key event, or None if it has no meaning."""
    if code in _ARROWS:
        return KeyEvent(_ARROWS[code])
    if code == ESCAPE_CODE:
        return KeyEvent(Key.ESCAPE)
    if 32 <= code <= 126:
        return KeyEvent(Key.RUNE, chr(code))
    return None


class CursesScreen:
    """A screen drawn with curses, safe to use from several threads."""

    def __init__(self) -> None:
        self.style = Style()
        self.finished = False
        self._lock = threading.Lock()
        self._pairs: dict[tuple[int, int], int] = {}
        self._window = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self._window.keypad(True)
            self._window.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self._colors = curses.has_colors()
            self._default_colors = False
            if self._colors:
                curses.start_color()
                try:
                    curses.use_default_colors()
                    self._default_colors = True
                except curses.error:
                    pass
        except Exception:
            curses.endwin()
            raise

    def _color_number(self, color: Color, fallback: int) -> int:
        rich = curses.COLORS >= 256
        table = {
            Color.WHITE: curses.COLOR_WHITE,
            Color.TURQUOISE: curses.COLOR_CYAN,
            Color.YELLOW: curses.COLOR_YELLOW,
            Color.PURPLE: curses.COLOR_MAGENTA,
            Color.GREEN: curses.COLOR_GREEN,
            Color.RED: curses.COLOR_RED,
            Color.BLUE: curses.COLOR_BLUE,
            Color.ORANGE: 208 if rich else curses.COLOR_YELLOW,
            Color.DARK_GRAY: 240 if rich else (8 if curses.COLORS >= 16 else curses.COLOR_BLACK),
            Color.DARK_CYAN: curses.COLOR_CYAN,
        }
        if color in table:
            return table[color]
        return -1 if self._default_colors else fallback

    def _attr(self, style: Style) -> int:
        if not self._colors:
            return 0
        key = (
            self._color_number(style.fg, curses.COLOR_WHITE),
            self._color_number(style.bg, curses.COLOR_BLACK),
        )
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return 0
            try:
                curses.init_pair(pair, *key)
            except curses.error:
                return 0
            self._pairs[key] = pair
        return curses.color_pair(pair)

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        """Put a single character with a style at (x, y)."""
        with self._lock:
            if self.finished:
                return
            try:
                self._window.addstr(y, x, char, self._attr(style))
            except curses.error:
                pass

    def clear(self) -> None:
        """Blank the whole screen."""
        with self._lock:
            if not self.finished:
                self._window.erase()

    def show(self) -> None:
        """Push pending drawing to the terminal."""
        with self._lock:
            if not self.finished:
                self._window.refresh()

    def fini(self) -> None:
        """Restore the terminal; later drawing is ignored."""
        with self._lock:
            if self.finished:
                return
            self.finished = True
            try:
                self._window.keypad(False)
                curses.nocbreak()
                curses.echo()
            finally:
                curses.endwin()

    def _read_key(self) -> int | None:
        with self._lock:
            if self.finished:
                return None
            code = self._window.getch()
        return None if code == -1 else code


def main(argv=None) -> int:
    """Play the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="termtetris",
        description="Falling-block puzzle game. Arrows move and rotate, Q quits; "
        "after a game over, S restarts.",
    )
    parser.parse_args(argv)

    locale.setlocale(locale.LC_ALL, "")
    screen = CursesScreen()
    state = None
    try:
        state = init_game_state(screen)
        initialize_game(state)
        while not screen.finished:
            if state.take_restart():
                initialize_game(state)
                continue
            code = screen._read_key()
            if code is None:
                time.sleep(POLL_INTERVAL)
                continue
            event = translate_key(code)
            if event is None:
                continue
            if state.game_over:
                handle_game_over_input(event, state)
            else:
                handle_game_input(event, state)
    except (QuitGame, KeyboardInterrupt):
        pass
    finally:
        if state is not None:
            state.game_running = False
        screen.fini()
    return 0