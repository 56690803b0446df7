"""Character-cell drawing primitives and an in-memory screen."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

BLOCK = "█"
BLANK = " "
CLEAR_LENGTH = 30


class Color(Enum):
    """Colours used by the game."""

    DEFAULT = "default"
    RESET = "reset"
    WHITE = "white"
    TURQUOISE = "turquoise"
    YELLOW = "yellow"
    PURPLE = "purple"
    GREEN = "green"
    RED = "red"
    BLUE = "blue"
    ORANGE = "orange"
    DARK_GRAY = "darkgray"
    DARK_CYAN = "darkcyan"


@dataclass(frozen=True)
class Style:
    """An immutable foreground/background colour pair."""

    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT

    def foreground(self, color: Color) -> Style:
        """Return a copy of this style with the foreground replaced."""
        return replace(self, fg=color)

    def background(self, color: Color) -> Style:
        """Return a copy of this style with the background replaced."""
        return replace(self, bg=color)


class Canvas:
    """A screen that keeps its cells in memory."""

    def __init__(self) -> None:
        self.style = Style()
        self.show_count = 0
        self.finished = False
        self._cells: dict[tuple[int, int], tuple[str, Style]] = {}

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        """Put a single character with a style at (x, y)."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._cells[(x, y)] = (char, style)

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style at (x, y)."""
        return self._cells.get((x, y), (BLANK, self.style))

    def clear(self) -> None:
        """Blank every cell."""
        self._cells.clear()

    def show(self) -> None:
        """Mark the current contents as presented."""
        self.show_count += 1

    def fini(self) -> None:
        """Shut the screen down."""
        self.finished = True

    def row_text(self, y: int, start: int, end: int) -> str:
        """Return the characters of row y from column start up to end."""
        return "".join(self.get_content(x, y)[0] for x in range(start, end))


def draw_text(screen, x: int, y: int, text: str, style: Style) -> None:
    """Blank a fixed-width stretch of a line, then write text over it."""
    for offset in range(CLEAR_LENGTH):
        screen.set_content(x + offset, y, BLANK, style)
    for offset, char in enumerate(text):
        screen.set_content(x + offset, y, char, style)