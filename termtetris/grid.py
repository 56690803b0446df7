"""The playfield of locked cells."""

from __future__ import annotations

from dataclasses import dataclass

from termtetris.screen import BLANK, BLOCK, Color, Style


@dataclass(frozen=True)
class Cell:
    """One playfield cell: whether it is filled and with which colour."""

    filled: bool = False
    color: Color = Color.DEFAULT


class Grid:
    """A width-by-height field of cells, indexed as data[row][column]."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.data: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    def reset(self) -> None:
        """Empty every cell."""
        for row in self.data:
            row[:] = [Cell()] * self.width

    def draw(self, screen, start_x: int, start_y: int, style: Style) -> None:
        """Render the field with its top-left corner just inside (start_x, start_y)."""
        for i, row in enumerate(self.data):
            for j, cell in enumerate(row):
                x = start_x + j + 1
                y = start_y + i + 1
                if cell.filled:
                    screen.set_content(x, y, BLOCK, style.foreground(cell.color))
                else:
                    screen.set_content(x, y, BLANK, style.background(Color.DARK_GRAY))