"""A falling-block puzzle game for the terminal, with a curses front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]