"""A terminal minesweeper game: board logic, game messages, view helpers and the application."""

__version__ = "0.1.0"
__all__ = ["__version__"]