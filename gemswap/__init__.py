"""A match-three gem swapping puzzle game: board logic, game states and pygame drawing."""

__version__ = "0.1.0"