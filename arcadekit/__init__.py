"""Console games (number baseball, bingo, a drawing board) and a minimal 2D actor and collision toolkit."""

__version__ = "0.1.0"

__all__ = [
    "actors",
    "baseball",
    "bingo",
    "drawboard",
    "entities",
    "geometry",
    "keys",
    "timing",
]