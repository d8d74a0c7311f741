"""Board model, movement rules and turn logic."""

from .grid import Cell, Grid, GridError
from .models import Battlesnake, Board, Coord, Game, GameState, PayloadError, Ruleset
from .movement import Direction, apply_move, is_safe, resolve

__all__ = [
    "Battlesnake",
    "Board",
    "Cell",
    "Coord",
    "Direction",
    "Game",
    "GameState",
    "Grid",
    "GridError",
    "PayloadError",
    "Ruleset",
    "apply_move",
    "is_safe",
    "resolve",
]
