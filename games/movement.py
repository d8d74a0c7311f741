"""
Movement rules: where a head ends up, whether that square is survivable,
and how a snake changes after moving there.

Coordinates on the wire are unsigned, so every edge check happens before
the +1/-1 step. resolve() returns None when a move leaves a non-wrapped
board; that is a normal (fatal) outcome, not an error.
"""
from enum import Enum
from typing import Optional

from .grid import Grid
from .models import Battlesnake, Coord

MAX_HEALTH = 100


class Direction(str, Enum):
    """The four moves accepted by the engine."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def resolve(start: Coord, direction: Direction, width: int, height: int,
            wrapped: bool = False) -> Optional[Coord]:
    """
    Compute the coordinate one step from start.

    Args:
        start: Current head position
        direction: Requested move
        width, height: Board dimensions
        wrapped: Whether edges connect (toroidal board)

    Returns:
        The destination, or None if the move leaves a non-wrapped board
    """
    x, y = start.x, start.y
    direction = Direction(direction)

    if direction is Direction.UP:
        if y == height - 1:
            return Coord(x, 0) if wrapped else None
        return Coord(x, y + 1)

    if direction is Direction.DOWN:
        if y == 0:
            return Coord(x, height - 1) if wrapped else None
        return Coord(x, y - 1)

    if direction is Direction.LEFT:
        if x == 0:
            return Coord(width - 1, y) if wrapped else None
        return Coord(x - 1, y)

    if x == width - 1:
        return Coord(0, y) if wrapped else None
    return Coord(x + 1, y)


def is_safe(x: int, y: int, grid: Grid) -> bool:
    """
    True if moving onto (x, y) is not certain death.

    Off-board squares and squares covered by any snake segment are unsafe.
    Tails that will move away this turn still count as occupied.
    """
    if not grid.in_bounds(x, y):
        return False
    return not grid.get_cell(Coord(x, y)).occupied


def apply_move(grid: Grid, snake: Battlesnake, direction: Direction) -> bool:
    """
    Move snake one step and apply food, hazard and hunger.

    The snake is mutated in place. Collisions with other snakes are not
    checked here.

    Args:
        grid: Snapshot of the board the move happens on
        snake: Snake to move
        direction: Move to make

    Returns:
        True if the snake is still alive afterwards
    """
    destination = resolve(snake.head, direction, grid.width, grid.height, grid.wrapped)
    if destination is None:
        return False

    cell = grid.get_cell(destination)
    if snake.body:
        snake.body.pop()
    snake.body.insert(0, cell.coord)
    snake.head = cell.coord

    if cell.food:
        snake.health = MAX_HEALTH
        snake.length += 1
        snake.body.append(snake.body[-1])
    elif cell.hazard > 0:
        snake.health = max(0, snake.health - cell.hazard)
    elif cell.hazard < 0:
        snake.health = min(MAX_HEALTH, snake.health - cell.hazard)
    else:
        snake.health = max(0, snake.health - 1)

    return snake.health > 0
