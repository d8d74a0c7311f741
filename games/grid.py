"""
Per-turn grid snapshot of the board.

The wire format lists food, hazards and snake bodies as coordinate lists.
The Grid turns them into one dense array indexed by coordinate so move
checks are a single lookup:

    index = x * height + y

Hazard sums and food flags live in numpy arrays; occupants are kept in a
parallel list of snake snapshots. A Grid is built fresh from each request
and never updated afterwards.
"""
import logging
from typing import Iterator, List, Optional

import numpy as np

from .models import Battlesnake, Board, Coord, GameState

logger = logging.getLogger(__name__)

# Largest cell count addressable by the engine's unsigned 32-bit coordinates
MAX_CELLS = 2 ** 32 - 1


class GridError(Exception):
    """Raised for boards that cannot be indexed or out-of-range lookups."""
    pass


class Cell:
    """
    Read-only view of one coordinate in a Grid.

    Attributes:
        coord: The coordinate this cell describes
        snake: Copy of the snake covering this cell, or None
        hazard: Summed hazard damage; negative values heal
        food: Whether food sits on this cell
    """

    __slots__ = ('coord', 'snake', 'hazard', 'food')

    def __init__(self, coord: Coord, snake: Optional[Battlesnake], hazard: int, food: bool):
        self.coord = coord
        self.snake = snake
        self.hazard = hazard
        self.food = food

    @property
    def occupied(self) -> bool:
        return self.snake is not None

    @property
    def symbol(self) -> str:
        """Single character used by Grid.render()."""
        if self.snake is not None:
            return 's'
        if self.food:
            return 'F' if self.hazard > 0 else 'f'
        if self.hazard > 0:
            return 'h'
        return 'x'

    def __repr__(self):
        return (f"Cell(coord={self.coord!r}, snake={self.snake.id if self.snake else None!r}, "
                f"hazard={self.hazard}, food={self.food})")


class Grid:
    """
    Dense snapshot of a board for a single turn.

    Args:
        board: Board payload for this turn
        hazard_damage: Damage added per hazard entry (negative for healing)
        wrapped: Whether moves off one edge re-enter on the opposite edge

    Raises:
        GridError: If the dimensions are not positive, the cell count does
            not fit the index type, or any listed coordinate is off the board
    """

    def __init__(self, board: Board, hazard_damage: int = 0, wrapped: bool = False):
        width, height = board.width, board.height
        if width <= 0 or height <= 0:
            raise GridError(f"Board dimensions must be positive, got {width}x{height}")
        if width * height > MAX_CELLS:
            raise GridError(f"Board {width}x{height} has more than {MAX_CELLS} cells")

        self.width = width
        self.height = height
        self.wrapped = wrapped
        self.hazard_damage = hazard_damage

        size = width * height
        self._hazard = np.zeros(size, dtype=np.int64)
        self._food = np.zeros(size, dtype=bool)
        self._snakes: List[Optional[Battlesnake]] = [None] * size

        for food in board.food:
            self._food[self._index(food)] = True

        # Repeated hazard entries stack
        for hazard in board.hazards:
            self._hazard[self._index(hazard)] += hazard_damage

        # Later snakes overwrite earlier ones on shared cells
        for snake in board.snakes:
            snapshot = snake.snapshot()
            for segment in snake.body:
                self._snakes[self._index(segment)] = snapshot

    @classmethod
    def from_game_state(cls, state: GameState) -> "Grid":
        """Build the grid for a request, reading hazard damage and topology from the ruleset."""
        ruleset = state.game.ruleset
        return cls(
            state.board,
            hazard_damage=ruleset.settings.hazard_damage_per_turn,
            wrapped=ruleset.is_wrapped,
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, coord: Coord) -> int:
        if not self.in_bounds(coord.x, coord.y):
            raise GridError(f"{coord} is outside the {self.width}x{self.height} board")
        return coord.x * self.height + coord.y

    def _cell_at(self, index: int) -> Cell:
        x, y = divmod(index, self.height)
        snake = self._snakes[index]
        # Each lookup gets its own copy
        if snake is not None:
            snake = snake.snapshot()
        return Cell(Coord(x, y), snake, int(self._hazard[index]), bool(self._food[index]))

    def get_cell(self, coord: Coord) -> Cell:
        """
        Look up the cell at coord.

        Callers must bounds-check first; an off-board coordinate is a
        programming error and raises GridError.
        """
        return self._cell_at(self._index(coord))

    def find_cell(self, coord: Coord) -> Optional[Cell]:
        """Like get_cell, but returns None for off-board coordinates."""
        if not self.in_bounds(coord.x, coord.y):
            return None
        return self._cell_at(coord.x * self.height + coord.y)

    def cells(self) -> Iterator[Cell]:
        """Iterate every cell in index order."""
        for index in range(len(self)):
            yield self._cell_at(index)

    def __len__(self) -> int:
        return self.width * self.height

    def render(self) -> str:
        """
        Text picture of the board, top row first.

        Symbols by priority: s (snake), F (food in hazard), f (food),
        h (hazard), x (empty).
        """
        rows = []
        for y in range(self.height - 1, -1, -1):
            row = ''.join(self.get_cell(Coord(x, y)).symbol + ' ' for x in range(self.width))
            rows.append(row)
        return '\n'.join(rows)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height}, wrapped={self.wrapped})"
