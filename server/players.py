"""
Player abstractions for picking among safe moves.

The decision layer works out which of the four moves are survivable; a
Player only breaks the tie. This keeps the safety rules in one place
whether the pick is random or scripted.
"""
import random
from abc import ABC, abstractmethod
from typing import List, Optional

from games.movement import Direction

MOVE_ORDER = [d.value for d in Direction]


class Player(ABC):
    """
    Abstract base class for all tie-break policies.

    get_move() calls choose() with at least one safe move; the "up"
    fallback for an empty list is handled there, not here.
    """

    @abstractmethod
    def choose(self, safe_moves: List[str]) -> str:
        """
        Pick one move.

        Args:
            safe_moves: Non-empty list of move names ("up", "down", ...)

        Returns:
            str: One element of safe_moves
        """
        pass

    @property
    def name(self) -> str:
        return type(self).__name__


class RandomPlayer(Player):
    """Uniform random choice. Pass a seed for reproducible games."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choose(self, safe_moves: List[str]) -> str:
        return self._rng.choice(sorted(safe_moves, key=MOVE_ORDER.index))


class FirstSafePlayer(Player):
    """Deterministic: first safe move in up, down, left, right order."""

    def choose(self, safe_moves: List[str]) -> str:
        return min(safe_moves, key=MOVE_ORDER.index)


def create_player(name: str = 'random', seed: Optional[int] = None) -> Player:
    """
    Factory function for tie-break players.

    Args:
        name: 'random' or 'first'
        seed: RNG seed for the random player

    Returns:
        Player instance
    """
    if name == 'random':
        return RandomPlayer(seed)
    if name == 'first':
        return FirstSafePlayer()
    raise ValueError(f"Unknown player: {name}")
