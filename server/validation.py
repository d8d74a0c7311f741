"""
Validation utilities for server-side input validation.
"""
from typing import Any, Optional, Tuple

from games.models import GameState, PayloadError


def validate_game_state(payload: Any) -> Tuple[bool, Optional[str], Optional[GameState]]:
    """
    Validate and parse a /start, /move or /end request body.

    Args:
        payload: Decoded JSON body (None if the body was not JSON)

    Returns:
        (is_valid, error_message, parsed_state)
    """
    if payload is None:
        return False, "Request body must be JSON", None

    if not isinstance(payload, dict):
        return False, "Request body must be a JSON object", None

    try:
        state = GameState.from_dict(payload)
    except PayloadError as e:
        return False, str(e), None

    board = state.board
    head = state.you.body[0] if state.you.body else state.you.head
    if head.x >= board.width or head.y >= board.height:
        return False, f"you.head ({head.x},{head.y}) is outside the {board.width}x{board.height} board", None

    return True, None, state


def validate_move(move: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a move name before it is sent back to the engine.

    Returns:
        (is_valid, error_message)
    """
    if move not in ('up', 'down', 'left', 'right'):
        return False, f"Invalid move: {move!r}"
    return True, None
