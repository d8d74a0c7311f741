"""
Turn handling for the Battlesnake API.

info/start/end/get_move map one-to-one onto the HTTP endpoints. get_move
does the "avoid certain death" filtering; picking among the surviving
moves is delegated to a Player.
"""
import logging
from typing import Dict, List, Optional

from .grid import Grid
from .models import GameState
from .movement import Direction, is_safe, resolve

logger = logging.getLogger(__name__)

# Sent when every move is fatal
FALLBACK_MOVE = Direction.UP.value


def info(config) -> dict:
    """
    Appearance and API version, returned from GET /.

    Args:
        config: ServerConfig (author, color, head, tail)
    """
    logger.info("INFO")
    return {
        'apiversion': '1',
        'author': config.author,
        'color': config.color,
        'head': config.head,
        'tail': config.tail,
    }


def start(state: GameState):
    ruleset = state.game.ruleset
    logger.info(f"GAME START {state.game.id}: ruleset={ruleset.name} "
                f"board={state.board.width}x{state.board.height} "
                f"hazard_damage={ruleset.settings.hazard_damage_per_turn}")


def end(state: GameState):
    alive = [s.id for s in state.board.snakes]
    outcome = 'won' if alive == [state.you.id] else 'lost' if state.you.id not in alive else 'draw'
    logger.info(f"GAME OVER {state.game.id} after {state.turn} turns: {outcome}")


def move_safety(state: GameState, grid: Grid) -> Dict[str, bool]:
    """
    Work out which of the four moves avoid certain death.

    The move back onto the neck is ruled out first. Every other move is
    checked with is_safe() on its destination; a move with no destination
    (off a non-wrapped board) is unsafe.

    Returns:
        dict: move name -> safe
    """
    you = state.you
    head = you.body[0] if you.body else you.head
    neck = you.body[1] if len(you.body) > 1 else None

    safety = {}
    for direction in Direction:
        destination = resolve(head, direction, grid.width, grid.height, grid.wrapped)
        if destination is None:
            safety[direction.value] = False
        elif neck is not None and neck != head and destination == neck:
            safety[direction.value] = False
        else:
            safety[direction.value] = is_safe(destination.x, destination.y, grid)
    return safety


def safe_moves(state: GameState, grid: Grid) -> List[str]:
    return [move for move, safe in move_safety(state, grid).items() if safe]


def get_move(state: GameState, player, grid: Optional[Grid] = None) -> dict:
    """
    Choose this turn's move.

    Args:
        state: Parsed request body
        player: Player used to pick among safe moves
        grid: Prebuilt grid for this state (built here if None)

    Returns:
        dict: {'move': ..., 'shout': ...} response body
    """
    if grid is None:
        grid = Grid.from_game_state(state)
    logger.debug(f"turn {state.turn} board looks like this:\n{grid}")

    candidates = safe_moves(state, grid)
    if candidates:
        chosen = player.choose(candidates)
        shout = ''
    else:
        chosen = FALLBACK_MOVE
        shout = 'no safe moves'
        logger.warning(f"turn {state.turn}: no safe moves, defaulting to {chosen}")

    logger.info(f"MOVE {state.turn}: {chosen} (safe: {candidates})")
    return {'move': chosen, 'shout': shout}
