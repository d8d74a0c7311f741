"""
Wire data model for the Battlesnake API.

Every turn the game engine sends the full game state as JSON. These
dataclasses mirror that payload one-to-one so the rest of the code works
with attributes instead of nested dicts.

Example:
    >>> state = GameState.from_dict(request.get_json())
    >>> state.board.width, state.you.head
    (11, Coord(x=5, y=5))
"""
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional


class PayloadError(ValueError):
    """Raised when a wire payload is missing fields or has invalid values."""
    pass


def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, dict):
        raise PayloadError(f"{where} must be an object")
    if key not in data:
        raise PayloadError(f"{where} is missing '{key}'")
    return data[key]


def _int(value: Any, name: str, minimum: Optional[int] = None) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"{name} must be an integer")
    if minimum is not None and value < minimum:
        raise PayloadError(f"{name} must be at least {minimum}")
    return value


def _list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise PayloadError(f"{name} must be a list")
    return value


def _dict(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadError(f"{name} must be an object")
    return value


@dataclass(frozen=True)
class Coord:
    """A board coordinate. (0, 0) is the bottom-left corner."""
    x: int
    y: int

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_dict(cls, data: Any) -> "Coord":
        x = _int(_require(data, 'x', 'coord'), 'coord.x', minimum=0)
        y = _int(_require(data, 'y', 'coord'), 'coord.y', minimum=0)
        return cls(x, y)


def _coords(value: Any, name: str) -> List[Coord]:
    return [Coord.from_dict(item) for item in _list(value, name)]


@dataclass
class Battlesnake:
    """
    One snake as reported by the engine.

    Attributes:
        id: Unique snake id for this game
        name: Display name
        health: Remaining health, 0..100
        body: Segments head first; a freshly grown snake repeats its tail
        head: Same coordinate as body[0] on the wire
        length: Segment count as tracked by the engine
        latency: Last response latency in ms, sent as a string
        shout: Optional message shouted last turn
        squad: Squad id in squad games, empty otherwise
    """
    id: str
    name: str
    health: int
    body: List[Coord]
    head: Coord
    length: int
    latency: str = '0'
    shout: Optional[str] = None
    squad: str = ''

    def snapshot(self) -> "Battlesnake":
        """Return a copy that shares no mutable state with this snake."""
        return replace(self, body=list(self.body))

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'health': self.health,
            'body': [c.to_dict() for c in self.body],
            'head': self.head.to_dict(),
            'length': self.length,
            'latency': self.latency,
            'shout': self.shout,
            'squad': self.squad,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Battlesnake":
        health = _int(_require(data, 'health', 'snake'), 'snake.health', minimum=0)
        if health > 100:
            raise PayloadError("snake.health must be at most 100")
        body = _coords(_require(data, 'body', 'snake'), 'snake.body')
        if 'head' in data:
            head = Coord.from_dict(data['head'])
        elif body:
            head = body[0]
        else:
            raise PayloadError("snake needs a head or a non-empty body")
        length = _int(data.get('length', len(body)), 'snake.length', minimum=0)
        latency = data.get('latency', '0')
        return cls(
            id=str(_require(data, 'id', 'snake')),
            name=str(data.get('name', '')),
            health=health,
            body=body,
            head=head,
            length=length,
            latency=str(latency) if latency is not None else '0',
            shout=data.get('shout') or None,
            squad=str(data.get('squad') or ''),
        )


@dataclass
class Board:
    """
    The board as sent for one turn. Order is preserved everywhere:
    repeated hazard entries stack, and later snakes win shared cells.
    """
    width: int
    height: int
    food: List[Coord] = field(default_factory=list)
    hazards: List[Coord] = field(default_factory=list)
    snakes: List[Battlesnake] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'width': self.width,
            'height': self.height,
            'food': [c.to_dict() for c in self.food],
            'hazards': [c.to_dict() for c in self.hazards],
            'snakes': [s.to_dict() for s in self.snakes],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Board":
        return cls(
            width=_int(_require(data, 'width', 'board'), 'board.width', minimum=1),
            height=_int(_require(data, 'height', 'board'), 'board.height', minimum=1),
            food=_coords(data.get('food', []), 'board.food'),
            hazards=_coords(data.get('hazards', []), 'board.hazards'),
            snakes=[Battlesnake.from_dict(s) for s in _list(data.get('snakes', []), 'board.snakes')],
        )


@dataclass
class RoyaleSettings:
    shrink_every_n_turns: int = 0

    def to_dict(self) -> dict:
        return {'shrinkEveryNTurns': self.shrink_every_n_turns}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RoyaleSettings":
        data = _dict(data, 'royale')
        return cls(shrink_every_n_turns=_int(data.get('shrinkEveryNTurns', 0), 'royale.shrinkEveryNTurns'))


@dataclass
class SquadSettings:
    allow_body_collisions: bool = False
    shared_elimination: bool = False
    shared_health: bool = False
    shared_length: bool = False

    def to_dict(self) -> dict:
        return {
            'allowBodyCollisions': self.allow_body_collisions,
            'sharedElimination': self.shared_elimination,
            'sharedHealth': self.shared_health,
            'sharedLength': self.shared_length,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SquadSettings":
        data = _dict(data, 'squad')
        return cls(
            allow_body_collisions=bool(data.get('allowBodyCollisions', False)),
            shared_elimination=bool(data.get('sharedElimination', False)),
            shared_health=bool(data.get('sharedHealth', False)),
            shared_length=bool(data.get('sharedLength', False)),
        )


@dataclass
class RulesetSettings:
    """
    Ruleset settings. Only hazard_damage_per_turn feeds the grid; the rest
    is parsed so the state can be logged and echoed back intact.

    hazard_damage_per_turn is signed: negative values are healing pools.
    """
    food_spawn_chance: int = 0
    minimum_food: int = 0
    hazard_damage_per_turn: int = 0
    royale: RoyaleSettings = field(default_factory=RoyaleSettings)
    squad: SquadSettings = field(default_factory=SquadSettings)

    def to_dict(self) -> dict:
        return {
            'foodSpawnChance': self.food_spawn_chance,
            'minimumFood': self.minimum_food,
            'hazardDamagePerTurn': self.hazard_damage_per_turn,
            'royale': self.royale.to_dict(),
            'squad': self.squad.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RulesetSettings":
        data = _dict(data, 'settings')
        return cls(
            food_spawn_chance=_int(data.get('foodSpawnChance', 0), 'settings.foodSpawnChance'),
            minimum_food=_int(data.get('minimumFood', 0), 'settings.minimumFood'),
            hazard_damage_per_turn=_int(data.get('hazardDamagePerTurn', 0), 'settings.hazardDamagePerTurn'),
            royale=RoyaleSettings.from_dict(data.get('royale')),
            squad=SquadSettings.from_dict(data.get('squad')),
        )


@dataclass
class Ruleset:
    name: str = 'standard'
    version: str = ''
    settings: RulesetSettings = field(default_factory=RulesetSettings)

    @property
    def is_wrapped(self) -> bool:
        """Wrapped games connect opposite board edges."""
        return self.name == 'wrapped'

    def to_dict(self) -> dict:
        return {'name': self.name, 'version': self.version, 'settings': self.settings.to_dict()}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Ruleset":
        data = _dict(data, 'ruleset')
        return cls(
            name=str(data.get('name', 'standard')),
            version=str(data.get('version', '')),
            settings=RulesetSettings.from_dict(data.get('settings')),
        )


@dataclass
class Game:
    id: str
    ruleset: Ruleset = field(default_factory=Ruleset)
    timeout: int = 500
    source: str = ''

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'ruleset': self.ruleset.to_dict(),
            'timeout': self.timeout,
            'source': self.source,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Game":
        return cls(
            id=str(_require(data, 'id', 'game')),
            ruleset=Ruleset.from_dict(data.get('ruleset')),
            timeout=_int(data.get('timeout', 500), 'game.timeout', minimum=0),
            source=str(data.get('source', '')),
        )


@dataclass
class GameState:
    """The full request body of /start, /move and /end."""
    game: Game
    turn: int
    board: Board
    you: Battlesnake

    def to_dict(self) -> dict:
        return {
            'game': self.game.to_dict(),
            'turn': self.turn,
            'board': self.board.to_dict(),
            'you': self.you.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GameState":
        return cls(
            game=Game.from_dict(_require(data, 'game', 'request')),
            turn=_int(data.get('turn', 0), 'turn', minimum=0),
            board=Board.from_dict(_require(data, 'board', 'request')),
            you=Battlesnake.from_dict(_require(data, 'you', 'request')),
        )
