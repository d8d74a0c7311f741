"""
Tests for parsing the wire payload.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from games.models import Battlesnake, Board, Coord, GameState, PayloadError, Ruleset


EXAMPLE_MOVE = {
    'game': {
        'id': 'totally-unique-game-id',
        'ruleset': {
            'name': 'royale',
            'version': 'v1.2.3',
            'settings': {
                'foodSpawnChance': 25,
                'minimumFood': 1,
                'hazardDamagePerTurn': 14,
                'royale': {'shrinkEveryNTurns': 5},
                'squad': {
                    'allowBodyCollisions': False,
                    'sharedElimination': False,
                    'sharedHealth': False,
                    'sharedLength': False,
                },
            },
        },
        'timeout': 500,
        'source': 'league',
    },
    'turn': 14,
    'board': {
        'height': 11,
        'width': 11,
        'food': [{'x': 5, 'y': 5}, {'x': 9, 'y': 0}, {'x': 2, 'y': 6}],
        'hazards': [{'x': 3, 'y': 2}],
        'snakes': [
            {
                'id': 'snake-508e96ac-94ad-11ea-bb37',
                'name': 'My Snake',
                'health': 54,
                'body': [{'x': 0, 'y': 0}, {'x': 1, 'y': 0}, {'x': 2, 'y': 0}],
                'latency': '111',
                'head': {'x': 0, 'y': 0},
                'length': 3,
                'shout': 'why are we shouting??',
                'squad': '',
            },
        ],
    },
    'you': {
        'id': 'snake-508e96ac-94ad-11ea-bb37',
        'name': 'My Snake',
        'health': 54,
        'body': [{'x': 0, 'y': 0}, {'x': 1, 'y': 0}, {'x': 2, 'y': 0}],
        'latency': '111',
        'head': {'x': 0, 'y': 0},
        'length': 3,
        'shout': 'why are we shouting??',
        'squad': '',
    },
}


class TestGameStateParsing:
    """Tests for GameState.from_dict."""

    def test_example_payload(self):
        """Test that the documented example move request parses."""
        state = GameState.from_dict(EXAMPLE_MOVE)
        assert state.turn == 14
        assert state.game.ruleset.name == 'royale'
        assert state.game.ruleset.settings.hazard_damage_per_turn == 14
        assert state.game.ruleset.settings.royale.shrink_every_n_turns == 5
        assert state.board.food[0] == Coord(5, 5)
        assert state.you.head == Coord(0, 0)
        assert state.you.latency == '111'
        assert state.you.shout == 'why are we shouting??'

    def test_round_trip_preserves_wire_keys(self):
        """Test that to_dict emits the same camelCase structure."""
        state = GameState.from_dict(EXAMPLE_MOVE)
        assert state.to_dict() == EXAMPLE_MOVE

    def test_missing_settings_default(self):
        """Test that an absent settings block yields zero hazard damage."""
        ruleset = Ruleset.from_dict({'name': 'standard'})
        assert ruleset.settings.hazard_damage_per_turn == 0
        assert not ruleset.is_wrapped

    def test_wrapped_ruleset(self):
        """Test that only the 'wrapped' ruleset name enables wrapping."""
        assert Ruleset.from_dict({'name': 'wrapped'}).is_wrapped
        assert not Ruleset.from_dict({'name': 'wrapped-constrictor'}).is_wrapped

    def test_negative_hazard_damage_allowed(self):
        """Test that healing pools parse as negative damage."""
        ruleset = Ruleset.from_dict({'name': 'standard', 'settings': {'hazardDamagePerTurn': -5}})
        assert ruleset.settings.hazard_damage_per_turn == -5


class TestPayloadErrors:
    """Tests for malformed payloads."""

    def test_string_coordinate_fails(self):
        """Test that non-integer coordinates are rejected."""
        with pytest.raises(PayloadError):
            Coord.from_dict({'x': '1', 'y': 0})

    def test_boolean_coordinate_fails(self):
        """Test that booleans are not accepted as integers."""
        with pytest.raises(PayloadError):
            Coord.from_dict({'x': True, 'y': 0})

    def test_missing_id_fails(self):
        """Test that a snake without an id is rejected."""
        with pytest.raises(PayloadError):
            Battlesnake.from_dict({'health': 10, 'body': [{'x': 0, 'y': 0}]})

    def test_snake_without_head_or_body_fails(self):
        """Test that a snake needs somewhere to be."""
        with pytest.raises(PayloadError):
            Battlesnake.from_dict({'id': 'a', 'health': 10, 'body': []})

    def test_payload_error_is_value_error(self):
        """Test that callers can catch PayloadError as ValueError."""
        with pytest.raises(ValueError):
            Board.from_dict({'width': 11})


class TestSnapshot:
    """Tests for Battlesnake.snapshot."""

    def test_snapshot_is_independent(self):
        """Test that mutating the original leaves the snapshot alone."""
        snake = Battlesnake.from_dict(EXAMPLE_MOVE['you'])
        copy = snake.snapshot()
        snake.body.pop()
        snake.health = 1
        assert len(copy.body) == 3
        assert copy.health == 54
        assert copy == Battlesnake.from_dict(EXAMPLE_MOVE['you'])
