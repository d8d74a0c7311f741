"""
Tests for ServerConfig.
"""
import logging
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from server.config import ServerConfig
from server.players import FirstSafePlayer, RandomPlayer, create_player


class TestServerConfig:
    """Tests for building the config."""

    def test_defaults(self):
        """Test default values."""
        config = ServerConfig()
        assert config.port == 8000
        assert config.log_level == 'INFO'
        assert config.log_level_value == logging.INFO
        assert config.player == 'random'
        assert config.seed is None

    def test_from_env(self):
        """Test that environment variables are read."""
        env = {
            'PORT': '9001',
            'LOG_LEVEL': 'debug',
            'CORS_ORIGINS': 'http://a.test, http://b.test',
            'SNAKE_PLAYER': 'first',
            'SNAKE_SEED': '42',
            'SNAKE_COLOR': '#00ff00',
        }
        config = ServerConfig.from_env(env)
        assert config.port == 9001
        assert config.log_level == 'DEBUG'
        assert config.cors_origins == ['http://a.test', 'http://b.test']
        assert config.player == 'first'
        assert config.seed == 42
        assert config.color == '#00ff00'

    def test_overrides_beat_env(self):
        """Test that command-line overrides win and None is ignored."""
        config = ServerConfig.from_env({'PORT': '9001'}, port=7000, host=None)
        assert config.port == 7000
        assert config.host == '0.0.0.0'

    def test_wildcard_origins(self):
        """Test that '*' allows every origin."""
        config = ServerConfig.from_env({'CORS_ORIGINS': '*'})
        assert config.cors_origins == '*'

    def test_empty_env_uses_defaults(self):
        """Test that an empty environment gives the defaults."""
        assert ServerConfig.from_env({}) == ServerConfig()

    def test_invalid_port(self):
        """Test that bad ports are rejected."""
        with pytest.raises(ValueError):
            ServerConfig(port='abc')
        with pytest.raises(ValueError):
            ServerConfig(port=70000)

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValueError):
            ServerConfig(log_level='LOUD')

    def test_invalid_player(self):
        """Test that unknown players are rejected."""
        with pytest.raises(ValueError):
            ServerConfig(player='minimax')

    def test_from_dict_ignores_unknown_keys(self):
        """Test that extra keys are dropped."""
        config = ServerConfig.from_dict({'port': 8080, 'unused': True})
        assert config.port == 8080


class TestPlayers:
    """Tests for the tie-break players."""

    def test_factory(self):
        """Test that the factory builds each player."""
        assert isinstance(create_player('random'), RandomPlayer)
        assert isinstance(create_player('first'), FirstSafePlayer)

    def test_factory_unknown(self):
        """Test that unknown names raise."""
        with pytest.raises(ValueError):
            create_player('minimax')

    def test_first_safe_order(self):
        """Test that the first player follows up, down, left, right order."""
        player = FirstSafePlayer()
        assert player.choose(['right', 'left']) == 'left'
        assert player.choose(['down', 'up']) == 'up'

    def test_random_player_is_reproducible(self):
        """Test that the same seed gives the same choices regardless of input order."""
        a = RandomPlayer(seed=3)
        b = RandomPlayer(seed=3)
        picks_a = [a.choose(['up', 'left', 'right']) for _ in range(20)]
        picks_b = [b.choose(['right', 'up', 'left']) for _ in range(20)]
        assert picks_a == picks_b
        assert set(picks_a) <= {'up', 'left', 'right'}
