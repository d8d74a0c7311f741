"""
Flask server for the Battlesnake API.

Routes:
    GET  /       appearance and API version
    POST /start  a game is starting
    POST /move   choose this turn's move
    POST /end    a game has finished

Each /move also emits a 'board_update' Socket.IO event with the rendered
board so a local viewer can follow games live.
"""
import sys
import os
import logging
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO

from games import logic
from games.grid import Grid, GridError
from games.models import PayloadError
from server.config import ServerConfig
from server.players import Player, create_player
from server.validation import validate_game_state, validate_move

SERVER_ID = 'battlesnake/github/snakegrid-python'

logger = logging.getLogger('snakegrid')

socketio = SocketIO()


def configure_logging(config: ServerConfig):
    """Set up logging once at process start."""
    logging.basicConfig(
        level=config.log_level_value,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    logger.setLevel(config.log_level_value)

    # Reduce noise from Flask and SocketIO internals
    logging.getLogger('werkzeug').setLevel(logging.ERROR)
    logging.getLogger('socketio').setLevel(logging.ERROR)
    logging.getLogger('engineio').setLevel(logging.ERROR)


def create_app(config: Optional[ServerConfig] = None, player: Optional[Player] = None) -> Flask:
    """
    Factory function for the Flask app.

    Args:
        config: Server configuration (defaults if None)
        player: Tie-break player (built from config if None)

    Returns:
        Flask app with Socket.IO attached
    """
    config = config or ServerConfig()
    player = player or create_player(config.player, config.seed)

    app = Flask(__name__)
    app.config['SNAKE_CONFIG'] = config
    CORS(app, resources={r"/*": {"origins": config.cors_origins}})
    socketio.init_app(app, cors_allowed_origins=config.cors_origins)

    def parse_request():
        is_valid, error, state = validate_game_state(request.get_json(silent=True))
        if not is_valid:
            logger.warning(f"[{request.path}] Rejected request: {error}")
        return state, error

    @app.after_request
    def add_server_header(response):
        response.headers['Server'] = SERVER_ID
        return response

    @app.route('/')
    def handle_index():
        return jsonify(logic.info(config))

    @app.route('/start', methods=['POST'])
    def handle_start():
        state, error = parse_request()
        if state is None:
            return jsonify({'error': error}), 400
        logic.start(state)
        return '', 200

    @app.route('/move', methods=['POST'])
    def handle_move():
        state, error = parse_request()
        if state is None:
            return jsonify({'error': error}), 400

        try:
            grid = Grid.from_game_state(state)
            response = logic.get_move(state, player, grid)
        except (GridError, PayloadError) as e:
            logger.exception(f"[MOVE] Turn {state.turn} of game {state.game.id} failed: {e}")
            return jsonify({'error': str(e)}), 400

        is_valid, error = validate_move(response['move'])
        if not is_valid:
            # Players must only return moves from the safe list
            logger.error(f"[MOVE] {error}, sending {logic.FALLBACK_MOVE}")
            response['move'] = logic.FALLBACK_MOVE

        socketio.emit('board_update', {
            'game_id': state.game.id,
            'turn': state.turn,
            'board': grid.render(),
            'move': response['move'],
        })
        return jsonify(response)

    @app.route('/end', methods=['POST'])
    def handle_end():
        state, error = parse_request()
        if state is None:
            return jsonify({'error': error}), 400
        logic.end(state)
        return '', 200

    return app

