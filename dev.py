"""One-command developer entrypoint.

Builds the server configuration from the environment plus command-line
flags and starts the Battlesnake server. Press Ctrl+C to stop.

Environment variables: HOST, PORT, LOG_LEVEL, CORS_ORIGINS, SNAKE_PLAYER,
SNAKE_SEED, SNAKE_AUTHOR, SNAKE_COLOR, SNAKE_HEAD, SNAKE_TAIL.
"""
from __future__ import annotations

import argparse
import logging
import sys

from server.app import configure_logging, create_app, socketio
from server.config import VALID_LOG_LEVELS, VALID_PLAYERS, ServerConfig

logger = logging.getLogger('snakegrid')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Battlesnake server")
    parser.add_argument("--host", default=None, help="Interface to bind (env: HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (env: PORT)")
    parser.add_argument("--log-level", choices=VALID_LOG_LEVELS, default=None, help="Log level (env: LOG_LEVEL)")
    parser.add_argument("--player", choices=VALID_PLAYERS, default=None, help="Tie-break policy (env: SNAKE_PLAYER)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random player (env: SNAKE_SEED)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        config = ServerConfig.from_env(
            host=args.host,
            port=args.port,
            log_level=args.log_level,
            player=args.player,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"[dev] Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(config)
    app = create_app(config)

    logger.info(f"Starting Battlesnake server on http://{config.host}:{config.port} (player: {config.player})")
    socketio.run(
        app,
        host=config.host,
        port=config.port,
        debug=False,
        use_reloader=args.reload,
        log_output=False,
        allow_unsafe_werkzeug=True
    )


if __name__ == "__main__":
    main()
