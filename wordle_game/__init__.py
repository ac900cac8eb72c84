"""
Wordle Game Server Application Package

Single-player Wordle: a pure guess evaluator, a per-game state machine and
thin HTTP and WebSocket layers exposing game state to a client.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, vocabulary=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        vocabulary: Word source for new games, defaults to the shipped word lists

    Returns:
        Flask application instance and its SocketIO extension
    """
    from .services.evaluator import MatchPolicy
    from .services.game_service import initialize_game_service
    from .utils.game_logger import game_logger

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])
    initialize_game_service(
        vocabulary,
        max_attempts=app.config['MAX_ATTEMPTS'],
        match_policy=MatchPolicy(app.config['MATCH_POLICY'])
    )

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    app.socketio = socketio

    return app, socketio
