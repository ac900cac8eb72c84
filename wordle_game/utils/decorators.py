"""
Game Lookup Decorators

Contains decorators resolving the game session for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game(f):
    """
    Decorator for HTTP endpoints taking a ``game_id`` URL parameter.

    The resolved session is passed to the view as ``session``.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        session = game_service.get_session(game_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        kwargs['session'] = session
        return f(game_id, *args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload carries a ``game_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')

        session = game_service.get_session(game_id) if game_service and game_id else None
        if session is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        kwargs['game_id'] = game_id
        kwargs['session'] = session
        return f(*args, **kwargs)

    return decorated_function
