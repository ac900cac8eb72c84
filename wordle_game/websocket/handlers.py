"""
WebSocket Event Handlers

Handles WebSocket events for playing a game over a persistent connection and
dismisses rejected-guess messages after a short delay.
"""

import itertools

from flask import current_app, request
from flask_socketio import emit
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state

_dismissal_tokens = itertools.count(1)

# Latest pending error dismissal per game: game_id -> token
pending_dismissals = {}

# Games created over each connection: socket_id -> set of game_ids
socket_games = {}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def dismiss_error_later(game_id, sid, delay, token):
        """Background task clearing a transient error once it has been shown long enough."""
        socketio.sleep(delay)
        if pending_dismissals.get(game_id) != token:
            return
        pending_dismissals.pop(game_id, None)

        game_service = get_game_service()
        session = game_service.get_session(game_id) if game_service else None
        if session is None or session.state.transient_error is None:
            return

        session.clear_error()
        game_logger.log_game_event(game_id, 'error_dismissed', 'system', session_id=sid)
        socketio.emit('game_state', {'game_id': game_id, 'state': serialize_state(session)}, to=sid)

    def schedule_dismissal(game_id):
        token = next(_dismissal_tokens)
        pending_dismissals[game_id] = token
        socketio.start_background_task(
            dismiss_error_later, game_id, request.sid,
            current_app.config['ERROR_DISPLAY_SECONDS'], token
        )

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Drop the games this connection created."""
        game_ids = socket_games.pop(request.sid, set())
        game_service = get_game_service()
        if not game_service:
            return

        for game_id in game_ids:
            pending_dismissals.pop(game_id, None)
            if game_service.delete_game(game_id):
                game_logger.log_game_event(
                    game_id, 'game_deleted', request.remote_addr,
                    reason='socket_disconnected', session_id=request.sid
                )

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and send its initial state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_logger.log_user_action(request, 'new_game', transport='websocket')
        game_id = game_service.create_new_game()
        socket_games.setdefault(request.sid, set()).add(game_id)
        session = game_service.get_session(game_id)
        emit('game_state', {
            'game_id': game_id,
            'state': serialize_state(session),
            'error_display_seconds': current_app.config['ERROR_DISPLAY_SECONDS']
        })

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_id=None, session=None):
        """Evaluate a guess; rejected guesses get their message cleared later."""
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required', 'game_id': game_id})
            return

        was_terminal = session.state.is_terminal
        state = session.submit_guess(guess)
        if state.transient_error:
            schedule_dismissal(game_id)
        elif not was_terminal and state.is_terminal:
            event = 'game_won' if state.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                attempts_used=state.attempt_index, target_word=session.answer
            )

        emit('game_state', {'game_id': game_id, 'state': serialize_state(session)})

    @socketio.on('clear_error')
    @websocket_game_required
    def handle_clear_error(data, game_id=None, session=None):
        """Dismiss the current error immediately."""
        pending_dismissals.pop(game_id, None)
        session.clear_error()
        emit('game_state', {'game_id': game_id, 'state': serialize_state(session)})

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, game_id=None, session=None):
        """Start a fresh game under the same id."""
        game_logger.log_user_action(request, 'reset_game', game_id, transport='websocket')
        pending_dismissals.pop(game_id, None)
        session.reset()
        emit('game_state', {'game_id': game_id, 'state': serialize_state(session)})
