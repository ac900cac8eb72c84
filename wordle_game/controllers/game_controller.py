"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from ..config.game_settings import get_word_statistics
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state

game_bp = Blueprint('game', __name__)


def _log_game_over(game_id, session, guess):
    state = session.state
    if state.won:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            attempts_used=state.attempt_index, target_word=session.answer,
            winning_guess=guess
        )
    elif state.exhausted:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            attempts_used=state.attempt_index, target_word=session.answer,
            final_guess=guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        session = game_service.get_session(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_state(session),
            'error_display_seconds': current_app.config['ERROR_DISPLAY_SECONDS']
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=session.word_length, max_attempts=session.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, session):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    response_data = {
        'success': True,
        'state': serialize_state(session)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        attempt_index=session.state.attempt_index, game_over=session.state.is_terminal
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, session):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        if session.state.is_terminal:
            error_response = {
                'success': False,
                'error': 'Game is already over',
                'state': serialize_state(session)
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        state = session.submit_guess(guess)
        if state.transient_error:
            error_response = {
                'success': False,
                'error': state.transient_error,
                'state': serialize_state(session)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=state.transient_error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': serialize_state(session)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempt=state.attempt_index, game_over=state.is_terminal
        )
        _log_game_over(game_id, session, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/clear_error', methods=['POST'])
@require_game
def clear_error(game_id, session):
    """Dismiss the message of the last rejected guess."""
    game_logger.log_user_action(request, 'clear_error', game_id)

    session.clear_error()
    response_data = {
        'success': True,
        'state': serialize_state(session)
    }

    game_logger.log_server_response(request, 'clear_error', True, response_data, game_id)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, session):
    """Start a fresh game with a new target under the same game id."""
    game_logger.log_user_action(request, 'reset_game', game_id)

    previous_answer = session.answer
    session.reset()
    response_data = {
        'success': True,
        'state': serialize_state(session)
    }

    game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
    game_logger.log_game_event(game_id, 'game_reset', request.remote_addr, previous_answer=previous_answer)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'games': len(game_service.games) if game_service else 0,
            'active_games': game_service.active_games if game_service else 0,
            'vocabulary_size': len(game_service.vocabulary) if game_service else 0,
            'answer_statistics': get_word_statistics(game_service.vocabulary.answers) if game_service else {},
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
