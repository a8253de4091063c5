"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import GuessError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state, serialize_outcome, serialize_hint

game_bp = Blueprint('game', __name__)


def _json_body():
    """Request body as a dict; anything that is not a JSON object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _rejected(action, game_id, error: GuessError):
    error_response = error.to_dict()
    game_logger.log_server_response(
        request, action, False, error_response, game_id,
        validation_error=error.code
    )
    return jsonify(error_response), 400


def _failed(action, game_id, error: Exception):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            row_count=state.row_count, row_length=state.row_length
        )

        return jsonify(response_data)

    except Exception as e:
        return _failed('new_game', None, e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        return _failed('get_state', game_id, e)


@game_bp.route('/game/<game_id>/cells/<int:column>', methods=['PUT'])
@require_game_service
def enter_letter(game_id, column, game_service):
    """Type a letter into a cell of the active row."""
    try:
        data = _json_body()
        letter = data.get('letter', '')

        game_logger.log_user_action(request, 'enter_letter', game_id, column=column)

        try:
            state = game_service.enter_letter(game_id, column, letter)
        except GuessError as e:
            return _rejected('enter_letter', game_id, e)
        if state is None:
            return _not_found('enter_letter', game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }
        game_logger.log_server_response(request, 'enter_letter', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('enter_letter', game_id, e)


@game_bp.route('/game/<game_id>/cells/<int:column>', methods=['DELETE'])
@require_game_service
def erase_letter(game_id, column, game_service):
    """Clear a cell of the active row."""
    try:
        game_logger.log_user_action(request, 'erase_letter', game_id, column=column)

        try:
            state = game_service.erase_letter(game_id, column)
        except GuessError as e:
            return _rejected('erase_letter', game_id, e)
        if state is None:
            return _not_found('erase_letter', game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }
        game_logger.log_server_response(request, 'erase_letter', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _failed('erase_letter', game_id, e)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """
    Submit a guess for evaluation.

    Without a ``guess`` field the letters already placed in the active row
    are submitted.
    """
    try:
        data = _json_body()
        guess = data.get('guess')

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess_length=len(guess) if isinstance(guess, str) else None
        )

        try:
            outcome = game_service.make_guess(game_id, guess)
        except GuessError as e:
            return _rejected('submit_guess', game_id, e)
        if outcome is None:
            return _not_found('submit_guess', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'result': serialize_outcome(outcome),
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            row=outcome.row, status=state.status
        )

        if state.status == 'WON':
            game_logger.log_game_event(
                game_id, 'game_won', request.remote_addr,
                rows_used=state.current_row, hints_used=state.hints_used,
                target_word=state.answer
            )
        elif state.status == 'LOST':
            game_logger.log_game_event(
                game_id, 'game_lost', request.remote_addr,
                rows_used=state.current_row, hints_used=state.hints_used,
                target_word=state.answer, final_guess=outcome.guess
            )

        return jsonify(response_data)

    except Exception as e:
        return _failed('submit_guess', game_id, e)


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
@require_game_service
def request_hint(game_id, game_service):
    """Reveal one letter of the target in a free cell of the active row."""
    try:
        game_logger.log_user_action(request, 'request_hint', game_id)

        try:
            hint = game_service.request_hint(game_id)
        except GuessError as e:
            return _rejected('request_hint', game_id, e)
        if hint is None:
            return _not_found('request_hint', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'hint': serialize_hint(hint),
            'state': serialize_state(state)
        }

        game_logger.log_server_response(request, 'request_hint', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'hint_revealed', request.remote_addr,
            row=hint.row, column=hint.column, hints_remaining=state.hints_remaining
        )

        return jsonify(response_data)

    except Exception as e:
        return _failed('request_hint', game_id, e)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game_service
def reset_game(game_id, game_service):
    """Start over with a new word in the same session."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        if state is None:
            return _not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _failed('reset_game', game_id, e)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
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
        return _failed('delete_game', game_id, e)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'word_count': len(game_service.word_list),
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
