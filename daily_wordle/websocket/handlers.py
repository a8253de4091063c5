"""
WebSocket Event Handlers

Exposes the game actions as Socket.IO events. Every accepted action answers
the caller with a fresh 'game_state_update'; rejected actions answer with
'error'.
"""

from flask import request
from flask_socketio import emit
from ..models.errors import GuessError
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state, serialize_outcome, serialize_hint


def _emit_state(game_service, game_id, **extra):
    state = game_service.get_game_state(game_id)
    payload = {'success': True, 'state': serialize_state(state), **extra}
    emit('game_state_update', payload)
    return state


def _emit_rejection(action, game_id, error: GuessError):
    payload = error.to_dict()
    payload['game_id'] = game_id
    game_logger.log_server_response(request, action, False, payload, game_id,
                                    validation_error=error.code, transport='websocket')
    emit('error', payload)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection; games stay available for reconnects."""
        game_logger.logger.info(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game for the calling client."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'success': False, 'error': 'Game service unavailable'})
            return

        game_logger.log_user_action(request, 'new_game', transport='websocket')

        game_id = game_service.create_new_game()
        _emit_state(game_service, game_id, game_id=game_id)

    @socketio.on('enter_letter')
    @websocket_game_required
    def handle_enter_letter(data, game_service=None, game_id=None):
        column = data.get('column')
        letter = data.get('letter', '')
        game_logger.log_user_action(request, 'enter_letter', game_id,
                                    column=column, transport='websocket')
        try:
            game_service.enter_letter(game_id, column, letter)
        except GuessError as e:
            _emit_rejection('enter_letter', game_id, e)
            return
        _emit_state(game_service, game_id)

    @socketio.on('erase_letter')
    @websocket_game_required
    def handle_erase_letter(data, game_service=None, game_id=None):
        column = data.get('column')
        game_logger.log_user_action(request, 'erase_letter', game_id,
                                    column=column, transport='websocket')
        try:
            game_service.erase_letter(game_id, column)
        except GuessError as e:
            _emit_rejection('erase_letter', game_id, e)
            return
        _emit_state(game_service, game_id)

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, transport='websocket')
        try:
            outcome = game_service.make_guess(game_id, guess)
        except GuessError as e:
            _emit_rejection('submit_guess', game_id, e)
            return

        state = _emit_state(game_service, game_id, result=serialize_outcome(outcome))
        if state.answer is not None:
            event = 'game_won' if outcome.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rows_used=state.current_row, hints_used=state.hints_used,
                target_word=state.answer
            )

    @socketio.on('request_hint')
    @websocket_game_required
    def handle_request_hint(data, game_service=None, game_id=None):
        game_logger.log_user_action(request, 'request_hint', game_id, transport='websocket')
        try:
            hint = game_service.request_hint(game_id)
        except GuessError as e:
            _emit_rejection('request_hint', game_id, e)
            return

        state = _emit_state(game_service, game_id, hint=serialize_hint(hint))
        game_logger.log_game_event(
            game_id, 'hint_revealed', request.remote_addr,
            row=hint.row, column=hint.column, hints_remaining=state.hints_remaining
        )

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, game_service=None, game_id=None):
        game_logger.log_user_action(request, 'reset_game', game_id, transport='websocket')
        game_service.reset_game(game_id)
        _emit_state(game_service, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
