"""
Game Lookup Decorators

Contains decorators that resolve the game service for HTTP and WebSocket
handlers before the handler body runs.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the view as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events that act on an existing game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'success': False, 'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'success': False, 'error': 'Game ID is required'})
            return

        if game_service.get_engine(game_id) is None:
            emit('error', {'success': False, 'error': 'Game not found', 'game_id': game_id})
            return

        kwargs['game_service'] = game_service
        kwargs['game_id'] = game_id
        return f(*args, **kwargs)

    return decorated_function
