"""
Request Decorators

Contains decorators that resolve the game service and the target round for
HTTP endpoints and WebSocket events.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit


def require_game_service(f):
    """Decorator that returns 500 when the game service is not initialized."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        if not get_game_service():
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        return f(*args, **kwargs)

    return decorated_function


def require_game(f):
    """
    Decorator for endpoints addressed by ``game_id`` that returns 404 for
    unknown games.
    """
    @wraps(f)
    @require_game_service
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        from .game_logger import game_logger

        if not get_game_service().has_game(game_id):
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, f.__name__, False, error_response, game_id)
            return jsonify(error_response), 404
        return f(game_id, *args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload carries a known ``game_id``."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        if not game_service.has_game(game_id):
            emit('error', {'error': 'Game not found'})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
