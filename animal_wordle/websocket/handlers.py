"""
WebSocket Event Handlers

Real-time key input and non-blocking hint delivery for a round.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.hint_service import get_hint_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} connected")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a round's room and receive its state."""
        game_id = data['game_id']
        join_room(_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a round's room."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(_room(game_id))

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game_service=None):
        """Apply one key and broadcast the new state to the round's room."""
        game_id = data['game_id']
        key = data.get('key')

        game_logger.log_user_action(request, 'key_press', game_id, key=key, transport='websocket')

        game_round = game_service.get_round(game_id)
        if game_round is None:
            emit('error', {'error': 'Game not found'})
            return

        was_over = game_round.is_over
        accepted = game_service.press_key(game_id, key)
        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        if not accepted and isinstance(key, str) and key.strip().upper() in ('ENTER', 'RETURN') and not was_over:
            emit('error', {'error': 'Not enough letters!'})

        payload = {
            'success': True,
            'accepted': accepted,
            'state': asdict(state)
        }
        emit('game_state_update', payload)
        emit('game_state_update', payload, room=_room(game_id), include_self=False)

    @socketio.on('request_hint')
    @websocket_game_required
    def handle_request_hint(data, game_service=None):
        """Fetch a hint in a background task so key input is never blocked."""
        game_id = data['game_id']
        sid = request.sid

        game_logger.log_user_action(request, 'request_hint', game_id, transport='websocket')

        game_round = game_service.get_round(game_id)
        if game_round is None:
            emit('error', {'error': 'Game not found'})
            return

        if game_round.is_over:
            emit('hint', {'game_id': game_id, 'hint': game_service.get_hint(game_id)})
            return

        hint_service = get_hint_service()
        if hint_service is None or not hint_service.is_configured():
            emit('hint', {
                'game_id': game_id,
                'hint': "⚠️ Animal API key not configured. Set ANIMAL_API_KEY.",
                'configured': False
            })
            return

        emit('hint_loading', {'game_id': game_id})

        def fetch_hint():
            hint = game_service.get_hint(game_id)
            socketio.emit('hint', {'game_id': game_id, 'hint': hint, 'configured': True}, to=sid)
            game_logger.log_game_event(game_id, 'hint_served', 'system', transport='websocket')

        socketio.start_background_task(fetch_hint)

