"""
Game Controller

Handles all round-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..services.hint_service import get_hint_service
from ..utils.decorators import require_game, require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _state_response(game_service, target_id, **extra):
    state = game_service.get_game_state(target_id)
    return {'success': True, 'state': asdict(state), **extra}, state


def _error(action, message, status, game_id=None, **details):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **details)
    return jsonify(error_response), status


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game():
    """Create a new round with a random or named animal."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True) or {}
        animal = data.get('animal')

        game_logger.log_user_action(request, 'new_game', requested_animal=animal)

        game_id = game_service.create_new_game(animal)
        if game_id is None:
            if animal:
                return _error('new_game', 'Animal not found', 404, requested_animal=animal)
            return _error('new_game', 'No animals available', 500)

        response_data, state = _state_response(game_service, game_id, game_id=game_id)

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id):
    """Get current round state."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'get_state', game_id)

        response_data, state = _state_response(game_service, game_id)

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_attempt=state.current_attempt, game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game
def type_letter(game_id):
    """Append one letter to the current guess."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        game_logger.log_user_action(request, 'type_letter', game_id, letter=letter)

        if not isinstance(letter, str) or not game_service.type_letter(game_id, letter):
            return _error('type_letter', 'Letter rejected', 400, game_id, letter=letter)

        response_data, _ = _state_response(game_service, game_id)
        game_logger.log_server_response(request, 'type_letter', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'type_letter', game_id)
        return _error('type_letter', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['DELETE'])
@require_game
def delete_letter(game_id):
    """Remove the last letter of the current guess."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'delete_letter', game_id)

        if not game_service.delete_letter(game_id):
            return _error('delete_letter', 'Nothing to delete', 400, game_id)

        response_data, _ = _state_response(game_service, game_id)
        game_logger.log_server_response(request, 'delete_letter', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_letter', game_id)
        return _error('delete_letter', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id):
    """Apply a keyboard key (letter, DEL/BACKSPACE or ENTER)."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True) or {}
        key = data.get('key')
        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        if not isinstance(key, str) or not key.strip():
            return _error('press_key', 'Key is required', 400, game_id)

        if key.strip().upper() in ('ENTER', 'RETURN') and not game_service.can_submit(game_id):
            state = game_service.get_game_state(game_id)
            message = 'Game is already over' if state.game_over else 'Not enough letters!'
            return _error('press_key', message, 400, game_id)

        accepted = game_service.press_key(game_id, key)
        response_data, _ = _state_response(game_service, game_id, accepted=accepted)
        game_logger.log_server_response(request, 'press_key', True, response_data, game_id, key=key)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'press_key', game_id)
        return _error('press_key', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def submit_guess(game_id):
    """Submit the buffered guess, or a whole word passed as ``guess``."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True) or {}
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        state = game_service.get_game_state(game_id)
        if state.game_over:
            return _error('submit_guess', 'Game is already over', 400, game_id)

        if guess is not None:
            if not isinstance(guess, str):
                return _error('submit_guess', 'Guess must be a valid string', 400, game_id)
            normalized = guess.strip()
            if len(normalized) != state.word_length:
                return _error('submit_guess', f'Guess must be exactly {state.word_length} letters',
                              400, game_id, attempted_guess=guess)
            if not normalized.isalpha() or not normalized.isascii():
                return _error('submit_guess', 'Guess must contain only letters',
                              400, game_id, attempted_guess=guess)
            result = game_service.submit_word(game_id, normalized)
        else:
            result = game_service.submit_guess(game_id)

        if result is None:
            return _error('submit_guess', 'Not enough letters!', 400, game_id)

        response_data, state = _state_response(game_service, game_id, result=result.to_pairs())

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.word, attempt=state.current_attempt, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/hint', methods=['GET'])
@require_game
def get_hint(game_id):
    """Fetch a hint about the round's animal (blocking; WebSocket clients use request_hint)."""
    try:
        game_service = get_game_service()
        hint_service = get_hint_service()
        game_logger.log_user_action(request, 'get_hint', game_id)

        configured = hint_service is not None and hint_service.is_configured()
        hint = game_service.get_hint(game_id)
        if hint is None:
            hint = hint_service.fallback_hint() if hint_service else ''

        response_data = {
            'success': True,
            'hint': hint,
            'configured': configured
        }
        game_logger.log_server_response(request, 'get_hint', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'hint_served', request.remote_addr, configured=configured)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_hint', game_id)
        return _error('get_hint', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id):
    """Delete a round."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {'success': success}

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/animals', methods=['GET'])
@require_game_service
def list_animals():
    """List the playable animal names."""
    try:
        game_service = get_game_service()
        game_logger.log_user_action(request, 'list_animals')

        names = [animal.name for animal in game_service.word_store.get_all()]
        response_data = {'success': True, 'animals': names}

        game_logger.log_server_response(request, 'list_animals', True, response_data, count=len(names))
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'list_animals')
        return _error('list_animals', str(e), 500)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        hint_service = get_hint_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'hints_configured': hint_service.is_configured() if hint_service else False
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
