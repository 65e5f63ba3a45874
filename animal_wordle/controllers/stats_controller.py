"""
Stats Controller

Handles win/loss statistics endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
@require_game_service
def get_stats():
    """Overall totals plus per-animal counters."""
    try:
        stats_store = get_game_service().stats_store
        game_logger.log_user_action(request, 'get_stats')

        response_data = {
            'success': True,
            'totals': asdict(stats_store.get_global_totals()),
            'animals': {name: asdict(totals) for name, totals in stats_store.get_all_totals().items()}
        }

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 500


@stats_bp.route('/stats/<animal_name>', methods=['GET'])
@require_game_service
def get_animal_stats(animal_name):
    """Totals for one animal; unknown animals report zeroes."""
    try:
        stats_store = get_game_service().stats_store
        game_logger.log_user_action(request, 'get_animal_stats', animal=animal_name)

        response_data = {
            'success': True,
            'animal': animal_name.strip().upper(),
            'totals': asdict(stats_store.get_totals(animal_name))
        }

        game_logger.log_server_response(request, 'get_animal_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_animal_stats')
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'get_animal_stats', False, error_response)
        return jsonify(error_response), 500


@stats_bp.route('/stats/reset', methods=['POST'])
@require_game_service
def reset_stats():
    """Reset every counter to zero."""
    try:
        stats_store = get_game_service().stats_store
        game_logger.log_user_action(request, 'reset_stats')

        stats_store.reset_all()
        response_data = {
            'success': True,
            'totals': asdict(stats_store.get_global_totals())
        }

        game_logger.log_server_response(request, 'reset_stats', True, response_data)
        game_logger.log_game_event(None, 'stats_reset', request.remote_addr)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_stats')
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'reset_stats', False, error_response)
        return jsonify(error_response), 500
