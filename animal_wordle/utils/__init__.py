"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_game, require_game_service, websocket_game_required
from .helpers import get_user_identity, normalize_name
from .game_logger import game_logger

__all__ = ['require_game', 'require_game_service', 'websocket_game_required',
           'get_user_identity', 'normalize_name', 'game_logger']
