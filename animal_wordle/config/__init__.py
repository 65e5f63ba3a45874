"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the seed animal list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, ANIMAL_LIST, FALLBACK_HINT, MAX_ATTEMPTS,
    validate_animal_list_integrity, get_animal_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'ANIMAL_LIST', 'FALLBACK_HINT', 'MAX_ATTEMPTS',
    'validate_animal_list_integrity', 'get_animal_statistics'
]
