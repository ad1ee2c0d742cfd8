"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and dialog texts (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_GUESSES, DELETE_KEY, SUBMIT_KEY,
    LENGTH_MESSAGE, INVALID_WORD_MESSAGE, LOAD_ERROR_MESSAGE, WIN_MESSAGE, lose_message
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'DELETE_KEY', 'SUBMIT_KEY',
    'LENGTH_MESSAGE', 'INVALID_WORD_MESSAGE', 'LOAD_ERROR_MESSAGE', 'WIN_MESSAGE', 'lose_message'
]
