"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess, merge_letter_status
from .input_controller import handle_key
from .round_coordinator import RoundCoordinator
from .word_service import WordServiceClient, WordServiceError
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate_guess', 'merge_letter_status',
    'handle_key',
    'RoundCoordinator',
    'WordServiceClient', 'WordServiceError',
    'GameService', 'get_game_service', 'initialize_game_service'
]
