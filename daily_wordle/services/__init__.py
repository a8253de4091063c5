"""
Services Package

Contains all business logic and service classes.
"""

from .guess_engine import GuessEngine, evaluate_guess, validate_word
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GuessEngine', 'evaluate_guess', 'validate_word',
    'GameService', 'get_game_service', 'initialize_game_service'
]
