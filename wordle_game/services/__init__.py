"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import MatchPolicy, evaluate, is_winning_row
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession, GuessRejection
from .vocabulary import Vocabulary, load_vocabulary

__all__ = [
    'MatchPolicy', 'evaluate', 'is_winning_row',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession', 'GuessRejection',
    'Vocabulary', 'load_vocabulary'
]
