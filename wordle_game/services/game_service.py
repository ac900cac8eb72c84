"""
Game Service

Keeps the single-player game sessions of the server, keyed by game id.
"""

import uuid
from typing import Dict, Optional

from ..config.game_settings import WORD_LENGTH, MAX_ATTEMPTS
from .evaluator import MatchPolicy
from .game_session import GameSession
from .vocabulary import Vocabulary, load_vocabulary


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target selection through the shared vocabulary
    - Keeping target words on the server side
    """

    def __init__(self, vocabulary: Vocabulary, max_attempts: int = MAX_ATTEMPTS,
                 match_policy: MatchPolicy = MatchPolicy.NAIVE):
        self.vocabulary = vocabulary
        self.max_attempts = max_attempts
        self.match_policy = match_policy
        self.games: Dict[str, GameSession] = {}

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameSession(
            self.vocabulary,
            word_length=WORD_LENGTH,
            max_attempts=self.max_attempts,
            match_policy=self.match_policy,
        )
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    @property
    def active_games(self) -> int:
        return sum(1 for session in self.games.values() if not session.state.is_terminal)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(vocabulary: Optional[Vocabulary] = None,
                            max_attempts: int = MAX_ATTEMPTS,
                            match_policy: MatchPolicy = MatchPolicy.NAIVE) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(
        vocabulary if vocabulary is not None else load_vocabulary(),
        max_attempts=max_attempts,
        match_policy=match_policy,
    )
    return _game_service
