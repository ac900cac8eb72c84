"""
Game Session

State machine for a single game: holds the hidden target, records attempts
and decides when the game is won or exhausted.
"""

import threading
from dataclasses import replace
from enum import Enum
from typing import Optional

from ..config.game_settings import WORD_LENGTH, MAX_ATTEMPTS
from ..models.game import GameState, GameStatus
from .evaluator import MatchPolicy, evaluate, is_winning_row


class GuessRejection(Enum):
    """Reasons a submitted word does not consume an attempt."""
    INVALID_LENGTH = "invalid_length"
    UNKNOWN_WORD = "unknown_word"

    def message(self, word: str, word_length: int = WORD_LENGTH) -> str:
        if self is GuessRejection.INVALID_LENGTH:
            return f"Guess must be {word_length} letters"
        return f'"{word.upper()}" is not a valid word!'


class GameSession:
    """
    Controller for one game.

    The word source is injected so games can be played against fixed targets.
    Every transition replaces ``state`` with a new snapshot; rejected guesses
    are reported through ``state.transient_error`` and never raise.
    """

    def __init__(self, word_source, word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS,
                 match_policy: MatchPolicy = MatchPolicy.NAIVE):
        self.word_source = word_source
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.match_policy = match_policy
        # Transitions may come from request handlers and the error-dismiss task
        self._lock = threading.Lock()
        self._start()

    def _start(self) -> None:
        self._target = self.word_source.choose_random_target_word().lower()
        self._state = GameState.initial(self.word_length, self.max_attempts)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def answer(self) -> Optional[str]:
        """The target word, revealed only once the game is over."""
        return self._target if self._state.is_terminal else None

    def check_guess(self, word: str) -> Optional[GuessRejection]:
        """Validates a normalised guess without touching the state."""
        if len(word) != self.word_length:
            return GuessRejection.INVALID_LENGTH
        if not self.word_source.is_valid_word(word):
            return GuessRejection.UNKNOWN_WORD
        return None

    def submit_guess(self, word: str) -> GameState:
        """
        Evaluates a guess and advances the game.

        Args:
            word: The guessed word, any case, surrounding whitespace ignored

        Returns:
            The new state. Terminal games return their state unchanged.
        """
        with self._lock:
            return self._submit_guess(word)

    def _submit_guess(self, word: str) -> GameState:
        state = self._state
        if state.is_terminal:
            return state

        guess = (word or "").strip().lower()
        rejection = self.check_guess(guess)
        if rejection is not None:
            self._state = state.with_error(rejection.message(guess, self.word_length))
            return self._state

        row = evaluate(guess, self._target, self.match_policy)
        history = list(state.history)
        history[state.attempt_index] = row
        attempt_index = state.attempt_index + 1

        # Win is checked before exhaustion so a correct final guess still wins
        if is_winning_row(row):
            status = GameStatus.WON
        elif attempt_index >= self.max_attempts:
            status = GameStatus.EXHAUSTED
        else:
            status = GameStatus.ACTIVE

        self._state = replace(
            state,
            attempt_index=attempt_index,
            history=tuple(history),
            status=status,
            transient_error=None,
        )
        return self._state

    def clear_error(self) -> GameState:
        with self._lock:
            if self._state.transient_error is not None:
                self._state = self._state.with_error(None)
            return self._state

    def reset(self) -> GameState:
        """Starts over with a freshly drawn target."""
        with self._lock:
            self._start()
            return self._state
