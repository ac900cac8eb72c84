"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, asdict, field, replace
from enum import Enum
from typing import Dict, Optional, Tuple


class GameStatus(Enum):
    """Progression state of a single game."""
    ACTIVE = "ACTIVE"
    WON = "WON"
    EXHAUSTED = "EXHAUSTED"


@dataclass(frozen=True)
class LetterVerdict:
    """One evaluated letter position of an attempt."""
    index: int
    letter: str
    exact_match: bool = False
    present: bool = False
    blank: bool = False


# One evaluated attempt, one verdict per letter position
AttemptRow = Tuple[LetterVerdict, ...]


def placeholder_row(word_length: int) -> AttemptRow:
    """Row of blank verdicts used for attempts not yet made."""
    return tuple(LetterVerdict(index=i, letter="", blank=True) for i in range(word_length))


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game.

    ``won`` and ``exhausted`` are projections of ``status`` and cannot be
    set on their own. Transitions produce new instances through ``replace``.
    """
    attempt_index: int
    history: Tuple[AttemptRow, ...]
    status: GameStatus = GameStatus.ACTIVE
    transient_error: Optional[str] = None
    max_attempts: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'max_attempts', len(self.history))

    @classmethod
    def initial(cls, word_length: int, max_attempts: int) -> "GameState":
        return cls(
            attempt_index=0,
            history=tuple(placeholder_row(word_length) for _ in range(max_attempts)),
        )

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def exhausted(self) -> bool:
        return self.status is GameStatus.EXHAUSTED

    @property
    def is_terminal(self) -> bool:
        return self.status is not GameStatus.ACTIVE

    def with_error(self, message: Optional[str]) -> "GameState":
        return replace(self, transient_error=message)

    def to_dict(self) -> Dict:
        """JSON-ready representation including the derived flags."""
        data = asdict(self)
        data['status'] = self.status.value
        data['history'] = [[asdict(verdict) for verdict in row] for row in self.history]
        data['won'] = self.won
        data['exhausted'] = self.exhausted
        data['game_over'] = self.is_terminal
        return data
