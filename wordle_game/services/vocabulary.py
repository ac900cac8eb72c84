"""
Vocabulary Service

Word source consumed by game sessions: validates guesses and draws targets.
"""

import random
from typing import Iterable, Optional

from ..config.game_settings import load_answer_words, load_allowed_words


class Vocabulary:
    """
    Accepted words and possible targets.

    Any object exposing ``is_valid_word`` and ``choose_random_target_word``
    can stand in for this class when constructing a game session.
    """

    def __init__(self, answers: Iterable[str], allowed: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self.answers = [word.lower() for word in answers]
        if not self.answers:
            raise ValueError("Vocabulary needs at least one answer word")
        self.accepted = frozenset(self.answers) | {word.lower() for word in allowed}
        self._rng = rng or random.Random()

    def is_valid_word(self, word: str) -> bool:
        return word.lower() in self.accepted

    def choose_random_target_word(self) -> str:
        return self._rng.choice(self.answers)

    def __len__(self) -> int:
        return len(self.accepted)


def load_vocabulary(rng: Optional[random.Random] = None) -> Vocabulary:
    """Builds the vocabulary from the word lists shipped with the package."""
    return Vocabulary(load_answer_words(), load_allowed_words(), rng=rng)
