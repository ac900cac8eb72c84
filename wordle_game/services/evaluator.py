"""
Guess Evaluator

Maps a submitted word and the hidden target to one verdict per letter.
"""

from collections import Counter
from enum import Enum

from ..models.game import AttemptRow, LetterVerdict


class MatchPolicy(Enum):
    """How repeated letters are matched against the target."""
    # Plain membership test: every occurrence of a letter found in the
    # target is marked present, however often the target contains it.
    NAIVE = "naive"
    # Target occurrences are consumed by exact hits first, then by
    # misplaced letters from left to right.
    FREQUENCY = "frequency"


def evaluate(submission: str, target: str, policy: MatchPolicy = MatchPolicy.NAIVE) -> AttemptRow:
    """
    Compares a submission to the target letter by letter.

    Both words must have the same length; callers validate this upstream.

    Args:
        submission: The guessed word
        target: The hidden word
        policy: Letter matching policy for repeated letters

    Returns:
        AttemptRow with one LetterVerdict per position
    """
    if policy is MatchPolicy.FREQUENCY:
        return _evaluate_with_frequency(submission, target)

    return tuple(
        LetterVerdict(
            index=index,
            letter=letter,
            exact_match=target[index] == letter,
            present=bool(letter) and letter in target,
            blank=not letter,
        )
        for index, letter in enumerate(submission)
    )


def _evaluate_with_frequency(submission: str, target: str) -> AttemptRow:
    # Letters of the target not claimed by an exact hit
    remaining = Counter(
        expected for expected, letter in zip(target, submission) if expected != letter
    )

    verdicts = []
    for index, letter in enumerate(submission):
        exact = target[index] == letter
        present = exact
        if not exact and remaining[letter] > 0:
            present = True
            remaining[letter] -= 1
        verdicts.append(LetterVerdict(
            index=index,
            letter=letter,
            exact_match=exact,
            present=bool(letter) and present,
            blank=not letter,
        ))
    return tuple(verdicts)


def is_winning_row(row: AttemptRow) -> bool:
    """True when every letter of the row sits in its exact position."""
    return bool(row) and all(verdict.exact_match for verdict in row)
