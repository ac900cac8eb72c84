import threading

import pytest

from conftest import FixedWordSource
from wordle_game.config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from wordle_game.models.game import GameStatus, placeholder_row
from wordle_game.services.evaluator import MatchPolicy
from wordle_game.services.game_session import GameSession, GuessRejection


NON_WINNING = ["tiger", "alter", "later", "crane", "speed", "stone"]


@pytest.fixture
def session(word_source):
    return GameSession(word_source)


def test_initial_state(session):
    state = session.state
    assert state.attempt_index == 0
    assert state.status is GameStatus.ACTIVE
    assert not state.won and not state.exhausted
    assert state.transient_error is None
    assert len(state.history) == MAX_ATTEMPTS
    assert all(row == placeholder_row(WORD_LENGTH) for row in state.history)
    assert all(v.blank and v.letter == "" for v in state.history[0])
    assert session.answer is None


def test_accepted_guess_fills_one_slot(session):
    state = session.submit_guess("tiger")
    assert state.attempt_index == 1
    assert [v.letter for v in state.history[0]] == list("tiger")
    assert state.history[1] == placeholder_row(WORD_LENGTH)
    assert state.status is GameStatus.ACTIVE


def test_guess_is_normalised(session):
    state = session.submit_guess("  TIGER ")
    assert state.attempt_index == 1
    assert "".join(v.letter for v in state.history[0]) == "tiger"


@pytest.mark.parametrize("word, message", [
    ("tig", "Guess must be 5 letters"),
    ("tigers", "Guess must be 5 letters"),
    ("", "Guess must be 5 letters"),
    ("zzzzz", '"ZZZZZ" is not a valid word!'),
])
def test_rejected_guess_keeps_history(session, word, message):
    session.submit_guess("tiger")
    before = session.state

    after = session.submit_guess(word)

    assert after.transient_error == message
    assert after.attempt_index == before.attempt_index
    assert after.history == before.history
    assert after.status is GameStatus.ACTIVE


def test_check_guess(session):
    assert session.check_guess("tig") is GuessRejection.INVALID_LENGTH
    assert session.check_guess("qwert") is GuessRejection.UNKNOWN_WORD
    assert session.check_guess("crane") is None


def test_accepted_guess_clears_error(session):
    session.submit_guess("qwert")
    assert session.state.transient_error

    state = session.submit_guess("crane")
    assert state.transient_error is None


def test_winning_guess(session):
    state = session.submit_guess("alert")
    assert state.won
    assert not state.exhausted
    assert state.attempt_index == 1
    assert all(v.exact_match for v in state.history[0])
    assert session.answer == "alert"


def test_exhausted_after_max_attempts(session):
    for word in NON_WINNING:
        state = session.submit_guess(word)

    assert state.exhausted
    assert not state.won
    assert state.attempt_index == MAX_ATTEMPTS
    assert session.answer == "alert"


def test_win_on_final_attempt_takes_priority(session):
    for word in NON_WINNING[:-1]:
        session.submit_guess(word)

    state = session.submit_guess("alert")

    assert state.attempt_index == MAX_ATTEMPTS
    assert state.won
    assert not state.exhausted


@pytest.mark.parametrize("finish", [["alert"], NON_WINNING])
def test_submission_after_terminal_is_noop(session, finish):
    for word in finish:
        session.submit_guess(word)
    final = session.state

    assert session.submit_guess("crane") is final
    assert session.submit_guess("xx") is final
    assert session.state.transient_error is None


def test_clear_error_is_idempotent(session):
    session.submit_guess("xx")
    state = session.clear_error()
    assert state.transient_error is None
    assert session.clear_error() is state


def test_clear_error_in_terminal_state(session):
    session.submit_guess("alert")
    assert session.clear_error().won


def test_reset_draws_new_target():
    source = FixedWordSource("alert")
    session = GameSession(source)
    session.submit_guess("tiger")
    session.submit_guess("xx")

    source.target = "crane"
    state = session.reset()

    assert source.draws == 2
    assert state.attempt_index == 0
    assert state.status is GameStatus.ACTIVE
    assert state.transient_error is None
    assert all(row == placeholder_row(WORD_LENGTH) for row in state.history)
    assert session.submit_guess("crane").won


def test_snapshots_are_not_mutated(session):
    first = session.state
    session.submit_guess("tiger")
    assert first.attempt_index == 0
    assert first.history[0] == placeholder_row(WORD_LENGTH)


def test_custom_attempt_limit():
    session = GameSession(FixedWordSource("alert"), max_attempts=2)
    session.submit_guess("tiger")
    state = session.submit_guess("crane")
    assert state.exhausted
    assert len(state.history) == 2


def test_match_policy_is_applied():
    session = GameSession(FixedWordSource("alert"), match_policy=MatchPolicy.FREQUENCY)
    row = session.submit_guess("steel").history[0]
    assert [v.present for v in row] == [False, True, True, False, True]


def test_to_dict_exposes_derived_flags(session):
    session.submit_guess("alert")
    data = session.state.to_dict()
    assert data['status'] == 'WON'
    assert data['won'] is True
    assert data['exhausted'] is False
    assert data['game_over'] is True
    assert data['max_attempts'] == MAX_ATTEMPTS
    assert data['history'][0][0] == {
        'index': 0, 'letter': 'a', 'exact_match': True, 'present': True, 'blank': False
    }


def test_transitions_are_serialised():
    class BlockingSource(FixedWordSource):
        def is_valid_word(self, word):
            # Another thread tries to clear the error mid-submission
            clearer = threading.Thread(target=session.clear_error)
            clearer.start()
            clearer.join(0.1)
            blocked.append(clearer.is_alive())
            threads.append(clearer)
            return super().is_valid_word(word)

    blocked, threads = [], []
    session = GameSession(BlockingSource("alert"))
    session.submit_guess("xx")

    state = session.submit_guess("crane")
    for thread in threads:
        thread.join()

    assert blocked == [True]
    assert state.attempt_index == 1
    assert session.state is state
    assert session.state.transient_error is None


def test_concurrent_clears_never_lose_attempts():
    session = GameSession(FixedWordSource("alert"), max_attempts=100)
    stop = threading.Event()

    def keep_clearing():
        while not stop.is_set():
            session.clear_error()

    clearer = threading.Thread(target=keep_clearing)
    clearer.start()
    try:
        for _ in range(50):
            session.submit_guess("xx")
            session.submit_guess("crane")
    finally:
        stop.set()
        clearer.join()

    assert session.state.attempt_index == 50
