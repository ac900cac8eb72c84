import random

import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.services.vocabulary import Vocabulary


WORDS = ["alert", "tiger", "alter", "later", "crane", "speed", "eerie", "steel", "stone", "apple"]


class FixedWordSource:
    """Word source that always draws the same target."""

    def __init__(self, target, words=WORDS):
        self.target = target
        self.words = set(words) | {target}
        self.draws = 0

    def is_valid_word(self, word):
        return word in self.words

    def choose_random_target_word(self):
        self.draws += 1
        return self.target


@pytest.fixture
def word_source():
    return FixedWordSource("alert")


@pytest.fixture
def vocabulary():
    return Vocabulary(["alert"], WORDS, rng=random.Random(7))


@pytest.fixture
def app(tmp_path, vocabulary):
    config_class = type('TestConfig', (TestingConfig,), {'LOG_DIR': str(tmp_path / 'logs')})
    app, socketio = create_app(config_class, vocabulary=vocabulary)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
