import json
import random

import pytest

from wordle_game.config import game_settings
from wordle_game.config.game_settings import (
    WORD_LENGTH, get_word_statistics, load_allowed_words, load_answer_words,
    validate_word_list_integrity,
)
from wordle_game.services.vocabulary import Vocabulary, load_vocabulary


def test_shipped_word_lists_are_valid():
    answers = load_answer_words()
    allowed = load_allowed_words()
    assert validate_word_list_integrity(answers)
    assert validate_word_list_integrity(allowed)
    assert all(len(word) == WORD_LENGTH for word in answers + allowed)


def test_default_vocabulary_knows_example_words():
    vocabulary = load_vocabulary(random.Random(1))
    for word in ("alert", "tiger", "alter"):
        assert vocabulary.is_valid_word(word)
    assert not vocabulary.is_valid_word("qwert")
    assert vocabulary.choose_random_target_word() in vocabulary.answers


def test_allowed_words_are_accepted_but_never_drawn():
    vocabulary = Vocabulary(["alert"], ["tiger"], rng=random.Random(0))
    assert vocabulary.is_valid_word("TIGER")
    assert {vocabulary.choose_random_target_word() for _ in range(20)} == {"alert"}


def test_empty_answers_rejected():
    with pytest.raises(ValueError):
        Vocabulary([], ["tiger"])


@pytest.mark.parametrize("words, message", [
    ([], "cannot be empty"),
    (["toolong"], "not 5 characters"),
    (["ab1de"], "non-alphabetic"),
    (["Alert"], "lowercase"),
    (["alert", "alert"], "Duplicate"),
])
def test_validate_word_list_integrity_errors(words, message):
    with pytest.raises(ValueError, match=message):
        validate_word_list_integrity(words)


def test_load_word_list_rejects_bad_files(tmp_path):
    (tmp_path / "words.json").write_text(json.dumps({"alert": 1}), encoding="utf-8")
    with pytest.raises(ValueError, match="array"):
        game_settings._load_word_list("words.json", config_dir=str(tmp_path))

    (tmp_path / "broken.json").write_text("[", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        game_settings._load_word_list("broken.json", config_dir=str(tmp_path))

    with pytest.raises(FileNotFoundError):
        game_settings._load_word_list("missing.json", config_dir=str(tmp_path))


def test_load_word_list_normalises_case(tmp_path):
    (tmp_path / "words.json").write_text(json.dumps(["ALERT", "tiger", "Alert"]), encoding="utf-8")
    assert game_settings._load_word_list("words.json", config_dir=str(tmp_path)) == ["alert", "tiger"]


def test_word_statistics():
    stats = get_word_statistics(["alert", "tiger"])
    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 2.0
    assert stats["letter_frequency"]["e"] == 2
    assert get_word_statistics([]) == {"error": "Word list is empty"}
