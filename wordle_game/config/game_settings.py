"""
Game Configuration Constants Module

This module defines all game rule constants and loads the word lists.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target word and every accepted guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ERROR_DISPLAY_SECONDS: Final[float] = 2.5
"""Seconds a rejected-guess message stays visible before it is dismissed."""

DEFAULT_MATCH_POLICY: Final[str] = "naive"

ANSWERS_FILE: Final[str] = "answers.json"
ALLOWED_FILE: Final[str] = "allowed.json"


def _load_word_list(file_name: str, word_length: int = WORD_LENGTH,
                    config_dir: Optional[str] = None) -> List[str]:
    """
    Load a word list from a JSON file, by default the one stored next to this module.

    Returns:
        List[str]: List of unique lowercase words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    if config_dir is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [str(word).lower() for word in word_list]
    validate_word_list_integrity(sorted(set(lowercase_words)), word_length)

    # Keep file order, drop duplicates
    return list(dict.fromkeys(lowercase_words))


def load_answer_words() -> List[str]:
    """Words that can be drawn as the hidden target."""
    return _load_word_list(ANSWERS_FILE)


def load_allowed_words() -> List[str]:
    """Words accepted as guesses on top of the answer list."""
    return _load_word_list(ALLOWED_FILE)


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        answers = load_answer_words()
        allowed = load_allowed_words()
        print(" Word list validation passed")

        print(f" Answer statistics: {get_word_statistics(answers)}")
        print(f" {len(allowed)} additional allowed guesses")

        print(" All configuration validation checks passed")
    except (FileNotFoundError, ValueError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
