"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_ATTEMPTS, ERROR_DISPLAY_SECONDS, DEFAULT_MATCH_POLICY,
    load_answer_words, load_allowed_words, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'ERROR_DISPLAY_SECONDS', 'DEFAULT_MATCH_POLICY',
    'load_answer_words', 'load_allowed_words', 'validate_word_list_integrity', 'get_word_statistics'
]
