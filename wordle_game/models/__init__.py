"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import AttemptRow, GameState, GameStatus, LetterVerdict, placeholder_row

__all__ = ['AttemptRow', 'GameState', 'GameStatus', 'LetterVerdict', 'placeholder_row']
