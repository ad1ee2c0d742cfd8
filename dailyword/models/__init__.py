"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import EvaluatedRow, KeyAction, KeyOutcome, LetterStatus, Phase, RoundState

__all__ = ['EvaluatedRow', 'KeyAction', 'KeyOutcome', 'LetterStatus', 'Phase', 'RoundState']
