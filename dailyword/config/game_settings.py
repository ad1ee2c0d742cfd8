"""
Game Rules Module

Fixed rules of the daily word game: board size, the special keys the
input controller recognises, and the texts shown in the game dialog.
"""

from typing import Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and in the secret word."""

MAX_GUESSES: Final[int] = 6
"""Number of non-winning guesses after which the game is lost."""

# Key symbols as reported by browser keydown events
DELETE_KEY: Final[str] = "Backspace"
SUBMIT_KEY: Final[str] = "Enter"

# Dialog messages
LENGTH_MESSAGE: Final[str] = f"The guessed word must be {WORD_LENGTH} letters"
INVALID_WORD_MESSAGE: Final[str] = "Invalid English word"
LOAD_ERROR_MESSAGE: Final[str] = "Error loading game. Please refresh."
WIN_MESSAGE: Final[str] = "You Win!!!"


def lose_message(secret_word: str) -> str:
    """Dialog text for a lost game, revealing the secret word."""
    return f"You Lose!!! The word was: {secret_word.upper()}"
