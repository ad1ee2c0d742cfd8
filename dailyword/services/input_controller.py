"""
Input Controller

Turns single keydown symbols into guess-buffer updates.
"""

from dataclasses import replace
from ..config.game_settings import WORD_LENGTH, DELETE_KEY, SUBMIT_KEY
from ..models.game import KeyAction, KeyOutcome, RoundState


def is_valid_letter(key: str) -> bool:
    """True for exactly one ASCII letter."""
    return len(key) == 1 and key.isascii() and key.isalpha()


def add_letter(guess: str, letter: str) -> str:
    """Appends a letter; a full buffer has its last letter replaced instead."""
    if len(guess) >= WORD_LENGTH:
        return guess[:WORD_LENGTH - 1] + letter.lower()
    return guess + letter.lower()


def remove_last_letter(guess: str) -> str:
    return guess[:-1]


def handle_key(state: RoundState, key: str) -> KeyOutcome:
    """
    Applies one key to the session state.

    Keys are ignored while a submission is loading or once the game is over.
    The submit key is only reported back; running the submission is up to
    the caller.
    """
    if state.is_loading or state.is_game_over:
        return KeyOutcome(state, KeyAction.IGNORED)

    if key == DELETE_KEY:
        return KeyOutcome(replace(state, guess=remove_last_letter(state.guess)), KeyAction.UPDATED)
    if key == SUBMIT_KEY:
        return KeyOutcome(state, KeyAction.SUBMIT)
    if not is_valid_letter(key):
        return KeyOutcome(state, KeyAction.SUPPRESSED)

    return KeyOutcome(replace(state, guess=add_letter(state.guess, key)), KeyAction.UPDATED)
