"""
Guess Evaluator

Implements the two-pass letter classification used to color a submitted
guess against the secret word.
"""

from typing import Dict, List, Optional, Sequence, cast
from ..models.game import LetterStatus


def evaluate_guess(guess: str, secret_word: str) -> List[LetterStatus]:
    """
    Classifies every letter of a guess against the secret word.

    Exact matches are resolved first and consume their secret letter.
    Remaining guess letters are then scanned left to right; each one takes
    the first unconsumed occurrence of the same letter in the secret word,
    so a repeated letter is never credited more often than it appears.

    Args:
        guess: The submitted word (lowercase)
        secret_word: The word to guess (lowercase)

    Returns:
        List of LetterStatus, one per position

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(secret_word):
        raise ValueError(
            f"Guess '{guess}' and secret word must have the same length "
            f"({len(guess)} != {len(secret_word)})"
        )

    result: List[Optional[LetterStatus]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(secret_word)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if remaining[i] == letter:
            result[i] = LetterStatus.CORRECT
            remaining[i] = None

    # Second pass: misplaced letters, consuming one secret letter each
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            remaining[remaining.index(letter)] = None
            result[i] = LetterStatus.PRESENT
        else:
            result[i] = LetterStatus.ABSENT

    return cast(List[LetterStatus], result)


def merge_letter_status(letter_status: Dict[str, str],
                        guess: str,
                        statuses: Sequence[LetterStatus]) -> Dict[str, str]:
    """
    Returns a new keyboard map updated with the results of one guess.

    A letter's status only ever moves up: unused -> absent -> present -> correct.
    """
    updated = dict(letter_status)
    for letter, new_status in zip(guess, statuses):
        current_status = LetterStatus(updated.get(letter, LetterStatus.UNUSED.value))

        if new_status == LetterStatus.CORRECT:
            updated[letter] = LetterStatus.CORRECT.value
        elif new_status == LetterStatus.PRESENT and current_status != LetterStatus.CORRECT:
            updated[letter] = LetterStatus.PRESENT.value
        elif new_status == LetterStatus.ABSENT and current_status == LetterStatus.UNUSED:
            updated[letter] = LetterStatus.ABSENT.value
    return updated
