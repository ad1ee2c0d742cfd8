"""
Game Data Models

Contains all game-related data structures and enums.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from ..config.game_settings import WORD_LENGTH, MAX_GUESSES


class LetterStatus(Enum):
    """Per-letter classification of a submitted guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNUSED = "unused"  # Keyboard map only, never produced by the evaluator


class Phase(Enum):
    """Where a session is in the submission protocol."""
    IDLE = "idle"
    AWAITING_VALIDATION = "awaiting_validation"
    AWAITING_SECRET_WORD = "awaiting_secret_word"
    EVALUATED = "evaluated"
    WON = "won"
    LOST = "lost"
    FAILED = "failed"  # Secret word could not be loaded


class KeyAction(Enum):
    """What the input controller did with a key."""
    IGNORED = "ignored"
    UPDATED = "updated"
    SUPPRESSED = "suppressed"
    SUBMIT = "submit"


def _unused_letters() -> Dict[str, str]:
    return {letter: LetterStatus.UNUSED.value for letter in string.ascii_lowercase}


@dataclass(frozen=True)
class EvaluatedRow:
    """One submitted guess together with its classifications."""
    guess: str
    statuses: Tuple[LetterStatus, ...]


@dataclass(frozen=True)
class RoundState:
    """
    Complete state of one game session.

    Transitions never mutate a RoundState; they return a new one built
    with dataclasses.replace.
    """
    guess: str = ""
    guess_count: int = 0
    is_loading: bool = False
    is_game_over: bool = False
    phase: Phase = Phase.IDLE
    secret_word: Optional[str] = None
    rows: Tuple[EvaluatedRow, ...] = ()
    letter_status: Dict[str, str] = field(default_factory=_unused_letters)
    message: Optional[str] = None

    @property
    def current_row(self) -> int:
        return self.guess_count

    @property
    def display_slots(self) -> List[str]:
        """Letters of the in-progress guess, empty strings for unfilled slots."""
        return [self.guess[i] if i < len(self.guess) else "" for i in range(WORD_LENGTH)]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view of the state; the secret word only appears once the game is over."""
        answer = None
        if self.phase in (Phase.WON, Phase.LOST):
            answer = self.secret_word
        return {
            'guess': self.guess,
            'display_slots': self.display_slots,
            'current_row': self.current_row,
            'guess_count': self.guess_count,
            'max_guesses': MAX_GUESSES,
            'word_length': WORD_LENGTH,
            'is_loading': self.is_loading,
            'is_game_over': self.is_game_over,
            'phase': self.phase.value,
            'rows': [
                [(letter, status.value) for letter, status in zip(row.guess, row.statuses)]
                for row in self.rows
            ],
            'letter_status': dict(self.letter_status),
            'message': self.message,
            'answer': answer
        }


@dataclass(frozen=True)
class KeyOutcome:
    """Result of feeding one key to the input controller."""
    state: RoundState
    action: KeyAction

    @property
    def prevent_default(self) -> bool:
        return self.action == KeyAction.SUPPRESSED
