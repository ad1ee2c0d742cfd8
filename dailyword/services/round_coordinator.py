"""
Round Coordinator

Runs the submission protocol for one guess: dictionary validation, lazy
secret-word retrieval, evaluation and win/lose detection. Each step is a
function from RoundState to RoundState; RoundCoordinator drives them in
order around the two network calls.
"""

from dataclasses import replace
from typing import Callable, Optional
from ..config.game_settings import (
    WORD_LENGTH, MAX_GUESSES, LENGTH_MESSAGE, INVALID_WORD_MESSAGE,
    LOAD_ERROR_MESSAGE, WIN_MESSAGE, lose_message
)
from ..models.game import EvaluatedRow, Phase, RoundState
from .evaluator import evaluate_guess, merge_letter_status
from .word_service import WordServiceClient

Publisher = Callable[[RoundState], None]


def start_submission(state: RoundState) -> RoundState:
    """Length guard; a full buffer enters the loading state."""
    if len(state.guess) != WORD_LENGTH:
        return replace(state, phase=Phase.IDLE, message=LENGTH_MESSAGE)
    return replace(state, is_loading=True, phase=Phase.AWAITING_VALIDATION, message=None)


def reject_invalid_word(state: RoundState) -> RoundState:
    # Buffer is kept so the player can correct it
    return replace(state, is_loading=False, phase=Phase.IDLE, message=INVALID_WORD_MESSAGE)


def await_secret_word(state: RoundState) -> RoundState:
    return replace(state, phase=Phase.AWAITING_SECRET_WORD)


def store_secret_word(state: RoundState, secret_word: str) -> RoundState:
    if state.secret_word is not None:
        raise ValueError("Secret word is already set for this session")
    return replace(state, secret_word=secret_word.lower())


def fail_session(state: RoundState) -> RoundState:
    """The secret word could not be loaded; the session stays blocked until reloaded."""
    return replace(state, is_loading=False, is_game_over=True, phase=Phase.FAILED,
                   message=LOAD_ERROR_MESSAGE)


def evaluate_round(state: RoundState) -> RoundState:
    """Colors the buffered guess and records it as a new row."""
    statuses = evaluate_guess(state.guess, state.secret_word)
    row = EvaluatedRow(guess=state.guess, statuses=tuple(statuses))
    return replace(
        state,
        is_loading=False,
        phase=Phase.EVALUATED,
        rows=state.rows + (row,),
        letter_status=merge_letter_status(state.letter_status, state.guess, statuses)
    )


def finish_round(state: RoundState) -> RoundState:
    """Win/lose detection after an evaluated guess."""
    if state.guess == state.secret_word:
        return replace(state, is_game_over=True, phase=Phase.WON, message=WIN_MESSAGE)

    guess_count = state.guess_count + 1
    if guess_count == MAX_GUESSES:
        return replace(state, guess="", guess_count=guess_count, is_game_over=True,
                       phase=Phase.LOST, message=lose_message(state.secret_word))
    return replace(state, guess="", guess_count=guess_count, phase=Phase.IDLE)


class RoundCoordinator:
    """Sequences the network calls and transitions of one submission."""

    def __init__(self, word_client: Optional[WordServiceClient] = None):
        self.word_client = word_client or WordServiceClient()

    def submit(self, state: RoundState, publish: Optional[Publisher] = None) -> RoundState:
        """Runs a full submission starting from an idle state."""
        state = start_submission(state)
        if publish:
            publish(state)
        if not state.is_loading:
            return state
        return self.resolve_submission(state, publish)

    def resolve_submission(self, state: RoundState, publish: Optional[Publisher] = None) -> RoundState:
        """
        Continues a submission that has already entered the loading state.

        Args:
            state: State returned by start_submission with is_loading set
            publish: Called with every state the session passes through

        Returns:
            The final state of this submission
        """
        def advance(new_state: RoundState) -> RoundState:
            if publish:
                publish(new_state)
            return new_state

        if not self.word_client.validate_word(state.guess):
            return advance(reject_invalid_word(state))

        if state.secret_word is None:
            state = advance(await_secret_word(state))
            secret_word = self.word_client.fetch_secret_word()
            if not secret_word:
                return advance(fail_session(state))
            state = store_secret_word(state, secret_word)

        return advance(finish_round(evaluate_round(state)))
