"""
Game Service

Keeps the in-memory game sessions and connects the input controller to
the round coordinator.
"""

import threading
import uuid
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Optional
from ..config.app_config import Config
from ..models.game import KeyAction, KeyOutcome, Phase, RoundState
from ..utils.game_logger import game_logger
from .input_controller import handle_key
from .round_coordinator import RoundCoordinator, fail_session, start_submission
from .word_service import WordServiceClient

StateListener = Callable[[RoundState], None]


@dataclass
class GameSession:
    """One player's game: the current state plus the lock guarding it."""
    game_id: str
    state: RoundState = field(default_factory=RoundState)
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameService:
    """
    Session manager for the daily word game.

    This class handles:
    - Session management with unique game IDs
    - Routing key events through the input controller
    - Running submissions without holding the session lock during network calls
    - Logging terminal game events
    """

    def __init__(self, word_client: Optional[WordServiceClient] = None,
                 coordinator: Optional[RoundCoordinator] = None,
                 max_sessions: int = Config.MAX_SESSIONS):
        self.games: Dict[str, GameSession] = {}
        self.max_sessions = max_sessions
        self.coordinator = coordinator or RoundCoordinator(word_client)

    def create_new_game(self) -> str:
        """
        Creates a new game session.

        The secret word is not fetched here; it is loaded on the first
        dictionary-valid guess. Once max_sessions is reached, finished
        sessions are dropped to make room.

        Returns:
            str: Unique game ID for this session
        """
        if len(self.games) >= self.max_sessions:
            self._evict_finished_games()

        game_id = str(uuid.uuid4())
        self.games[game_id] = GameSession(game_id)
        return game_id

    def _evict_finished_games(self) -> int:
        """Removes every session whose game is over; returns how many went."""
        finished = [game_id for game_id, session in list(self.games.items())
                    if session.state.is_game_over]
        for game_id in finished:
            self.games.pop(game_id, None)
        if finished:
            game_logger.logger.info(f"Evicted {len(finished)} finished game session(s)")
        return len(finished)

    def get_game_state(self, game_id: str) -> Optional[RoundState]:
        """
        Returns the current state of a session.

        Args:
            game_id: Unique game identifier

        Returns:
            RoundState or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        with session.lock:
            return session.state

    def press_key(self, game_id: str, key: str,
                  on_change: Optional[StateListener] = None) -> Optional[KeyOutcome]:
        """
        Feeds one keydown symbol to a session.

        The key is applied and, for the submit key, the loading state is
        entered under the session lock, so a second key arriving while the
        submission is outstanding sees is_loading and is ignored.

        Args:
            game_id: Unique game identifier
            key: Key symbol as reported by the browser (e.g. 'a', 'Enter')
            on_change: Called with every state the session passes through

        Returns:
            KeyOutcome with the session's final state, or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        with session.lock:
            outcome = handle_key(session.state, key)
            state = outcome.state
            if outcome.action == KeyAction.SUBMIT:
                state = start_submission(state)
            session.state = state

        if outcome.action == KeyAction.IGNORED:
            return outcome

        if on_change:
            on_change(state)

        if outcome.action == KeyAction.SUBMIT and state.is_loading:
            publish = self._publisher(session, on_change)
            try:
                state = self.coordinator.resolve_submission(state, publish)
            except Exception as e:
                # A submission must never leave the session loading
                game_logger.logger.error(f"Submission failed for game {game_id}: {e}")
                with session.lock:
                    state = session.state
                state = fail_session(state)
                publish(state)
            self._log_outcome(game_id, state)

        return KeyOutcome(state, outcome.action)

    def dismiss_message(self, game_id: str) -> Optional[RoundState]:
        """Closes the dialog message of a session."""
        session = self.games.get(game_id)
        if session is None:
            return None
        with session.lock:
            session.state = replace(session.state, message=None)
            return session.state

    def _publisher(self, session: GameSession, on_change: Optional[StateListener]) -> StateListener:
        def publish(state: RoundState) -> None:
            with session.lock:
                session.state = state
            if on_change:
                on_change(state)
        return publish

    def _log_outcome(self, game_id: str, state: RoundState) -> None:
        if state.phase == Phase.WON:
            game_logger.log_game_event(
                game_id, 'game_won', None,
                rows_used=len(state.rows), target_word=state.secret_word
            )
        elif state.phase == Phase.LOST:
            game_logger.log_game_event(
                game_id, 'game_lost', None,
                rows_used=len(state.rows), target_word=state.secret_word
            )
        elif state.phase == Phase.FAILED:
            game_logger.log_game_event(game_id, 'secret_word_failed', None)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_client: Optional[WordServiceClient] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_client)
    return _game_service
