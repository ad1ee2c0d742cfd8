"""
Game Logger Module

Structured logging for player actions, server responses, game events and
word service failures. Each entry is one JSON object on a line of the
dated log file; warnings and errors are echoed to the console.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from ..config.app_config import Config
from .helpers import get_user_identity

# Event type -> counter name used by get_log_stats
_STAT_KEYS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE': 'server_responses',
    'GAME_EVENT': 'game_events',
    'ERROR': 'errors',
}


class GameLogger:
    """Writes JSON log entries for the game host to a dated file."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        level_value = logging.getLevelName(level.upper())
        self.level = level_value if isinstance(level_value, int) else logging.INFO
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers when re-created
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, event_type: str, action: str,
               user_info: Dict[str, Any], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log a player action.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'key', 'dismiss'
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, 'endpoint': getattr(request, 'endpoint', None), **kwargs}
        self._write(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None,
                            **kwargs):
        """Log the response sent for an action; failures go out at ERROR."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._summarize(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        self._write(logging.INFO if success else logging.ERROR,
                    event_type, action, get_user_identity(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: Optional[str], **kwargs):
        """Log a game event such as 'game_won', 'game_lost' or 'secret_word_failed'."""
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None}
        self._write(logging.INFO, 'GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    def _summarize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a serialized game state by its phase and counters."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        state = data.get('state')
        if not isinstance(state, dict):
            return data
        return {
            **data,
            'state': {
                'phase': state.get('phase'),
                'guess_count': state.get('guess_count'),
                'is_loading': state.get('is_loading')
            }
        }

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts today's entries per event type for the health check."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {'log_file': str(log_file), 'total_entries': 0}
        stats.update({name: 0 for name in _STAT_KEYS.values()})
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    for event_type, name in _STAT_KEYS.items():
                        if f'"event_type": "{event_type}' in line:
                            stats[name] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}
        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
