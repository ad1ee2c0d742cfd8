"""
Word Service Client

Talks to the two external word services: dictionary validation and the
word of the day. Every failure is absorbed here and reported as a plain
negative result, so callers never see a network exception.
"""

from typing import Any, Dict, Optional
import requests
from ..config.app_config import Config
from ..config.game_settings import WORD_LENGTH
from ..utils.game_logger import game_logger


class WordServiceError(Exception):
    """Raised when a word service call fails or returns an unusable body."""
    pass


class WordServiceClient:
    """HTTP client for the validate-word and word-of-the-day endpoints."""

    def __init__(self,
                 validate_url: str = Config.VALIDATE_WORD_URL,
                 word_of_the_day_url: str = Config.WORD_OF_THE_DAY_URL,
                 timeout: float = Config.REQUEST_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.validate_url = validate_url
        self.word_of_the_day_url = word_of_the_day_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        """Performs one call and returns the decoded JSON object."""
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as http_err:
            raise WordServiceError(f"HTTP error from {url}: {http_err}") from http_err
        except requests.exceptions.RequestException as req_err:
            raise WordServiceError(f"Request to {url} failed: {req_err}") from req_err
        except ValueError as parse_err:
            raise WordServiceError(f"Invalid JSON from {url}: {parse_err}") from parse_err

        if not isinstance(data, dict):
            raise WordServiceError(f"Unexpected response from {url}: {data!r}")
        return data

    def validate_word(self, word: str) -> bool:
        """
        Asks the dictionary service whether a word exists.

        Returns:
            bool: True only for an explicit positive answer; any failure is False
        """
        try:
            data = self._request('POST', self.validate_url, json={'word': word})
        except WordServiceError as e:
            game_logger.logger.warning(f"Error validating word '{word}': {e}")
            return False
        return data.get('validWord') is True

    def fetch_secret_word(self) -> Optional[str]:
        """
        Fetches the word of the day.

        Returns:
            The lowercase word, or None if it could not be loaded
        """
        try:
            data = self._request('GET', self.word_of_the_day_url)
            word = data['word']
            if not isinstance(word, str):
                raise WordServiceError(f"Word of the day is not a word: {word!r}")
            word = word.lower()
            if len(word) != WORD_LENGTH or not word.isascii() or not word.isalpha():
                raise WordServiceError(f"Word of the day is not a word: {word!r}")
        except (WordServiceError, KeyError) as e:
            game_logger.logger.error(f"Error fetching secret word: {e}")
            return None
        return word
