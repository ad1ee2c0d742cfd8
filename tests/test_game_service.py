import threading
import unittest
from unittest.mock import MagicMock

import requests

from dailyword.config.game_settings import LOAD_ERROR_MESSAGE
from dailyword.models.game import KeyAction, Phase
from dailyword.services.game_service import GameService
from dailyword.services.word_service import WordServiceClient


def make_client(valid=True, secret="apple"):
    client = MagicMock(spec=WordServiceClient)
    client.validate_word.return_value = valid
    client.fetch_secret_word.return_value = secret
    return client


class TestGameService(unittest.TestCase):

    def setUp(self):
        self.client = make_client()
        self.service = GameService(self.client)
        self.game_id = self.service.create_new_game()

    def type_word(self, word):
        for letter in word:
            self.service.press_key(self.game_id, letter)

    def test_unknown_game(self):
        self.assertIsNone(self.service.get_game_state("nope"))
        self.assertIsNone(self.service.press_key("nope", "a"))
        self.assertIsNone(self.service.dismiss_message("nope"))
        self.assertFalse(self.service.delete_game("nope"))

    def test_typing_and_submitting(self):
        self.type_word("crane")
        outcome = self.service.press_key(self.game_id, "Enter")

        self.assertEqual(outcome.action, KeyAction.SUBMIT)
        self.assertEqual(outcome.state.guess_count, 1)
        self.assertEqual(self.service.get_game_state(self.game_id).guess, "")

    def test_win_then_keys_ignored(self):
        self.type_word("apple")
        outcome = self.service.press_key(self.game_id, "Enter")
        self.assertEqual(outcome.state.phase, Phase.WON)

        outcome = self.service.press_key(self.game_id, "Backspace")
        self.assertEqual(outcome.action, KeyAction.IGNORED)
        self.assertEqual(self.service.get_game_state(self.game_id).guess, "apple")

    def test_keys_ignored_while_submission_outstanding(self):
        started = threading.Event()
        release = threading.Event()

        def slow_validate(word):
            started.set()
            release.wait(5)
            return True

        self.client.validate_word.side_effect = slow_validate
        self.type_word("crane")

        submitter = threading.Thread(target=self.service.press_key, args=(self.game_id, "Enter"))
        submitter.start()
        self.assertTrue(started.wait(5))

        loading_state = self.service.get_game_state(self.game_id)
        self.assertTrue(loading_state.is_loading)
        for key in ["x", "Backspace", "Enter"]:
            outcome = self.service.press_key(self.game_id, key)
            self.assertEqual(outcome.action, KeyAction.IGNORED)
        self.assertIs(self.service.get_game_state(self.game_id), loading_state)

        release.set()
        submitter.join(5)
        state = self.service.get_game_state(self.game_id)
        self.assertFalse(state.is_loading)
        self.assertEqual(state.guess_count, 1)
        self.client.validate_word.assert_called_once()

    def test_on_change_receives_intermediate_states(self):
        self.type_word("crane")
        seen = []
        self.service.press_key(self.game_id, "Enter", on_change=seen.append)

        self.assertTrue(seen[0].is_loading)
        self.assertEqual(seen[-1].phase, Phase.IDLE)
        self.assertFalse(seen[-1].is_loading)

    def test_dismiss_message(self):
        self.type_word("cr")
        outcome = self.service.press_key(self.game_id, "Enter")
        self.assertIsNotNone(outcome.state.message)

        state = self.service.dismiss_message(self.game_id)
        self.assertIsNone(state.message)
        self.assertEqual(state.guess, "cr")

    def test_delete_game(self):
        self.assertTrue(self.service.delete_game(self.game_id))
        self.assertIsNone(self.service.get_game_state(self.game_id))

    def test_unexpected_submission_error_fails_session(self):
        self.client.fetch_secret_word.return_value = "İRONY".lower()
        self.type_word("crane")
        seen = []
        outcome = self.service.press_key(self.game_id, "Enter", on_change=seen.append)

        state = self.service.get_game_state(self.game_id)
        self.assertIs(outcome.state, state)
        self.assertEqual(state.phase, Phase.FAILED)
        self.assertFalse(state.is_loading)
        self.assertTrue(state.is_game_over)
        self.assertEqual(state.message, LOAD_ERROR_MESSAGE)
        self.assertIs(seen[-1], state)
        self.assertEqual(self.service.press_key(self.game_id, "a").action, KeyAction.IGNORED)

    def test_unusable_word_of_the_day_fails_session(self):
        http = MagicMock(spec=requests.Session)
        validate_response = MagicMock()
        validate_response.json.return_value = {"validWord": True}
        secret_response = MagicMock()
        secret_response.json.return_value = {"word": "İRONY"}
        http.request.side_effect = [validate_response, secret_response]

        service = GameService(WordServiceClient("http://v", "http://w", session=http))
        game_id = service.create_new_game()
        for key in ["c", "r", "a", "n", "e", "Enter"]:
            service.press_key(game_id, key)

        state = service.get_game_state(game_id)
        self.assertEqual(state.phase, Phase.FAILED)
        self.assertFalse(state.is_loading)
        self.assertEqual(state.message, LOAD_ERROR_MESSAGE)

    def test_finished_sessions_evicted_at_capacity(self):
        service = GameService(self.client, max_sessions=2)
        finished = service.create_new_game()
        playing = service.create_new_game()
        for key in ["a", "p", "p", "l", "e", "Enter"]:
            service.press_key(finished, key)
        self.assertTrue(service.get_game_state(finished).is_game_over)

        newest = service.create_new_game()

        self.assertIsNone(service.get_game_state(finished))
        self.assertIsNotNone(service.get_game_state(playing))
        self.assertIsNotNone(service.get_game_state(newest))


if __name__ == '__main__':
    unittest.main()
