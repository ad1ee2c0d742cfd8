import unittest
from dataclasses import replace

from dailyword.models.game import KeyAction, RoundState
from dailyword.services.input_controller import add_letter, handle_key, is_valid_letter


class TestInputController(unittest.TestCase):

    def test_letter_appended_lowercase(self):
        outcome = handle_key(RoundState(guess="ab"), "C")
        self.assertEqual(outcome.action, KeyAction.UPDATED)
        self.assertEqual(outcome.state.guess, "abc")

    def test_full_buffer_replaces_last_letter(self):
        outcome = handle_key(RoundState(guess="apple"), "x")
        self.assertEqual(outcome.state.guess, "applx")
        self.assertEqual(len(outcome.state.guess), 5)

    def test_backspace(self):
        self.assertEqual(handle_key(RoundState(guess="ab"), "Backspace").state.guess, "a")

    def test_backspace_on_empty_buffer(self):
        outcome = handle_key(RoundState(), "Backspace")
        self.assertEqual(outcome.state.guess, "")
        self.assertEqual(outcome.action, KeyAction.UPDATED)

    def test_enter_reports_submit_without_mutation(self):
        state = RoundState(guess="abc")
        outcome = handle_key(state, "Enter")
        self.assertEqual(outcome.action, KeyAction.SUBMIT)
        self.assertIs(outcome.state, state)

    def test_other_keys_suppressed(self):
        state = RoundState(guess="ab")
        for key in ["1", " ", "Shift", "ArrowLeft", "é", "-", "ab"]:
            with self.subTest(key=key):
                outcome = handle_key(state, key)
                self.assertEqual(outcome.action, KeyAction.SUPPRESSED)
                self.assertTrue(outcome.prevent_default)
                self.assertIs(outcome.state, state)

    def test_keys_ignored_while_loading(self):
        state = replace(RoundState(guess="ab"), is_loading=True)
        for key in ["c", "Backspace", "Enter", "1"]:
            with self.subTest(key=key):
                outcome = handle_key(state, key)
                self.assertEqual(outcome.action, KeyAction.IGNORED)
                self.assertIs(outcome.state, state)

    def test_keys_ignored_after_game_over(self):
        state = RoundState(guess="", is_game_over=True)
        self.assertEqual(handle_key(state, "a").action, KeyAction.IGNORED)
        self.assertEqual(handle_key(state, "a").state.guess, "")

    def test_helpers(self):
        self.assertTrue(is_valid_letter("Z"))
        self.assertFalse(is_valid_letter("Enter"))
        self.assertFalse(is_valid_letter("ß"))
        self.assertEqual(add_letter("", "Q"), "q")

    def test_display_slots(self):
        self.assertEqual(RoundState(guess="ab").display_slots, ["a", "b", "", "", ""])


if __name__ == '__main__':
    unittest.main()
