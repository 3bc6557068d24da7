import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from nim_core.cli import main


def _run(argv, inputs):
    out = io.StringIO()
    with mock.patch("builtins.input", side_effect=list(inputs)), redirect_stdout(out):
        main(argv)
    return out.getvalue()


class TestCli(unittest.TestCase):
    def test_given_bad_and_illegal_input_when_playing_then_reprompts_and_computer_wins(self):
        txt = _run(["--piles", "1,1", "--log-level", "CRITICAL"], ["x", "0 5", "0 1"])
        self.assertIn("Initial piles:", txt)
        self.assertIn("Could not parse", txt)
        self.assertIn("Illegal move", txt)
        self.assertIn("Computer takes 1 from pile 1", txt)
        self.assertIn("The computer wins.", txt)

    def test_given_single_pile_when_human_takes_all_then_human_wins(self):
        txt = _run(["--piles", "3"], ["0,3"])
        self.assertIn("You win!", txt)

    def test_given_computer_starts_with_hint_when_playing_then_hint_printed(self):
        # Computer moves [2, 3] -> [2, 2]; the human empties pile 0 and the computer takes the rest
        txt = _run(["--piles", "2,3", "--starter", "computer", "--hint"], ["0 2"])
        self.assertIn("The computer moves first.", txt)
        self.assertIn("Computer takes 1 from pile 1", txt)
        self.assertIn("Hint (losing position): take 1 from pile 0", txt)
        self.assertIn("The computer wins.", txt)

    def test_given_malformed_piles_when_starting_then_exits_with_usage_error(self):
        with self.assertRaises(SystemExit) as cm, redirect_stdout(io.StringIO()):
            with mock.patch("sys.stderr", new_callable=io.StringIO):
                main(["--piles", "a,b"])
        self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
