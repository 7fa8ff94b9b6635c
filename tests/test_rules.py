import unittest
from fair_dice.core.rules import Outcome, resolve


class TestRules(unittest.TestCase):
    def test_higher_face_wins(self):
        self.assertEqual(resolve(5, 3), Outcome.USER_WINS)
        self.assertEqual(resolve(2, 9), Outcome.COMPUTER_WINS)

    def test_tie_is_a_draw(self):
        self.assertEqual(resolve(4, 4), Outcome.DRAW)
        self.assertEqual(resolve(-1, -1), Outcome.DRAW)


if __name__ == '__main__':
    unittest.main()
