import unittest
from fair_dice.core.config import GameConfig
from fair_dice.core.dice_set import DiceSet, parse_dice_set
from fair_dice.core.die import Die
from fair_dice.core.errors import ValidationError

SPECS = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


class TestDiceSet(unittest.TestCase):
    def test_preserves_order(self):
        dice_set = parse_dice_set(SPECS)
        self.assertEqual(dice_set.get_dice_count(), 3)
        self.assertEqual([str(d) for d in dice_set.get_all_dice()], SPECS)
        self.assertEqual(dice_set.get_die(1), Die([1, 1, 6, 6, 8, 8]))

    def test_get_die_out_of_range(self):
        dice_set = parse_dice_set(SPECS)
        with self.assertRaises(IndexError):
            dice_set.get_die(3)
        with self.assertRaises(IndexError):
            dice_set.get_die(-1)

    def test_too_few_dice(self):
        with self.assertRaises(ValidationError):
            parse_dice_set(SPECS[:2])

    def test_min_dice_is_a_boundary_rule(self):
        # the type itself accepts any non-empty set
        dice_set = DiceSet([Die([1, 2]), Die([3, 4])])
        self.assertEqual(len(dice_set), 2)
        with self.assertRaises(ValidationError):
            DiceSet([])

    def test_inconsistent_sides(self):
        with self.assertRaises(ValidationError):
            parse_dice_set(["1,2,3", "1,2,3", "1,2"])

    def test_inconsistent_sides_allowed_by_config(self):
        cfg = GameConfig(require_equal_sides=False)
        dice_set = parse_dice_set(["1,2,3", "1,2,3", "1,2"], cfg)
        self.assertEqual(dice_set.get_die(2).get_sides_count(), 2)

    def test_non_integer_face_reports_die_number(self):
        with self.assertRaises(ValidationError) as ctx:
            parse_dice_set(["1,2,3", "1,2,x", "1,2,3"])
        self.assertIn("die 2", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
