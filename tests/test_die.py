import unittest
from fair_dice.core.die import Die
from fair_dice.core.errors import ValidationError


class TestDie(unittest.TestCase):
    def test_faces_are_stored_as_tuple(self):
        faces = [2, 2, 4, 4, 9, 9]
        die = Die(faces)
        faces.append(100)
        self.assertEqual(die.get_all_faces(), (2, 2, 4, 4, 9, 9))
        self.assertEqual(die.get_sides_count(), 6)
        self.assertEqual(str(die), "2,2,4,4,9,9")

    def test_die_is_immutable(self):
        die = Die([1, 2, 3])
        with self.assertRaises(Exception):
            die.faces = (4, 5, 6)

    def test_get_face_bounds(self):
        die = Die([1, 2, 3])
        self.assertEqual(die.get_face(0), 1)
        self.assertEqual(die.get_face(2), 3)
        with self.assertRaises(IndexError):
            die.get_face(3)
        with self.assertRaises(IndexError):
            die.get_face(-1)

    def test_rejects_non_integer_faces(self):
        with self.assertRaises(ValidationError):
            Die([1, 2, "x"])
        with self.assertRaises(ValidationError):
            Die([1, 2.5, 3])
        with self.assertRaises(ValidationError):
            Die([True, False])

    def test_rejects_too_few_faces(self):
        with self.assertRaises(ValidationError):
            Die([1])
        with self.assertRaises(ValidationError):
            Die([1, 2, 3], min_sides=6)

    def test_parse(self):
        self.assertEqual(Die.parse("1, 2 ,-3").get_all_faces(), (1, 2, -3))
        with self.assertRaises(ValidationError):
            Die.parse("1,2,x,4,5,6")
        with self.assertRaises(ValidationError):
            Die.parse("1,,3")
        with self.assertRaises(ValidationError):
            Die.parse("7")

    def test_validation_error_is_value_error(self):
        with self.assertRaises(ValueError):
            Die.parse("a,b")


if __name__ == '__main__':
    unittest.main()
