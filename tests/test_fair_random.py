import hashlib
import hmac
import unittest
from collections import Counter

from fair_dice.core.entropy import OsRandomSource, SecureRandomSource, SeededRandomSource, secure_random_below
from fair_dice.core.errors import CommitmentVerificationError, DrawConsumedError, RangeError, ValidationError
from fair_dice.core.fair_random import FairRandomValue, compute_hmac, verify_commitment


class ScriptedSource(SecureRandomSource):
    """Returns pre-set bytes, in order."""
    def __init__(self, data: bytes):
        self.data = bytearray(data)

    def next_bytes(self, n):
        chunk, self.data = bytes(self.data[:n]), self.data[n:]
        if len(chunk) != n:
            raise AssertionError("scripted source exhausted")
        return chunk


class TestSecureRandomBelow(unittest.TestCase):
    def test_rejects_biased_region(self):
        # range 3: the largest usable multiple below 256 is 255, so 255 is discarded
        source = ScriptedSource(bytes([255, 4]))
        self.assertEqual(secure_random_below(3, source), 1)

    def test_multi_byte_width(self):
        source = ScriptedSource(bytes([1, 0]))
        self.assertEqual(secure_random_below(1000, source), 256)

    def test_values_in_range(self):
        source = OsRandomSource()
        for upper in (1, 2, 6, 7, 255, 256, 257, 70000):
            for _ in range(50):
                self.assertTrue(0 <= secure_random_below(upper, source) < upper)


class TestFairRandomValue(unittest.TestCase):
    def test_final_in_range_for_all_user_values(self):
        for range_ in (2, 3, 6, 10, 20):
            for user_value in range(range_):
                reveal = FairRandomValue(range_).reveal(user_value)
                self.assertTrue(0 <= reveal.final < range_)
                self.assertEqual(reveal.final, (reveal.computer_value + user_value) % range_)

    def test_reveal_matches_published_commitment(self):
        draw = FairRandomValue(6)
        published = draw.get_commitment()
        reveal = draw.reveal(3)
        self.assertEqual(reveal.commitment, published)
        key = bytes.fromhex(reveal.secret)
        expected = hmac.new(key, str(reveal.computer_value).encode(), hashlib.sha3_256).hexdigest()
        self.assertEqual(expected, published)
        self.assertTrue(verify_commitment(published, reveal.secret, reveal.computer_value))

    def test_hex_formats(self):
        reveal = FairRandomValue(2).reveal(0)
        self.assertEqual(len(reveal.commitment), 64)
        self.assertEqual(len(reveal.secret), 64)
        self.assertEqual(reveal.commitment, reveal.commitment.lower())
        self.assertEqual(reveal.secret, reveal.secret.lower())

    def test_verify_rejects_other_value(self):
        reveal = FairRandomValue(6).reveal(0)
        other = (reveal.computer_value + 1) % 6
        self.assertFalse(verify_commitment(reveal.commitment, reveal.secret, other))
        self.assertFalse(verify_commitment(reveal.commitment, "not hex", reveal.computer_value))

    def test_invalid_range(self):
        for bad in (1, 0, -3, 2.0, "6", True):
            with self.assertRaises(ValidationError):
                FairRandomValue(bad)

    def test_user_value_out_of_range_keeps_draw_open(self):
        draw = FairRandomValue(6)
        for bad in (-1, 6, 100, "3", 2.0):
            with self.assertRaises(RangeError):
                draw.reveal(bad)
        self.assertTrue(draw.is_open)
        self.assertTrue(0 <= draw.reveal(5).final < 6)

    def test_single_use(self):
        draw = FairRandomValue(4)
        draw.reveal(1)
        with self.assertRaises(DrawConsumedError):
            draw.reveal(1)

    def test_cancel_prevents_reveal(self):
        draw = FairRandomValue(4)
        draw.cancel()
        self.assertFalse(draw.is_open)
        with self.assertRaises(DrawConsumedError):
            draw.reveal(0)

    def test_tampered_value_fails_verification(self):
        draw = FairRandomValue(6, source=SeededRandomSource(3))
        draw._computer_value = (draw._computer_value + 1) % 6
        with self.assertRaises(CommitmentVerificationError):
            draw.reveal(0)

    def test_repr_hides_secret(self):
        draw = FairRandomValue(6)
        self.assertNotIn(draw._secret.hex(), repr(draw))

    def test_deterministic_source_gives_identical_digest(self):
        a = FairRandomValue(6, source=SeededRandomSource(42))
        b = FairRandomValue(6, source=SeededRandomSource(42))
        self.assertEqual(a.commitment, b.commitment)
        ra, rb = a.reveal(2), b.reveal(2)
        self.assertEqual((ra.secret, ra.computer_value), (rb.secret, rb.computer_value))
        key = bytes.fromhex(ra.secret)
        self.assertEqual(compute_hmac(key, ra.computer_value), a.commitment)

    def test_computer_value_is_uniform(self):
        range_ = 6
        trials = 6000
        source = SeededRandomSource(2024)
        counts = Counter(FairRandomValue(range_, source=source).reveal(0).computer_value for _ in range(trials))
        expected = trials / range_
        chi_square = sum((counts[v] - expected) ** 2 / expected for v in range(range_))
        # 5 degrees of freedom, p = 0.001
        self.assertLess(chi_square, 20.515)


if __name__ == '__main__':
    unittest.main()
