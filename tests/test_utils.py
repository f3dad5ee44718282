import unittest
import numpy as np
from keystream.prngs import ISAAC
from keystream.utils import BIT_COUNTS, bit_ratio, calculate_entropy

class TestUtils(unittest.TestCase):
    def test_bit_count_table(self):
        self.assertEqual(BIT_COUNTS[0], 0)
        self.assertEqual(BIT_COUNTS[0xFF], 8)
        self.assertEqual(BIT_COUNTS[0b1011], 3)

    def test_bit_ratio_bytes_and_words(self):
        self.assertEqual(bit_ratio(b'\xff\x00'), 0.5)
        self.assertEqual(bit_ratio(np.array([0xFFFFFFFF], dtype=np.uint32)), 1.0)
        self.assertEqual(bit_ratio([0x0000FFFF, 0]), 0.25)
        with self.assertRaises(ValueError):
            bit_ratio(b'')

    def test_entropy_edges(self):
        self.assertEqual(calculate_entropy(0), 0.0)
        self.assertEqual(calculate_entropy(1), 0.0)
        self.assertEqual(calculate_entropy(0.5), 1.0)
        self.assertAlmostEqual(calculate_entropy(0.25), calculate_entropy(0.75))
        self.assertLess(calculate_entropy(0.25), 1.0)

    def test_keystream_is_balanced(self):
        """64k draws should sit very close to half ones."""
        values = ISAAC([1, 2, 3, 4]).next_values(64 * 1024)
        ratio = bit_ratio(values)
        self.assertLess(abs(ratio - 0.5), 0.01)
        self.assertGreater(calculate_entropy(ratio), 0.999)

if __name__ == '__main__':
    unittest.main()
