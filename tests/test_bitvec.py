import unittest
from sys import getsizeof

from mmbloom import BitArray


class TestBitArray(unittest.TestCase):
    def test_create(self):
        b = BitArray(8)
        self.assertEqual(bytes(b.raw_bytes()), b'\x00')
        self.assertEqual(len(b), 8)
        self.assertEqual(b.count(), 0)

        self.assertEqual(len(BitArray(0).raw_bytes()), 0)
        self.assertEqual(len(BitArray(1).raw_bytes()), 1)
        self.assertEqual(len(BitArray(9).raw_bytes()), 2)
        self.assertEqual(len(BitArray(16).raw_bytes()), 2)
        self.assertEqual(len(BitArray(17).raw_bytes()), 3)

    def test_bad_size(self):
        with self.assertRaises(ValueError):
            BitArray(-1)
        with self.assertRaises(TypeError):
            BitArray(8.0)

    def test_set(self):
        b = BitArray(8)
        b.set(5)
        self.assertEqual(b.raw_bytes()[0], 32)
        self.assertTrue(b.is_set(5))
        self.assertTrue(b[5])

    def test_is_set(self):
        b = BitArray(8)
        b.set(5)
        self.assertTrue(b.is_set(5))
        self.assertFalse(b.is_set(6))

    def test_unset(self):
        b = BitArray(8)
        b.set(5)
        self.assertTrue(b.is_set(5))
        b.unset(5)
        self.assertFalse(b.is_set(5))
        self.assertEqual(b.raw_bytes()[0], 0)
        # unsetting an unset bit is a no-op
        b.unset(5)
        self.assertFalse(b.is_set(5))

    def test_flip(self):
        b = BitArray(8)
        b.flip(5)
        self.assertTrue(b.is_set(5))
        b.flip(5)
        self.assertFalse(b.is_set(5))

    def test_layout(self):
        b = BitArray(20)
        b.set(0)
        b.set(9)
        b.set(19)
        self.assertEqual(bytes(b.raw_bytes()), b'\x01\x02\x08')

    def test_isolation(self):
        size = 21
        for pos in range(size):
            b = BitArray(size)
            b.set(pos)
            for other in range(size):
                self.assertEqual(b.is_set(other), other == pos)
            self.assertEqual(b.count(), 1)

            b.flip(pos)
            b.flip(pos)
            self.assertTrue(b.is_set(pos))
            b.unset(pos)
            self.assertEqual(b.count(), 0)

    def test_out_of_bounds(self):
        b = BitArray(8)
        with self.assertRaises(IndexError):
            b.set(15)
        # the boundary itself is out of range
        with self.assertRaises(IndexError):
            b.set(8)
        with self.assertRaises(IndexError):
            b.is_set(8)
        with self.assertRaises(IndexError):
            b.unset(8)
        with self.assertRaises(IndexError):
            b.flip(8)
        with self.assertRaises(IndexError):
            b.is_set(-1)
        with self.assertRaises(TypeError):
            b.set(1.0)

        # a failed access leaves the array untouched
        self.assertEqual(bytes(b.raw_bytes()), b'\x00')

        b = BitArray(12)
        b.set(11)
        with self.assertRaises(IndexError):
            b.set(12)
        self.assertEqual(bytes(b.raw_bytes()), b'\x00\x08')

        with self.assertRaises(IndexError):
            BitArray(0).is_set(0)

    def test_raw_bytes_readonly(self):
        b = BitArray(16)
        view = b.raw_bytes()
        self.assertTrue(view.readonly)
        with self.assertRaises(TypeError):
            view[0] = 0xff
        # the view tracks later writes
        b.set(8)
        self.assertEqual(view[1], 1)

    def test_sizeof(self):
        self.assertGreater(getsizeof(BitArray(8_000)), 1_000)


if __name__ == "__main__":
    unittest.main()
