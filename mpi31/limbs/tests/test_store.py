"""
Unit tests for limb storage: enlarge / compact / set / clear.
"""

import unittest
import sys
import os

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mpi31.constants import LIMB_DTYPE
from mpi31.errors import MpiRangeError, MpiStateError
from mpi31.limbs.store import Mpi
from mpi31.limbs.reference import from_int, to_int
from mpi31.arith.bits import test_bit


class TestLifecycle(unittest.TestCase):
    """Construction and release."""

    def test_init_is_empty_zero(self):
        x = Mpi()
        self.assertEqual(x.capacity, 0)
        self.assertTrue(x.is_zero())
        self.assertFalse(x)
        self.assertEqual(x.data.dtype, LIMB_DTYPE)

    def test_clear_then_use_raises(self):
        x = from_int(12345)
        x.clear()
        self.assertEqual(x.capacity, 0)
        with self.assertRaises(MpiStateError):
            x.enlarge(4)
        with self.assertRaises(MpiStateError):
            x.limbs()
        with self.assertRaises(MpiStateError):
            bool(x)
        with self.assertRaises(MpiStateError):
            x.is_zero()
        with self.assertRaises(MpiStateError):
            test_bit(x, 0)

    def test_context_manager_clears(self):
        with Mpi() as x:
            x.enlarge(3)
            self.assertEqual(x.capacity, 3)
        with self.assertRaises(MpiStateError):
            x.compact()
        self.assertEqual(repr(x), "Mpi(<cleared>)")


class TestEnlarge(unittest.TestCase):

    def test_grows_exactly_and_zero_fills(self):
        x = Mpi()
        x.enlarge(5)
        self.assertEqual(x.capacity, 5)
        self.assertEqual(x.limbs(), [0] * 5)

    def test_keeps_existing_limbs(self):
        x = Mpi().set_limbs([7, 8])
        x.enlarge(4)
        self.assertEqual(x.limbs(), [7, 8, 0, 0])

    def test_never_shrinks(self):
        x = Mpi().set_limbs([1, 2, 3])
        x.enlarge(1)
        self.assertEqual(x.capacity, 3)
        x.enlarge(0)
        self.assertEqual(x.limbs(), [1, 2, 3])


class TestCompact(unittest.TestCase):

    def test_drops_trailing_zero_limbs(self):
        x = Mpi().set_limbs([5, 0, 9, 0, 0])
        x.compact()
        self.assertEqual(x.limbs(), [5, 0, 9])
        self.assertEqual(x.significant_length, 3)

    def test_zero_compacts_to_capacity_zero(self):
        x = Mpi()
        x.enlarge(6)
        x.compact()
        self.assertEqual(x.capacity, 0)

    def test_compacted_value_unchanged(self):
        x = from_int(2 ** 100 + 3)
        before = x.limbs()
        x.compact()
        self.assertEqual(x.limbs(), before)


class TestSet(unittest.TestCase):

    def test_deep_copy(self):
        src = from_int(2 ** 70 + 11)
        dst = Mpi().set(src)
        self.assertEqual(to_int(dst), 2 ** 70 + 11)
        src.data[0] = 0
        self.assertEqual(to_int(dst), 2 ** 70 + 11)
        self.assertFalse(np.shares_memory(src.data, dst.data))

    def test_reduces_larger_destination_in_place(self):
        dst = from_int(2 ** 200 - 1)
        cap = dst.capacity
        dst.set(from_int(42))
        self.assertEqual(dst.capacity, cap)
        self.assertEqual(to_int(dst), 42)

    def test_self_set(self):
        x = from_int(987654321987654321)
        x.set(x)
        self.assertEqual(to_int(x), 987654321987654321)

    def test_set_limbs_rejects_wide_limb(self):
        with self.assertRaises(MpiRangeError):
            Mpi().set_limbs([1 << 31])

    def test_copy(self):
        x = from_int(3 ** 50)
        y = x.copy()
        self.assertIsNot(x.data, y.data)
        self.assertEqual(to_int(y), 3 ** 50)


class TestRepr(unittest.TestCase):

    def test_repr_shows_limbs(self):
        x = Mpi().set_limbs([0x7fffffff, 1])
        self.assertEqual(repr(x), "Mpi(capacity=2, limbs=[0x7fffffff, 0x00000001])")


if __name__ == "__main__":
    unittest.main()
