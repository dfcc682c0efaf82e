"""
Unit tests for multiplication: schoolbook, Karatsuba, native u32.

Karatsuba must agree with schoolbook on every input, including operands
straddling the 32-limb threshold on either side.
"""

import unittest
import random
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from mpi31.config import MpiConfig
from mpi31.constants import LIMB_BITS, KARATSUBA_THRESHOLD
from mpi31.errors import MpiRangeError
from mpi31.limbs.store import Mpi
from mpi31.limbs.convert import from_decimal
from mpi31.limbs.compare import compare
from mpi31.limbs.reference import from_int, to_int
from mpi31.arith.mul import mul, mul_naive, mul_karatsuba, mul_u32


def _dec(text):
    return from_decimal(Mpi(), text)


def _limbs_value(rng, n_limbs):
    """Random value occupying exactly n_limbs limbs."""
    if n_limbs == 0:
        return 0
    top = 1 << (LIMB_BITS * (n_limbs - 1))
    return top + rng.getrandbits(LIMB_BITS * (n_limbs - 1)) \
        + (rng.getrandbits(LIMB_BITS - 1) << (LIMB_BITS * (n_limbs - 1)))


class TestMulVectors(unittest.TestCase):

    def test_small_vector(self):
        r = _dec("22876792454961")
        mul(r, r, _dec("1853020188851841"))
        self.assertEqual(compare(r, _dec("42391158275216203514294433201")), 0)

    def test_large_vector(self):
        s = _dec("1797010299914431210413179829509605039731475627537851106400")
        r = _dec("42391158275216203514294433201")
        t = _dec("7617734804586639233928972772061556175042480140239519672395"
                 "9174586681921139518743586400")
        mul(r, r, s)
        self.assertEqual(compare(r, t), 0)

    def test_square_in_place(self):
        s = _dec("2147483648")
        mul(s, s, s)
        self.assertEqual(compare(s, _dec("4611686018427387904")), 0)

    def test_zero(self):
        self.assertEqual(mul(Mpi(), Mpi(), from_int(12345)).capacity, 0)
        self.assertEqual(to_int(mul(Mpi(), from_int(2 ** 2000), Mpi())), 0)


class TestNaive(unittest.TestCase):

    def test_random_against_int(self):
        rng = random.Random(42)
        for _ in range(100):
            a = rng.getrandbits(rng.randint(0, 600))
            b = rng.getrandbits(rng.randint(0, 600))
            self.assertEqual(to_int(mul_naive(Mpi(), from_int(a), from_int(b))), a * b)

    def test_all_ones_carry_chain(self):
        a = 2 ** (LIMB_BITS * 8) - 1
        self.assertEqual(to_int(mul_naive(Mpi(), from_int(a), from_int(a))), a * a)

    def test_non_compacted_operands(self):
        a = from_int(2 ** 40 + 1).enlarge(9)
        b = from_int(3).enlarge(5)
        r = mul_naive(Mpi(), a, b)
        self.assertEqual(to_int(r), 3 * (2 ** 40 + 1))
        self.assertEqual(r.capacity, r.significant_length)


class TestKaratsuba(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(2024)

    def test_threshold_straddle(self):
        sizes = [KARATSUBA_THRESHOLD - 2, KARATSUBA_THRESHOLD - 1,
                 KARATSUBA_THRESHOLD, KARATSUBA_THRESHOLD + 1,
                 2 * KARATSUBA_THRESHOLD - 1, 2 * KARATSUBA_THRESHOLD]
        for na in sizes:
            for nb in sizes:
                a = _limbs_value(self.rng, na)
                b = _limbs_value(self.rng, nb)
                A, B = from_int(a), from_int(b)
                k = mul_karatsuba(Mpi(), A, B)
                n = mul_naive(Mpi(), A, B)
                self.assertEqual(compare(k, n), 0, f"sizes {na}x{nb}")
                self.assertEqual(to_int(k), a * b)

    def test_unbalanced(self):
        a = _limbs_value(self.rng, 100)
        b = _limbs_value(self.rng, 33)
        self.assertEqual(to_int(mul(Mpi(), from_int(a), from_int(b))), a * b)

    def test_all_ones(self):
        a = 2 ** (LIMB_BITS * 70) - 1
        self.assertEqual(to_int(mul(Mpi(), from_int(a), from_int(a))), a * a)

    def test_low_threshold_deep_recursion(self):
        config = MpiConfig(karatsuba_threshold=2)
        for _ in range(30):
            a = self.rng.getrandbits(self.rng.randint(0, 800))
            b = self.rng.getrandbits(self.rng.randint(0, 800))
            got = mul_karatsuba(Mpi(), from_int(a), from_int(b), config)
            self.assertEqual(to_int(got), a * b)

    def test_depth_bound_falls_back(self):
        config = MpiConfig(karatsuba_threshold=4, karatsuba_max_depth=1)
        a = _limbs_value(self.rng, 40)
        b = _limbs_value(self.rng, 40)
        got = mul(Mpi(), from_int(a), from_int(b), config)
        self.assertEqual(to_int(got), a * b)

    def test_aliasing(self):
        a = _limbs_value(self.rng, 70)
        x = from_int(a)
        mul(x, x, x)
        self.assertEqual(to_int(x), a * a)

    def test_commutative_associative(self):
        config = MpiConfig(karatsuba_threshold=4)
        for _ in range(10):
            a, b, c = (from_int(self.rng.getrandbits(500)) for _ in range(3))
            ab = mul(Mpi(), a, b, config)
            self.assertEqual(compare(ab, mul(Mpi(), b, a, config)), 0)
            left = mul(Mpi(), ab, c, config)
            right = mul(Mpi(), a, mul(Mpi(), b, c, config), config)
            self.assertEqual(compare(left, right), 0)


class TestMulU32(unittest.TestCase):

    def test_random_not_aliased(self):
        rng = random.Random(9)
        for _ in range(200):
            a = rng.getrandbits(rng.randint(0, 400))
            u = rng.getrandbits(32)
            self.assertEqual(to_int(mul_u32(Mpi(), from_int(a), u)), a * u)

    def test_aliased(self):
        x = from_int(2 ** 100 - 1)
        mul_u32(x, x, 0xFFFFFFFF)
        self.assertEqual(to_int(x), (2 ** 100 - 1) * 0xFFFFFFFF)

    def test_capacity(self):
        x = from_int(2 ** 62 - 1)           # 2 limbs
        r = mul_u32(Mpi(), x, 0xFFFFFFFF)
        self.assertGreaterEqual(r.capacity, 3)

    def test_range(self):
        with self.assertRaises(MpiRangeError):
            mul_u32(Mpi(), from_int(1), 1 << 32)


if __name__ == "__main__":
    unittest.main()
