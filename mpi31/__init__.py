"""
mpi31: arbitrary-precision unsigned integers on 31-bit limbs.

Values are little-endian arrays of 31-bit limbs held in numpy uint32 words;
bit 31 of each word is carry/borrow space and is zero at rest.

  magnitude = sum(limb[i] * 2^(31*i))

Operations take already-constructed values as in/out parameters
(destination first) and return the destination:

  from mpi31 import Mpi, from_decimal, mul, divmod_qr
  a, b = Mpi(), Mpi()
  from_decimal(a, "22876792454961")
  from_decimal(b, "1853020188851841")
  mul(a, a, b)

Only non-negative magnitudes exist: a subtraction that would go negative
raises NegativeResultError instead of producing a value.
"""

__version__ = "0.3.0"

from .limbs import (
    Mpi,
    from_u32, from_u64, to_u32, to_u64, from_decimal,
    compare, compare_u32,
)
from .arith import (
    add, sub, add_u32, add_u64, sub_u32,
    mul, mul_naive, mul_karatsuba, mul_u32,
    test_bit, set_bit, mul_pow2, div_pow2_floor, mod_pow2, bit_length,
    divmod_qr, div_q, mod_r,
    gcd,
)
from .config import MpiConfig, DEFAULT_CONFIG
from .errors import (
    MpiError, MpiAllocationError, NegativeResultError, MpiZeroDivisionError,
    MpiRangeError, MalformedDecimalError, UnsupportedBaseError, MpiStateError,
)
from .logging import RunLogger, RunManifest

__all__ = [
    "Mpi",
    "from_u32", "from_u64", "to_u32", "to_u64", "from_decimal",
    "compare", "compare_u32",
    "add", "sub", "add_u32", "add_u64", "sub_u32",
    "mul", "mul_naive", "mul_karatsuba", "mul_u32",
    "test_bit", "set_bit", "mul_pow2", "div_pow2_floor", "mod_pow2",
    "bit_length",
    "divmod_qr", "div_q", "mod_r",
    "gcd",
    "MpiConfig", "DEFAULT_CONFIG",
    "MpiError", "MpiAllocationError", "NegativeResultError",
    "MpiZeroDivisionError", "MpiRangeError", "MalformedDecimalError",
    "UnsupportedBaseError", "MpiStateError",
    "RunLogger", "RunManifest",
]
