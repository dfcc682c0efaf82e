"""
Arithmetic on 31-bit multi-precision integers.

Leaf-first:
1. addsub: add / sub and the fused native-operand paths
2. bits:   bit test/set, power-of-two shifts, bit length
3. mul:    schoolbook + Karatsuba
4. divide: restoring binary long division
5. gcd:    Euclid on top of divide
"""

from .addsub import add, sub, add_u32, add_u64, sub_u32
from .bits import (
    test_bit, set_bit, mul_pow2, div_pow2_floor, mod_pow2, bit_length,
)
from .mul import mul, mul_naive, mul_karatsuba, mul_u32
from .divide import divmod_qr, div_q, mod_r
from .gcd import gcd

__all__ = [
    "add", "sub", "add_u32", "add_u64", "sub_u32",
    "test_bit", "set_bit", "mul_pow2", "div_pow2_floor", "mod_pow2",
    "bit_length",
    "mul", "mul_naive", "mul_karatsuba", "mul_u32",
    "divmod_qr", "div_q", "mod_r",
    "gcd",
]
