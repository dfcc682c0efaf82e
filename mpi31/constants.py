"""
Limb-level constants for 31-bit multi-precision integers.

Each limb is stored in a 32-bit unsigned word.  Only the low 31 bits carry
magnitude; bit 31 is carry/borrow space and is always zero at rest.

Native operand widths:
  - u32 values occupy ceil(32/31) = 2 limbs
  - u64 values occupy ceil(64/31) = 3 limbs
"""

import numpy as np

LIMB_BITS = 31
LIMB_MASK = (1 << LIMB_BITS) - 1        # 0x7fffffff
LIMB_DTYPE = np.uint32

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


def ceil_div(n: int, d: int) -> int:
    """Ceiling division without floating point."""
    return (n + d - 1) // d


U32_LIMBS = ceil_div(32, LIMB_BITS)     # 2
U64_LIMBS = ceil_div(64, LIMB_BITS)     # 3

# Karatsuba falls back to schoolbook below this many limbs per operand
KARATSUBA_THRESHOLD = 32
KARATSUBA_MAX_DEPTH = 48

DECIMAL_BASE = 10
