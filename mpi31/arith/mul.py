"""
Multiplication: schoolbook base case and Karatsuba recursion.

``mul`` always goes through Karatsuba; operands with fewer than
``config.karatsuba_threshold`` limbs (32 by default) fall through to the
schoolbook product.

Karatsuba identity with B = 2^(31*m):
  x = x1*B + x0,  y = y1*B + y0
  z2 = x1*y1
  z0 = x0*y0
  z1 = (x0 + x1)(y0 + y1) - z2 - z0
  x*y = z2*B^2 + z1*B + z0
"""

from typing import Optional

from ..config import DEFAULT_CONFIG, MpiConfig
from ..constants import LIMB_BITS, LIMB_MASK, U32_MAX
from ..limbs.convert import check_native
from ..limbs.store import Mpi
from .addsub import add, sub
from .bits import div_pow2_floor, mod_pow2, mul_pow2


def mul_u32(rop: Mpi, op1: Mpi, op2: int) -> Mpi:
    """rop = op1 * op2 for a native u32 ``op2`` (not compacted).

    Result capacity is op1.capacity + 1, plus one more limb if the final
    carry does not fit.
    """
    op2 = check_native(op2, U32_MAX)
    a = op1.limbs()
    out = [0] * (len(a) + 1)
    c = 0
    for n, limb in enumerate(a):
        r = limb * op2 + c
        out[n] = r & LIMB_MASK
        c = r >> LIMB_BITS
    k = len(a)
    while c:
        if k == len(out):
            out.append(0)
        out[k] = c & LIMB_MASK
        c >>= LIMB_BITS
        k += 1
    rop.enlarge(len(out))
    rop.set_limbs(out)
    return rop


def mul_naive(rop: Mpi, op1: Mpi, op2: Mpi) -> Mpi:
    """Schoolbook O(n*m) product, compacted."""
    a = op1.limbs()
    b = op2.limbs()
    tmp = [0] * (len(a) + len(b))

    for n, x in enumerate(a):
        if not x:
            continue
        for m, y in enumerate(b):
            r = x * y
            c = 0
            k = n + m
            while c or r:
                if k >= len(tmp):
                    tmp.append(0)
                s = tmp[k] + (r & LIMB_MASK) + c
                r >>= LIMB_BITS
                c = s >> LIMB_BITS
                tmp[k] = s & LIMB_MASK
                k += 1

    rop.set_limbs(tmp)
    return rop.compact()


def _karatsuba(rop: Mpi, op1: Mpi, op2: Mpi, config: MpiConfig, depth: int):
    threshold = config.karatsuba_threshold
    if (op1.capacity < threshold or op2.capacity < threshold
            or depth >= config.karatsuba_max_depth):
        mul_naive(rop, op1, op2)
        return

    m = max(op1.capacity, op2.capacity) // 2
    shift = LIMB_BITS * m

    x0 = mod_pow2(Mpi(), op1, shift)
    x1 = div_pow2_floor(Mpi(), op1, shift)
    y0 = mod_pow2(Mpi(), op2, shift)
    y1 = div_pow2_floor(Mpi(), op2, shift)

    z2 = Mpi()
    z0 = Mpi()
    z1 = Mpi()
    _karatsuba(z2, x1, y1, config, depth + 1)
    _karatsuba(z0, x0, y0, config, depth + 1)

    w0 = add(Mpi(), x0, x1)
    w1 = add(Mpi(), y0, y1)
    _karatsuba(z1, w0, w1, config, depth + 1)
    sub(z1, z1, z2)
    sub(z1, z1, z0)

    mul_pow2(z2, z2, 2 * shift)
    mul_pow2(z1, z1, shift)

    add(rop, z0, z1)
    add(rop, rop, z2)
    rop.compact()


def mul_karatsuba(rop: Mpi, op1: Mpi, op2: Mpi,
                  config: Optional[MpiConfig] = None) -> Mpi:
    """Karatsuba product with a schoolbook base case, compacted."""
    _karatsuba(rop, op1, op2, config or DEFAULT_CONFIG, 0)
    return rop


def mul(rop: Mpi, op1: Mpi, op2: Mpi,
        config: Optional[MpiConfig] = None) -> Mpi:
    """rop = op1 * op2."""
    return mul_karatsuba(rop, op1, op2, config)
