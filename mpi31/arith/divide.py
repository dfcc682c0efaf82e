"""
Restoring binary long division.

One dividend bit per iteration, from the most significant down:

  r = (r << 1) | bit_i(n)
  if r >= d:  r -= d;  q |= 1 << i

O(bit_length(n)) iterations, each an O(limbs) shift/compare/subtract.
"""

from typing import Tuple

from ..errors import MpiStateError, MpiZeroDivisionError
from ..limbs.compare import compare, compare_u32
from ..limbs.convert import from_u32
from ..limbs.store import Mpi
from .addsub import sub
from .bits import bit_length, mul_pow2, set_bit, test_bit


def divmod_qr(q: Mpi, r: Mpi, n: Mpi, d: Mpi) -> Tuple[Mpi, Mpi]:
    """Compute q = n // d and r = n % d.

    ``q`` and ``r`` may alias ``n`` or ``d`` but not each other.

    Raises:
        MpiZeroDivisionError: d == 0.
        MpiStateError: q and r are the same object.
    """
    if q is r:
        raise MpiStateError("quotient and remainder must be distinct values")

    n0 = n.copy()
    d0 = d.copy()

    if compare_u32(d0, 0) == 0:
        raise MpiZeroDivisionError()

    from_u32(q, 0)
    from_u32(r, 0)

    for i in range(bit_length(n0) - 1, -1, -1):
        mul_pow2(r, r, 1)
        if test_bit(n0, i):
            set_bit(r, 0)
        if compare(r, d0) >= 0:
            sub(r, r, d0)
            set_bit(q, i)

    q.compact()
    r.compact()
    return q, r


def div_q(q: Mpi, n: Mpi, d: Mpi) -> Mpi:
    """q = n // d."""
    divmod_qr(q, Mpi(), n, d)
    return q


def mod_r(r: Mpi, n: Mpi, d: Mpi) -> Mpi:
    """r = n % d."""
    divmod_qr(Mpi(), r, n, d)
    return r
