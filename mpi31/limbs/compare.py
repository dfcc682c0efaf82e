"""
Total order over magnitudes.

Operands are padded with implicit zero limbs, so compacted and
non-compacted representations of the same value compare equal.
"""

from ..constants import U32_LIMBS, U32_MAX
from .convert import check_native, split_native
from .store import Mpi


def _compare_limbs(a, b) -> int:
    width = max(len(a), len(b))
    for n in range(width - 1, -1, -1):
        r1 = a[n] if n < len(a) else 0
        r2 = b[n] if n < len(b) else 0
        if r1 < r2:
            return -1
        if r1 > r2:
            return +1
    return 0


def compare(op1: Mpi, op2: Mpi) -> int:
    """Return -1, 0 or +1 as op1 is less than, equal to or greater than op2."""
    return _compare_limbs(op1.limbs(), op2.limbs())


def compare_u32(op1: Mpi, op2: int) -> int:
    """Compare against a native u32, promoted to two limbs."""
    op2 = check_native(op2, U32_MAX)
    return _compare_limbs(op1.limbs(), split_native(op2, U32_LIMBS))
