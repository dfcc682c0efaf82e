"""
Addition and unsigned subtraction on 31-bit limbs.

Carry/borrow at each limb is bit 31 of the 32-bit intermediate, which is then
masked back into range.  All source limbs are read before the destination is
written, so ``rop`` may alias either operand.
"""

from typing import List, Tuple

from ..constants import LIMB_BITS, LIMB_MASK, U32_LIMBS, U32_MAX, U64_LIMBS, U64_MAX
from ..errors import NegativeResultError
from ..limbs.convert import check_native, split_native
from ..limbs.store import Mpi


def _add_limbs(a: List[int], b: List[int], width: int) -> Tuple[List[int], int]:
    out = [0] * width
    c = 0
    for n in range(width):
        r1 = a[n] if n < len(a) else 0
        r2 = b[n] if n < len(b) else 0
        s = r1 + r2 + c
        c = s >> LIMB_BITS
        out[n] = s & LIMB_MASK
    return out, c


def _sub_limbs(a: List[int], b: List[int], width: int) -> Tuple[List[int], int]:
    out = [0] * width
    c = 0
    for n in range(width):
        r1 = a[n] if n < len(a) else 0
        r2 = b[n] if n < len(b) else 0
        d = r1 - r2 - c
        c = 1 if d < 0 else 0
        out[n] = d & LIMB_MASK
    return out, c


def _store_sum(rop: Mpi, a: List[int], b: List[int], capacity: int) -> Mpi:
    rop.enlarge(capacity)
    out, c = _add_limbs(a, b, rop.capacity)
    if c:
        rop.enlarge(capacity + 1)
        out.append(c)
    rop.set_limbs(out)
    return rop


def _store_difference(rop: Mpi, a: List[int], b: List[int], capacity: int) -> Mpi:
    width = max(capacity, rop.capacity)
    out, c = _sub_limbs(a, b, width)
    if c:
        raise NegativeResultError()
    rop.set_limbs(out)
    return rop


# ---------------------------------------------------------------------------
# Mpi (+/-) Mpi
# ---------------------------------------------------------------------------

def add(rop: Mpi, op1: Mpi, op2: Mpi) -> Mpi:
    """rop = op1 + op2 (compacted)."""
    capacity = max(op1.capacity, op2.capacity)
    return _store_sum(rop, op1.limbs(), op2.limbs(), capacity).compact()


def sub(rop: Mpi, op1: Mpi, op2: Mpi) -> Mpi:
    """rop = op1 - op2 (compacted).

    Raises:
        NegativeResultError: op1 < op2.  ``rop`` is left unchanged.
    """
    capacity = max(op1.capacity, op2.capacity)
    return _store_difference(rop, op1.limbs(), op2.limbs(), capacity).compact()


# ---------------------------------------------------------------------------
# Fused native-operand paths (result not compacted)
# ---------------------------------------------------------------------------

def add_u32(rop: Mpi, op1: Mpi, op2: int) -> Mpi:
    """rop = op1 + op2 for a native u32 ``op2``."""
    b = split_native(check_native(op2, U32_MAX), U32_LIMBS)
    return _store_sum(rop, op1.limbs(), b, max(op1.capacity, U32_LIMBS))


def add_u64(rop: Mpi, op1: Mpi, op2: int) -> Mpi:
    """rop = op1 + op2 for a native u64 ``op2``."""
    b = split_native(check_native(op2, U64_MAX), U64_LIMBS)
    return _store_sum(rop, op1.limbs(), b, max(op1.capacity, U64_LIMBS))


def sub_u32(rop: Mpi, op1: Mpi, op2: int) -> Mpi:
    """rop = op1 - op2 for a native u32 ``op2``.

    Raises:
        NegativeResultError: op1 < op2.  ``rop`` is left unchanged.
    """
    b = split_native(check_native(op2, U32_MAX), U32_LIMBS)
    return _store_difference(rop, op1.limbs(), b, max(op1.capacity, U32_LIMBS))
