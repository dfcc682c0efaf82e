"""
Bit-level operations: test/set, shifts by powers of two, bit length.

A bit index ``i`` lives in limb ``i // 31`` at position ``i % 31``.  Missing
limbs read as zero.
"""

from typing import List

from ..constants import LIMB_BITS, LIMB_MASK, U64_MAX, ceil_div
from ..errors import MpiRangeError, UnsupportedBaseError
from ..limbs.store import Mpi


def _check_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MpiRangeError(f"{name} must be a non-negative int, got {value!r}")
    return value


def test_bit(op: Mpi, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``op`` (0 or 1)."""
    op._check_live()
    word, bit = divmod(_check_count(bit_index, "bit_index"), LIMB_BITS)
    r = int(op.data[word]) if word < op.capacity else 0
    return (r >> bit) & 1


# keep pytest from collecting test_bit as a test when it is imported
test_bit.__test__ = False


def set_bit(rop: Mpi, bit_index: int) -> Mpi:
    """Set bit ``bit_index`` of ``rop``, enlarging as needed."""
    word, bit = divmod(_check_count(bit_index, "bit_index"), LIMB_BITS)
    rop.enlarge(word + 1)
    rop.data[word] |= 1 << bit
    return rop


def bit_length(op: Mpi, base: int = 2) -> int:
    """Bits needed to represent ``op`` in base 2; 0 for the value 0."""
    if base != 2:
        raise UnsupportedBaseError(base, 2)
    a = op.limbs()
    for i in range(len(a) - 1, -1, -1):
        if a[i]:
            return LIMB_BITS * i + a[i].bit_length()
    return 0


# ---------------------------------------------------------------------------
# Shifts
# ---------------------------------------------------------------------------

def _word_u64(a: List[int], n: int) -> int:
    """Three consecutive limbs from ``n`` packed into a 64-bit word."""
    r = 0
    if n < len(a):
        r |= a[n]
    if n + 1 < len(a):
        r |= a[n + 1] << LIMB_BITS
    if n + 2 < len(a):
        r |= a[n + 2] << (2 * LIMB_BITS)
    return r & U64_MAX


def _word_lshift(a: List[int], n: int, lshift: int) -> int:
    """Limb ``n`` after a left shift of ``lshift`` (< 31) bits."""
    r = 0
    if n < len(a):
        r |= (a[n] << lshift) & LIMB_MASK
    if 0 < n <= len(a):
        r |= a[n - 1] >> (LIMB_BITS - lshift)
    return r


def mul_pow2(rop: Mpi, op1: Mpi, shift: int) -> Mpi:
    """rop = op1 * 2^shift (compacted).

    Capacity before compaction is op1.capacity + ceil(shift / 31).
    """
    shift = _check_count(shift, "shift")
    words = ceil_div(shift, LIMB_BITS)
    word_shift, bit_shift = divmod(shift, LIMB_BITS)

    a = op1.limbs()
    capacity = len(a) + words
    tmp = [
        _word_lshift(a, i - word_shift, bit_shift) if i >= word_shift else 0
        for i in range(capacity)
    ]
    rop.set_limbs(tmp)
    return rop.compact()


def div_pow2_floor(q: Mpi, n: Mpi, shift: int) -> Mpi:
    """q = floor(n / 2^shift), i.e. ``n >> shift``.

    Whole limbs are dropped first, then each remaining limb is rebuilt from
    up to three source limbs so bits crossing limb boundaries are kept.
    """
    shift = _check_count(shift, "shift")
    words, bits = divmod(shift, LIMB_BITS)

    a = n.limbs()
    capacity = len(a) - words if len(a) >= words else 0
    if bits == 0:
        tmp = a[words:words + capacity]
    else:
        tmp = [(_word_u64(a, i + words) >> bits) & LIMB_MASK
               for i in range(capacity)]
    q.set_limbs(tmp)
    return q


def mod_pow2(r: Mpi, n: Mpi, shift: int) -> Mpi:
    """r = n mod 2^shift: the low ``shift`` bits of ``n`` (compacted)."""
    shift = _check_count(shift, "shift")
    words, bits = divmod(shift, LIMB_BITS)

    a = n.limbs()
    tmp = [0] * (words + 1)
    low = min(words, len(a))
    tmp[:low] = a[:low]
    if bits and words < len(a):
        tmp[words] = a[words] & ((1 << bits) - 1)
    r.set_limbs(tmp)
    return r.compact()
