"""
Limb storage for multi-precision integers.

An ``Mpi`` owns one 1-D ``numpy.uint32`` buffer of limbs, least significant
first.  ``capacity`` is the buffer length; the significant length may be
shorter when trailing limbs are zero.  Growth only happens in ``enlarge`` and
shrinking only in ``compact``.
"""

from typing import Iterable, List

import numpy as np

from ..constants import LIMB_BITS, LIMB_DTYPE, LIMB_MASK, U32_MAX
from ..errors import MpiAllocationError, MpiRangeError, MpiStateError


def _allocate(capacity: int) -> np.ndarray:
    try:
        return np.zeros(capacity, dtype=LIMB_DTYPE)
    except MemoryError as exc:
        raise MpiAllocationError(capacity) from exc


class Mpi:
    """Unsigned multi-precision integer on 31-bit limbs.

    Construct empty (the value 0, no storage), then fill it through the
    conversion or arithmetic functions:

        x = Mpi()
        from_decimal(x, "18446744073709551616")
        mul(x, x, x)

    Operators (``+ - * // % << >>`` and comparisons) allocate fresh results.
    """

    __slots__ = ("data", "_cleared")

    def __init__(self):
        self.data = np.zeros(0, dtype=LIMB_DTYPE)
        self._cleared = False

    # -- storage ------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return int(self.data.shape[0])

    @property
    def significant_length(self) -> int:
        nz = np.flatnonzero(self.data)
        return int(nz[-1]) + 1 if nz.size else 0

    def _check_live(self):
        if self._cleared:
            raise MpiStateError("Mpi used after clear()")

    def enlarge(self, capacity: int) -> "Mpi":
        """Grow to exactly ``capacity`` limbs, zero-filling the new tail.

        No-op if the value already holds at least ``capacity`` limbs.
        """
        self._check_live()
        old = self.capacity
        if capacity > old:
            grown = _allocate(capacity)
            grown[:old] = self.data
            self.data = grown
        return self

    def compact(self) -> "Mpi":
        """Drop trailing zero limbs; capacity 0 represents the value 0."""
        self._check_live()
        size = self.significant_length
        if size != self.capacity:
            shrunk = _allocate(size)
            shrunk[:] = self.data[:size]
            self.data = shrunk
        return self

    def set(self, op: "Mpi") -> "Mpi":
        """Deep-copy ``op`` into this value.

        Storage never shrinks here: limbs beyond ``op.capacity`` are zeroed.
        """
        src = op.data.copy()
        n = src.shape[0]
        self.enlarge(n)
        self.data[:n] = src
        self.data[n:] = 0
        return self

    def set_limbs(self, limbs: Iterable[int]) -> "Mpi":
        """Copy plain-int limbs in, same tail semantics as :meth:`set`."""
        values: List[int] = list(limbs)
        n = len(values)
        self.enlarge(n)
        if n:
            arr = np.array(values, dtype=np.uint64)
            if int(arr.max()) > LIMB_MASK:
                raise MpiRangeError(
                    f"limb exceeds {LIMB_BITS} bits: {int(arr.max()):#x}"
                )
            self.data[:n] = arr.astype(LIMB_DTYPE)
        self.data[n:] = 0
        return self

    def clear(self):
        """Release limb storage.  The value must not be used afterwards."""
        self.data = np.zeros(0, dtype=LIMB_DTYPE)
        self._cleared = True

    # -- inspection ---------------------------------------------------------

    def limbs(self) -> List[int]:
        """Limbs as plain Python ints, least significant first."""
        self._check_live()
        return [int(x) for x in self.data.tolist()]

    def is_zero(self) -> bool:
        self._check_live()
        return not self.data.any()

    def copy(self) -> "Mpi":
        return Mpi().set(self)

    def __repr__(self):
        if self._cleared:
            return "Mpi(<cleared>)"
        hexlimbs = ", ".join(f"0x{x:08x}" for x in self.limbs())
        return f"Mpi(capacity={self.capacity}, limbs=[{hexlimbs}])"

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.clear()

    # -- operators (fresh result, delegate to module functions) -------------

    def __add__(self, other):
        from ..arith.addsub import add, add_u64
        if isinstance(other, Mpi):
            return add(Mpi(), self, other)
        if isinstance(other, int):
            return add_u64(Mpi(), self, other).compact()
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        from ..arith.addsub import sub, sub_u32
        if isinstance(other, Mpi):
            return sub(Mpi(), self, other)
        if isinstance(other, int):
            return sub_u32(Mpi(), self, other).compact()
        return NotImplemented

    def __mul__(self, other):
        from ..arith.mul import mul, mul_u32
        if isinstance(other, Mpi):
            return mul(Mpi(), self, other)
        if isinstance(other, int):
            return mul_u32(Mpi(), self, other).compact()
        return NotImplemented

    __rmul__ = __mul__

    def __divmod__(self, other):
        from ..arith.divide import divmod_qr
        if not isinstance(other, Mpi):
            return NotImplemented
        q, r = Mpi(), Mpi()
        divmod_qr(q, r, self, other)
        return q, r

    def __floordiv__(self, other):
        if not isinstance(other, Mpi):
            return NotImplemented
        return divmod(self, other)[0]

    def __mod__(self, other):
        if not isinstance(other, Mpi):
            return NotImplemented
        return divmod(self, other)[1]

    def __lshift__(self, shift):
        from ..arith.bits import mul_pow2
        return mul_pow2(Mpi(), self, shift)

    def __rshift__(self, shift):
        from ..arith.bits import div_pow2_floor
        return div_pow2_floor(Mpi(), self, shift)

    def _cmp(self, other):
        from .compare import compare, compare_u32
        from .reference import from_int
        if isinstance(other, Mpi):
            return compare(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                return 1
            if other <= U32_MAX:
                return compare_u32(self, other)
            return compare(self, from_int(other))
        return NotImplemented

    def __eq__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c == 0

    def __ne__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c != 0

    def __lt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c < 0

    def __le__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c <= 0

    def __gt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c > 0

    def __ge__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c >= 0

    __hash__ = None

    def __bool__(self):
        return not self.is_zero()
