"""
Conversion between limbs and native integers / decimal text.

Native widths follow fixed-width unsigned semantics: ``from_*`` rejects values
outside the width, ``to_*`` truncates (only the low ceil(width/31) limbs are
read, higher limbs are ignored).
"""

from ..constants import (
    LIMB_BITS, LIMB_MASK, U32_LIMBS, U64_LIMBS, U32_MAX, U64_MAX,
    DECIMAL_BASE,
)
from ..errors import MalformedDecimalError, MpiRangeError, UnsupportedBaseError
from .store import Mpi


# ---------------------------------------------------------------------------
# Native unsigned integers
# ---------------------------------------------------------------------------

def check_native(value: int, limit: int, name: str = "operand") -> int:
    """Validate ``0 <= value <= limit`` and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MpiRangeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise MpiRangeError(f"{name} {value} outside [0, {limit}]")
    return int(value)


def split_native(value: int, n_limbs: int):
    """Decompose a native integer into ``n_limbs`` 31-bit limbs."""
    out = []
    for _ in range(n_limbs):
        out.append(value & LIMB_MASK)
        value >>= LIMB_BITS
    return out


def _from_native(rop: Mpi, value: int, n_limbs: int) -> Mpi:
    rop.enlarge(n_limbs)
    rop.data[:n_limbs] = split_native(value, n_limbs)
    rop.data[n_limbs:] = 0
    return rop


def from_u32(rop: Mpi, value: int) -> Mpi:
    """rop = value, for 0 <= value < 2^32 (2 limbs)."""
    return _from_native(rop, check_native(value, U32_MAX), U32_LIMBS)


def from_u64(rop: Mpi, value: int) -> Mpi:
    """rop = value, for 0 <= value < 2^64 (3 limbs)."""
    return _from_native(rop, check_native(value, U64_MAX), U64_LIMBS)


def _to_native(op: Mpi, n_limbs: int, limit: int) -> int:
    r = 0
    for limb in reversed(op.limbs()[:n_limbs]):
        r = ((r << LIMB_BITS) | limb) & limit
    return r


def to_u32(op: Mpi) -> int:
    """Low 32 bits of ``op``."""
    return _to_native(op, U32_LIMBS, U32_MAX)


def to_u64(op: Mpi) -> int:
    """Low 64 bits of ``op``."""
    return _to_native(op, U64_LIMBS, U64_MAX)


# ---------------------------------------------------------------------------
# Decimal text
# ---------------------------------------------------------------------------

def from_decimal(rop: Mpi, text: str, base: int = DECIMAL_BASE) -> Mpi:
    """Parse unsigned decimal digits into ``rop``.

    No sign, whitespace or separators are accepted.  The empty string parses
    as 0.

    Raises:
        UnsupportedBaseError: base is not 10.
        MalformedDecimalError: a character is not '0'-'9'.
    """
    from ..arith.addsub import add_u32
    from ..arith.mul import mul_u32

    if base != DECIMAL_BASE:
        raise UnsupportedBaseError(base, DECIMAL_BASE)

    # Validate up front so a bad string leaves rop untouched
    for i, ch in enumerate(text):
        if not "0" <= ch <= "9":
            raise MalformedDecimalError(text, i)

    from_u32(rop, 0)
    for ch in text:
        mul_u32(rop, rop, DECIMAL_BASE)
        add_u32(rop, rop, ord(ch) - ord("0"))
        # mul_u32 adds a limb per call; trim so parsing stays linear
        rop.compact()
    return rop.compact()
