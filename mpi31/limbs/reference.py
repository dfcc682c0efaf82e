"""
Pure-Python ``int`` reference for 31-bit limb values.

These serve as ground truth for correctness testing and for
``scripts/verify_mpi.py``.  ``Mpi`` comparisons against ints wider than
32 bits also convert through ``from_int``.
"""

from typing import List

from ..constants import LIMB_BITS, LIMB_MASK
from ..errors import MpiRangeError
from .store import Mpi


# ---------------------------------------------------------------------------
# int <-> limbs
# ---------------------------------------------------------------------------

def int_to_limbs(x: int) -> List[int]:
    """Compact little-endian 31-bit limbs of a non-negative int."""
    if x < 0:
        raise MpiRangeError(f"negative value {x} has no limb representation")
    out: List[int] = []
    while x:
        out.append(x & LIMB_MASK)
        x >>= LIMB_BITS
    return out


def limbs_to_int(limbs: List[int]) -> int:
    x = 0
    for limb in reversed(limbs):
        x = (x << LIMB_BITS) | int(limb)
    return x


def from_int(x: int) -> Mpi:
    """Fresh, compacted ``Mpi`` holding ``x``."""
    return Mpi().set_limbs(int_to_limbs(x))


def to_int(op: Mpi) -> int:
    return limbs_to_int(op.limbs())


def random_magnitude(rng, bits: int) -> int:
    """Uniform random int with at most ``bits`` bits."""
    return rng.getrandbits(bits) if bits > 0 else 0
