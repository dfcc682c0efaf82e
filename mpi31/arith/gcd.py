"""
Greatest common divisor by the Euclidean algorithm.

gcd(a, 0) = a;  gcd(a, b) = gcd(b, a mod b).  The tail call is run as a loop
so deep remainder sequences do not grow the Python stack.
"""

from ..limbs.compare import compare_u32
from ..limbs.store import Mpi
from .divide import divmod_qr


def gcd(rop: Mpi, op1: Mpi, op2: Mpi) -> Mpi:
    """rop = gcd(op1, op2).  gcd(0, 0) is 0."""
    a = op1.copy()
    b = op2.copy()
    q = Mpi()
    r = Mpi()

    while compare_u32(b, 0) != 0:
        divmod_qr(q, r, a, b)
        a, b, r = b, r, a

    rop.set(a)
    return rop.compact()
