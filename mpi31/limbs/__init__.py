"""
Limb storage, conversion and comparison for 31-bit multi-precision integers.
"""

from .store import Mpi
from .convert import (
    from_u32, from_u64, to_u32, to_u64, from_decimal,
)
from .compare import compare, compare_u32

__all__ = [
    "Mpi",
    "from_u32", "from_u64", "to_u32", "to_u64", "from_decimal",
    "compare", "compare_u32",
]
