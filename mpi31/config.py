"""
Runtime configuration for multiplication.

Defaults match the reference behaviour (Karatsuba below 32 limbs falls back
to schoolbook).  Environment overrides:

  MPI31_KARATSUBA_THRESHOLD   limbs per operand below which schoolbook is used
  MPI31_KARATSUBA_MAX_DEPTH   recursion depth past which schoolbook is used
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from .constants import KARATSUBA_THRESHOLD, KARATSUBA_MAX_DEPTH
from .errors import MpiRangeError


@dataclass(frozen=True)
class MpiConfig:
    """Configuration for Karatsuba multiplication."""
    karatsuba_threshold: int = KARATSUBA_THRESHOLD   # min limbs to recurse
    karatsuba_max_depth: int = KARATSUBA_MAX_DEPTH   # recursion bound

    def __post_init__(self):
        if self.karatsuba_threshold < 2:
            raise MpiRangeError(
                f"karatsuba_threshold must be >= 2, got {self.karatsuba_threshold}"
            )
        if self.karatsuba_max_depth < 0:
            raise MpiRangeError(
                f"karatsuba_max_depth must be >= 0, got {self.karatsuba_max_depth}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MpiConfig":
        """Build a config from MPI31_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs: Dict[str, int] = {}
        for field_name, var in (
            ("karatsuba_threshold", "MPI31_KARATSUBA_THRESHOLD"),
            ("karatsuba_max_depth", "MPI31_KARATSUBA_MAX_DEPTH"),
        ):
            raw = env.get(var)
            if raw is None or raw == "":
                continue
            try:
                kwargs[field_name] = int(raw)
            except ValueError as exc:
                raise MpiRangeError(f"{var}={raw!r} is not an integer") from exc
        return cls(**kwargs)


DEFAULT_CONFIG = MpiConfig.from_env()
