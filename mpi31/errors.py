"""
Error types for mpi31.

Every failure is a contract violation by the caller.  A raised error never
leaves a negative or partially written magnitude in the destination.
"""


class MpiError(Exception):
    """Base class for all mpi31 errors."""


class MpiAllocationError(MpiError, MemoryError):
    """Limb storage could not be allocated."""

    def __init__(self, words: int):
        self.words = words
        super().__init__(f"Out of memory ({words} words requested)")


class NegativeResultError(MpiError, ArithmeticError):
    """Unsigned subtraction would produce a negative magnitude."""

    def __init__(self, message: str = "Negative numbers not supported"):
        super().__init__(message)


class MpiZeroDivisionError(MpiError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class MpiRangeError(MpiError, ValueError):
    """Native operand, shift or bit index outside its allowed range."""


class MalformedDecimalError(MpiError, ValueError):
    """Decimal text contains a character other than '0'-'9'."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid decimal digit {text[position]!r} at position {position}"
        )


class UnsupportedBaseError(MpiError, ValueError):
    def __init__(self, base: int, supported: int):
        self.base = base
        super().__init__(f"Unsupported base {base} (only base {supported})")


class MpiStateError(MpiError, RuntimeError):
    """Value used after clear(), or an invalid aliasing of outputs."""
