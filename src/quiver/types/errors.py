"""Error taxonomy for kernel precondition violations.

Every error is raised synchronously, before any output is produced. Results
that are merely undefined (the mean of nothing) are returned as ``None``
instead of raising.
"""


class QuiverError(ValueError):
    """Base class for caller-visible kernel failures."""


class DimensionMismatch(QuiverError):
    """Operand lengths or shapes violate an operation's precondition."""


class DivisionByZero(QuiverError, ZeroDivisionError):
    """A divisor element or scalar is exactly zero."""


class ZeroVector(QuiverError):
    """Normalisation, angle or projection against a zero-magnitude vector."""


class EmptyInput(QuiverError):
    """An operation that needs at least one element received none."""
