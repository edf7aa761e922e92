"""Semantic array types for documentation and runtime validation."""

from typing import Any, Sequence, TypeVar, Union

import numpy as np
from jaxtyping import Array, Bool, Float, Num


# === Dimension type variables (for documentation) ===
N = TypeVar("N")  # Vector length
R = TypeVar("R")  # Matrix rows
C = TypeVar("C")  # Matrix columns
D = TypeVar("D")  # Embedding dimension


# === Container aliases ===
# Shapes are documentation only. Runtime enforcement is handled by the
# invariants module, which raises the errors in quiver.types.errors.

Vector = Num[Array, "n"]
"""
Ordered, fixed-length sequence of numeric scalars sharing one dtype.

Invariants:
- ndim == 1
- len >= 0
"""

Matrix = Num[Array, "r c"]
"""
Ordered sequence of equal-length rows.

Invariants:
- ndim == 2 (never ragged once constructed)
- an empty matrix has shape (0, 0)
"""

FloatVector = Float[Array, "n"]
"""Vector promoted to a floating dtype (division, norms, means)."""

FloatMatrix = Float[Array, "r c"]

BoolMask = Bool[Array, "n"]
"""
Boolean selector derived from an array of the same length.

Invariant:
- len(mask) == len(source)
"""

Scalar = Union[int, float, Num[Array, ""]]
"""A single numeric value, used as a broadcast operand."""

ArrayLike = Union[Array, np.ndarray, Sequence[Any]]
"""Anything the kernel will coerce: lists, nested lists, NumPy or JAX arrays."""
