"""Runtime coercion and invariant assertions for kernel operands."""

from __future__ import annotations

from typing import Any, Sequence

import jax
import jax.numpy as jnp
import numpy as np

from quiver.types.arrays import ArrayLike, BoolMask, Matrix, Vector
from quiver.types.errors import DimensionMismatch, DivisionByZero, ZeroVector


_ROW_TYPES = (list, tuple, np.ndarray, jax.Array)


def _is_row(value: Any) -> bool:
    return isinstance(value, _ROW_TYPES) or hasattr(value, "__jax_array__")


def is_ragged(rows: Sequence[Any]) -> bool:
    """
    Check whether a nested sequence has rows of differing length.

    Returns False for flat sequences and for the empty sequence.
    """
    lengths = {len(row) for row in rows if _is_row(row)}
    return len(lengths) > 1


def as_array(x: ArrayLike) -> jax.Array:
    """
    Coerce an array-like to a rank-1 or rank-2 JAX array.

    Nested Python sequences are checked for raggedness before conversion so
    that the caller gets a DimensionMismatch naming the offending row, not an
    opaque conversion error.

    Raises:
        DimensionMismatch: If rows differ in length, scalars and rows are
            mixed, or the result is not rank 1 or 2.
    """
    if hasattr(x, "__jax_array__"):
        arr = x.__jax_array__()
    elif isinstance(x, (jax.Array, np.ndarray)):
        arr = jnp.asarray(x)
    else:
        rows = list(x)
        flags = [_is_row(item) for item in rows]
        if any(flags) and not all(flags):
            raise DimensionMismatch("Cannot mix scalars and rows in one array")
        if any(flags):
            expected = len(rows[0])
            for i, row in enumerate(rows):
                if len(row) != expected:
                    raise DimensionMismatch(
                        f"Ragged matrix: row {i} has {len(row)} elements, "
                        f"expected {expected}"
                    )
            if expected == 0:
                return jnp.zeros((len(rows), 0))
            arr = jnp.stack([as_vector(row) for row in rows])
        else:
            arr = jnp.asarray(rows)

    if arr.ndim not in (1, 2):
        raise DimensionMismatch(
            f"Expected a vector or matrix, got an array of shape {arr.shape}"
        )
    return arr


def as_vector(x: ArrayLike) -> Vector:
    """Coerce to a rank-1 array; raises DimensionMismatch otherwise."""
    arr = as_array(x)
    if arr.ndim != 1:
        raise DimensionMismatch(f"Expected a vector, got shape {arr.shape}")
    return arr


def as_matrix(x: ArrayLike) -> Matrix:
    """
    Coerce to a rank-2 array.

    The empty sequence is the empty matrix of shape (0, 0).
    """
    arr = as_array(x)
    if arr.ndim == 1 and arr.shape[0] == 0:
        return jnp.zeros((0, 0), dtype=arr.dtype)
    if arr.ndim != 2:
        raise DimensionMismatch(f"Expected a matrix, got shape {arr.shape}")
    return arr


def as_mask(x: ArrayLike) -> BoolMask:
    """Coerce to a boolean vector; non-boolean data is a TypeError."""
    arr = as_vector(x)
    if arr.shape[0] == 0:
        return arr.astype(jnp.bool_)
    if arr.dtype != jnp.bool_:
        raise TypeError(f"Mask must be boolean, got dtype {arr.dtype}")
    return arr


def as_float(arr: jax.Array) -> jax.Array:
    """Promote integer and boolean arrays to the default float dtype."""
    if jnp.issubdtype(arr.dtype, jnp.floating):
        return arr
    return arr.astype(jnp.result_type(float))


def assert_same_length(
    lhs: jax.Array,
    rhs: jax.Array,
    what: str = "Vectors",
) -> None:
    """
    Assert two rank-1 operands have equal length.

    Raises:
        DimensionMismatch: If lengths differ.
    """
    if lhs.shape[0] != rhs.shape[0]:
        raise DimensionMismatch(
            f"{what} must have the same dimension, got {lhs.shape[0]} and {rhs.shape[0]}"
        )


def assert_same_shape(lhs: jax.Array, rhs: jax.Array) -> None:
    """
    Assert two operands have identical rank and shape.

    Matrices are compared row count first, then row length, so the message
    identifies which dimension disagrees.

    Raises:
        DimensionMismatch: If ranks or shapes differ.
    """
    if lhs.ndim != rhs.ndim:
        raise DimensionMismatch(
            f"Cannot combine a rank-{lhs.ndim} array with a rank-{rhs.ndim} array"
        )
    if lhs.ndim == 1:
        assert_same_length(lhs, rhs)
        return
    if lhs.shape[0] != rhs.shape[0]:
        raise DimensionMismatch(
            f"Matrices must have the same number of rows, got {lhs.shape[0]} and {rhs.shape[0]}"
        )
    if lhs.shape[1] != rhs.shape[1]:
        raise DimensionMismatch(
            f"Matrix rows must have the same dimension, got {lhs.shape[1]} and {rhs.shape[1]}"
        )


def assert_no_zero(divisor: jax.Array) -> None:
    """
    Assert no element of a divisor equals zero.

    Raises:
        DivisionByZero: Naming the first zero position.
    """
    zeros = np.argwhere(np.asarray(divisor) == 0)
    if zeros.size:
        position = tuple(int(i) for i in zeros[0])
        where = position[0] if len(position) == 1 else position
        raise DivisionByZero(f"Division by zero at index {where}")


def assert_nonzero_magnitude(magnitude: jax.Array, message: str) -> None:
    """
    Assert a magnitude (or squared magnitude) is strictly positive.

    Raises:
        ZeroVector: With the supplied message.
    """
    if not bool(magnitude > 0):
        raise ZeroVector(message)
