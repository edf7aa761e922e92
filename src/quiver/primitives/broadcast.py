"""
Broadcasting of scalars and vectors across vectors and matrices.

Three families of operation:

1. Scalar broadcast: ``op(x[i], s)`` for every element of a vector or matrix.
   Scalar-on-the-left forms compute ``op(s, x[i])``. Subtraction and division
   do not commute, so ``scalar_subtract(10, [1, 2, 3])`` is ``[9, 8, 7]``
   while ``subtract_scalar([1, 2, 3], 10)`` is ``[-9, -8, -7]``.
2. Row / column broadcast: a vector is applied to every row of a matrix
   (length must equal the column count) or element ``i`` of the vector is
   applied to every entry of row ``i`` (length must equal the row count).
3. Generic broadcast: a caller-supplied binary operation, vectorised with
   ``jax.vmap``. The operation receives scalars and must be JAX-traceable.
"""

from typing import Callable, Union

import jax
import jax.numpy as jnp
from jaxtyping import Array, Num

from quiver.types.arrays import ArrayLike, Scalar
from quiver.types.errors import DimensionMismatch, DivisionByZero
from quiver.types.invariants import (
    as_array,
    as_float,
    as_matrix,
    as_vector,
    assert_no_zero,
)


BinaryOp = Callable[[jax.Array, jax.Array], jax.Array]


def _scalar(value: Scalar) -> Union[int, float, jax.Array]:
    # Python numbers stay weakly typed so integer arrays remain integer.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    arr = jnp.asarray(value)
    if arr.ndim != 0:
        raise DimensionMismatch(f"Expected a scalar, got shape {arr.shape}")
    return arr


def _check_scalar_divisor(value: Union[int, float, jax.Array]) -> None:
    if bool(jnp.asarray(value) == 0):
        raise DivisionByZero("Cannot divide by zero")


# === Scalar on the right ===


def add_scalar(array: ArrayLike, value: Scalar) -> Num[Array, "..."]:
    """Add ``value`` to every element."""
    return as_array(array) + _scalar(value)


def subtract_scalar(array: ArrayLike, value: Scalar) -> Num[Array, "..."]:
    """Compute ``array[i] - value``."""
    return as_array(array) - _scalar(value)


def multiply_scalar(array: ArrayLike, value: Scalar) -> Num[Array, "..."]:
    """Compute ``array[i] * value``."""
    return as_array(array) * _scalar(value)


def divide_scalar(array: ArrayLike, value: Scalar) -> Num[Array, "..."]:
    """
    Compute ``array[i] / value`` in floating point.

    Raises:
        DivisionByZero: If ``value`` is zero.
    """
    s = _scalar(value)
    _check_scalar_divisor(s)
    return as_float(as_array(array)) / s


# === Scalar on the left ===


def scalar_add(value: Scalar, array: ArrayLike) -> Num[Array, "..."]:
    """Compute ``value + array[i]``."""
    return _scalar(value) + as_array(array)


def scalar_subtract(value: Scalar, array: ArrayLike) -> Num[Array, "..."]:
    """Compute ``value - array[i]`` (not ``array[i] - value``)."""
    return _scalar(value) - as_array(array)


def scalar_multiply(value: Scalar, array: ArrayLike) -> Num[Array, "..."]:
    """Compute ``value * array[i]``."""
    return _scalar(value) * as_array(array)


def scalar_divide(value: Scalar, array: ArrayLike) -> Num[Array, "..."]:
    """
    Compute ``value / array[i]`` in floating point.

    Raises:
        DivisionByZero: If any element of ``array`` is zero.
    """
    arr = as_array(array)
    assert_no_zero(arr)
    return _scalar(value) / as_float(arr)


# === Row and column broadcast ===


def _row_operands(matrix: ArrayLike, vector: ArrayLike) -> tuple[jax.Array, jax.Array]:
    m = as_matrix(matrix)
    v = as_vector(vector)
    if v.shape[0] != m.shape[1]:
        raise DimensionMismatch(
            f"Row vector length must match matrix column count, got {v.shape[0]} and {m.shape[1]}"
        )
    return m, v[None, :]


def _column_operands(matrix: ArrayLike, vector: ArrayLike) -> tuple[jax.Array, jax.Array]:
    m = as_matrix(matrix)
    v = as_vector(vector)
    if v.shape[0] != m.shape[0]:
        raise DimensionMismatch(
            f"Column vector length must match matrix row count, got {v.shape[0]} and {m.shape[0]}"
        )
    return m, v[:, None]


def add_to_each_row(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Add ``vector`` element-wise to every row: ``m[i][j] + v[j]``."""
    m, v = _row_operands(matrix, vector)
    return m + v


def add_to_each_column(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Add ``v[i]`` to every entry of row ``i``: ``m[i][j] + v[i]``."""
    m, v = _column_operands(matrix, vector)
    return m + v


def subtract_from_each_row(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Compute ``m[i][j] - v[j]``."""
    m, v = _row_operands(matrix, vector)
    return m - v


def subtract_from_each_column(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Compute ``m[i][j] - v[i]``."""
    m, v = _column_operands(matrix, vector)
    return m - v


def multiply_each_row(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Compute ``m[i][j] * v[j]``."""
    m, v = _row_operands(matrix, vector)
    return m * v


def multiply_each_column(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Compute ``m[i][j] * v[i]``."""
    m, v = _column_operands(matrix, vector)
    return m * v


def divide_each_row(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """
    Compute ``m[i][j] / v[j]`` in floating point.

    Raises:
        DivisionByZero: If any element of ``vector`` is zero.
    """
    m, v = _row_operands(matrix, vector)
    assert_no_zero(v[0])
    return as_float(m) / as_float(v)


def divide_each_column(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r c"]:
    """Compute ``m[i][j] / v[i]`` in floating point."""
    m, v = _column_operands(matrix, vector)
    assert_no_zero(v[:, 0])
    return as_float(m) / as_float(v)


# === Generic broadcast ===


def broadcast_with(
    array: ArrayLike,
    value: Scalar,
    operation: BinaryOp,
) -> Num[Array, "..."]:
    """
    Apply ``operation(element, value)`` to every element.

    Enables custom transformations without new named operators, e.g.
    ``broadcast_with(v, 2.0, jnp.power)`` squares every element.

    Args:
        array: Vector or matrix.
        value: Scalar second operand.
        operation: Binary function of two scalars, traceable by JAX.

    Returns:
        New array of the same shape.
    """
    arr = as_array(array)
    if arr.size == 0:
        return arr
    fn = jax.vmap(operation, in_axes=(0, None))
    if arr.ndim == 2:
        fn = jax.vmap(fn, in_axes=(0, None))
    return fn(arr, jnp.asarray(value))


def broadcast_with_row(
    matrix: ArrayLike,
    vector: ArrayLike,
    operation: BinaryOp,
) -> Num[Array, "r c"]:
    """Apply ``operation(m[i][j], v[j])`` across every row."""
    m, v = _row_operands(matrix, vector)
    if m.size == 0:
        return m
    per_row = jax.vmap(operation, in_axes=(0, 0))
    return jax.vmap(per_row, in_axes=(0, None))(m, v[0])


def broadcast_with_column(
    matrix: ArrayLike,
    vector: ArrayLike,
    operation: BinaryOp,
) -> Num[Array, "r c"]:
    """Apply ``operation(m[i][j], v[i])`` down every column."""
    m, v = _column_operands(matrix, vector)
    if m.size == 0:
        return m
    per_row = jax.vmap(operation, in_axes=(0, None))
    return jax.vmap(per_row, in_axes=(0, 0))(m, v[:, 0])
