"""
Element-wise arithmetic on equal-shaped vectors and matrices.

Matrix arithmetic is the vector rule applied row by row, so a matrix pair must
agree in row count and in row length. ``multiply`` is the Hadamard product;
the matrix product lives in ``quiver.primitives.matrix_ops``.
"""

import jax
from jaxtyping import Array, Num

from quiver.types.arrays import ArrayLike
from quiver.types.invariants import (
    as_array,
    as_float,
    assert_no_zero,
    assert_same_shape,
)


def _operands(lhs: ArrayLike, rhs: ArrayLike) -> tuple[jax.Array, jax.Array]:
    a = as_array(lhs)
    b = as_array(rhs)
    assert_same_shape(a, b)
    return a, b


def add(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, "..."]:
    """
    Element-wise sum ``lhs[i] + rhs[i]`` (or ``[i][j]`` for matrices).

    Raises:
        DimensionMismatch: If the shapes differ.
    """
    a, b = _operands(lhs, rhs)
    return a + b


def subtract(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, "..."]:
    """Element-wise difference ``lhs[i] - rhs[i]``."""
    a, b = _operands(lhs, rhs)
    return a - b


def multiply(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, "..."]:
    """
    Hadamard product ``lhs[i] * rhs[i]``.

    For matrices this is NOT the matrix product: both operands must have the
    same shape and entries are multiplied position by position.
    """
    a, b = _operands(lhs, rhs)
    return a * b


def divide(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, "..."]:
    """
    Element-wise quotient ``lhs[i] / rhs[i]`` in floating point.

    Integer operands are promoted to the default float dtype.

    Raises:
        DimensionMismatch: If the shapes differ.
        DivisionByZero: If any element of ``rhs`` is zero.
    """
    a, b = _operands(lhs, rhs)
    assert_no_zero(b)
    return as_float(a) / as_float(b)
