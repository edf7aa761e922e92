"""
Matrix algebra: transpose, matrix-vector transform and matrix product.

``multiply_matrix`` is the inner-product based matrix product. It is a
different operation from ``quiver.primitives.arithmetic.multiply``, which
multiplies equal-shaped matrices entry by entry.
"""

import jax.numpy as jnp
from jaxtyping import Array, Num

from quiver.types.arrays import ArrayLike
from quiver.types.errors import DimensionMismatch, EmptyInput
from quiver.types.invariants import as_matrix, as_vector


def transpose(matrix: ArrayLike) -> Num[Array, "c r"]:
    """
    Swap rows and columns: ``result[j][i] = matrix[i][j]``.

    An ``r x c`` input gives a ``c x r`` output; the empty matrix transposes
    to itself.
    """
    return as_matrix(matrix).T


def multiply_matrix(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, "n m"]:
    """
    Matrix product ``A x B``.

    For ``A`` of shape (n, k) and ``B`` of shape (k, m) the result has shape
    (n, m) with ``result[i][j] = sum_k A[i][k] * B[k][j]``.

    Raises:
        EmptyInput: If either matrix has no entries.
        DimensionMismatch: If ``A``'s column count differs from ``B``'s row
            count.
    """
    a = as_matrix(lhs)
    b = as_matrix(rhs)
    if a.size == 0 or b.size == 0:
        raise EmptyInput("Cannot multiply empty matrices")
    n, k = a.shape
    k2, m = b.shape
    if k != k2:
        raise DimensionMismatch(
            f"Matrix dimensions incompatible: ({n}x{k}) x ({k2}x{m}). "
            f"Columns of first matrix ({k}) must equal rows of second matrix ({k2})."
        )
    return jnp.matmul(a, b)


def transform(matrix: ArrayLike, vector: ArrayLike) -> Num[Array, "r"]:
    """
    Matrix-vector product ``M v``: ``result[i] = dot(matrix[i], vector)``.

    Raises:
        DimensionMismatch: If the column count differs from ``len(vector)``.
    """
    m = as_matrix(matrix)
    v = as_vector(vector)
    if m.shape[1] != v.shape[0]:
        raise DimensionMismatch(
            f"Matrix columns must match vector length, got {m.shape[1]} and {v.shape[0]}"
        )
    return jnp.matmul(m, v)


def transformed_by(vector: ArrayLike, matrix: ArrayLike) -> Num[Array, "r"]:
    """Vector-first spelling of ``transform``; results are identical."""
    return transform(matrix, vector)


def column(matrix: ArrayLike, index: int) -> Num[Array, "r"]:
    """
    Extract column ``index`` as a vector.

    Raises:
        IndexError: If ``index`` is outside ``[0, columns)``.
    """
    m = as_matrix(matrix)
    if not 0 <= index < m.shape[1]:
        raise IndexError(f"Column index {index} out of range for {m.shape[1]} columns")
    return m[:, index]


def row(matrix: ArrayLike, index: int) -> Num[Array, "c"]:
    """Extract row ``index`` as a vector."""
    m = as_matrix(matrix)
    if not 0 <= index < m.shape[0]:
        raise IndexError(f"Row index {index} out of range for {m.shape[0]} rows")
    return m[index]

