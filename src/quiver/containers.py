"""
Value wrappers giving vectors and matrices operator syntax.

``Vector`` and ``Matrix`` are immutable equinox modules around a single JAX
array. Every operator delegates to the kernel functions, so the same
validation and error types apply. ``*`` is always the element-wise product;
the matrix product is spelled ``@``.

    >>> v = Vector([1, 2, 3])
    >>> (10 - v).tolist()
    [9, 8, 7]
"""

from __future__ import annotations

from typing import Any, Iterator

import equinox as eqx
import jax
import numpy as np
from jaxtyping import Array, Num

from quiver.primitives import arithmetic, broadcast, matrix_ops, vector_ops
from quiver.stats import reductions
from quiver.types.arrays import ArrayLike
from quiver.types.invariants import as_matrix, as_vector


def _is_scalar(value: Any) -> bool:
    if isinstance(value, (int, float, np.generic)):
        return True
    return isinstance(value, (jax.Array, np.ndarray)) and value.ndim == 0


def _unwrap(value: Any) -> Any:
    if isinstance(value, (Vector, Matrix)):
        return value.data
    return value


class _Wrapper(eqx.Module):
    """Shared operator plumbing for Vector and Matrix."""

    def _wrap(self, data: jax.Array):
        return type(self)(data)

    def _binary(self, other, elementwise, scalar_op):
        if _is_scalar(other):
            return self._wrap(scalar_op(self.data, other))
        return self._wrap(elementwise(self.data, _unwrap(other)))

    def __add__(self, other):
        return self._binary(other, arithmetic.add, broadcast.add_scalar)

    def __sub__(self, other):
        return self._binary(other, arithmetic.subtract, broadcast.subtract_scalar)

    def __mul__(self, other):
        return self._binary(other, arithmetic.multiply, broadcast.multiply_scalar)

    def __truediv__(self, other):
        return self._binary(other, arithmetic.divide, broadcast.divide_scalar)

    def __radd__(self, other):
        if _is_scalar(other):
            return self._wrap(broadcast.scalar_add(other, self.data))
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return self._wrap(broadcast.scalar_subtract(other, self.data))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._wrap(broadcast.scalar_multiply(other, self.data))
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return self._wrap(broadcast.scalar_divide(other, self.data))
        return NotImplemented

    def __neg__(self):
        return self._wrap(broadcast.multiply_scalar(self.data, -1))

    def __jax_array__(self) -> jax.Array:
        return self.data

    def __len__(self) -> int:
        return self.data.shape[0]

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.data.shape)

    def tolist(self) -> list:
        return np.asarray(self.data).tolist()


class Vector(_Wrapper):
    """One-dimensional numeric array with vector algebra methods."""

    data: Num[Array, "n"]

    def __init__(self, data: ArrayLike):
        self.data = as_vector(_unwrap(data))

    def __iter__(self) -> Iterator[jax.Array]:
        return iter(self.data)

    def __getitem__(self, index: int) -> jax.Array:
        return self.data[index]

    def dot(self, other: Vector | ArrayLike) -> jax.Array:
        return vector_ops.dot(self.data, _unwrap(other))

    def magnitude(self) -> jax.Array:
        return vector_ops.magnitude(self.data)

    def normalized(self) -> Vector:
        return Vector(vector_ops.normalized(self.data))

    def cosine_of_angle(self, other: Vector | ArrayLike) -> jax.Array:
        return vector_ops.cosine_of_angle(self.data, _unwrap(other))

    def angle(self, other: Vector | ArrayLike) -> jax.Array:
        return vector_ops.angle(self.data, _unwrap(other))

    def distance(self, other: Vector | ArrayLike) -> jax.Array:
        return vector_ops.distance(self.data, _unwrap(other))

    def projected_onto(self, other: Vector | ArrayLike) -> Vector:
        return Vector(vector_ops.vector_projection(self.data, _unwrap(other)))

    def transformed_by(self, matrix: Matrix | ArrayLike) -> Vector:
        return Vector(matrix_ops.transformed_by(self.data, _unwrap(matrix)))

    def sum(self) -> jax.Array:
        return reductions.sum(self.data)

    def mean(self) -> jax.Array | None:
        return reductions.mean(self.data)

    def min(self) -> jax.Array | None:
        return reductions.min(self.data)

    def max(self) -> jax.Array | None:
        return reductions.max(self.data)


class Matrix(_Wrapper):
    """
    Two-dimensional numeric array of equal-length rows.

    ``m @ other`` is the matrix product for a Matrix operand and the linear
    transform for a Vector operand.
    """

    data: Num[Array, "r c"]

    def __init__(self, data: ArrayLike):
        self.data = as_matrix(_unwrap(data))

    def __iter__(self) -> Iterator[Vector]:
        return (Vector(row) for row in self.data)

    def __getitem__(self, index: int) -> Vector:
        return self.row(index)

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return Vector(matrix_ops.transform(self.data, other.data))
        if isinstance(other, Matrix):
            return Matrix(matrix_ops.multiply_matrix(self.data, other.data))
        return NotImplemented

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def columns(self) -> int:
        return self.data.shape[1]

    def transpose(self) -> Matrix:
        return Matrix(matrix_ops.transpose(self.data))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def row(self, index: int) -> Vector:
        return Vector(matrix_ops.row(self.data, index))

    def column(self, index: int) -> Vector:
        return Vector(matrix_ops.column(self.data, index))

    def transform(self, vector: Vector | ArrayLike) -> Vector:
        return Vector(matrix_ops.transform(self.data, _unwrap(vector)))

    def mean(self) -> Vector | None:
        """Column-wise mean, treating each row as one observation."""
        means = reductions.mean_vector(self.data)
        return None if means is None else Vector(means)
