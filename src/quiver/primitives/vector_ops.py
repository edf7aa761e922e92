"""
Vector algebra: dot products, norms, angles and projections.

Norm-based operations work in floating point; integer vectors are promoted.
Cosine results are not clamped to [-1, 1], so rounding can push them just
outside that range and ``angle`` can then return NaN. Callers needing strict
bounds clamp first.
"""

import jax.numpy as jnp
from jaxtyping import Array, Float, Num

from quiver.primitives.arithmetic import subtract
from quiver.types.arrays import ArrayLike
from quiver.types.invariants import (
    as_float,
    as_vector,
    assert_nonzero_magnitude,
    assert_same_length,
)
from quiver.types.errors import ZeroVector


def dot(lhs: ArrayLike, rhs: ArrayLike) -> Num[Array, ""]:
    """
    Dot product ``sum(lhs[i] * rhs[i])``.

    Raises:
        DimensionMismatch: If the vectors differ in length.
    """
    a = as_vector(lhs)
    b = as_vector(rhs)
    assert_same_length(a, b)
    return jnp.sum(a * b)


def magnitude(vector: ArrayLike) -> Float[Array, ""]:
    """Euclidean length ``sqrt(sum(v[i]**2))``; 0 for the zero vector."""
    v = as_float(as_vector(vector))
    return jnp.sqrt(jnp.sum(v * v))


def normalized(vector: ArrayLike) -> Float[Array, "n"]:
    """
    Unit vector in the direction of ``vector``.

    Raises:
        ZeroVector: If the magnitude is zero.
    """
    v = as_float(as_vector(vector))
    mag = magnitude(v)
    assert_nonzero_magnitude(mag, "Cannot normalize a zero vector")
    return v / mag


def cosine_of_angle(lhs: ArrayLike, rhs: ArrayLike) -> Float[Array, ""]:
    """
    Cosine of the angle between two vectors, ``dot / (|a| * |b|)``.

    Symmetric in its arguments. No clamping is applied.

    Raises:
        DimensionMismatch: If the vectors differ in length.
        ZeroVector: If either vector has zero magnitude.
    """
    a = as_float(as_vector(lhs))
    b = as_float(as_vector(rhs))
    assert_same_length(a, b)
    magnitude_product = magnitude(a) * magnitude(b)
    if not bool(magnitude_product > 0):
        raise ZeroVector("Cannot calculate angle with zero vector")
    return jnp.sum(a * b) / magnitude_product


def angle(lhs: ArrayLike, rhs: ArrayLike) -> Float[Array, ""]:
    """Angle between two vectors in radians."""
    return jnp.arccos(cosine_of_angle(lhs, rhs))


def angle_in_degrees(lhs: ArrayLike, rhs: ArrayLike) -> Float[Array, ""]:
    """Angle between two vectors in degrees."""
    return angle(lhs, rhs) * 180 / jnp.pi


def distance(lhs: ArrayLike, rhs: ArrayLike) -> Float[Array, ""]:
    """Euclidean distance ``|lhs - rhs|``; symmetric, zero for equal inputs."""
    return magnitude(subtract(as_vector(lhs), as_vector(rhs)))


def scalar_projection(vector: ArrayLike, onto: ArrayLike) -> Float[Array, ""]:
    """
    Signed length of the shadow of ``vector`` on the direction of ``onto``.

    Raises:
        DimensionMismatch: If the vectors differ in length.
        ZeroVector: If ``onto`` has zero magnitude.
    """
    a = as_float(as_vector(vector))
    b = as_float(as_vector(onto))
    assert_same_length(a, b)
    mag = magnitude(b)
    assert_nonzero_magnitude(mag, "Cannot project onto a zero vector")
    return jnp.sum(a * b) / mag


def vector_projection(vector: ArrayLike, onto: ArrayLike) -> Float[Array, "n"]:
    """
    Component of ``vector`` along ``onto``: ``(a.b / b.b) * b``.

    Raises:
        DimensionMismatch: If the vectors differ in length.
        ZeroVector: If ``onto`` is the zero vector.
    """
    a = as_float(as_vector(vector))
    b = as_float(as_vector(onto))
    assert_same_length(a, b)
    b_dot_b = jnp.sum(b * b)
    assert_nonzero_magnitude(b_dot_b, "Cannot project onto a zero vector")
    return (jnp.sum(a * b) / b_dot_b) * b


def orthogonal_component(vector: ArrayLike, to: ArrayLike) -> Float[Array, "n"]:
    """
    Component of ``vector`` perpendicular to ``to``.

    ``vector_projection(v, a) + orthogonal_component(v, a) == v``.
    """
    v = as_float(as_vector(vector))
    return v - vector_projection(v, to)
