"""Element-wise math functions over vectors and matrices."""

import jax.numpy as jnp
from jaxtyping import Array, Float

from quiver.types.arrays import ArrayLike
from quiver.types.invariants import as_array, as_float


def _floats(array: ArrayLike) -> Float[Array, "..."]:
    return as_float(as_array(array))


def power(array: ArrayLike, exponent: float) -> Float[Array, "..."]:
    """Raise every element to ``exponent``."""
    return jnp.power(_floats(array), exponent)


def square(array: ArrayLike) -> Float[Array, "..."]:
    x = _floats(array)
    return x * x


def sqrt(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.sqrt(_floats(array))


def exp(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.exp(_floats(array))


def log(array: ArrayLike) -> Float[Array, "..."]:
    """Natural logarithm; non-positive inputs give ``-inf`` / NaN as in JAX."""
    return jnp.log(_floats(array))


def log10(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.log10(_floats(array))


def sin(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.sin(_floats(array))


def cos(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.cos(_floats(array))


def tan(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.tan(_floats(array))


def floor(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.floor(_floats(array))


def ceil(array: ArrayLike) -> Float[Array, "..."]:
    return jnp.ceil(_floats(array))


def round(array: ArrayLike) -> Float[Array, "..."]:
    """Round half away from zero, matching C ``round``."""
    x = _floats(array)
    t = jnp.trunc(x)
    return jnp.where(jnp.abs(x - t) >= 0.5, t + jnp.sign(x), t)
