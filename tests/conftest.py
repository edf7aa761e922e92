"""Pytest configuration and fixtures."""

import pytest
import jax
import jax.numpy as jnp


@pytest.fixture
def key():
    """Provide a PRNG key for tests."""
    return jax.random.PRNGKey(42)


@pytest.fixture
def embeddings():
    """Provide a tiny three-dimensional word embedding table."""
    return {
        "running": jnp.array([0.9, 0.1, 0.0]),
        "shoes": jnp.array([0.8, 0.2, 0.1]),
        "sneakers": jnp.array([0.85, 0.15, 0.05]),
        "comfortable": jnp.array([0.3, 0.7, 0.2]),
        "coffee": jnp.array([0.0, 0.1, 0.95]),
        "mug": jnp.array([0.05, 0.05, 0.9]),
    }


@pytest.fixture
def database():
    """Provide a small embedding database: two near-duplicates and one outlier."""
    return jnp.array([
        [1.0, 0.0, 0.0],
        [0.99, 0.01, 0.0],
        [0.0, 0.0, 1.0],
    ])
