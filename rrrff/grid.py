"""
Regular input grids for inspecting fitted function approximators.
"""

import jax.numpy as jnp
from jax import Array


def generate_inputs_grid(
    min_values: Array,
    max_values: Array,
    n_samples_per_dim: Array,
) -> Array:
    """
    Generate a regular Cartesian grid of input points.

    Each dimension is sampled linearly between its min and max value.
    The first dimension varies slowest.

    Parameters
    ----------
    min_values : Array
        Lower bound per dimension, shape (n_dims,).
    max_values : Array
        Upper bound per dimension, shape (n_dims,).
    n_samples_per_dim : Array
        Number of samples per dimension, shape (n_dims,).

    Returns
    -------
    Array
        Grid points, shape (prod(n_samples_per_dim), n_dims).
    """
    min_values = jnp.atleast_1d(jnp.asarray(min_values, dtype=float))
    max_values = jnp.atleast_1d(jnp.asarray(max_values, dtype=float))
    n_samples_per_dim = [int(n) for n in jnp.atleast_1d(jnp.asarray(n_samples_per_dim))]

    assert len(min_values) == len(max_values) == len(n_samples_per_dim), (
        f"Dimension mismatch: min {len(min_values)}, max {len(max_values)}, "
        f"n_samples_per_dim {len(n_samples_per_dim)}"
    )
    assert all(n > 0 for n in n_samples_per_dim), (
        f"Sample counts must be positive, got {n_samples_per_dim}"
    )

    axes = [
        jnp.linspace(lo, hi, n)
        for lo, hi, n in zip(min_values, max_values, n_samples_per_dim)
    ]
    mesh = jnp.meshgrid(*axes, indexing="ij")

    return jnp.stack([m.ravel() for m in mesh], axis=1)
