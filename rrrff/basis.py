"""
Cosine basis functions for random Fourier features.

Each feature is phi_j(x) = cos(w_j . x + b_j), with frequencies
w_j ~ N(0, 2 * gamma * I) and phases b_j ~ U(0, 2 pi). Linear combinations
of these features approximate regression with the Gaussian kernel
k(x, y) = exp(-gamma * ||x - y||²).
"""

import jax
import jax.numpy as jnp
from jax import Array


def as_matrix(inputs: Array) -> Array:
    """Ensure inputs is 2D: (n_inputs, n_dims)."""
    if inputs.ndim == 1:
        return inputs[:, None]
    return inputs


def cosine_activations(periods: Array, phase: Array, inputs: Array) -> Array:
    """
    Cosine basis function activations.

    activations[i, j] = cos(periods[j] . inputs[i] + phase[j])

    Parameters
    ----------
    periods : Array
        Cosine frequencies, shape (n_basis, n_dims).
    phase : Array
        Cosine phases, shape (n_basis,).
    inputs : Array
        Input points, shape (n_inputs, n_dims) or (n_inputs,) for 1D inputs.

    Returns
    -------
    Array
        Activations, shape (n_inputs, n_basis).
    """
    inputs = as_matrix(jnp.asarray(inputs))
    return jnp.cos(inputs @ jnp.asarray(periods).T + jnp.asarray(phase)[None, :])


def draw_cosine_features(
    key: Array,
    n_basis_functions: int,
    n_dims: int,
    gamma: float,
) -> tuple[Array, Array]:
    """
    Draw random cosine frequencies and phases.

    Parameters
    ----------
    key : Array
        JAX PRNG key. Consumed; do not reuse it for other draws.
    n_basis_functions : int
        Number of cosine features.
    n_dims : int
        Input dimensionality.
    gamma : float
        Kernel width parameter. Frequencies have standard deviation
        sqrt(2 * gamma).

    Returns
    -------
    periods : Array
        Frequencies, shape (n_basis_functions, n_dims).
    phase : Array
        Phases in [0, 2 pi), shape (n_basis_functions,).
    """
    key_periods, key_phase = jax.random.split(key)

    periods = jnp.sqrt(2.0 * gamma) * jax.random.normal(
        key_periods, (n_basis_functions, n_dims)
    )
    phase = jax.random.uniform(
        key_phase, (n_basis_functions,), minval=0.0, maxval=2.0 * jnp.pi
    )

    return periods, phase
