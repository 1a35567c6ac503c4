"""
Regularized linear least squares.

Closed-form ridge regression, solved in primal form for overdetermined
systems and in dual form for underdetermined ones.
"""

import jax.numpy as jnp
import numpy as np
from jax import Array


def least_squares(
    inputs: Array,
    targets: Array,
    use_offset: bool = False,
    regularization: float = 0.0,
) -> Array:
    """
    Solve min_w ||X w - Y||² + regularization * ||w||².

    Parameters
    ----------
    inputs : Array
        Design matrix X, shape (n_samples, n_features).
    targets : Array
        Targets Y, shape (n_samples, n_outputs) or (n_samples,).
    use_offset : bool
        If True, append a column of ones to X so the last row of the
        result is the offset (intercept).
    regularization : float
        Ridge penalty, >= 0. Zero gives ordinary least squares.

    Returns
    -------
    Array
        Weights, shape (n_features [+1], n_outputs), or (n_features [+1],)
        when targets is 1D.

    Raises
    ------
    ValueError
        If regularization is negative.
    numpy.linalg.LinAlgError
        If the system is singular (only possible with zero regularization).
    """
    if regularization < 0:
        raise ValueError(f"Regularization must be non-negative, got {regularization}")

    X = jnp.asarray(inputs)
    Y = jnp.asarray(targets)
    assert X.shape[0] == Y.shape[0], (
        f"Mismatch: {X.shape[0]} input samples vs {Y.shape[0]} target samples"
    )

    if use_offset:
        X = jnp.hstack([X, jnp.ones((X.shape[0], 1), dtype=X.dtype)])

    n_samples, n_features = X.shape

    if n_samples >= n_features:
        # Primal: (X'X + λI) w = X'Y
        A = X.T @ X + regularization * jnp.eye(n_features)
        weights = jnp.linalg.solve(A, X.T @ Y)
    else:
        # Dual: w = X' (XX' + λI)^-1 Y
        K = X @ X.T + regularization * jnp.eye(n_samples)
        weights = X.T @ jnp.linalg.solve(K, Y)

    if not bool(jnp.all(jnp.isfinite(weights))):
        raise np.linalg.LinAlgError(
            "Singular system in least squares; use a positive regularization"
        )

    return weights
