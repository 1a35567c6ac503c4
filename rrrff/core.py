"""
Core RRRFF fitting and prediction functions.

Pure functional interface: randomness enters only through an explicit
JAX PRNG key.
"""

import logging

import jax.numpy as jnp
from jax import Array

from .basis import as_matrix, cosine_activations, draw_cosine_features
from .least_squares import least_squares
from .types import MetaParameters, ModelParameters, make_model_parameters

logger = logging.getLogger(__name__)


def fit(
    key: Array,
    meta_parameters: MetaParameters,
    inputs: Array,
    targets: Array,
) -> ModelParameters:
    """
    Fit an RRRFF model.

    Draws random cosine features, projects the inputs onto them and solves
    for the linear weights with ridge least squares (no offset).

    Parameters
    ----------
    key : Array
        JAX PRNG key for the random feature draw.
    meta_parameters : MetaParameters
        Number of basis functions, gamma and regularization.
    inputs : Array
        Training inputs, shape (n_samples, n_dims) or (n_samples,).
    targets : Array
        Training targets, shape (n_samples, n_outputs) or (n_samples,).

    Returns
    -------
    ModelParameters
        Fitted weights (n_basis, n_outputs) with the drawn periods and phase.
    """
    inputs = as_matrix(jnp.asarray(inputs))
    targets = as_matrix(jnp.asarray(targets))

    assert inputs.shape[0] == targets.shape[0], (
        f"Mismatch: {inputs.shape[0]} inputs vs {targets.shape[0]} targets"
    )
    assert inputs.shape[1] == meta_parameters.expected_input_dim, (
        f"Expected input dim {meta_parameters.expected_input_dim}, got {inputs.shape[1]}"
    )

    n_basis = meta_parameters.number_of_basis_functions
    periods, phase = draw_cosine_features(
        key, n_basis, inputs.shape[1], meta_parameters.gamma
    )

    proj_inputs = cosine_activations(periods, phase, inputs)  # (n_samples, n_basis)
    weights = least_squares(
        proj_inputs,
        targets,
        use_offset=False,
        regularization=meta_parameters.regularization,
    )

    logger.debug(
        "Fitted %d cosine features on %d samples (%d outputs)",
        n_basis,
        inputs.shape[0],
        targets.shape[1],
    )

    return make_model_parameters(weights, periods, phase)


def predict(model: ModelParameters, inputs: Array) -> Array:
    """
    Predict outputs of a fitted RRRFF model.

    Parameters
    ----------
    model : ModelParameters
        Fitted model from fit().
    inputs : Array
        Query inputs, shape (n_inputs, n_dims) or (n_inputs,).

    Returns
    -------
    Array
        Predictions, shape (n_inputs, n_outputs).
    """
    inputs = as_matrix(jnp.asarray(inputs))
    assert inputs.shape[1] == model.expected_input_dim, (
        f"Expected input dim {model.expected_input_dim}, got {inputs.shape[1]}"
    )
    return model.cosine_activations(inputs) @ model.weights


def weighted_activations(model: ModelParameters, inputs: Array) -> tuple[Array, Array]:
    """
    Cosine activations, and activations scaled by their weights.

    Parameters
    ----------
    model : ModelParameters
        Fitted model.
    inputs : Array
        Query inputs, shape (n_inputs, n_dims).

    Returns
    -------
    activations : Array
        Raw activations, shape (n_inputs, n_basis).
    weighted : Array
        Column b scaled by weight b, shape (n_inputs, n_basis * n_outputs).
        For several outputs, one block of n_basis columns per output.
    """
    activations = model.cosine_activations(inputs)
    weighted = jnp.hstack(
        [activations * model.weights[:, k][None, :] for k in range(model.n_outputs)]
    )
    return activations, weighted
