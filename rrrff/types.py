"""
Data structures for RRRFF.

Parameter holders are NamedTuples for JAX pytree compatibility.
"""

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from .basis import cosine_activations


class MetaParameters(NamedTuple):
    """Immutable training configuration."""

    expected_input_dim: int
    number_of_basis_functions: int = 100
    regularization: float = 0.2
    gamma: float = 10.0  # Spread of the cosine frequencies


class ModelParameters(NamedTuple):
    """Immutable fitted model - a valid JAX pytree."""

    weights: Array  # Linear model on the features (n_basis, n_outputs)
    periods: Array  # Cosine frequencies (n_basis, n_dims)
    phase: Array  # Cosine phases (n_basis,)

    @property
    def expected_input_dim(self) -> int:
        return self.periods.shape[1]

    @property
    def n_basis_functions(self) -> int:
        return self.periods.shape[0]

    @property
    def n_outputs(self) -> int:
        return self.weights.shape[1]

    def cosine_activations(self, inputs: Array) -> Array:
        """Activations of this model's cosine features, shape (n_inputs, n_basis)."""
        return cosine_activations(self.periods, self.phase, inputs)


def make_model_parameters(weights: Array, periods: Array, phase: Array) -> ModelParameters:
    """
    Build model parameters, checking shape consistency.

    Parameters
    ----------
    weights : Array
        Fitted weights, shape (n_basis,) or (n_basis, n_outputs).
    periods : Array
        Cosine frequencies, shape (n_basis, n_dims).
    phase : Array
        Cosine phases, shape (n_basis,).

    Returns
    -------
    ModelParameters
        Parameters with weights stored as a 2D array.
    """
    weights = jnp.asarray(weights)
    periods = jnp.asarray(periods)
    phase = jnp.asarray(phase)
    if weights.ndim == 1:
        weights = weights[:, None]

    assert periods.ndim == 2, f"periods must be 2D, got shape {periods.shape}"
    assert weights.shape[0] == periods.shape[0] == phase.shape[0], (
        f"Inconsistent basis counts: weights {weights.shape[0]}, "
        f"periods {periods.shape[0]}, phase {phase.shape[0]}"
    )
    return ModelParameters(weights=weights, periods=periods, phase=phase)


class Untrained(NamedTuple):
    """Lifecycle state before training."""

    meta_parameters: MetaParameters


class Trained(NamedTuple):
    """Lifecycle state after training, or when built from model parameters."""

    model_parameters: ModelParameters
    meta_parameters: MetaParameters | None = None


class GridData(NamedTuple):
    """Model response sampled on a regular inputs grid, as written to disk."""

    n_samples_per_dim: Array
    inputs_grid: Array
    activations_grid: Array
    activations_weighted_grid: Array
    predictions_grid: Array
