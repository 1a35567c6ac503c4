"""
Random Radial/Ridge Fourier Features (RRRFF) function approximator.

Stateful wrapper around the functional core: owns the lifecycle
(untrained -> trained), the random seed, and grid data export.
"""

import logging
import os
import time

import jax
import jax.numpy as jnp
from jax import Array

from . import core, io
from .base import FunctionApproximator
from .grid import generate_inputs_grid
from .types import MetaParameters, ModelParameters, make_model_parameters

logger = logging.getLogger(__name__)


def _entropy_seed() -> int:
    """Seed from wall-clock time and process id."""
    return (time.time_ns() + os.getpid()) % (2**32)


def _check_meta_parameters(meta_parameters: MetaParameters) -> None:
    if meta_parameters.expected_input_dim < 1:
        raise ValueError(
            f"expected_input_dim must be positive, got {meta_parameters.expected_input_dim}"
        )
    if meta_parameters.number_of_basis_functions < 1:
        raise ValueError(
            "number_of_basis_functions must be positive, "
            f"got {meta_parameters.number_of_basis_functions}"
        )
    if meta_parameters.gamma <= 0:
        raise ValueError(f"gamma must be positive, got {meta_parameters.gamma}")
    if meta_parameters.regularization < 0:
        raise ValueError(
            f"regularization must be non-negative, got {meta_parameters.regularization}"
        )


class FunctionApproximatorRRRFF(FunctionApproximator[MetaParameters, ModelParameters]):
    """
    Regression with random cosine features and ridge least squares.

    Parameters
    ----------
    meta_parameters : MetaParameters, optional
        Training configuration. Required to train.
    model_parameters : ModelParameters, optional
        Fitted model. If given, the approximator starts trained.
    seed : int, optional
        Seed for the random feature draw. If None, a seed is taken from the
        current time and process id at each training call.

    Notes
    -----
    Misuse (training twice, predicting or saving grid data before training)
    is not an error: a WARNING is logged and the call does nothing. The
    messages name the Python methods (``FunctionApproximatorRRRFF.train``,
    ``re_train``) and leave the "WARNING:" prefix to the log record level.
    """

    meta_parameters_type = MetaParameters
    model_parameters_type = ModelParameters

    def __init__(
        self,
        meta_parameters: MetaParameters | None = None,
        model_parameters: ModelParameters | None = None,
        seed: int | None = None,
    ):
        super().__init__(meta_parameters, model_parameters)
        if meta_parameters is not None:
            _check_meta_parameters(meta_parameters)
        self.seed = seed

    def _prepare_model_parameters(self, model_parameters: ModelParameters) -> ModelParameters:
        return make_model_parameters(*model_parameters)

    @classmethod
    def from_file(cls, filename: str) -> "FunctionApproximatorRRRFF":
        """Build a trained approximator from a file written by save_model."""
        return cls(model_parameters=io.load_model(filename))

    def clone(self) -> "FunctionApproximatorRRRFF":
        model_parameters = self.model_parameters
        if model_parameters is not None:
            model_parameters = jax.tree_util.tree_map(jnp.array, model_parameters)
        meta_parameters = self.meta_parameters
        if meta_parameters is not None:
            meta_parameters = meta_parameters._replace()
        return FunctionApproximatorRRRFF(meta_parameters, model_parameters, seed=self.seed)

    def train(self, inputs: Array, targets: Array) -> None:
        """
        Fit random cosine features to the training data.

        Training is single-shot: if already trained, a warning is logged and
        nothing changes. Use re_train to fit again.

        Parameters
        ----------
        inputs : Array
            Training inputs, shape (n_samples, expected_input_dim).
        targets : Array
            Training targets, shape (n_samples, n_outputs) or (n_samples,).
        """
        if self.is_trained:
            logger.warning(
                "You may not call FunctionApproximatorRRRFF.train more than once. Doing nothing."
            )
            logger.warning("   (if you really want to retrain, call re_train instead)")
            return

        seed = self.seed if self.seed is not None else _entropy_seed()
        key = jax.random.PRNGKey(seed)

        model_parameters = core.fit(key, self.meta_parameters, inputs, targets)
        self.set_model_parameters(model_parameters)

    def predict(self, inputs: Array) -> Array | None:
        """
        Predict outputs at the given inputs.

        Parameters
        ----------
        inputs : Array
            Query inputs, shape (n_inputs, expected_input_dim).

        Returns
        -------
        Array or None
            Predictions, shape (n_inputs, n_outputs). None if not trained yet.
        """
        if not self.is_trained:
            logger.warning(
                "You may not call FunctionApproximatorRRRFF.predict if you have not "
                "trained yet. Doing nothing."
            )
            return None

        return core.predict(self.model_parameters, inputs)

    def save_grid_data(
        self,
        min_values: Array,
        max_values: Array,
        n_samples_per_dim: Array,
        save_directory: str,
        overwrite: bool = False,
    ) -> bool:
        """
        Save the model response on a regular grid of inputs.

        Writes n_samples_per_dim.txt, inputs_grid.txt, activations_grid.txt,
        activations_weighted_grid.txt and predictions_grid.txt.

        Parameters
        ----------
        min_values, max_values : Array
            Grid bounds per input dimension.
        n_samples_per_dim : Array
            Number of grid samples per input dimension.
        save_directory : str
            Output directory. If empty, nothing is written.
        overwrite : bool
            Replace existing files.

        Returns
        -------
        bool
            True if the data was saved (or nothing needed saving), False if
            the approximator is not trained.

        Raises
        ------
        FileExistsError
            If a file exists and overwrite is False. Files written before the
            failure are left on disk.
        """
        if not save_directory:
            return True

        if not self.is_trained:
            logger.warning(
                "You may not call FunctionApproximatorRRRFF.save_grid_data if you have "
                "not trained yet. Doing nothing."
            )
            return False

        model_parameters = self.model_parameters
        n_samples_per_dim = jnp.atleast_1d(jnp.asarray(n_samples_per_dim, dtype=int))
        assert len(n_samples_per_dim) == model_parameters.expected_input_dim, (
            f"Expected input dim {model_parameters.expected_input_dim}, "
            f"got a grid over {len(n_samples_per_dim)} dimensions"
        )
        inputs_grid = generate_inputs_grid(min_values, max_values, n_samples_per_dim)

        activations_grid, weighted_grid = core.weighted_activations(
            model_parameters, inputs_grid
        )

        # Sum over the weighted basis functions of each output
        n_basis = model_parameters.n_basis_functions
        predictions_grid = jnp.stack(
            [
                weighted_grid[:, k * n_basis : (k + 1) * n_basis].sum(axis=1)
                for k in range(model_parameters.n_outputs)
            ],
            axis=1,
        )

        artifacts = [
            ("n_samples_per_dim", n_samples_per_dim),
            ("inputs_grid", inputs_grid),
            ("activations_grid", activations_grid),
            ("activations_weighted_grid", weighted_grid),
            ("predictions_grid", predictions_grid),
        ]
        for name, matrix in artifacts:
            io.save_matrix(save_directory, io.GRID_FILENAMES[name], matrix, overwrite)

        return True

    def save_model(self, filename: str) -> None:
        """Save the fitted model parameters to file."""
        assert self.is_trained, "Cannot save an untrained FunctionApproximatorRRRFF"
        io.save_model(filename, self.model_parameters)
