"""
RRRFF: Random Radial/Ridge Fourier Features regression.

A JAX-based function approximator that fits continuous input -> output
mappings with random cosine features and closed-form ridge regression.

Usage
-----
>>> import rrrff
>>> import jax.numpy as jnp
>>>
>>> # Train model
>>> meta = rrrff.MetaParameters(expected_input_dim=1, number_of_basis_functions=50)
>>> fa = rrrff.FunctionApproximatorRRRFF(meta, seed=0)
>>> inputs = jnp.linspace(0.0, 2.0, 40)[:, None]
>>> fa.train(inputs, jnp.sin(3.0 * inputs))
>>>
>>> # Predict
>>> outputs = fa.predict(inputs)
>>>
>>> # Inspect the fitted basis functions on a grid
>>> fa.save_grid_data([0.0], [2.0], [100], "grid_data", overwrite=True)
"""

import jax

# Enable float64 for numerical stability (normal equations)
jax.config.update("jax_enable_x64", True)

from .approximator import FunctionApproximatorRRRFF
from .base import FunctionApproximator
from .basis import cosine_activations, draw_cosine_features
from .core import fit, predict
from .grid import generate_inputs_grid
from .io import load_grid_data, load_matrix, load_model, save_matrix, save_model
from .least_squares import least_squares
from .types import GridData, MetaParameters, ModelParameters, Trained, Untrained

try:
    from importlib.metadata import version

    __version__ = version("rrrff")
except Exception:
    __version__ = "unknown"

__all__ = [
    # Approximators
    "FunctionApproximator",
    "FunctionApproximatorRRRFF",
    # Core functions
    "fit",
    "predict",
    "cosine_activations",
    "draw_cosine_features",
    "least_squares",
    "generate_inputs_grid",
    # Types
    "MetaParameters",
    "ModelParameters",
    "Untrained",
    "Trained",
    "GridData",
    # I/O
    "save_matrix",
    "load_matrix",
    "load_grid_data",
    "save_model",
    "load_model",
]
