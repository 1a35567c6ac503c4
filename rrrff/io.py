"""
File I/O utilities for RRRFF.

Uses NumPy for file operations (not differentiable).
"""

import os
import pickle

import jax.numpy as jnp
import numpy as np
from tqdm import tqdm

from .types import GridData, ModelParameters, make_model_parameters

GRID_FILENAMES = {
    "n_samples_per_dim": "n_samples_per_dim.txt",
    "inputs_grid": "inputs_grid.txt",
    "activations_grid": "activations_grid.txt",
    "activations_weighted_grid": "activations_weighted_grid.txt",
    "predictions_grid": "predictions_grid.txt",
}


def save_matrix(
    directory: str,
    filename: str,
    matrix,
    overwrite: bool = False,
) -> str:
    """
    Save a matrix to a plain-text file.

    Rows are written one per line with whitespace-separated values.
    1D arrays are written one value per line.

    Parameters
    ----------
    directory : str
        Output directory, created if it does not exist.
    filename : str
        Output filename within directory.
    matrix : array_like
        Matrix to write. Integer arrays are written as integers.
    overwrite : bool
        Replace the file if it already exists.

    Returns
    -------
    str
        Path of the written file.

    Raises
    ------
    FileExistsError
        If the file exists and overwrite is False.
    """
    os.makedirs(directory, exist_ok=True)
    filepath = os.path.join(directory, filename)

    if os.path.exists(filepath) and not overwrite:
        raise FileExistsError(
            f"Cannot write {filepath}: file exists and overwrite is False"
        )

    matrix = np.asarray(matrix)
    fmt = "%d" if np.issubdtype(matrix.dtype, np.integer) else "%.18e"
    np.savetxt(filepath, matrix, fmt=fmt)

    return filepath


def load_matrix(directory: str, filename: str) -> np.ndarray:
    """
    Load a matrix written by save_matrix.

    Returns
    -------
    np.ndarray
        Matrix, always 2D. A file with one value per line gives a column.
    """
    filepath = os.path.join(directory, filename)
    # loadtxt squeezes single rows and columns alike; restore the row count
    return np.loadtxt(filepath).reshape(_n_lines(filepath), -1)


def _n_lines(filepath: str) -> int:
    with open(filepath) as f:
        return sum(1 for line in f if line.strip())


def load_grid_data(directory: str, verbose: bool = True) -> GridData:
    """
    Load grid data written by FunctionApproximatorRRRFF.save_grid_data.

    Parameters
    ----------
    directory : str
        Directory containing the grid files.
    verbose : bool
        Show progress bar.

    Returns
    -------
    GridData
        Grid artifacts as NumPy arrays. n_samples_per_dim is a 1D integer array.

    Raises
    ------
    FileNotFoundError
        If one of the grid files is missing.
    """
    fields = list(GRID_FILENAMES.items())
    iterator = tqdm(fields, desc="Loading grid data") if verbose else fields

    loaded = {}
    for field, filename in iterator:
        loaded[field] = load_matrix(directory, filename)

    loaded["n_samples_per_dim"] = loaded["n_samples_per_dim"].ravel().astype(int)
    return GridData(**loaded)


def save_model(filename: str, model: ModelParameters) -> None:
    """
    Save model parameters to file.

    Parameters
    ----------
    filename : str
        Output filename.
    model : ModelParameters
        Fitted model parameters.
    """
    # Convert JAX arrays to NumPy for pickling
    model_dict = {
        "weights": np.asarray(model.weights),
        "periods": np.asarray(model.periods),
        "phase": np.asarray(model.phase),
    }
    with open(filename, "wb") as f:
        pickle.dump(model_dict, f)


def load_model(filename: str) -> ModelParameters:
    """
    Load model parameters from file.

    Parameters
    ----------
    filename : str
        Input filename.

    Returns
    -------
    ModelParameters
        Loaded model parameters with JAX arrays.
    """
    with open(filename, "rb") as f:
        model_dict = pickle.load(f)

    return make_model_parameters(
        weights=jnp.array(model_dict["weights"]),
        periods=jnp.array(model_dict["periods"]),
        phase=jnp.array(model_dict["phase"]),
    )
