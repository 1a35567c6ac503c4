"""
Fitting a Movement Trajectory with Random Fourier Features

Fits a 2D end-effector trajectory (x(t), y(t)) recorded as a function of
time with RRRFF, writes the basis function activations on a dense time grid,
and plots the weighted basis functions together with the prediction.

Key concepts demonstrated:
    1. Multi-output regression from a 1D phase/time input
    2. Effect of the number of basis functions on the fit
    3. Exporting and re-loading grid data for plotting

Requirements:
    pip install matplotlib
"""

import os
import tempfile
import time

import jax.numpy as jnp
import matplotlib.pyplot as plt
import numpy as np

import rrrff


def demo_trajectory(n_samples=60):
    """
    Minimum-jerk reach with a superimposed oscillation.

    Returns
    -------
    ts : array, shape (n_samples, 1)
    trajectory : array, shape (n_samples, 2)
    """
    ts = np.linspace(0.0, 1.0, n_samples)
    s = 10 * ts**3 - 15 * ts**4 + 6 * ts**5
    x = 0.5 * s
    y = 0.3 * s + 0.05 * np.sin(4 * np.pi * ts)
    return ts[:, None], np.stack([x, y], axis=1)


if __name__ == "__main__":

    ts, trajectory = demo_trajectory()

    # Compare fits with few and many basis functions
    for n_basis in [5, 20, 80]:
        meta = rrrff.MetaParameters(
            expected_input_dim=1,
            number_of_basis_functions=n_basis,
            regularization=1e-4,
            gamma=20.0,
        )
        fa = rrrff.FunctionApproximatorRRRFF(meta, seed=0)

        start = time.time()
        fa.train(jnp.asarray(ts), jnp.asarray(trajectory))
        outputs = fa.predict(jnp.asarray(ts))
        rms = float(jnp.sqrt(jnp.mean((outputs - trajectory) ** 2)))
        print(
            "n_basis = {:3d}  rms error = {:.2e}  took {:3.3f} sec".format(
                n_basis, rms, time.time() - start
            )
        )

    # Export the last model on a dense grid and plot its basis functions
    save_directory = os.path.join(tempfile.gettempdir(), "rrrff_trajectory")
    fa.save_grid_data([0.0], [1.0], [200], save_directory, overwrite=True)
    grid = rrrff.load_grid_data(save_directory)

    n_basis = fa.model_parameters.n_basis_functions
    fig, axes = plt.subplots(2, 1, sharex=True, figsize=(8, 6))
    for k, (ax, label) in enumerate(zip(axes, ["x", "y"])):
        block = grid.activations_weighted_grid[:, k * n_basis : (k + 1) * n_basis]
        ax.plot(grid.inputs_grid[:, 0], block, color="0.8", linewidth=0.5)
        ax.plot(grid.inputs_grid[:, 0], grid.predictions_grid[:, k], "r-", label="prediction")
        ax.plot(ts[:, 0], trajectory[:, k], "k.", label="demonstration")
        ax.set_ylabel(label)
        ax.set_ylim(trajectory[:, k].min() - 0.2, trajectory[:, k].max() + 0.2)
    axes[0].legend()
    axes[-1].set_xlabel("t")
    plt.tight_layout()
    plt.show()
