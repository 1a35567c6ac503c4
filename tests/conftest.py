"""Pytest configuration and shared fixtures."""

import jax

# Ensure float64 is enabled for all tests
jax.config.update("jax_enable_x64", True)

import jax.numpy as jnp
import pytest

from rrrff.types import MetaParameters


@pytest.fixture
def sine_data():
    """1D inputs and targets: f(x) = sin(3x) on [0, 2]."""
    inputs = jnp.linspace(0.0, 2.0, 50)[:, None]
    targets = jnp.sin(3.0 * inputs)
    return inputs, targets


@pytest.fixture
def meta_1d():
    """Meta parameters for 1D inputs."""
    return MetaParameters(
        expected_input_dim=1,
        number_of_basis_functions=40,
        regularization=1e-3,
        gamma=5.0,
    )
