"""
Tests for cosine basis functions.
"""

import jax
import jax.numpy as jnp

from rrrff.basis import cosine_activations, draw_cosine_features


class TestCosineActivations:
    """Test cosine activation computation."""

    def test_zero_period_zero_phase(self):
        """With period 0 and phase 0, activation is cos(0) = 1 everywhere."""
        periods = jnp.zeros((1, 1))
        phase = jnp.zeros(1)
        inputs = jnp.array([[-3.0], [0.0], [0.5], [100.0]])

        result = cosine_activations(periods, phase, inputs)

        assert result.shape == (4, 1)
        assert jnp.allclose(result, 1.0)

    def test_shape(self):
        """Output shape should be (n_inputs, n_basis)."""
        periods = jnp.ones((7, 3))
        phase = jnp.zeros(7)
        inputs = jnp.ones((11, 3))

        result = cosine_activations(periods, phase, inputs)

        assert result.shape == (11, 7), f"Expected (11, 7), got {result.shape}"

    def test_values(self):
        """Should compute cos(periods[j] . x[i] + phase[j])."""
        periods = jnp.array([[1.0, 2.0], [0.5, -1.0]])
        phase = jnp.array([0.1, jnp.pi])
        inputs = jnp.array([[0.3, 0.4], [1.0, -2.0], [0.0, 0.0]])

        result = cosine_activations(periods, phase, inputs)

        for i in range(inputs.shape[0]):
            for j in range(periods.shape[0]):
                expected = jnp.cos(jnp.dot(periods[j], inputs[i]) + phase[j])
                assert jnp.allclose(result[i, j], expected)

    def test_phase_shift(self):
        """A phase of pi/2 turns cosine into minus sine."""
        periods = jnp.array([[2.0]])
        phase = jnp.array([jnp.pi / 2])
        x = jnp.linspace(-1.0, 1.0, 9)

        result = cosine_activations(periods, phase, x[:, None])

        assert jnp.allclose(result[:, 0], -jnp.sin(2.0 * x))

    def test_1d_inputs(self):
        """1D inputs should be treated as a column of scalar inputs."""
        periods = jnp.array([[1.0], [2.0]])
        phase = jnp.zeros(2)
        x = jnp.array([0.0, 0.5, 1.0])

        result_1d = cosine_activations(periods, phase, x)
        result_2d = cosine_activations(periods, phase, x[:, None])

        assert jnp.allclose(result_1d, result_2d)

    def test_empty_inputs(self):
        """Zero inputs should give an empty activation matrix."""
        periods = jnp.ones((4, 2))
        phase = jnp.zeros(4)

        result = cosine_activations(periods, phase, jnp.zeros((0, 2)))

        assert result.shape == (0, 4)

    def test_bounded(self):
        """Activations should lie in [-1, 1]."""
        key = jax.random.PRNGKey(0)
        periods, phase = draw_cosine_features(key, 20, 2, gamma=10.0)
        inputs = jnp.linspace(-5.0, 5.0, 60).reshape(30, 2)

        result = cosine_activations(periods, phase, inputs)

        assert jnp.all(result >= -1.0)
        assert jnp.all(result <= 1.0)


class TestDrawCosineFeatures:
    """Test random feature draw."""

    def test_shapes(self):
        """Periods (n_basis, n_dims) and phase (n_basis,)."""
        periods, phase = draw_cosine_features(jax.random.PRNGKey(1), 12, 3, gamma=1.0)

        assert periods.shape == (12, 3)
        assert phase.shape == (12,)

    def test_phase_range(self):
        """Phases should be in [0, 2 pi)."""
        _, phase = draw_cosine_features(jax.random.PRNGKey(2), 500, 1, gamma=1.0)

        assert jnp.all(phase >= 0.0)
        assert jnp.all(phase < 2 * jnp.pi)

    def test_period_spread(self):
        """Period standard deviation should be close to sqrt(2 * gamma)."""
        gamma = 8.0
        periods, _ = draw_cosine_features(jax.random.PRNGKey(3), 5000, 2, gamma=gamma)

        assert jnp.abs(jnp.std(periods) - jnp.sqrt(2 * gamma)) < 0.2
        assert jnp.abs(jnp.mean(periods)) < 0.2

    def test_same_key_same_features(self):
        """The draw should be a deterministic function of the key."""
        periods_a, phase_a = draw_cosine_features(jax.random.PRNGKey(4), 10, 2, gamma=1.0)
        periods_b, phase_b = draw_cosine_features(jax.random.PRNGKey(4), 10, 2, gamma=1.0)

        assert jnp.array_equal(periods_a, periods_b)
        assert jnp.array_equal(phase_a, phase_b)

    def test_different_keys_differ(self):
        """Different keys should give different features."""
        periods_a, _ = draw_cosine_features(jax.random.PRNGKey(5), 10, 2, gamma=1.0)
        periods_b, _ = draw_cosine_features(jax.random.PRNGKey(6), 10, 2, gamma=1.0)

        assert not jnp.allclose(periods_a, periods_b)
