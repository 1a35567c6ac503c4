"""
Lifecycle shared by function approximators.

An approximator is constructed from meta parameters (to be trained), from
model parameters (already trained), or both. Its state is either
Untrained(meta) or Trained(model, meta).
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from jax import Array

from .types import Trained, Untrained


MetaT = TypeVar("MetaT")
ModelT = TypeVar("ModelT")


class FunctionApproximator(ABC, Generic[MetaT, ModelT]):
    """
    Base class for function approximators.

    Subclasses declare the concrete kinds of parameters they accept through
    ``meta_parameters_type`` and ``model_parameters_type``.
    """

    meta_parameters_type: type
    model_parameters_type: type

    def __init__(
        self,
        meta_parameters: MetaT | None = None,
        model_parameters: ModelT | None = None,
    ):
        if meta_parameters is None and model_parameters is None:
            raise ValueError("Need meta parameters, model parameters, or both")

        if meta_parameters is not None and not isinstance(
            meta_parameters, self.meta_parameters_type
        ):
            raise TypeError(
                f"{type(self).__name__} needs {self.meta_parameters_type.__name__}, "
                f"got {type(meta_parameters).__name__}"
            )
        if model_parameters is not None and not isinstance(
            model_parameters, self.model_parameters_type
        ):
            raise TypeError(
                f"{type(self).__name__} needs {self.model_parameters_type.__name__}, "
                f"got {type(model_parameters).__name__}"
            )

        if model_parameters is None:
            self._state = Untrained(meta_parameters)
        else:
            model_parameters = self._prepare_model_parameters(model_parameters)
            self._state = Trained(model_parameters, meta_parameters)
            if meta_parameters is not None:
                assert self._model_input_dim(model_parameters) == self._meta_input_dim(
                    meta_parameters
                ), "Meta and model parameters disagree on the input dimension"

    @property
    def state(self) -> Untrained | Trained:
        return self._state

    @property
    def is_trained(self) -> bool:
        return isinstance(self._state, Trained)

    @property
    def meta_parameters(self) -> MetaT | None:
        return self._state.meta_parameters

    @property
    def model_parameters(self) -> ModelT | None:
        if isinstance(self._state, Trained):
            return self._state.model_parameters
        return None

    @property
    def expected_input_dim(self) -> int:
        if isinstance(self._state, Trained):
            return self._model_input_dim(self._state.model_parameters)
        return self._meta_input_dim(self._state.meta_parameters)

    def set_model_parameters(self, model_parameters: ModelT) -> None:
        """Install new model parameters, replacing any previous model."""
        if not isinstance(model_parameters, self.model_parameters_type):
            raise TypeError(
                f"{type(self).__name__} needs {self.model_parameters_type.__name__}, "
                f"got {type(model_parameters).__name__}"
            )
        model_parameters = self._prepare_model_parameters(model_parameters)
        self._state = Trained(model_parameters, self.meta_parameters)

    def re_train(self, inputs: Array, targets: Array) -> None:
        """Discard the current model and train again from the meta parameters."""
        meta_parameters = self.meta_parameters
        if meta_parameters is None:
            raise ValueError(
                f"Cannot retrain {type(self).__name__} without meta parameters"
            )
        previous = self._state
        self._state = Untrained(meta_parameters)
        try:
            self.train(inputs, targets)
        except Exception:
            self._state = previous
            raise

    def _prepare_model_parameters(self, model_parameters: ModelT) -> ModelT:
        """Normalise and check model parameters before they are installed."""
        return model_parameters

    @staticmethod
    def _meta_input_dim(meta_parameters) -> int:
        return meta_parameters.expected_input_dim

    @staticmethod
    def _model_input_dim(model_parameters) -> int:
        return model_parameters.expected_input_dim

    @abstractmethod
    def train(self, inputs: Array, targets: Array) -> None:
        """Train on inputs (n_samples, n_dims) and targets (n_samples, n_outputs)."""

    @abstractmethod
    def predict(self, inputs: Array) -> Array | None:
        """Predict outputs for inputs (n_inputs, n_dims)."""

    @abstractmethod
    def clone(self) -> "FunctionApproximator[MetaT, ModelT]":
        """Return an independent copy in the same lifecycle state."""
