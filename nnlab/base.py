# pylint: disable=missing-docstring
from abc import abstractmethod
from typing import Any, TypeVar
import numpy as np

T = TypeVar("T", bound="BaseEstimator")


# pylint: disable=invalid-name
class BaseEstimator:
    # Attribute names holding learned parameters
    _trainable = ("weights",)

    @abstractmethod
    def fit(self: T, X: np.ndarray, y: np.ndarray) -> T:
        """
        :param X: features, shape (n_samples, input_size)
        :param y: class indices (n_samples,) or one-hot labels (n_samples, n_classes)
        :return: self
        """
        raise NotImplementedError

    def get_params(self, mode: str = "all") -> Any:
        """
        :param mode: "all", "trainable" (names in _trainable) or "non_trainable"
        :return: dict of attribute names to values
        """
        if mode == "all":
            return self.__dict__
        if mode == "trainable":
            return {k: v for k, v in self.__dict__.items() if k in self._trainable}
        if mode == "non_trainable":
            return {k: v for k, v in self.__dict__.items() if k not in self._trainable}

        raise ValueError(
            f"Invalid mode '{mode}'. Choose from 'all', 'trainable', or 'non_trainable'."
        )


class BaseClassifier(BaseEstimator):
    @abstractmethod
    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        :param X: features, shape (n_samples, input_size)
        :return: predicted class indices, shape (n_samples,)
        """
        raise NotImplementedError

    def score(self, X: np.ndarray, y: np.ndarray) -> float:
        """Fraction of rows in X whose predicted class index equals y."""
        y_pred = self.predict(X)
        return float(np.mean(y_pred == y))
