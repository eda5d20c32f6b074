"""
Activation functions and their derivatives.

Every function accepts a scalar or an ndarray and works elementwise, except
softmax which operates on a whole vector. Derivatives take the pre-activation
value ``z``, not the activation output.
"""
from enum import Enum

import numpy as np


def sigmoid(x):
    """Logistic sigmoid: 1 / (1 + e^-x)."""
    return 1 / (1 + np.exp(-x))


def sigmoid_derivative(x):
    """Derivative of the sigmoid, recomputed from the raw input."""
    sig = sigmoid(x)
    return sig * (1 - sig)


def relu(x):
    """Rectified linear unit: max(0, x)."""
    return np.maximum(0, x)


def relu_derivative(x):
    """1 where x > 0, 0 elsewhere (including x == 0)."""
    return np.where(np.asarray(x) > 0, 1.0, 0.0).astype(np.float32)


def tanh(x):
    """Hyperbolic tangent."""
    return np.tanh(x)


def tanh_derivative(x):
    """Derivative of tanh, recomputed from the raw input: 1 - tanh(x)^2."""
    t = np.tanh(x)
    return 1 - t ** 2


def linear(x):
    """Identity activation."""
    return x


def linear_derivative(x):
    """Derivative of the identity, always 1."""
    return np.ones_like(np.asarray(x, dtype=np.float32))


def softmax(z):
    """
    Softmax over a whole vector.

    Args:
        z (ndarray): Raw scores of shape (n,)

    Returns:
        ndarray: Probabilities of shape (n,) summing to 1
    """
    z = np.asarray(z, dtype=np.float32)
    if z.size == 0:
        raise ValueError("softmax requires a non-empty vector")
    # Subtract max for numerical stability
    exp_z = np.exp(z - np.max(z))
    return exp_z / np.sum(exp_z)


class Activation(Enum):
    """Activations a layer can be configured with."""

    SIGMOID = "sigmoid"
    RELU = "relu"
    TANH = "tanh"
    LINEAR = "linear"

    def apply(self, x):
        """Evaluate the activation at x."""
        return _ACTIVATIONS[self][0](x)

    def derivative(self, z):
        """Evaluate the activation derivative at pre-activation z."""
        return _ACTIVATIONS[self][1](z)


_ACTIVATIONS = {
    Activation.SIGMOID: (sigmoid, sigmoid_derivative),
    Activation.RELU: (relu, relu_derivative),
    Activation.TANH: (tanh, tanh_derivative),
    Activation.LINEAR: (linear, linear_derivative),
}


def get_activation(activation):
    """
    Factory function to resolve an activation by name.

    Args:
        activation (str or Activation): Activation name or member

    Returns:
        Activation: Activation member
    """
    if isinstance(activation, Activation):
        return activation
    try:
        return Activation(str(activation).lower())
    except ValueError:
        raise ValueError(
            f"Unknown activation: {activation}. "
            f"Available: {[a.value for a in Activation]}") from None
