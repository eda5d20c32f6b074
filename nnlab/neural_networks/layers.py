"""
Neural network layers implementation.
"""
import numpy as np

from ..linalg import Matrix
from .activations import get_activation


class Layer:
    """Base class for all neural network layers."""

    def forward(self, input_data):
        """Forward pass through the layer."""
        raise NotImplementedError

    def backward_from_dz(self, dz, learning_rate):
        """Backward pass through the layer."""
        raise NotImplementedError

    def params(self):
        """Return list of parameter arrays (e.g., [W, b])."""
        return []


class DenseLayer(Layer):
    """
    Fully-connected layer with an elementwise activation.

    Weights have shape (input_size, output_size): column j holds the weights
    feeding output neuron j. The layer caches its last input, pre-activation
    and output for the matching backward call, so it is not re-entrant.
    """

    def __init__(self, input_size, output_size, activation="relu",
                 derivative=True, rng=None):
        """
        Initialize the layer with weights drawn from U[-1, 1] and zero biases.

        Args:
            input_size (int): Number of input features
            output_size (int): Number of output neurons
            activation (str or Activation): Activation applied to z
            derivative (bool): Whether backpropagation multiplies by this
                layer's activation derivative. False means the derivative is
                already folded into the loss gradient handed to this layer,
                and activation_gradient() returns ones.
            rng (np.random.Generator, optional): Random number generator
        """
        if input_size <= 0 or output_size <= 0:
            raise ValueError(
                f"Layer sizes must be positive, got {input_size} -> {output_size}")
        self.input_size = input_size
        self.output_size = output_size
        self.activation = get_activation(activation)
        self.derivative = derivative

        if rng is None:
            rng = np.random.default_rng()

        self.weights = Matrix(input_size, output_size)
        self.weights.randomize_uniform(rng)
        self.biases = np.zeros(output_size, dtype=np.float32)

        # Cached values for backpropagation (set during forward pass)
        self.last_input = None
        self.last_z = None
        self.last_output = None

    def forward(self, input_data):
        """
        Forward pass: activation(W^T x + b)

        Args:
            input_data (ndarray): Input vector of shape (input_size,)

        Returns:
            ndarray: Output vector of shape (output_size,)
        """
        x = np.array(input_data, dtype=np.float32)
        if x.shape != (self.input_size,):
            raise ValueError(
                f"Expected input of length {self.input_size}, got shape {x.shape}")
        self.last_input = x

        z = Matrix.multiply_vector(self.weights, x) + self.biases
        self.last_z = z.copy()
        self.last_output = np.asarray(self.activation.apply(z), dtype=np.float32)
        return self.last_output

    def backward_from_dz(self, dz, learning_rate):
        """
        Backward pass given the loss gradient with respect to z.

        The returned gradient uses the weights as they were before this
        call's update.

        Args:
            dz (ndarray): Gradient w.r.t. this layer's pre-activation, shape (output_size,)
            learning_rate (float): Step size for the parameter update

        Returns:
            ndarray: Gradient w.r.t. the previous layer's activations, shape (input_size,)
        """
        if self.last_input is None:
            raise ValueError("Must call forward() before backward_from_dz()")
        dz = np.asarray(dz, dtype=np.float32)
        if dz.shape != (self.output_size,):
            raise ValueError(
                f"Expected gradient of length {self.output_size}, got shape {dz.shape}")

        # Gradient with respect to input, from pre-update weights
        d_prev = self.weights.data @ dz

        lr = np.float32(learning_rate)
        self.weights.data -= lr * np.outer(self.last_input, dz)
        self.biases -= lr * dz

        return d_prev

    def activation_gradient(self):
        """
        Activation derivative evaluated at the cached pre-activation.

        Returns ones when the derivative is folded into the loss gradient.
        """
        if self.last_z is None:
            raise ValueError("Must call forward() before activation_gradient()")
        if not self.derivative:
            return np.ones(self.output_size, dtype=np.float32)
        return np.asarray(self.activation.derivative(self.last_z), dtype=np.float32)

    def params(self):
        return [self.weights, self.biases]

    def __repr__(self):
        """String representation of the layer."""
        return (f"DenseLayer(input_size={self.input_size}, "
                f"output_size={self.output_size}, "
                f"activation='{self.activation.value}')")
