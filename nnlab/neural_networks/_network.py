"""
Feedforward classifier trained by single-example backpropagation.

Hidden layers use ReLU. The output layer is linear and a softmax is applied
to its raw output in ``forward``. Training minimises categorical cross-entropy;
for softmax composed with cross-entropy the gradient with respect to the
output layer's pre-activation is simply ``softmax_output - target``, which is
why the output layer is built with its activation derivative folded into the
loss (``derivative=False``) and contributes a factor of one to the chain rule.

A network is not re-entrant: each layer caches the values of its last forward
pass for the matching backward pass.
"""
import logging

import numpy as np

from ..base import BaseClassifier
from ..datasets import Dataset
from ..linalg import arg_max as _arg_max
from .activations import Activation, softmax
from .layers import DenseLayer

logger = logging.getLogger(__name__)

EPSILON = 1e-10


class NeuralNetwork(BaseClassifier):
    """
    Multi-layer perceptron classifier.

    Layers are chained input_size -> hidden_sizes[0] -> ... -> output_size and
    share one learning rate. A single seeded random generator drives weight
    initialization and the per-epoch shuffles.
    """

    _trainable = ("layers_",)

    def __init__(self, input_size, hidden_sizes, output_size, learning_rate=0.01,
                 random_state=None, verbose=False, log_every=10):
        """
        Args:
            input_size (int): Number of input features
            hidden_sizes (sequence of int): Widths of the hidden layers
            output_size (int): Number of classes
            learning_rate (float): Step size for gradient descent
            random_state (int, optional): Random seed for reproducibility
            verbose (bool): Log epoch progress at INFO instead of DEBUG
            log_every (int): Report the mean epoch loss every this many epochs
        """
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")
        self.input_size = input_size
        self.hidden_sizes = tuple(hidden_sizes)
        self.output_size = output_size
        self.learning_rate = learning_rate
        self.random_state = random_state
        self.verbose = verbose
        self.log_every = log_every

        self.loss_curve_ = []
        self._rng = np.random.default_rng(random_state)
        self.layers_ = self._build_network()

    def _build_network(self):
        layers = []
        prev_size = self.input_size
        for hidden_size in self.hidden_sizes:
            layers.append(DenseLayer(prev_size, hidden_size,
                                     activation=Activation.RELU, rng=self._rng))
            prev_size = hidden_size
        # Output layer: linear, derivative folded into softmax + cross-entropy
        layers.append(DenseLayer(prev_size, self.output_size,
                                 activation=Activation.LINEAR, derivative=False,
                                 rng=self._rng))
        return layers

    # ---------- core operations ----------
    def forward(self, x):
        """
        Forward pass through every layer followed by softmax.

        Args:
            x (ndarray): Input vector of shape (input_size,)

        Returns:
            ndarray: Class probabilities of shape (output_size,)
        """
        output = x
        for layer in self.layers_:
            output = layer.forward(output)
        return softmax(output)

    def train_sample(self, x, target):
        """
        One step of stochastic gradient descent on a single example.

        Args:
            x (ndarray): Input vector of shape (input_size,)
            target (ndarray): One-hot target of shape (output_size,)

        Returns:
            ndarray: Softmax output of the forward pass used for the update
        """
        probs = self.forward(x)
        target = np.asarray(target, dtype=np.float32)
        if target.shape != probs.shape:
            raise ValueError(
                f"Expected target of shape {probs.shape}, got {target.shape}")
        delta = probs - target

        for idx in range(len(self.layers_) - 1, -1, -1):
            d_prev = self.layers_[idx].backward_from_dz(delta, self.learning_rate)
            if idx > 0:
                # Chain rule through the previous layer's own cached z
                delta = d_prev * self.layers_[idx - 1].activation_gradient()
        return probs

    def train(self, dataset, epochs):
        """
        Train for a number of epochs, shuffling the dataset rows each epoch.

        Each example is forwarded once for loss accounting and again inside
        train_sample for the update.

        Args:
            dataset (Dataset): Training data; its rows are shuffled in place
            epochs (int): Number of passes over the dataset

        Returns:
            list: Mean cross-entropy loss of each epoch
        """
        if epochs < 0:
            raise ValueError(f"epochs must be non-negative, got {epochs}")
        level = logging.INFO if self.verbose else logging.DEBUG
        history = []

        for epoch in range(epochs):
            dataset.shuffle(self._rng)

            total_loss = 0.0
            for i in range(dataset.num_examples):
                x, target = dataset.sample(i)
                output = self.forward(x)
                total_loss += self.cross_entropy_loss(output, target)
                self.train_sample(x, target)

            epoch_loss = total_loss / max(dataset.num_examples, 1)
            history.append(epoch_loss)
            self.loss_curve_.append(epoch_loss)

            if self.log_every and (epoch + 1) % self.log_every == 0:
                logger.log(level, "Epoch %d: Loss = %.4f", epoch + 1, epoch_loss)

        return history

    @staticmethod
    def cross_entropy_loss(predicted, target):
        """
        Categorical cross-entropy: -sum(target * log(predicted + eps)).

        Args:
            predicted (ndarray): Predicted probabilities
            target (ndarray): One-hot target

        Returns:
            float: Loss value
        """
        predicted = np.asarray(predicted, dtype=np.float64)
        target = np.asarray(target, dtype=np.float64)
        if predicted.shape != target.shape:
            raise ValueError("predicted and target must have the same shape")
        return float(-np.sum(target * np.log(predicted + EPSILON)))

    def evaluate(self, dataset):
        """
        Fraction of examples whose predicted class matches the label.

        Args:
            dataset (Dataset): Evaluation data

        Returns:
            float: Accuracy in [0, 1]
        """
        if dataset.num_examples == 0:
            raise ValueError("Cannot evaluate on an empty dataset")
        correct = 0
        for i in range(dataset.num_examples):
            x, label = dataset.sample(i)
            if self.arg_max(self.forward(x)) == self.arg_max(label):
                correct += 1
        return correct / dataset.num_examples

    @staticmethod
    def arg_max(vec):
        """Index of the largest element; the lowest index wins ties."""
        return _arg_max(vec)

    def print_structure(self):
        print(self)

    def __str__(self):
        desc = ["Neural Network Structure:"]
        for i, layer in enumerate(self.layers_):
            desc.append(f"Layer {i + 1}: inputs={layer.input_size}, "
                        f"outputs={layer.output_size}")
        return "\n".join(desc)

    # ---------- estimator interface ----------
    def _validate_input(self, X, y=None):
        """Validate input data and convert labels to one-hot."""
        X = np.asarray(X, dtype=np.float32)
        if X.ndim != 2:
            raise ValueError("X must be a 2D array")
        if X.shape[1] != self.input_size:
            raise ValueError(
                f"X has {X.shape[1]} features, expected {self.input_size}")
        if y is None:
            return X

        y = np.asarray(y)
        if X.shape[0] != y.shape[0]:
            raise ValueError("X and y must have the same number of samples")
        return X, self._one_hot(y)

    def _one_hot(self, y):
        if y.ndim == 2:
            if y.shape[1] != self.output_size:
                raise ValueError(
                    f"y has {y.shape[1]} columns, expected {self.output_size}")
            return y.astype(np.float32)
        if y.ndim != 1:
            raise ValueError("y must be a 1D array of class indices or a 2D one-hot array")
        y = y.astype(int)
        if y.size and (y.min() < 0 or y.max() >= self.output_size):
            raise ValueError(f"Class indices must lie in [0, {self.output_size})")
        one_hot = np.zeros((y.size, self.output_size), dtype=np.float32)
        one_hot[np.arange(y.size), y] = 1.0
        return one_hot

    def fit(self, X, y, epochs=100):
        """
        Train on arrays.

        Args:
            X (ndarray): Training data of shape (n_samples, input_size)
            y (ndarray): Class indices (n_samples,) or one-hot (n_samples, output_size)
            epochs (int): Number of passes over the data

        Returns:
            self: Fitted estimator
        """
        X, y = self._validate_input(X, y)
        self.train(Dataset.from_arrays(X, y), epochs)
        return self

    def predict_proba(self, X):
        """Class probabilities of shape (n_samples, output_size)."""
        X = self._validate_input(X)
        return np.array([self.forward(x) for x in X], dtype=np.float32).reshape(
            -1, self.output_size)

    def predict(self, X):
        """Predicted class indices of shape (n_samples,)."""
        return np.array([self.arg_max(p) for p in self.predict_proba(X)], dtype=int)

    def score(self, X, y):
        """
        Accuracy of the predictions.

        Args:
            X (ndarray): Test samples
            y (ndarray): Class indices or one-hot labels

        Returns:
            float: Accuracy
        """
        y = np.asarray(y)
        if y.ndim == 2:
            y = np.array([self.arg_max(row) for row in y], dtype=int)
        return super().score(X, y)
