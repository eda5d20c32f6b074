"""
Row-aligned features/labels container.
"""
import numpy as np

from ..common.utils import shuffle
from ..linalg import Matrix, to_string


class Dataset:
    """
    A features matrix (num_examples, input_size) and a one-hot labels
    matrix (num_examples, output_size) kept row-aligned.
    """

    def __init__(self, num_examples=0, input_size=0, output_size=0):
        self.num_examples = num_examples
        self.features = Matrix(num_examples, input_size)
        self.labels = Matrix(num_examples, output_size)

    @classmethod
    def from_arrays(cls, features, labels):
        """
        Args:
            features (ndarray): Array of shape (N, d)
            labels (ndarray): One-hot array of shape (N, k)

        Returns:
            Dataset: Container holding float32 copies of both arrays
        """
        features = np.asarray(features, dtype=np.float32)
        labels = np.asarray(labels, dtype=np.float32)
        if features.ndim != 2 or labels.ndim != 2:
            raise ValueError("features and labels must be 2D arrays")
        if features.shape[0] != labels.shape[0]:
            raise ValueError("features and labels must have the same number of samples")
        dataset = cls()
        dataset.num_examples = features.shape[0]
        dataset.features = Matrix.from_array(features)
        dataset.labels = Matrix.from_array(labels)
        return dataset

    @property
    def input_size(self):
        return self.features.cols

    @property
    def output_size(self):
        return self.labels.cols

    def shuffle(self, rng=None):
        """Shuffle feature and label rows in lockstep."""
        shuffle(self.features, self.labels, rng)

    def sample(self, index):
        """Return the (features, label) rows at index."""
        if index < 0 or index >= self.num_examples:
            raise IndexError(
                f"Sample index {index} out of range for {self.num_examples} examples")
        return self.features.data[index], self.labels.data[index]

    def describe_sample(self, index):
        features, label = self.sample(index)
        return f"Features: {to_string(features)}\nLabels: {to_string(label)}"

    def __len__(self):
        return self.num_examples

    def __repr__(self):
        return (f"Dataset(num_examples={self.num_examples}, "
                f"input_size={self.input_size}, output_size={self.output_size})")
