import numpy as np

from ..linalg import Matrix


def _rows(array):
    return array.data if isinstance(array, Matrix) else array


def shuffle(features, labels, rng=None):
    """
    Fisher-Yates shuffle of paired rows, in place.

    Row i of ``features`` stays paired with row i of ``labels``.

    Args:
        features (ndarray or Matrix): Array of shape (N, d)
        labels (ndarray or Matrix): Array of shape (N, k)
        rng (np.random.Generator, optional): Random number generator
    """
    features, labels = _rows(features), _rows(labels)
    if len(features) != len(labels):
        raise ValueError("features and labels must have the same number of rows")
    if rng is None:
        rng = np.random.default_rng()

    for i in range(len(features) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        # Fancy indexing copies, so the swap is safe on ndarray rows
        features[[i, j]] = features[[j, i]]
        labels[[i, j]] = labels[[j, i]]
