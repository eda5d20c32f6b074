# tests/conftest.py
import numpy as np
import pytest

from nnlab.datasets import Dataset

CENTERS = np.array([
    [0.2, 0.8, 0.1, 0.1],
    [0.8, 0.2, 0.5, 0.3],
    [0.5, 0.5, 0.9, 0.9],
], dtype=np.float32)
SPECIES = ("setosa", "versicolor", "virginica")


def _make_blobs(n_per_class, seed=0, noise=0.05):
    rng = np.random.default_rng(seed)
    features, labels = [], []
    for cls, center in enumerate(CENTERS):
        features.append(center + noise * rng.standard_normal((n_per_class, 4)))
        one_hot = np.zeros((n_per_class, 3), dtype=np.float32)
        one_hot[:, cls] = 1.0
        labels.append(one_hot)
    return np.vstack(features).astype(np.float32), np.vstack(labels)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def blobs_dataset():
    features, labels = _make_blobs(30)
    return Dataset.from_arrays(features, labels)


@pytest.fixture
def iris_csv(tmp_path):
    """Write an iris-style CSV (features scaled up like the real table)."""
    def make(n_per_class=10, prefix="", extra_rows=()):
        features, labels = _make_blobs(n_per_class, seed=7)
        lines = ["sepal_length,sepal_width,petal_length,petal_width,species"]
        for row, label in zip(features * 8.0, labels):
            name = prefix + SPECIES[int(np.argmax(label))]
            lines.append(",".join(f"{v:.2f}" for v in row) + f",{name}")
        lines.extend(extra_rows)
        path = tmp_path / "iris.csv"
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return make


@pytest.fixture
def make_blobs():
    """Factory for three well-separated 4-feature clusters with one-hot labels."""
    return _make_blobs
