"""
Iris CSV ingestion: one-hot label encoding, train/test split and scaling.
"""
import logging

import numpy as np
import pandas as pd

from ._dataset import Dataset

logger = logging.getLogger(__name__)

CLASSES = ("setosa", "versicolor", "virginica")
N_FEATURES = 4


def _encode_label(label):
    name = str(label).strip().lower()
    if name.startswith("iris-"):
        name = name[len("iris-"):]
    row = np.zeros(len(CLASSES), dtype=np.float32)
    if name in CLASSES:
        row[CLASSES.index(name)] = 1.0
    else:
        logger.warning("Unrecognized label %r encoded as all zeros", label)
    return row


def read_csv(path):
    """
    Read an iris-style CSV with a header row.

    Columns 0-3 are the float features and column 4 is the species name.
    Fields past column 4 (including a trailing comma) are ignored. Rows that
    end before the label column are skipped; an empty or non-numeric feature
    in a complete row is an error.

    Args:
        path (str): Path to the CSV file

    Returns:
        tuple: features (N, 4) float32 array and one-hot labels (N, 3)
    """
    n_cols = N_FEATURES + 1
    try:
        df = pd.read_csv(path, header=0, index_col=False, usecols=range(n_cols),
                         skipinitialspace=True)
    except ValueError as e:
        raise ValueError(f"Expected at least {n_cols} columns in {path}: {e}") from e

    short = df.iloc[:, N_FEATURES].isna()
    if short.any():
        logger.warning("Skipped %d rows with fewer than %d columns", int(short.sum()), n_cols)
        df = df[~short]

    feature_cols = df.iloc[:, :N_FEATURES]
    if feature_cols.isna().to_numpy().any():
        bad = feature_cols.index[feature_cols.isna().to_numpy().any(axis=1)][0]
        raise ValueError(f"Missing feature value in data row {int(bad) + 1} of {path}")
    features = feature_cols.to_numpy(dtype=np.float32)
    labels = np.array([_encode_label(v) for v in df.iloc[:, N_FEATURES]],
                      dtype=np.float32).reshape(-1, len(CLASSES))
    logger.debug("Read %d rows from %s", features.shape[0], path)
    return features, labels


def split_dataset(path, num_train, num_test, rng=None):
    """
    Load a CSV, shuffle its rows and split them into train and test sets.

    Args:
        path (str): Path to the CSV file
        num_train (int): Number of training examples
        num_test (int): Number of test examples
        rng (np.random.Generator, optional): Random number generator

    Returns:
        tuple: (train, test) Datasets
    """
    if num_train < 0 or num_test < 0:
        raise ValueError("num_train and num_test must be non-negative")
    features, labels = read_csv(path)
    total = features.shape[0]
    if num_train + num_test > total:
        raise ValueError(
            f"Requested train+test ({num_train + num_test}) > available samples ({total})")

    if rng is None:
        rng = np.random.default_rng()
    indices = rng.permutation(total)
    train_idx = indices[:num_train]
    test_idx = indices[num_train:num_train + num_test]

    train = Dataset.from_arrays(features[train_idx], labels[train_idx])
    test = Dataset.from_arrays(features[test_idx], labels[test_idx])
    return train, test


def scale_features(dataset, scale=8.0):
    """Divide every feature by scale, in place."""
    if scale == 0:
        raise ValueError("scale must be non-zero")
    dataset.features.data /= np.float32(scale)
    return dataset
