"""
Vector utilities over 1D float32 arrays.
"""
import numpy as np


def _as_vector(vec):
    return np.asarray(vec, dtype=np.float32)


def _check_same_length(a, b):
    if a.shape != b.shape:
        raise ValueError(
            f"Vectors must have the same length, got {a.size} and {b.size}")


def alloc(size, zero_init=True):
    """Allocate a float32 vector of the given size."""
    if zero_init:
        return np.zeros(size, dtype=np.float32)
    return np.empty(size, dtype=np.float32)


def copy(vec):
    """Copy a vector into a new array."""
    return np.array(vec, dtype=np.float32, copy=True)


def dot(a, b):
    """Dot product of two vectors."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return float(np.dot(a, b))


def add(a, b):
    """Elementwise sum."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a + b


def subtract(a, b):
    """Elementwise difference a - b."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a - b


def multiply_elem(a, b):
    """Elementwise product."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a * b


def divide_elem(a, b):
    """Elementwise quotient a / b."""
    a, b = _as_vector(a), _as_vector(b)
    _check_same_length(a, b)
    return a / b


def scale(a, scalar):
    """Multiply a vector by a scalar."""
    return _as_vector(a) * np.float32(scalar)


def norm(a):
    """Euclidean norm."""
    return float(np.sqrt(np.sum(_as_vector(a) ** 2)))


def normalize(a):
    """
    Scale a vector to unit length.

    A zero vector is returned as an unchanged copy.
    """
    mag = norm(a)
    if mag == 0.0:
        return copy(a)
    return scale(a, 1.0 / mag)


def zeros(vec):
    """Fill a vector with zeros in place."""
    vec[...] = 0.0


def ones(vec):
    """Fill a vector with ones in place."""
    vec[...] = 1.0


def random_uniform(vec, rng=None):
    """Fill a vector in place with samples from U[-1, 1]."""
    if rng is None:
        rng = np.random.default_rng()
    vec[...] = rng.uniform(-1.0, 1.0, size=vec.shape)


def random_normal(vec, rng=None):
    """Fill a vector in place with standard normal samples."""
    if rng is None:
        rng = np.random.default_rng()
    vec[...] = rng.standard_normal(size=vec.shape)


def apply_function(vec, func):
    """Apply func elementwise to a vector in place."""
    vec[...] = func(vec)


def arg_max(vec):
    """
    Index of the largest element; the lowest index wins ties.

    Raises:
        ValueError: If the vector is empty
    """
    vec = _as_vector(vec)
    if vec.size == 0:
        raise ValueError("arg_max requires a non-empty vector")
    # np.argmax returns the first occurrence of the maximum
    return int(np.argmax(vec))


def to_string(vec):
    """Fixed-width string form, e.g. ``[  0.1000,   0.2000]``."""
    return "[" + ", ".join(f"{v:8.4f}" for v in _as_vector(vec)) + "]"
