"""
Dense float32 matrix with fixed dimensions.
"""
import numpy as np


class Matrix:
    """
    A rows x cols matrix of 32-bit floats.

    Dimensions are fixed at construction; contents are mutable in place.
    ``Matrix()`` creates an empty 0x0 placeholder.

    All binary operations raise ``ValueError`` on a shape mismatch.
    """

    def __init__(self, rows=0, cols=0):
        """
        Args:
            rows (int): Number of rows
            cols (int): Number of columns
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        self.data = np.zeros((self.rows, self.cols), dtype=np.float32)

    @classmethod
    def from_array(cls, array):
        """Build a matrix holding a float32 copy of a 2D array."""
        array = np.asarray(array, dtype=np.float32)
        if array.ndim != 2:
            raise ValueError(f"Matrix requires a 2D array, got {array.ndim}D")
        mat = cls(*array.shape)
        mat.data[...] = array
        return mat

    @property
    def shape(self):
        return self.rows, self.cols

    # ---------- static operations ----------
    @staticmethod
    def multiply(a, b):
        """Matrix product: C[i][j] = sum_k A[i][k] * B[k][j]."""
        if a.cols != b.rows:
            raise ValueError(
                f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}")
        return Matrix.from_array(a.data @ b.data)

    @staticmethod
    def multiply_vector(mat, vec):
        """
        Pre-transposed matrix-vector product: out[j] = sum_i mat[i][j] * vec[i].

        Args:
            mat (Matrix): Matrix of shape (rows, cols)
            vec (ndarray): Vector of length rows

        Returns:
            ndarray: Vector of length cols
        """
        vec = np.asarray(vec, dtype=np.float32)
        if vec.shape != (mat.rows,):
            raise ValueError(
                f"Vector of length {vec.size} does not match {mat.rows} matrix rows")
        return vec @ mat.data

    @staticmethod
    def transpose(mat):
        return Matrix.from_array(mat.data.T)

    @staticmethod
    def add(a, b):
        Matrix._check_same_shape(a, b)
        return Matrix.from_array(a.data + b.data)

    @staticmethod
    def subtract(a, b):
        Matrix._check_same_shape(a, b)
        return Matrix.from_array(a.data - b.data)

    @staticmethod
    def multiply_elem(a, b):
        Matrix._check_same_shape(a, b)
        return Matrix.from_array(a.data * b.data)

    @staticmethod
    def multiply_scalar(mat, scalar):
        return Matrix.from_array(mat.data * np.float32(scalar))

    @staticmethod
    def copy(mat):
        """Deep copy."""
        return Matrix.from_array(mat.data)

    @staticmethod
    def _check_same_shape(a, b):
        if a.shape != b.shape:
            raise ValueError(
                f"Matrix shapes differ: {a.rows}x{a.cols} and {b.rows}x{b.cols}")

    # ---------- initialization ----------
    def zeros(self):
        self.data.fill(0.0)

    def ones(self):
        self.data.fill(1.0)

    def randomize_uniform(self, rng=None):
        """Fill in place with samples from U[-1, 1]."""
        if rng is None:
            rng = np.random.default_rng()
        self.data[...] = rng.uniform(-1.0, 1.0, size=self.shape)

    def randomize_normal(self, rng=None):
        """Fill in place with standard normal samples."""
        if rng is None:
            rng = np.random.default_rng()
        self.data[...] = rng.standard_normal(size=self.shape)

    # ---------- utilities ----------
    def apply_function(self, func):
        """Apply func elementwise in place."""
        self.data[...] = func(self.data)

    def multiply_vec(self, vec):
        """Instance form of ``Matrix.multiply_vector``."""
        return Matrix.multiply_vector(self, vec)

    def to_string(self):
        return "\n".join(
            " ".join(f"{v:8.4f}" for v in row) for row in self.data)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols})"
