# tests/test_layers.py
import numpy as np
import pytest

from nnlab.neural_networks import Activation, DenseLayer, Layer


def test_construction(rng):
    layer = DenseLayer(4, 6, rng=rng)
    assert layer.weights.shape == (4, 6)
    assert np.all((layer.weights.data >= -1) & (layer.weights.data <= 1))
    np.testing.assert_array_equal(layer.biases, np.zeros(6))
    assert layer.activation is Activation.RELU
    assert repr(layer) == "DenseLayer(input_size=4, output_size=6, activation='relu')"
    with pytest.raises(ValueError):
        DenseLayer(0, 3)


@pytest.mark.parametrize("in_size,out_size", [(1, 5), (4, 3), (10, 1)])
def test_forward_output_length(in_size, out_size, rng):
    layer = DenseLayer(in_size, out_size, activation="tanh", rng=rng)
    out = layer.forward(rng.normal(size=in_size))
    assert out.shape == (out_size,)


def test_forward_computes_and_caches(rng):
    layer = DenseLayer(3, 2, activation="relu", rng=rng)
    layer.weights.data[...] = [[1, -1], [2, -2], [0, 1]]
    layer.biases[...] = [0.5, 0.0]
    x = np.array([1.0, 1.0, 1.0], dtype=np.float32)
    out = layer.forward(x)
    np.testing.assert_allclose(layer.last_z, [3.5, -2.0])
    np.testing.assert_allclose(out, [3.5, 0.0])
    np.testing.assert_array_equal(layer.last_input, x)
    # cached input is a copy
    x[0] = 99
    assert layer.last_input[0] == 1
    with pytest.raises(ValueError):
        layer.forward([1.0, 2.0])


def test_backward_uses_pre_update_weights():
    layer = DenseLayer(2, 2, activation="linear")
    w = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
    layer.weights.data[...] = w
    x = np.array([1.0, -1.0], dtype=np.float32)
    layer.forward(x)

    dz = np.array([0.5, -1.0], dtype=np.float32)
    d_prev = layer.backward_from_dz(dz, learning_rate=0.1)

    np.testing.assert_allclose(d_prev, w @ dz)
    np.testing.assert_allclose(layer.weights.data, w - 0.1 * np.outer(x, dz), rtol=1e-6)
    np.testing.assert_allclose(layer.biases, -0.1 * dz, rtol=1e-6)


def test_backward_requires_forward():
    layer = DenseLayer(2, 2)
    with pytest.raises(ValueError, match="forward"):
        layer.backward_from_dz(np.zeros(2), 0.1)
    with pytest.raises(ValueError):
        layer.activation_gradient()


def test_activation_gradient(rng):
    hidden = DenseLayer(2, 3, activation="relu", rng=rng)
    hidden.weights.data[...] = [[1, -1, 0], [0, 0, 0]]
    hidden.forward([1.0, 0.0])
    np.testing.assert_array_equal(hidden.activation_gradient(), [1, 0, 0])

    output = DenseLayer(2, 3, activation="sigmoid", derivative=False, rng=rng)
    output.forward([0.3, -0.2])
    np.testing.assert_array_equal(output.activation_gradient(), np.ones(3))


def test_params_are_live_parameter_arrays(rng):
    assert Layer().params() == []
    layer = DenseLayer(3, 2, rng=rng)
    weights, biases = layer.params()
    assert weights is layer.weights
    assert biases is layer.biases
    layer.forward([1.0, 1.0, 1.0])
    layer.backward_from_dz(np.ones(2, dtype=np.float32), 0.5)
    np.testing.assert_allclose(layer.params()[1], [-0.5, -0.5])
