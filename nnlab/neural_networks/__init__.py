"""
Neural networks module: activations, dense layers and the feedforward classifier.
"""
from .activations import (
    Activation,
    get_activation,
    sigmoid,
    sigmoid_derivative,
    relu,
    relu_derivative,
    tanh,
    tanh_derivative,
    linear,
    linear_derivative,
    softmax
)
from .layers import (
    Layer,
    DenseLayer
)
from ._network import NeuralNetwork

__all__ = [
    'Activation',
    'get_activation',
    'sigmoid',
    'sigmoid_derivative',
    'relu',
    'relu_derivative',
    'tanh',
    'tanh_derivative',
    'linear',
    'linear_derivative',
    'softmax',
    'Layer',
    'DenseLayer',
    'NeuralNetwork'
]
