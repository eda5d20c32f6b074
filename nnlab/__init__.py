"""
Feedforward neural network classifier built from dense matrix primitives.
"""
from .config import TrainingConfig
from .datasets import Dataset
from .linalg import Matrix
from .neural_networks import NeuralNetwork, DenseLayer, Activation

__all__ = [
    'TrainingConfig',
    'Dataset',
    'Matrix',
    'NeuralNetwork',
    'DenseLayer',
    'Activation'
]
