"""
Dataset containers and iris CSV ingestion.
"""
from ._dataset import Dataset
from ._iris import (
    CLASSES,
    read_csv,
    split_dataset,
    scale_features
)

__all__ = [
    'Dataset',
    'CLASSES',
    'read_csv',
    'split_dataset',
    'scale_features'
]
