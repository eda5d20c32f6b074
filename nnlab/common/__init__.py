"""
Shared helpers: paired-row shuffling and logging setup.
"""
from .utils import shuffle
from .log_init import config_logger

__all__ = [
    'shuffle',
    'config_logger'
]
