"""
Dense matrix and vector primitives.
"""
from ._matrix import Matrix
from ._vector import (
    alloc,
    copy,
    dot,
    add,
    subtract,
    multiply_elem,
    divide_elem,
    scale,
    norm,
    normalize,
    zeros,
    ones,
    random_uniform,
    random_normal,
    apply_function,
    arg_max,
    to_string
)

__all__ = [
    'Matrix',
    'alloc',
    'copy',
    'dot',
    'add',
    'subtract',
    'multiply_elem',
    'divide_elem',
    'scale',
    'norm',
    'normalize',
    'zeros',
    'ones',
    'random_uniform',
    'random_normal',
    'apply_function',
    'arg_max',
    'to_string'
]
