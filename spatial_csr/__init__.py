"""
Compressed Sparse Row matrices for spatial weights, with Numba kernels.
"""

__version__ = "0.1.0"
__all__ = [
    'CSRMatrix',
    'WeightsMatrix',
    'DimensionMismatch',
    'IndexOutOfRange',
]

from .errors import DimensionMismatch, IndexOutOfRange
from .csr import CSRMatrix
from .weights import WeightsMatrix
