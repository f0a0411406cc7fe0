"""
Spatially lagged variables.

Each function takes a weights matrix (a :py:class:`~spatial_csr.CSRMatrix` or
:py:class:`~spatial_csr.weights.WeightsMatrix`) and one value per observation,
and returns the lagged values as a NumPy array.
"""

from .weights import WeightsMatrix
from .transform import standardize_rows, windowed


def _matrix(w):
    if isinstance(w, WeightsMatrix):
        return w.sparse
    return w


def neighbor_sum(w, x):
    "Sum the values of each observation's neighbors."
    return _matrix(w).mulvec(x)


def neighbor_average(w, x):
    "Average the values of each observation's neighbors, weighted by the row-standardized weights."
    return standardize_rows(_matrix(w)).mulvec(x)


def window_sum(w, x):
    "Sum the values of each observation and its neighbors."
    return windowed(_matrix(w)).mulvec(x)


def window_average(w, x):
    "Average the values of each observation and its neighbors."
    return standardize_rows(windowed(_matrix(w))).mulvec(x)
