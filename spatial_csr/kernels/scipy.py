"""
SciPy "kernel".  This kernel is not Numba-compatible, and is not the default.
It primarily exists as a reference for testing and benchmarking CSR products.
"""

import numpy as np
from scipy.sparse import csr_matrix

max_nnz = np.iinfo('i8').max


def to_handle(csr):
    return csr_matrix((csr.values, csr.colinds, csr.rowptrs), (csr.nrows, csr.ncols))


def release_handle(h):
    pass


def mult_vec(A, v):
    return A @ v


def dot_row(A, v, row):
    return (A[row, :] @ v)[0]
