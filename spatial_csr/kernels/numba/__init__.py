"""
Kernel implementing matrix products in pure Numba.

Products sum each row in stored order, which is increasing column order for
matrices built by :py:class:`spatial_csr.CSRMatrix`, so results are reproducible
bit-for-bit across runs.
"""


import numpy as np
from numba import njit

max_nnz = np.iinfo('i8').max


@njit
def to_handle(csr):
    """
    Convert CSR storage to a handle.  The caller must arrange for the matrix to
    last at least as long as the handle.  The handle must be explicitly released.

    Handles are opaque as far as callers are concerned.
    """
    return csr


@njit
def release_handle(h):
    """
    Release a handle.
    """
    pass


@njit(nogil=True)
def mult_vec(h, v):
    res = np.zeros(h.nrows)

    for i in range(h.nrows):
        acc = 0.0
        for jj in range(h.rowptrs[i], h.rowptrs[i + 1]):
            acc += h.values[jj] * v[h.colinds[jj]]
        res[i] = acc

    return res


@njit(nogil=True)
def dot_row(h, v, row):
    acc = 0.0
    for jj in range(h.rowptrs[row], h.rowptrs[row + 1]):
        acc += h.values[jj] * v[h.colinds[jj]]
    return acc
