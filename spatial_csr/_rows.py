"""
Implementations of CSR row access functions.
"""

import numpy as np
from numba import njit


@njit
def extent(csr, row):
    "Get the extent of a row in the matrix storage."
    sp = csr.rowptrs[row]
    ep = csr.rowptrs[row + 1]
    return sp, ep


@njit
def row_array(csr, row):
    "Get a row of the CSR as a dense array."
    v = np.zeros(csr.ncols)
    sp, ep = extent(csr, row)
    for jj in range(sp, ep):
        v[csr.colinds[jj]] = csr.values[jj]
    return v


@njit
def dense(csr):
    "Expand the CSR into a dense 2-D array."
    out = np.zeros((csr.nrows, csr.ncols))
    for i in range(csr.nrows):
        sp, ep = extent(csr, i)
        for jj in range(sp, ep):
            out[i, csr.colinds[jj]] = csr.values[jj]
    return out


def cs(csr, row):
    "Get the column indices for a row."
    sp, ep = extent(csr, row)
    return csr.colinds[sp:ep]


def vs(csr, row):
    "Get the stored values for a row."
    sp, ep = extent(csr, row)
    return csr.values[sp:ep]
