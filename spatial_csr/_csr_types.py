"""
Type for CSR storage.
"""

import numpy as np
from numba.experimental import jitclass
import numba.types as nt


@jitclass([
    ('nrows', nt.intc),
    ('ncols', nt.intc),
    ('nnz', nt.int64),
    ('rowptrs', nt.int64[::1]),
    ('colinds', nt.intc[::1]),
    ('values', nt.float64[::1])
])
class _CSR:
    """
    Internal storage for :py:class:`spatial_csr.CSRMatrix`.  Each matrix owns
    exactly one of these, and all three buffers live and die with it.  Compiled
    kernels take this object directly.

    Attributes:
        nrows(int): the number of rows
        ncols(int): the number of columns
        nnz(int): the number of stored entries
        rowptrs(numpy.ndarray): starting position of each row (length ``nrows + 1``)
        colinds(numpy.ndarray): column indices (length ``nnz``)
        values(numpy.ndarray): stored values (length ``nnz``)
    """
    def __init__(self, nrows, ncols, nnz, rowptrs, colinds, values):
        self.nrows = nrows
        self.ncols = ncols
        self.nnz = nnz
        self.rowptrs = rowptrs
        self.colinds = colinds
        self.values = values


def make_storage(nrows, ncols, rowptrs, colinds, values):
    """
    Wrap CSR buffers in a storage object, coercing them to the storage types.
    """
    rowptrs = np.require(rowptrs, np.int64, 'C')
    colinds = np.require(colinds, np.intc, 'C')
    values = np.require(values, np.float64, 'C')
    nnz = len(values)
    assert len(rowptrs) == nrows + 1
    assert len(colinds) == nnz
    assert rowptrs[nrows] == nnz
    return _CSR(nrows, ncols, nnz, rowptrs, colinds, values)
