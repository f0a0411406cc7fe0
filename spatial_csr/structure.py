"""
Routines for working with matrix structure.
"""

import numpy as np
from numba import njit


@njit(nogil=True)
def dense_to_csr(data, nrows, ncols):
    """
    Convert a flat, row-major dense array into CSR buffers.

    An entry is stored if and only if it compares unequal to 0; there is no
    tolerance, so tiny nonzero values are kept and ``-0.0`` is dropped.  The
    input array is not modified.

    Args:
        data(numpy.ndarray): the dense data, of length ``nrows * ncols``.
        nrows(int): the number of rows.
        ncols(int): the number of columns.

    Returns:
        tuple: ``(rowptrs, colinds, values)``, each allocated to its exact size.
    """
    # count first so the buffers can be allocated at their final size
    nnz = 0
    for x in data:
        if x != 0:
            nnz += 1

    rowptrs = np.zeros(nrows + 1, dtype=np.int64)
    colinds = np.zeros(nnz, dtype=np.intc)
    values = np.zeros(nnz, dtype=np.float64)

    pos = 0
    for i in range(nrows):
        rowptrs[i] = pos
        base = i * ncols
        for j in range(ncols):
            v = data[base + j]
            if v != 0:
                values[pos] = v
                colinds[pos] = j
                pos += 1

    rowptrs[nrows] = nnz
    return rowptrs, colinds, values


@njit(nogil=True)
def row_indices(csr):
    "Get the row index of each stored entry, walking the entries in order."
    ris = np.zeros(csr.nnz, np.intc)
    row = 0
    for k in range(csr.nnz):
        # advance past the end of this row, and any empty rows after it
        while k == csr.rowptrs[row + 1]:
            row += 1
        ris[k] = row
    return ris


@njit(nogil=True)
def row_sums(csr):
    "Sum the stored values of each row."
    sums = np.zeros(csr.nrows)
    for i in range(csr.nrows):
        acc = 0.0
        for jj in range(csr.rowptrs[i], csr.rowptrs[i + 1]):
            acc += csr.values[jj]
        sums[i] = acc
    return sums


@njit(nogil=True)
def trace(csr):
    "Sum the stored diagonal entries."
    t = 0.0
    for i in range(min(csr.nrows, csr.ncols)):
        for jj in range(csr.rowptrs[i], csr.rowptrs[i + 1]):
            if csr.colinds[jj] == i:
                t += csr.values[jj]
    return t


@njit(nogil=True)
def standardize_rows(csr):
    """
    Divide each row by its sum, returning new CSR buffers.  Rows that sum to
    zero are left empty, and quotients that come out as exactly zero are dropped.
    """
    rowptrs = np.zeros(csr.nrows + 1, np.int64)
    colinds = np.zeros(csr.nnz, np.intc)
    values = np.zeros(csr.nnz)
    sums = row_sums(csr)

    pos = 0
    for i in range(csr.nrows):
        rowptrs[i] = pos
        s = sums[i]
        if s == 0:
            continue
        for jj in range(csr.rowptrs[i], csr.rowptrs[i + 1]):
            v = csr.values[jj] / s
            if v != 0:
                colinds[pos] = csr.colinds[jj]
                values[pos] = v
                pos += 1

    rowptrs[csr.nrows] = pos
    return rowptrs, colinds[:pos].copy(), values[:pos].copy()


@njit(nogil=True)
def add_identity(csr):
    """
    Add the identity matrix to a square CSR, returning new CSR buffers.  The
    rows must be in increasing column order; the result is too.
    """
    cap = csr.nnz + csr.nrows
    rowptrs = np.zeros(csr.nrows + 1, np.int64)
    colinds = np.zeros(cap, np.intc)
    values = np.zeros(cap)

    pos = 0
    for i in range(csr.nrows):
        rowptrs[i] = pos
        placed = False
        for jj in range(csr.rowptrs[i], csr.rowptrs[i + 1]):
            j = csr.colinds[jj]
            v = csr.values[jj]
            if not placed and j >= i:
                placed = True
                if j == i:
                    v += 1.0
                else:
                    colinds[pos] = i
                    values[pos] = 1.0
                    pos += 1
            if v != 0:
                colinds[pos] = j
                values[pos] = v
                pos += 1
        if not placed:
            colinds[pos] = i
            values[pos] = 1.0
            pos += 1

    rowptrs[csr.nrows] = pos
    return rowptrs, colinds[:pos].copy(), values[:pos].copy()
