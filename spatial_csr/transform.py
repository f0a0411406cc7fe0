"""
Weights-matrix transformations.

These never modify their input; each returns a new matrix (or the input itself,
when there is nothing to change).
"""

import logging

from .csr import CSRMatrix
from .errors import DimensionMismatch
from . import structure

_log = logging.getLogger(__name__)


def row_sums(csr: CSRMatrix):
    "Get the sum of each row of a matrix."
    return structure.row_sums(csr._store)


def standardize_rows(csr: CSRMatrix) -> CSRMatrix:
    """
    Row-standardize a matrix, so each row sums to 1.

    Rows that sum to zero (including empty rows) are left with no entries.

    Args:
        csr(CSRMatrix): the matrix to standardize.

    Returns:
        CSRMatrix: the standardized matrix.
    """
    rps, cis, vs = structure.standardize_rows(csr._store)
    return CSRMatrix._from_buffers(csr.nrows, csr.ncols, rps, cis, vs)


def windowed(csr: CSRMatrix) -> CSRMatrix:
    """
    Get the windowed version of a square weights matrix, in which each
    observation is its own neighbor.  If the trace is zero, this adds the
    identity matrix; otherwise the matrix is returned unchanged.

    Args:
        csr(CSRMatrix): a square matrix.

    Returns:
        CSRMatrix: the windowed matrix.

    Raises:
        DimensionMismatch: if the matrix is not square.
    """
    if csr.nrows != csr.ncols:
        raise DimensionMismatch(f'windowing requires a square matrix, got {csr.nrows}x{csr.ncols}')

    if structure.trace(csr._store) != 0:
        _log.debug('%s already has a diagonal, not windowing', csr)
        return csr

    rps, cis, vs = structure.add_identity(csr._store)
    return CSRMatrix._from_buffers(csr.nrows, csr.ncols, rps, cis, vs)
