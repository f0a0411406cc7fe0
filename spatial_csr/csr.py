"""
Python API for CSR matrices.
"""

import logging
import operator

import numpy as np
import scipy.sparse as sps

from .kernels import get_kernel, releasing
from .errors import DimensionMismatch, IndexOutOfRange
from ._csr_types import make_storage
from ._util import readonly, check_dim
from . import _rows, structure

_log = logging.getLogger(__name__)


class CSRMatrix:
    """
    Immutable compressed sparse row matrix, built from dense row-major data.

    Only entries that differ from zero (exactly, with no tolerance) are stored.
    Within each row, entries are kept in increasing column order.  Once built,
    no method modifies the matrix; the buffer accessors return read-only views,
    so an instance can be shared freely between threads.

    Args:
        data(array-like):
            the dense matrix as a flat sequence, where row ``i``, column ``j``
            is at ``data[i * ncols + j]``.
        nrows(int): the number of rows.
        ncols(int): the number of columns.

    Raises:
        DimensionMismatch: if ``len(data) != nrows * ncols``.
        ValueError: if a dimension is negative or too large.

    Attributes:
        nrows(int): the number of rows.
        ncols(int): the number of columns.
        nnz(int): the number of stored entries.
        values(numpy.ndarray): the stored values.
        col_index(numpy.ndarray): the column of each stored value.
        row_index(numpy.ndarray):
            the offset of each row's first entry, with ``row_index[nrows] == nnz``.
    """

    def __init__(self, data, nrows, ncols):
        nrows = check_dim(nrows, 'nrows')
        ncols = check_dim(ncols, 'ncols')
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 1:
            raise DimensionMismatch(f'dense data must be 1-D, got {data.ndim} dimensions')
        if nrows * ncols != len(data):
            raise DimensionMismatch(
                f'nrows * ncols ({nrows} * {ncols}) != data size {len(data)}')

        rps, cis, vs = structure.dense_to_csr(data, nrows, ncols)
        self._store = make_storage(nrows, ncols, rps, cis, vs)
        _log.debug('converted %dx%d dense array with %d nnz', nrows, ncols, self.nnz)

    @classmethod
    def from_dense(cls, array):
        """
        Create a CSR matrix from a 2-D dense array.

        Args:
            array(array-like): a 2-D array (or nested sequence).

        Returns:
            CSRMatrix: the sparse matrix.
        """
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise DimensionMismatch(f'expected 2-D array, got {array.ndim} dimensions')
        nrows, ncols = array.shape
        return cls(array.ravel(), nrows, ncols)

    @classmethod
    def _from_buffers(cls, nrows, ncols, rowptrs, colinds, values):
        "Wrap CSR buffers that are not referenced anywhere else."
        csr = cls.__new__(cls)
        csr._store = make_storage(nrows, ncols, rowptrs, colinds, values)
        return csr

    @property
    def nrows(self):
        return int(self._store.nrows)

    @property
    def ncols(self):
        return int(self._store.ncols)

    @property
    def shape(self):
        return self.nrows, self.ncols

    @property
    def nnz(self):
        return int(self._store.nnz)

    @property
    def values(self):
        return readonly(self._store.values)

    @property
    def col_index(self):
        return readonly(self._store.colinds)

    @property
    def row_index(self):
        return readonly(self._store.rowptrs)

    def _require_vec(self, vec):
        v = np.require(vec, np.float64, 'C')
        if v.shape != (self.ncols,):
            raise DimensionMismatch(
                f'vector of shape {v.shape} does not match {self.ncols} columns')
        return v

    def _require_row(self, row):
        row = operator.index(row)
        if row < 0 or row >= self.nrows:
            raise IndexOutOfRange(f'row {row} out of range for {self.nrows} rows')
        return row

    def mulvec(self, vec):
        """
        Multiply this matrix by a vector.

        Each row is summed in stored (increasing column) order.

        Args:
            vec(array-like): A vector, of length :py:attr:`ncols`.

        Returns:
            numpy.ndarray: :math:`A\\vec{x}`, as a vector of length :py:attr:`nrows`.

        Raises:
            DimensionMismatch: if the vector has the wrong length.
        """
        v = self._require_vec(vec)
        K = get_kernel()
        with releasing(K.to_handle(self._store), K) as h:
            return K.mult_vec(h, v)

    def dot_row(self, vec, row):
        """
        Compute the dot product of one row with a vector.  This is equivalent to
        ``self.mulvec(vec)[row]``, without computing the other rows.

        Args:
            vec(array-like): A vector, of length :py:attr:`ncols`.
            row(int): the row index.

        Returns:
            float: the dot product.

        Raises:
            DimensionMismatch: if the vector has the wrong length.
            IndexOutOfRange: if ``row`` is not in ``[0, nrows)``.
        """
        v = self._require_vec(vec)
        row = self._require_row(row)
        K = get_kernel()
        with releasing(K.to_handle(self._store), K) as h:
            return float(K.dot_row(h, v, row))

    def coordinates(self):
        """
        Get the stored entries keyed by their coordinates.

        Returns:
            dict: maps ``(row, column)`` tuples to values, with exactly
            :py:attr:`nnz` entries.
        """
        ris = structure.row_indices(self._store)
        keys = zip(ris.tolist(), self._store.colinds.tolist())
        return dict(zip(keys, self._store.values.tolist()))

    def rowinds(self) -> np.ndarray:
        """
        Get the row indices of the stored entries.  Combined with :py:attr:`col_index`
        and :py:attr:`values`, this lists the matrix's coordinates.
        """
        return structure.row_indices(self._store)

    def row(self, row):
        """
        Return a row of this matrix as a dense ndarray.

        Args:
            row(int): the row index.

        Returns:
            numpy.ndarray: the row, with 0s in the place of missing values.
        """
        row = self._require_row(row)
        return _rows.row_array(self._store, row)

    def row_extent(self, row):
        """
        Get the extent of a row in the underlying column index and value arrays.

        Args:
            row(int): the row index.

        Returns:
            tuple: ``(s, e)``, where the row occupies positions :math:`[s, e)` in the
            CSR data.
        """
        row = self._require_row(row)
        sp, ep = _rows.extent(self._store, row)
        return int(sp), int(ep)

    def row_cs(self, row):
        """
        Get the column indices for the stored values of a row.
        """
        row = self._require_row(row)
        return readonly(_rows.cs(self._store, row))

    def row_vs(self, row):
        """
        Get the stored values of a row.
        """
        row = self._require_row(row)
        return readonly(_rows.vs(self._store, row))

    def row_nnzs(self):
        """
        Get a vector of the number of stored entries in each row.

        Returns:
            numpy.ndarray: the number of stored entries in each row.
        """
        return np.diff(self._store.rowptrs)

    def to_dense(self):
        """
        Convert this matrix to a dense 2-D array.
        """
        return _rows.dense(self._store)

    def to_scipy(self):
        """
        Convert this matrix to a SciPy :py:class:`scipy.sparse.csr_matrix`.  The
        SciPy matrix gets its own copy of the data.

        Returns:
            scipy.sparse.csr_matrix:
                A SciPy sparse matrix with the same data.
        """
        return sps.csr_matrix((self._store.values.copy(), self._store.colinds.copy(),
                               self._store.rowptrs.copy()),
                              shape=(self.nrows, self.ncols))

    def __str__(self):
        return '<CSRMatrix {}x{} ({} nnz)>'.format(self.nrows, self.ncols, self.nnz)

    def __repr__(self):
        repr = '<CSRMatrix {}x{} ({} nnz)'.format(self.nrows, self.ncols, self.nnz)
        repr += ' {\n'
        repr += '  row_index={}\n'.format(self.row_index)
        repr += '  col_index={}\n'.format(self.col_index)
        repr += '  values={}\n'.format(self.values)
        repr += '}>'
        return repr
