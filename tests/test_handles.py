"""
Tests for creating kernel handles.
"""

import numpy as np

from spatial_csr.kernels import releasing
from spatial_csr.test_utils import csrs, csr_slow

from hypothesis import given


@csr_slow(divider=1)
@given(csrs())
def test_make_handle(kernel, csr):
    h = kernel.to_handle(csr._store)
    try:
        assert h is not None
        if kernel.__name__.endswith('.scipy'):
            assert h.shape == csr.shape
            assert h.nnz == csr.nnz
        else:
            assert (h.nrows, h.ncols) == csr.shape
            assert h.nnz == csr.nnz
    finally:
        kernel.release_handle(h)


@csr_slow(divider=1)
@given(csrs())
def test_releasing(kernel, csr):
    v = np.ones(csr.ncols)
    with releasing(kernel.to_handle(csr._store), kernel) as h:
        res = kernel.mult_vec(h, v)
    assert len(res) == csr.nrows
