"""
CSR test utilities.
"""

import numpy as np

from hypothesis import settings, HealthCheck
import hypothesis.strategies as st
import hypothesis.extra.numpy as nph

from .csr import CSRMatrix


def fractions(**kwargs):
    return st.floats(0, 1, **kwargs)


@st.composite
def finite_arrays(draw, shape, dtype=np.float64(), min_value=-1.0e3, max_value=1.0e3, **kwargs):
    dtype = np.dtype(dtype)
    elts = nph.from_dtype(dtype, min_value=min_value, max_value=max_value,
                          allow_infinity=False, allow_nan=False, **kwargs)
    return draw(nph.arrays(dtype, shape, elements=elts))


@st.composite
def dense_matrices(draw, nrows=None, ncols=None, density=fractions(), min_dim=1, max_dim=80):
    "Draw sparse-ish dense 2-D arrays, with a random fraction of the cells zeroed."
    if nrows is None:
        nrows = draw(st.integers(min_dim, max_dim))
    elif not isinstance(nrows, int):
        nrows = draw(nrows)

    if ncols is None:
        ncols = draw(st.integers(min_dim, max_dim))
    elif not isinstance(ncols, int):
        ncols = draw(ncols)

    if not isinstance(density, float):
        density = draw(density)

    vals = draw(finite_arrays((nrows, ncols)))
    seed = draw(st.integers(0, 2**32 - 1))
    rng = np.random.default_rng(seed)
    keep = rng.random((nrows, ncols)) < density
    return np.where(keep, vals, 0.0)


@st.composite
def csrs(draw, nrows=None, ncols=None, density=fractions()):
    "Draw CSR matrices by generating dense data."
    mat = draw(dense_matrices(nrows, ncols, density))
    return CSRMatrix.from_dense(mat)


@st.composite
def square_weights(draw, max_n=50):
    "Draw square dense non-negative weights matrices with an empty diagonal."
    n = draw(st.integers(1, max_n))
    mat = draw(dense_matrices(n, n))
    mat = np.abs(mat)
    np.fill_diagonal(mat, 0)
    return mat


def csr_slow(divider=2):
    dft = settings.default
    return settings(dft, deadline=None, suppress_health_check=list(HealthCheck),
                    max_examples=dft.max_examples // divider)
