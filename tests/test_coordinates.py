import numpy as np

from spatial_csr import CSRMatrix
from spatial_csr.test_utils import dense_matrices, csr_slow

from hypothesis import given


def test_coordinates_fixed():
    csr = CSRMatrix([0, 1, 0, 0, 0, 0, 1, 0, 1], 3, 3)

    assert csr.coordinates() == {(0, 1): 1, (2, 0): 1, (2, 2): 1}


def test_coordinates_zero():
    csr = CSRMatrix([0, 0, 0, 0], 2, 2)

    assert csr.coordinates() == {}


def test_coordinates_empty_rows():
    # rows 0, 1, 3 and 4 are empty
    data = np.zeros((6, 2))
    data[2, 1] = 3
    data[5, 0] = 7
    csr = CSRMatrix.from_dense(data)

    assert csr.coordinates() == {(2, 1): 3, (5, 0): 7}


def test_coordinates_types():
    csr = CSRMatrix([0, 2.5], 1, 2)

    (key, val), = csr.coordinates().items()
    assert key == (0, 1)
    assert all(type(k) is int for k in key)
    assert type(val) is float


@csr_slow()
@given(dense_matrices(min_dim=0, max_dim=50))
def test_coordinates(mat):
    nrows, ncols = mat.shape
    csr = CSRMatrix(mat.ravel(), nrows, ncols)

    coords = csr.coordinates()
    assert len(coords) == csr.nnz
    assert len(coords) == np.count_nonzero(mat)

    for (i, j), v in coords.items():
        assert 0 <= i < nrows
        assert 0 <= j < ncols
        assert mat[i, j] == v

    for i, j in zip(*np.nonzero(mat)):
        assert (i, j) in coords


@csr_slow()
@given(dense_matrices())
def test_coordinates_match_rowinds(mat):
    csr = CSRMatrix.from_dense(mat)

    expected = {
        (int(i), int(j)): v
        for i, j, v in zip(csr.rowinds(), csr.col_index, csr.values)
    }
    assert csr.coordinates() == expected
