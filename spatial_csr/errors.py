"""
Exceptions raised by CSR matrix operations.
"""


class DimensionMismatch(ValueError):
    """
    An array argument does not have the length required by the matrix shape.

    Raised when dense input data does not hold ``nrows * ncols`` entries, when
    a vector's length differs from :py:attr:`CSRMatrix.ncols`, or when an
    operation that needs a square matrix gets a rectangular one.
    """


class IndexOutOfRange(IndexError):
    """
    A row index is outside ``[0, nrows)``.  Negative indices are not wrapped.
    """
