import operator

import numpy as np

INTC = np.iinfo(np.intc)


def readonly(a):
    """
    Get a read-only view of an array, so callers cannot write through to
    matrix storage.
    """
    view = a.view()
    view.flags.writeable = False
    return view


def check_dim(n, what):
    "Validate a matrix dimension, returning it as an int."
    n = operator.index(n)
    if n < 0:
        raise ValueError(f'{what} must be non-negative, got {n}')
    if n > INTC.max:
        raise ValueError(f'{what} {n} exceeds maximum of {INTC.max}')
    return n
