"""
Spatial weights matrices keyed by observation.
"""

import numpy as np

from .csr import CSRMatrix
from . import transform


class WeightsMatrix:
    """
    Weights between a set of observations.

    The sparse form is computed on first use and cached, so ``weights`` should not
    be modified after that.

    Args:
        keys(iterable): the observation keys, in matrix order.
        weights(dict):
            maps each key to a dictionary of ``{neighbor_key: weight}``.  Keys
            with no neighbors may be omitted; neighbors that are not in ``keys``
            are ignored.
    """

    def __init__(self, keys, weights):
        self.keys = list(keys)
        self.weights = weights
        self._sparse = None

    @property
    def n(self):
        "The number of observations."
        return len(self.keys)

    def full(self):
        """
        Get the dense ``n x n`` weights matrix, with rows and columns in key order.
        """
        index = {k: i for i, k in enumerate(self.keys)}
        mat = np.zeros((self.n, self.n))
        for i, key in enumerate(self.keys):
            for nbr, w in self.weights.get(key, {}).items():
                j = index.get(nbr)
                if j is not None:
                    mat[i, j] = w
        return mat

    @property
    def sparse(self) -> CSRMatrix:
        "The weights as a CSR matrix."
        if self._sparse is None:
            self._sparse = CSRMatrix.from_dense(self.full())
        return self._sparse

    def standardized(self) -> CSRMatrix:
        "Get the row-standardized weights."
        return transform.standardize_rows(self.sparse)

    def windowed(self) -> CSRMatrix:
        "Get the windowed weights, in which every observation neighbors itself."
        return transform.windowed(self.sparse)

    def __str__(self):
        return '<WeightsMatrix of {} observations>'.format(self.n)
