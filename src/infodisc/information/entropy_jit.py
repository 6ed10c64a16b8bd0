"""
JIT-compiled reduction kernels shared by the entropy and information metrics.
"""

import numpy as np

from ..utils.jit import conditional_njit


@conditional_njit
def entropy_sum_jit(p):
    """Sum of -p * ln(p) over a flat probability array.

    Zero cells contribute nothing: the p -> 0 limit is taken explicitly, so
    ``log(0)`` is never evaluated.

    Parameters
    ----------
    p : ndarray of float64, 1-D
        Probability values (any dimensionality raveled to 1-D).

    Returns
    -------
    float
        Entropy in nats.
    """
    h = 0.0
    for i in range(p.size):
        if p[i] > 0:
            h -= p[i] * np.log(p[i])
    return h

