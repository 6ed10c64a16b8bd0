"""
Entropy of discrete probability arrays.

This module provides:
- Validation of probability arrays and log base selection
- Entropy of a single variable
- Joint entropy over any number of variables
- Conditional entropy H(X|Y) from a 2-D joint array

Every function takes a probability array (see :mod:`infodisc.information.density`
for building one from observations) and a log base selecting the unit of the
result: 'natural' (nats, default), 'base2' (bits) or 'base10' (bans).
"""

import logging

import numpy as np

from .density import marginalize
from .entropy_jit import entropy_sum_jit
from .errors import InvalidProbability

logger = logging.getLogger(__name__)

# Maximum allowed |sum(p) - 1| for a valid probability array
PROB_ATOL = 1e-6

# Quantities that must be non-negative are clipped to 0 above this bound
NEGATIVE_ATOL = 1e-6

_LOG_BASES = {
    "natural": np.e,
    "e": np.e,
    "nats": np.e,
    "base2": 2.0,
    "bits": 2.0,
    "base10": 10.0,
    "bans": 10.0,
}


def resolve_log_base(base):
    """Map a log base option to its numeric value.

    Parameters
    ----------
    base : str, float or None
        'natural' / 'e' / 'nats' / None / numpy.e, 'base2' / 'bits' / 2,
        or 'base10' / 'bans' / 10.

    Returns
    -------
    float
        One of ``numpy.e``, 2.0 or 10.0.

    Raises
    ------
    ValueError
        If the option is not recognized.
    """
    if base is None:
        return np.e
    if isinstance(base, str):
        key = base.lower()
        if key in _LOG_BASES:
            return _LOG_BASES[key]
    elif isinstance(base, (int, float, np.integer, np.floating)) and not isinstance(
        base, (bool, np.bool_)
    ):
        for value in (np.e, 2.0, 10.0):
            if float(base) == value:
                return value
    raise ValueError(
        f"Unrecognized log base {base!r}; expected 'natural', 'base2' or 'base10'"
    )


def _to_base(h_nats, base):
    log_base = resolve_log_base(base)
    if log_base == np.e:
        return float(h_nats)
    return float(h_nats / np.log(log_base))


def validate_probability(p, ndim=None, name="p", atol=PROB_ATOL):
    """Check that an array is a well-formed probability distribution.

    Parameters
    ----------
    p : array-like
        Candidate probability array.
    ndim : int, optional
        Required number of dimensions. Any dimensionality >= 1 if None.
    name : str, optional
        Argument name used in error messages. Default: 'p'.
    atol : float, optional
        Allowed deviation of the total from 1. Default: 1e-6.

    Returns
    -------
    ndarray of float64
        The validated array.

    Raises
    ------
    InvalidProbability
        If the array is non-numeric, empty, has the wrong dimensionality,
        holds NaN/inf or negative values, or does not sum to 1 within ``atol``.
    """
    if np.iscomplexobj(p):
        raise InvalidProbability(f"{name} must be real-valued, got a complex array")
    try:
        arr = np.asarray(p, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidProbability(f"{name} must be a numeric array: {e}") from e

    if arr.ndim == 0:
        raise InvalidProbability(f"{name} must be an array, got a scalar")
    if ndim is not None and arr.ndim != ndim:
        raise InvalidProbability(
            f"{name} must be a {ndim}-D probability array, got shape {arr.shape}"
        )
    if arr.size == 0:
        raise InvalidProbability(f"{name} is empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidProbability(f"{name} contains NaN or infinite values")
    if np.any(arr < 0):
        raise InvalidProbability(
            f"{name} contains negative values (min {arr.min():.3g})"
        )
    total = arr.sum()
    if abs(total - 1.0) >= atol:
        raise InvalidProbability(f"{name} must sum to 1, got {total:.6g}")
    return arr


def _entropy_nats(arr):
    return entropy_sum_jit(np.ascontiguousarray(arr, dtype=np.float64).ravel())


def _clip_rounding(value, quantity):
    """Clip small negative values caused by rounding to zero."""
    if value >= 0:
        return value
    if value < -NEGATIVE_ATOL:
        raise InvalidProbability(
            f"{quantity} evaluated to {value:.3e}, which is negative beyond rounding error"
        )
    logger.debug(f"{quantity} = {value:.3e} clipped to 0")
    return 0.0


def entropy(p, base="natural"):
    """Calculate the entropy of a single discrete variable.

    H(X) = -sum_i p[i] * log(p[i]), with 0 * log(0) taken as 0.

    Parameters
    ----------
    p : array-like, 1-D
        Probability distribution of X (must sum to 1).
    base : str or float, optional
        'natural' (nats), 'base2' (bits) or 'base10' (bans). Default: 'natural'.

    Returns
    -------
    float
        Entropy, always >= 0; 0 exactly for a point mass.

    Raises
    ------
    InvalidProbability
        If ``p`` is not a valid 1-D probability array.

    Examples
    --------
    >>> entropy([0.5, 0.5])
    0.6931471805599453
    >>> round(entropy([0.25, 0.25, 0.25, 0.25], base='base2'), 12)
    2.0
    """
    resolve_log_base(base)
    arr = validate_probability(p, ndim=1)
    return _to_base(_clip_rounding(_entropy_nats(arr), "H(X)"), base)


def joint_entropy(p, base="natural"):
    """Calculate the joint entropy of the variables spanning a joint array.

    H(X1, ..., XN) = -sum p[i1, ..., iN] * log(p[i1, ..., iN])

    Parameters
    ----------
    p : array-like, N-D
        Joint probability array, one axis per variable.
    base : str or float, optional
        Log base option. Default: 'natural'.

    Returns
    -------
    float
        Joint entropy. For a 1-D array this equals :func:`entropy`.

    Raises
    ------
    InvalidProbability
        If ``p`` is not a valid probability array.

    Examples
    --------
    >>> round(joint_entropy([[0.5, 0.0], [0.25, 0.25]]), 6)
    1.039721
    """
    resolve_log_base(base)
    arr = validate_probability(p)
    return _to_base(_clip_rounding(_entropy_nats(arr), "H(X1..XN)"), base)


def conditional_entropy(p_xy, base="natural"):
    """Calculate the conditional entropy H(X|Y) from a joint array.

    H(X|Y) = H(X,Y) - H(Y), where the distribution of Y is obtained by
    summing ``p_xy`` over axis 0 (the X axis).

    Parameters
    ----------
    p_xy : array-like, shape (n_x, n_y)
        Joint probability array with X on axis 0 and Y on axis 1.
    base : str or float, optional
        Log base option. Default: 'natural'.

    Returns
    -------
    float
        Conditional entropy H(X|Y) >= 0.

    Raises
    ------
    InvalidProbability
        If ``p_xy`` is not a valid 2-D probability array.

    Examples
    --------
    >>> round(conditional_entropy([[0.5, 0.0], [0.25, 0.25]]), 6)
    0.477386
    """
    resolve_log_base(base)
    arr = validate_probability(p_xy, ndim=2, name="p_xy")
    p_y = marginalize(arr, 1)

    h_xy = _entropy_nats(arr)
    h_y = _entropy_nats(p_y)
    return _to_base(_clip_rounding(h_xy - h_y, "H(X|Y)"), base)
