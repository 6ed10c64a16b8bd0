"""
Mutual information and conditional mutual information from joint arrays.

Both quantities are assembled from entropies of marginals obtained by
:func:`~infodisc.information.density.marginalize`, so they obey the same
zero handling and log base conventions as :mod:`infodisc.information.entropy`.
"""

import logging

from .density import marginalize
from .entropy import (
    _clip_rounding,
    _entropy_nats,
    _to_base,
    resolve_log_base,
    validate_probability,
)

logger = logging.getLogger(__name__)


def mutual_information(p_xy, base="natural"):
    """Calculate the mutual information I(X;Y) from a 2-D joint array.

    I(X;Y) = H(X) + H(Y) - H(X,Y), where p(x) sums ``p_xy`` over axis 1
    and p(y) sums it over axis 0.

    Parameters
    ----------
    p_xy : array-like, shape (n_x, n_y)
        Joint probability array with X on axis 0 and Y on axis 1.
    base : str or float, optional
        'natural' (nats), 'base2' (bits) or 'base10' (bans). Default: 'natural'.

    Returns
    -------
    float
        Mutual information, >= 0 and symmetric in X and Y.

    Raises
    ------
    InvalidProbability
        If ``p_xy`` is not a valid 2-D probability array, or the result is
        negative beyond rounding error.

    Notes
    -----
    Negative results within 1e-6 of zero come from floating-point rounding
    of nearly independent variables and are returned as 0.

    Examples
    --------
    >>> round(mutual_information([[0.5, 0.0], [0.0, 0.5]], base='base2'), 12)
    1.0
    """
    resolve_log_base(base)
    arr = validate_probability(p_xy, ndim=2, name="p_xy")

    h_x = _entropy_nats(marginalize(arr, 0))
    h_y = _entropy_nats(marginalize(arr, 1))
    h_xy = _entropy_nats(arr)

    mi = _clip_rounding(h_x + h_y - h_xy, "I(X;Y)")
    return _to_base(mi, base)


def conditional_mutual_information(p_xyz, base="natural"):
    """Calculate the conditional mutual information I(X;Y|Z) from a 3-D joint array.

    I(X;Y|Z) = H(X,Z) + H(Y,Z) - H(X,Y,Z) - H(Z)

    Parameters
    ----------
    p_xyz : array-like, shape (n_x, n_y, n_z)
        Joint probability array with X, Y and Z on axes 0, 1 and 2.
    base : str or float, optional
        Log base option. Default: 'natural'.

    Returns
    -------
    float
        Conditional mutual information, >= 0.

    Raises
    ------
    InvalidProbability
        If ``p_xyz`` is not a valid 3-D probability array, or the result is
        negative beyond rounding error.
    """
    resolve_log_base(base)
    arr = validate_probability(p_xyz, ndim=3, name="p_xyz")

    p_xz = marginalize(arr, (0, 2))
    p_yz = marginalize(arr, (1, 2))
    p_z = marginalize(arr, 2)

    h_xz = _entropy_nats(p_xz)
    h_yz = _entropy_nats(p_yz)
    h_xyz = _entropy_nats(arr)
    h_z = _entropy_nats(p_z)

    cmi = _clip_rounding(h_xz + h_yz - h_xyz - h_z, "I(X;Y|Z)")
    logger.debug(
        f"CMI terms (nats): H(X,Z)={h_xz:.6f}, H(Y,Z)={h_yz:.6f}, "
        f"H(X,Y,Z)={h_xyz:.6f}, H(Z)={h_z:.6f}"
    )
    return _to_base(cmi, base)
