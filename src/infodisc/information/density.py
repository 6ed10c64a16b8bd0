"""
Histogram and probability mass construction for discrete variables.

Observation vectors hold integer category labels. Each variable's support
is either declared by the caller (``support_size=int``) or inferred from the
data as ``max(labels) + 1`` (``support_size=None``).

Axis convention: in a joint array built from variables ``(X, Y, Z, ...)``,
axis 0 belongs to X, axis 1 to Y, and so on. Summing over an axis
marginalizes that variable out.
"""

import logging

import numpy as np

from ..utils.data import check_integer, check_positive, to_label_array
from .errors import EmptyInput, IndexOutOfRange, LengthMismatch

logger = logging.getLogger(__name__)


def infer_support(observations):
    """Return the support size implied by the observed labels.

    Parameters
    ----------
    observations : array-like
        Non-negative integer labels.

    Returns
    -------
    int
        ``max(observations) + 1``, or 0 for an empty vector.

    Raises
    ------
    IndexOutOfRange
        If any label is negative.
    """
    labels = to_label_array(observations)
    return _resolve_support(labels, None)


def _resolve_support(labels, support_size, variable=None):
    if support_size is not None:
        check_integer(support_size=support_size)
        check_positive(support_size=support_size)
        support_size = int(support_size)

    if labels.size == 0:
        return 0 if support_size is None else support_size

    low, high = int(labels.min()), int(labels.max())
    if support_size is None:
        if low < 0:
            raise IndexOutOfRange(low, max(high + 1, 0), variable)
        return high + 1

    if low < 0:
        raise IndexOutOfRange(low, support_size, variable)
    if high >= support_size:
        raise IndexOutOfRange(high, support_size, variable)
    return support_size


def hist(observations, support_size=None):
    """Count the occurrences of each category in a single observation vector.

    Parameters
    ----------
    observations : array-like
        1-D sequence of integer labels in ``[0, support_size)``.
    support_size : int or None, optional
        Number of categories. If None, it is inferred as ``max + 1``.

    Returns
    -------
    ndarray of int64, shape (support_size,)
        ``counts[i]`` is the number of labels equal to ``i``.

    Raises
    ------
    IndexOutOfRange
        If a label is negative or not below ``support_size``.

    Examples
    --------
    >>> hist([0, 1, 1, 1, 2, 2])
    array([1, 3, 2])
    >>> hist([0, 1, 1, 1, 2, 2], 4)
    array([1, 3, 2, 0])
    """
    labels = to_label_array(observations)
    nbins = _resolve_support(labels, support_size)
    return np.bincount(labels, minlength=nbins).astype(np.int64, copy=False)


def hist_joint(observation_vectors, support_sizes=None):
    """Tally co-occurrences of categories across aligned observation vectors.

    Parameters
    ----------
    observation_vectors : sequence of array-like
        K vectors of equal length L. Position t across all vectors is one
        joint sample.
    support_sizes : sequence of (int or None), or None, optional
        One support size per vector; None entries (or None for the whole
        argument) are inferred from the data.

    Returns
    -------
    ndarray of int64, shape (n_1, ..., n_K)
        Cell ``[i1, ..., iK]`` counts the positions where vector k equals
        ``i_k`` for every k.

    Raises
    ------
    LengthMismatch
        If the vectors differ in length.
    IndexOutOfRange
        If any label falls outside its support.
    EmptyInput
        If no vectors are given.
    ValueError
        If ``support_sizes`` does not have one entry per vector.
    """
    vectors = [
        to_label_array(vec, name=f"observation_vectors[{k}]")
        for k, vec in enumerate(observation_vectors)
    ]
    if not vectors:
        raise EmptyInput("hist_joint needs at least one observation vector")

    lengths = [vec.size for vec in vectors]
    if len(set(lengths)) > 1:
        raise LengthMismatch(lengths)

    if support_sizes is None:
        support_sizes = [None] * len(vectors)
    support_sizes = list(support_sizes)
    if len(support_sizes) != len(vectors):
        raise ValueError(
            f"Expected {len(vectors)} support sizes (one per vector), got {len(support_sizes)}"
        )

    shape = tuple(
        _resolve_support(vec, size, variable=k)
        for k, (vec, size) in enumerate(zip(vectors, support_sizes))
    )
    n_cells = int(np.prod(shape))
    if n_cells == 0:
        return np.zeros(shape, dtype=np.int64)

    # integer bincount over flat indices: independent of sample order
    flat = np.ravel_multi_index(tuple(vectors), shape)
    counts = np.bincount(flat, minlength=n_cells).reshape(shape)

    logger.debug(f"Built joint histogram of shape {shape} from {lengths[0]} samples")
    return counts.astype(np.int64, copy=False)


def _normalize(counts):
    total = counts.sum()
    if total == 0:
        raise EmptyInput("Cannot normalize a histogram built from zero observations")
    return counts / float(total)


def prob(observations, support_size=None):
    """Estimate the probability mass of a single discrete variable.

    Parameters
    ----------
    observations : array-like
        1-D sequence of integer labels.
    support_size : int or None, optional
        Number of categories; inferred as ``max + 1`` if None.

    Returns
    -------
    ndarray of float64, shape (support_size,)
        Relative frequencies, summing to 1.

    Raises
    ------
    EmptyInput
        If ``observations`` is empty.
    IndexOutOfRange
        If a label falls outside the support.

    Examples
    --------
    >>> prob([0, 1, 2])
    array([0.33333333, 0.33333333, 0.33333333])
    """
    return _normalize(hist(observations, support_size))


def prob_joint(observation_vectors, support_sizes=None):
    """Estimate the joint probability mass of several discrete variables.

    Same arguments and failure modes as :func:`hist_joint`; the counts are
    divided by the number of samples L.

    Returns
    -------
    ndarray of float64, shape (n_1, ..., n_K)

    Raises
    ------
    EmptyInput
        If no vectors are given or they are empty.

    Examples
    --------
    >>> prob_joint([[0, 1], [0, 1]])
    array([[0.5, 0. ],
           [0. , 0.5]])
    """
    return _normalize(hist_joint(observation_vectors, support_sizes))


def hist1d(arr, nbins):
    """Histogram of one variable with a declared number of bins."""
    return hist(arr, nbins)


def hist2d(arr_a, arr_b, nbins_a, nbins_b):
    """Joint histogram of two aligned variables, shape (nbins_a, nbins_b)."""
    return hist_joint([arr_a, arr_b], [nbins_a, nbins_b])


def hist3d(arr_a, arr_b, arr_c, nbins_a, nbins_b, nbins_c):
    """Joint histogram of three aligned variables, shape (nbins_a, nbins_b, nbins_c)."""
    return hist_joint([arr_a, arr_b, arr_c], [nbins_a, nbins_b, nbins_c])


def prob1d(arr, nbins):
    """Probability array of one variable with a declared number of bins."""
    return prob(arr, nbins)


def prob2d(arr_a, arr_b, nbins_a, nbins_b):
    """Joint probability array of two aligned variables."""
    return prob_joint([arr_a, arr_b], [nbins_a, nbins_b])


def prob3d(arr_a, arr_b, arr_c, nbins_a, nbins_b, nbins_c):
    """Joint probability array of three aligned variables."""
    return prob_joint([arr_a, arr_b, arr_c], [nbins_a, nbins_b, nbins_c])


def marginalize(p, keep):
    """Sum a joint array over every axis not listed in ``keep``.

    Parameters
    ----------
    p : array-like
        Joint probability (or count) array.
    keep : int or sequence of int
        Axes to retain. The output axes follow the order given here, so
        ``marginalize(p_xyz, (2, 0))`` has shape ``(n_z, n_x)``.

    Returns
    -------
    ndarray
        The marginal array. ``keep=()`` returns the total as a 0-D array.

    Raises
    ------
    ValueError
        If an axis is out of bounds or repeated.

    Examples
    --------
    >>> p_xy = np.array([[0.5, 0.0], [0.25, 0.25]])
    >>> marginalize(p_xy, 1)  # distribution of Y
    array([0.75, 0.25])
    """
    arr = np.asarray(p)
    if np.isscalar(keep) or isinstance(keep, np.integer):
        keep = (keep,)

    normalized = []
    for ax in keep:
        check_integer(axis=ax)
        ax = int(ax)
        if not -arr.ndim <= ax < arr.ndim:
            raise ValueError(f"Axis {ax} is out of bounds for array of dimension {arr.ndim}")
        normalized.append(ax % arr.ndim)
    if len(set(normalized)) != len(normalized):
        raise ValueError(f"Repeated axis in keep={tuple(keep)}")

    drop = tuple(ax for ax in range(arr.ndim) if ax not in normalized)
    out = np.asarray(arr.sum(axis=drop))

    remaining = sorted(normalized)
    perm = [remaining.index(ax) for ax in normalized]
    return np.transpose(out, perm)
