"""
Information measures computed directly from discrete observation vectors.

Each function builds the required probability array with
:mod:`infodisc.information.density` and reduces it with the metric
functions, so support handling and error types are the same as in those
modules.
"""

from .density import prob, prob_joint
from .entropy import conditional_entropy, entropy, joint_entropy
from .mutual import conditional_mutual_information, mutual_information


def entropy_d(x, support_size=None, base="natural"):
    """Calculate entropy for a discrete variable.

    Parameters
    ----------
    x : array-like
        Integer category labels.
    support_size : int, optional
        Number of categories; inferred as ``max + 1`` if None.
    base : str or float, optional
        Log base option. Default: 'natural'.

    Returns
    -------
    float
        Entropy H(X).

    Raises
    ------
    EmptyInput
        If ``x`` is empty.
    """
    return entropy(prob(x, support_size), base=base)


def joint_entropy_dd(x, y, support_sizes=None, base="natural"):
    """Calculate joint entropy H(X,Y) for two discrete variables."""
    return joint_entropy(prob_joint([x, y], support_sizes), base=base)


def conditional_entropy_dd(x, y, support_sizes=None, base="natural"):
    """Calculate conditional entropy H(X|Y) for two discrete variables."""
    return conditional_entropy(prob_joint([x, y], support_sizes), base=base)


def mi_dd(x, y, support_sizes=None, base="natural"):
    """Calculate mutual information I(X;Y) between two discrete variables.

    Parameters
    ----------
    x, y : array-like
        Aligned integer label vectors of equal length.
    support_sizes : sequence of (int or None), optional
        Support of X and Y; inferred if None.
    base : str or float, optional
        Log base option. Default: 'natural'.

    Returns
    -------
    float
        Mutual information I(X;Y).

    Raises
    ------
    LengthMismatch
        If ``x`` and ``y`` differ in length.
    """
    return mutual_information(prob_joint([x, y], support_sizes), base=base)


def cmi_ddd(x, y, z, support_sizes=None, base="natural"):
    """Calculate conditional mutual information I(X;Y|Z) for three discrete variables."""
    return conditional_mutual_information(
        prob_joint([x, y, z], support_sizes), base=base
    )
