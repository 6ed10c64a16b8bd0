"""
Information theory functions for discrete variables.

This module provides histogram and probability construction from
observation vectors, and entropy, conditional entropy, mutual information
and conditional mutual information over probability arrays.
"""

# Exceptions
from .errors import (
    InformationError,
    LengthMismatch,
    EmptyInput,
    IndexOutOfRange,
    InvalidProbability,
)

# Density construction
from .density import (
    infer_support,
    hist,
    hist_joint,
    prob,
    prob_joint,
    hist1d,
    hist2d,
    hist3d,
    prob1d,
    prob2d,
    prob3d,
    marginalize,
)

# Entropy functions
from .entropy import (
    PROB_ATOL,
    resolve_log_base,
    validate_probability,
    entropy,
    joint_entropy,
    conditional_entropy,
)

# Mutual information functions
from .mutual import (
    mutual_information,
    conditional_mutual_information,
)

# Measures from raw observations
from .discrete import (
    entropy_d,
    joint_entropy_dd,
    conditional_entropy_dd,
    mi_dd,
    cmi_ddd,
)

__all__ = [
    # Exceptions
    "InformationError",
    "LengthMismatch",
    "EmptyInput",
    "IndexOutOfRange",
    "InvalidProbability",
    # Density
    "infer_support",
    "hist",
    "hist_joint",
    "prob",
    "prob_joint",
    "hist1d",
    "hist2d",
    "hist3d",
    "prob1d",
    "prob2d",
    "prob3d",
    "marginalize",
    # Entropy
    "PROB_ATOL",
    "resolve_log_base",
    "validate_probability",
    "entropy",
    "joint_entropy",
    "conditional_entropy",
    # Mutual information
    "mutual_information",
    "conditional_mutual_information",
    # Raw observations
    "entropy_d",
    "joint_entropy_dd",
    "conditional_entropy_dd",
    "mi_dd",
    "cmi_ddd",
]
