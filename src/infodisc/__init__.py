"""
infodisc - information theory for discrete random variables

Histogram and probability mass construction from categorical observations,
and entropy, joint and conditional entropy, mutual information and
conditional mutual information over numpy probability arrays.
"""

__version__ = "0.1.0"

# Core modules
from . import information
from . import utils

# Density construction
from .information import (
    hist,
    hist_joint,
    prob,
    prob_joint,
    marginalize,
)

# Information measures
from .information import (
    entropy,
    joint_entropy,
    conditional_entropy,
    mutual_information,
    conditional_mutual_information,
)

# Exceptions
from .information import (
    InformationError,
    LengthMismatch,
    EmptyInput,
    IndexOutOfRange,
    InvalidProbability,
)

__all__ = [
    # Version
    "__version__",
    # Modules
    "information",
    "utils",
    # Density
    "hist",
    "hist_joint",
    "prob",
    "prob_joint",
    "marginalize",
    # Measures
    "entropy",
    "joint_entropy",
    "conditional_entropy",
    "mutual_information",
    "conditional_mutual_information",
    # Exceptions
    "InformationError",
    "LengthMismatch",
    "EmptyInput",
    "IndexOutOfRange",
    "InvalidProbability",
]
