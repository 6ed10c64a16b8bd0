"""
Utility functions for infodisc.

This module provides JIT helpers and parameter validation shared by the
information subpackage.
"""

from .data import (
    check_positive,
    check_integer,
    to_numpy_array,
    to_label_array,
)

from .jit import (
    conditional_njit,
    is_jit_enabled,
    jit_info,
)

__all__ = [
    # Validation
    "check_positive",
    "check_integer",
    "to_numpy_array",
    "to_label_array",
    # JIT
    "conditional_njit",
    "is_jit_enabled",
    "jit_info",
]
