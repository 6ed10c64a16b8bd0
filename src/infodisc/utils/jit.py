"""JIT compilation utilities for infodisc.

Provides conditional JIT compilation based on environment settings.
"""

import os

from numba import njit

# Check if Numba should be disabled
INFODISC_DISABLE_NUMBA = os.getenv("INFODISC_DISABLE_NUMBA", "False").lower() in (
    "true",
    "1",
    "yes",
)


def conditional_njit(*args, **kwargs):
    """Conditionally apply numba JIT compilation based on environment settings.

    If the INFODISC_DISABLE_NUMBA environment variable is set to 'true', '1'
    or 'yes', this returns the original function without JIT compilation.
    Otherwise, applies numba.njit with the given parameters.

    Parameters
    ----------
    *args
        Positional arguments passed to numba.njit. If a single function is
        passed, it will be decorated directly.
    **kwargs
        Keyword arguments passed to numba.njit (e.g., cache=True).

    Returns
    -------
    decorator or function
        If called with arguments: returns a decorator function.
        If called on a function directly: returns the (possibly JIT-compiled) function.

    Notes
    -----
    The variable is read once, at import time. Set it before importing
    infodisc to run the kernels as plain Python, which is mostly useful
    when stepping through them in a debugger.

    Examples
    --------
    >>> @conditional_njit
    ... def fast_computation(x):
    ...     return x ** 2

    With numba parameters::

        @conditional_njit(cache=True)
        def cached_computation(x):
            return x ** 2
    """
    if INFODISC_DISABLE_NUMBA:

        def decorator(func):
            return func

        return decorator if not args else args[0]
    else:
        return njit(*args, **kwargs)


def is_jit_enabled():
    """Check if JIT compilation is enabled.

    Returns
    -------
    bool
        False when INFODISC_DISABLE_NUMBA is set to 'true', '1' or 'yes'
        (case insensitive), True otherwise.
    """
    return not INFODISC_DISABLE_NUMBA


def jit_info():
    """Print information about JIT compilation status.

    Examples
    --------
    >>> jit_info()  # doctest: +SKIP
    JIT disabled by environment: False
    JIT enabled: True
    Numba version: 0.60.0
    """
    import numba

    print(f"JIT disabled by environment: {INFODISC_DISABLE_NUMBA}")
    print(f"JIT enabled: {is_jit_enabled()}")
    print(f"Numba version: {numba.__version__}")
