"""Parameter and array validation helpers shared across infodisc."""

import numpy as np


def check_positive(**kwargs):
    """Check that all provided parameters are positive (> 0).

    Parameters
    ----------
    **kwargs : dict
        Parameter name to value mappings. All values should be numeric.

    Raises
    ------
    ValueError
        If any parameter value is not positive, NaN, or infinite.
        Error message includes parameter name and value.
    TypeError
        If a value cannot be interpreted as a number.

    Examples
    --------
    >>> check_positive(support_size=4, n_vars=2)  # No error

    >>> check_positive(support_size=0)
    ValueError: support_size must be positive, got 0
    """
    for name, value in kwargs.items():
        if value is None:
            continue  # Skip None values
        try:
            val = float(value)
            if np.isnan(val):
                raise ValueError(f"{name} cannot be NaN")
            if np.isinf(val):
                raise ValueError(f"{name} cannot be infinite")
            if val <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        except (TypeError, ValueError) as e:
            if "cannot be" in str(e) or "must be" in str(e):
                raise  # Re-raise our validation errors
            raise TypeError(f"{name} must be numeric, got {type(value).__name__}")


def check_integer(**kwargs):
    """Check that all provided parameters hold integral values.

    Accepts Python and numpy integers as well as floats with no fractional
    part (``4.0``). Booleans are rejected.

    Raises
    ------
    TypeError
        If any value is not an integer.
    """
    for name, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, (bool, np.bool_)):
            raise TypeError(f"{name} must be an integer, got bool")
        if isinstance(value, (int, np.integer)):
            continue
        if isinstance(value, (float, np.floating)) and float(value).is_integer():
            continue
        raise TypeError(f"{name} must be an integer, got {value!r}")


def to_numpy_array(data):
    if isinstance(data, np.ndarray):
        return data
    return np.asarray(data)


def to_label_array(data, name="observations"):
    """Convert a sequence of category labels to a 1-D int64 array.

    Parameters
    ----------
    data : array-like
        Integer labels. Float arrays are accepted if every value is integral.
    name : str, optional
        Name used in error messages. Default: 'observations'.

    Returns
    -------
    ndarray of int64
        A new array; the input is never modified or retained.

    Raises
    ------
    ValueError
        If the data is not 1-D, holds NaN/inf, holds non-integral values,
        or holds unsigned labels too large for int64.
    """
    arr = to_numpy_array(data)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if np.issubdtype(arr.dtype, np.integer):
        if np.issubdtype(arr.dtype, np.unsignedinteger):
            high = int(arr.max())
            if high > np.iinfo(np.int64).max:
                raise ValueError(
                    f"{name} contains label {high}, which exceeds the int64 label range"
                )
        return arr.astype(np.int64, copy=True)
    if arr.dtype == np.bool_:
        return arr.astype(np.int64)
    if not np.issubdtype(arr.dtype, np.floating):
        raise ValueError(
            f"{name} must hold integer category labels, got dtype {arr.dtype}"
        )
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} cannot contain NaN or infinite values")
    if not np.all(arr == np.round(arr)):
        raise ValueError(f"{name} must hold integer category labels, got fractional values")
    return arr.astype(np.int64)
