# gpcov/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Validation and conversion of training data.

Inputs are scalars, given as a sequence of length n or as an (n, 1)
column; targets follow the same convention. Validated arrays are
returned as read-only float copies.
"""
import gpcov.num as gnp
from gpcov.errors import EmptyTrainingSet, LengthMismatch, NonFiniteInput


def _as_scalar_vector(v, name):
    try:
        v = gnp.array(v, dtype=gnp.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} should be a sequence of real numbers") from exc
    if v.ndim == 0:
        v = v.reshape(1)
    elif v.ndim == 2:
        if v.shape[1] != 1:
            raise ValueError(
                f"{name} should only have one column if it's a 2D array "
                f"(multi-dimensional inputs are not supported)"
            )
        v = v.reshape(-1)
    elif v.ndim != 1:
        raise ValueError(f"{name} should be 1D or a 2D column array")
    return v


def ensure_training_inputs(x_train):
    """Validate training inputs.

    Parameters
    ----------
    x_train : array_like, shape (n,) or (n, 1)
        Scalar training inputs.

    Returns
    -------
    gnp.array, shape (n,)
        Read-only float copy of the inputs.

    Raises
    ------
    EmptyTrainingSet
        If n == 0.
    NonFiniteInput
        If an input is NaN or infinite.
    ValueError
        If the inputs are not scalars.
    """
    x = _as_scalar_vector(x_train, "x_train")
    if x.shape[0] == 0:
        raise EmptyTrainingSet("x_train must contain at least one point")
    if not gnp.all(gnp.isfinite(x)):
        raise NonFiniteInput("x_train contains NaN or infinite values")
    return gnp.readonly(x)


def ensure_training_set(x_train, y_train=None):
    """Validate a training set (x_train, y_train).

    Returns
    -------
    tuple
        (x_train, y_train), read-only arrays of shape (n,); y_train is
        None if not given.

    Raises
    ------
    EmptyTrainingSet, NonFiniteInput, ValueError
        See `ensure_training_inputs`.
    LengthMismatch
        If x_train and y_train differ in length.
    """
    x = ensure_training_inputs(x_train)
    if y_train is None:
        return x, None

    y = _as_scalar_vector(y_train, "y_train")
    if y.shape[0] != x.shape[0]:
        raise LengthMismatch(
            f"x_train and y_train must have the same length, got {x.shape[0]} and {y.shape[0]}"
        )
    if not gnp.all(gnp.isfinite(y)):
        raise NonFiniteInput("y_train contains NaN or infinite values")
    return x, gnp.readonly(y)
