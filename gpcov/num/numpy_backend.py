# gpcov/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gpcov.

This module defines the NumPy implementation of the gpcov.num API.
"""

from gpcov.config import get_config, init_backend, get_logger

_gpcov_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _gpcov_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64 if _config.dtype is float else numpy.dtype(_config.dtype).type
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    array_equal,
    isfinite,
    allclose,
    abs,
    exp,
    sin,
    max,
    all,
)
from numpy import pi
from numpy import finfo, float64
from scipy.linalg import eigvalsh

# ..................................................

eps = finfo(_np_dtype).eps

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    elif isinstance(x, (int, float)):
        dt = _np_dtype if isinstance(x, float) else None
        return numpy.array([x], dtype=dt)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.floating):
            return out.astype(_np_dtype, copy=False)
        return out

def asdouble(x):
    return numpy.asarray(x).astype(float64, copy=False)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

def readonly(x):
    """Clear the write flag of an array and return it."""
    x.setflags(write=False)
    return x

def is_symmetric(A):
    """Exact symmetry test for a square matrix."""
    return A.ndim == 2 and A.shape[0] == A.shape[1] and bool(numpy.array_equal(A, A.T))

def min_eigenvalue(A):
    """Smallest eigenvalue of a symmetric matrix."""
    return eigvalsh(A)[0]
