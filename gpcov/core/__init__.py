# gpcov/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpcov package.

This subpackage contains covariance-matrix assembly, validation of
training data, and the Gaussian Process container that owns the
matrix.

Public API
----------
GaussianProcess : class
    Training set, kernel and covariance matrix.
build_covariance : function
    Covariance matrix of scalar inputs under a kernel.
upper_triangle_pairs : function
    Index pairs visited by build_covariance.
covariance_diagnostics : function
    Size, magnitude and smallest eigenvalue of a covariance matrix.
"""

from .model import GaussianProcess
from .covariance import (
    build_covariance,
    upper_triangle_pairs,
    covariance_diagnostics,
    CovarianceDiagnostics,
)
from .utils import ensure_training_inputs, ensure_training_set

__all__ = [
    "GaussianProcess",
    "build_covariance",
    "upper_triangle_pairs",
    "covariance_diagnostics",
    "CovarianceDiagnostics",
    "ensure_training_inputs",
    "ensure_training_set",
]
