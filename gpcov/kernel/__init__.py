# gpcov/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions on scalar inputs.

Modules
-------
radial
    Radial basis function kernel.
periodic
    Periodic (exp-sine-squared) kernel.
linear
    Linear kernel.
variants
    The closed union of kernels and the `apply` dispatcher.
utils
    Parameter validation helpers.

Public API
-----------
- Kernel variants:
    Radial, Periodic, Linear, Kernel
- Vectorized kernel functions:
    radial_kernel, periodic_kernel, linear_kernel
- Dispatch:
    apply, is_kernel, check_kernel
"""

from .radial import Radial, radial_kernel
from .periodic import Periodic, periodic_kernel, PERIODIC_COEFFICIENT
from .linear import Linear, linear_kernel
from .variants import Kernel, KERNEL_TYPES, apply, is_kernel, check_kernel

__all__ = [
    # Variants
    "Radial",
    "Periodic",
    "Linear",
    "Kernel",
    "KERNEL_TYPES",
    # Kernel functions
    "radial_kernel",
    "periodic_kernel",
    "linear_kernel",
    "PERIODIC_COEFFICIENT",
    # Dispatch
    "apply",
    "is_kernel",
    "check_kernel",
]
