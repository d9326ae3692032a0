# gpcov/kernel/variants.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
The closed set of kernel variants and a dispatcher over it.

A kernel is one of Radial, Periodic or Linear. Adding a kernel means
adding a variant here together with its formula; composition of
kernels (sums, products) is left to callers.
"""
from typing import Union

from .radial import Radial
from .periodic import Periodic
from .linear import Linear

Kernel = Union[Radial, Periodic, Linear]

KERNEL_TYPES = (Radial, Periodic, Linear)


def is_kernel(obj):
    """True if obj is an instance of one of the kernel variants."""
    return isinstance(obj, KERNEL_TYPES)


def check_kernel(kernel):
    if not is_kernel(kernel):
        names = ", ".join(t.__name__ for t in KERNEL_TYPES)
        raise TypeError(f"kernel must be one of {names}, got {type(kernel).__name__}")
    return kernel


def apply(kernel, x1, x2):
    """Evaluate `kernel` at the pair (x1, x2).

    Parameters
    ----------
    kernel : Radial, Periodic or Linear
    x1, x2 : float

    Returns
    -------
    float
        Covariance value k(x1, x2).

    Raises
    ------
    TypeError
        If `kernel` is not a kernel variant.
    """
    return check_kernel(kernel).apply(x1, x2)
