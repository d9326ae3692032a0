# gpcov/kernel/linear.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from dataclasses import dataclass
import gpcov.num as gnp
from gpcov.errors import NonFiniteInput
from .utils import check_finite


def linear_kernel(x1, x2, offset, variance):
    """Linear kernel, elementwise.

    .. math::
        k(x_1, x_2) = v + (x_1 - c)(x_2 - c)

    Parameters
    ----------
    x1, x2 : gnp.array or float
        Inputs (broadcast together).
    offset : float
        Offset :math:`c`.
    variance : float
        Constant variance term :math:`v`.

    Returns
    -------
    gnp.array or float
        Kernel values.
    """
    return variance + (x1 - offset) * (x2 - offset)


@dataclass(frozen=True)
class Linear:
    """Linear kernel, models affine trends.

    Attributes
    ----------
    offset : float
        Input offset.
    variance : float
        Constant added to every covariance value.
    """

    offset: float
    variance: float

    def __post_init__(self):
        object.__setattr__(self, "offset", check_finite("offset", self.offset))
        object.__setattr__(self, "variance", check_finite("variance", self.variance))

    def apply(self, x1, x2):
        """Covariance between scalars x1 and x2.

        Raises
        ------
        NonFiniteInput
            If the product of the centered inputs overflows.
        """
        v = float(linear_kernel(x1, x2, self.offset, self.variance))
        if not gnp.isfinite(v):
            raise NonFiniteInput(
                f"{self!r} overflows at ({x1}, {x2}); inputs are too large"
            )
        return v

    def self_covariance(self, x):
        """Value of apply(x, x), i.e. variance + (x - offset)**2."""
        return self.apply(x, x)
