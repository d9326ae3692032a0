# gpcov/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from dataclasses import dataclass
import gpcov.num as gnp
from .utils import check_positive

# Coefficient in front of sin^2 in the exponent. The textbook
# exp-sine-squared kernel uses 2.0; this package keeps 1.0.
PERIODIC_COEFFICIENT = 1.0


def periodic_kernel(h, length_scale, period):
    """Periodic (exp-sine-squared) kernel.

    .. math::
        k(h) = \\exp(-c \\sin^2(\\pi h / p) / \\ell^2), \\quad c = 1

    Parameters
    ----------
    h : gnp.array, shape (n,)
        Distances between points.
    length_scale : float
        Length scale :math:`\\ell > 0`.
    period : float
        Period :math:`p > 0`.

    Returns
    -------
    gnp.array, shape (n,)
        Kernel values.
    """
    h = gnp.asdouble(h)
    s = gnp.sin(gnp.pi * h / period)
    return gnp.exp(-PERIODIC_COEFFICIENT * (s / length_scale) ** 2)


@dataclass(frozen=True)
class Periodic:
    """Periodic kernel, models structure repeating with a fixed period.

    Attributes
    ----------
    length_scale : float
        Strictly positive length scale.
    period : float
        Strictly positive period.
    """

    length_scale: float
    period: float

    def __post_init__(self):
        object.__setattr__(
            self, "length_scale", check_positive("length_scale", self.length_scale)
        )
        object.__setattr__(self, "period", check_positive("period", self.period))

    def apply(self, x1, x2):
        """Covariance between scalars x1 and x2, in (0, 1].

        Both inputs are reduced modulo the period before taking their
        distance, so x1 - x2 cannot overflow.
        """
        h = abs(x1 % self.period - x2 % self.period)
        return float(periodic_kernel(h, self.length_scale, self.period))

    def self_covariance(self, x):
        return 1.0
