# gpcov/kernel/radial.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from dataclasses import dataclass
import gpcov.num as gnp
from .utils import check_positive


def radial_kernel(h, length_scale):
    """Radial basis function (squared exponential) kernel.

    .. math::
        k(h) = \\exp(-h^2 / (2 \\ell^2))

    Parameters
    ----------
    h : gnp.array, shape (n,)
        Distances between points.
    length_scale : float
        Length scale :math:`\\ell > 0`.

    Returns
    -------
    gnp.array, shape (n,)
        Kernel values.
    """
    h = gnp.asdouble(h)
    return gnp.exp(-0.5 * (h / length_scale) ** 2)


@dataclass(frozen=True)
class Radial:
    """Radial kernel, models smoothness through exponential decay of distance.

    Attributes
    ----------
    length_scale : float
        Strictly positive length scale.

    Examples
    --------
    >>> Radial(length_scale=1.0).apply(0.0, 1.0)  # exp(-0.5)
    0.6065306597126334
    """

    length_scale: float

    def __post_init__(self):
        object.__setattr__(
            self, "length_scale", check_positive("length_scale", self.length_scale)
        )

    def apply(self, x1, x2):
        """Covariance between scalars x1 and x2, in (0, 1]."""
        return float(radial_kernel(abs(x1 - x2), self.length_scale))

    def self_covariance(self, x):
        return 1.0
