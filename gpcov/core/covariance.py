# gpcov/core/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Assembly of covariance (Gram) matrices.

The matrix of a training set x_1, ..., x_n under a kernel k is
K[i, j] = k(x_i, x_j). All kernels are symmetric, so only the upper
triangle (diagonal included) is evaluated and mirrored, which takes
n (n + 1) / 2 kernel evaluations instead of n^2.
"""
from dataclasses import dataclass

import gpcov.num as gnp
from gpcov.config import get_logger
from gpcov.kernel import check_kernel
from .utils import ensure_training_inputs

_logger = get_logger()


def upper_triangle_pairs(n):
    """Yield the index pairs (i, j), 0 <= i <= j < n, in row-major order.

    Each pair is a true (row, column) position of the n x n matrix.
    The pairs can be split into disjoint groups to build a matrix in
    several parts.
    """
    for i in range(n):
        for j in range(i, n):
            yield i, j


def build_covariance(x_train, kernel):
    """Covariance matrix of scalar training inputs under a kernel.

    Parameters
    ----------
    x_train : array_like, shape (n,) or (n, 1)
        Training inputs, n >= 1.
    kernel : Radial, Periodic or Linear
        Covariance function.

    Returns
    -------
    gnp.array, shape (n, n)
        Read-only symmetric matrix with K[i, j] = kernel.apply(x_i, x_j).

    Raises
    ------
    EmptyTrainingSet
        If x_train is empty; nothing is allocated.
    NonFiniteInput
        If an input is not finite, or if a Linear kernel overflows
        (raised by the first overflowing evaluation).
    TypeError
        If `kernel` is not a kernel variant.

    Examples
    --------
    >>> import gpcov as gc
    >>> K = gc.core.build_covariance([0.0, 1.0, 2.0], gc.kernel.Radial(1.0))
    >>> K.shape
    (3, 3)
    """
    kernel = check_kernel(kernel)
    x = ensure_training_inputs(x_train)
    n = x.shape[0]

    K = gnp.zeros((n, n))
    n_evals = 0
    for i, j in upper_triangle_pairs(n):
        v = kernel.apply(float(x[i]), float(x[j]))
        K[i, j] = v
        K[j, i] = v
        n_evals += 1

    _logger.debug(
        "Built %dx%d covariance matrix with %r (%d kernel evaluations)",
        n, n, kernel, n_evals,
    )
    return gnp.readonly(K)


@dataclass(frozen=True)
class CovarianceDiagnostics:
    """Summary of a symmetric covariance matrix."""

    size: int
    max_abs: float
    min_eigenvalue: float

    def is_positive_semidefinite(self, tol=None):
        """True if min_eigenvalue >= -tol.

        The default tolerance is 100 * size * eps * max(1, max_abs), which
        absorbs the rounding of the eigenvalue computation.
        """
        if tol is None:
            tol = 100.0 * self.size * gnp.eps * max(1.0, self.max_abs)
        return self.min_eigenvalue >= -tol


def covariance_diagnostics(K):
    """Size, magnitude and smallest eigenvalue of a covariance matrix.

    Parameters
    ----------
    K : gnp.array, shape (n, n)

    Returns
    -------
    CovarianceDiagnostics

    Raises
    ------
    ValueError
        If K is not a symmetric square matrix.
    """
    K = gnp.asarray(K)
    if not gnp.is_symmetric(K):
        raise ValueError("K should be a symmetric square matrix")
    return CovarianceDiagnostics(
        size=K.shape[0],
        max_abs=float(gnp.max(gnp.abs(K))),
        min_eigenvalue=float(gnp.min_eigenvalue(K)),
    )
