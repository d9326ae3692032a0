# gpcov/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process container class.
"""
from gpcov.kernel import check_kernel

from . import covariance
from . import utils


class GaussianProcess:
    """Gaussian Process (GP) container on scalar inputs.

    A GaussianProcess holds a training set and a kernel, and the
    covariance matrix of the training inputs under that kernel, built
    once at construction. It is the object an inference layer (fitting,
    prediction, linear solvers) starts from.

    Attributes
    ----------
    x_train : gnp.array, shape (n,)
        Training inputs, read-only.
    y_train : gnp.array, shape (n,) or None
        Training targets, read-only. Stored, not used to build the
        covariance matrix.
    kernel : Radial, Periodic or Linear
        Covariance function.
    covariance_matrix : gnp.array, shape (n, n)
        K[i, j] = kernel.apply(x_train[i], x_train[j]), read-only.

    Public API (methods)
    --------------------
    with_kernel
        New model on the same training set with another kernel.
    diagnostics
        Size, magnitude and smallest eigenvalue of the covariance matrix.

    Examples
    --------
    >>> import gpcov as gc
    >>> kernel = gc.kernel.Periodic(length_scale=1.0, period=2.0)
    >>> model = gc.GaussianProcess([0.0, 1.0, 2.0], kernel, y_train=[0.1, 0.4, 0.2])
    >>> model.covariance_matrix.shape
    (3, 3)
    """

    def __init__(self, x_train, kernel, y_train=None):
        """
        Parameters
        ----------
        x_train : array_like, shape (n,) or (n, 1)
            Scalar training inputs, n >= 1.
        kernel : Radial, Periodic or Linear
            Covariance function.
        y_train : array_like, shape (n,) or (n, 1), optional
            Training targets.

        Raises
        ------
        EmptyTrainingSet
            If x_train is empty.
        LengthMismatch
            If x_train and y_train differ in length.
        NonFiniteInput
            If inputs or targets contain NaN or infinite values.
        TypeError
            If `kernel` is not a kernel variant.
        """
        self._kernel = check_kernel(kernel)
        self._x_train, self._y_train = utils.ensure_training_set(x_train, y_train)
        self._covariance_matrix = covariance.build_covariance(self._x_train, self._kernel)

    def __repr__(self):
        output = str("<gpcov.core.GaussianProcess object> " + hex(id(self)))
        return output

    def __str__(self):
        targets = "none" if self._y_train is None else f"{self._y_train.shape[0]} values"
        return (
            f"GP Model:\n"
            f"  Kernel: {self._kernel!r}\n"
            f"  Training points: {self.n}\n"
            f"  Targets: {targets}"
        )

    @property
    def x_train(self):
        return self._x_train

    @property
    def y_train(self):
        return self._y_train

    @property
    def kernel(self):
        return self._kernel

    @property
    def covariance_matrix(self):
        return self._covariance_matrix

    @property
    def n(self):
        """Number of training points."""
        return self._x_train.shape[0]

    def with_kernel(self, kernel):
        """Return a new model with the same training set and `kernel`."""
        return GaussianProcess(self._x_train, kernel, y_train=self._y_train)

    def diagnostics(self):
        """See `gpcov.core.covariance.covariance_diagnostics`."""
        return covariance.covariance_diagnostics(self._covariance_matrix)
