# gpcov/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpcov.

All of them signal a caller error detected synchronously, before any
covariance value is returned. They derive from ValueError so that code
catching validation errors generically keeps working.
"""


class GPCovError(ValueError):
    """Base class for gpcov errors."""


class InvalidParameter(GPCovError):
    """A kernel parameter is out of its domain (non-positive scale or period, non-finite value)."""


class EmptyTrainingSet(GPCovError):
    """A covariance matrix was requested for zero training points."""


class LengthMismatch(GPCovError):
    """Training inputs and targets have different lengths."""


class NonFiniteInput(GPCovError):
    """Training inputs or targets contain NaN or infinite values."""
