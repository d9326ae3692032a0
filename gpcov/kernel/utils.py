# gpcov/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Parameter validation for kernel construction."""
import gpcov.num as gnp
from gpcov.errors import InvalidParameter


def check_finite(name, value):
    """Return `value` as a float, or raise InvalidParameter if it is not a finite number."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{name} must be a real number, got {value!r}") from exc
    if not gnp.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value


def check_positive(name, value):
    """Return `value` as a float, or raise InvalidParameter if it is not finite and > 0."""
    value = check_finite(name, value)
    if value <= 0.0:
        raise InvalidParameter(f"{name} must be strictly positive, got {value}")
    return value
