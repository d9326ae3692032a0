# gpcov/__init__.py

from . import config
from . import num
from . import errors
from . import kernel
from . import core
from .core import GaussianProcess
from .errors import (
    GPCovError,
    InvalidParameter,
    EmptyTrainingSet,
    LengthMismatch,
    NonFiniteInput,
)

__all__ = [
    "num",
    "kernel",
    "core",
    "errors",
    "GaussianProcess",
    "GPCovError",
    "InvalidParameter",
    "EmptyTrainingSet",
    "LengthMismatch",
    "NonFiniteInput",
    "__version__",
]

__version__ = config.__version__
