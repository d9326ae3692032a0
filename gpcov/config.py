# gpcov/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_SUPPORTED_BACKENDS = ("numpy",)


class _GPCovConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        # float64; read once when gpcov.num is imported
        self.dtype = float
        # logger lives in config
        self.logger = logging.getLogger("gpcov")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPCovConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype})"
        )


_config = _GPCovConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("GPCOV_BACKEND")
    if env is not None and env not in _SUPPORTED_BACKENDS:
        raise ValueError(
            f"GPCOV_BACKEND={env!r} is not supported; use one of {_SUPPORTED_BACKENDS}"
        )
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPCOV_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing gpcov.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["GPCOV_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
