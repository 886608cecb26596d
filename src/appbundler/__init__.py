"""APPBUNDLER

Compose named business-object bundles into a single application namespace.
Each bundle's two-stage functions are rewrapped so that a call runs with the
caller's arguments first and then receives a shared context holding the
namespace and the injected details.
"""

# set before the imports below; appbundler.logging reads it at import time
__version__ = "0.1.0"

# pylint: disable=wrong-import-position
from appbundler.composer import Composer, compose, get_default_composer, reset
from appbundler.config import Settings, load_settings
from appbundler.domain.context import Context
from appbundler.domain.namespace import Namespace
from appbundler.domain.bundle import WrappedBundle
from appbundler.logging import enable_console_logging, log_composition
from appbundler.errors import (
    AppBundlerError,
    ContractError,
    InvalidBundleShapeError,
    InvalidDetailsError,
    MissingNameError,
    NonFunctionContinuationError,
    ValidationError,
)

__all__ = [
    "__version__",
    "AppBundlerError",
    "Composer",
    "Context",
    "ContractError",
    "InvalidBundleShapeError",
    "InvalidDetailsError",
    "MissingNameError",
    "Namespace",
    "NonFunctionContinuationError",
    "Settings",
    "ValidationError",
    "WrappedBundle",
    "compose",
    "enable_console_logging",
    "get_default_composer",
    "load_settings",
    "log_composition",
    "reset",
]
