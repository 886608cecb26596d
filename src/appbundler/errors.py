"""Error definitions for APPBUNDLER.

Message text is part of the public contract; callers and tests match on it.
"""

from typing import Any

# ============================================================================
#                               Base errors
# ============================================================================


class AppBundlerError(Exception):
    """Base class for all APPBUNDLER errors."""


class ValidationError(AppBundlerError, TypeError):
    """Raised when the input to `compose` is rejected before any state changes."""


class ContractError(AppBundlerError, TypeError):
    """Raised when a bundle function breaks the two-stage calling convention."""


# ============================================================================
#                           Validation errors
# ============================================================================


class InvalidDetailsError(ValidationError):
    """Raised when the details argument is not an object."""

    def __init__(self, details: Any) -> None:
        super().__init__("details must be an [Object]")
        self.details = details


class InvalidBundleShapeError(ValidationError):
    """Raised when an element of the bundle batch is not an object."""

    def __init__(self, index: int, bundle: Any) -> None:
        super().__init__("all business objects must be objects")
        self.index = index
        self.bundle = bundle


class MissingNameError(ValidationError):
    """Raised when an element of the bundle batch has no `name` field."""

    def __init__(self, index: int, bundle: Any) -> None:
        super().__init__("All business objects must have [name] property")
        self.index = index
        self.bundle = bundle


# ============================================================================
#                            Contract errors
# ============================================================================


class NonFunctionContinuationError(ContractError):
    """Raised when a bundle function does not return a callable continuation."""

    def __init__(self, bundle_name: Any, field: str, returned: Any) -> None:
        super().__init__("All business object functions should return a [Function]")
        self.bundle_name = bundle_name
        self.field = field
        self.returned = returned
