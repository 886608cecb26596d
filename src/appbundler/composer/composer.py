"""Compose bundles into an application namespace with injected context."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from appbundler.config import Settings, load_settings
from appbundler.domain.bundle import WrappedBundle, get_name, wrap_bundle
from appbundler.domain.context import Context, TwoStageFunction
from appbundler.domain.namespace import Namespace
from appbundler.domain.validation import validate_bundles, validate_details
from appbundler.errors import NonFunctionContinuationError, ValidationError

logger = logging.getLogger(__name__)


class Composer:
    """Accumulates wrapped bundles and the details injected into them.

    Each call to `compose` validates a batch, replaces the current details and
    adds (or overwrites) one namespace entry per bundle. Every function field
    of a bundle is replaced by a wrapper that calls the original with the
    caller's arguments and then feeds the returned continuation a `Context`
    built from this composer at call time.

    Args:
        settings: Composer settings. Loaded from the environment when omitted.

    Note:
        There is no locking; compose from a single thread, typically at
        startup.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else load_settings()
        self._app = Namespace()
        self._details: Any = {}

    @property
    def app(self) -> Namespace:
        """The namespace of wrapped bundles."""
        return self._app

    @property
    def details(self) -> Any:
        """The details from the most recent successful compose."""
        return self._details

    def compose(self, bundles: Iterable[Any], details: Any = None) -> Namespace:
        """Add a batch of bundles to the namespace.

        Args:
            bundles: Ordered bundles; each must be an object with a `name`.
            details: Object injected as `Context.details`. `None` means an
                empty dict.

        Returns:
            This composer's namespace, the same instance on every call.

        Raises:
            InvalidDetailsError: If `details` is not an object.
            InvalidBundleShapeError: If any bundle is not an object.
            MissingNameError: If any bundle has no `name` field.
        """
        if details is None:
            details = {}
        try:
            validate_details(details)
            batch = validate_bundles(bundles)
        except ValidationError as exc:
            logger.error("Rejected bundle batch: %s", exc)
            raise

        wrapped_batch = [self._wrap_bundle(bundle) for bundle in batch]
        # raises TypeError on an unhashable name before any state changes
        staged = dict(wrapped_batch)
        names = [name for name, _ in wrapped_batch]

        for name in staged:
            if name in self._app:
                logger.debug("Bundle %r replaces an existing namespace entry", name)
            if isinstance(name, str) and hasattr(Namespace, name):
                logger.warning(
                    "Bundle %r shadows a Namespace attribute; use app[%r] to reach it",
                    name,
                    name,
                )

        self._details = details
        self._app.update(staged)

        logger.debug("Composed %d bundle(s): %s", len(names), names)
        return self._app

    def _wrap_bundle(self, bundle: Any) -> tuple[Any, WrappedBundle]:
        name = get_name(bundle)
        wrapped = wrap_bundle(
            bundle,
            functools.partial(self._wrap_function, name),
            keep_data_fields=self.settings.keep_data_fields,
        )
        return name, wrapped

    def reset(self) -> None:
        """Drop every bundle and restore empty details."""
        self._app.clear()
        self._details = {}
        logger.debug("Composer reset")

    def context(self) -> Context:
        """Build the context handed to continuations right now."""
        return Context(app=self._app, details=self._details)

    def _wrap_function(
        self, bundle_name: Any, field: str, fn: TwoStageFunction
    ) -> Callable[..., Any]:
        fn_name = _get_function_name(fn)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug(
                "Calling %s.%s with function %s", bundle_name, field, fn_name
            )
            inject_fn = fn(*args, **kwargs)
            if not callable(inject_fn):
                logger.error(
                    "%s.%s returned %s instead of a function",
                    bundle_name,
                    field,
                    type(inject_fn).__name__,
                )
                raise NonFunctionContinuationError(bundle_name, field, inject_fn)
            return inject_fn(self.context())

        return wrapper

    def __repr__(self) -> str:
        return f"{type(self).__name__}(app={self._app!r}, settings={self.settings!r})"


def _get_function_name(fn: Callable[..., Any]) -> str:
    if hasattr(fn, "__name__"):
        return fn.__name__
    if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
        return fn.func.__name__
    return repr(fn)


_default_composer: Composer | None = None


def get_default_composer() -> Composer:
    """Return the process-wide composer, creating it on first use."""
    global _default_composer  # pylint: disable=global-statement
    if _default_composer is None:
        _default_composer = Composer()
    return _default_composer


def compose(bundles: Iterable[Any], details: Any = None) -> Namespace:
    """Compose bundles into the process-wide namespace.

    See `Composer.compose`.
    """
    return get_default_composer().compose(bundles, details)


def reset() -> None:
    """Clear the process-wide namespace and details."""
    get_default_composer().reset()
