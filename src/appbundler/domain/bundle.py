"""Bundle field access and the wrapped bundle type.

A bundle is either a `Mapping` (fields are its keys) or any other
non-primitive object (fields are its public attributes). Both shapes are read
through the helpers below so the composer never cares which one it got.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from enum import Enum
from typing import Any

NAME_FIELD = "name"

PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
)


class FieldKind(Enum):
    """How a bundle field is treated when the bundle is wrapped."""

    NAME = "name"
    FUNCTION = "function"
    DATA = "data"


def is_object(value: Any) -> bool:
    """Return True if `value` is an object rather than a primitive."""
    return not isinstance(value, PRIMITIVE_TYPES)


def has_name(bundle: Any) -> bool:
    """Return True if the bundle carries a `name` field."""
    if isinstance(bundle, Mapping):
        return NAME_FIELD in bundle
    return hasattr(bundle, NAME_FIELD)


def field_names(bundle: Any) -> list[str]:
    """List the field names of a bundle, in definition order for mappings."""
    if isinstance(bundle, Mapping):
        return list(bundle.keys())
    return [name for name in dir(bundle) if not name.startswith("_")]


def get_field(bundle: Any, key: str) -> Any:
    """Read a single field from a bundle."""
    if isinstance(bundle, Mapping):
        return bundle[key]
    return getattr(bundle, key)


def get_name(bundle: Any) -> Any:
    """Read the `name` field from a bundle."""
    return get_field(bundle, NAME_FIELD)


def classify_field(key: str, value: Any) -> FieldKind:
    """Classify a field as the bundle name, a function to wrap, or plain data."""
    if key == NAME_FIELD:
        return FieldKind.NAME
    if callable(value):
        return FieldKind.FUNCTION
    return FieldKind.DATA


class WrappedBundle:
    """Read-only copy of a bundle whose functions have been wrapped.

    Fields are reachable both as attributes (``app.users.create()``) and as
    items (``app["users"]["create"]()``). The class defines no public methods
    so that no bundle field can be shadowed.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_fields", dict(fields))

    def __getattr__(self, key: str) -> Any:
        # slot not yet populated (copy/pickle protocols)
        if key == "_fields":
            raise AttributeError(key)
        try:
            return self._fields[key]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} {self._fields.get(NAME_FIELD)!r} "
                f"has no field {key!r}"
            ) from None

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __dir__(self) -> list[str]:
        return list(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WrappedBundle):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._fields,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"


def wrap_bundle(
    bundle: Any,
    wrap: Callable[[str, Callable[..., Any]], Callable[..., Any]],
    keep_data_fields: bool = False,
) -> WrappedBundle:
    """Build a `WrappedBundle` from a source bundle.

    Args:
        bundle: The source bundle; it is only read.
        wrap: Called with the field name and the function for every function
            field; its return value replaces the function.
        keep_data_fields: When True, fields that are neither the name nor a
            function are copied as-is instead of being dropped.

    Returns:
        The wrapped copy.
    """
    fields: dict[str, Any] = {}
    for key in field_names(bundle):
        value = get_field(bundle, key)
        kind = classify_field(key, value)
        if kind is FieldKind.NAME:
            fields[key] = value
        elif kind is FieldKind.FUNCTION:
            fields[key] = wrap(key, value)
        elif keep_data_fields:
            fields[key] = value
    return WrappedBundle(fields)
