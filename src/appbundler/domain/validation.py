"""Validators run on a whole batch before the composer touches any state."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from appbundler.errors import (
    InvalidBundleShapeError,
    InvalidDetailsError,
    MissingNameError,
)

from .bundle import has_name, is_object


def validate_details(details: Any) -> None:
    """Raise `InvalidDetailsError` unless `details` is an object."""
    if not is_object(details):
        raise InvalidDetailsError(details)


def validate_bundles(bundles: Iterable[Any]) -> list[Any]:
    """Check a batch of bundles and return it as a list.

    Every element is checked for being an object before any element is checked
    for a name, so a batch with both problems reports the shape error.

    Raises:
        InvalidBundleShapeError: If the batch is not a sequence of objects.
        MissingNameError: If any element lacks a `name` field.
    """
    if isinstance(bundles, (str, bytes, bytearray, Mapping)) or not isinstance(
        bundles, Iterable
    ):
        raise InvalidBundleShapeError(-1, bundles)
    batch = list(bundles)

    for index, bundle in enumerate(batch):
        if not is_object(bundle):
            raise InvalidBundleShapeError(index, bundle)

    for index, bundle in enumerate(batch):
        if not has_name(bundle):
            raise MissingNameError(index, bundle)

    return batch
