"""Global pytest fixtures for APPBUNDLER."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from appbundler.composer import Composer, reset
from appbundler.config import KEEP_DATA_FIELDS_ENVVAR, Settings

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings env vars and the process-wide composer out of every test."""
    monkeypatch.delenv(KEEP_DATA_FIELDS_ENVVAR, raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def composer() -> Composer:
    """A fresh composer with default settings."""
    return Composer(Settings())


@pytest.fixture
def clean1() -> dict[str, Any]:
    """A bundle whose only function returns 'beep'."""

    def foo():
        return lambda ctx: "beep"

    return {"name": "clean1", "foo": foo}


@pytest.fixture
def clean2() -> dict[str, Any]:
    """A bundle with one well-behaved function and one that returns None."""

    def bar():
        return lambda ctx: "bar"

    def baz():
        return None

    return {"name": "clean2", "bar": bar, "baz": baz}
