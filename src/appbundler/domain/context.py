"""The context handed to every continuation, and the calling-convention types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from .namespace import Namespace


@dataclass(frozen=True)
class Context:
    """Value object injected into the second stage of a bundle function.

    Attributes:
        app: The live application namespace. Not a snapshot; bundles composed
            after the call started are visible.
        details: The details supplied to the most recent successful compose.
    """

    app: Namespace
    details: Any


Continuation: TypeAlias = Callable[[Context], Any]
"""Second stage of a bundle function: receives the injected context."""

TwoStageFunction: TypeAlias = Callable[..., Continuation]
"""First stage of a bundle function: takes the caller's arguments."""
