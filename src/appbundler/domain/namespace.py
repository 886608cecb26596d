"""The application namespace that accumulates wrapped bundles."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping

from .bundle import WrappedBundle


class Namespace(MutableMapping[str, WrappedBundle]):
    """Mapping of bundle name to wrapped bundle.

    Entries are reachable as items (``app["users"]``) and, when the bundle
    name is a valid identifier that does not collide with a mapping method,
    as attributes (``app.users``).

    Note:
        The composer hands this exact instance to every continuation, so
        code running inside a continuation sees the entries present at call
        time.
    """

    def __init__(self) -> None:
        self._bundles: dict[str, WrappedBundle] = {}

    def __getitem__(self, name: str) -> WrappedBundle:
        return self._bundles[name]

    def __setitem__(self, name: str, bundle: WrappedBundle) -> None:
        self._bundles[name] = bundle

    def __delitem__(self, name: str) -> None:
        del self._bundles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bundles)

    def __len__(self) -> int:
        return len(self._bundles)

    def __getattr__(self, name: str) -> WrappedBundle:
        if name == "_bundles":
            raise AttributeError(name)
        try:
            return self._bundles[name]
        except KeyError:
            raise AttributeError(f"No bundle named {name!r} in namespace") from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._bundles))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._bundles)!r})"
