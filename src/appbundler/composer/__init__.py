"""Composition root for APPBUNDLER.

Merges business-object bundles into one namespace and injects the shared
context into every bundle function. `Composer` owns its namespace and details;
the module-level `compose` and `reset` act on a process-wide default composer.

Import rules:
- This package may import `appbundler.domain`, `appbundler.config` and
  `appbundler.errors`.
- `appbundler.domain` must not import this package.
"""

from .composer import Composer, compose, get_default_composer, reset

__all__ = ["Composer", "compose", "get_default_composer", "reset"]
