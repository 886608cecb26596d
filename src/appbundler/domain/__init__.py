"""Domain layer for APPBUNDLER.

Contains the value types the composer works with: bundles and their field
classification, the wrapped bundle, the application namespace, the injected
context, and the batch validators. Nothing here holds process-wide state.

Dependency rule: do not import from `appbundler.composer`.
"""
