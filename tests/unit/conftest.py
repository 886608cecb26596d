"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

UNIT_ROOT = Path(__file__).parent.resolve()


def _has_marker(item: pytest.Item, name: str) -> bool:
    return any(marker.name == name for marker in item.iter_markers())


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark items in `tests/unit/` as `unit`, and hypothesis tests as `property`."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        if not _has_marker(item, "unit"):
            item.add_marker(pytest.mark.unit)
        is_hypothesis = getattr(getattr(item, "obj", None), "is_hypothesis_test", False)
        if is_hypothesis and not _has_marker(item, "property"):
            item.add_marker(pytest.mark.property)
