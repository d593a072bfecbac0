"""pytest plugin for struct-compare.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from struct_compare import CompareConfig, DescriptorRegistry, assert_equal


@pytest.fixture(scope="session")
def assert_structurally_equal() -> Any:
    """Fixture that returns a callable structural equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to assert_equal() which creates a fresh StructComparator per call).

    Usage in tests::

        def test_roundtrip(assert_structurally_equal):
            assert_structurally_equal(load(dump(order)), order)

        def test_ignores_timestamps(assert_structurally_equal):
            assert_structurally_equal(a, b, exclude=["updated_at"])

    Returns:
        A callable ``_assert(actual, expected, include_only=(), exclude=(),
        config=None, registry=None) -> None`` that raises ``AssertionError``
        when the values are not structurally equal.
    """

    def _assert(
        actual: Any,
        expected: Any,
        include_only: Iterable[str] = (),
        exclude: Iterable[str] = (),
        config: CompareConfig | None = None,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        __tracebackhide__ = True
        assert_equal(
            actual,
            expected,
            include_only,
            exclude,
            config=config,
            registry=registry,
        )

    return _assert
