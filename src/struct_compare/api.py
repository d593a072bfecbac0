"""Public API functions for struct-compare.

This module provides the three user-facing functions: compare, explain and
assert_equal.  Each call creates a fresh StructComparator to guarantee zero
global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from struct_compare.algorithm.config import CompareConfig
from struct_compare.comparator import StructComparator
from struct_compare.introspection.registry import DescriptorRegistry
from struct_compare.result import ComparisonResult

__all__ = ["assert_equal", "compare", "explain"]


def _comparator(
    include_only: Iterable[str],
    exclude: Iterable[str],
    config: CompareConfig | None,
    registry: DescriptorRegistry | None,
) -> StructComparator:
    base = config if config is not None else CompareConfig()
    return StructComparator(
        config=base.with_filters(include_only, exclude), registry=registry
    )


def compare(
    left: Any,
    right: Any,
    include_only: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    config: CompareConfig | None = None,
    registry: DescriptorRegistry | None = None,
) -> bool:
    """Return True if two values are structurally equal.

    Args:
        left:         First value.  ``None`` is never equal to anything.
        right:        Second value, of the same type as ``left``.
        include_only: When non-empty, only these member names are compared.
        exclude:      Member names never compared; wins over ``include_only``.
        config:       Policies (and default filters).  Non-empty
                      ``include_only`` / ``exclude`` arguments replace the
                      config's filters.
        registry:     Type descriptors.  Defaults to built-in rules.

    Returns:
        True iff every compared member is equal.
    """
    return _comparator(include_only, exclude, config, registry).compare(left, right)


def explain(
    left: Any,
    right: Any,
    include_only: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    config: CompareConfig | None = None,
    registry: DescriptorRegistry | None = None,
) -> ComparisonResult:
    """Compare two values and return the verdict with its diagnostics.

    Takes the same arguments as ``compare``.
    """
    return _comparator(include_only, exclude, config, registry).explain(left, right)


def assert_equal(
    actual: Any,
    expected: Any,
    include_only: Iterable[str] = (),
    exclude: Iterable[str] = (),
    *,
    config: CompareConfig | None = None,
    registry: DescriptorRegistry | None = None,
) -> None:
    """Assert that two values are structurally equal.

    Raises:
        AssertionError: When the values differ, with a message listing the
            reported members.
    """
    result = explain(
        actual, expected, include_only, exclude, config=config, registry=registry
    )
    if result.equal:
        return
    reported = "\n".join(f"  {d}" for d in result.diagnostics) or "  (none)"
    raise AssertionError(
        f"objects not structurally equal: "
        f"{type(actual).__qualname__} vs {type(expected).__qualname__}\n"
        f"  last_failed_member: {result.last_failed_member}\n"
        f"diagnostics:\n{reported}"
    )
