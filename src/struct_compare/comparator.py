"""StructComparator: orchestrator that wires DescriptorRegistry + StructuralAlgorithm.

This is the wiring layer between the raw algorithm and the public API.  It
owns a configuration and a registry, runs the algorithm with fresh
traversal state per call and turns the outcome into a ``ComparisonResult``
with diagnostics and timing data.

Architecture:
- ``compare()`` returns the bare verdict.
- ``explain()`` starts a wall-clock timer, runs the same traversal and
  returns the verdict together with the diagnostics it emitted.
- The registry's resolution cache is a performance detail: it never affects
  a verdict, and member enumeration is not cached.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from struct_compare.algorithm.config import CompareConfig
from struct_compare.algorithm.structural import StructuralAlgorithm
from struct_compare.introspection.registry import DescriptorRegistry
from struct_compare.result import ComparisonResult

__all__ = ["StructComparator"]

logger = logging.getLogger(__name__)


class StructComparator:
    """Orchestrator for structural comparison of object graphs.

    Example::

        from struct_compare.comparator import StructComparator
        from struct_compare.algorithm.config import CompareConfig

        cmp = StructComparator(CompareConfig(exclude=("updated_at",)))
        cmp.compare(order_a, order_b)               # True / False
        cmp.explain(order_a, order_b).diagnostics   # (Diagnostic(...), ...)

    Two instances never share registry state unless the same registry is
    passed to both.
    """

    def __init__(
        self,
        config: CompareConfig | None = None,
        registry: DescriptorRegistry | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:   Filters and policies.  Defaults to ``CompareConfig()``.
            registry: Type descriptors.  Defaults to a fresh
                ``DescriptorRegistry()`` with built-in rules only.
        """
        self._config: CompareConfig = config if config is not None else CompareConfig()
        self._registry: DescriptorRegistry = (
            registry if registry is not None else DescriptorRegistry()
        )
        self._algorithm = StructuralAlgorithm(registry=self._registry, config=self._config)

    @property
    def config(self) -> CompareConfig:
        return self._config

    @property
    def registry(self) -> DescriptorRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> bool:
        """Return True if ``left`` and ``right`` are structurally equal.

        Raises:
            IncomparableTypesError: Under ``TypeMismatchPolicy.RAISE`` when
                counterpart values cannot be compared.
            CycleDetectedError: Under ``CyclePolicy.RAISE`` on a cyclic graph.
            MaxDepthExceededError: When ``max_depth`` is exceeded.
        """
        equal, _ = self._algorithm.run(left, right)
        return equal

    def explain(self, left: Any, right: Any) -> ComparisonResult:
        """Compare two values and return the verdict with its diagnostics.

        The verdict is always identical to ``compare(left, right)``.
        """
        t0 = time.perf_counter()
        equal, diagnostics = self._algorithm.run(left, right)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "compared %s with %s: equal=%s, %d diagnostics in %.3f ms",
            type(left).__qualname__,
            type(right).__qualname__,
            equal,
            len(diagnostics),
            elapsed_ms,
        )
        return ComparisonResult(
            equal=equal,
            diagnostics=tuple(diagnostics),
            computation_time_ms=elapsed_ms,
        )
