"""StructuralAlgorithm: recursive member-by-member equality.

Three mutually recursive routines:

- ``compare``: entry point for any pair.  ``None`` on either side is
  unequal, even when both sides are ``None``.  Non-composites are dispatched
  by kind; composites are compared member by member.
- ``compare_values``: scalars.  Two ``None`` values are equal here, unlike
  in ``compare``.  Ordered types must compare as zero under a three-way
  comparison and also be ``==`` (two NaNs count as equal); the rest use
  ``==`` alone.  Related types that refuse ordering fall back to ``==``.
- ``compare_sequences``: element-wise, left to right, stopping at the first
  unequal element.

Inside a composite, scalar and composite mismatches are merged into the
running result and the loop continues.  A sequence member's outcome
replaces the running result under ``SequenceVerdict.OVERWRITE`` (the
default) and is merged under ``SequenceVerdict.MERGE``.

All per-call state lives in a ``TraversalState``; the algorithm object
itself is never mutated by a comparison.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from struct_compare.algorithm.config import (
    CompareConfig,
    CyclePolicy,
    SequenceVerdict,
    TypeMismatchPolicy,
)
from struct_compare.errors import (
    CycleDetectedError,
    IncomparableTypesError,
    MaxDepthExceededError,
)
from struct_compare.introspection.kinds import ValueKind
from struct_compare.result import Diagnostic, DiagnosticReason

if TYPE_CHECKING:
    from struct_compare.introspection.registry import DescriptorRegistry
    from struct_compare.protocols import TypeDescriptor

__all__ = ["StructuralAlgorithm", "TraversalState", "compare_to"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalState:
    """Mutable state of one top-level comparison.

    Attributes:
        diagnostics: Reports in emission order.
        active: ``(id(left), id(right))`` pairs currently on the traversal path.
        depth: Number of composites and sequences currently on the path.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    active: set[tuple[int, int]] = field(default_factory=set)
    depth: int = 0


def compare_to(left: Any, right: Any) -> int:
    """Three-way comparison: negative, zero or positive.

    Values that are neither less nor greater compare as zero, so two NaNs
    are equal under an ordering.

    Raises:
        TypeError: If the values cannot be ordered against each other.
    """
    return int(left > right) - int(left < right)


def _is_nan(value: Any) -> bool:
    return bool(value != value)


def _related(left: Any, right: Any) -> bool:
    return isinstance(right, type(left)) or isinstance(left, type(right))


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


class StructuralAlgorithm:
    """Recursive structural comparison over registry-described types.

    Args:
        registry: Resolves runtime types to descriptors.
        config:   Filters and policies.
    """

    def __init__(self, registry: DescriptorRegistry, config: CompareConfig) -> None:
        self._registry = registry
        self._config = config

    def run(self, left: Any, right: Any) -> tuple[bool, list[Diagnostic]]:
        """Compare two values with fresh traversal state.

        Returns:
            A 2-tuple ``(equal, diagnostics)``.
        """
        state = TraversalState()
        equal = self.compare(left, right, state)
        return equal, state.diagnostics

    # ------------------------------------------------------------------
    # Composite comparison
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any, state: TraversalState, path: str = "") -> bool:
        if left is None or right is None:
            return False

        descriptor = self._registry.resolve(type(left))
        if not self._counterparts_match(left, right, descriptor, state, path):
            return False

        if descriptor.kind is ValueKind.SCALAR:
            return self.compare_values(left, right, state, path)
        if descriptor.kind is ValueKind.SEQUENCE:
            return self.compare_sequences(left, right, state, path)
        if descriptor.kind is ValueKind.UNSUPPORTED:
            return False

        with self._visit(left, right, state, path) as reentered:
            if reentered:
                return True
            return self._compare_members(left, right, descriptor, state, path)

    def _compare_members(
        self,
        left: Any,
        right: Any,
        descriptor: TypeDescriptor,
        state: TraversalState,
        path: str,
    ) -> bool:
        result = True
        for member in descriptor.members(left):
            if not self._config.participates(member.name):
                continue

            v1 = member.read(left)
            v2 = member.read(right)
            member_path = _join(path, member.name)
            kind = self._registry.resolve(type(v1)).kind

            if kind is ValueKind.SCALAR:
                if not self.compare_values(v1, v2, state, member_path):
                    self._report(state, member_path, DiagnosticReason.VALUE_MISMATCH)
                    result = False
            elif kind is ValueKind.SEQUENCE:
                self._report(state, member_path, DiagnosticReason.SEQUENCE)
                outcome = self.compare_sequences(v1, v2, state, member_path)
                if self._config.sequence_verdict is SequenceVerdict.OVERWRITE:
                    result = outcome
                else:
                    result = result and outcome
            elif kind is ValueKind.COMPOSITE:
                if not self.compare(v1, v2, state, member_path):
                    result = False
            else:
                self._report(state, member_path, DiagnosticReason.UNSUPPORTED)
                result = False
        return result

    # ------------------------------------------------------------------
    # Scalar comparison
    # ------------------------------------------------------------------

    def compare_values(
        self, left: Any, right: Any, state: TraversalState, path: str = ""
    ) -> bool:
        if (left is None) != (right is None):
            return False
        if left is None:
            return True

        if self._registry.resolve(type(right)).kind is not ValueKind.SCALAR:
            return self._incomparable(left, right, state, path)

        if self._registry.resolve(type(left)).ordered:
            try:
                if compare_to(left, right) != 0:
                    return False
            except TypeError:
                # same-family values can still refuse ordering (naive vs aware datetimes)
                if not _related(left, right):
                    return self._incomparable(left, right, state, path)
                return bool(left == right)
            return bool(left == right) or (_is_nan(left) and _is_nan(right))
        return bool(left == right)

    # ------------------------------------------------------------------
    # Sequence comparison
    # ------------------------------------------------------------------

    def compare_sequences(
        self, left: Any, right: Any, state: TraversalState, path: str = ""
    ) -> bool:
        if (left is None) != (right is None):
            return False
        if left is None:
            return True

        right_descriptor = self._registry.resolve(type(right))
        if right_descriptor.kind is not ValueKind.SEQUENCE:
            return self._incomparable(left, right, state, path)

        with self._visit(left, right, state, path) as reentered:
            if reentered:
                return True

            left_items = self._registry.resolve(type(left)).elements(left)
            right_items = right_descriptor.elements(right)
            if len(left_items) != len(right_items):
                return False

            for index, (e1, e2) in enumerate(zip(left_items, right_items, strict=True)):
                element_path = f"{path}[{index}]"
                if self._registry.resolve(type(e1)).kind is ValueKind.SCALAR:
                    if not self.compare_values(e1, e2, state, element_path):
                        return False
                elif not self.compare(e1, e2, state, element_path):
                    return False
            return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _counterparts_match(
        self,
        left: Any,
        right: Any,
        descriptor: TypeDescriptor,
        state: TraversalState,
        path: str,
    ) -> bool:
        if self._registry.resolve(type(right)).kind is not descriptor.kind:
            return self._incomparable(left, right, state, path)
        if descriptor.kind is ValueKind.COMPOSITE and not _related(left, right):
            return self._incomparable(left, right, state, path)
        return True

    @contextmanager
    def _visit(
        self, left: Any, right: Any, state: TraversalState, path: str
    ) -> Iterator[bool]:
        """Track a composite or sequence pair on the active path.

        Yields True when the pair is already active and the cycle policy
        assumes it equal.
        """
        key = (id(left), id(right))
        if key in state.active:
            if self._config.cycle_policy is CyclePolicy.RAISE:
                raise CycleDetectedError(
                    f"cycle through {type(left).__qualname__}", path
                )
            logger.debug("cycle at %s assumed equal", path or "<root>")
            yield True
            return

        max_depth = self._config.max_depth
        if max_depth is not None and state.depth >= max_depth:
            raise MaxDepthExceededError(f"nesting deeper than {max_depth}", path)

        state.active.add(key)
        state.depth += 1
        try:
            yield False
        finally:
            state.active.discard(key)
            state.depth -= 1

    def _incomparable(
        self, left: Any, right: Any, state: TraversalState, path: str
    ) -> bool:
        if self._config.type_mismatch is TypeMismatchPolicy.RAISE:
            raise IncomparableTypesError(type(left), type(right), path)
        self._report(state, path, DiagnosticReason.INCOMPARABLE)
        return False

    def _report(self, state: TraversalState, path: str, reason: DiagnosticReason) -> None:
        state.diagnostics.append(Diagnostic(member=path, reason=reason))
        level = logging.DEBUG if reason is DiagnosticReason.SEQUENCE else logging.INFO
        logger.log(level, "member %s: %s", path or "<root>", reason)
