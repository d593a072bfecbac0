"""ComparisonResult and Diagnostic dataclasses for comparison output.

The verdict is the only contract; diagnostics are an advisory side channel
naming the members that were found unequal (or routed through sequence
comparison), in the order the traversal visited them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["ComparisonResult", "Diagnostic", "DiagnosticReason"]


class DiagnosticReason(StrEnum):
    """Why a member was reported.

    - VALUE_MISMATCH: A scalar member compared unequal.
    - SEQUENCE:       A member was handed to sequence comparison (any outcome).
    - UNSUPPORTED:    A member's value can never compare equal.
    - INCOMPARABLE:   Counterpart values had incomparable types.
    """

    VALUE_MISMATCH = auto()
    SEQUENCE = auto()
    UNSUPPORTED = auto()
    INCOMPARABLE = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One advisory report emitted during a comparison.

    Attributes:
        member: Dotted member path, with ``[i]`` for sequence elements
            (e.g. ``"orders[2].total"``).  Empty for the root values.
        reason: Why the member was reported.
    """

    member: str
    reason: DiagnosticReason

    def __str__(self) -> str:
        return f"{self.member or '<root>'}: {self.reason}"


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of an ``explain()`` call.

    Attributes:
        equal: The boolean verdict, identical to what ``compare()`` returns.
        diagnostics: Reports in emission order.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    equal: bool
    diagnostics: tuple[Diagnostic, ...]
    computation_time_ms: float

    def __bool__(self) -> bool:
        return self.equal

    @property
    def failed_members(self) -> tuple[str, ...]:
        """Paths of members reported for anything but sequence routing."""
        return tuple(
            d.member for d in self.diagnostics if d.reason is not DiagnosticReason.SEQUENCE
        )

    @property
    def last_failed_member(self) -> str | None:
        """The last member reported as failing, or None."""
        failed = self.failed_members
        return failed[-1] if failed else None
