"""CompareConfig and its policy enums.

CompareConfig is a frozen (immutable) dataclass holding the member filters
and the policies that decide the behaviours left open by a plain reflective
comparison: how a sequence member's verdict combines with the running
result, what happens on a type mismatch, and how cycles are handled.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum, auto

__all__ = ["CompareConfig", "CyclePolicy", "SequenceVerdict", "TypeMismatchPolicy"]


class SequenceVerdict(StrEnum):
    """How a sequence member's outcome combines with the composite's result.

    - OVERWRITE: The sequence outcome replaces the running result, so a later
                 matching sequence hides an earlier scalar mismatch.
    - MERGE:     The sequence outcome is and-ed into the running result,
                 like every other member kind.
    """

    OVERWRITE = auto()
    MERGE = auto()


class TypeMismatchPolicy(StrEnum):
    """What to do when counterpart values cannot be compared.

    - RAISE:   Raise ``IncomparableTypesError``.
    - UNEQUAL: Report a diagnostic and treat the pair as unequal.
    """

    RAISE = auto()
    UNEQUAL = auto()


class CyclePolicy(StrEnum):
    """What to do when the traversal re-enters a pair already being compared.

    - RAISE:        Raise ``CycleDetectedError``.
    - ASSUME_EQUAL: Assume the pair equal; the rest of the graph decides.
    """

    RAISE = auto()
    ASSUME_EQUAL = auto()


def _name_set(value: Iterable[str], field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        msg = f"{field_name} must be an iterable of member names, not a str: {value!r}"
        raise TypeError(msg)
    names = tuple(dict.fromkeys(value))
    for name in names:
        if not isinstance(name, str):
            msg = f"{field_name} entries must be str, got {type(name).__name__}"
            raise TypeError(msg)
    return names


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for a structural comparison.

    Attributes:
        include_only: When non-empty, only these member names participate.
        exclude: Member names that never participate.  Wins over
            ``include_only`` when a name appears in both.
        sequence_verdict: How sequence members combine with the running
            result.  Default OVERWRITE.
        type_mismatch: Policy for incomparable counterpart values.  Default RAISE.
        cycle_policy: Policy for cyclic object graphs.  Default RAISE.
        max_depth: Maximum nesting depth of composites and sequences, or
            None for no limit beyond the interpreter's recursion limit.

    Both filters accept any iterable of names; they are stored as ordered,
    de-duplicated tuples and apply at every nesting level.
    """

    include_only: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    sequence_verdict: SequenceVerdict = SequenceVerdict.OVERWRITE
    type_mismatch: TypeMismatchPolicy = TypeMismatchPolicy.RAISE
    cycle_policy: CyclePolicy = CyclePolicy.RAISE
    max_depth: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "include_only", _name_set(self.include_only, "include_only"))
        object.__setattr__(self, "exclude", _name_set(self.exclude, "exclude"))
        object.__setattr__(self, "sequence_verdict", SequenceVerdict(self.sequence_verdict))
        object.__setattr__(self, "type_mismatch", TypeMismatchPolicy(self.type_mismatch))
        object.__setattr__(self, "cycle_policy", CyclePolicy(self.cycle_policy))
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)

    def participates(self, name: str) -> bool:
        """Return True if member ``name`` survives the filters."""
        if name in self.exclude:
            return False
        return not (self.include_only and name not in self.include_only)

    def with_filters(
        self,
        include_only: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> CompareConfig:
        """Return a copy whose filters are replaced by the non-empty arguments."""
        include_only = _name_set(include_only, "include_only")
        exclude = _name_set(exclude, "exclude")
        changes: dict[str, tuple[str, ...]] = {}
        if include_only:
            changes["include_only"] = include_only
        if exclude:
            changes["exclude"] = exclude
        return replace(self, **changes) if changes else self
