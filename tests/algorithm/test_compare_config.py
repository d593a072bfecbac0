"""Tests for CompareConfig frozen dataclass and its policy StrEnums.

Covers:
- Default values (no filters, OVERWRITE, RAISE, RAISE, no depth limit)
- Immutability (FrozenInstanceError on assignment)
- Filter normalization: any iterable -> ordered, de-duplicated tuple
- Validation: bare str filters, non-str names, max_depth < 1, unknown policies
- participates(): exclusion wins over inclusion
- with_filters(): only non-empty arguments replace filters
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from struct_compare.algorithm.config import (
    CompareConfig,
    CyclePolicy,
    SequenceVerdict,
    TypeMismatchPolicy,
)

# ---------------------------------------------------------------------------
# Policy enums
# ---------------------------------------------------------------------------


class TestPolicyEnums:
    def test_sequence_verdict_values(self) -> None:
        assert {m.value for m in SequenceVerdict} == {"overwrite", "merge"}

    def test_type_mismatch_values(self) -> None:
        assert {m.value for m in TypeMismatchPolicy} == {"raise", "unequal"}

    def test_cycle_policy_values(self) -> None:
        assert {m.value for m in CyclePolicy} == {"raise", "assume_equal"}

    def test_is_str_subclass(self) -> None:
        assert isinstance(SequenceVerdict.MERGE, str)


# ---------------------------------------------------------------------------
# Defaults and immutability
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_defaults(self) -> None:
        config = CompareConfig()
        assert config.include_only == ()
        assert config.exclude == ()
        assert config.sequence_verdict is SequenceVerdict.OVERWRITE
        assert config.type_mismatch is TypeMismatchPolicy.RAISE
        assert config.cycle_policy is CyclePolicy.RAISE
        assert config.max_depth is None

    def test_frozen(self) -> None:
        config = CompareConfig()
        with pytest.raises(FrozenInstanceError):
            config.max_depth = 3  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert CompareConfig(exclude=["a"]) == CompareConfig(exclude=("a",))


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestFilters:
    def test_list_becomes_tuple(self) -> None:
        assert CompareConfig(include_only=["a", "b"]).include_only == ("a", "b")  # type: ignore[arg-type]

    def test_duplicates_removed_order_kept(self) -> None:
        assert CompareConfig(exclude=("b", "a", "b")).exclude == ("b", "a")

    def test_generator_accepted(self) -> None:
        config = CompareConfig(exclude=(n for n in ["x", "y"]))  # type: ignore[arg-type]
        assert config.exclude == ("x", "y")

    def test_bare_str_rejected(self) -> None:
        with pytest.raises(TypeError, match="not a str"):
            CompareConfig(include_only="name")  # type: ignore[arg-type]

    def test_non_str_name_rejected(self) -> None:
        with pytest.raises(TypeError, match="entries must be str"):
            CompareConfig(exclude=(1,))  # type: ignore[arg-type]


class TestParticipates:
    def test_no_filters_everything_participates(self) -> None:
        assert CompareConfig().participates("anything")

    def test_include_only_restricts(self) -> None:
        config = CompareConfig(include_only=("name",))
        assert config.participates("name")
        assert not config.participates("tags")

    def test_exclude_skips(self) -> None:
        config = CompareConfig(exclude=("tags",))
        assert config.participates("name")
        assert not config.participates("tags")

    def test_exclude_wins_over_include(self) -> None:
        config = CompareConfig(include_only=("name",), exclude=("name",))
        assert not config.participates("name")


class TestWithFilters:
    def test_empty_arguments_return_same_config(self) -> None:
        config = CompareConfig(exclude=("a",))
        assert config.with_filters() is config

    def test_non_empty_arguments_replace(self) -> None:
        config = CompareConfig(include_only=("a",), exclude=("b",))
        updated = config.with_filters(include_only=["c"])
        assert updated.include_only == ("c",)
        assert updated.exclude == ("b",)

    def test_policies_preserved(self) -> None:
        config = CompareConfig(sequence_verdict=SequenceVerdict.MERGE)
        assert config.with_filters(exclude=["x"]).sequence_verdict is SequenceVerdict.MERGE


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_max_depth_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            CompareConfig(max_depth=0)

    def test_max_depth_one_accepted(self) -> None:
        assert CompareConfig(max_depth=1).max_depth == 1

    def test_policy_strings_coerced(self) -> None:
        config = CompareConfig(
            sequence_verdict="merge",  # type: ignore[arg-type]
            type_mismatch="unequal",  # type: ignore[arg-type]
            cycle_policy="assume_equal",  # type: ignore[arg-type]
        )
        assert config.sequence_verdict is SequenceVerdict.MERGE
        assert config.type_mismatch is TypeMismatchPolicy.UNEQUAL
        assert config.cycle_policy is CyclePolicy.ASSUME_EQUAL

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            CompareConfig(sequence_verdict="sometimes")  # type: ignore[arg-type]
