"""Tests for StructComparator, the orchestrator over StructuralAlgorithm.

Covers:
- Default config and registry
- compare() and explain() always agree on the verdict
- explain() diagnostics, failed members and timing
- Injected registries and configs are used
- Statelessness (two identical calls -> identical results)
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from struct_compare.algorithm.config import CompareConfig, SequenceVerdict
from struct_compare.comparator import StructComparator
from struct_compare.introspection.registry import DescriptorRegistry
from struct_compare.result import ComparisonResult, Diagnostic, DiagnosticReason

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@dataclass
class Invoice:
    number: str
    total: int
    lines: list[str]


class Timestamp:
    def __init__(self, seconds: int, source: str) -> None:
        self.seconds = seconds
        self.source = source


@dataclass
class Event:
    name: str
    at: Timestamp


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_default_config(self) -> None:
        assert StructComparator().config == CompareConfig()

    def test_default_registry_is_fresh(self) -> None:
        assert StructComparator().registry is not StructComparator().registry

    def test_injected_registry_is_kept(self) -> None:
        registry = DescriptorRegistry()
        assert StructComparator(registry=registry).registry is registry


# ---------------------------------------------------------------------------
# compare / explain
# ---------------------------------------------------------------------------


class TestCompareAndExplain:
    def test_equal_invoices(self) -> None:
        cmp = StructComparator()
        assert cmp.compare(Invoice("1", 10, ["a"]), Invoice("1", 10, ["a"]))

    def test_explain_returns_result(self) -> None:
        result = StructComparator().explain(Invoice("1", 10, ["a"]), Invoice("1", 10, ["a"]))
        assert isinstance(result, ComparisonResult)
        assert result.equal is True
        assert result.computation_time_ms >= 0.0

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (Invoice("1", 10, ["a"]), Invoice("1", 10, ["a"])),
            (Invoice("1", 10, ["a"]), Invoice("2", 10, ["a"])),
            (Invoice("1", 10, ["a"]), Invoice("1", 10, ["b"])),
            (None, None),
        ],
    )
    def test_explain_agrees_with_compare(self, left: object, right: object) -> None:
        cmp = StructComparator()
        assert cmp.explain(left, right).equal is cmp.compare(left, right)

    def test_diagnostics_in_emission_order(self) -> None:
        config = CompareConfig(sequence_verdict=SequenceVerdict.MERGE)
        result = StructComparator(config).explain(
            Invoice("1", 10, ["a"]), Invoice("2", 11, ["b"])
        )
        assert result.diagnostics == (
            Diagnostic("number", DiagnosticReason.VALUE_MISMATCH),
            Diagnostic("total", DiagnosticReason.VALUE_MISMATCH),
            Diagnostic("lines", DiagnosticReason.SEQUENCE),
        )
        assert result.failed_members == ("number", "total")
        assert result.last_failed_member == "total"

    def test_nested_failed_member_path(self) -> None:
        result = StructComparator().explain(
            Event("boot", Timestamp(1, "ntp")), Event("boot", Timestamp(2, "ntp"))
        )
        assert not result.equal
        assert result.last_failed_member == "at.seconds"

    def test_no_state_between_calls(self) -> None:
        cmp = StructComparator()
        first = cmp.explain(Invoice("1", 10, []), Invoice("2", 10, []))
        second = cmp.explain(Invoice("1", 10, []), Invoice("2", 10, []))
        assert first.equal == second.equal
        assert first.diagnostics == second.diagnostics


# ---------------------------------------------------------------------------
# Registry integration
# ---------------------------------------------------------------------------


class TestRegistryIntegration:
    def test_registered_member_names_limit_comparison(self) -> None:
        registry = DescriptorRegistry()
        registry.register_composite(Timestamp, ["seconds"])
        cmp = StructComparator(registry=registry)
        assert cmp.compare(Event("boot", Timestamp(1, "ntp")), Event("boot", Timestamp(1, "rtc")))

    def test_registered_scalar_uses_equality(self) -> None:
        registry = DescriptorRegistry()
        registry.register_scalar(Timestamp)
        cmp = StructComparator(registry=registry)
        # Timestamp has no __eq__, so equality falls back to identity.
        shared = Timestamp(1, "ntp")
        assert cmp.compare(Event("boot", shared), Event("boot", shared))
        assert not cmp.compare(Event("boot", Timestamp(1, "ntp")), Event("boot", Timestamp(1, "ntp")))

    def test_registry_reused_across_calls(self) -> None:
        registry = DescriptorRegistry()
        cmp = StructComparator(registry=registry)
        cmp.compare(Invoice("1", 1, ["a"]), Invoice("1", 1, ["a"]))
        size = registry.curr_size
        cmp.compare(Invoice("1", 1, ["a"]), Invoice("1", 1, ["a"]))
        assert registry.curr_size == size > 0
