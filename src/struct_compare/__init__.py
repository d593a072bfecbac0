"""struct-compare - deep structural equality for arbitrary Python object graphs."""

from __future__ import annotations

from struct_compare.algorithm.config import (
    CompareConfig,
    CyclePolicy,
    SequenceVerdict,
    TypeMismatchPolicy,
)
from struct_compare.api import assert_equal, compare, explain
from struct_compare.comparator import StructComparator
from struct_compare.errors import (
    CycleDetectedError,
    IncomparableTypesError,
    MaxDepthExceededError,
    StructCompareError,
)
from struct_compare.introspection import DescriptorRegistry, Member, ValueKind
from struct_compare.result import ComparisonResult, Diagnostic, DiagnosticReason

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareConfig",
    "ComparisonResult",
    "CycleDetectedError",
    "CyclePolicy",
    "DescriptorRegistry",
    "Diagnostic",
    "DiagnosticReason",
    "IncomparableTypesError",
    "MaxDepthExceededError",
    "Member",
    "SequenceVerdict",
    "StructCompareError",
    "StructComparator",
    "TypeMismatchPolicy",
    "ValueKind",
    "assert_equal",
    "compare",
    "explain",
]
