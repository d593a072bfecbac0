"""Algorithm subpackage: comparison configuration and the recursive core.

Re-exports:
- CompareConfig and its policy enums
- StructuralAlgorithm: compare / compare_values / compare_sequences
"""

from struct_compare.algorithm.config import (
    CompareConfig,
    CyclePolicy,
    SequenceVerdict,
    TypeMismatchPolicy,
)
from struct_compare.algorithm.structural import (
    StructuralAlgorithm,
    TraversalState,
    compare_to,
)

__all__ = [
    "CompareConfig",
    "CyclePolicy",
    "SequenceVerdict",
    "StructuralAlgorithm",
    "TraversalState",
    "TypeMismatchPolicy",
    "compare_to",
]
