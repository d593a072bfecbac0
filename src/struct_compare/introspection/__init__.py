"""Introspection subpackage: classifying values and enumerating their members.

Re-exports the public API for the introspection module:
- ValueKind: StrEnum of the four comparison kinds
- Member: a named, readable attribute with a getter
- public_members: reflective member discovery
- classify / classify_type: built-in classification rules
- DescriptorRegistry: registered descriptors with an LRU resolution cache
"""

from struct_compare.introspection.classifier import (
    classify,
    classify_type,
    supports_ordering,
)
from struct_compare.introspection.descriptors import (
    CompositeDescriptor,
    ScalarDescriptor,
    SequenceDescriptor,
    UnsupportedDescriptor,
)
from struct_compare.introspection.kinds import ValueKind
from struct_compare.introspection.members import Member, named_members, public_members
from struct_compare.introspection.registry import DescriptorRegistry

__all__ = [
    "CompositeDescriptor",
    "DescriptorRegistry",
    "Member",
    "ScalarDescriptor",
    "SequenceDescriptor",
    "UnsupportedDescriptor",
    "ValueKind",
    "classify",
    "classify_type",
    "named_members",
    "public_members",
    "supports_ordering",
]
