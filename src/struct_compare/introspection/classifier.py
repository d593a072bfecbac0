"""Built-in classification of runtime types into TypeDescriptors.

Dispatch order matters:
- Callables, classes and modules are rejected first.
- Scalars are checked before sequences because ``str``, ``bytes`` and sets
  are iterable but must be compared as a whole.
- A user class overriding ``__lt__`` is an ordered scalar unless it is a
  collection (``list`` and ``numpy.ndarray`` define ``__lt__`` too).
- Mappings are sequences of their ``(key, value)`` items.
- Anything else carrying instance state or public properties is a
  composite; the rest is unsupported.
"""

from __future__ import annotations

import decimal
import numbers
import types
from collections.abc import Collection, Iterable, Mapping, Set
from datetime import date, time, timedelta
from enum import Enum
from functools import cached_property
from pathlib import PurePath
from typing import Any
from uuid import UUID

import numpy as np

from struct_compare.introspection.descriptors import (
    CompositeDescriptor,
    ScalarDescriptor,
    SequenceDescriptor,
    UnsupportedDescriptor,
    mapping_items,
    ndarray_elements,
)
from struct_compare.introspection.kinds import ValueKind
from struct_compare.introspection.members import slot_names
from struct_compare.protocols import TypeDescriptor

__all__ = ["classify", "classify_type", "supports_ordering"]

_UNSUPPORTED_TYPES: tuple[type, ...] = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
)

_SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    numbers.Number,
    decimal.Decimal,
    np.generic,
    str,
    bytes,
    bytearray,
    Enum,
    date,
    time,
    timedelta,
    UUID,
    PurePath,
    Set,
)

# numpy registers its real scalar types with numbers.Real
_ORDERED_TYPES: tuple[type, ...] = (
    numbers.Real,
    decimal.Decimal,
    str,
    bytes,
    bytearray,
    date,
    time,
    timedelta,
    UUID,
    PurePath,
)

_UNSUPPORTED = UnsupportedDescriptor()
_COMPOSITE = CompositeDescriptor()
_SEQUENCE = SequenceDescriptor()
_MAPPING = SequenceDescriptor(materialize=mapping_items)
_NDARRAY = SequenceDescriptor(materialize=ndarray_elements)


def _overrides_lt(cls: type) -> bool:
    return getattr(cls, "__lt__", object.__lt__) is not object.__lt__


def _carries_state(cls: type) -> bool:
    for klass in cls.__mro__:
        if klass is object:
            continue
        own = vars(klass)
        if "__dict__" in own or slot_names(klass):
            return True
        if any(isinstance(attr, (property, cached_property)) for attr in own.values()):
            return True
    return False


def supports_ordering(cls: type) -> bool:
    """Return True if instances of ``cls`` carry a total ordering."""
    if issubclass(cls, _ORDERED_TYPES):
        return True
    if issubclass(cls, _SCALAR_TYPES) or issubclass(cls, Collection):
        return False
    return _overrides_lt(cls)


def classify_type(cls: type) -> TypeDescriptor:
    """Return the built-in descriptor for ``cls``.

    Args:
        cls: Any runtime type.

    Returns:
        A shared, immutable descriptor.  The same type always yields an
        equivalent descriptor.
    """
    if issubclass(cls, _UNSUPPORTED_TYPES):
        return _UNSUPPORTED

    if issubclass(cls, _SCALAR_TYPES):
        return ScalarDescriptor(ordered=supports_ordering(cls))

    if _overrides_lt(cls) and not issubclass(cls, Collection):
        return ScalarDescriptor(ordered=True)

    if issubclass(cls, np.ndarray):
        return _NDARRAY

    if issubclass(cls, Mapping):
        return _MAPPING

    if issubclass(cls, Iterable):
        return _SEQUENCE

    if _carries_state(cls):
        return _COMPOSITE

    return _UNSUPPORTED


def classify(value: Any) -> ValueKind:
    """Return the ``ValueKind`` of ``value`` using built-in rules only."""
    return classify_type(type(value)).kind
