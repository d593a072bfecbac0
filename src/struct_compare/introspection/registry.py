"""DescriptorRegistry: registered TypeDescriptors plus an LRU resolution cache.

Resolution walks the type's MRO and returns the descriptor registered for
the nearest class; when nothing is registered, the built-in classifier
decides.  The resolved descriptor is cached per type in a ``LRUCache``
(eviction is silent).  Only the *type to descriptor* resolution is cached:
member enumeration and element materialization still run on every call.

Each registry owns its own cache and lock; two registries never share state.

Example::

    from struct_compare.introspection.registry import DescriptorRegistry

    registry = DescriptorRegistry()
    registry.register_scalar(Money, ordered=True)
    registry.register_composite(Order, ["id", "lines"])
    registry.resolve(Order).kind   # ValueKind.COMPOSITE
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from cachetools import LRUCache

from struct_compare.introspection.classifier import classify_type
from struct_compare.introspection.descriptors import (
    CompositeDescriptor,
    ScalarDescriptor,
    SequenceDescriptor,
    UnsupportedDescriptor,
)
from struct_compare.introspection.members import named_members
from struct_compare.protocols import TypeDescriptor

__all__ = ["DescriptorRegistry"]

logger = logging.getLogger(__name__)


class DescriptorRegistry:
    """Maps runtime types to the descriptors used to compare their instances.

    Args:
        max_cache_size: Maximum number of resolved types held in the
            per-instance LRU cache.  Defaults to 256.
    """

    def __init__(self, max_cache_size: int = 256) -> None:
        if max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {max_cache_size}"
            raise ValueError(msg)
        self._registered: dict[type, TypeDescriptor] = {}
        self._cache: LRUCache[type, TypeDescriptor] = LRUCache(maxsize=max_cache_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of resolved types this registry caches."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of resolved types in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, cls: type, descriptor: TypeDescriptor) -> None:
        """Register ``descriptor`` for ``cls`` and its subclasses.

        Raises:
            TypeError: If ``cls`` is not a type or ``descriptor`` does not
                satisfy the ``TypeDescriptor`` Protocol.
        """
        if not isinstance(cls, type):
            raise TypeError(f"cls must be a type, got {cls!r}")
        if not isinstance(descriptor, TypeDescriptor):
            raise TypeError(
                f"descriptor for {cls.__qualname__} does not satisfy TypeDescriptor: "
                f"{descriptor!r}"
            )
        with self._lock:
            self._registered[cls] = descriptor
            # Subclasses may have resolved through the old entry.
            self._cache.clear()
        logger.debug("registered %s descriptor for %s", descriptor.kind, cls.__qualname__)

    def register_scalar(self, cls: type, ordered: bool = False) -> None:
        self.register(cls, ScalarDescriptor(ordered=ordered))

    def register_sequence(
        self, cls: type, materialize: Callable[[Any], Any] = list
    ) -> None:
        self.register(cls, SequenceDescriptor(materialize=materialize))

    def register_composite(self, cls: type, names: Iterable[str] | None = None) -> None:
        """Register ``cls`` as a composite.

        Args:
            cls:   The class to register.
            names: Explicit member names, compared in the given order.  When
                   None, members are discovered reflectively.
        """
        if names is None:
            self.register(cls, CompositeDescriptor())
        else:
            self.register(cls, CompositeDescriptor(member_source=named_members(names)))

    def register_unsupported(self, cls: type) -> None:
        self.register(cls, UnsupportedDescriptor())

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, cls: type) -> TypeDescriptor:
        """Return the descriptor for ``cls``.

        The nearest registered class in ``cls.__mro__`` wins; otherwise the
        built-in classifier decides.
        """
        with self._lock:
            descriptor = self._cache.get(cls)
            if descriptor is not None:
                return descriptor
            descriptor = self._lookup(cls)
            self._cache[cls] = descriptor
            return descriptor

    def _lookup(self, cls: type) -> TypeDescriptor:
        for klass in cls.__mro__:
            registered = self._registered.get(klass)
            if registered is not None:
                return registered
        return classify_type(cls)
