"""Explicit per-type lookup of JsonSerializer instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .errors import SerializerNotFoundError
from .serializer import JSON_SERIALIZER, JsonSerializer
from .values import Json

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SerializerRegistry:
    """Maps Python types to the serializer that handles them.

    Lookup walks the type's MRO, so a serializer registered for a base
    class also serves its subclasses unless they have their own.
    """

    serializers: dict[type, JsonSerializer[Any]] = field(default_factory=dict)

    def register(self, type_: type[T], serializer: JsonSerializer[T]) -> None:
        logger.debug("Registering %r for %s", serializer, type_.__qualname__)
        self.serializers[type_] = serializer

    def resolve(self, type_: type[T]) -> JsonSerializer[T] | None:
        for klass in type_.__mro__:
            serializer = self.serializers.get(klass)
            if serializer is not None:
                return serializer
        return None

    def require(self, type_: type[T]) -> JsonSerializer[T]:
        serializer = self.resolve(type_)
        if serializer is None:
            raise SerializerNotFoundError(type_.__qualname__)
        return serializer

    def __contains__(self, type_: object) -> bool:
        return isinstance(type_, type) and self.resolve(type_) is not None


default_registry = SerializerRegistry()
default_registry.register(Json, JSON_SERIALIZER)
