"""Exceptions and error values for json_core."""

from __future__ import annotations

from dataclasses import dataclass


class JsonCoreError(Exception):
    """Base class for programmer errors raised by json_core."""


class JsonConstructionError(JsonCoreError, TypeError):
    """A value cannot be turned into a Json tree (bad literal, key or number)."""


class SerializerNotFoundError(JsonCoreError, KeyError):
    """No serializer is registered for the requested type."""


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Returned (never raised) when text is not valid JSON."""

    message: str

    def __str__(self) -> str:
        return self.message
