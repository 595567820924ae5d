"""JsonSerializer: converting domain values to and from Json, text and bytes.

A serializer only supplies ``to_json`` and ``from_json``. The string and
byte forms are derived from those two through the parse/print bridge and
the UTF-8 codec. Every implementation must satisfy::

    from_json(to_json(t))                        == t
    from_json_string(to_json_string(t))          == t
    from_json_string(to_pretty_json_string(t))   == t
    deserialize(serialize(t))                    == t

and, for any json that decodes to some t, re-encoding t and decoding again
gives t back. Decoding never raises: bad text, bad bytes and mismatched
shapes all give None.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from decimal import Decimal
from typing import Generic, TypeVar

import msgspec

from .bridge import from_builtins, parse_or_none, pretty_json, print_json
from .text_codec import decode_utf8, encode_utf8
from .values import Json, narrow_double

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=msgspec.Struct)

_FLOAT_EXPONENT = 308


# ---------------------------------------------------------------------------
# JsonSerializer
# ---------------------------------------------------------------------------

class JsonSerializer(ABC, Generic[T]):
    """Stateless strategy pairing a type with its Json conversions."""

    __slots__ = ()

    @abstractmethod
    def to_json(self, t: T) -> Json: ...

    @abstractmethod
    def from_json(self, json: Json) -> T | None: ...

    # -- Derived forms --------------------------------------------------

    def to_json_string(self, t: T) -> str:
        return print_json(self.to_json(t))

    def to_pretty_json_string(self, t: T) -> str:
        return pretty_json(self.to_json(t))

    def from_json_string(self, string: str) -> T | None:
        json = parse_or_none(string)
        if json is None:
            return None
        return self.from_json(json)

    def serialize(self, t: T) -> bytes:
        return encode_utf8(self.to_json_string(t))

    def deserialize(self, data: bytes) -> T | None:
        string = decode_utf8(data)
        if string is None:
            return None
        return self.from_json_string(string)


# ---------------------------------------------------------------------------
# Construction strategies
# ---------------------------------------------------------------------------

class IdentitySerializer(JsonSerializer[Json]):
    """Serializer for Json itself."""

    __slots__ = ()

    def to_json(self, t: Json) -> Json:
        return t

    def from_json(self, json: Json) -> Json | None:
        return json


JSON_SERIALIZER = IdentitySerializer()


class StructSerializer(JsonSerializer[S]):
    """Serializer driven by a msgspec Struct's field names and types.

    Usage::

        class Point(msgspec.Struct, frozen=True):
            x: int
            y: int

        points = StructSerializer(Point)
        points.to_json_string(Point(1, 2))   # '{"x":1,"y":2}'
    """

    __slots__ = ("struct_type", "strict")

    def __init__(self, struct_type: type[S], *, strict: bool = True) -> None:
        self.struct_type = struct_type
        self.strict = strict

    def to_json(self, t: S) -> Json:
        return from_builtins(msgspec.to_builtins(t, str_keys=True))

    def from_json(self, json: Json) -> S | None:
        try:
            return msgspec.convert(
                _plain(json), type=self.struct_type, strict=self.strict, str_keys=True
            )
        except msgspec.ValidationError as exc:
            logger.debug("%s rejected JSON: %s", self.struct_type.__name__, exc)
            return None

    def __repr__(self) -> str:
        return f"StructSerializer({self.struct_type.__name__})"


class ConverterSerializer(JsonSerializer[T]):
    """Serializer from a pair of converter functions.

    The pair must satisfy ``from_(to(t)) == t`` and, whenever
    ``from_(json)`` gives t, ``from_(to(t)) == t``.
    """

    __slots__ = ("_to", "_from")

    def __init__(self, to: Callable[[T], Json], from_: Callable[[Json], T | None]) -> None:
        self._to = to
        self._from = from_

    def to_json(self, t: T) -> Json:
        return self._to(t)

    def from_json(self, json: Json) -> T | None:
        return self._from(json)


# ---------------------------------------------------------------------------
# Contract checks
# ---------------------------------------------------------------------------

def round_trip_violations(serializer: JsonSerializer[T], t: T) -> list[str]:
    """Names of the round-trip laws that *serializer* breaks for *t*."""
    failures: list[str] = []
    if serializer.from_json(serializer.to_json(t)) != t:
        failures.append("json")
    if serializer.from_json_string(serializer.to_json_string(t)) != t:
        failures.append("string")
    if serializer.from_json_string(serializer.to_pretty_json_string(t)) != t:
        failures.append("pretty_string")
    if serializer.deserialize(serializer.serialize(t)) != t:
        failures.append("bytes")
    return failures


def reencodes_stably(serializer: JsonSerializer[T], json: Json) -> bool:
    """True unless *json* decodes to a value that does not survive re-encoding.

    The decoded value is checked against every law that
    :func:`round_trip_violations` checks: Json, compact string, pretty
    string and bytes. Catches serializers that accept more than they produce.
    """
    decoded = serializer.from_json(json)
    if decoded is None:
        return True
    return not round_trip_violations(serializer, decoded)


# ---------------------------------------------------------------------------
# Json → msgspec input
# ---------------------------------------------------------------------------

def _plain(json: Json) -> object:
    """Builtins for msgspec.convert, with numbers narrowed where lossless."""
    return json.fold(
        on_null=lambda: None,
        on_bool=lambda p: p,
        on_number=_plain_number,
        on_string=lambda s: s,
        on_array=lambda items: items,
        on_assoc=lambda entries: entries,
    )


def _plain_number(x: Decimal) -> int | float | Decimal:
    # Integers past float range stay Decimal so float fields never see them.
    if x == x.to_integral_value() and x.adjusted() < _FLOAT_EXPONENT:
        return int(x)
    f = narrow_double(x)
    if f is not None:
        return f
    return x
