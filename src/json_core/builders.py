"""Constructors and literal-to-Json conversion."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Union

from .errors import JsonConstructionError
from .values import JArray, JAssoc, JBool, JNumber, JString, Json, Null

# Python values that ``to_json`` knows how to turn into a Json tree.
ToJson = Union[
    Json,
    None,
    bool,
    int,
    float,
    Decimal,
    str,
    Sequence["ToJson"],
    Mapping[str, "ToJson"],
]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def null() -> Json:
    return Null


def boolean(p: bool) -> Json:
    return JBool(p)


def number(n: Decimal | int) -> Json:
    return JNumber(n)


def long(n: int) -> Json:
    return JNumber(Decimal(n))


def double(x: float) -> Json:
    """Widen *x* through its shortest decimal form (``0.1`` stays ``0.1``)."""
    if not math.isfinite(x):
        raise JsonConstructionError(f"JSON numbers must be finite, got {x!r}")
    return JNumber(Decimal(repr(float(x))))


def string(s: str) -> Json:
    return JString(s)


def array(items: Sequence[Json]) -> Json:
    return JArray(tuple(items))


def assoc(entries: Mapping[str, Json]) -> Json:
    return JAssoc(entries)


def empty_object() -> Json:
    return JAssoc({})


def empty_array() -> Json:
    return JArray(())


# ---------------------------------------------------------------------------
# Literal builders
# ---------------------------------------------------------------------------

def to_json(literal: ToJson) -> Json:
    """Convert a Python literal to Json.

    - Json → itself
    - None → Null
    - bool / int / float / Decimal → JBool or JNumber
    - str → JString
    - list / tuple → JArray (elements converted recursively)
    - Mapping with str keys → JAssoc (values converted recursively)
    """
    if isinstance(literal, Json):
        return literal
    if literal is None:
        return Null
    if isinstance(literal, bool):
        return JBool(literal)
    if isinstance(literal, (int, Decimal)):
        return JNumber(literal)
    if isinstance(literal, float):
        return double(literal)
    if isinstance(literal, str):
        return JString(literal)
    if isinstance(literal, (list, tuple)):
        return JArray(tuple(to_json(item) for item in literal))
    if isinstance(literal, Mapping):
        return obj(*literal.items())
    raise JsonConstructionError(f"cannot convert {type(literal).__name__} to Json")


def obj(*pairs: tuple[str, ToJson], **members: ToJson) -> Json:
    """Build an object from ``(key, literal)`` pairs and keyword members.

    Later keys win over earlier ones, keyword members over pairs.
    """
    entries: dict[str, Json] = {}
    for key, value in [*pairs, *members.items()]:
        if not isinstance(key, str):
            raise JsonConstructionError(f"object keys must be str, got {type(key).__name__}")
        entries[key] = to_json(value)
    return JAssoc(entries)


def arr(*values: ToJson) -> Json:
    return JArray(tuple(to_json(v) for v in values))
