"""Parse/print bridge: adapts Json trees to the msgspec JSON engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

import msgspec

from .builders import double
from .config import DEFAULT_CONFIG, BridgeConfig
from .errors import JsonConstructionError, ParseFailure
from .values import JArray, JAssoc, JBool, JNumber, JString, Json, Null

logger = logging.getLogger(__name__)

# Untyped floats arrive as Decimal built from the literal's own text.
_DECODER = msgspec.json.Decoder(float_hook=Decimal)

_ENCODER = msgspec.json.Encoder(decimal_format="number")
_ENCODER_SORTED = msgspec.json.Encoder(decimal_format="number", order="sorted")


# ---------------------------------------------------------------------------
# Builtins conversion
# ---------------------------------------------------------------------------

def to_builtins(json: Json) -> object:
    """Convert a tree to dict / list / str / bool / Decimal / None."""
    return json.fold(
        on_null=lambda: None,
        on_bool=lambda p: p,
        on_number=lambda x: x,
        on_string=lambda s: s,
        on_array=lambda items: items,
        on_assoc=lambda entries: entries,
    )


def from_builtins(obj: object) -> Json:
    """Convert decoded builtins back into a tree.

    Nesting depth is not limited by the recursion limit. Raises
    JsonConstructionError for anything that has no JSON form.
    """
    done: list[Json] = []
    todo: list[object] = [obj]
    while todo:
        item = todo.pop()
        if isinstance(item, _Pending):
            children = _take(done, item.size)
            if item.keys is None:
                done.append(JArray(tuple(children)))
            else:
                done.append(JAssoc(dict(zip(item.keys, children))))
        elif isinstance(item, (list, tuple)):
            todo.append(_Pending(None, len(item)))
            todo.extend(reversed(item))
        elif isinstance(item, dict):
            keys = tuple(_key(k) for k in item)
            todo.append(_Pending(keys, len(keys)))
            todo.extend(item[k] for k in reversed(keys))
        else:
            done.append(_scalar(item))
    return done[0]


@dataclass(frozen=True, slots=True)
class _Pending:
    """A container whose *size* children are the top entries of the done stack."""

    keys: tuple[str, ...] | None
    size: int


def _scalar(obj: object) -> Json:
    if obj is None:
        return Null
    if isinstance(obj, bool):
        return JBool(obj)
    if isinstance(obj, (int, Decimal)):
        return JNumber(obj)
    if isinstance(obj, float):
        return double(obj)
    if isinstance(obj, str):
        return JString(obj)
    raise JsonConstructionError(f"no JSON form for {type(obj).__name__}")


def _take(stack: list[Json], n: int) -> list[Json]:
    taken = stack[len(stack) - n:]
    del stack[len(stack) - n:]
    return taken


def _key(key: object) -> str:
    if not isinstance(key, str):
        raise JsonConstructionError(f"object keys must be str, got {type(key).__name__}")
    return key


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------

def parse(text: str | bytes) -> Json | ParseFailure:
    """Parse JSON text. Failures are returned, not raised.

    Besides syntax errors this covers nesting deeper than the engine
    supports and strings (such as lone surrogate escapes) with no
    Unicode form.
    """
    try:
        return from_builtins(_DECODER.decode(text))
    except msgspec.DecodeError as exc:
        logger.debug("JSON parse failed: %s", exc)
        return ParseFailure(str(exc))
    except RecursionError:
        logger.debug("JSON parse failed: nesting too deep")
        return ParseFailure("nesting too deep")
    except JsonConstructionError as exc:
        logger.debug("JSON parse produced an unrepresentable value: %s", exc)
        return ParseFailure(str(exc))


def parse_or_none(text: str | bytes) -> Json | None:
    result = parse(text)
    if isinstance(result, ParseFailure):
        return None
    return result


# ---------------------------------------------------------------------------
# Print
# ---------------------------------------------------------------------------

def print_json(json: Json, config: BridgeConfig | None = None) -> str:
    """Compact JSON text, no insignificant whitespace."""
    return _encode(json, config or DEFAULT_CONFIG).decode("utf-8")


def pretty_json(json: Json, config: BridgeConfig | None = None) -> str:
    """Indented JSON text (two spaces per level by default)."""
    config = config or DEFAULT_CONFIG
    raw = _encode(json, config)
    return msgspec.json.format(raw, indent=config.indent).decode("utf-8")


def _encode(json: Json, config: BridgeConfig) -> bytes:
    encoder = _ENCODER_SORTED if config.sort_keys else _ENCODER
    return encoder.encode(to_builtins(json))
