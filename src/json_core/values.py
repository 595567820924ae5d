"""Json value types for json_core.

A Json tree is built from exactly six immutable variants: ``JNull``,
``JBool``, ``JNumber``, ``JString``, ``JArray`` and ``JAssoc``. Every
consumer goes through :meth:`Json.cases` (one level) or :meth:`Json.fold`
(the whole tree), which are the only places that dispatch on the variant.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, Union, assert_never, cast

from .errors import JsonConstructionError
from .traversals import traverse_list

if TYPE_CHECKING:
    from .config import BridgeConfig

A = TypeVar("A")
X = TypeVar("X")

_LONG_MIN = Decimal(-(2**63))
_LONG_MAX = Decimal(2**63 - 1)


# ---------------------------------------------------------------------------
# Json: behaviour shared by every variant
# ---------------------------------------------------------------------------

class Json:
    """Base of the six Json variants. Not instantiated directly."""

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> Json:
        if cls is Json:
            raise TypeError("Json is abstract; build one of its six variants")
        return super().__new__(cls)

    # -- Dispatch -------------------------------------------------------

    def cases(
        self,
        on_null: Callable[[], X],
        on_bool: Callable[[bool], X],
        on_number: Callable[[Decimal], X],
        on_string: Callable[[str], X],
        on_array: Callable[[tuple[Json, ...]], X],
        on_assoc: Callable[[Mapping[str, Json]], X],
    ) -> X:
        """Call the handler for this node's variant with its raw payload."""
        value = cast("JsonValue", self)
        if isinstance(value, JNull):
            return on_null()
        if isinstance(value, JBool):
            return on_bool(value.value)
        if isinstance(value, JNumber):
            return on_number(value.value)
        if isinstance(value, JString):
            return on_string(value.value)
        if isinstance(value, JArray):
            return on_array(value.items)
        if isinstance(value, JAssoc):
            return on_assoc(value.entries)
        assert_never(value)

    def fold(
        self,
        on_null: Callable[[], X],
        on_bool: Callable[[bool], X],
        on_number: Callable[[Decimal], X],
        on_string: Callable[[str], X],
        on_array: Callable[[list[X]], X],
        on_assoc: Callable[[dict[str, X]], X],
    ) -> X:
        """Reduce the tree bottom-up, one handler per variant.

        Array and assoc handlers receive children that have already been
        folded. Every node is visited exactly once. The walk keeps its own
        stack, so depth is not limited by the interpreter's recursion limit.
        """
        done: list[Any] = []
        todo: list[Json | Callable[[], None]] = [self]

        def expand_array(items: tuple[Json, ...]) -> None:
            todo.append(lambda: done.append(on_array(_take(done, len(items)))))
            todo.extend(reversed(items))

        def expand_assoc(entries: Mapping[str, Json]) -> None:
            keys = list(entries)
            todo.append(lambda: done.append(on_assoc(dict(zip(keys, _take(done, len(keys)))))))
            todo.extend(entries[key] for key in reversed(keys))

        while todo:
            step = todo.pop()
            if isinstance(step, Json):
                step.cases(
                    lambda: done.append(on_null()),
                    lambda p: done.append(on_bool(p)),
                    lambda x: done.append(on_number(x)),
                    lambda s: done.append(on_string(s)),
                    expand_array,
                    expand_assoc,
                )
            else:
                step()
        return cast(X, done[0])

    # -- Typed accessors ------------------------------------------------

    def as_null(self) -> tuple[()] | None:
        """``()`` for Null, so that a present null differs from absence."""
        return self.cases(lambda: (), _absent, _absent, _absent, _absent, _absent)

    def as_bool(self) -> bool | None:
        return self.cases(_absent0, _present, _absent, _absent, _absent, _absent)

    def as_number(self) -> Decimal | None:
        return self.cases(_absent0, _absent, _present, _absent, _absent, _absent)

    def as_string(self) -> str | None:
        return self.cases(_absent0, _absent, _absent, _present, _absent, _absent)

    def as_array(self) -> tuple[Json, ...] | None:
        return self.cases(_absent0, _absent, _absent, _absent, _present, _absent)

    def as_assoc(self) -> Mapping[str, Json] | None:
        return self.cases(_absent0, _absent, _absent, _absent, _absent, _present)

    # -- Numeric narrowing ----------------------------------------------

    def as_long(self) -> int | None:
        """The number as a signed 64-bit integer, if no precision is lost."""
        x = self.as_number()
        return None if x is None else narrow_long(x)

    def as_double(self) -> float | None:
        """The number as a float, if it widens back to the same decimal."""
        x = self.as_number()
        return None if x is None else narrow_double(x)

    # -- Navigation -----------------------------------------------------

    def nav(self, key: str | int) -> Json | None:
        """Child under *key* (assoc) or at *key* (array).

        An integer key also matches an assoc member named ``str(key)``.
        """
        if isinstance(key, bool):
            return None
        if isinstance(key, str):
            return self.cases(
                _absent0, _absent, _absent, _absent, _absent,
                lambda entries: entries.get(key),
            )
        if isinstance(key, int):
            return self.cases(
                _absent0, _absent, _absent, _absent,
                lambda items: items[key] if 0 <= key < len(items) else None,
                lambda entries: entries.get(str(key)),
            )
        return None

    # -- Bulk traversal -------------------------------------------------

    def map_or_fail(self, f: Callable[[Json], A | None]) -> list[A] | None:
        """Map *f* over array elements; ``None`` if any element fails."""
        items = self.as_array()
        if items is None:
            return None
        return traverse_list(items, f)

    def fold_or_fail(self, seed: A, f: Callable[[A, Json], A | None]) -> A | None:
        """Left fold over array elements, stopping at the first ``None``."""
        items = self.as_array()
        if items is None:
            return None
        acc = seed
        for item in items:
            step = f(acc, item)
            if step is None:
                return None
            acc = step
        return acc

    # -- Rendering ------------------------------------------------------

    def print(self, config: BridgeConfig | None = None) -> str:
        """Compact JSON text."""
        from .bridge import print_json
        return print_json(self, config)

    def pretty(self, config: BridgeConfig | None = None) -> str:
        """Indented JSON text."""
        from .bridge import pretty_json
        return pretty_json(self, config)

    def __str__(self) -> str:
        return self.print()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class JNull(Json):
    """Singleton JSON null."""

    __slots__ = ()
    _instance: JNull | None = None

    def __new__(cls) -> JNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __reduce__(self) -> tuple[type[JNull], tuple[()]]:
        return JNull, ()


Null = JNull()


@dataclass(frozen=True, slots=True)
class JBool(Json):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise JsonConstructionError(f"JBool needs a bool, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class JNumber(Json):
    """Arbitrary-precision decimal. Ints are widened; floats are refused."""

    value: Decimal

    def __post_init__(self) -> None:
        value: Any = self.value
        if isinstance(value, int) and not isinstance(value, bool):
            object.__setattr__(self, "value", Decimal(value))
        elif not isinstance(value, Decimal):
            raise JsonConstructionError(
                f"JNumber needs a Decimal or int, got {type(value).__name__}"
            )
        if not self.value.is_finite():
            raise JsonConstructionError(f"JSON numbers must be finite, got {self.value}")


@dataclass(frozen=True, slots=True)
class JString(Json):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise JsonConstructionError(f"JString needs a str, got {type(self.value).__name__}")
        _require_utf8(self.value)


@dataclass(frozen=True, slots=True)
class JArray(Json):
    items: tuple[Json, ...]

    def __post_init__(self) -> None:
        items = tuple(cast("Iterable[Json]", self.items))
        for item in items:
            if not isinstance(item, Json):
                raise JsonConstructionError(
                    f"JArray items must be Json, got {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class JAssoc(Json):
    """String-keyed members; key order does not affect equality."""

    entries: Mapping[str, Json]

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, value in entries.items():
            if not isinstance(key, str):
                raise JsonConstructionError(
                    f"JAssoc keys must be str, got {type(key).__name__}"
                )
            _require_utf8(key)
            if not isinstance(value, Json):
                raise JsonConstructionError(
                    f"JAssoc values must be Json, got {type(value).__name__}"
                )
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JAssoc):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __repr__(self) -> str:
        return f"JAssoc({dict(self.entries)!r})"


JsonValue = Union[JNull, JBool, JNumber, JString, JArray, JAssoc]


# ---------------------------------------------------------------------------
# Handlers for the accessors
# ---------------------------------------------------------------------------

def _present(payload: A) -> A:
    return payload


def _absent(_payload: object) -> None:
    return None


def _absent0() -> None:
    return None


def _take(stack: list[A], n: int) -> list[A]:
    """Pop the top *n* entries of *stack*, oldest first."""
    taken = stack[len(stack) - n:]
    del stack[len(stack) - n:]
    return taken


def _require_utf8(text: str) -> None:
    # Lone surrogates are valid str but have no UTF-8 (or JSON text) form.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise JsonConstructionError(f"string is not valid Unicode text: {exc.reason}") from exc


# ---------------------------------------------------------------------------
# Numeric narrowing
# ---------------------------------------------------------------------------

def narrow_long(x: Decimal) -> int | None:
    """*x* as a signed 64-bit int, or None if that would change its value."""
    if not _LONG_MIN <= x <= _LONG_MAX:
        return None
    if x != x.to_integral_value():
        return None
    n = int(x)
    return n if Decimal(n) == x else None


def narrow_double(x: Decimal) -> float | None:
    """*x* as a float, or None unless the float's shortest decimal form equals *x*."""
    f = float(x)
    if not math.isfinite(f):
        return None
    return f if Decimal(repr(f)) == x else None
