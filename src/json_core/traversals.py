"""Fail-fast traverse / sequence combinators.

Every combinator maps a container of optional values to an optional
container: the result is present only when every element is present.
``None`` marks absence, so elements themselves can never be ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")


# ---------------------------------------------------------------------------
# Finite sequences
# ---------------------------------------------------------------------------

def traverse_list(items: Sequence[A], f: Callable[[A], B | None]) -> list[B] | None:
    """Apply *f* to each item in order; ``None`` at the first failure."""
    return _collect(items, f)


def sequence_list(items: Sequence[A | None]) -> list[A] | None:
    return traverse_list(items, _identity)


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------

def traverse_mapping(
    mapping: Mapping[K, A], f: Callable[[A], B | None]
) -> dict[K, B] | None:
    """Transform the values of *mapping*, keeping its keys."""
    out: dict[K, B] = {}
    for key, value in mapping.items():
        b = f(value)
        if b is None:
            return None
        out[key] = b
    return out


def sequence_mapping(mapping: Mapping[K, A | None]) -> dict[K, A] | None:
    return traverse_mapping(mapping, _identity)


# ---------------------------------------------------------------------------
# Single pairs
# ---------------------------------------------------------------------------

def traverse_pair(pair: tuple[K, A], f: Callable[[A], B | None]) -> tuple[K, B] | None:
    key, value = pair
    b = f(value)
    if b is None:
        return None
    return key, b


def sequence_pair(pair: tuple[K, A | None]) -> tuple[K, A] | None:
    return traverse_pair(pair, _identity)


# ---------------------------------------------------------------------------
# Lazy / unbounded iterables
# ---------------------------------------------------------------------------

def traverse_lazy(items: Iterable[A], f: Callable[[A], B | None]) -> list[B] | None:
    """Traverse an iterable that may be unbounded.

    Elements are pulled one at a time and *f* runs on each before the next
    is requested. The first failure returns ``None`` without pulling any
    further element, so an infinite iterator that fails at position *n*
    is consumed exactly *n* elements deep. A fully successful traversal
    of an infinite iterator does not terminate.
    """
    return _collect(items, f)


def sequence_lazy(items: Iterable[A | None]) -> list[A] | None:
    return traverse_lazy(items, _identity)


def _collect(items: Iterable[A], f: Callable[[A], B | None]) -> list[B] | None:
    out: list[B] = []
    for item in items:
        b = f(item)
        if b is None:
            return None
        out.append(b)
    return out


def _identity(x: A) -> A:
    return x
