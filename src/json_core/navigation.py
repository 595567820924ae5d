"""Path navigation and bulk helpers over optional Json values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from .values import Json

A = TypeVar("A")


def navigate(value: Json | None, *path: str | int) -> Json | None:
    """Follow *path* one ``nav`` step at a time.

    - str step: member of an assoc
    - int step: element of an array, or assoc member named ``str(step)``
    - a missing step (or a ``None`` start) → None
    """
    current = value
    for step in path:
        if current is None:
            return None
        current = current.nav(step)
    return current


def concat_map_or_fail(
    values: Iterable[Json], f: Callable[[Json], A | None]
) -> list[A] | None:
    """``map_or_fail`` each array in *values* and concatenate the results.

    Every value must be an array and every element must map; otherwise None.
    """
    out: list[A] = []
    for value in values:
        mapped = value.map_or_fail(f)
        if mapped is None:
            return None
        out.extend(mapped)
    return out


def fold_each_or_fail(
    values: Iterable[Json], seed: A, f: Callable[[A, Json], A | None]
) -> A | None:
    """Left fold *f* over *values* themselves, stopping at the first None."""
    acc = seed
    for value in values:
        step = f(acc, value)
        if step is None:
            return None
        acc = step
    return acc
