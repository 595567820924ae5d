"""Rendering options for the parse/print bridge."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    """How Json trees are rendered to text.

    ``indent`` is the number of spaces per level used by ``pretty_json``;
    ``sort_keys`` emits object members in key order instead of insertion
    order.
    """

    indent: int = 2
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")


DEFAULT_CONFIG = BridgeConfig()
