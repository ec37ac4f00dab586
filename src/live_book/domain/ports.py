"""Ports for randomized content selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class Picker(Protocol):
    """Picks one item from a non-empty sequence of options."""

    def pick(self, options: Sequence[T]) -> T:
        ...
