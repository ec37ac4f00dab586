from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import pytest

T = TypeVar("T")


class ScriptedPicker:
    """Picks by index from a script, falling back to the first option."""

    def __init__(self, indices: Sequence[int] = ()) -> None:
        self._indices = list(indices)
        self.offered: list[list[Any]] = []

    def pick(self, options: Sequence[T]) -> T:
        self.offered.append(list(options))
        index = self._indices.pop(0) if self._indices else 0
        return options[index]


@pytest.fixture
def picker() -> ScriptedPicker:
    return ScriptedPicker()


@pytest.fixture
def solo_config() -> dict[str, Any]:
    return {
        "title": "Lantern",
        "theme": "Quiet Persistence",
        "setting": "Harrowgate",
        "mood": "hushed",
        "chapters_per_act": 1,
        "characters": [
            {
                "name": "Ode Lark",
                "role": "a lamplighter",
                "desire": "keep every street lit",
                "fear": "the dark between lamps",
                "secret": "he cannot see colour",
                "arc": [
                    {"title": "First Flame", "summary": "He Lights The Old Quarter"},
                    {"title": "Last Wick", "summary": "He hands the pole to someone new"},
                ],
            }
        ],
    }


@pytest.fixture
def make_picker() -> type[ScriptedPicker]:
    return ScriptedPicker
