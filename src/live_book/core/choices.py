"""Choice menu construction and choice id routing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from live_book.domain.models import (
    FINAL_ACT_INDEX,
    Character,
    CharacterRoute,
    Choice,
    ChoiceRoute,
    TwistRoute,
    UnrecognizedRoute,
    WorldRoute,
)

WORLD_CHOICE_ID: Final = "world"
TWIST_CHOICE_ID: Final = "twist"
CHARACTER_CHOICE_PREFIX: Final = "character:"
MAX_CHOICES: Final = 4
CHARACTER_SLOTS: Final = 2

_MID_STORY_TWIST = "Complicate the central tension that binds everyone together."
_FINAL_ACT_TWIST = "Let the consequences of every choice crash together."


def character_choice_id(character: Character) -> str:
    return f"{CHARACTER_CHOICE_PREFIX}{character.id}"


def least_progressed(
    characters: Sequence[Character], count: int = CHARACTER_SLOTS
) -> list[Character]:
    """Return the characters with the lowest stage index, keeping roster order on ties."""
    return sorted(characters, key=lambda character: character.stage_index)[:count]


def build_choice_menu(
    characters: Sequence[Character], *, setting: str, act_index: int
) -> list[Choice]:
    """Build the ordered menu: character slots, then world, then twist."""
    options = [
        Choice(
            id=character_choice_id(character),
            label=(
                f"Follow {character.name} as they navigate "
                f"{character.current_stage().title.lower()}."
            ),
        )
        for character in least_progressed(characters)
    ]
    options.append(
        Choice(id=WORLD_CHOICE_ID, label=f"Listen to the city of {setting} reveal a new facet.")
    )
    twist_label = _MID_STORY_TWIST if act_index < FINAL_ACT_INDEX else _FINAL_ACT_TWIST
    options.append(Choice(id=TWIST_CHOICE_ID, label=twist_label))
    return options[:MAX_CHOICES]


def resolve_choice(choice_id: str, characters: Sequence[Character]) -> ChoiceRoute:
    """Route a raw choice id to its category once, at the engine boundary."""
    if choice_id == WORLD_CHOICE_ID:
        return WorldRoute()
    if choice_id == TWIST_CHOICE_ID:
        return TwistRoute()
    if choice_id.startswith(CHARACTER_CHOICE_PREFIX):
        slug = choice_id[len(CHARACTER_CHOICE_PREFIX) :]
        if any(character.id == slug for character in characters):
            return CharacterRoute(character_id=slug)
    return UnrecognizedRoute(choice_id=choice_id)
