"""Templated passage assembly for world, twist, and character chapters.

Every generator returns a list of paragraphs; the engine joins them with a
blank line. All variable flavour text is drawn through a ``Picker`` so tests
can pin the draws without touching the templates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from live_book.domain.models import Act, Character
from live_book.domain.ports import Picker

HESITATION_TEXT: Final = "The narrative hesitates, unsure of the requested path."
PARAGRAPH_SEPARATOR: Final = "\n\n"

SENSATIONS: Final[tuple[str, ...]] = (
    "shimmering conduits of light shimmer",
    "wind harps hum in sympathetic resonance",
    "floating gardens pulse with phosphorescent pollen",
    "clockwork gulls sketch elaborate sigils across the clouds",
)
CATALYSTS: Final[tuple[str, ...]] = (
    "an unexpected breach of protocol",
    "a relic illuminated by auroral fire",
    "a sudden collapse of a light-bridge",
    "a memory thread unspooling in public",
)
REFLECTIONS: Final[tuple[str, ...]] = (
    "starlight refracts through crystal rain",
    "choruses of gliders echo between suspended plazas",
    "the chronometers shudder, counting breaths instead of seconds",
    "an auroral tide sketches promises across the horizon",
)


def join_paragraphs(paragraphs: Sequence[str]) -> str:
    return PARAGRAPH_SEPARATOR.join(paragraphs)


def hesitation_passage() -> list[str]:
    return [HESITATION_TEXT]


def world_passage(
    *,
    setting: str,
    theme: str,
    act: Act,
    characters: Sequence[Character],
    picker: Picker,
) -> list[str]:
    sensation = picker.pick(SENSATIONS)
    witness = picker.pick([character.name for character in characters])
    return [
        f"The city of {setting} exhales through {act.tone}. Overhead, {sensation}, "
        "folding the skyline into fresh geometry.",
        f"Citizens pause, and even {witness} senses the quiet adjustment. The world itself is "
        "annotating the margins of the tale, reminding every traveler that the setting is a "
        "collaborator, not a backdrop.",
        f"The theme of {theme.lower()} gains a new verse as the architecture replies to the "
        "people's heartbeat, inviting the reader to linger within the evolving atlas.",
    ]


def pick_twist_pair(
    characters: Sequence[Character], picker: Picker
) -> tuple[Character, Character]:
    """Pick two distinct cast members, or the same one twice for a cast of one."""
    first = picker.pick(characters)
    others = [character for character in characters if character.id != first.id]
    second = picker.pick(others) if others else first
    return first, second


def twist_passage(
    *,
    theme: str,
    act: Act,
    characters: Sequence[Character],
    picker: Picker,
) -> list[str]:
    first, second = pick_twist_pair(characters, picker)
    catalyst = picker.pick(CATALYSTS)
    return [
        f"{first.name} and {second.name} collide beneath a sky trembling with {act.tone}. "
        f"Between them hangs {catalyst}, forcing them to reveal priorities sharpened by the "
        "storm season.",
        f"{first.name} leans into hard-earned instincts while {second.name} weighs the cost of "
        f"silence. Their choices braid together, tightening the weave of {theme.lower()}.",
        "The chapter ends with the city tilting ever so slightly, promising that every "
        "heartbeat will be counted when the reckoning arrives.",
    ]


def character_passage(
    character: Character,
    *,
    setting: str,
    theme: str,
    act: Act,
    picker: Picker,
) -> list[str]:
    """Advance ``character`` one stage and narrate the step (or the stall)."""
    before = character.current_stage()
    progressed = character.advance_arc()
    after = character.current_stage()

    if progressed:
        turn = (
            f"{character.name} steps into {after.title.lower()}, {after.summary.lower()}. "
            "The choice feels irreversible, yet necessary."
        )
    else:
        turn = (
            f"{character.name} circles the cusp of {after.title.lower()}, unable to move "
            "beyond the gravity of expectation."
        )
    return [
        f"{character.name} threads through {setting}, remembering that "
        f"{before.summary.lower()}. The air tastes like {act.tone}, coaxing dormant hopes awake.",
        turn,
        f"Above, {picker.pick(REFLECTIONS)}, and the theme of {theme.lower()} sharpens. The "
        f"reader feels the page writing itself, propelled by {character.name}'s evolving arc.",
    ]


def epilogue_text(*, theme: str, characters: Sequence[Character]) -> str:
    closures = " ".join(
        f"{character.name} resolves within {character.current_stage().title}, "
        f"{character.current_stage().summary.lower()}."
        for character in characters
    )
    return (
        f"\nEpilogue - The living book settles. {closures} Together they prove that "
        f"{theme.lower()} can carry a city beyond the storm."
    )
