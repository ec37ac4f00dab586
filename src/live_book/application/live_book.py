"""Narrative engine: act/chapter state machine driving passage synthesis."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final, assert_never

from pydantic import ValidationError

from live_book.adapters.random_picker import RandomPicker
from live_book.api.contracts import BookConfig
from live_book.core.choices import build_choice_menu, resolve_choice
from live_book.core.passages import (
    character_passage,
    epilogue_text,
    hesitation_passage,
    join_paragraphs,
    twist_passage,
    world_passage,
)
from live_book.domain.models import (
    ACTS,
    FINAL_ACT_INDEX,
    Act,
    ArcStage,
    Character,
    CharacterRoute,
    Choice,
    ChoiceRoute,
    HistoryEntry,
    TwistRoute,
    UnrecognizedRoute,
    WorldRoute,
)
from live_book.domain.ports import Picker

logger = logging.getLogger(__name__)

ALREADY_FINISHED_TEXT: Final = "The book has already reached its cadence."
EMPTY_HISTORY_TEXT: Final = "No pages have been discovered yet."
HISTORY_DIVIDER: Final = "\n\n---\n\n"
DEFAULT_HISTORY_LIMIT: Final = 3


class BookConfigError(ValueError):
    """Raised when a live book is built from an invalid configuration."""


class UnknownChoiceError(ValueError):
    """Raised for unrecognized choice ids when the engine runs in strict mode."""


def _coerce_config(config: BookConfig | Mapping[str, Any]) -> BookConfig:
    if isinstance(config, BookConfig):
        return config
    try:
        return BookConfig.model_validate(dict(config))
    except ValidationError as exc:
        raise BookConfigError(f"Invalid live book configuration: {exc}") from exc


class LiveBook:
    """Three-act interactive book whose chapters are written one choice at a time."""

    def __init__(
        self,
        config: BookConfig | Mapping[str, Any],
        picker: Picker | None = None,
        *,
        reject_unknown_choices: bool = False,
    ) -> None:
        """Build the engine and its cast from a validated configuration.

        ``reject_unknown_choices`` switches unrecognized ids from the permissive
        hesitation passage to an ``UnknownChoiceError`` that consumes no turn.
        """
        validated = _coerce_config(config)
        self.title = validated.title
        self.theme = validated.theme
        self.setting = validated.setting
        self.mood = validated.mood
        self.chapters_per_act = validated.chapters_per_act
        self._characters = tuple(
            Character(
                name=block.name,
                role=block.role,
                desire=block.desire,
                fear=block.fear,
                secret=block.secret,
                arc=tuple(
                    ArcStage(title=stage.title, summary=stage.summary) for stage in block.arc
                ),
            )
            for block in validated.characters
        )
        self._picker: Picker = picker or RandomPicker()
        self._reject_unknown_choices = reject_unknown_choices
        self._act_index = 0
        self._chapter = 1
        self._history: list[HistoryEntry] = []
        self._completed = False
        self._epilogue = ""
        logger.info(
            "book.created title=%r characters=%d chapters_per_act=%d",
            self.title,
            len(self._characters),
            self.chapters_per_act,
        )

    @property
    def act(self) -> Act:
        return ACTS[self._act_index]

    @property
    def act_index(self) -> int:
        return self._act_index

    @property
    def chapter(self) -> int:
        return self._chapter

    @property
    def characters(self) -> tuple[Character, ...]:
        return self._characters

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def epilogue(self) -> str:
        return self._epilogue

    def is_complete(self) -> bool:
        return self._completed

    def get_introduction(self) -> str:
        header = (
            f"\n=== {self.title} ===\nSetting: {self.setting}\n"
            f"Theme: {self.theme}\nMood: {self.mood}\n"
        )
        pitches = "\n".join(f" * {character.pitch_line()}" for character in self._characters)
        guidance = (
            "\nType the number of a choice to continue the live book.\n"
            "You can also type 'summary', 'history', or 'quit'.\n"
        )
        return f"{header}\nPrincipal Characters:\n{pitches}{guidance}"

    def get_choices(self) -> list[Choice]:
        if self._completed:
            return []
        return build_choice_menu(
            self._characters, setting=self.setting, act_index=self._act_index
        )

    def find_character(self, choice_id: str) -> Character | None:
        route = resolve_choice(choice_id, self._characters)
        if isinstance(route, CharacterRoute):
            return self._character_by_id(route.character_id)
        return None

    def generate_passage(self, choice: Choice) -> str:
        """Write one passage for ``choice`` and move the book forward one chapter."""
        if self._completed:
            return ALREADY_FINISHED_TEXT

        route = resolve_choice(choice.id, self._characters)
        if isinstance(route, UnrecognizedRoute):
            if self._reject_unknown_choices:
                raise UnknownChoiceError(f"Unknown choice id: {choice.id!r}")
            logger.warning("passage.unrecognized choice_id=%r", choice.id)

        entry_act = self._act_index + 1
        entry_act_name = self.act.name
        entry_chapter = self._chapter
        text = join_paragraphs(self._paragraphs_for(route))
        self._history.append(
            HistoryEntry(
                act=entry_act,
                act_name=entry_act_name,
                chapter=entry_chapter,
                choice=choice.label,
                text=text,
            )
        )
        logger.info(
            "passage.generated act=%d chapter=%d route=%s",
            entry_act,
            entry_chapter,
            type(route).__name__,
        )
        self._advance_structure()
        if self._completed:
            self._epilogue = epilogue_text(theme=self.theme, characters=self._characters)
            logger.info("book.completed passages=%d", len(self._history))
        return text

    def get_summary(self) -> str:
        act_line = (
            f"Act {self._act_index + 1} - {self.act.name} "
            f"(Chapter {self._chapter}, tone of {self.act.tone})."
        )
        character_lines = "\n".join(
            f" * {character.arc_status_line()}" for character in self._characters
        )
        return f"{act_line}\n{character_lines}"

    def get_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> str:
        if not self._history:
            return EMPTY_HISTORY_TEXT
        recent = self._history[-limit:] if limit > 0 else []
        return HISTORY_DIVIDER.join(entry.render() for entry in recent)

    def _paragraphs_for(self, route: ChoiceRoute) -> list[str]:
        if isinstance(route, WorldRoute):
            return world_passage(
                setting=self.setting,
                theme=self.theme,
                act=self.act,
                characters=self._characters,
                picker=self._picker,
            )
        if isinstance(route, TwistRoute):
            return twist_passage(
                theme=self.theme,
                act=self.act,
                characters=self._characters,
                picker=self._picker,
            )
        if isinstance(route, CharacterRoute):
            character = self._character_by_id(route.character_id)
            if character is None:
                raise RuntimeError(f"Routed to unknown character id {route.character_id!r}.")
            return character_passage(
                character,
                setting=self.setting,
                theme=self.theme,
                act=self.act,
                picker=self._picker,
            )
        if isinstance(route, UnrecognizedRoute):
            return hesitation_passage()
        assert_never(route)

    def _character_by_id(self, character_id: str) -> Character | None:
        return next(
            (character for character in self._characters if character.id == character_id),
            None,
        )

    def _advance_structure(self) -> None:
        if self._chapter < self.chapters_per_act:
            self._chapter += 1
        elif self._act_index < FINAL_ACT_INDEX:
            self._act_index += 1
            self._chapter = 1
        else:
            self._completed = True
