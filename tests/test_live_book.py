from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from live_book.application.live_book import (
    ALREADY_FINISHED_TEXT,
    EMPTY_HISTORY_TEXT,
    BookConfigError,
    LiveBook,
    UnknownChoiceError,
)
from live_book.core.passages import HESITATION_TEXT
from live_book.domain.models import Choice
from live_book.domain.ports import Picker
from live_book.stories import default_book_config


def _play(book: LiveBook, count: int) -> list[str]:
    passages = []
    for _ in range(count):
        passages.append(book.generate_passage(book.get_choices()[0]))
    return passages


def test_new_book_starts_at_first_chapter_of_setup(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)

    assert (book.act_index, book.chapter) == (0, 1)
    assert book.act.name == "Setup"
    assert book.is_complete() is False
    assert book.epilogue == ""
    assert [c.id for c in book.characters] == ["mira-solace", "jonas-vale", "eira-quell"]


def test_introduction_lists_header_pitches_and_guidance(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    intro = book.get_introduction()

    assert "=== Aurora in Motion ===" in intro
    assert "Setting: Ilyrion" in intro
    assert "Mood: lyrical science fantasy" in intro
    assert "Principal Characters:" in intro
    assert " * Jonas Vale, a conductor of memory threads, longs to" in intro
    assert "'summary', 'history', or 'quit'" in intro
    assert book.history == ()


def test_default_story_completes_on_ninth_choice(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)

    for turn in range(1, 10):
        choices = book.get_choices()
        assert choices, f"no choices offered before turn {turn}"
        assert len(choices) <= 4
        book.generate_passage(choices[turn % len(choices)])
        assert book.is_complete() is (turn == 9)
        assert (book.epilogue != "") is (turn == 9)

    assert book.get_choices() == []
    for name in ("Mira Solace", "Jonas Vale", "Eira Quell"):
        assert name in book.epilogue
    assert len(book.history) == 9


def test_state_machine_rolls_chapters_into_acts(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    positions = []
    for _ in range(8):
        positions.append((book.act_index, book.chapter))
        book.generate_passage(Choice(id="world", label="World"))

    assert positions == [(0, 1), (0, 2), (0, 3), (1, 1), (1, 2), (1, 3), (2, 1), (2, 2)]
    assert [entry.act for entry in book.history] == [1, 1, 1, 2, 2, 2, 3, 3]
    assert [entry.act_name for entry in book.history][3] == "Confrontation"


@pytest.mark.parametrize("chapters_per_act", [1, 2, 4])
def test_completion_after_three_acts_of_chapters(picker: Picker, chapters_per_act: int) -> None:
    config: dict[str, Any] = default_book_config().model_dump()
    config["chapters_per_act"] = chapters_per_act
    book = LiveBook(config, picker)
    total = 3 * chapters_per_act

    _play(book, total - 1)
    assert book.is_complete() is False
    assert book.epilogue == ""

    _play(book, 1)
    assert book.is_complete() is True
    assert book.epilogue.startswith("\nEpilogue")


def test_passage_after_completion_is_sentinel_without_side_effects(picker: Picker) -> None:
    book = LiveBook({**default_book_config().model_dump(), "chapters_per_act": 1}, picker)
    _play(book, 3)
    epilogue = book.epilogue
    stages = [c.stage_index for c in book.characters]

    text = book.generate_passage(Choice(id="character:mira-solace", label="Follow Mira"))

    assert text == ALREADY_FINISHED_TEXT
    assert len(book.history) == 3
    assert book.epilogue == epilogue
    assert [c.stage_index for c in book.characters] == stages
    assert (book.act_index, book.chapter) == (2, 1)


def test_character_choice_advances_mira(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    mira = book.find_character("character:mira-solace")
    assert mira is not None
    first_summary = mira.current_stage().summary
    next_title = mira.arc[1].title

    text = book.generate_passage(Choice(id="character:mira-solace", label="Follow Mira"))

    assert first_summary.lower() in text
    assert next_title.lower() in text
    assert mira.stage_index == 1
    assert text.count("\n\n") == 2


def test_choice_menu_follows_least_progressed_characters(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    book.generate_passage(Choice(id="character:mira-solace", label="Follow Mira"))

    ids = [choice.id for choice in book.get_choices()]

    assert ids == ["character:jonas-vale", "character:eira-quell", "world", "twist"]


def test_every_offered_character_id_round_trips(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    for choice in book.get_choices()[:2]:
        character = book.find_character(choice.id)
        assert character is not None
        assert choice.id == f"character:{character.id}"
    assert book.find_character("world") is None


def test_character_at_final_stage_stalls(
    picker: Picker, solo_config: dict[str, Any]
) -> None:
    book = LiveBook(solo_config, picker)
    choice = Choice(id="character:ode-lark", label="Follow Ode")
    book.generate_passage(choice)

    text = book.generate_passage(choice)

    assert "circles the cusp of last wick" in text
    assert book.characters[0].stage_index == 1


def test_single_character_twist_pairs_character_with_itself(
    picker: Picker, solo_config: dict[str, Any]
) -> None:
    book = LiveBook(solo_config, picker)

    text = book.generate_passage(Choice(id="twist", label="Twist"))
    paragraphs = text.split("\n\n")

    assert len(paragraphs) == 3
    assert paragraphs[0].startswith("Ode Lark and Ode Lark collide")


def test_unrecognized_choice_hesitates_and_still_advances(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)

    text = book.generate_passage(Choice(id="bogus", label="Wander"))

    assert text == HESITATION_TEXT
    assert len(book.history) == 1
    assert book.history[0].text == HESITATION_TEXT
    assert book.history[0].choice == "Wander"
    assert book.chapter == 2


def test_character_prefix_with_unknown_slug_is_unrecognized(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    assert book.generate_passage(Choice(id="character:nobody", label="?")) == HESITATION_TEXT


def test_strict_mode_rejects_unknown_choice_without_consuming_turn(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker, reject_unknown_choices=True)

    with pytest.raises(UnknownChoiceError, match="bogus"):
        book.generate_passage(Choice(id="bogus", label="Wander"))

    assert book.history == ()
    assert book.chapter == 1


def test_world_and_twist_passages_have_three_paragraphs(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    world = book.generate_passage(Choice(id="world", label="World"))
    twist = book.generate_passage(Choice(id="twist", label="Twist"))

    assert len(world.split("\n\n")) == 3
    assert "Ilyrion" in world
    assert len(twist.split("\n\n")) == 3


def test_history_view_shows_recent_entries_in_order(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    assert book.get_history() == EMPTY_HISTORY_TEXT

    labels = ["one", "two", "three", "four"]
    for label in labels:
        book.generate_passage(Choice(id="world", label=label))

    assert [entry.choice for entry in book.history] == labels
    view = book.get_history()
    blocks = view.split("\n\n---\n\n")
    assert len(blocks) == 3
    assert blocks[0].startswith("Act 1, Chapter 2 - two\n")
    assert blocks[2].startswith("Act 2, Chapter 1 - four\n")
    assert len(book.get_history(limit=10).split("\n\n---\n\n")) == 4


def test_summary_reports_position_and_arcs(picker: Picker) -> None:
    book = LiveBook(default_book_config(), picker)
    book.generate_passage(Choice(id="character:eira-quell", label="Follow Eira"))

    summary = book.get_summary()

    assert summary.splitlines()[0] == (
        "Act 1 - Setup (Chapter 2, tone of curiosity and fragile optimism)."
    )
    assert " * Eira Quell - Reckoning with Sabotage: she confronts" in summary
    assert " * Mira Solace - Cartographer of Light:" in summary


def test_accepts_original_camel_case_chapter_key(
    picker: Picker, solo_config: dict[str, Any]
) -> None:
    solo_config.pop("chapters_per_act")
    solo_config["maxChaptersPerAct"] = 2
    assert LiveBook(solo_config, picker).chapters_per_act == 2


@pytest.mark.parametrize(
    "mutate",
    [
        lambda cfg: cfg.update(characters=[]),
        lambda cfg: cfg["characters"][0].update(arc=[]),
        lambda cfg: cfg.update(chapters_per_act=0),
        lambda cfg: cfg.update(characters=cfg["characters"] * 2),
        lambda cfg: cfg.update(unexpected="field"),
    ],
)
def test_invalid_configuration_fails_at_construction(
    picker: Picker, solo_config: dict[str, Any], mutate: Callable[[dict[str, Any]], None]
) -> None:
    mutate(solo_config)
    with pytest.raises(BookConfigError, match="Invalid live book configuration"):
        LiveBook(solo_config, picker)


def test_default_picker_is_random_and_structure_is_stable() -> None:
    book = LiveBook(default_book_config())
    for choice_id in ("world", "twist", "character:jonas-vale"):
        text = book.generate_passage(Choice(id=choice_id, label=choice_id))
        assert len(text.split("\n\n")) == 3
