"""Typed story configuration contracts shared by the engine and the CLIs."""

from __future__ import annotations

from pathlib import Path

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from live_book.domain.models import slugify


class ContractModel(BaseModel):
    """Base model config used by all story contracts."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class ArcStageBlock(ContractModel):
    """One stage of a character arc."""

    title: str = Field(min_length=1, max_length=300)
    summary: str = Field(min_length=1, max_length=2000)


class CharacterBlock(ContractModel):
    """Roster entry used to build one engine character."""

    name: str = Field(min_length=1, max_length=200)
    role: str = Field(min_length=1, max_length=300)
    desire: str = Field(min_length=1, max_length=2000)
    fear: str = Field(min_length=1, max_length=2000)
    secret: str = Field(default="", max_length=2000)
    arc: list[ArcStageBlock] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _validate_name_slug(cls, value: str) -> str:
        if not slugify(value):
            raise ValueError(f"Character name '{value}' must contain at least one letter or digit.")
        return value

    @property
    def key(self) -> str:
        return slugify(self.name)


class BookConfig(ContractModel):
    """Portable live book configuration: descriptive strings plus the cast."""

    title: str = Field(min_length=1, max_length=300)
    theme: str = Field(min_length=1, max_length=1000)
    setting: str = Field(min_length=1, max_length=1000)
    mood: str = Field(min_length=1, max_length=1000)
    chapters_per_act: int = Field(
        default=3,
        ge=1,
        validation_alias=AliasChoices("chapters_per_act", "maxChaptersPerAct"),
    )
    characters: list[CharacterBlock] = Field(min_length=1)

    @model_validator(mode="after")
    def _validate_invariants(self) -> BookConfig:
        keys = [character.key for character in self.characters]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Character names must map to unique ids, duplicated: {duplicates}.")
        return self


def save_book_config_json(path: Path, config: BookConfig) -> None:
    """Persist story configuration as readable JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")


def load_book_config_json(path: Path) -> BookConfig:
    """Load and validate story configuration JSON from disk."""
    return BookConfig.model_validate_json(path.read_text(encoding="utf-8"))
