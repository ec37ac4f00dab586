"""Core live book domain models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Build a lowercase hyphenated identifier from display text."""
    return _SLUG_RE.sub("-", text.lower()).strip("-")


@dataclass(frozen=True)
class Act:
    """One of the fixed top-level narrative phases."""

    name: str
    tone: str


ACTS: tuple[Act, ...] = (
    Act(name="Setup", tone="curiosity and fragile optimism"),
    Act(name="Confrontation", tone="surging tension and difficult choices"),
    Act(name="Resolution", tone="reckoning and courageous synthesis"),
)
FINAL_ACT_INDEX = len(ACTS) - 1


@dataclass(frozen=True)
class ArcStage:
    """One step in a character's personal development."""

    title: str
    summary: str


@dataclass
class Character:
    """A cast member whose arc only ever moves forward."""

    name: str
    role: str
    desire: str
    fear: str
    secret: str
    arc: tuple[ArcStage, ...]
    stage_index: int = field(default=0, init=False)
    id: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.arc:
            raise ValueError(f"Character '{self.name}' needs at least one arc stage.")
        self.arc = tuple(self.arc)
        self.id = slugify(self.name)

    @property
    def last_stage_index(self) -> int:
        return len(self.arc) - 1

    def current_stage(self) -> ArcStage:
        return self.arc[self.stage_index]

    def advance_arc(self) -> bool:
        """Step to the next stage; the final stage is a fixed point."""
        if self.stage_index < self.last_stage_index:
            self.stage_index += 1
            return True
        return False

    def arc_status_line(self) -> str:
        stage = self.current_stage()
        return f"{self.name} - {stage.title}: {stage.summary}"

    def pitch_line(self) -> str:
        return f"{self.name}, {self.role}, longs to {self.desire}, yet fears {self.fear}."


@dataclass(frozen=True)
class Choice:
    """An offered narrative branch."""

    id: str
    label: str


@dataclass(frozen=True)
class HistoryEntry:
    """One generated passage, recorded in the order it was produced."""

    act: int
    act_name: str
    chapter: int
    choice: str
    text: str

    def render(self) -> str:
        return f"Act {self.act}, Chapter {self.chapter} - {self.choice}\n{self.text}"


@dataclass(frozen=True)
class WorldRoute:
    """Explore the setting."""


@dataclass(frozen=True)
class TwistRoute:
    """Collide two cast members."""


@dataclass(frozen=True)
class CharacterRoute:
    """Follow one character through their current stage."""

    character_id: str


@dataclass(frozen=True)
class UnrecognizedRoute:
    """A choice id that names no category and no character."""

    choice_id: str


ChoiceRoute = WorldRoute | TwistRoute | CharacterRoute | UnrecognizedRoute
