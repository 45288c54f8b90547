"""
Render Pipeline

Pure transformation from an AnalysisResponse to the UIModel shown in the results
panel. No I/O happens here; markup is produced separately in ``render.markup``.
"""

from dataclasses import dataclass, field
from typing import Tuple

from ghostwriter.core.constants import (
    AI_SOURCE,
    BADGE_DELAY_STEP,
    DIRECTION_DELAY_BASE,
    DIRECTION_DELAY_STEP,
    ENGINE_LABEL_AI,
    ENGINE_LABEL_TEMPLATE,
    ENTITY_DELAY_STEP,
    GENRE_DEFAULT,
    TONE_DEFAULT,
)
from ghostwriter.models.story import Direction, normalize_directions
from ghostwriter.models.wire import AnalysisResponse


@dataclass(frozen=True)
class Badge:
    """One of the three header badges."""
    kind: str  # genre, tone, ai, template
    label: str
    value: str
    delay: float = 0.0

    @property
    def css_class(self) -> str:
        return f"badge-{self.kind}"


@dataclass(frozen=True)
class EntityTag:
    text: str
    delay: float = 0.0


@dataclass(frozen=True)
class DirectionCard:
    """An interactive card for one Direction."""
    direction: Direction
    delay: float = 0.0

    @property
    def number(self) -> int:
        return self.direction.number

    @property
    def name(self) -> str:
        return self.direction.name

    @property
    def description(self) -> str:
        return self.direction.description


@dataclass(frozen=True)
class UIModel:
    """Normalized view of one analysis response."""
    badges: Tuple[Badge, ...] = field(default_factory=tuple)
    entities: Tuple[EntityTag, ...] = field(default_factory=tuple)
    bridge: str = ""
    directions: Tuple[DirectionCard, ...] = field(default_factory=tuple)

    @property
    def bridge_visible(self) -> bool:
        return bool(self.bridge)

    @property
    def is_ai(self) -> bool:
        return any(badge.kind == "ai" for badge in self.badges)


def build_badges(response: AnalysisResponse) -> Tuple[Badge, Badge, Badge]:
    """Genre, tone and engine badges, always in that order."""
    if response.source == AI_SOURCE:
        engine = Badge("ai", "Engine", ENGINE_LABEL_AI, 2 * BADGE_DELAY_STEP)
    else:
        engine = Badge("template", "Engine", ENGINE_LABEL_TEMPLATE, 2 * BADGE_DELAY_STEP)
    return (
        Badge("genre", "Genre", response.genre_detected or GENRE_DEFAULT, 0.0),
        Badge("tone", "Tone", response.tone_detected or TONE_DEFAULT, BADGE_DELAY_STEP),
        engine,
    )


def render(response: AnalysisResponse) -> UIModel:
    """Build the UIModel for a response. Calling it twice gives equal models."""
    entities = tuple(
        EntityTag(text, round(i * ENTITY_DELAY_STEP, 4))
        for i, text in enumerate(response.key_entities or [])
    )
    cards = tuple(
        DirectionCard(direction, round(DIRECTION_DELAY_BASE + direction.index * DIRECTION_DELAY_STEP, 4))
        for direction in normalize_directions(response.directions)
    )
    return UIModel(
        badges=build_badges(response),
        entities=entities,
        bridge=response.narrative_bridge or "",
        directions=cards,
    )
