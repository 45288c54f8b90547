"""
Story Domain Models

Editor input state and the normalized Direction entity.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ghostwriter.core.constants import DIRECTION_NAME_PREFIX
from ghostwriter.models.wire import AnalysisRequest, DirectionPayload, PreviewRequest


@dataclass
class InputState:
    """
    Text held by the editing surface.

    ``main_text`` is the authoritative working text. ``long_context`` falls back to
    it at request time only; the fallback is never stored.
    """
    main_text: str = ""
    long_context: Optional[str] = None
    short_memory: Optional[str] = None

    @property
    def word_count(self) -> int:
        text = self.main_text.strip()
        return len(text.split()) if text else 0

    @property
    def char_count(self) -> int:
        return len(self.main_text)

    def story_context(self) -> str:
        """Long context if non-empty, else the current editor text (both trimmed)."""
        return (self.long_context or "").strip() or self.main_text.strip()

    def to_analysis_request(self) -> AnalysisRequest:
        last_paragraph = self.main_text.strip()
        return AnalysisRequest(
            full_context=(self.long_context or "").strip() or last_paragraph,
            short_memory=(self.short_memory or "").strip(),
            last_paragraph=last_paragraph,
        )

    def to_preview_request(self, path_name: str, path_description: str) -> PreviewRequest:
        return PreviewRequest(
            story_context=self.story_context(),
            path_name=path_name,
            path_description=path_description,
        )


# =============================================================================
# DIRECTIONS
# =============================================================================

@dataclass(frozen=True)
class BareDirection:
    """A direction sent as a plain string."""
    text: str


@dataclass(frozen=True)
class StructuredDirection:
    """A direction sent as an object; either field may be missing."""
    name: Optional[str] = None
    description: Optional[str] = None


DirectionSource = Union[BareDirection, StructuredDirection]


@dataclass(frozen=True)
class Direction:
    """A normalized continuation path. ``index`` is 0-based; display adds one."""
    index: int
    name: str
    description: str

    @property
    def number(self) -> int:
        return self.index + 1


def default_direction_name(index: int) -> str:
    return f"{DIRECTION_NAME_PREFIX}{index + 1}"


def classify_direction(raw: Union[str, DirectionPayload, dict]) -> DirectionSource:
    """Tag a raw direction value with its shape."""
    if isinstance(raw, DirectionPayload):
        return StructuredDirection(raw.name, raw.description)
    if isinstance(raw, dict):
        return StructuredDirection(raw.get("name"), raw.get("description"))
    return BareDirection(str(raw))


def normalize_direction(index: int, source: DirectionSource) -> Direction:
    if isinstance(source, StructuredDirection):
        return Direction(
            index=index,
            name=source.name or default_direction_name(index),
            description=source.description or "",
        )
    return Direction(index=index, name=default_direction_name(index), description=source.text)


def normalize_directions(raw_directions: Optional[Sequence]) -> List[Direction]:
    """Resolve each raw direction once, preserving response order."""
    return [
        normalize_direction(index, classify_direction(raw))
        for index, raw in enumerate(raw_directions or [])
    ]
