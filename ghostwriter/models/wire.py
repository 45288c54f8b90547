"""
Wire Models

Pydantic models for the JSON bodies exchanged with the remote service.
Field names follow Python conventions; aliases carry the wire spelling.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    """Base for wire models: accept either spelling, ignore unknown keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Serialize with wire aliases."""
        return self.model_dump(by_alias=True)


class AnalysisRequest(WireModel):
    """Body of POST /api/analyze."""
    full_context: str = Field(alias="fullContext")
    short_memory: str = Field(default="", alias="shortMemory")
    last_paragraph: str = Field(alias="lastParagraph")


class DirectionPayload(WireModel):
    """A structured direction as sent by the service. Both fields may be absent."""
    name: Optional[str] = None
    description: Optional[str] = None


class AnalysisResponse(WireModel):
    """Body returned by POST /api/analyze. Everything but ``source`` is optional."""
    genre_detected: Optional[str] = None
    tone_detected: Optional[str] = None
    source: Optional[str] = None
    key_entities: Optional[List[str]] = None
    narrative_bridge: Optional[str] = None
    directions: Optional[List[Union[DirectionPayload, str]]] = None

    @field_validator("key_entities", mode="before")
    @classmethod
    def _coerce_entities(cls, value: Any) -> Optional[List[str]]:
        if not isinstance(value, list):
            return None
        return ["" if item is None else str(item) for item in value]

    @field_validator("directions", mode="before")
    @classmethod
    def _coerce_directions(cls, value: Any) -> Optional[list]:
        if not isinstance(value, list):
            return None
        coerced = []
        for item in value:
            if isinstance(item, dict):
                coerced.append({
                    "name": _optional_text(item.get("name")),
                    "description": _optional_text(item.get("description")),
                })
            elif item is None:
                coerced.append({})
            elif isinstance(item, bool):
                coerced.append(str(item).lower())
            else:
                coerced.append(item if isinstance(item, str) else str(item))
        return coerced

    @field_validator("genre_detected", "tone_detected", "source", "narrative_bridge", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)


class PreviewRequest(WireModel):
    """Body of POST /api/expand."""
    story_context: str = Field(alias="storyContext")
    path_name: str = Field(alias="pathName")
    path_description: str = Field(alias="pathDescription")


class PreviewResult(WireModel):
    """Body returned by POST /api/expand."""
    preview: Optional[str] = None

    @field_validator("preview", mode="before")
    @classmethod
    def _coerce_preview(cls, value: Any) -> Optional[str]:
        return _optional_text(value)


class UploadResult(WireModel):
    """Successful body returned by POST /api/upload."""
    text: str = ""
    filename: str = ""

    @field_validator("text", "filename", mode="before")
    @classmethod
    def _coerce_required_text(cls, value: Any) -> str:
        return _optional_text(value) or ""


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return None
    return str(value)
