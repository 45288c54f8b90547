"""
Ghostwriter Models

Wire models for the remote service and the client-side domain types.
"""

from .wire import (
    AnalysisRequest,
    AnalysisResponse,
    DirectionPayload,
    PreviewRequest,
    PreviewResult,
    UploadResult,
)
from .story import (
    InputState,
    BareDirection,
    StructuredDirection,
    Direction,
    classify_direction,
    normalize_direction,
    normalize_directions,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "DirectionPayload",
    "PreviewRequest",
    "PreviewResult",
    "UploadResult",
    "InputState",
    "BareDirection",
    "StructuredDirection",
    "Direction",
    "classify_direction",
    "normalize_direction",
    "normalize_directions",
]
