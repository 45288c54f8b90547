"""
Ghostwriter Flows

Upload, analysis and preview flows plus the controller that dispatches user
interactions to them.
"""

from .base import FlowResult, FlowStatus
from .upload import UploadFlow, file_extension
from .analysis import AnalysisFlow
from .preview import PreviewFlow
from .controller import GhostwriterController

__all__ = [
    "FlowResult",
    "FlowStatus",
    "UploadFlow",
    "file_extension",
    "AnalysisFlow",
    "PreviewFlow",
    "GhostwriterController",
]
