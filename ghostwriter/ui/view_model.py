"""
Ghostwriter View Model

The single owned view state of the writing assistant. Flows never touch page
regions directly; they go through the fields and scopes defined here.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from ghostwriter.core.config import ClientSettings
from ghostwriter.core.constants import (
    ANALYZE_LABEL_BUSY,
    ANALYZE_LABEL_IDLE,
    UPLOAD_STATUS_DEFAULT,
)
from ghostwriter.models.story import InputState
from ghostwriter.render.markup import RenderedResults
from ghostwriter.render.pipeline import UIModel
from ghostwriter.ui.notification_manager import NotificationManager
from ghostwriter.ui.preview_modal import PreviewModal


class BusyScope:
    """
    Context manager that holds a busy state for the duration of a block.

    ``release`` runs on every exit path, including exceptions, which are never
    suppressed.
    """

    def __init__(self, acquire: Callable[[], None], release: Callable[[], None]):
        self._acquire = acquire
        self._release = release

    def __enter__(self):
        self._acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._release()
        return False


@dataclass
class UploadArea:
    """Drop zone / file picker."""
    status_text: str = UPLOAD_STATUS_DEFAULT
    uploading: bool = False
    uploaded: bool = False
    dragover: bool = False


@dataclass
class AnalyzeButton:
    """Trigger control for the analysis flow."""
    disabled: bool = False
    label: str = ANALYZE_LABEL_IDLE


@dataclass
class ResultsPanel:
    """Rendered analysis. Hiding it keeps the previous content."""
    visible: bool = False
    model: Optional[UIModel] = None
    markup: Optional[RenderedResults] = None
    scroll_requests: int = 0

    @property
    def bridge_text(self) -> str:
        return self.model.bridge if self.model else ""

    @property
    def bridge_visible(self) -> bool:
        return bool(self.model and self.model.bridge_visible)

    def replace(self, model: UIModel, markup: RenderedResults) -> None:
        """Swap in a new result set wholesale."""
        self.model = model
        self.markup = markup

    def reveal(self) -> None:
        self.visible = True
        self.scroll_requests += 1


@dataclass
class ViewModel:
    """Everything the page shows."""
    input: InputState = field(default_factory=InputState)
    upload_area: UploadArea = field(default_factory=UploadArea)
    analyze_button: AnalyzeButton = field(default_factory=AnalyzeButton)
    loading_visible: bool = False
    results: ResultsPanel = field(default_factory=ResultsPanel)
    preview: PreviewModal = field(default_factory=PreviewModal)
    notifications: NotificationManager = field(default_factory=NotificationManager)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "ViewModel":
        return cls(
            preview=PreviewModal(discard_stale=settings.discard_stale_previews),
            notifications=NotificationManager(duration=settings.toast_duration),
        )

    # =========================================================================
    #  INPUT
    # =========================================================================

    @property
    def word_count(self) -> int:
        return self.input.word_count

    @property
    def char_count(self) -> int:
        return self.input.char_count

    def set_main_text(self, text: str) -> None:
        self.input.main_text = text

    # =========================================================================
    #  BUSY SCOPES
    # =========================================================================

    def analysis_busy(self) -> BusyScope:
        """Disable the trigger, hide old results, show the loading indicator."""
        def acquire():
            self.analyze_button.disabled = True
            self.analyze_button.label = ANALYZE_LABEL_BUSY
            self.results.visible = False
            self.loading_visible = True

        def release():
            self.analyze_button.disabled = False
            self.analyze_button.label = ANALYZE_LABEL_IDLE
            self.loading_visible = False

        return BusyScope(acquire, release)

    def upload_busy(self) -> BusyScope:
        def acquire():
            self.upload_area.uploading = True

        def release():
            self.upload_area.uploading = False

        return BusyScope(acquire, release)

    @property
    def busy(self) -> bool:
        return self.analyze_button.disabled or self.upload_area.uploading
