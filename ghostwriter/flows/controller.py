"""
Ghostwriter Controller

Event surface of the writing assistant. Each method corresponds to one user
interaction and delegates to the view model or a flow.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from ghostwriter.client.api_client import GhostwriterClient
from ghostwriter.core.config import ClientSettings, get_settings
from ghostwriter.core.logging_config import get_logger
from ghostwriter.flows.analysis import AnalysisFlow
from ghostwriter.flows.base import FlowResult
from ghostwriter.flows.preview import PreviewFlow
from ghostwriter.flows.upload import UploadFlow
from ghostwriter.ui.view_model import ViewModel

logger = get_logger("flows.controller")


class GhostwriterController:
    """
    Wires the view model to the three flows.

    Usage:
        async with GhostwriterController(settings) as controller:
            controller.edit_main_text(text)
            await controller.click_analyze()
            await controller.click_direction(0)
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        client: Optional[GhostwriterClient] = None,
        view: Optional[ViewModel] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or GhostwriterClient(self.settings)
        self.view = view or ViewModel.from_settings(self.settings)

        self.upload_flow = UploadFlow(self.client, self.view, self.settings.allowed_extensions)
        self.analysis_flow = AnalysisFlow(self.client, self.view, self.settings.min_input_chars)
        self.preview_flow = PreviewFlow(self.client, self.view)

    async def __aenter__(self) -> "GhostwriterController":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.view.notifications.hide()
        await self.client.aclose()

    # =========================================================================
    #  EDITOR
    # =========================================================================

    def edit_main_text(self, text: str) -> None:
        self.view.set_main_text(text)

    def edit_long_context(self, text: str) -> None:
        self.view.input.long_context = text

    def edit_short_memory(self, text: str) -> None:
        self.view.input.short_memory = text

    # =========================================================================
    #  UPLOAD AREA
    # =========================================================================

    async def select_file(self, path: Union[str, Path]) -> FlowResult:
        return await self.upload_flow.run_path(path)

    def drag_over(self) -> None:
        self.view.upload_area.dragover = True

    def drag_leave(self) -> None:
        self.view.upload_area.dragover = False

    async def drop_files(self, paths: Sequence[Union[str, Path]]) -> Optional[FlowResult]:
        """Only the first dropped file is uploaded."""
        self.view.upload_area.dragover = False
        if not paths:
            return None
        if len(paths) > 1:
            logger.debug(f"Ignoring {len(paths) - 1} extra dropped file(s)")
        return await self.select_file(paths[0])

    # =========================================================================
    #  ANALYSIS / PREVIEW
    # =========================================================================

    async def click_analyze(self) -> FlowResult:
        return await self.analysis_flow.run()

    async def click_direction(self, index: int) -> FlowResult:
        return await self.preview_flow.run(index)

    def click_preview_close(self) -> None:
        self.view.preview.close()

    def click_overlay(self, on_backdrop: bool) -> None:
        """Clicks on the backdrop close the modal; clicks inside its content do not."""
        if on_backdrop:
            self.view.preview.close()

    async def key_down(
        self,
        key: str,
        ctrl: bool = False,
        meta: bool = False,
        in_editor: bool = False,
    ) -> Optional[FlowResult]:
        """Escape closes the preview; Ctrl/Cmd+Enter in the editor analyzes."""
        if key == "Escape":
            self.view.preview.close()
            return None
        if key == "Enter" and in_editor and (ctrl or meta):
            return await self.click_analyze()
        return None
