"""
Analysis Flow

Validates the editor text, sends an analysis request and hands the response to
the render pipeline. Only one analysis runs at a time: while it is in flight the
trigger is disabled and further clicks are dropped.
"""

from ghostwriter.client.api_client import GhostwriterClient
from ghostwriter.core.constants import (
    DEFAULT_MIN_INPUT_CHARS,
    TOAST_ANALYSIS_FAILED,
    TOAST_INSUFFICIENT_INPUT,
)
from ghostwriter.core.exceptions import GhostwriterError, InsufficientInputError
from ghostwriter.core.logging_config import get_logger
from ghostwriter.flows.base import FlowResult
from ghostwriter.render.markup import render_markup
from ghostwriter.render.pipeline import UIModel, render
from ghostwriter.ui.notification_manager import NotificationType
from ghostwriter.ui.view_model import ViewModel

logger = get_logger("flows.analysis")


class AnalysisFlow:
    """Analyze the current story and show the resulting directions."""

    def __init__(
        self,
        client: GhostwriterClient,
        view: ViewModel,
        min_input_chars: int = DEFAULT_MIN_INPUT_CHARS,
    ):
        self.client = client
        self.view = view
        self.min_input_chars = min_input_chars

    def validate(self) -> None:
        length = len(self.view.input.main_text.strip())
        if length < self.min_input_chars:
            raise InsufficientInputError(length, self.min_input_chars)

    async def run(self) -> FlowResult[UIModel]:
        view = self.view
        if view.analyze_button.disabled:
            logger.debug("Analysis already in flight, ignoring trigger")
            return FlowResult.skipped()

        try:
            self.validate()
        except InsufficientInputError as e:
            logger.warning(f"Rejected analysis: {e}")
            view.notifications.show(TOAST_INSUFFICIENT_INPUT, NotificationType.WARNING)
            return FlowResult.rejected(e)

        request = view.input.to_analysis_request()
        logger.info(
            f"Analyzing {len(request.last_paragraph)} chars "
            f"(context {len(request.full_context)}, memory {len(request.short_memory)})"
        )

        with view.analysis_busy():
            try:
                response = await self.client.analyze(request)
                model = render(response)
                markup = render_markup(model)
            except GhostwriterError as e:
                logger.error(f"Analysis failed: {e}")
                view.notifications.show(TOAST_ANALYSIS_FAILED, NotificationType.ERROR)
                return FlowResult.failed(e)
            except Exception as e:
                logger.exception("Unexpected error during analysis")
                view.notifications.show(TOAST_ANALYSIS_FAILED, NotificationType.ERROR)
                return FlowResult.failed(e)

            view.results.replace(model, markup)
            view.results.reveal()

        logger.info(
            f"Analysis complete: source={response.source!r}, "
            f"{len(model.entities)} entities, {len(model.directions)} directions"
        )
        return FlowResult.completed(model)
