"""
Preview Flow

Opens the preview modal for a direction card and fills it with a generated
preview. Invocations are independent: a new one never waits for, or cancels,
an older one still in flight.
"""

from ghostwriter.client.api_client import GhostwriterClient
from ghostwriter.core.constants import PREVIEW_FAILED, PREVIEW_MISSING
from ghostwriter.core.exceptions import GhostwriterError
from ghostwriter.core.logging_config import get_logger
from ghostwriter.flows.base import FlowResult
from ghostwriter.render.markup import (
    preview_loading_markup,
    preview_markup,
    read_card_attributes,
)
from ghostwriter.ui.view_model import ViewModel

logger = get_logger("flows.preview")


class PreviewFlow:
    """Generate an on-demand preview for one rendered direction."""

    def __init__(self, client: GhostwriterClient, view: ViewModel):
        self.client = client
        self.view = view

    async def run(self, card_index: int) -> FlowResult[str]:
        """
        Preview the card at ``card_index`` (0-based).

        Name and description are read back from the rendered card, not from
        the response the card was built from.

        Cards in a hidden results panel cannot be previewed.
        """
        results = self.view.results
        if results.markup is None:
            logger.warning("Preview requested before any directions were rendered")
            return FlowResult.skipped()
        if not results.visible:
            logger.debug("Ignoring preview request while results are hidden")
            return FlowResult.skipped()
        markup = results.markup
        try:
            name, description = read_card_attributes(markup.directions, card_index)
        except IndexError:
            logger.warning(f"No direction card at index {card_index}")
            return FlowResult.skipped()
        return await self.preview(name, description)

    async def preview(self, name: str, description: str) -> FlowResult[str]:
        modal = self.view.preview
        token = modal.begin(name, preview_loading_markup())
        request = self.view.input.to_preview_request(name, description)
        logger.info(f"Preview #{token} requested for {name!r}")

        try:
            result = await self.client.expand(request)
        except GhostwriterError as e:
            logger.error(f"Preview #{token} failed: {e}")
            self._apply(token, PREVIEW_FAILED)
            return FlowResult.failed(e, value=PREVIEW_FAILED)
        except Exception as e:
            logger.exception(f"Unexpected error in preview #{token}")
            self._apply(token, PREVIEW_FAILED)
            return FlowResult.failed(e, value=PREVIEW_FAILED)

        text = result.preview or PREVIEW_MISSING
        self._apply(token, text)
        return FlowResult.completed(text)

    def _apply(self, token: int, text: str) -> None:
        if self.view.preview.apply(token, preview_markup(text)):
            logger.info(f"Preview #{token} shown")
