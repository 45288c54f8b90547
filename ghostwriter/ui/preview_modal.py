"""
Preview Modal

State of the direction-preview modal. Every preview request takes a generation
token from ``begin``; results are written back through ``apply``.
"""

from ghostwriter.core.logging_config import get_logger

logger = get_logger("ui.preview_modal")


class PreviewModal:
    """
    Shared target for all preview requests.

    With ``discard_stale`` off, results land in arrival order, so a slow earlier
    request can overwrite a newer one. With it on, only the latest token writes.
    """

    def __init__(self, discard_stale: bool = False):
        self.discard_stale = discard_stale
        self.visible = False
        self.title = ""
        self.body = ""
        self._generation = 0

    @property
    def latest_token(self) -> int:
        return self._generation

    def begin(self, title: str, loading_body: str) -> int:
        """Open the modal in its loading state and issue a new token."""
        self._generation += 1
        self.title = title
        self.body = loading_body
        self.visible = True
        return self._generation

    def apply(self, token: int, body: str) -> bool:
        """Write a result body. Returns False if it was discarded as stale."""
        if token != self._generation:
            if self.discard_stale:
                logger.debug(f"Discarding stale preview {token} (latest {self._generation})")
                return False
            logger.debug(f"Preview {token} completed after {self._generation} started")
        self.body = body
        return True

    def close(self) -> None:
        self.visible = False
