"""
Upload Flow

Validates a selected file, sends it to the service and replaces the editor text
with what the service extracted.
"""

from pathlib import Path
from typing import Callable, Iterable, Union

from ghostwriter.client.api_client import GhostwriterClient
from ghostwriter.core.constants import (
    DEFAULT_ALLOWED_EXTENSIONS,
    TOAST_INVALID_FILE_TYPE,
    TOAST_UPLOAD_FAILED,
    TOAST_UPLOAD_LOADED,
    UPLOAD_STATUS_DEFAULT,
    UPLOAD_STATUS_LOADED,
    UPLOAD_STATUS_UPLOADING,
)
from ghostwriter.core.exceptions import InvalidFileTypeError, RemoteError, ServiceError
from ghostwriter.core.logging_config import get_logger
from ghostwriter.flows.base import FlowResult
from ghostwriter.models.wire import UploadResult
from ghostwriter.ui.notification_manager import NotificationType
from ghostwriter.ui.view_model import ViewModel

logger = get_logger("flows.upload")


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot, or '' when there is no dot."""
    _, dot, ext = filename.rpartition(".")
    return ext.lower() if dot else ""


class UploadFlow:
    """Upload a .pdf or .txt file and load its text into the editor."""

    def __init__(
        self,
        client: GhostwriterClient,
        view: ViewModel,
        allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
    ):
        self.client = client
        self.view = view
        self.allowed_extensions = [ext.lower() for ext in allowed_extensions]

    def validate(self, filename: str) -> None:
        if file_extension(filename) not in self.allowed_extensions:
            raise InvalidFileTypeError(filename, self.allowed_extensions)

    async def run(self, filename: str, content: Union[bytes, Callable[[], bytes]]) -> FlowResult[UploadResult]:
        """
        Upload one file.

        Args:
            filename: Name sent to the service; its extension is checked first
            content: File bytes, or a callable that reads them once validation passed

        Returns:
            FlowResult carrying the UploadResult on success
        """
        view = self.view
        try:
            self.validate(filename)
        except InvalidFileTypeError as e:
            logger.warning(f"Rejected upload: {e}")
            view.notifications.show(TOAST_INVALID_FILE_TYPE, NotificationType.WARNING)
            return FlowResult.rejected(e)

        logger.info(f"Uploading {filename}")
        view.upload_area.status_text = UPLOAD_STATUS_UPLOADING.format(filename=filename)

        with view.upload_busy():
            try:
                data = content() if callable(content) else content
                result = await self.client.upload(filename, data)
            except RemoteError as e:
                logger.error(f"Upload of {filename} rejected by service: {e}")
                return self._fail(e, e.remote_message or TOAST_UPLOAD_FAILED)
            except ServiceError as e:
                logger.error(f"Upload of {filename} failed: {e}")
                return self._fail(e, TOAST_UPLOAD_FAILED)
            except Exception as e:
                logger.exception(f"Unexpected error uploading {filename}")
                return self._fail(e, TOAST_UPLOAD_FAILED)

            view.set_main_text(result.text)
            view.upload_area.status_text = UPLOAD_STATUS_LOADED.format(filename=result.filename)
            view.upload_area.uploaded = True
            view.notifications.show(
                TOAST_UPLOAD_LOADED.format(filename=result.filename), NotificationType.SUCCESS
            )

        logger.info(f"Loaded {result.filename}: {view.word_count} words, {view.char_count} chars")
        return FlowResult.completed(result)

    async def run_path(self, path: Union[str, Path]) -> FlowResult[UploadResult]:
        """Upload a file from disk; nothing is read if the extension is rejected."""
        path = Path(path)
        return await self.run(path.name, path.read_bytes)

    def _fail(self, error: Exception, message: str) -> FlowResult[UploadResult]:
        self.view.upload_area.status_text = UPLOAD_STATUS_DEFAULT
        self.view.notifications.show(message, NotificationType.ERROR)
        return FlowResult.failed(error)
