"""
Ghostwriter API Client

Async client for the remote analysis service.

Endpoints:
- POST /api/upload   multipart ``file``      -> {text, filename} | {error}
- POST /api/analyze  AnalysisRequest (JSON)  -> AnalysisResponse
- POST /api/expand   PreviewRequest (JSON)   -> PreviewResult

No retries are attempted; every failure surfaces as a RemoteError or TransportError.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ghostwriter.core.config import ClientSettings, get_settings
from ghostwriter.core.constants import (
    ANALYZE_ENDPOINT,
    EXPAND_ENDPOINT,
    UPLOAD_ENDPOINT,
    UPLOAD_FIELD,
)
from ghostwriter.core.exceptions import RemoteError, TransportError
from ghostwriter.core.logging_config import get_logger
from ghostwriter.models.wire import (
    AnalysisRequest,
    AnalysisResponse,
    PreviewRequest,
    PreviewResult,
    UploadResult,
)

logger = get_logger("client.api")


class GhostwriterClient:
    """
    Thin wrapper around one ``httpx.AsyncClient``.

    Usage:
        async with GhostwriterClient(settings) as client:
            response = await client.analyze(request)
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._http = httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GhostwriterClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # =========================================================================
    #  ENDPOINTS
    # =========================================================================

    async def upload(self, filename: str, content: bytes) -> UploadResult:
        """Submit a file for text extraction."""
        response = await self._post(
            UPLOAD_ENDPOINT,
            files={UPLOAD_FIELD: (filename, content)},
            timeout=self.settings.upload_timeout,
        )
        # The body decides first: a reported error wins over the status code
        data = self._decode(response)
        error_message = data.get("error")
        if error_message:
            raise RemoteError(response.status_code, str(error_message))
        if response.is_error:
            raise RemoteError(response.status_code)
        return self._validate(UploadResult, data)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """Request an analysis of the current story."""
        response = await self._post(ANALYZE_ENDPOINT, json=request.to_wire())
        if response.is_error:
            raise RemoteError(response.status_code)
        return self._validate(AnalysisResponse, self._decode(response))

    async def expand(self, request: PreviewRequest) -> PreviewResult:
        """Request a preview of one direction. The status code is not inspected."""
        response = await self._post(EXPAND_ENDPOINT, json=request.to_wire())
        return self._validate(PreviewResult, self._decode(response))

    # =========================================================================
    #  HELPERS
    # =========================================================================

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"POST {path}")
        try:
            response = await self._http.post(path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"POST {path} failed: {e!r}")
            raise TransportError(f"{type(e).__name__}: {e}") from e
        logger.debug(f"POST {path} -> {response.status_code}")
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Malformed JSON from {response.request.url.path}: {e}") from e
        if not isinstance(data, dict):
            raise TransportError(
                f"Expected a JSON object from {response.request.url.path}, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def _validate(model, data: Dict[str, Any]):
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Unexpected {model.__name__} shape: {e}") from e
