"""
Pytest Configuration and Fixtures

Shared fixtures for all tests. The remote service is replaced by an
``httpx.MockTransport`` routed through ``FakeService``.
"""

import inspect
import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from ghostwriter.client.api_client import GhostwriterClient
from ghostwriter.core.config import ClientSettings
from ghostwriter.flows.controller import GhostwriterController
from ghostwriter.ui.view_model import ViewModel


class FakeService:
    """Routes requests to per-path handlers and records every request."""

    def __init__(self):
        self.handlers: Dict[str, Callable] = {}
        self.requests: List[httpx.Request] = []

    def on(self, path: str, handler: Callable) -> None:
        """Register a handler; it may be sync or async and may raise."""
        self.handlers[path] = handler

    def reply(self, path: str, status: int = 200, json_body: Any = None, content: bytes = None) -> None:
        def handler(request):
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json_body)
        self.on(path, handler)

    def fail(self, path: str, exc_type=httpx.ConnectError) -> None:
        def handler(request):
            raise exc_type("connection refused", request=request)
        self.on(path, handler)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"error": "not found"})
        response = handler(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def json_sent(self, path: str, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.calls_to(path)[index].content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def settings() -> ClientSettings:
    """Settings pointing at a fake host, toasts never auto-hide."""
    return ClientSettings(base_url="http://ghostwriter.test", toast_duration=0)


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def view(settings) -> ViewModel:
    return ViewModel.from_settings(settings)


@pytest_asyncio.fixture
async def client(settings, service):
    api = GhostwriterClient(settings, transport=service.transport)
    yield api
    await api.aclose()


@pytest_asyncio.fixture
async def controller(settings, client, view):
    ctrl = GhostwriterController(settings, client=client, view=view)
    yield ctrl
    view.notifications.hide()


@pytest.fixture
def sample_story_text() -> str:
    return (
        "Mara pressed her back against the cold brick. "
        "Somewhere below, the stairwell door groaned open."
    )


@pytest.fixture
def noir_response() -> Dict[str, Any]:
    """Analysis response with an empty bridge and bare-string directions."""
    return {
        "genre_detected": "Noir",
        "tone_detected": "Tense",
        "source": "ai",
        "key_entities": ["Mara"],
        "narrative_bridge": "",
        "directions": ["Flee", "Fight"],
    }


@pytest.fixture
def structured_response() -> Dict[str, Any]:
    """Template-engine response with structured directions."""
    return {
        "genre_detected": "Fantasy",
        "tone_detected": "Epic",
        "source": "template",
        "key_entities": ["Aldric", "Seren"],
        "narrative_bridge": "Aldric's story reaches a critical turning point. Three paths lie ahead:",
        "directions": [
            {"name": "The Chosen Path", "description": "Aldric discovers the prophecy was meant for someone else"},
            {"name": "The Betrayer's Path", "description": "A trusted ally reveals a secret allegiance"},
            {"description": "Aldric unlocks ancient magic at the cost of his memories"},
        ],
    }
