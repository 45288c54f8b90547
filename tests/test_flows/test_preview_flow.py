"""
Tests for the Preview Flow

Tests for ghostwriter/flows/preview.py
"""

import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from ghostwriter.flows.base import FlowStatus
from ghostwriter.flows.controller import GhostwriterController
from ghostwriter.ui.view_model import ViewModel


async def analyzed(controller, service, response, text):
    service.reply("/api/analyze", 200, response)
    controller.edit_main_text(text)
    result = await controller.click_analyze()
    assert result.success
    return controller


@pytest_asyncio.fixture
async def ready(controller, service, noir_response, sample_story_text):
    """Controller with the noir directions already rendered."""
    return await analyzed(controller, service, noir_response, sample_story_text)


class TestPreconditions:

    @pytest.mark.asyncio
    async def test_nothing_rendered(self, controller, service):
        result = await controller.click_direction(0)

        assert result.status == FlowStatus.SKIPPED
        assert service.requests == []
        assert not controller.view.preview.visible

    @pytest.mark.asyncio
    async def test_index_out_of_range(self, ready, service):
        result = await ready.click_direction(5)

        assert result.status == FlowStatus.SKIPPED
        assert service.calls_to("/api/expand") == []

    @pytest.mark.asyncio
    async def test_hidden_after_failed_analysis(self, ready, service):
        service.fail("/api/analyze")
        assert (await ready.click_analyze()).status == FlowStatus.FAILED

        result = await ready.click_direction(0)

        assert result.status == FlowStatus.SKIPPED
        assert service.calls_to("/api/expand") == []
        assert not ready.view.preview.visible

    @pytest.mark.asyncio
    async def test_hidden_while_analysis_in_flight(self, ready, service, noir_response):
        started = asyncio.Event()
        release = asyncio.Event()

        async def handler(request):
            started.set()
            await release.wait()
            return httpx.Response(200, json=noir_response)

        service.on("/api/analyze", handler)

        analysis = asyncio.create_task(ready.click_analyze())
        await started.wait()
        result = await ready.click_direction(0)
        release.set()
        await analysis

        assert result.status == FlowStatus.SKIPPED
        assert service.calls_to("/api/expand") == []


class TestPreview:

    @pytest.mark.asyncio
    async def test_success(self, ready, service):
        service.reply("/api/expand", 200, {"preview": "Mara bolted for the fire escape."})

        result = await ready.click_direction(0)

        modal = ready.view.preview
        assert result.success
        assert result.value == "Mara bolted for the fire escape."
        assert modal.visible
        assert modal.title == "Path 1"
        assert modal.body == '<p class="preview-text">Mara bolted for the fire escape.</p>'

    @pytest.mark.asyncio
    async def test_request_uses_card_attributes(self, ready, service, sample_story_text):
        service.reply("/api/expand", 200, {"preview": "x"})

        await ready.click_direction(1)

        assert service.json_sent("/api/expand") == {
            "storyContext": sample_story_text,
            "pathName": "Path 2",
            "pathDescription": "Fight",
        }

    @pytest.mark.asyncio
    async def test_story_context_prefers_long_context(self, ready, service):
        service.reply("/api/expand", 200, {"preview": "x"})
        ready.edit_long_context("  The whole novel so far.  ")

        await ready.click_direction(0)

        assert service.json_sent("/api/expand")["storyContext"] == "The whole novel so far."

    @pytest.mark.asyncio
    async def test_loading_state_while_in_flight(self, ready, service):
        seen = {}

        def handler(request):
            seen["visible"] = ready.view.preview.visible
            seen["body"] = ready.view.preview.body
            return httpx.Response(200, json={"preview": "x"})

        service.on("/api/expand", handler)

        await ready.click_direction(0)

        assert seen["visible"]
        assert 'class="spinner"' in seen["body"]
        assert "Generating preview..." in seen["body"]

    @pytest.mark.asyncio
    async def test_missing_preview(self, ready, service):
        service.reply("/api/expand", 200, {})

        result = await ready.click_direction(0)

        assert result.value == "No preview available."
        assert "No preview available." in ready.view.preview.body

    @pytest.mark.asyncio
    async def test_error_status_still_uses_body(self, ready, service):
        service.reply("/api/expand", 500, {"preview": "Template fallback text"})

        result = await ready.click_direction(0)

        assert result.success
        assert result.value == "Template fallback text"

    @pytest.mark.asyncio
    async def test_failure(self, ready, service):
        service.fail("/api/expand")

        result = await ready.click_direction(0)

        assert result.status == FlowStatus.FAILED
        assert result.value == "Failed to generate preview."
        assert ready.view.preview.visible
        assert "Failed to generate preview." in ready.view.preview.body

    @pytest.mark.asyncio
    async def test_escaped_names_read_back(self, controller, service, sample_story_text):
        response = {"directions": [{"name": 'The "Red" Door & Key', "description": "<run>"}]}
        await analyzed(controller, service, response, sample_story_text)
        service.reply("/api/expand", 200, {"preview": "x"})

        await controller.click_direction(0)

        sent = service.json_sent("/api/expand")
        assert sent["pathName"] == 'The "Red" Door & Key'
        assert sent["pathDescription"] == "<run>"
        assert controller.view.preview.title == 'The "Red" Door & Key'


class TestConcurrentPreviews:
    """Preview A is slow, preview B is fast; A completes last."""

    async def _race(self, controller, service):
        a_started = asyncio.Event()
        release_a = asyncio.Event()

        async def handler(request):
            body = json.loads(request.content)
            if body["pathName"] == "Path 1":
                a_started.set()
                await release_a.wait()
                return httpx.Response(200, json={"preview": "A text"})
            return httpx.Response(200, json={"preview": "B text"})

        service.on("/api/expand", handler)

        task_a = asyncio.create_task(controller.click_direction(0))
        await a_started.wait()
        result_b = await controller.click_direction(1)
        assert controller.view.preview.title == "Path 2"
        assert "B text" in controller.view.preview.body

        release_a.set()
        result_a = await task_a
        return result_a, result_b

    @pytest.mark.asyncio
    async def test_last_arrival_wins_by_default(self, ready, service):
        result_a, result_b = await self._race(ready, service)

        assert result_a.success and result_b.success
        assert ready.view.preview.title == "Path 2"
        assert "A text" in ready.view.preview.body
        assert len(service.calls_to("/api/expand")) == 2

    @pytest.mark.asyncio
    async def test_stale_result_discarded_when_enabled(
        self, settings, client, service, noir_response, sample_story_text
    ):
        strict = settings.model_copy(update={"discard_stale_previews": True})
        controller = GhostwriterController(strict, client=client, view=ViewModel.from_settings(strict))
        await analyzed(controller, service, noir_response, sample_story_text)

        await self._race(controller, service)

        assert controller.view.preview.title == "Path 2"
        assert "B text" in controller.view.preview.body

    @pytest.mark.asyncio
    async def test_close_during_flight_stays_closed(self, ready, service):
        release = asyncio.Event()

        async def handler(request):
            await release.wait()
            return httpx.Response(200, json={"preview": "late"})

        service.on("/api/expand", handler)

        task = asyncio.create_task(ready.click_direction(0))
        await asyncio.sleep(0)
        while not ready.view.preview.visible:
            await asyncio.sleep(0)
        ready.click_preview_close()
        release.set()
        await task

        assert not ready.view.preview.visible
