"""Tests for HTTP mode.

Uses httpx.AsyncClient with an ASGI transport; operations are mocked where
they would reach the external installer.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from rules_kit_mcp.api import create_app
from rules_kit_mcp.models import InstallRequest
from rules_kit_mcp.operations import RulesKitOperations


@pytest.fixture
def ops(settings):
    ops = RulesKitOperations(settings)
    ops.get_available_options = AsyncMock(return_value={"success": True, "installer_available": False})  # type: ignore[method-assign]
    ops.install_rules = AsyncMock(return_value={"success": True, "stack_installed": "laravel"})  # type: ignore[method-assign]
    return ops


@pytest.fixture
async def client(settings, ops):
    app = create_app(settings, ops)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


def _tool_payload(resp) -> dict:
    body = resp.json()
    assert body["content"][0]["type"] == "text"
    return json.loads(body["content"][0]["text"])


class TestOps:
    @pytest.mark.anyio()
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["server"] == "agent-rules-kit-mcp"
        assert "timestamp" in body

    @pytest.mark.anyio()
    async def test_info(self, client):
        body = (await client.get("/info")).json()
        assert body["capabilities"] == ["tools", "resources", "prompts"]
        assert body["tools"] == ["get_project_info", "get_available_options", "install_rules"]


class TestTools:
    @pytest.mark.anyio()
    async def test_list_tools(self, client):
        body = (await client.get("/tools")).json()
        names = {t["name"] for t in body["tools"]}
        assert names == {"get_project_info", "get_available_options", "install_rules"}
        assert all("inputSchema" in t for t in body["tools"])

    @pytest.mark.anyio()
    async def test_call_project_info(self, client, tmp_path):
        (tmp_path / "composer.json").write_text('{"require": {"laravel/framework": "^11.0"}}')
        resp = await client.post(
            "/tools/call",
            json={"name": "get_project_info", "arguments": {"project_path": str(tmp_path)}},
        )
        assert resp.status_code == 200
        payload = _tool_payload(resp)
        assert payload["detected_stack"]["stack"] == "Laravel"

    @pytest.mark.anyio()
    async def test_call_options_without_arguments(self, client, ops):
        resp = await client.post("/tools/call", json={"name": "get_available_options"})
        assert resp.status_code == 200
        assert _tool_payload(resp)["installer_available"] is False

    @pytest.mark.anyio()
    async def test_call_install_accepts_global_alias(self, client, ops):
        resp = await client.post(
            "/tools/call",
            json={
                "name": "install_rules",
                "arguments": {"stack": " laravel ", "global": True, "mcp_tools": ["pampa"]},
            },
        )
        assert resp.status_code == 200
        request = ops.install_rules.await_args.args[0]
        assert request == InstallRequest(stack="laravel", mcp_tools=["pampa"], global_install=True)

    @pytest.mark.anyio()
    async def test_unknown_tool(self, client):
        resp = await client.post("/tools/call", json={"name": "format_disk"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Unknown tool: format_disk"}

    @pytest.mark.anyio()
    async def test_invalid_arguments(self, client):
        resp = await client.post(
            "/tools/call",
            json={"name": "install_rules", "arguments": {"mcp_tools": "not-a-list"}},
        )
        assert resp.status_code == 422
        assert "mcp_tools" in resp.json()["message"]


class TestResourcesAndPrompts:
    @pytest.mark.anyio()
    async def test_list_resources(self, client):
        body = (await client.get("/resources")).json()
        assert len(body["resources"]) == 2

    @pytest.mark.anyio()
    async def test_read_resource(self, client):
        resp = await client.get("/resources/read", params={"uri": "agent-rules-kit://usage-guide"})
        assert resp.status_code == 200
        assert resp.json()["contents"][0]["text"].startswith("# Usage Guide")

    @pytest.mark.anyio()
    async def test_unknown_resource(self, client):
        resp = await client.get("/resources/read", params={"uri": "agent-rules-kit://nope"})
        assert resp.status_code == 404

    @pytest.mark.anyio()
    async def test_render_prompt(self, client):
        resp = await client.post(
            "/prompts/get",
            json={"name": "setup_project_rules", "arguments": {"project_path": "/app", "force_reinstall": True}},
        )
        message = resp.json()["messages"][0]
        assert message["role"] == "user"
        assert "Force reinstallation" in message["content"]["text"]

    @pytest.mark.anyio()
    async def test_unknown_prompt(self, client):
        resp = await client.post("/prompts/get", json={"name": "nope"})
        assert resp.status_code == 404
