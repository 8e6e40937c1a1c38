"""Tests for the install and diagnostics MCP tools."""
import pytest


class TestInstallTool:

    @pytest.mark.asyncio
    async def test_inserts_into_delegate(self, delegate_project, mcp_client, unwrap):
        result = unwrap(await mcp_client.call_tool(
            "install_plengi_sdk",
            {"client_id": "abc123", "client_secret": "s3cret", "root": str(delegate_project)},
        ))

        assert result["status"] == "ok"
        assert result["outcome"] == "inserted"
        assert result["kind"] == "delegate-callback"
        assert [step["state"] for step in result["steps"]] == ["success"] * 4
        assert "+import Plengi" in result["diff"]
        content = (delegate_project / "Weather" / "AppDelegate.swift").read_text()
        assert content.count("Plengi.initialize(") == 1

    @pytest.mark.asyncio
    async def test_second_call_is_already_present(self, swiftui_project, mcp_client, unwrap):
        args = {"client_id": "abc123", "client_secret": "s3cret", "root": str(swiftui_project)}
        await mcp_client.call_tool("install_plengi_sdk", args)
        result = unwrap(await mcp_client.call_tool("install_plengi_sdk", args))

        assert result["status"] == "ok"
        assert result["outcome"] == "already-present"
        assert "diff" not in result

    @pytest.mark.asyncio
    async def test_blank_secret(self, delegate_project, mcp_client, unwrap):
        result = unwrap(await mcp_client.call_tool(
            "install_plengi_sdk",
            {"client_id": "abc123", "client_secret": "", "root": str(delegate_project)},
        ))

        assert result["status"] == "error"
        assert result["error_type"] == "invalid_credentials"
        assert result["steps"][0] == {"step": "credentials", "state": "failed", "detail": "Client secret must not be empty."}
        assert "Plengi" not in (delegate_project / "Weather" / "AppDelegate.swift").read_text()

    @pytest.mark.asyncio
    async def test_not_a_project(self, temp_dir, mcp_client, unwrap):
        result = unwrap(await mcp_client.call_tool(
            "install_plengi_sdk",
            {"client_id": "abc123", "client_secret": "s3cret", "root": str(temp_dir)},
        ))

        assert result["status"] == "error"
        assert result["error_type"] == "not_a_project"


class TestDiagnosticsTools:

    @pytest.mark.asyncio
    async def test_detect(self, swiftui_project, mcp_client, unwrap):
        result = unwrap(await mcp_client.call_tool(
            "detect_plengi_entry_point", {"root": str(swiftui_project)}
        ))

        assert result["status"] == "ok"
        assert result["kind"] == "annotated-root"
        assert result["anchor_line"] == 4
        assert not result["has_constructor"]

    @pytest.mark.asyncio
    async def test_health_check(self, mcp_client, unwrap):
        result = unwrap(await mcp_client.call_tool("health_check", {}))

        assert result["status"] == "healthy"
        assert result["sdk_module"] == "Plengi"
