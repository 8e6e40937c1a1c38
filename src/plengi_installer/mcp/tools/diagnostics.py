"""Diagnostics and health check tools."""
from pathlib import Path
from typing import Optional

from plengi_installer import __version__
from plengi_installer.config import get_settings
from plengi_installer.exceptions import ConfigError, DocumentIOError
from plengi_installer.installer import detect_entry_point


def register(mcp):
    @mcp.tool()
    def detect_plengi_entry_point(root: Optional[str] = None) -> dict:
        """
        Show which file and line an install would edit, without editing.

        Args:
            root: Workspace folder containing the .xcodeproj (default: server CWD)

        Returns:
            dict with status, project check, entry-point file, convention,
            1-indexed anchor line and whether the SDK is already initialized
        """
        workspace = Path(root) if root else Path.cwd()
        try:
            report = detect_entry_point(workspace)
        except (ConfigError, DocumentIOError) as e:
            return {
                "status": "error",
                "error_type": "config_error" if isinstance(e, ConfigError) else "io_error",
                "message": str(e),
            }
        return {"status": "ok" if report["file"] else "error", **report}

    @mcp.tool()
    def health_check() -> dict:
        """
        Check MCP server health and the active configuration.

        Returns:
            dict with status, version and the SDK module/call that will be inserted
        """
        try:
            settings = get_settings()
        except ConfigError as e:
            return {"status": "degraded", "version": __version__, "message": str(e)}
        return {
            "status": "healthy",
            "version": __version__,
            "sdk_module": settings["sdk"]["module"],
            "init_call": settings["sdk"]["init_call"],
            "delegate_file": settings["entry_point"]["delegate_file"],
            "root_marker": settings["entry_point"]["root_marker"],
        }
