"""SDK insertion tool."""
from pathlib import Path
from typing import Optional

from plengi_installer.exceptions import ConfigError
from plengi_installer.installer import install_sdk
from plengi_installer.logging_config import logger


def register(mcp):
    @mcp.tool()
    def install_plengi_sdk(
        client_id: str,
        client_secret: str,
        root: Optional[str] = None,
        dry_run: bool = False,
    ) -> dict:
        """
        Insert Plengi SDK initialization code into an Xcode project.

        Edits AppDelegate.swift after the didFinishLaunchingWithOptions
        signature when it exists, otherwise the @main App struct's init().
        Running it again on an installed project changes nothing.

        Args:
            client_id: Plengi client ID
            client_secret: Plengi client secret
            root: Workspace folder containing the .xcodeproj (default: server CWD)
            dry_run: Return the diff without writing

        Returns:
            dict with:
            - status: "ok" for inserted / already-present, "error" otherwise
            - outcome: inserted, already-present, no-anchor, not-a-project,
              no-entry-point, no-workspace, invalid-credentials, io-error
            - message: human-readable outcome
            - file: edited (or candidate) file
            - steps: per-step states (credentials, project, entry-point, insertion)
            - diff: unified diff when code was inserted
        """
        workspace = Path(root) if root else Path.cwd()
        try:
            result = install_sdk(workspace, client_id, client_secret, dry_run=dry_run)
        except ConfigError as e:
            logger.error(f"install_plengi_sdk: {e}")
            return {
                "status": "error",
                "error_type": "config_error",
                "message": str(e),
            }

        response = {
            "status": "ok" if result.success else "error",
            "outcome": result.outcome.value,
            "message": result.message,
            "file": result.file_path,
            "kind": result.kind.value if result.kind else None,
            "dry_run": result.dry_run,
            "steps": [event.model_dump(mode="json") for event in result.steps],
        }
        if not result.success:
            response["error_type"] = result.outcome.value.replace("-", "_")
        if result.diff:
            response["diff"] = result.diff
        return response
