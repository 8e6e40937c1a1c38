"""MCP interface: the message boundary between a setup UI and the installer."""
from .server import create_server, run_server

__all__ = ["create_server", "run_server"]
