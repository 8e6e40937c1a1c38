"""FastMCP server setup and tool registration."""
from fastmcp import FastMCP

from .tools import diagnostics, install


def create_server():
    """Create and configure the MCP server."""
    mcp = FastMCP("plengi-installer")

    # SDK insertion (the panel's "insert code" message)
    install.register(mcp)

    # Project / entry-point inspection and health
    diagnostics.register(mcp)

    return mcp


def run_server():
    """Run the MCP server."""
    server = create_server()
    server.run(show_banner=False)
