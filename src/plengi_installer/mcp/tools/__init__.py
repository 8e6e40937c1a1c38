"""MCP tool registrations."""

__all__ = [
    "install",
    "diagnostics",
]
