"""CLI support modules: output mode configuration and machine-aware printing."""
