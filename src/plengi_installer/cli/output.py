"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
import re
from typing import Any, Optional

import typer
from rich.console import Console as RichConsole
from rich.table import Table

from plengi_installer.cli.config import CLIConfig
from plengi_installer.schemas import InstallResult, StepState


_MARKUP = re.compile(r'\[/?[a-z ]+\]')

_STATE_STYLES = {
    StepState.PENDING: "[dim]pending[/dim]",
    StepState.SUCCESS: "[green]success[/green]",
    StepState.FAILED: "[red]failed[/red]",
}


class MachineAwareConsole:
    """
    A Console wrapper that automatically adapts output based on machine mode.
    Acts as a drop-in replacement for rich.console.Console.
    """

    def __init__(self):
        self._rich_console = RichConsole()

    def print(self, *args, **kwargs):
        """Print that respects machine mode."""
        if CLIConfig.is_machine_mode():
            for arg in args:
                if isinstance(arg, str):
                    plain = _MARKUP.sub('', arg).strip()
                    if plain:
                        typer.echo(plain)
                elif isinstance(arg, Table) or hasattr(arg, '__rich__'):
                    # Tables are human-mode only; use --json instead
                    pass
                elif arg:
                    typer.echo(arg)
        else:
            self._rich_console.print(*args, **kwargs)

    def __getattr__(self, name):
        """Delegate all other attributes to the rich console."""
        return getattr(self._rich_console, name)


# Console instance for rich output (machine-aware)
_console = MachineAwareConsole()


def get_console() -> MachineAwareConsole:
    return _console


def print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, separators=(',', ':')))


def structured_error(code: str, message: str, input_value: Optional[str] = None,
                     actionable_fix: Optional[str] = None) -> dict:
    """
    Create a structured error object for machine mode.

    Args:
        code: Error code (e.g., "NOT_A_PROJECT", "INVALID_CREDENTIALS")
        message: Human-readable error message
        input_value: The input that caused the error
        actionable_fix: Command to fix the issue

    Returns:
        Structured error dictionary
    """
    error_obj = {
        "status": "error",
        "code": code,
        "message": message
    }
    if input_value:
        error_obj["input"] = input_value
    if actionable_fix:
        error_obj["actionable_fix"] = actionable_fix
    return error_obj


def steps_table(result: InstallResult) -> Table:
    table = Table(title="Plengi SDK setup")
    table.add_column("Step", style="cyan")
    table.add_column("State")
    table.add_column("Detail", overflow="fold")
    for event in result.steps:
        table.add_row(event.step.value, _STATE_STYLES[event.state], event.detail or "")
    return table
