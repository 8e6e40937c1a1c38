from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from plengi_installer import __version__
from plengi_installer.cli.config import CLIConfig
from plengi_installer.cli.output import get_console, print_json, steps_table, structured_error
from plengi_installer.exceptions import ConfigError, DocumentIOError
from plengi_installer.installer import detect_entry_point, install_sdk
from plengi_installer.logging_config import logger, setup_logging

app = typer.Typer(no_args_is_help=True)
console = get_console()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: tables, colors and log output on stderr (also via PLENGI_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level (human mode only)"),
):
    """
    plengi-installer: add Plengi SDK initialization to an Xcode project.

    Machine mode is DEFAULT (plain text, no formatting).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
    if CLIConfig.is_machine_mode():
        setup_logging(suppress_console=True, force=True)
    else:
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=False, force=True)


def _config_error(e: ConfigError, root: Path, json_output: bool) -> None:
    if CLIConfig.is_machine_mode() or json_output:
        print_json(structured_error(
            code="CONFIG_ERROR", message=str(e), input_value=str(root), actionable_fix="Fix plengi.toml"
        ))
    else:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
    raise typer.Exit(code=2)


@app.command()
def install(
    root: Optional[Path] = typer.Argument(None, help="Workspace folder containing the .xcodeproj. Defaults to CWD."),
    client_id: str = typer.Option(..., "--client-id", "-i", prompt="Client ID", help="Plengi client ID"),
    client_secret: str = typer.Option(
        ..., "--client-secret", "-s", prompt="Client secret", hide_input=True, help="Plengi client secret"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the diff but don't write"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Insert the Plengi SDK initialization code into the app entry point.

    AppDelegate.swift is edited when it exists (after the
    didFinishLaunchingWithOptions signature); otherwise the @main App struct
    gets the code in its init().
    """
    root = root if root is not None else Path.cwd()
    try:
        result = install_sdk(root, client_id, client_secret, dry_run=dry_run)
    except ConfigError as e:
        _config_error(e, root, json_output)

    if json_output:
        payload = result.model_dump(mode="json")
        payload["status"] = "ok" if result.success else "error"
        print_json(payload)
    elif CLIConfig.is_machine_mode():
        typer.echo(result.message)
        if result.diff:
            typer.echo(result.diff, nl=False)
    else:
        console.print(steps_table(result))
        color = "green" if result.success else "red"
        console.print(f"[{color}]{escape(result.message)}[/{color}]")
        if result.diff:
            console.print(result.diff, markup=False, highlight=False)

    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def detect(
    root: Optional[Path] = typer.Argument(None, help="Workspace folder containing the .xcodeproj. Defaults to CWD."),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show which file and anchor line an install would use, without editing.
    """
    root = root if root is not None else Path.cwd()
    try:
        report = detect_entry_point(root)
    except ConfigError as e:
        _config_error(e, root, json_output)
    except DocumentIOError as e:
        logger.error(str(e))
        if CLIConfig.is_machine_mode() or json_output:
            print_json(structured_error(code="IO_ERROR", message=str(e), input_value=str(root)))
        else:
            console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if json_output:
        print_json(report)
    else:
        for key, value in report.items():
            console.print(f"[cyan]{key}[/cyan]: {escape(str(value))}")

    if report["file"] is None:
        raise typer.Exit(code=1)


@app.command()
def version():
    """
    Prints the current version of plengi-installer.
    """
    typer.echo(f"plengi-installer v{__version__}")


if __name__ == "__main__":
    app()
