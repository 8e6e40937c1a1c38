"""
End-to-end SDK installation: validate credentials, locate the project and
its entry point, then insert the initialization block.

Every failure maps to exactly one InstallOutcome; nothing is retried.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from plengi_installer.config import get_settings
from plengi_installer.exceptions import (
    CredentialError,
    DocumentIOError,
    EntryPointNotFoundError,
    ProjectNotRecognizedError,
    WorkspaceError,
)
from plengi_installer.logging_config import logger
from plengi_installer.mutation import MutationFacade
from plengi_installer.progress import ProgressListener, ProgressTracker
from plengi_installer.scanner import locate_entry_point, require_project
from plengi_installer.schemas import (
    Credentials,
    InstallOutcome,
    InstallResult,
    InstallStep,
    MutationOutcome,
)

PathLike = Union[str, Path]

MESSAGES = {
    InstallOutcome.INSERTED: "SDK initialization code inserted into {file}.",
    InstallOutcome.ALREADY_PRESENT: "SDK initialization code already exists in {file}.",
    InstallOutcome.NO_ANCHOR: "Could not find a suitable location to insert the code in {file}.",
    InstallOutcome.NOT_A_PROJECT: "Not an Xcode project: {root}.",
    InstallOutcome.NO_ENTRY_POINT: "Could not find {delegate_file} or an {root_marker} file.",
    InstallOutcome.NO_WORKSPACE: "No workspace folder is open.",
}

_MUTATION_OUTCOMES = {
    MutationOutcome.INSERTED: InstallOutcome.INSERTED,
    MutationOutcome.ALREADY_PRESENT: InstallOutcome.ALREADY_PRESENT,
    MutationOutcome.NO_ANCHOR: InstallOutcome.NO_ANCHOR,
}


def validate_credentials(client_id: Optional[str], client_secret: Optional[str]) -> Credentials:
    """
    Build Credentials from raw form input.

    Raises:
        CredentialError: If either value is empty after stripping or unsafe to embed.
    """
    return Credentials(client_id=client_id, client_secret=client_secret)


def require_workspace(root: Optional[PathLike]) -> Path:
    """
    Return root as a Path if it names an existing directory.

    Raises:
        WorkspaceError: If root is missing, blank or not a directory.
    """
    if root is None or str(root).strip() == "" or not Path(root).is_dir():
        raise WorkspaceError("" if root is None else str(root))
    return Path(root)


def install_sdk(
    root: Optional[PathLike],
    client_id: Optional[str],
    client_secret: Optional[str],
    dry_run: bool = False,
    listener: Optional[ProgressListener] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> InstallResult:
    """
    Insert the Plengi SDK initialization code into an Xcode project.

    Args:
        root: Workspace folder (the directory holding the .xcodeproj)
        client_id: Client ID as typed by the user
        client_secret: Client secret as typed by the user
        dry_run: Compute the edit and its diff without writing
        listener: Receives a ProgressEvent on every step transition
        settings: Merged settings; defaults to get_settings()

    Returns:
        InstallResult with the outcome, a human-readable message and step states
    """
    settings = settings or get_settings()
    entry_settings = settings["entry_point"]
    tracker = ProgressTracker(listener)
    root_str = str(root) if root is not None else ""

    def finish(outcome: InstallOutcome, message: str, **extra) -> InstallResult:
        log = logger.info if outcome in (InstallOutcome.INSERTED, InstallOutcome.ALREADY_PRESENT) else logger.warning
        log(f"{outcome.value}: {message}")
        return InstallResult(
            outcome=outcome,
            message=message,
            root=root_str,
            dry_run=dry_run,
            steps=tracker.snapshot(),
            **extra,
        )

    # 1. Credentials: rejected input never reaches the engine
    try:
        credentials = validate_credentials(client_id, client_secret)
    except CredentialError as e:
        tracker.fail(InstallStep.CREDENTIALS, e.message)
        return finish(InstallOutcome.INVALID_CREDENTIALS, e.message)
    tracker.succeed(InstallStep.CREDENTIALS)

    # 2. Project
    try:
        root_path = require_workspace(root)
    except WorkspaceError:
        message = MESSAGES[InstallOutcome.NO_WORKSPACE]
        tracker.fail(InstallStep.PROJECT, message)
        return finish(InstallOutcome.NO_WORKSPACE, message)

    try:
        require_project(root_path, settings)
    except ProjectNotRecognizedError:
        message = MESSAGES[InstallOutcome.NOT_A_PROJECT].format(root=root_path)
        tracker.fail(InstallStep.PROJECT, message)
        return finish(InstallOutcome.NOT_A_PROJECT, message)
    tracker.succeed(InstallStep.PROJECT, str(root_path))

    # 3. Entry point
    try:
        entry = locate_entry_point(root_path, settings)
    except EntryPointNotFoundError:
        message = MESSAGES[InstallOutcome.NO_ENTRY_POINT].format(**entry_settings)
        tracker.fail(InstallStep.ENTRY_POINT, message)
        return finish(InstallOutcome.NO_ENTRY_POINT, message)
    tracker.succeed(InstallStep.ENTRY_POINT, f"{entry.path} ({entry.kind.value})")

    # 4. Insertion
    facade = MutationFacade(settings)
    try:
        mutation = facade.install(entry.path, credentials, entry.kind, dry_run=dry_run)
    except DocumentIOError as e:
        tracker.fail(InstallStep.INSERTION, str(e))
        return finish(InstallOutcome.IO_ERROR, str(e), file_path=entry.path, kind=entry.kind)

    outcome = _MUTATION_OUTCOMES[mutation.outcome]
    message = MESSAGES[outcome].format(file=entry.path)
    if outcome == InstallOutcome.NO_ANCHOR:
        tracker.fail(InstallStep.INSERTION, message)
    else:
        tracker.succeed(InstallStep.INSERTION, message)

    return finish(
        outcome,
        message,
        file_path=entry.path,
        kind=entry.kind,
        diff=mutation.diff,
    )


def detect_entry_point(root: Optional[PathLike], settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Report the project check, the entry-point file and its anchor without editing.
    """
    settings = settings or get_settings()
    report: Dict[str, Any] = {
        "root": str(root) if root is not None else "",
        "workspace": False,
        "project": False,
        "file": None,
        "kind": None,
        "anchor_line": None,
        "has_constructor": False,
        "installed": False,
    }
    try:
        root_path = require_workspace(root)
    except WorkspaceError:
        return report
    report["workspace"] = True

    try:
        require_project(root_path, settings)
    except ProjectNotRecognizedError:
        return report
    report["project"] = True

    try:
        entry = locate_entry_point(root_path, settings)
    except EntryPointNotFoundError:
        return report
    report["file"] = entry.path
    report["kind"] = entry.kind.value

    facade = MutationFacade(settings)
    document = facade.editor.read_document(entry.path)
    report["installed"] = facade.engine.is_installed(document)
    target = facade.classifier.classify(document.lines, entry.kind)
    if target is not None:
        report["anchor_line"] = target.anchor_index + 1
        report["has_constructor"] = target.has_constructor
    return report
