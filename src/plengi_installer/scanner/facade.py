import os
import time
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from plengi_installer.config import get_settings
from plengi_installer.exceptions import EntryPointNotFoundError, ProjectNotRecognizedError
from plengi_installer.logging_config import logger
from plengi_installer.schemas import EntryPointFile, EntryPointKind
from .config import build_ignore_spec


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Could not access '{error.filename}'. Skipping. Error: {error}")


def iter_files(
    directory: Path,
    suffix: Optional[str] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> Iterator[Path]:
    """
    Walk a project tree depth-first, yielding files in name order.

    Version-control, build-artifact and project-bundle directories are pruned
    and never descended into. Entries that cannot be listed are logged and
    skipped.

    Args:
        directory: The root directory to start the walk from.
        suffix: Only yield files with this suffix (e.g., '.swift').
        settings: Merged settings; defaults to get_settings().
    """
    directory = Path(directory)
    settings = settings or get_settings()
    project = settings["project"]
    spec = build_ignore_spec(project["skip_dirs"], project["bundle_suffixes"])

    for root, dirs, files in os.walk(directory, onerror=_log_walk_error):
        root_path = Path(root)

        # Prune ignored directories in-place so os.walk never descends into them
        original_dirs = sorted(dirs)
        dirs[:] = []
        for d in original_dirs:
            dir_path_to_check = (root_path / d).relative_to(directory)
            if spec.match_file(f"{dir_path_to_check.as_posix()}/"):
                logger.debug(f"Ignoring directory '{dir_path_to_check}' due to ignore rules.")
            else:
                dirs.append(d)

        for file_name in sorted(files):
            if suffix and not file_name.endswith(suffix):
                continue
            yield root_path / file_name


def is_xcode_project(root: Path, settings: Optional[Dict[str, Any]] = None) -> bool:
    """
    Check whether the root directory directly contains an Xcode project or workspace bundle.
    """
    settings = settings or get_settings()
    suffixes = tuple(settings["project"]["bundle_suffixes"])
    try:
        return any(entry.name.endswith(suffixes) for entry in Path(root).iterdir())
    except OSError as e:
        logger.warning(f"Could not list '{root}': {e}")
        return False


def require_project(root: Path, settings: Optional[Dict[str, Any]] = None) -> None:
    """
    Raises:
        ProjectNotRecognizedError: If root is not an Xcode project.
    """
    if not is_xcode_project(root, settings):
        raise ProjectNotRecognizedError(str(root))


def find_file(root: Path, file_name: str, settings: Optional[Dict[str, Any]] = None) -> Optional[Path]:
    """
    Return the first file named file_name under root, or None.
    """
    for path in iter_files(root, settings=settings):
        if path.name == file_name:
            return path
    return None


def find_annotated_file(
    root: Path,
    marker: Optional[str] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> Optional[Path]:
    """
    Return the first source file under root whose content contains marker.

    Unreadable files are logged and skipped.
    """
    settings = settings or get_settings()
    entry_point = settings["entry_point"]
    marker = marker or entry_point["root_marker"]

    for path in iter_files(root, suffix=entry_point["source_suffix"], settings=settings):
        try:
            content = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.warning(f"Could not read '{path}'. Skipping. Error: {e}")
            continue
        if marker in content:
            return path
    return None


def locate_entry_point(root: Path, settings: Optional[Dict[str, Any]] = None) -> EntryPointFile:
    """
    Resolve the file to edit and which entry-point convention it follows.

    A file named like the app delegate wins outright; only when none exists
    anywhere in the tree are source files searched for the root marker.

    Raises:
        EntryPointNotFoundError: If neither convention is found.
    """
    start_time = time.time()
    settings = settings or get_settings()
    entry_point = settings["entry_point"]
    root = Path(root)
    logger.info(f"Searching for an entry point under '{root}'")

    delegate = find_file(root, entry_point["delegate_file"], settings)
    if delegate is not None:
        logger.info(f"Found delegate file '{delegate}' in {time.time() - start_time:.2f}s")
        return EntryPointFile(path=str(delegate), kind=EntryPointKind.DELEGATE_CALLBACK)

    annotated = find_annotated_file(root, settings=settings)
    if annotated is not None:
        logger.info(f"Found {entry_point['root_marker']} file '{annotated}' in {time.time() - start_time:.2f}s")
        return EntryPointFile(path=str(annotated), kind=EntryPointKind.ANNOTATED_ROOT)

    raise EntryPointNotFoundError(str(root), entry_point["delegate_file"], entry_point["root_marker"])
