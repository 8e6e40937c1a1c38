"""
MutationFacade: orchestrate one SDK insertion into one file.
"""

from typing import Any, Dict, Optional

from plengi_installer.config import get_settings
from plengi_installer.logging_config import logger
from plengi_installer.schemas import (
    Credentials,
    EntryPointKind,
    InsertionTarget,
    MutationOutcome,
    MutationResult,
)

from .classifier import EntryPointClassifier
from .config import get_mutation_config
from .editor import CodeEditor
from .engine import MutationEngine


class MutationFacade:
    """
    Main facade for SDK insertion.

    Orchestrates the pipeline:
    1. Read the document fresh from disk (CodeEditor)
    2. Locate the anchor (EntryPointClassifier)
    3. Compute the edited line sequence in memory (MutationEngine)
    4. Write back once, only on INSERTED and not in dry-run (CodeEditor)
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self.settings = settings or get_settings()
        self.config = get_mutation_config(self.settings)

        self.classifier = EntryPointClassifier(self.settings)
        self.editor = CodeEditor(self.config["preserve_line_endings"])
        self.engine = MutationEngine(self.config)

        logger.debug("MutationFacade initialized")

    def inspect(self, file_path: str, kind: Optional[EntryPointKind] = None) -> Optional[InsertionTarget]:
        """
        Return the insertion target for a file without changing it.
        """
        document = self.editor.read_document(file_path)
        return self.classifier.classify(document.lines, kind)

    def install(
        self,
        file_path: str,
        credentials: Credentials,
        kind: Optional[EntryPointKind] = None,
        dry_run: bool = False,
    ) -> MutationResult:
        """
        Insert the SDK initialization block into a file.

        Args:
            file_path: Swift source file
            credentials: Validated client credentials
            kind: Convention resolved by the locator (None: detect)
            dry_run: If True, compute the diff but don't write

        Returns:
            MutationResult; written is True only for an INSERTED, non-dry-run edit

        Raises:
            DocumentIOError: If the file cannot be read or written.
        """
        logger.info(f"Installing SDK initialization into {file_path}")
        document = self.editor.read_document(file_path)

        target = None
        if not self.engine.is_installed(document):
            target = self.classifier.classify(document.lines, kind)

        applied = self.engine.apply(document, target, credentials)
        result = MutationResult(
            outcome=applied.outcome,
            file_path=file_path,
            target=target,
            import_added=applied.import_index is not None,
            lines_added=applied.lines_added,
        )

        if applied.outcome != MutationOutcome.INSERTED:
            return result

        result.anchor_line = applied.anchor_index + 1
        result.diff = self.editor.diff_document(document)

        if dry_run:
            logger.info(f"Dry run: {file_path} left unchanged")
            return result

        self.editor.write_document(document)
        result.written = True
        return result
