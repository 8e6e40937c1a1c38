"""
MutationEngine: the in-memory, idempotent insertion of the SDK block.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from plengi_installer.logging_config import logger
from plengi_installer.schemas import Credentials, EntryPointKind, InsertionTarget, MutationOutcome
from .editor import SourceDocument
from .formatter import CodeFormatter
from .import_manager import ImportManager
from .snippet import render_lines


@dataclass
class AppliedEdit:
    """What apply() did to a document."""
    outcome: MutationOutcome
    import_index: Optional[int] = None
    anchor_index: Optional[int] = None
    lines_added: int = 0


class MutationEngine:
    """
    Apply the initialization block to a SourceDocument.

    The new line sequence is computed on a copy and only assigned back to the
    document once every step succeeded, so a NO_ANCHOR or ALREADY_PRESENT
    outcome leaves the document untouched.
    """

    def __init__(self, config: Dict[str, Any], formatter: Optional[CodeFormatter] = None):
        self.config = config
        self.formatter = formatter or CodeFormatter(config.get("default_indent", "    "))
        self.import_manager = ImportManager(config["module"])

    def is_installed(self, document: SourceDocument) -> bool:
        return self.config["init_call"] in document.text

    def apply(
        self,
        document: SourceDocument,
        target: Optional[InsertionTarget],
        credentials: Credentials,
    ) -> AppliedEdit:
        """
        Insert the import and the initialization block.

        Args:
            document: Document to edit in place
            target: Anchor found by the classifier, or None
            credentials: Validated client credentials

        Returns:
            AppliedEdit with the outcome and where lines were inserted
        """
        # Checked before anything else, import included
        if self.is_installed(document):
            logger.info(f"'{self.config['init_call']}' already present in {document.path}")
            return AppliedEdit(outcome=MutationOutcome.ALREADY_PRESENT)

        if target is None or not 0 <= target.anchor_index < len(document.lines):
            logger.warning(f"No insertion anchor in {document.path}")
            return AppliedEdit(outcome=MutationOutcome.NO_ANCHOR)

        lines = list(document.lines)
        anchor = target.anchor_index
        indent_unit = self.formatter.detect_indentation(lines)
        base_indent = self.formatter.get_indent(lines[anchor]) + indent_unit
        with_constructor = target.kind == EntryPointKind.ANNOTATED_ROOT and not target.has_constructor

        snippet = render_lines(
            credentials,
            self.config,
            base_indent,
            indent_unit,
            with_constructor=with_constructor,
            formatter=self.formatter,
        )

        import_index = self.import_manager.ensure_import(lines)
        if import_index is not None and import_index <= anchor:
            anchor += 1

        lines[anchor + 1:anchor + 1] = snippet
        document.lines = lines

        logger.info(
            f"Inserted {len(snippet)} lines after line {anchor + 1} of {document.path}"
            + (" with constructor" if with_constructor else "")
        )
        return AppliedEdit(
            outcome=MutationOutcome.INSERTED,
            import_index=import_index,
            anchor_index=anchor,
            lines_added=len(snippet) + (1 if import_index is not None else 0),
        )
