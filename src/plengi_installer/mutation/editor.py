"""
CodeEditor: read source documents and write them back atomically.
"""

import difflib
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from plengi_installer.exceptions import DocumentIOError
from plengi_installer.logging_config import logger


BOM = "\ufeff"


@dataclass
class SourceDocument:
    """
    A source file held as '\\n'-split lines for the duration of one edit.

    line_ending and bom record the file's original encoding details so
    write-back can restore them.
    """
    path: str
    lines: List[str]
    line_ending: str = "\n"
    bom: bool = False
    original_text: str = field(default="", repr=False)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def modified(self) -> bool:
        return self.text != self.original_text.removeprefix(BOM).replace("\r\n", "\n")


class CodeEditor:
    """
    Perform whole-file reads and writes for source documents.

    Features:
    - Atomic writes (temp file + rename)
    - UTF-8 encoding handling
    - Line ending preservation (LF/CRLF)
    - Unified diff previews
    """

    def __init__(self, preserve_line_endings: bool = True):
        self.preserve_line_endings = preserve_line_endings

    def read_document(self, file_path: str) -> SourceDocument:
        """
        Read a file into a SourceDocument.

        Raises:
            DocumentIOError: If the file cannot be read or decoded.
        """
        try:
            # newline='' keeps CRLF intact so it can be detected
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise DocumentIOError(file_path, "read", e) from e

        line_ending = self._detect_line_ending(content)
        # The BOM is kept off line 0 so the first line matches like any other
        bom = content.startswith(BOM)
        lines = content.removeprefix(BOM).replace('\r\n', '\n').split('\n')
        return SourceDocument(
            path=file_path,
            lines=lines,
            line_ending=line_ending,
            bom=bom,
            original_text=content,
        )

    def render(self, document: SourceDocument) -> str:
        """Return the text that write_document would put on disk."""
        text = document.text
        if self.preserve_line_endings:
            text = self._normalize_line_endings(text, document.line_ending)
        return BOM + text if document.bom else text

    def write_document(self, document: SourceDocument) -> None:
        """
        Write a document back to its path in one atomic replace.

        Raises:
            DocumentIOError: If the write fails. The original file is left as it was.
        """
        self._atomic_write(document.path, self.render(document))
        logger.info(f"Wrote {len(document.lines)} lines to {document.path}")

    def _atomic_write(self, file_path: str, content: str) -> None:
        """
        Write file atomically using temp file + rename.

        Args:
            file_path: Target file path
            content: Content to write
        """
        path = Path(file_path)

        try:
            # Create temp file in same directory as target
            # This ensures same filesystem for atomic rename
            fd, temp_path = tempfile.mkstemp(
                dir=str(path.parent),
                prefix=f".{path.name}.",
                suffix=".tmp"
            )
        except OSError as e:
            logger.error(f"Failed to create temp file: {e}")
            raise DocumentIOError(file_path, "write", e) from e

        try:
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
            if path.exists():
                os.chmod(temp_path, path.stat().st_mode & 0o7777)
            os.replace(temp_path, str(path))
            logger.debug(f"Atomic write completed: {file_path}")
        except OSError as e:
            # Clean up temp file on error
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            logger.error(f"Failed during atomic write: {e}")
            raise DocumentIOError(file_path, "write", e) from e

    def _detect_line_ending(self, content: str) -> str:
        """
        Detect line ending style (LF vs CRLF).

        Returns:
            '\\r\\n' for CRLF, '\\n' for LF
        """
        if '\r\n' in content:
            return '\r\n'
        return '\n'

    def _normalize_line_endings(self, content: str, line_ending: str) -> str:
        """
        Normalize line endings to match detected style.
        """
        content = content.replace('\r\n', '\n')
        if line_ending == '\r\n':
            content = content.replace('\n', '\r\n')
        return content

    def generate_unified_diff(
        self,
        file_path: str,
        original_content: str,
        modified_content: str,
    ) -> str:
        """
        Generate unified diff between original and modified content.
        """
        original_lines = original_content.replace('\r\n', '\n').splitlines(keepends=True)
        modified_lines = modified_content.replace('\r\n', '\n').splitlines(keepends=True)

        return ''.join(difflib.unified_diff(
            original_lines,
            modified_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
        ))

    def diff_document(self, document: SourceDocument) -> str:
        return self.generate_unified_diff(document.path, document.original_text, self.render(document))
