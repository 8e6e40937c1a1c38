"""
ImportManager: make sure the SDK module is imported.
"""

import re
from typing import List, Optional

from plengi_installer.logging_config import logger
from .classifier import code_parts


# `import UIKit`, `@testable import Foo`, `import struct Foo.Bar`
_IMPORT_LINE = re.compile(r"^(?:@\w+\s+)*import\s+\S")


class ImportManager:
    """
    Manage the vendor module import in a Swift document.

    Features:
    - Detect an existing import of the module, whatever its attributes,
      trailing semicolon or trailing comment
    - Find the line after the last import statement
    - Insert the import there, or at the top of the file when none exist
    """

    def __init__(self, module: str):
        self.module = module
        self.import_statement = f"import {module}"
        self._module_import = re.compile(rf"^(?:@\w+\s+)*import\s+{re.escape(module)}\s*;?$")

    def has_import(self, lines: List[str]) -> bool:
        return any(self._module_import.match(code) for code in code_parts(lines))

    def find_insertion_index(self, lines: List[str]) -> int:
        """
        Return the index the import line should be inserted at.

        Args:
            lines: Document lines

        Returns:
            Index right after the last import statement, or 0 if there is none
        """
        last_import_line = -1
        for i, code in enumerate(code_parts(lines)):
            if _IMPORT_LINE.match(code):
                last_import_line = i
        return last_import_line + 1

    def ensure_import(self, lines: List[str]) -> Optional[int]:
        """
        Insert the module import into lines in place if it is missing.

        Returns:
            Index of the inserted line, or None if the import already existed
        """
        if self.has_import(lines):
            return None
        index = self.find_insertion_index(lines)
        lines.insert(index, self.import_statement)
        logger.debug(f"Inserted '{self.import_statement}' at line {index + 1}")
        return index
