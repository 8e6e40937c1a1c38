"""
CodeFormatter: indentation detection and snippet re-indentation.
"""

from typing import List, Optional

from .config import INDENT_DETECTION, TEMPLATE_INDENT


class CodeFormatter:
    """
    Handle code indentation for inserted blocks.

    Features:
    - Detect document indentation style (spaces vs tabs)
    - Reindent code blocks under an anchor line
    """

    def __init__(self, default_indent: str = TEMPLATE_INDENT):
        self.default_indent = default_indent

    def format_code_block(
        self,
        code: str,
        base_indent: str,
        indent_unit: Optional[str] = None,
        source_unit: str = TEMPLATE_INDENT,
    ) -> List[str]:
        """
        Reindent a code block so its outermost lines start at base_indent.

        Args:
            code: Code block to reindent
            base_indent: Prefix for the block's outermost lines
            indent_unit: Indent unit of the target document
            source_unit: Indent unit the block was written with

        Returns:
            Reindented lines
        """
        indent_unit = indent_unit or self.default_indent
        lines = code.split('\n')

        # Find minimum indentation in code block (base level)
        min_indent = float('inf')
        for line in lines:
            if line.strip():
                min_indent = min(min_indent, len(self.get_indent(line)))

        if min_indent == float('inf'):
            min_indent = 0

        reindented_lines = []
        for line in lines:
            if not line.strip():
                reindented_lines.append("")
            else:
                indent = self.get_indent(line)
                relative_level = (len(indent) - min_indent) // len(source_unit)
                reindented_lines.append(base_indent + indent_unit * relative_level + line.lstrip())

        return reindented_lines

    def detect_indentation(self, lines: List[str]) -> str:
        """
        Detect indentation style from document lines.

        Returns:
            Indent unit string (e.g., "    ", "  " or "\t")
        """
        sample_lines = lines[:INDENT_DETECTION["max_sample_lines"]]

        tab_count = 0
        space_count = 0
        space_widths = {}

        for line in sample_lines:
            if not line.strip():
                continue

            indent = self.get_indent(line)
            if '\t' in indent:
                tab_count += 1
            elif len(indent) > 0:
                space_count += 1
                width = len(indent)
                space_widths[width] = space_widths.get(width, 0) + 1

        if tab_count > space_count:
            return "\t"
        if space_count > 0 and space_widths:
            # Smallest common width is the unit (nested lines are multiples of it)
            smallest = min(space_widths)
            if smallest >= 4 and smallest % 4 == 0:
                return "    "
            if smallest >= 2 and smallest % 2 == 0:
                return "  "
        return self.default_indent

    def get_indent(self, line: str) -> str:
        """Extract indentation from a line."""
        return line[:len(line) - len(line.lstrip())]
