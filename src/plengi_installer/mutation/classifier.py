"""
EntryPointClassifier: find the anchor line in a Swift entry-point file.

Matching is line-oriented keyword co-occurrence, not parsing:

- Delegate callback: the first code line containing both the delegate
  keyword ("func application") and the launch-options parameter
  ("didFinishLaunchingWithOptions").
- Annotated root: the first code line at or after the root marker ("@main")
  containing the type keyword ("struct" as a whole word) and the root type
  fragment ("App"). Without a marker line the search starts at the top.
- Constructor: an "init()" line (access modifiers allowed) that sits directly
  in the root declaration's body, found by brace depth counting. The anchor is
  the line that opens its body. A constructor whose body opens and closes on
  one line has no line to insert after, so the file has no anchor.

Comments (line and block) and string literals are ignored when matching and
when counting braces, so commented-out code is never an anchor.
"""

import re
from typing import Any, Dict, List, Optional

from plengi_installer.config import get_settings
from plengi_installer.logging_config import logger
from plengi_installer.schemas import EntryPointKind, InsertionTarget


_STRING_LITERAL = re.compile(r'"(?:[^"\\]|\\.)*"')
_CONSTRUCTOR = re.compile(
    r"^(?:(?:public|internal|private|fileprivate|override|convenience|required|@\w+)\s+)*init\s*\(\s*\)"
)


def code_parts(lines: List[str]) -> List[str]:
    """
    Return each line stripped of string literals and comments.

    Block comment state carries across lines in one top-to-bottom pass.
    Lines that are entirely comment come back as "".
    """
    parts = []
    in_block = False
    for line in lines:
        code = _STRING_LITERAL.sub('""', line.strip())
        kept = []
        i = 0
        while i < len(code):
            if in_block:
                end = code.find("*/", i)
                if end == -1:
                    break
                in_block = False
                i = end + 2
                continue
            line_comment = code.find("//", i)
            block_comment = code.find("/*", i)
            if line_comment != -1 and (block_comment == -1 or line_comment < block_comment):
                kept.append(code[i:line_comment])
                break
            if block_comment == -1:
                kept.append(code[i:])
                break
            kept.append(code[i:block_comment])
            in_block = True
            i = block_comment + 2
        parts.append("".join(kept).strip())
    return parts


class EntryPointClassifier:
    """
    Decide which entry-point convention a document uses and where to insert.
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        entry_point = (settings or get_settings())["entry_point"]
        self.delegate_keyword = entry_point["delegate_keyword"]
        self.launch_options = entry_point["launch_options"]
        self.root_marker = entry_point["root_marker"]
        self.root_type_fragment = entry_point["root_type_fragment"]
        self._root_type_keyword = re.compile(rf"\b{re.escape(entry_point['root_type_keyword'])}\b")

    def find_delegate_callback(self, codes: List[str]) -> Optional[int]:
        for i, code in enumerate(codes):
            if self.delegate_keyword in code and self.launch_options in code:
                return i
        return None

    def find_root_marker(self, codes: List[str]) -> Optional[int]:
        for i, code in enumerate(codes):
            if self.root_marker in code:
                return i
        return None

    def find_root_declaration(self, codes: List[str]) -> Optional[int]:
        start = self.find_root_marker(codes) or 0
        for i in range(start, len(codes)):
            code = codes[i]
            if self._root_type_keyword.search(code) and self.root_type_fragment in code:
                return i
        return None

    def find_constructor(self, codes: List[str], declaration_index: int) -> Optional[int]:
        """
        Return the index of an init() line directly inside the declaration body.
        """
        depth = 0
        opened = False
        for i in range(declaration_index, len(codes)):
            code = codes[i]
            if opened and depth == 1 and _CONSTRUCTOR.match(code):
                return i
            for char in code:
                if char == "{":
                    depth += 1
                    opened = True
                elif char == "}":
                    depth -= 1
            if opened and depth <= 0:
                break
        return None

    def find_constructor_body(self, codes: List[str], constructor_index: int) -> Optional[int]:
        """
        Return the line that opens the constructor body and leaves it open.

        Returns None for a body that closes on the same line, such as
        "init() { setup() }", or when other code precedes the opening brace.
        """
        for i in range(constructor_index, len(codes)):
            code = codes[i]
            if "{" not in code:
                if i == constructor_index or not code:
                    continue
                return None
            if code.count("{") > code.count("}"):
                return i
            return None
        return None

    def classify(
        self,
        lines: List[str],
        kind: Optional[EntryPointKind] = None,
    ) -> Optional[InsertionTarget]:
        """
        Find the insertion target in a document.

        Args:
            lines: Document lines
            kind: Convention the locator resolved for this file. The delegate
                  callback is always tried first; a DELEGATE_CALLBACK file
                  never falls back to the annotated root.

        Returns:
            InsertionTarget, or None if no anchor line exists
        """
        codes = code_parts(lines)

        index = self.find_delegate_callback(codes)
        if index is not None:
            logger.debug(f"Delegate callback found at line {index + 1}")
            return InsertionTarget(kind=EntryPointKind.DELEGATE_CALLBACK, line_index=index)
        if kind == EntryPointKind.DELEGATE_CALLBACK:
            logger.debug("Delegate file has no launch callback")
            return None

        index = self.find_root_declaration(codes)
        if index is None:
            logger.debug("No application root declaration found")
            return None

        constructor_index = self.find_constructor(codes, index)
        if constructor_index is None:
            logger.debug(f"Application root found at line {index + 1}")
            return InsertionTarget(kind=EntryPointKind.ANNOTATED_ROOT, line_index=index)

        body_index = self.find_constructor_body(codes, constructor_index)
        if body_index is None:
            logger.warning(f"init() at line {constructor_index + 1} has no open body to insert into")
            return None

        logger.debug(f"Application root found at line {index + 1}, init() body at line {body_index + 1}")
        return InsertionTarget(
            kind=EntryPointKind.ANNOTATED_ROOT,
            line_index=index,
            has_constructor=True,
            constructor_index=body_index,
        )
