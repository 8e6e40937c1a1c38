"""
Mutation package: heuristic insertion of the Plengi SDK initialization block.

Works on Swift source as lines, without a parser: the classifier finds an
anchor line by keyword co-occurrence and the engine inserts the import and
the snippet relative to it.
"""

from .facade import MutationFacade
from .classifier import EntryPointClassifier, code_parts
from .editor import CodeEditor, SourceDocument
from .engine import MutationEngine, AppliedEdit
from .formatter import CodeFormatter
from .import_manager import ImportManager
from .snippet import render_branch, render_constructor, render_lines
from .config import (
    get_mutation_config,
    BRANCH_TEMPLATE,
    CONSTRUCTOR_TEMPLATE,
    INDENT_DETECTION,
)

__all__ = [
    # Main facade
    "MutationFacade",

    # Components
    "EntryPointClassifier",
    "code_parts",
    "CodeEditor",
    "SourceDocument",
    "MutationEngine",
    "AppliedEdit",
    "CodeFormatter",
    "ImportManager",
    "render_branch",
    "render_constructor",
    "render_lines",

    # Configuration
    "get_mutation_config",
    "BRANCH_TEMPLATE",
    "CONSTRUCTOR_TEMPLATE",
    "INDENT_DETECTION",
]
