"""
Render the SDK initialization block for a given set of credentials.
"""

from typing import Any, Dict, List, Optional

from plengi_installer.schemas import Credentials
from .config import BRANCH_TEMPLATE, CONSTRUCTOR_TEMPLATE, TEMPLATE_INDENT
from .formatter import CodeFormatter


def render_branch(credentials: Credentials, config: Dict[str, Any]) -> str:
    """
    Render the if/else block that calls the SDK initializer.

    Credentials are substituted verbatim into Swift string literals; the
    Credentials model has already rejected values that would break them.
    """
    return BRANCH_TEMPLATE.format(
        init_call=config["init_call"],
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
        success_case=config["success_case"],
        module=config["module"],
    )


def render_constructor(credentials: Credentials, config: Dict[str, Any]) -> str:
    """Render an init() block wrapping the initialization branch."""
    body = "\n".join(
        TEMPLATE_INDENT + line if line else line
        for line in render_branch(credentials, config).split("\n")
    )
    return CONSTRUCTOR_TEMPLATE.format(body=body)


def render_lines(
    credentials: Credentials,
    config: Dict[str, Any],
    base_indent: str,
    indent_unit: str,
    with_constructor: bool = False,
    formatter: Optional[CodeFormatter] = None,
) -> List[str]:
    """
    Render the snippet as document lines starting at base_indent.
    """
    formatter = formatter or CodeFormatter()
    code = render_constructor(credentials, config) if with_constructor else render_branch(credentials, config)
    return formatter.format_code_block(code, base_indent, indent_unit)
