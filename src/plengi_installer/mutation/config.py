"""
Configuration for SDK code insertion.

Contains the snippet templates, indentation defaults and the per-run
mutation settings derived from the merged configuration.
"""

from typing import Any, Dict, Optional

from plengi_installer.config import get_settings


def get_mutation_config(settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Get mutation configuration from the merged settings.

    Resolved at call time so a plengi.toml in the working directory is honored.
    """
    settings = settings or get_settings()
    sdk = settings["sdk"]
    editing = settings["editing"]
    return {
        "module": sdk["module"],
        "init_call": sdk["init_call"],
        "success_case": sdk["success_case"],
        "import_statement": f"import {sdk['module']}",
        "preserve_line_endings": editing["preserve_line_endings"],
        "default_indent": editing["default_indent"],
    }


# Written with 4-space relative indentation; re-indented at render time.
# Doubled braces are literal Swift braces.
BRANCH_TEMPLATE = """\
if {init_call}(clientID: "{client_id}", clientSecret: "{client_secret}") == {success_case} {{
    // Register an echo code here if users must be identified per customer
    //  {module}.setEchoCode(echoCode: "<customer user identifier, no personal data>")
}} else {{
    // Initialization failed
}}"""

CONSTRUCTOR_TEMPLATE = """\
init() {{
{body}
}}"""

TEMPLATE_INDENT = "    "

INDENT_DETECTION = {
    "max_sample_lines": 100,   # Lines to sample for indent detection
}
