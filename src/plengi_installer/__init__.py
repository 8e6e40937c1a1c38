"""
plengi-installer - Plengi SDK setup for Xcode projects

Finds an app's entry point and inserts the SDK initialization code.
"""

__version__ = "0.3.0"

# Core exports
from plengi_installer.installer import install_sdk, detect_entry_point, require_workspace, validate_credentials
from plengi_installer.mutation import MutationFacade
from plengi_installer.scanner import locate_entry_point
from plengi_installer.schemas import Credentials, InstallOutcome, InstallResult

__all__ = [
    "__version__",
    "install_sdk",
    "detect_entry_point",
    "validate_credentials",
    "require_workspace",
    "MutationFacade",
    "locate_entry_point",
    "Credentials",
    "InstallOutcome",
    "InstallResult",
]
