# Custom exceptions for plengi-installer

class InstallerError(Exception):
    """Base exception for all application-specific errors."""
    pass

class CredentialError(InstallerError):
    """Raised when a client credential is empty or cannot be embedded in Swift source."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)

class WorkspaceError(InstallerError):
    """Raised when no usable workspace folder was given."""
    def __init__(self, root: str):
        self.root = root
        super().__init__(f"No workspace folder is open: {root}")

class ProjectNotRecognizedError(InstallerError):
    """Raised when the workspace root holds no .xcodeproj or .xcworkspace bundle."""
    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Not an Xcode project: {root}")

class EntryPointNotFoundError(InstallerError):
    """Raised when neither an AppDelegate.swift nor an @main file exists under the root."""
    def __init__(self, root: str, delegate_file: str = "AppDelegate.swift", root_marker: str = "@main"):
        self.root = root
        super().__init__(f"Could not find {delegate_file} or an {root_marker} file under {root}")

class DocumentIOError(InstallerError):
    """Raised when a source document cannot be read or written back."""
    def __init__(self, file_path: str, operation: str, cause: Exception):
        self.file_path = file_path
        self.operation = operation
        super().__init__(f"Failed to {operation} {file_path}: {cause}")

class ConfigError(InstallerError):
    """Raised for configuration-related problems."""
    pass
