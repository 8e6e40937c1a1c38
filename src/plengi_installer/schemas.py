from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from plengi_installer.exceptions import CredentialError


# Characters that would break out of a Swift string literal
_FORBIDDEN_CREDENTIAL_CHARS = ('"', "\\")

_FIELD_LABELS = {
    "client_id": "Client ID",
    "client_secret": "Client secret",
}


class EntryPointKind(str, Enum):
    """The two application entry-point conventions that can be edited."""
    DELEGATE_CALLBACK = "delegate-callback"
    ANNOTATED_ROOT = "annotated-root"


class MutationOutcome(str, Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already-present"
    NO_ANCHOR = "no-anchor"


class InstallOutcome(str, Enum):
    INSERTED = "inserted"
    ALREADY_PRESENT = "already-present"
    NO_ANCHOR = "no-anchor"
    NOT_A_PROJECT = "not-a-project"
    NO_ENTRY_POINT = "no-entry-point"
    NO_WORKSPACE = "no-workspace"
    INVALID_CREDENTIALS = "invalid-credentials"
    IO_ERROR = "io-error"


class InstallStep(str, Enum):
    CREDENTIALS = "credentials"
    PROJECT = "project"
    ENTRY_POINT = "entry-point"
    INSERTION = "insertion"


class StepState(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class Credentials(BaseModel):
    """
    Client credentials issued for the Plengi SDK.

    Values are stripped on construction. Empty values and values that cannot be
    placed inside a Swift string literal raise CredentialError.
    """
    client_id: str
    client_secret: str = Field(repr=False)

    @field_validator("client_id", "client_secret", mode="before")
    @classmethod
    def _check_embeddable(cls, value, info):
        label = _FIELD_LABELS[info.field_name]
        if value is None or not isinstance(value, str) or not value.strip():
            raise CredentialError(info.field_name, f"{label} must not be empty.")
        value = value.strip()
        for char in _FORBIDDEN_CREDENTIAL_CHARS:
            if char in value:
                raise CredentialError(
                    info.field_name,
                    f"{label} must not contain '{char}'.",
                )
        if any(ord(c) < 0x20 or ord(c) == 0x7F for c in value):
            raise CredentialError(
                info.field_name,
                f"{label} must not contain control characters.",
            )
        return value


class InsertionTarget(BaseModel):
    """
    Where the initialization block goes inside a source document.

    line_index is the 0-based index of the anchor line: the launch callback
    signature for DELEGATE_CALLBACK, the root type declaration for
    ANNOTATED_ROOT. constructor_index is set when an init() opening line was
    found inside the root declaration.
    """
    kind: EntryPointKind
    line_index: int
    has_constructor: bool = False
    constructor_index: Optional[int] = None

    @property
    def anchor_index(self) -> int:
        """Line after which the snippet is inserted."""
        if self.has_constructor and self.constructor_index is not None:
            return self.constructor_index
        return self.line_index


class EntryPointFile(BaseModel):
    """A candidate source file resolved by the project locator."""
    path: str
    kind: EntryPointKind


class MutationResult(BaseModel):
    """
    Result of applying the initialization block to one file.
    """
    outcome: MutationOutcome
    file_path: str
    target: Optional[InsertionTarget] = None
    anchor_line: Optional[int] = None  # 1-indexed line the snippet follows
    import_added: bool = False
    lines_added: int = 0
    written: bool = False
    diff: Optional[str] = None


class ProgressEvent(BaseModel):
    step: InstallStep
    state: StepState
    detail: Optional[str] = None


class InstallResult(BaseModel):
    """
    Outcome of a full install run, as reported to a CLI or MCP client.
    """
    outcome: InstallOutcome
    message: str
    root: str
    file_path: Optional[str] = None
    kind: Optional[EntryPointKind] = None
    dry_run: bool = False
    steps: List[ProgressEvent] = Field(default_factory=list)
    diff: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome in (InstallOutcome.INSERTED, InstallOutcome.ALREADY_PRESENT)
