"""Error kinds and exceptions for secret document operations."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of error kinds.

    The value of each member is its user-facing message, so it can be
    printed directly by the CLI.
    """

    LOAD = "Error loading secrets file"
    PARSE = "Failed to parse yml"
    NOT_A_SECRET = "Not a Kubernetes secret"
    MISSING_KEY_PARAMETER = "Missing required parameter key"
    KEY_NOT_FOUND = "Key not found"
    CONFLICTING_UPDATE_SOURCE = "Can not use -u and -U together"
    UPDATE_SOURCE = "Failed opening file to update"
    MISSING_EDITOR = "Missing EDITOR environment variable"
    EDITOR_LAUNCH = "Failed to launch editor"
    EDITOR_PROCESS = "Editor exited with an error"
    TEMP_FILE = "Failed to use temporary file for editing"
    WRITE = "Failed to write secrets file"
    CORRUPT_VALUE = "Stored value is not valid base64"


class KubeSecretsError(Exception):
    """Base exception for all secret document errors."""

    kind: ErrorKind

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(self.kind.value)

    def __str__(self) -> str:
        return self.kind.value


class LoadError(KubeSecretsError):
    kind = ErrorKind.LOAD


class ParseError(KubeSecretsError):
    kind = ErrorKind.PARSE


class NotASecretError(KubeSecretsError):
    kind = ErrorKind.NOT_A_SECRET


class MissingKeyParameterError(KubeSecretsError):
    kind = ErrorKind.MISSING_KEY_PARAMETER


class KeyNotFoundError(KubeSecretsError):
    kind = ErrorKind.KEY_NOT_FOUND


class ConflictingUpdateSourceError(KubeSecretsError):
    kind = ErrorKind.CONFLICTING_UPDATE_SOURCE


class UpdateSourceError(KubeSecretsError):
    kind = ErrorKind.UPDATE_SOURCE


class MissingEditorError(KubeSecretsError):
    kind = ErrorKind.MISSING_EDITOR


class EditorLaunchError(KubeSecretsError):
    kind = ErrorKind.EDITOR_LAUNCH


class EditorProcessError(KubeSecretsError):
    """Editor could not be started, or exited with a non-zero status."""

    kind = ErrorKind.EDITOR_PROCESS


class TempFileError(KubeSecretsError):
    kind = ErrorKind.TEMP_FILE


class WriteError(KubeSecretsError):
    """Serializing or writing the secrets file failed."""

    kind = ErrorKind.WRITE


class CorruptValueError(KubeSecretsError):
    kind = ErrorKind.CORRUPT_VALUE


# Errors caused by how the tool was invoked rather than by the file or editor
USAGE_ERRORS = (MissingKeyParameterError, ConflictingUpdateSourceError)
