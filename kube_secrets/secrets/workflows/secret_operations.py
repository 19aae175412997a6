"""Workflow for create/show/update/delete/keys on a secrets file."""
import base64
import binascii
import logging
import os
from typing import Optional

from ..domains.document_io import load_document, save_document
from ..domains.editor import run_editor
from ..domains.errors import (
    ConflictingUpdateSourceError,
    CorruptValueError,
    KeyNotFoundError,
    MissingKeyParameterError,
    UpdateSourceError,
)
from ..domains.models import SecretDocument, Status

logger = logging.getLogger(__name__)


def _encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _decode(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CorruptValueError(str(e)) from e


def _validate_key(document: SecretDocument, key: str) -> None:
    if not key:
        raise MissingKeyParameterError()
    if not document.has_key(key):
        raise KeyNotFoundError(key)


def check_update_sources(update_string: str = "", update_file: str = "") -> None:
    """Reject a value and a value file given together."""
    if update_string and update_file:
        raise ConflictingUpdateSourceError()


def read_update_value(update_string: str = "", update_file: str = "") -> Optional[bytes]:
    """
    Resolve the inline update source, if any.

    Args:
        update_string: Literal value (-u)
        update_file: Path of a file holding the value (-U)

    Returns:
        Raw value bytes, or None when no (non-empty) inline value was given

    Raises:
        ConflictingUpdateSourceError: If both sources are given
        UpdateSourceError: If the value file cannot be read
    """
    check_update_sources(update_string, update_file)

    if update_string:
        # argv arrives surrogate-escaped, so this gives back the original bytes
        return os.fsencode(update_string)

    if update_file:
        try:
            with open(update_file, "rb") as f:
                value = f.read()
        except OSError as e:
            logger.debug(f"Failed to read update file {update_file}: {e}")
            raise UpdateSourceError(str(e)) from e
        return value or None

    return None


def create_secret(
    path: str,
    key: str,
    update_string: str = "",
    update_file: str = "",
    editor: Optional[str] = None,
) -> Status:
    """
    Create (or overwrite) a secrets file holding a single key.

    The value comes from the inline source when given, otherwise from the
    editor with an empty buffer.
    """
    check_update_sources(update_string, update_file)
    if not key:
        raise MissingKeyParameterError()

    document = SecretDocument.new(path)
    document.pending_update_value = read_update_value(update_string, update_file)

    if document.pending_update_value is None:
        value = run_editor(b"", editor)
    else:
        value = _encode(document.pending_update_value)

    document.data[key] = value
    save_document(document, path)
    logger.info(f"Created secret '{document.metadata.name}' with key '{key}'")
    return Status.CREATED


def show_secret(path: str, key: str) -> bytes:
    """Return the decoded value of ``key`` as raw bytes."""
    document = load_document(path)
    _validate_key(document, key)
    return _decode(document.data[key])


def update_secret(
    path: str,
    key: str,
    update_string: str = "",
    update_file: str = "",
    editor: Optional[str] = None,
) -> Status:
    """
    Set ``key`` to a new value, adding the key if it does not exist yet.

    Without an inline source the current value is opened in the editor.
    The file is only rewritten when the value actually changed.
    An empty key is rejected here, unlike the original tool which stored it.
    """
    check_update_sources(update_string, update_file)
    if not key:
        raise MissingKeyParameterError()

    document = load_document(path)
    document.pending_update_value = read_update_value(update_string, update_file)
    current = document.data.get(key, "")

    if document.pending_update_value is not None:
        new_value = _encode(document.pending_update_value)
    else:
        new_value = run_editor(_decode(current), editor)

    if new_value == current:
        logger.info(f"Key '{key}' unchanged, not writing {path}")
        return Status.NO_UPDATES

    document.data[key] = new_value
    save_document(document, path)
    return Status.UPDATED


def delete_secret(path: str, key: str) -> Status:
    """Remove ``key`` from the secrets file."""
    document = load_document(path)
    _validate_key(document, key)

    del document.data[key]
    save_document(document, path)
    logger.info(f"Deleted key '{key}' from {path}")
    return Status.DELETED


def list_keys(path: str) -> str:
    """Return every key in the file, sorted, one per line."""
    document = load_document(path)
    return "".join(f"{key}\n" for key in document.sorted_keys())
