"""Reading and writing secret documents as YAML."""
import logging
from typing import Any, Dict

import yaml

from .errors import LoadError, NotASecretError, ParseError, WriteError
from .models import DEFAULT_NAMESPACE, Metadata, SecretDocument

logger = logging.getLogger(__name__)


def _as_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ParseError(f"Field '{field_name}' must be a string")
    return str(value)


def _from_dict(raw: Dict[str, Any]) -> SecretDocument:
    """Map parsed YAML onto a SecretDocument, keeping only known fields."""
    metadata = raw.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ParseError("Field 'metadata' must be a mapping")

    data = raw.get("data") or {}
    if not isinstance(data, dict):
        raise ParseError("Field 'data' must be a mapping")

    return SecretDocument(
        api_version=_as_text(raw.get("apiVersion"), "apiVersion"),
        kind=_as_text(raw.get("kind"), "kind"),
        type=_as_text(raw.get("type"), "type"),
        metadata=Metadata(
            name=_as_text(metadata.get("name"), "metadata.name"),
            namespace=_as_text(metadata.get("namespace"), "metadata.namespace"),
        ),
        data={str(key): _as_text(value, f"data.{key}") for key, value in data.items()},
    )


def load_document(path: str) -> SecretDocument:
    """
    Load a secret document from a YAML file.

    Args:
        path: Path to the secrets file

    Returns:
        The parsed SecretDocument

    Raises:
        LoadError: If the file cannot be read
        ParseError: If the file is not valid YAML of the expected shape
        NotASecretError: If the document's kind is not Secret
    """
    try:
        with open(path, "rb") as f:
            raw_bytes = f.read()
    except OSError as e:
        logger.debug(f"Failed to read {path}: {e}")
        raise LoadError(str(e)) from e

    try:
        raw = yaml.safe_load(raw_bytes)
    except yaml.YAMLError as e:
        logger.debug(f"Failed to parse YAML at {path}: {e}")
        raise ParseError(str(e)) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ParseError(f"Expected a mapping at top level of {path}")

    document = _from_dict(raw)

    # Obviously we can only work with secrets files
    if not document.is_secret:
        raise NotASecretError(f"kind is '{document.kind}'")

    logger.debug(f"Loaded secret '{document.metadata.name}' with {len(document.data)} keys from {path}")
    return document


def save_document(document: SecretDocument, path: str) -> None:
    """
    Write a secret document to ``path`` as YAML.

    An empty namespace is replaced with ``default`` before writing.

    Raises:
        WriteError: If serialization or the write fails
    """
    if not document.metadata.namespace:
        document.metadata.namespace = DEFAULT_NAMESPACE

    try:
        content = yaml.safe_dump(
            document.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        logger.error(f"Failed to serialize secret '{document.metadata.name}': {e}")
        raise WriteError(str(e)) from e

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write secrets file {path}: {e}")
        raise WriteError(str(e)) from e

    logger.info(f"Wrote secrets file {path}")
