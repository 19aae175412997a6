"""Environment configuration for kube-secrets."""
import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

EDITOR_ENV_VAR = "EDITOR"
LOG_LEVEL_ENV_VAR = "KUBE_SECRETS_LOG_LEVEL"


def resolve_editor(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Get the editor command from the environment.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Editor command name, or None if unset or empty
    """
    if environ is None:
        environ = os.environ

    editor = environ.get(EDITOR_ENV_VAR, "").strip()
    if not editor:
        logger.debug(f"{EDITOR_ENV_VAR} is not set")
        return None

    logger.debug(f"Using editor from {EDITOR_ENV_VAR}: {editor}")
    return editor


def resolve_log_level(environ: Optional[Mapping[str, str]] = None, verbose: bool = False) -> int:
    """
    Pick the log level for the CLI.

    Priority order:
    1. --verbose flag (DEBUG)
    2. KUBE_SECRETS_LOG_LEVEL environment variable
    3. WARNING
    """
    if verbose:
        return logging.DEBUG

    if environ is None:
        environ = os.environ

    level_name = environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not level_name:
        return logging.WARNING

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Ignoring unknown {LOG_LEVEL_ENV_VAR} value: {level_name}")
        return logging.WARNING
    return level
