"""Interactive value editing through an external editor.

The value is staged in a temporary file, the editor runs attached to this
process's stdin/stdout, and the saved file content comes back base64
encoded. The call blocks until the editor exits; there is no timeout.
"""
import base64
import logging
import os
import shutil
import subprocess
import tempfile
from typing import Optional

from .errors import EditorLaunchError, EditorProcessError, MissingEditorError, TempFileError

logger = logging.getLogger(__name__)

TEMP_FILE_PREFIX = "tmp-kube-secrets."

# vi and vim append a newline to every saved file
NEWLINE_APPENDING_EDITORS = ("vi", "vim")


def normalize_editor_output(content: bytes, editor: str) -> bytes:
    """Drop the single trailing newline added by vi/vim."""
    if editor in NEWLINE_APPENDING_EDITORS and content.endswith(b"\n"):
        return content[:-1]
    return content


def run_editor(initial: bytes, editor: Optional[str], tmp_dir: Optional[str] = None) -> str:
    """
    Let the user edit a value in their editor.

    Args:
        initial: Raw bytes to open the editor with (may be empty)
        editor: Editor command name, usually resolved from $EDITOR
        tmp_dir: Directory for the temporary file (system default if None)

    Returns:
        The edited value, base64 encoded

    Raises:
        MissingEditorError: If no editor is configured
        EditorLaunchError: If the editor executable cannot be found
        EditorProcessError: If the editor fails to start or exits non-zero
        TempFileError: If the temporary file cannot be written or read back
    """
    if not editor:
        raise MissingEditorError()

    try:
        fd, tmp_path = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, dir=tmp_dir)
    except OSError as e:
        raise TempFileError(str(e)) from e

    try:
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(initial)
        except OSError as e:
            raise TempFileError(str(e)) from e

        executable = shutil.which(editor)
        if executable is None:
            logger.debug(f"Editor '{editor}' not found on PATH")
            raise EditorLaunchError(editor)

        logger.debug(f"Opening {tmp_path} with {executable}")
        try:
            subprocess.run([executable, tmp_path], check=True)
        except subprocess.CalledProcessError as e:
            raise EditorProcessError(f"exit status {e.returncode}") from e
        except OSError as e:
            raise EditorProcessError(str(e)) from e

        try:
            with open(tmp_path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise TempFileError(str(e)) from e
    finally:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove temporary file {tmp_path}: {e}")

    content = normalize_editor_output(content, editor)
    return base64.b64encode(content).decode("ascii")
