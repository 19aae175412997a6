"""Shared fixtures: sample secrets files and editor stand-ins."""
import base64
import stat

import pytest
import yaml


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


@pytest.fixture
def sample_secret_content():
    """Sample Secret manifest as a dict."""
    return {
        "apiVersion": "v1",
        "kind": "Secret",
        "type": "Opaque",
        "metadata": {"name": "sample"},
        "data": {
            "zzz_data": _b64("last"),
            "MYSQL_ROOT_PASSWORD": _b64("my-super-secret-squirrel-password\n"),
            "aaa_data": _b64("first"),
            "INVALID_BASE64": "not*base64!",
            "test_delete": _b64("delete me"),
            "tls.key": _b64("-----BEGIN KEY-----\nabc\n-----END KEY-----\n"),
            "update_same_value": _b64("test_val123"),
        },
    }


@pytest.fixture
def sample_file(tmp_path, sample_secret_content):
    """Secrets file on disk built from sample_secret_content."""
    path = tmp_path / "sample.yml"
    with open(path, "w") as f:
        yaml.safe_dump(sample_secret_content, f)
    return path


@pytest.fixture
def configmap_file(tmp_path):
    """Valid YAML that is not a Secret."""
    path = tmp_path / "configmap.yml"
    path.write_text(
        "apiVersion: v1\n"
        "kind: ConfigMap\n"
        "metadata:\n"
        "  name: settings\n"
        "data:\n"
        "  LOG_LEVEL: debug\n"
    )
    return path


@pytest.fixture
def invalid_file(tmp_path):
    """File that is not parseable YAML."""
    path = tmp_path / "invalid.yml"
    path.write_text("kind: Secret\ndata: [unclosed\n")
    return path


def _write_script(path, body):
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def editor_script(tmp_path):
    """Editor stand-in that replaces the file with TEST_DATA and a newline."""
    return _write_script(tmp_path / "editor_emulate.sh", "printf 'TEST_DATA\\n' > \"$1\"\n")


@pytest.fixture
def recording_editor(tmp_path):
    """Editor stand-in that copies what it was opened with, then writes 'edited'.

    Returns (script_path, seen_path).
    """
    seen = tmp_path / "seen.txt"
    script = _write_script(
        tmp_path / "editor_record.sh",
        f"cp \"$1\" '{seen}'\nprintf 'edited' > \"$1\"\n",
    )
    return script, seen


@pytest.fixture
def failing_editor(tmp_path):
    """Editor stand-in that exits non-zero."""
    return _write_script(tmp_path / "editor_fail.sh", "exit 3\n")
