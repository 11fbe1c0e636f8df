"""Shared pytest fixtures for the llmarkup suite."""

import os

import pytest
from click.testing import CliRunner
from dotenv import load_dotenv

from llmarkup.quiet import disable_quiet_mode

# Load environment variables from .env early in collection
load_dotenv()


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test from an empty directory with no LLMARKUP_* overrides."""
    for key in list(os.environ):
        if key.startswith("LLMARKUP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    disable_quiet_mode()


@pytest.fixture
def runner():
    """Fixture to provide a CliRunner for testing Click commands."""
    return CliRunner()


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def project_files_output():
    return (
        "Here is your project.\n"
        "<project_files>\n"
        '<file name="a.ts">console.log(1);</file>\n'
        '<file name="src/b.ts">\n'
        "export const b = 2;\n"
        "</file>\n"
        "</project_files>\n"
        "<summary>Two files.</summary>\n"
    )
