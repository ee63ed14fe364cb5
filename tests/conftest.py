"""Shared test fixtures for scaffold-e2e."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def project(tmp_path):
    """A writable copy of the scaffolded fixture project."""
    dest = tmp_path / "project"
    shutil.copytree(FIXTURES / "project", dest)
    return dest


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` verbatim under tmp_path and return the path."""
    def _write(content: str, name: str = "main.go") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path
    return _write
