"""Shared pytest fixtures for the Tweeter server."""

import shutil
from pathlib import Path

import pytest

from tweeter.core.config import PACKAGE_PUBLIC_DIR
from tweeter.web.main import create_app

PUBLIC_DIR = Path(PACKAGE_PUBLIC_DIR)


@pytest.fixture
def public_dir() -> Path:
    """The packaged public/ directory served by default."""
    return PUBLIC_DIR


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Create a temporary public directory with small, distinct files."""
    static = tmp_path / "public"
    static.mkdir()
    (static / "index.html").write_bytes(b"<h1>Home</h1>")
    (static / "style.css").write_bytes(b"body { color: red; }")
    (static / "index.js").write_bytes(b"console.log('hello');")
    (static / "404.html").write_bytes(b"<h1>Not Found</h1>")
    return static


@pytest.fixture
def copied_public_dir(tmp_path: Path) -> Path:
    """A writable copy of the packaged public/ directory."""
    target = tmp_path / "copied"
    shutil.copytree(PUBLIC_DIR, target)
    return target


@pytest.fixture
def app():
    return create_app("testing")


@pytest.fixture
def client(app):
    return app.test_client()
