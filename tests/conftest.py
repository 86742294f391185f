"""Test configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from quill.config import reset_config

APP_DOCUMENT = """
title = "App"

@dev
debug = true

@prod
optimized = true

@dev @test
extra_checks = true

@global
do_tests = true"""

DEV_EXPECTED = "\n".join(
    [
        "",
        'title = "App"',
        "",
        "",
        "debug = true",
        "",
        "",
        "",
        "",
        "",
        "extra_checks = true",
        "",
        "",
        "do_tests = true",
    ]
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def app_document():
    """The annotated example document with dev, prod and test scopes."""
    return APP_DOCUMENT


@pytest.fixture
def dev_expected():
    """The example document extracted for the dev scope."""
    return DEV_EXPECTED


@pytest.fixture
def sample_toml(temp_dir):
    """Write the example document to disk."""
    path = temp_dir / "app.toml"
    path.write_text(APP_DOCUMENT + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch, temp_dir):
    """Isolate tests from user config files and reset cached config."""
    monkeypatch.chdir(temp_dir)
    monkeypatch.setenv("HOME", str(temp_dir))
    for var in ("QUILL_DEFAULT_SCOPE", "QUILL_ENCODING"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
