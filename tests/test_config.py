"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

from quill.config import Config, find_config_file, get_config, load_config, reset_config


def test_defaults() -> None:
    config = Config()
    assert config.defaults.scope == "global"
    assert config.io.encoding == "utf-8"
    assert config.io.preserve_newlines is True
    assert config.lint.fail_on_issues is False
    assert config.logging.level == "INFO"


def test_no_config_file(temp_dir: Path) -> None:
    assert find_config_file() is None


def test_loads_yaml_from_cwd(temp_dir: Path) -> None:
    (temp_dir / "quill.yaml").write_text(
        "defaults:\n  scope: dev\nlint:\n  fail_on_issues: true\n",
        encoding="utf-8",
    )
    config = load_config()
    assert config.defaults.scope == "dev"
    assert config.lint.fail_on_issues is True


def test_loads_yaml_from_home(temp_dir: Path) -> None:
    config_dir = temp_dir / ".config" / "quill"
    config_dir.mkdir(parents=True)
    (config_dir / "quill.yaml").write_text("io:\n  encoding: latin-1\n", encoding="utf-8")
    assert load_config().io.encoding == "latin-1"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("QUILL_DEFAULT_SCOPE", "prod")
    assert load_config().defaults.scope == "prod"


def test_get_config_is_cached() -> None:
    first = get_config()
    assert get_config() is first
    reset_config()
    assert get_config() is not first
