"""Tests for command line flags layered over environment settings."""

import pytest

from shortlink.__main__ import build_settings, parse_args


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    # Keep a developer's .env or exported variables out of these tests
    monkeypatch.chdir(tmp_path)
    for name in ["SERVER_NAME", "SECRET", "SLUG_LENGTH", "HOST", "PORT", "STORAGE_FILE", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test that settings fall back to their defaults without flags or environment."""
    config = build_settings(parse_args([]))
    assert config.SERVER_NAME == "http://localhost"
    assert config.SECRET == "changeme"
    assert config.SLUG_LENGTH == 5
    assert config.HOST == "localhost"
    assert config.PORT == 9997


def test_flags_override_environment(monkeypatch):
    """Test that command line flags win over environment variables."""
    monkeypatch.setenv("SECRET", "from-env")
    monkeypatch.setenv("PORT", "8000")
    config = build_settings(parse_args([
        "--secret", "from-flag",
        "--space", "7",
        "--server-name", "https://s.example",
        "--storage-file", "/tmp/urls",
    ]))
    assert config.SECRET == "from-flag"
    assert config.SLUG_LENGTH == 7
    assert config.SERVER_NAME == "https://s.example"
    assert config.STORAGE_FILE == "/tmp/urls"
    assert config.PORT == 8000


def test_invalid_space_rejected():
    """Test that a zero slug length is rejected by settings validation."""
    with pytest.raises(ValueError):
        build_settings(parse_args(["--space", "0"]))
