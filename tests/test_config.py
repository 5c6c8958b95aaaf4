"""Unit tests for Config (gostarter.config)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gostarter.config import Config

pytestmark = pytest.mark.unit

_ENV_VARS = [
    "GOSTARTER_MODULE_HOST",
    "GOSTARTER_GO_BINARY",
    "GOSTARTER_GIT_BINARY",
    "GOSTARTER_COMMAND_TIMEOUT",
    "GOSTARTER_INIT_GIT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.module_host == "github.com"
        assert config.go_binary == "go"
        assert config.git_binary == "git"
        assert config.command_timeout is None
        assert config.init_git is True

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(command_timeout=0)

    def test_empty_binary_rejected(self):
        with pytest.raises(ValidationError):
            Config(go_binary="")


class TestFromEnv:
    def test_no_env_gives_defaults(self):
        assert Config.from_env() == Config()

    def test_reads_all_variables(self, monkeypatch):
        monkeypatch.setenv("GOSTARTER_MODULE_HOST", "gitlab.com")
        monkeypatch.setenv("GOSTARTER_GO_BINARY", "/usr/local/go/bin/go")
        monkeypatch.setenv("GOSTARTER_GIT_BINARY", "/usr/bin/git")
        monkeypatch.setenv("GOSTARTER_COMMAND_TIMEOUT", "300")
        monkeypatch.setenv("GOSTARTER_INIT_GIT", "no")

        config = Config.from_env()

        assert config.module_host == "gitlab.com"
        assert config.go_binary == "/usr/local/go/bin/go"
        assert config.git_binary == "/usr/bin/git"
        assert config.command_timeout == 300
        assert config.init_git is False

    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("FALSE", False), ("0", False)])
    def test_init_git_values(self, monkeypatch, value, expected):
        monkeypatch.setenv("GOSTARTER_INIT_GIT", value)
        assert Config.from_env().init_git is expected

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("GOSTARTER_COMMAND_TIMEOUT", "abc")
        with pytest.raises(ValueError):
            Config.from_env()
