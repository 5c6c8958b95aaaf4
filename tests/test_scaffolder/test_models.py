"""Tests for the ProjectConfig model and its validators.

Covers:
- Required, non-empty GitHub user id and project name
- Project name restricted to a single directory name
- Control characters rejected in the user id and project name
- Logging middleware only with Echo
- Enum coercion and immutability
- Module path construction
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gostarter.scaffolder.models import (
    Database,
    Framework,
    ProjectConfig,
    validate_github_user_id,
    validate_logging,
    validate_project_name,
)

pytestmark = pytest.mark.unit


def _config(**overrides) -> ProjectConfig:
    values = {
        "github_user_id": "alice",
        "project_name": "demo1",
        "framework": "gin",
        "database": "sqlite",
    }
    values.update(overrides)
    return ProjectConfig(**values)


class TestProjectConfig:
    def test_valid_config(self):
        config = _config()
        assert config.github_user_id == "alice"
        assert config.project_name == "demo1"
        assert config.framework is Framework.GIN
        assert config.database is Database.SQLITE
        assert config.logging is False

    def test_empty_github_user_id_rejected(self):
        with pytest.raises(ValidationError, match="GitHub UserID cannot be empty"):
            _config(github_user_id="")

    def test_whitespace_project_name_rejected(self):
        with pytest.raises(ValidationError, match="project name cannot be empty"):
            _config(project_name="   ")

    @pytest.mark.parametrize("name", ["a/b", "..", ".", "x\\y"])
    def test_project_name_must_be_single_segment(self, name: str):
        with pytest.raises(ValidationError, match="single directory name"):
            _config(project_name=name)

    @pytest.mark.parametrize("name", ["de\x00mo", "demo\n", "de\tmo", "demo\x1b[31m", "demo\x7f"])
    def test_project_name_control_characters_rejected(self, name: str):
        with pytest.raises(ValidationError, match="project name cannot contain control characters"):
            _config(project_name=name)

    @pytest.mark.parametrize("user", ["ali\x00ce", "alice\r\n", "al\x07ice"])
    def test_github_user_id_control_characters_rejected(self, user: str):
        with pytest.raises(ValidationError, match="GitHub UserID cannot contain control characters"):
            _config(github_user_id=user)

    def test_surrounding_whitespace_stripped(self):
        config = _config(github_user_id=" alice ", project_name=" demo1 ")
        assert config.github_user_id == "alice"
        assert config.project_name == "demo1"

    def test_unknown_framework_rejected(self):
        with pytest.raises(ValidationError):
            _config(framework="django")

    def test_unknown_database_rejected(self):
        with pytest.raises(ValidationError):
            _config(database="oracle")

    @pytest.mark.parametrize("framework", ["stdlib", "gin", "fiber", "chi"])
    def test_logging_without_echo_rejected(self, framework: str):
        with pytest.raises(ValidationError, match="only available for Echo"):
            _config(framework=framework, logging=True)

    def test_logging_with_echo_accepted(self):
        config = _config(framework="echo", logging=True)
        assert config.logging is True

    def test_mysql_and_none_are_selectable(self):
        assert _config(database="mysql").database is Database.MYSQL
        assert _config(database="none").database is Database.NONE

    def test_config_is_frozen(self):
        config = _config()
        with pytest.raises(ValidationError):
            config.project_name = "other"

    def test_module_path_default_host(self):
        assert _config().module_path() == "github.com/alice/demo1"

    def test_module_path_custom_host(self):
        assert _config().module_path("gitlab.com") == "gitlab.com/alice/demo1"


class TestValidators:
    def test_validate_github_user_id(self):
        assert validate_github_user_id("bob") == "bob"
        with pytest.raises(ValueError):
            validate_github_user_id("")
        with pytest.raises(ValueError, match="control characters"):
            validate_github_user_id("bob\x00")

    def test_validate_project_name(self):
        assert validate_project_name("my-awesome-project") == "my-awesome-project"
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_project_name("")
        with pytest.raises(ValueError, match="control characters"):
            validate_project_name("my\x00project")

    def test_validate_logging(self):
        assert validate_logging(True, Framework.ECHO) is True
        assert validate_logging(False, "gin") is False
        with pytest.raises(ValueError):
            validate_logging(True, "chi")
