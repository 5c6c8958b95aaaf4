"""Pydantic v2 models describing the Go project to scaffold.

``ProjectConfig`` is produced once by the configuration collector and is
read-only afterwards.  Validation happens at construction time so that an
invalid combination (for example logging middleware without Echo) never
reaches the materializer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DEFAULT_MODULE_HOST = "github.com"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Framework(str, Enum):
    """HTTP framework used by the generated entry point."""
    STDLIB = "stdlib"
    GIN = "gin"
    ECHO = "echo"
    FIBER = "fiber"
    CHI = "chi"


class Database(str, Enum):
    """Database the generated repository adapter talks to."""
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MONGODB = "mongodb"
    SQLITE = "sqlite"
    NONE = "none"


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------

def _reject_control_characters(label: str, value: str) -> None:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in value):
        raise ValueError(f"{label} cannot contain control characters")


def validate_github_user_id(value: str) -> str:
    """Reject an empty GitHub user id or one with control characters."""
    if not value or not value.strip():
        raise ValueError("GitHub UserID cannot be empty")
    _reject_control_characters("GitHub UserID", value)
    return value.strip()


def validate_project_name(value: str) -> str:
    """Reject an empty project name or one that is not a single path segment.

    The name becomes both the root directory and the last module path
    segment, so ``"a/b"`` or ``".."`` would place the project outside the
    working directory.
    """
    if not value or not value.strip():
        raise ValueError("project name cannot be empty")
    _reject_control_characters("project name", value)
    value = value.strip()
    if "/" in value or "\\" in value or value in (".", ".."):
        raise ValueError(f"project name must be a single directory name, got {value!r}")
    return value


def validate_logging(logging: bool, framework: Framework | str) -> bool:
    """Logging middleware only exists for the Echo template."""
    if logging and Framework(framework) is not Framework.ECHO:
        raise ValueError("logging middleware is only available for Echo framework")
    return logging


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """The validated answers of the scaffolding wizard."""

    model_config = ConfigDict(frozen=True)

    github_user_id: str = Field(..., description="GitHub user or organisation owning the module")
    project_name: str = Field(..., description="Directory name and last module path segment")
    framework: Framework = Field(..., description="HTTP framework for cmd/main.go")
    database: Database = Field(..., description="Database for the repository adapter")
    logging: bool = Field(default=False, description="Add the Echo request logger middleware")

    @field_validator("github_user_id")
    @classmethod
    def _check_github_user_id(cls, value: str) -> str:
        return validate_github_user_id(value)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @model_validator(mode="after")
    def _check_logging(self) -> "ProjectConfig":
        validate_logging(self.logging, self.framework)
        return self

    def module_path(self, host: str = DEFAULT_MODULE_HOST) -> str:
        """Return the Go module path, e.g. ``github.com/alice/demo1``."""
        return f"{host}/{self.github_user_id}/{self.project_name}"
