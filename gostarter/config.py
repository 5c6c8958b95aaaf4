"""gostarter configuration.

Typed settings for the materializer: which executables to call, the module
host used to build the Go module path, and how long to wait for external
tools.  Settings are Pydantic v2 models so they are validated at
construction time.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import BaseModel, Field


_FALSE_VALUES = {"0", "false", "no", "off"}


class Config(BaseModel):
    """Global gostarter configuration.

    Instances are typically created once by the CLI entry point (usually via
    :meth:`from_env`) and handed to the materializer.
    """

    module_host: str = Field(default="github.com", min_length=1)
    go_binary: str = Field(default="go", min_length=1)
    git_binary: str = Field(default="git", min_length=1)
    command_timeout: Optional[int] = Field(
        default=None,
        ge=1,
        description="Seconds to wait for each external command; None waits indefinitely",
    )
    init_git: bool = Field(default=True, description="Run `git init` in the new project")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GOSTARTER_MODULE_HOST, GOSTARTER_GO_BINARY, GOSTARTER_GIT_BINARY,
            GOSTARTER_COMMAND_TIMEOUT, GOSTARTER_INIT_GIT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOSTARTER_MODULE_HOST"):
            kwargs["module_host"] = os.environ["GOSTARTER_MODULE_HOST"]
        if os.environ.get("GOSTARTER_GO_BINARY"):
            kwargs["go_binary"] = os.environ["GOSTARTER_GO_BINARY"]
        if os.environ.get("GOSTARTER_GIT_BINARY"):
            kwargs["git_binary"] = os.environ["GOSTARTER_GIT_BINARY"]
        if os.environ.get("GOSTARTER_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["GOSTARTER_COMMAND_TIMEOUT"])
        if os.environ.get("GOSTARTER_INIT_GIT"):
            kwargs["init_git"] = os.environ["GOSTARTER_INIT_GIT"].strip().lower() not in _FALSE_VALUES

        return cls(**kwargs)
