"""Project materializer.

Takes a validated ``ProjectConfig`` and creates the Go project on disk: the
root directory, the hexagonal ``internal/`` skeleton, ``go.mod``, a git
repository, and the template files chosen from the catalog.  Every step is
awaited before the next one starts and nothing is retried or rolled back:
when a step fails, whatever was written before it stays on disk.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gostarter.config import Config
from gostarter.utils import format_command, print_step, run_command

from .catalog import PROJECT_DIRECTORIES, TemplateEntry, database_template, select_templates
from .models import Database, ProjectConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MaterializeError(Exception):
    """Base class for every failure while creating a project."""


class DirectoryError(MaterializeError):
    """A directory could not be created."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ProjectDirectoryError(DirectoryError):
    """The project root already exists or cannot be created."""

    def __init__(self, path: Path, reason: str, *, exists: bool = False) -> None:
        self.exists = exists
        if exists:
            message = f"directory already exists: {path}"
        else:
            message = f"failed to create project directory {path}: {reason}"
        super().__init__(path, message)


class DirectoryCreationError(DirectoryError):
    """A skeleton subdirectory could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, f"failed to create directory {path}: {reason}")


class ExternalToolError(MaterializeError):
    """An external command exited non-zero or could not be started."""

    step = "external command"

    def __init__(
        self, command: list[str], returncode: int | None, stderr: str = ""
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        status = "could not be started" if returncode is None else f"exited with {returncode}"
        message = f"{self.step} failed: `{format_command(command)}` {status}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class ModuleInitError(ExternalToolError):
    step = "go module init"


class VcsInitError(ExternalToolError):
    step = "git init"


class DependencyResolutionError(ExternalToolError):
    step = "go mod tidy"


class FileWriteError(MaterializeError):
    """A template file could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"failed to write {path}: {reason}")


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass
class MaterializeResult:
    """What a successful run created."""

    project_root: Path
    module_path: str
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Creates a Go project skeleton from a ``ProjectConfig``.

    The generated tree looks like::

        <project_name>/
            cmd/main.go
            internal/adapters/{handlers,repository}/
            internal/adapters/repository/db.go     (sqlite, postgresql, mongodb)
            internal/config/config.go
            internal/core/{domain,ports,services}/
            pkg/utils/logger.go                    (echo with logging)
            go.mod, go.sum, .git/
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Config()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def materialize(self, output_dir: str | Path | None = None) -> MaterializeResult:
        """Create the project under *output_dir* (default: the working directory).

        Returns:
            A ``MaterializeResult`` listing the created directories and files.

        Raises:
            ProjectDirectoryError: The project directory exists or cannot be made.
            DirectoryCreationError: A skeleton subdirectory cannot be made.
            ModuleInitError, VcsInitError, DependencyResolutionError: An
                external tool failed.
            FileWriteError: A template file cannot be written.
        """
        base = Path(output_dir) if output_dir is not None else Path.cwd()
        project_root = base / self.config.project_name
        module_path = self.config.module_path(self.settings.module_host)
        context = self._build_context(module_path)
        result = MaterializeResult(project_root=project_root, module_path=module_path)

        # 1. Project root; an existing directory is never reused
        await self._create_project_root(project_root)

        # 2. Skeleton directory structure
        result.directories = await self._create_directory_structure(project_root)

        # 3. go.mod
        await self._run_tool(
            [self.settings.go_binary, "mod", "init", module_path],
            project_root,
            ModuleInitError,
        )

        # 4. git repository
        if self.settings.init_git:
            await self._run_tool([self.settings.git_binary, "init"], project_root, VcsInitError)

        # 5-7. Config loader, entry point (and logger), database adapter
        for entry in select_templates(self.config):
            result.files.append(await self._write_template(entry, project_root, context))
        db = self.config.database
        if database_template(db) is None and db is not Database.NONE:
            print_step(f"no repository adapter template for {db.value}")

        # 8. Dependency closure
        await self._run_tool(
            [self.settings.go_binary, "mod", "tidy"],
            project_root,
            DependencyResolutionError,
        )

        return result

    # -- Context building --------------------------------------------------

    def _build_context(self, module_path: str) -> dict[str, Any]:
        """Build the template context; ``module_path`` is its only entry."""
        return {"module_path": module_path}

    # -- Directory structure -----------------------------------------------

    async def _create_project_root(self, root: Path) -> None:
        print_step(f"creating {root}")
        try:
            await asyncio.to_thread(root.mkdir)
        except FileExistsError as exc:
            raise ProjectDirectoryError(root, str(exc), exists=True) from exc
        except OSError as exc:
            raise ProjectDirectoryError(root, exc.strerror or str(exc)) from exc

    async def _create_directory_structure(self, root: Path) -> list[Path]:
        """Create the mandatory ``internal/`` tree."""
        created: list[Path] = []
        for rel in PROJECT_DIRECTORIES:
            path = root / rel
            try:
                await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryCreationError(path, exc.strerror or str(exc)) from exc
            created.append(path)
        return created

    # -- Files -------------------------------------------------------------

    async def _write_template(
        self, entry: TemplateEntry, root: Path, ctx: dict[str, Any]
    ) -> Path:
        out = root / entry.path
        print_step(f"writing {entry.path} ({entry.name})")
        try:
            return await self.renderer.render_to_file(entry.template, out, ctx)
        except OSError as exc:
            raise FileWriteError(out, exc.strerror or str(exc)) from exc

    # -- External tools ----------------------------------------------------

    async def _run_tool(
        self,
        cmd: list[str],
        cwd: Path,
        error_cls: type[ExternalToolError],
    ) -> None:
        print_step(f"$ {format_command(cmd)}")
        try:
            returncode, _, stderr = await run_command(
                cmd, cwd=cwd, timeout=self.settings.command_timeout
            )
        except OSError as exc:
            raise error_cls(cmd, None, str(exc)) from exc
        if returncode != 0:
            raise error_cls(cmd, returncode, stderr)
