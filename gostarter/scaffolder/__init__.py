"""gostarter scaffolder -- turns a ``ProjectConfig`` into a Go project.

Quick usage::

    from gostarter.scaffolder import Database, Framework, ProjectConfig, ProjectMaterializer

    config = ProjectConfig(
        github_user_id="alice",
        project_name="demo1",
        framework=Framework.GIN,
        database=Database.SQLITE,
    )
    result = await ProjectMaterializer(config).materialize()
"""

from gostarter.scaffolder.catalog import TemplateEntry, select_templates
from gostarter.scaffolder.materializer import (
    DependencyResolutionError,
    DirectoryCreationError,
    DirectoryError,
    ExternalToolError,
    FileWriteError,
    MaterializeError,
    MaterializeResult,
    ModuleInitError,
    ProjectDirectoryError,
    ProjectMaterializer,
    VcsInitError,
)
from gostarter.scaffolder.models import Database, Framework, ProjectConfig
from gostarter.scaffolder.templates import TemplateRenderer

__all__ = [
    "Database",
    "DependencyResolutionError",
    "DirectoryCreationError",
    "DirectoryError",
    "ExternalToolError",
    "FileWriteError",
    "Framework",
    "MaterializeError",
    "MaterializeResult",
    "ModuleInitError",
    "ProjectConfig",
    "ProjectDirectoryError",
    "ProjectMaterializer",
    "TemplateEntry",
    "TemplateRenderer",
    "VcsInitError",
    "select_templates",
]
