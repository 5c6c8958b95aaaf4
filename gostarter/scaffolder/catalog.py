"""Static template catalog.

Maps wizard choices to the template that is written and where it lands in
the generated project.  The tables are explicit on purpose: adding a
framework or database means one entry here plus one ``.j2`` file under
``templates/``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import Database, Framework, ProjectConfig


@dataclass(frozen=True)
class TemplateEntry:
    """A logical file: template name, template source and output path."""

    name: str
    template: str
    path: str


# ---------------------------------------------------------------------------
# Output paths (relative to the project root)
# ---------------------------------------------------------------------------

CONFIG_PATH = "internal/config/config.go"
MAIN_PATH = "cmd/main.go"
LOGGER_PATH = "pkg/utils/logger.go"
DB_PATH = "internal/adapters/repository/db.go"

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "internal/adapters",
    "internal/adapters/handlers",
    "internal/adapters/repository",
    "internal/config",
    "internal/core",
    "internal/core/domain",
    "internal/core/ports",
    "internal/core/services",
)


# ---------------------------------------------------------------------------
# Catalog tables
# ---------------------------------------------------------------------------

CONFIG_TEMPLATE = TemplateEntry("config", "internal/config/config.go.j2", CONFIG_PATH)
LOGGER_TEMPLATE = TemplateEntry("logger", "pkg/utils/logger.go.j2", LOGGER_PATH)
ECHO_LOGGER_TEMPLATE = TemplateEntry("echo-with-logger", "cmd/echo_logger.go.j2", MAIN_PATH)

FRAMEWORK_TEMPLATES: dict[Framework, TemplateEntry] = {
    Framework.STDLIB: TemplateEntry("stdlib", "cmd/stdlib.go.j2", MAIN_PATH),
    Framework.GIN: TemplateEntry("gin", "cmd/gin.go.j2", MAIN_PATH),
    Framework.ECHO: TemplateEntry("echo", "cmd/echo.go.j2", MAIN_PATH),
    Framework.FIBER: TemplateEntry("fiber", "cmd/fiber.go.j2", MAIN_PATH),
    Framework.CHI: TemplateEntry("chi", "cmd/chi.go.j2", MAIN_PATH),
}

# mysql and none have no adapter; nothing is written for them.
DATABASE_TEMPLATES: dict[Database, TemplateEntry] = {
    Database.SQLITE: TemplateEntry("sqlite", "internal/adapters/repository/sqlite.go.j2", DB_PATH),
    Database.POSTGRESQL: TemplateEntry(
        "postgresql", "internal/adapters/repository/postgresql.go.j2", DB_PATH
    ),
    Database.MONGODB: TemplateEntry(
        "mongodb", "internal/adapters/repository/mongodb.go.j2", DB_PATH
    ),
}


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def framework_template(framework: Framework, logging: bool = False) -> TemplateEntry:
    """Return the entry-point template for *framework*."""
    framework = Framework(framework)
    if framework is Framework.ECHO and logging:
        return ECHO_LOGGER_TEMPLATE
    return FRAMEWORK_TEMPLATES[framework]


def database_template(database: Database) -> TemplateEntry | None:
    """Return the repository adapter template, or ``None`` when there is none."""
    return DATABASE_TEMPLATES.get(Database(database))


def select_templates(config: ProjectConfig) -> list[TemplateEntry]:
    """Return every template to write for *config*, in write order.

    The order is: config loader, logger helper (Echo with logging only),
    entry point, database adapter (when the database has one).
    """
    entries = [CONFIG_TEMPLATE]
    main_entry = framework_template(config.framework, config.logging)
    if main_entry is ECHO_LOGGER_TEMPLATE:
        entries.append(LOGGER_TEMPLATE)
    entries.append(main_entry)
    db_entry = database_template(config.database)
    if db_entry is not None:
        entries.append(db_entry)
    return entries
