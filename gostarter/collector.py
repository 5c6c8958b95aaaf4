"""Interactive configuration wizard.

Asks for the five project settings with ``rich.prompt`` and returns a
validated ``ProjectConfig``.  Invalid answers are reported and asked again;
the materializer is only ever handed a config that passed validation.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.prompt import Confirm, Prompt

from gostarter.scaffolder.models import (
    Database,
    Framework,
    ProjectConfig,
    validate_github_user_id,
    validate_logging,
    validate_project_name,
)
from gostarter.utils import build_summary_panel, console as default_console, print_error


def validation_message(exc: Exception) -> str:
    """Return the user-facing text of a validation failure."""
    if isinstance(exc, ValidationError):
        errors = exc.errors()
        if errors:
            ctx_error = errors[0].get("ctx", {}).get("error")
            return str(ctx_error) if ctx_error is not None else errors[0]["msg"]
    return str(exc)


class ConfigCollector:
    """Collects a ``ProjectConfig`` from the terminal.

    ``ask`` and ``confirm`` default to ``Prompt.ask`` / ``Confirm.ask`` and
    are injectable so the wizard can be driven without a TTY.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        ask: Callable[..., str] = Prompt.ask,
        confirm: Callable[..., bool] = Confirm.ask,
    ) -> None:
        self.console = console or default_console
        self.ask = ask
        self.confirm = confirm

    # -- Public API --------------------------------------------------------

    def collect(
        self,
        *,
        github_user_id: Optional[str] = None,
        project_name: Optional[str] = None,
        framework: Optional[str] = None,
        database: Optional[str] = None,
        logging: Optional[bool] = None,
    ) -> ProjectConfig:
        """Ask for every setting that was not given as a preset.

        Raises:
            ValueError: A preset value is invalid.
        """
        github_user_id = self._text(
            "Enter your GitHub UserID",
            "This will be used to create the project repository.",
            validate_github_user_id,
            github_user_id,
        )
        project_name = self._text(
            "Enter your Project Name",
            "Choose a name for your new Go project.",
            validate_project_name,
            project_name,
        )
        chosen_framework = Framework(
            self._choice(
                "Choose a Go framework",
                [f.value for f in Framework],
                Framework.STDLIB.value,
                framework,
            )
        )
        chosen_database = Database(
            self._choice(
                "Choose a database",
                [d.value for d in Database],
                Database.POSTGRESQL.value,
                database,
            )
        )
        chosen_logging = self._logging(chosen_framework, logging)

        try:
            return ProjectConfig(
                github_user_id=github_user_id,
                project_name=project_name,
                framework=chosen_framework,
                database=chosen_database,
                logging=chosen_logging,
            )
        except ValidationError as exc:
            raise ValueError(validation_message(exc)) from exc

    def confirm_creation(self, config: ProjectConfig) -> bool:
        """Show the summary panel and ask for a final go-ahead."""
        self.console.print(build_summary_panel(config))
        return bool(
            self.confirm(
                "Create this project?",
                console=self.console,
                default=True,
            )
        )

    # -- Prompts -----------------------------------------------------------

    def _text(
        self,
        title: str,
        description: str,
        validate: Callable[[str], str],
        preset: Optional[str],
    ) -> str:
        if preset is not None:
            return validate(preset)
        self.console.print(f"[dim]{description}[/dim]")
        while True:
            answer = self.ask(title, console=self.console)
            try:
                return validate(answer or "")
            except ValueError as exc:
                print_error(str(exc))

    def _choice(
        self,
        title: str,
        choices: list[str],
        default: str,
        preset: Optional[str],
    ) -> str:
        if preset is not None:
            if preset not in choices:
                raise ValueError(
                    f"{preset!r} is not one of: {', '.join(choices)}"
                )
            return preset
        return self.ask(title, console=self.console, choices=choices, default=default)

    def _logging(self, framework: Framework, preset: Optional[bool]) -> bool:
        if preset is not None:
            return validate_logging(preset, framework)
        while True:
            answer = self.confirm(
                "Enable Logging Middleware?",
                console=self.console,
                default=False,
            )
            try:
                return validate_logging(bool(answer), framework)
            except ValueError as exc:
                print_error(str(exc))
