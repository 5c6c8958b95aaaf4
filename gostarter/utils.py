"""Shared utility functions for gostarter.

Provides async command execution and Rich-based output helpers, including
the project summary panel shown before and after scaffolding.  All terminal
styling lives here so the scaffolder itself stays free of presentation code.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from gostarter.scaffolder.models import ProjectConfig

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to exit.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the process runs.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {format_command(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


def format_command(cmd: list[str]) -> str:
    """Return *cmd* as a single display string."""
    return " ".join(cmd)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a dim progress line for one scaffolding step."""
    console.print(f"[dim]  {escape(message)}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def build_summary_panel(config: "ProjectConfig") -> Panel:
    """Build the rounded "Project Configuration Summary" panel."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(style="bright_blue")

    table.add_row("GitHub UserID:", escape(config.github_user_id))
    table.add_row("Project Name:", escape(config.project_name))
    table.add_row("Framework:", config.framework.value)
    table.add_row("Database:", config.database.value)
    table.add_row("Logging Middleware:", str(config.logging).lower())

    return Panel(
        table,
        title="[bold magenta]Project Configuration Summary[/bold magenta]",
        border_style="color(63)",
        width=60,
        padding=(1, 2),
    )


def print_project_summary(config: "ProjectConfig") -> None:
    """Print the configuration summary panel."""
    console.print(build_summary_panel(config))


def print_next_steps(project_root: Path) -> None:
    """Print how to run the freshly generated project."""
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  cd {project_root}")
    console.print("  go run ./cmd")
    console.print()
