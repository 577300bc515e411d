"""
Command line interface for generating GitHub workflow boilerplate.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ConfigError, DocsSettings, GeneratorOptions, ToolConfig, load_config
from .workflows import (
    GenerationReport,
    effective_project_name,
    generate_workflows,
    planned_outputs,
    resolve_paths,
)

console = Console()
app = typer.Typer(help="Generate GitHub Workflow boilerplate.", add_completion=False)
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]
MISSING_DIRECTORY_MESSAGE = "No directory provided. Exiting..."


def _configure_logging(level_name: str) -> None:
    level_str = (level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Optional[Path]) -> Optional[Path]:
    """Ensure config path exists and return absolute path."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _validate_project_name(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise typer.BadParameter("Project name must not be empty")
    return value


def _load_config_or_exit(path: Optional[Path]) -> ToolConfig:
    if path is None:
        return ToolConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _docs_settings(base: DocsSettings, author: Optional[str], theme: Optional[str]) -> DocsSettings:
    overrides = {}
    if author is not None:
        overrides["author"] = author
    if theme is not None:
        overrides["theme"] = theme
    if not overrides:
        return base
    return base.model_copy(update=overrides)


def _print_report(report: GenerationReport) -> None:
    table = Table(title="Generation Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


def _print_plan(options: GeneratorOptions) -> None:
    paths = resolve_paths(options.directory)
    table = Table(title="Generation Plan")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    table.add_row("Project", effective_project_name(options, paths))
    table.add_row("Base directory", str(paths.base))
    table.add_row("Workflow directory", str(paths.workflow))
    planned = planned_outputs(paths, options)
    for path in planned:
        table.add_row("Would write", str(path))
    if not planned:
        table.add_row("Would write", "nothing (no generators enabled)")
    console.print(table)


@app.command()
def generate(
    directory: Optional[str] = typer.Option(
        None,
        "--directory",
        "-d",
        help="Path to the source root of the project.",
    ),
    project_name: Optional[str] = typer.Option(
        None,
        "--project-name",
        "-p",
        help="Project name used in the generated files (defaults to the directory name).",
        callback=_validate_project_name,
    ),
    continuous_integration: bool = typer.Option(
        False,
        "--continuous-integration",
        "-c",
        help="Generate .github/workflows/main.yml.",
    ),
    generate_documentation: bool = typer.Option(
        False,
        "--generate-documentation",
        help="Generate .jazzy.yml and .github/workflows/docsGen.yml.",
    ),
    github_url: Optional[str] = typer.Option(
        None,
        "--github-url",
        "-g",
        help="Repository URL written to .jazzy.yml.",
    ),
    author: Optional[str] = typer.Option(
        None,
        "--author",
        help="Author written to .jazzy.yml.",
    ),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        help="Jazzy theme written to .jazzy.yml.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="TOML file with a [docs] table of .jazzy.yml defaults.",
        callback=_resolve_config_path,
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be written without touching the filesystem.",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show github-workflows version and exit.",
    ),
) -> None:
    """
    Write CI and documentation workflow files into a project.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]github-workflows[/] {__version__}")
        raise typer.Exit()

    if directory is None:
        console.print(MISSING_DIRECTORY_MESSAGE)
        raise typer.Exit(code=1)

    tool_config = _load_config_or_exit(config)
    options = GeneratorOptions(
        directory=directory,
        project_name=project_name,
        continuous_integration=continuous_integration,
        generate_documentation=generate_documentation,
        github_url=github_url,
        docs=_docs_settings(tool_config.docs, author, theme),
    )

    if dry_run:
        _print_plan(options)
        console.print("[bold blue]Dry run complete.[/] No filesystem changes made.")
        return

    logger.info("Generating workflows under %s", options.directory)
    report = generate_workflows(options)
    _print_report(report)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
