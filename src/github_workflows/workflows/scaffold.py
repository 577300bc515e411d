"""
Resolve the target project layout and write the enabled workflow files.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import GeneratorOptions
from ..util import ensure_directory, write_text_file
from .templates import (
    CI_WORKFLOW_FILENAME,
    DOCS_WORKFLOW_FILENAME,
    JAZZY_CONFIG_FILENAME,
    render_ci_workflow,
    render_docs_workflow,
    render_jazzy_config,
)

logger = logging.getLogger(__name__)

WORKFLOW_SUBDIR = Path(".github") / "workflows"


@dataclass(frozen=True)
class ResolvedPaths:
    """
    Directories derived from the ``--directory`` option.

    Attributes:
        base: Absolute project root.
        workflow: ``base/.github/workflows``.
    """
    base: Path
    workflow: Path


@dataclass
class GenerationReport:
    """
    Stores what happened during a generation run.

    Attributes:
        paths: Resolved project and workflow directories.
        project_name: Name substituted into the templates.
        workflow_dir_created: True if the workflow directory was newly created.
        written: Files written, in order.
    """
    paths: ResolvedPaths
    project_name: str
    workflow_dir_created: bool = False
    written: List[Path] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Project", self.project_name)
        yield ("Base directory", str(self.paths.base))
        yield ("Workflow directory", str(self.paths.workflow))
        yield ("Workflow directory created", "yes" if self.workflow_dir_created else "no")
        if self.written:
            for path in self.written:
                yield ("Written", str(path))
        else:
            yield ("Written", "nothing (no generators enabled)")


def resolve_paths(directory: str, cwd: Optional[Path] = None) -> ResolvedPaths:
    """
    Determine the base and workflow directories.

    Absolute values are used as given; anything else is joined onto the
    current working directory.

    Args:
        directory: The ``--directory`` value.
        cwd: Working directory to resolve against (defaults to ``Path.cwd()``).

    Returns:
        ResolvedPaths for the project.
    """
    candidate = Path(directory)
    if candidate.is_absolute():
        base = candidate
    else:
        base = (cwd or Path.cwd()) / candidate
    return ResolvedPaths(base=base, workflow=base / WORKFLOW_SUBDIR)


def create_workflow_directory(paths: ResolvedPaths) -> bool:
    """Create the workflow directory and parents; True if it was missing."""
    return ensure_directory(paths.workflow)


def effective_project_name(options: GeneratorOptions, paths: ResolvedPaths) -> str:
    """
    Pick the name used in the templates.

    An explicit ``--project-name`` wins; otherwise the project directory's
    name is used after collapsing ``.`` and ``..`` segments, falling back to
    the workflow directory's name for a filesystem root.
    """
    if options.project_name is not None:
        return options.project_name
    return Path(os.path.normpath(paths.base)).name or paths.workflow.name


def planned_outputs(paths: ResolvedPaths, options: GeneratorOptions) -> List[Path]:
    """List the files a run with these options would write, in write order."""
    planned: List[Path] = []
    if options.continuous_integration:
        planned.append(paths.workflow / CI_WORKFLOW_FILENAME)
    if options.generate_documentation:
        planned.append(paths.base / JAZZY_CONFIG_FILENAME)
        planned.append(paths.workflow / DOCS_WORKFLOW_FILENAME)
    return planned


def write_ci_workflow(project_name: str, paths: ResolvedPaths, options: GeneratorOptions) -> Optional[Path]:
    """Write ``main.yml`` into the workflow directory when CI is enabled."""
    if not options.continuous_integration:
        return None
    target = write_text_file(paths.workflow / CI_WORKFLOW_FILENAME, render_ci_workflow(project_name))
    logger.info("Wrote CI workflow to %s", target)
    return target


def write_jazzy_config(project_name: str, paths: ResolvedPaths, options: GeneratorOptions) -> Optional[Path]:
    """Write ``.jazzy.yml`` into the project root when docs are enabled."""
    if not options.generate_documentation:
        return None
    content = render_jazzy_config(project_name, options.docs, options.github_url)
    target = write_text_file(paths.base / JAZZY_CONFIG_FILENAME, content)
    logger.info("Wrote jazzy config to %s", target)
    return target


def write_docs_workflow(paths: ResolvedPaths, options: GeneratorOptions) -> Optional[Path]:
    """Write ``docsGen.yml`` into the workflow directory when docs are enabled."""
    if not options.generate_documentation:
        return None
    target = write_text_file(paths.workflow / DOCS_WORKFLOW_FILENAME, render_docs_workflow())
    logger.info("Wrote documentation workflow to %s", target)
    return target


def generate_workflows(options: GeneratorOptions, *, cwd: Optional[Path] = None) -> GenerationReport:
    """
    Create the workflow directory and write every enabled file.

    Filesystem errors propagate; files written before a failure are left in
    place.

    Args:
        options: Parsed generator options.
        cwd: Directory relative ``--directory`` values are resolved against.

    Returns:
        A GenerationReport detailing the actions taken.
    """
    paths = resolve_paths(options.directory, cwd=cwd)
    created = create_workflow_directory(paths)
    name = effective_project_name(options, paths)
    report = GenerationReport(paths=paths, project_name=name, workflow_dir_created=created)

    for written in (
        write_ci_workflow(name, paths, options),
        write_jazzy_config(name, paths, options),
        write_docs_workflow(paths, options),
    ):
        if written is not None:
            report.written.append(written)

    return report
