"""
Workflow and documentation file generation.
"""

from .scaffold import (
    GenerationReport,
    ResolvedPaths,
    effective_project_name,
    generate_workflows,
    planned_outputs,
    resolve_paths,
)

__all__ = [
    "GenerationReport",
    "ResolvedPaths",
    "effective_project_name",
    "generate_workflows",
    "planned_outputs",
    "resolve_paths",
]
