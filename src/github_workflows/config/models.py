"""
Pydantic models for generator options and the optional TOML defaults file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class DocsSettings(BaseModel):
    """
    Values written into the generated ``.jazzy.yml`` besides the module name.

    Attributes:
        author: Author shown in the generated documentation.
        theme: Jazzy theme name.
        sdk: SDK jazzy builds against.
        readme: README used as the documentation landing page.
        clean: Whether jazzy cleans its output directory first.
        disable_search: Whether the documentation search box is disabled.
    """
    author: str = "Steven Sherry"
    theme: str = "fullwidth"
    sdk: str = "iphone"
    readme: str = "README.md"
    clean: bool = True
    disable_search: bool = True

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }


class ToolConfig(BaseModel):
    """
    Contents of an optional TOML defaults file.

    Attributes:
        docs: Overrides for the documentation config defaults.
    """
    docs: DocsSettings = Field(default_factory=DocsSettings)

    model_config = {
        "extra": "forbid",
    }


class GeneratorOptions(BaseModel):
    """
    Resolved command-line options for a single invocation.

    The two ``bool`` fields are derived strictly from flag presence on the
    command line.

    Attributes:
        directory: Project root as supplied by the user (absolute or relative).
        project_name: Explicit project name, if given.
        continuous_integration: Emit the CI workflow.
        generate_documentation: Emit the jazzy config and its publish workflow.
        github_url: Repository URL added to the jazzy config when present.
        docs: Documentation config defaults.
    """
    directory: str
    project_name: Optional[str] = None
    continuous_integration: bool = False
    generate_documentation: bool = False
    github_url: Optional[str] = None
    docs: DocsSettings = Field(default_factory=DocsSettings)

    model_config = {
        "frozen": True,
    }


def load_config(path: Path | str) -> ToolConfig:
    """
    Load and validate a TOML defaults file.

    Args:
        path: Path to the TOML file.

    Returns:
        A validated ToolConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    try:
        return ToolConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
