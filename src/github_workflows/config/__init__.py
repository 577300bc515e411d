"""
Configuration models for the workflow generator.
"""

from .models import ConfigError, DocsSettings, GeneratorOptions, ToolConfig, load_config

__all__ = ["ConfigError", "DocsSettings", "GeneratorOptions", "ToolConfig", "load_config"]
