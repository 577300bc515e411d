"""
Static text templates for the generated workflow and documentation files.
"""

from __future__ import annotations

from typing import List, Optional

from ..config import DocsSettings

CI_WORKFLOW_FILENAME = "main.yml"
JAZZY_CONFIG_FILENAME = ".jazzy.yml"
DOCS_WORKFLOW_FILENAME = "docsGen.yml"

CI_WORKFLOW_TEMPLATE = """name: CI

on:
  push:
    paths-ignore:
    - "*.md"
  pull_request:
    paths-ignore:
    - "*.md"

jobs:
  build:
    runs-on: macOS-latest
    steps:
      - uses: actions/checkout@v1
      - name: Switch to Xcode 11.0
        run: sudo xcode-select --switch /Applications/Xcode_11.app/Contents/Developer
      - name: Generate Xcode Project - Needed because Combine is not available on Mojave
        run: swift package generate-xcodeproj
      - name: Run iOS Framework Tests
        run: >-
          xcodebuild -project {project_name}.xcodeproj
          -scheme {project_name}-Package
          -sdk iphonesimulator
          -destination 'platform=iOS Simulator,name=iPhone 11,OS=13.0'
          test | xcpretty
"""

# Written verbatim; the braces belong to GitHub's expression syntax.
DOCS_WORKFLOW_TEMPLATE = """name: Publish Documentation

on:
  release:
    types: [published]

jobs:
  publish_docs:
    runs-on: macOS-latest
    steps:
      - uses: actions/checkout@v1
      - name: Switch to Xcode 11
        run: sudo xcode-select --switch /Applications/Xcode_11.app/Contents/Developer
      - name: Generate Xcode Project - Needed because Combine is not available on Mojave
        run: swift package generate-xcodeproj
      - name: Publish Jazzy Docs
        uses: steven0351/publish-jazzy-docs@v1
        with:
          personal_access_token: ${{ secrets.ACCESS_TOKEN }}
          config: .jazzy.yml
"""


def _yaml_bool(value: bool) -> str:
    return "true" if value else "false"


def render_ci_workflow(project_name: str) -> str:
    """Return the CI workflow with the project name in the xcodebuild call."""
    return CI_WORKFLOW_TEMPLATE.format(project_name=project_name)


def render_jazzy_config(project_name: str, docs: DocsSettings, github_url: Optional[str] = None) -> str:
    """
    Build the jazzy configuration document.

    Args:
        project_name: Module name and build target.
        docs: Author, theme and other defaults.
        github_url: Repository URL; the ``github_url`` key is omitted when None.

    Returns:
        The YAML text, one ``key: value`` pair per line.
    """
    lines: List[str] = [
        f"clean: {_yaml_bool(docs.clean)}",
        f"sdk: {docs.sdk}",
        f"author: {docs.author}",
        f"module: {project_name}",
        f"readme: {docs.readme}",
    ]
    if github_url is not None:
        lines.append(f"github_url: {github_url}")
    lines.extend(
        [
            f"disable_search: {_yaml_bool(docs.disable_search)}",
            f"theme: {docs.theme}",
            f"build_tool_arguments: [-target, {project_name}]",
        ]
    )
    return "\n".join(lines) + "\n"


def render_docs_workflow() -> str:
    return DOCS_WORKFLOW_TEMPLATE
